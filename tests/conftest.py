"""Shared pytest fixtures for the artist directory tests."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest
import pytest_asyncio

from groupie_client import GroupieClient
from models import Artist

ARTISTS_URL = "https://catalog.test/api/artists"


def relations_url(artist_id: int) -> str:
    return f"https://catalog.test/api/relation/{artist_id}"


def artist_payload(
    artist_id: int,
    name: str,
    members: list[str],
    year: int,
    first_album: str = "01-01-2000",
) -> dict[str, Any]:
    """Build one artist object the way the upstream API serializes it."""
    return {
        "id": artist_id,
        "name": name,
        "image": f"https://catalog.test/images/{artist_id}.jpeg",
        "members": members,
        "creationDate": year,
        "firstAlbum": first_album,
        "locations": f"https://catalog.test/api/locations/{artist_id}",
        "concertDates": f"https://catalog.test/api/dates/{artist_id}",
        "relations": relations_url(artist_id),
    }


@pytest.fixture
def catalog_payload() -> list[dict[str, Any]]:
    return [
        artist_payload(
            1,
            "Queen",
            ["Freddie Mercury", "Brian May", "John Deacon", "Roger Taylor"],
            1970,
            "14-12-1973",
        ),
        artist_payload(
            2,
            "Queens of the Stone Age",
            ["Josh Homme", "Troy Van Leeuwen", "Michael Shuman", "Dean Fertita", "Jon Theodore"],
            1996,
            "06-10-1998",
        ),
        artist_payload(3, "Pink Floyd", ["Roger Waters", "David Gilmour", "Nick Mason", "Richard Wright"], 1965),
        artist_payload(4, "Eminem", ["Marshall Mathers"], 1996),
        artist_payload(5, "The Rolling Stones", ["Mick Jagger", "Keith Richards", "Ronnie Wood"], 1962),
    ]


@pytest.fixture
def artists(catalog_payload: list[dict[str, Any]]) -> list[Artist]:
    return [Artist.model_validate(item) for item in catalog_payload]


def make_client(handler: Callable[[httpx.Request], Any]) -> GroupieClient:
    """GroupieClient whose requests are answered by ``handler``."""
    return GroupieClient(ARTISTS_URL, timeout=1.0, transport=httpx.MockTransport(handler))


@pytest_asyncio.fixture
async def build_client():
    """Factory for mocked clients; every client it builds is closed after the test."""
    clients: list[GroupieClient] = []

    def _build(handler: Callable[[httpx.Request], Any]) -> GroupieClient:
        client = make_client(handler)
        clients.append(client)
        return client

    yield _build
    for client in clients:
        await client.close()


@pytest.fixture
def catalog_handler(catalog_payload: list[dict[str, Any]]):
    """Upstream that serves the catalog and a fixed relation record per artist."""

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        if url == ARTISTS_URL:
            return httpx.Response(200, json=catalog_payload)
        if url.startswith("https://catalog.test/api/relation/"):
            artist_id = int(url.rsplit("/", 1)[1])
            return httpx.Response(
                200,
                json={
                    "id": artist_id,
                    "datesLocations": {
                        "london-uk": ["12-07-1986"],
                        "tokyo-japan": ["11-05-1985", "13-05-1985"],
                    },
                },
            )
        return httpx.Response(404)

    return handler
