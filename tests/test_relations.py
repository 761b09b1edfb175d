"""Tests for relation enrichment and its partial-failure behavior."""

from __future__ import annotations

import logging

import httpx
import pytest

from errors import UpstreamBadPayload
from models import Artist
from relations import RelationEnricher


class TestRelationEnricher:
    @pytest.mark.asyncio
    async def test_enrich_attaches_relations(self, build_client, artists, catalog_handler) -> None:
        enricher = RelationEnricher(build_client(catalog_handler))
        detail = await enricher.enrich(artists[0])

        assert detail.artist == artists[0]
        assert detail.relations["london-uk"] == ["12-07-1986"]
        assert detail.warning is None

    @pytest.mark.asyncio
    async def test_fetch_raises_typed_error(self, build_client, artists) -> None:
        enricher = RelationEnricher(build_client(lambda request: httpx.Response(200, text="{")))
        with pytest.raises(UpstreamBadPayload):
            await enricher.fetch(artists[0].relations_ref)

    @pytest.mark.asyncio
    async def test_transport_failure_downgrades_to_empty(self, build_client, artists, caplog) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("down", request=request)

        enricher = RelationEnricher(build_client(handler))
        with caplog.at_level(logging.WARNING, logger="relations"):
            detail = await enricher.enrich(artists[0])

        assert detail.artist.id == 1
        assert detail.relations == {}
        assert detail.warning
        assert "artist 1" in caplog.text
        assert "upstream_unreachable" in caplog.text

    @pytest.mark.asyncio
    async def test_bad_status_downgrades_to_empty(self, build_client, artists) -> None:
        enricher = RelationEnricher(build_client(lambda request: httpx.Response(500)))
        detail = await enricher.enrich(artists[1])
        assert detail.relations == {}
        assert detail.warning

    @pytest.mark.asyncio
    async def test_empty_mapping_is_not_an_error(self, build_client, artists) -> None:
        enricher = RelationEnricher(
            build_client(lambda request: httpx.Response(200, json={"id": 2, "datesLocations": {}}))
        )
        detail = await enricher.enrich(artists[1])
        assert detail.relations == {}
        assert detail.warning is None

    @pytest.mark.asyncio
    async def test_relations_are_fetched_every_time(self, build_client, artists, catalog_handler) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(str(request.url))
            return catalog_handler(request)

        enricher = RelationEnricher(build_client(handler))
        await enricher.enrich(artists[0])
        await enricher.enrich(artists[0])
        assert len(calls) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "relations_ref",
        ["http://[::1/relation", "https://catalog.test/" + "a" * 70000],
    )
    async def test_malformed_relations_url_downgrades_to_empty(
        self, build_client, catalog_handler, relations_ref: str
    ) -> None:
        artist = Artist(id=1, name="Queen", relations=relations_ref)
        enricher = RelationEnricher(build_client(catalog_handler))

        detail = await enricher.enrich(artist)

        assert detail.artist is artist
        assert detail.relations == {}
        assert detail.warning
