from fastapi import FastAPI, Query, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
import logging
from pathlib import Path
from typing import List, Optional

from config import get_settings
from cache import DirectoryCache
from groupie_client import GroupieClient
from relations import RelationEnricher
from directory import ArtistDirectory, parse_artist_id
from filters import parse_filter_criteria
from cookies import is_dark_mode, toggle_theme_cookie
from errors import DirectoryError, InvalidParameter, NotFound, UpstreamError


logger = logging.getLogger(__name__)

settings = get_settings()

# Initialize FastAPI app
app = FastAPI(title="Artist Directory")

# Initialize components
groupie_client = GroupieClient(settings.artists_url, timeout=settings.http_timeout)
directory_cache = DirectoryCache(groupie_client)
directory = ArtistDirectory(directory_cache, RelationEnricher(groupie_client))


@app.on_event("startup")
async def startup_event():
    """Configure logging; the catalog itself is loaded lazily on first query"""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.on_event("shutdown")
async def shutdown_event():
    """Close the upstream HTTP client"""
    await groupie_client.close()


def _error_response(error: DirectoryError, status_code: int) -> JSONResponse:
    response = JSONResponse(
        {"error": error.kind, "detail": error.message}, status_code=status_code
    )
    response.headers["Cache-Control"] = "no-store"
    return response


@app.exception_handler(InvalidParameter)
async def invalid_parameter_handler(request: Request, exc: InvalidParameter):
    return _error_response(exc, status.HTTP_400_BAD_REQUEST)


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return _error_response(exc, status.HTTP_404_NOT_FOUND)


@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError):
    logger.error("Upstream failure on %s: [%s] %s", request.url.path, exc.kind, exc)
    return _error_response(exc, status.HTTP_503_SERVICE_UNAVAILABLE)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled error on %s",
        request.url.path,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return JSONResponse(
        {"error": "internal_error", "detail": "An unexpected error occurred"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


@app.get("/api/healthz")
async def health_check():
    """Simple health check endpoint"""
    return {"status": "ok"}


@app.get("/api/cache/status")
async def cache_status():
    """Report the cache lifecycle state"""
    response = JSONResponse(
        {"state": directory_cache.state.value, "artists": directory_cache.size}
    )
    response.headers["Cache-Control"] = "no-store"
    return response


@app.get("/api/artists")
async def api_list_artists(
    request: Request,
    min_creation: Optional[str] = None,
    max_creation: Optional[str] = None,
    members: List[str] = Query(default=[]),
):
    """List artists, filtered by creation year range and member counts"""
    criteria = parse_filter_criteria(min_creation, max_creation, members)
    artists = await directory.list_artists(criteria)

    return {
        "artists": [artist.model_dump() for artist in artists],
        "total_count": len(artists),
        "filters": {
            "min_creation": criteria.min_creation_year,
            "max_creation": criteria.max_creation_year,
            "members": sorted(criteria.member_counts),
        },
        "dark_mode": is_dark_mode(request),
    }


@app.get("/api/artists/{artist_id}")
async def api_artist_detail(request: Request, artist_id: str):
    """Return one artist with its concert locations and dates"""
    detail = await directory.artist_detail(parse_artist_id(artist_id))

    payload = detail.model_dump()
    payload["dark_mode"] = is_dark_mode(request)
    return payload


@app.get("/api/search")
async def api_search(q: str = ""):
    """Return at most 8 ranked artists matching the query"""
    results = await directory.search(q)
    return [item.model_dump() for item in results]


@app.post("/api/theme/toggle")
@app.get("/toggle-theme")
async def toggle_theme(request: Request):
    """Switch between light and dark theme and go back to the previous page"""
    response = RedirectResponse(
        request.headers.get("referer") or "/",
        status_code=status.HTTP_303_SEE_OTHER,
    )
    toggle_theme_cookie(request, response)
    return response


def mount_spa() -> None:
    dist_path = Path(settings.static_dir)
    if not dist_path.is_absolute():
        dist_path = Path(__file__).resolve().parent / dist_path
    if dist_path.exists():
        app.mount("/", StaticFiles(directory=dist_path, html=True), name="spa")


mount_spa()
