"""Seed listing and side-by-side comparison handlers."""

from __future__ import annotations

import sqlite3
from http import HTTPStatus
from typing import TYPE_CHECKING

import structlog
from starlette.responses import JSONResponse, PlainTextResponse

from klaverjas.logic.comparison import MIN_GROUP_SIZE, NO_GAMES_MESSAGE, build_comparison, insufficient_group_message
from shared.dal import ResultLoadError

if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.templating import Jinja2Templates

    from klaverjas.logic.types import RenderableGame
    from shared.dal import ResultRepository

logger = structlog.get_logger()

_SEED_MAX_LEN = 128

_MISSING_SEED = "Missing seed parameter"
_LOAD_FAILED = "Stored results for this seed could not be loaded"


class _ComparisonUnavailable(Exception):
    """Raised when a seed's results cannot be compared; carries the HTTP status and user message."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _resolve_seed(request: Request) -> str:
    """Read the seed from the path (/compare/{seed}) or the query string (/compare?seed=)."""
    seed = request.path_params.get("seed") or request.query_params.get("seed")
    if not seed:
        raise _ComparisonUnavailable(HTTPStatus.BAD_REQUEST, _MISSING_SEED)
    if len(seed) > _SEED_MAX_LEN:
        raise _ComparisonUnavailable(HTTPStatus.NOT_FOUND, NO_GAMES_MESSAGE)
    return seed


async def _load_comparison(request: Request, seed: str) -> list[RenderableGame]:
    """Load all results for a seed and build the comparison, or raise _ComparisonUnavailable."""
    result_repo: ResultRepository = request.app.state.result_repo
    try:
        results = await result_repo.get_results(seed)
    except (ResultLoadError, sqlite3.Error):
        logger.exception("failed to load results", seed=seed)
        raise _ComparisonUnavailable(HTTPStatus.INTERNAL_SERVER_ERROR, _LOAD_FAILED) from None

    message = insufficient_group_message(len(results))
    if message is not None:
        logger.info("not enough games to compare", seed=seed, games=len(results))
        raise _ComparisonUnavailable(HTTPStatus.NOT_FOUND, message)

    games = build_comparison(results)
    logger.info("comparison built", seed=seed, games=len(games))
    return games


async def seeds_page(request: Request) -> Response:
    """GET / - list stored seeds with their game counts."""
    templates: Jinja2Templates = request.app.state.templates
    result_repo: ResultRepository = request.app.state.result_repo

    seeds = await result_repo.list_seeds()
    return templates.TemplateResponse(
        request,
        "seeds.html",
        {"seeds": seeds, "min_group_size": MIN_GROUP_SIZE},
    )


async def compare_page(request: Request) -> Response:
    """GET /compare/{seed} or /compare?seed= - render every game of a seed side by side."""
    templates: Jinja2Templates = request.app.state.templates
    try:
        seed = _resolve_seed(request)
        games = await _load_comparison(request, seed)
    except _ComparisonUnavailable as e:
        if e.status_code == HTTPStatus.NOT_FOUND:
            return templates.TemplateResponse(
                request,
                "not_found.html",
                {"message": e.message},
                status_code=e.status_code,
            )
        return PlainTextResponse(e.message, status_code=e.status_code)

    return templates.TemplateResponse(request, "compare.html", {"seed": seed, "games": games})


async def compare_api(request: Request) -> Response:
    """GET /api/compare/{seed} - the comparison view model as JSON."""
    try:
        seed = _resolve_seed(request)
        games = await _load_comparison(request, seed)
    except _ComparisonUnavailable as e:
        return JSONResponse({"error": e.message}, status_code=e.status_code)

    return JSONResponse({"seed": seed, "games": [g.model_dump(mode="json") for g in games]})
