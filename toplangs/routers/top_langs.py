# toplangs/routers/top_langs.py
import logging
from typing import Iterator

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse, Response

from toplangs.core.config import settings
from toplangs.core.themes import DEFAULT_THEME, get_theme
from toplangs.services.aggregator import aggregate_languages
from toplangs.services.github import GitHubAPIError, GitHubClient
from toplangs.utils.ranking import rank_languages
from toplangs.utils.svg import render_svg

logger = logging.getLogger(__name__)

router = APIRouter()

SVG_HEADERS = {"Cache-Control": "no-store, max-age=0"}


def get_github_client() -> Iterator[GitHubClient]:
    client = GitHubClient(token=settings.GITHUB_TOKEN)
    try:
        yield client
    finally:
        client.close()


@router.get("/api/top-langs")
def top_langs(
    username: str = Query("", description="Username de GitHub, p.ej. 'torvalds'"),
    langs_count: int = Query(5, description="Cuántos lenguajes mostrar"),
    theme: str = Query(DEFAULT_THEME, description="dracula | light"),
    client: GitHubClient = Depends(get_github_client),
):
    username = username.strip()
    if not username:
        return PlainTextResponse("Username required", status_code=400)

    try:
        totals = aggregate_languages(client, username)
    except GitHubAPIError:
        return PlainTextResponse("GitHub API error", status_code=500)

    ranked = rank_languages(totals, langs_count)
    svg, height = render_svg(ranked, get_theme(theme))
    logger.info("Card for %s: %d languages, %d rows, height %d", username, len(totals), len(ranked), height)
    return Response(content=svg, media_type="image/svg+xml", headers=SVG_HEADERS)
