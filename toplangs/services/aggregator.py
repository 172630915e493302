import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict

from toplangs.core.config import settings
from toplangs.services.github import GitHubClient
from toplangs.utils.repos import select_eligible

logger = logging.getLogger(__name__)


def aggregate_languages(client: GitHubClient, username: str, max_workers: int = settings.GITHUB_MAX_WORKERS) -> Dict[str, int]:
    """
    Suma bytes por lenguaje en todos los repos elegibles de `username`.

    - Si falla el listado de repos, GitHubAPIError sube tal cual.
    - Si falla /languages de un repo, ese repo se ignora.
    - Las peticiones por repo van en paralelo (máx. `max_workers`), pero el
      plegado se hace en el orden del listado para que los empates sean
      reproducibles.
    """
    repos = client.list_repos(username)
    selected = select_eligible(repos)
    logger.debug("%s: %d repos, %d eligible", username, len(repos), len(selected))

    totals: Dict[str, int] = {}
    if not selected:
        return totals

    urls = [r["languages_url"] for r in selected if r.get("languages_url")]
    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(urls) or 1))) as pool:
        results = list(pool.map(client.get_languages, urls))

    for langs in results:
        if not langs:
            continue
        for lang, b in langs.items():
            totals[lang] = totals.get(lang, 0) + int(b)
    return totals
