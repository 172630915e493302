import logging
from typing import Dict, List, Optional
from urllib.parse import quote

import requests

from toplangs.core.config import settings

logger = logging.getLogger(__name__)


class GitHubAPIError(Exception):
    def __init__(self, status_code: Optional[int], detail: str = ""):
        super().__init__(f"GitHub API error ({status_code}): {detail}")
        self.status_code = status_code
        self.detail = detail


class GitHubClient:
    """
    Cliente mínimo de la API REST de GitHub.
    El token se inyecta al construir (no se lee del entorno aquí), así los tests
    pueden pasar tokens y sesiones falsas.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        api_url: str = settings.GITHUB_API,
        timeout: float = settings.GITHUB_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.token = token or None
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        # la sesión se comparte entre los hilos del agregador; solo se usa para GETs simples
        self.session = session or requests.Session()

    def close(self) -> None:
        self.session.close()

    def headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def list_repos(self, username: str) -> List[dict]:
        # una sola página: hasta 100 repos propios
        url = f"{self.api_url}/users/{quote(username, safe='')}/repos"
        try:
            r = self.session.get(url, headers=self.headers(), params={"per_page": 100, "type": "owner"}, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Listing repos for %s failed: %s", username, e)
            raise GitHubAPIError(None, str(e)) from e
        if not r.ok:
            logger.error("Listing repos for %s returned %s", username, r.status_code)
            raise GitHubAPIError(r.status_code, r.text)
        try:
            repos = r.json()
        except ValueError as e:
            raise GitHubAPIError(r.status_code, "JSON inválido") from e
        if not isinstance(repos, list):
            raise GitHubAPIError(r.status_code, "Respuesta inesperada (no es una lista)")
        return repos

    def get_languages(self, languages_url: str) -> Optional[Dict[str, int]]:
        """
        Bytes por lenguaje de un repo. Devuelve None si falla: un repo roto no
        tumba la agregación completa.
        """
        try:
            r = self.session.get(languages_url, headers=self.headers(), timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Skipping %s: %s", languages_url, e)
            return None
        if not r.ok:
            logger.warning("Skipping %s: status %s", languages_url, r.status_code)
            return None
        try:
            langs = r.json()
        except ValueError:
            logger.warning("Skipping %s: invalid JSON", languages_url)
            return None
        if not isinstance(langs, dict) or not all(isinstance(b, int) and not isinstance(b, bool) for b in langs.values()):
            logger.warning("Skipping %s: unexpected languages payload", languages_url)
            return None
        return langs
