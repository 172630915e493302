# toplangs/utils/repos.py
from typing import Iterable, List


def is_eligible(repo: dict) -> bool:
    # forks y archivados no cuentan
    return not (repo.get("fork") or repo.get("archived"))


def select_eligible(repos: Iterable[dict]) -> List[dict]:
    return [r for r in repos if is_eligible(r)]
