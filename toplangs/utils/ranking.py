from typing import Dict, List, NamedTuple


class RankedEntry(NamedTuple):
    name: str
    bytes: int
    percent: float


def rank_languages(totals: Dict[str, int], count: int) -> List[RankedEntry]:
    """
    Top `count` lenguajes por bytes, con el porcentaje calculado sobre el total
    de los que se quedan (no sobre el total global), así las barras suman 100%.
    sorted() es estable: en empate se respeta el orden de aparición en `totals`.
    """
    if count <= 0 or not totals:
        return []
    top = sorted(totals.items(), key=lambda kv: kv[1], reverse=True)[:count]
    total_bytes = sum(b for _, b in top)
    if total_bytes == 0:
        return [RankedEntry(lang, b, 0.0) for lang, b in top]
    return [RankedEntry(lang, b, round(b / total_bytes * 100, 1)) for lang, b in top]


def format_percent(percent: float) -> str:
    return f"{percent:.1f}"
