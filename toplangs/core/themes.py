from typing import Dict, NamedTuple, Optional


class Theme(NamedTuple):
    bg: str
    text: str
    bar: str


DEFAULT_THEME = "dracula"

THEMES: Dict[str, Theme] = {
    "dracula": Theme(bg="#282a36", text="#f8f8f2", bar="#bd93f9"),
    "light": Theme(bg="#ffffff", text="#000000", bar="#4c71f2"),
}


def get_theme(name: Optional[str]) -> Theme:
    """Theme por nombre; cualquier nombre desconocido cae en dracula."""
    return THEMES.get(name or DEFAULT_THEME, THEMES[DEFAULT_THEME])
