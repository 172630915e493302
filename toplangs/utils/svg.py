from typing import List, Sequence, Tuple
from xml.sax.saxutils import escape, quoteattr

from toplangs.core.themes import Theme
from toplangs.utils.ranking import RankedEntry, format_percent

WIDTH = 320
TOP_OFFSET = 40
ROW_HEIGHT = 26
LABEL_X = 20
PERCENT_X = 300
BAR_HEIGHT = 8
BAR_RADIUS = 4
FRAME_RADIUS = 12
TITLE = "Top Languages"
FONT_FAMILY = "system-ui, -apple-system, BlinkMacSystemFont"


def bar_width(percent: float) -> float:
    # escala lineal: 100% -> 200 unidades
    return round(percent * 2, 1)


def _num(value: float) -> str:
    return f"{value:g}"


def _row(entry: RankedEntry, y: int, theme: Theme) -> str:
    text = quoteattr(theme.text)
    return (
        f'  <text x="{LABEL_X}" y="{y}" fill={text} font-size="12">{escape(entry.name)}</text>\n'
        f'  <text x="{PERCENT_X}" y="{y}" fill={text} font-size="12" text-anchor="end">{format_percent(entry.percent)}%</text>\n'
        f'  <rect x="{LABEL_X}" y="{y + 6}" width="{_num(bar_width(entry.percent))}" height="{BAR_HEIGHT}" '
        f'fill={quoteattr(theme.bar)} rx="{BAR_RADIUS}"/>\n'
    )


def render_svg(entries: Sequence[RankedEntry], theme: Theme) -> Tuple[str, int]:
    """
    Tarjeta SVG: una fila por lenguaje (nombre, % a la derecha y barra).
    Devuelve (svg, alto). Con `entries` vacío sale solo el marco y el título.
    """
    y = TOP_OFFSET
    rows: List[str] = []
    for entry in entries:
        rows.append(_row(entry, y, theme))
        y += ROW_HEIGHT

    svg = (
        f'<svg width="{WIDTH}" height="{y}" viewBox="0 0 {WIDTH} {y}" xmlns="http://www.w3.org/2000/svg">\n'
        f"  <style>\n"
        f"    text {{ font-family: {FONT_FAMILY}; }}\n"
        f"  </style>\n"
        f'  <rect width="100%" height="100%" fill={quoteattr(theme.bg)} rx="{FRAME_RADIUS}"/>\n'
        f'  <text x="{LABEL_X}" y="24" fill={quoteattr(theme.text)} font-size="14" font-weight="600">{escape(TITLE)}</text>\n'
        f"{''.join(rows)}"
        f"</svg>\n"
    )
    return svg, y
