"""ASCII maps: build grids from text and draw grids (and routes) as text.

Each text line is a row ``j`` and each character a column ``i``, so the text
reads the same way the grid is addressed. A space means "no cell".
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

from .grid import Grid

DEFAULT_SYMBOLS: Dict[str, Any] = {
    ".": 0,
    "#": 1,
}

ROUTE_SYMBOL = "*"
MISSING_SYMBOL = " "
UNKNOWN_SYMBOL = "?"


def parse_ascii(text: str, symbols: Optional[Dict[str, Any]] = None, default: Any = 0) -> Grid:
    """Build a grid from an ASCII map.

    Characters found in ``symbols`` (``.`` -> 0 and ``#`` -> 1 unless
    overridden) are translated; any other non-space character is stored as is.
    Leading and trailing blank lines are ignored.
    """
    mapping = {**DEFAULT_SYMBOLS}
    if symbols:
        mapping.update(symbols)

    grid = Grid(default=default)
    lines = text.strip("\n").splitlines()
    for j, line in enumerate(lines):
        for i, char in enumerate(line.rstrip()):
            if char == MISSING_SYMBOL:
                continue
            grid.cells.setdefault(i, {})[j] = mapping.get(char, char)
    return grid


def render_ascii(
    grid: Grid,
    route: Optional[Iterable[Sequence[int]]] = None,
    *,
    symbols: Optional[Dict[str, Any]] = None,
) -> str:
    """Render ``grid`` as text, marking ``route`` cells with ``*``.

    Values are drawn with the reverse of ``symbols`` (defaults as in
    ``parse_ascii``); values without a symbol become ``?`` unless they are
    single characters already.
    """
    mapping = {**DEFAULT_SYMBOLS}
    if symbols:
        mapping.update(symbols)
    reverse = {_key(value): char for char, value in mapping.items()}

    on_route = {tuple(coord) for coord in (route or [])}
    columns = grid.columns()
    rows = grid.row_indices()
    if not rows:
        return ""

    lines: List[str] = []
    for j in range(rows[0], rows[-1] + 1):
        chars: List[str] = []
        for i in range(columns[0], columns[-1] + 1):
            if not grid.has(i, j):
                chars.append(MISSING_SYMBOL)
            elif (i, j) in on_route:
                chars.append(ROUTE_SYMBOL)
            else:
                chars.append(_symbol(grid.cells[i][j], reverse))
        lines.append("".join(chars).rstrip())
    return "\n".join(lines)


def _key(value: Any) -> Any:
    try:
        hash(value)
    except TypeError:
        return id(value)
    return value


def _symbol(value: Any, reverse: Dict[Any, str]) -> str:
    char = reverse.get(_key(value))
    if char is not None:
        return char
    if isinstance(value, str) and len(value) == 1:
        return value
    return UNKNOWN_SYMBOL
