"""Linear selections out of a blend grid, and palette-text fragments built from them.

Operation names are what gets written into the bundle's `op` field:
row, row rev, column, column rev, TL, TR, BL, BR, diagTL, diagTR, diagBL,
diagBR, swatch.
"""

from typing import Callable, Dict, List, Optional

from colorengine.errors import ContractViolation
from colorengine.types import BlendGrid, Selection

Cells = List[List[str]]

def _require_cells(cells: Cells) -> None:
    if not cells or not cells[0]:
        raise ContractViolation("grid is empty")

def _require_square(cells: Cells) -> None:
    _require_cells(cells)
    if len(cells) != len(cells[0]):
        raise ContractViolation(f"diagonals assume a square grid, got {len(cells[0])}x{len(cells)}")

# Rows and columns ------------------------------------------------

def row(cells: Cells, iy: int) -> List[str]:
    _require_cells(cells)
    return list(cells[iy])

def row_reverse(cells: Cells, iy: int) -> List[str]:
    return row(cells, iy)[::-1]

def column(cells: Cells, ix: int) -> List[str]:
    _require_cells(cells)
    if not -len(cells[0]) <= ix < len(cells[0]):
        raise IndexError(f"column {ix} out of range")
    return [r[ix] for r in cells]

def column_reverse(cells: Cells, ix: int) -> List[str]:
    return column(cells, ix)[::-1]

# Corner walks ----------------------------------------------------

def corner_walk_tl(cells: Cells) -> List[str]:
    """Bottom-left up to top-left, then across to top-right."""
    _require_cells(cells)
    up = [r[0] for r in reversed(cells)]
    return up + cells[0][1:]

def corner_walk_tr(cells: Cells) -> List[str]:
    """Top-left across to top-right, then down to bottom-right."""
    _require_cells(cells)
    down = [r[-1] for r in cells[1:]]
    return list(cells[0]) + down

def corner_walk_bl(cells: Cells) -> List[str]:
    """Bottom-right across to bottom-left, then up to top-left."""
    _require_cells(cells)
    up = [r[0] for r in reversed(cells[:-1])]
    return cells[-1][::-1] + up

def corner_walk_br(cells: Cells) -> List[str]:
    """Top-right down to bottom-right, then across to bottom-left."""
    _require_cells(cells)
    down = [r[-1] for r in cells]
    return down + cells[-1][-2::-1]

# Diagonals -------------------------------------------------------

def diagonal_tl(cells: Cells) -> List[str]:
    """Top-left to bottom-right."""
    _require_square(cells)
    return [cells[i][i] for i in range(len(cells))]

def diagonal_tr(cells: Cells) -> List[str]:
    """Top-right to bottom-left."""
    _require_square(cells)
    d = len(cells) - 1
    return [cells[i][d - i] for i in range(len(cells))]

def diagonal_bl(cells: Cells) -> List[str]:
    """Bottom-left to top-right."""
    _require_square(cells)
    d = len(cells) - 1
    return [cells[d - i][i] for i in range(len(cells))]

def diagonal_br(cells: Cells) -> List[str]:
    """Bottom-right to top-left."""
    _require_square(cells)
    d = len(cells) - 1
    return [cells[d - i][d - i] for i in range(len(cells))]

# Dispatch --------------------------------------------------------

INDEXED_OPS: Dict[str, Callable[[Cells, int], List[str]]] = {
    "row": row,
    "row rev": row_reverse,
    "column": column,
    "column rev": column_reverse,
}

WALK_OPS: Dict[str, Callable[[Cells], List[str]]] = {
    "TL": corner_walk_tl,
    "TR": corner_walk_tr,
    "BL": corner_walk_bl,
    "BR": corner_walk_br,
    "diagTL": diagonal_tl,
    "diagTR": diagonal_tr,
    "diagBL": diagonal_bl,
    "diagBR": diagonal_br,
}

SELECTION_OPS = tuple(INDEXED_OPS) + tuple(WALK_OPS) + ("swatch",)

def extract(
    grid: BlendGrid,
    op: str,
    index: Optional[int] = None,
    ix: Optional[int] = None,
    iy: Optional[int] = None,
) -> Selection:
    """Run a named selection over the grid and stamp the grid's bundle with it.

    row/column ops take `index`; swatch takes `ix` and `iy`.
    """
    if op in INDEXED_OPS:
        if index is None:
            raise ValueError(f"{op!r} needs an index")
        cells = INDEXED_OPS[op](grid.cells, index)
    elif op in WALK_OPS:
        cells = WALK_OPS[op](grid.cells)
    elif op == "swatch":
        if ix is None or iy is None:
            raise ValueError("'swatch' needs ix and iy")
        _require_cells(grid.cells)
        cells = [grid.cells[iy][ix]]
    else:
        raise ValueError(f"Unknown selection: {op!r}. Available: {', '.join(SELECTION_OPS)}")
    return Selection(cells=cells, bundle=grid.params.to_bundle(op))

# Text fragments --------------------------------------------------

def format_fragment(selection: Selection, exclusive: bool = False) -> str:
    """Palette text for a selection: a `-- // <bundle>` row break, then one color per line.

    exclusive drops the first and last cells (usually the grid corners).
    """
    cells = selection.cells[1:-1] if exclusive else selection.cells
    lines = [f"-- // {selection.bundle.to_json()}", *cells]
    return "\n".join(lines) + "\n"

def append_to_palette(text: str, fragment: str) -> str:
    """Append a fragment to palette text, starting it on a fresh line."""
    if text and not text.endswith("\n"):
        text += "\n"
    return text + fragment
