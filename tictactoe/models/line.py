"""
Line models for tic-tac-toe: the eight triples of cells checked for
three-in-a-row.
"""
from dataclasses import dataclass
from typing import List, Tuple

from .enums import LineType
from .move import Move


@dataclass(frozen=True)
class Line:
    """
    A row, column or diagonal of the board.

    Attributes:
        type: Kind of line
        cells: The three cells of the line
        description: Human-readable name of the line
    """
    type: LineType
    cells: Tuple[Move, Move, Move]
    description: str = ""

    def __post_init__(self):
        """Validate line parameters."""
        if len(self.cells) != 3:
            raise ValueError(f"Line must have exactly 3 cells, got {len(self.cells)}")

    def contains(self, move: Move) -> bool:
        """Check if this line passes through a cell."""
        return move in self.cells

    def __str__(self) -> str:
        return self.description or f"{self.type.value} {[str(c) for c in self.cells]}"


def _build_lines() -> List[Line]:
    lines = []
    for i in range(3):
        lines.append(Line(
            type=LineType.ROW,
            cells=(Move(i, 0), Move(i, 1), Move(i, 2)),
            description=f"row {i + 1}",
        ))
    for i in range(3):
        lines.append(Line(
            type=LineType.COLUMN,
            cells=(Move(0, i), Move(1, i), Move(2, i)),
            description=f"column {i + 1}",
        ))
    lines.append(Line(
        type=LineType.DIAGONAL,
        cells=(Move(0, 0), Move(1, 1), Move(2, 2)),
        description="main diagonal",
    ))
    lines.append(Line(
        type=LineType.DIAGONAL,
        cells=(Move(2, 0), Move(1, 1), Move(0, 2)),
        description="anti-diagonal",
    ))
    return lines


# Rows, then columns, then the two diagonals
WIN_LINES: Tuple[Line, ...] = tuple(_build_lines())
