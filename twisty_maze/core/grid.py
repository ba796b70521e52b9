from typing import Iterator, List, Tuple, Union

from twisty_maze.core.cell import Cell, Id

Position = Union[Id, Tuple[int, int]]


class Grid:
    # ASCII rendering pieces
    CORNER = "+"
    H_WALL = "---"
    H_OPEN = "   "
    V_WALL = "|"
    V_OPEN = " "
    BODY = "   "

    __slots__ = ('row_total', 'column_total', '_cells')

    def __init__(self, rows: int, columns: int):
        if rows <= 0 or columns <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{columns}")
        self.row_total = rows
        self.column_total = columns
        # Flat row-major arena. Cells refer to each other by Id only.
        self._cells: List[Cell] = [Cell(r, c) for r in range(rows) for c in range(columns)]
        self._configure_cells()

    def _configure_cells(self):
        for cell in self._cells:
            r, c = cell.row, cell.col
            cell.configure(
                north=Id(r - 1, c) if r > 0 else None,
                south=Id(r + 1, c) if r < self.row_total - 1 else None,
                east=Id(r, c + 1) if c < self.column_total - 1 else None,
                west=Id(r, c - 1) if c > 0 else None,
            )

    def row_count(self) -> int:
        return self.row_total

    def column_count(self) -> int:
        return self.column_total

    def size(self) -> int:
        return self.row_total * self.column_total

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def get_index(self, row: int, col: int) -> int:
        if 0 <= row < self.row_total and 0 <= col < self.column_total:
            return row * self.column_total + col
        raise IndexError(f"Coordinate ({row}, {col}) out of bounds")

    def get(self, row: int, col: int) -> Cell:
        return self._cells[self.get_index(row, col)]

    def get_by_id(self, cell_id: Position) -> Cell:
        row, col = cell_id
        return self.get(row, col)

    def link(self, pos_a: Position, pos_b: Position):
        """
        Opens the wall between two adjacent cells.
        Both cells are looked up by index in the same arena and mutated in turn.
        """
        idx_a = self.get_index(*pos_a)
        idx_b = self.get_index(*pos_b)
        cell_a = self._cells[idx_a]
        if Id(*pos_b) not in cell_a.neighbors():
            raise ValueError(f"Cannot link {tuple(pos_a)} to non-adjacent cell {tuple(pos_b)}")
        cell_a.link(self._cells[idx_b])

    def link_by_id(self, id_a: Id, id_b: Id):
        self.link(id_a, id_b)

    def link_count(self) -> int:
        # Every link is stored on both cells
        return sum(len(cell.links()) for cell in self._cells) // 2

    def ids(self) -> List[Id]:
        return [cell.id() for cell in self._cells]

    def ids_by_rows(self) -> List[List[Id]]:
        return [[cell.id() for cell in row] for row in self.rows()]

    def rows(self) -> List[List[Cell]]:
        w = self.column_total
        return [self._cells[r * w:(r + 1) * w] for r in range(self.row_total)]

    def cells(self) -> List[Cell]:
        return list(self._cells)

    def __str__(self) -> str:
        """
        ASCII box drawing. The top and left borders are always closed;
        every other wall comes from the south/east state of a cell.

        +---+---+
        |       |
        +---+---+
        """
        lines = [self.CORNER + (self.H_WALL + self.CORNER) * self.column_total]
        for row in self.rows():
            body = self.V_WALL
            bottom = self.CORNER
            for cell in row:
                body += self.BODY + (self.V_WALL if cell.has_east_wall() else self.V_OPEN)
                bottom += (self.H_WALL if cell.has_south_wall() else self.H_OPEN) + self.CORNER
            lines.append(body)
            lines.append(bottom)
        return "\n".join(lines) + "\n"
