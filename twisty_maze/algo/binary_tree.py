from typing import Iterator, Optional

from twisty_maze.core.grid import Grid
from twisty_maze.algo.base import Generator
from twisty_maze.algo.random_source import DecisionSource


class BinaryTree(Generator):
    """
    Every cell opens either its north or its east wall.
    Leaves an unbroken corridor along the top row and the right column.
    """

    def run(self) -> Iterator[str]:
        for cell_id in self.grid.ids():
            cell = self.grid.get_by_id(cell_id)
            north, east = cell.north(), cell.east()

            if north is not None and east is not None:
                target = north if self.decisions.flip() else east
            else:
                # One of them, or None in the north-east corner
                target = north if north is not None else east

            if target is None:
                continue

            self.carve(cell_id, target)
            if self.should_report():
                yield f"Carving... Links: {self.step_count}"

        yield "Done"


def binary_tree(rows: int, columns: int, seed: Optional[int] = None,
                decisions: Optional[DecisionSource] = None) -> Grid:
    return BinaryTree(Grid(rows, columns), seed=seed, decisions=decisions).run_all()
