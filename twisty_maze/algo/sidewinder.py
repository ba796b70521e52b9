from typing import Iterator, List, Optional

from twisty_maze.core.cell import Id
from twisty_maze.core.grid import Grid
from twisty_maze.algo.base import Generator
from twisty_maze.algo.random_source import DecisionSource


class Sidewinder(Generator):
    def run(self) -> Iterator[str]:
        for row_ids in self.grid.ids_by_rows():
            # Cells in this row not yet connected upward
            run: List[Id] = []

            for cell_id in row_ids:
                run.append(cell_id)
                cell = self.grid.get_by_id(cell_id)
                north, east = cell.north(), cell.east()

                if north is not None and east is not None:
                    if self.decisions.flip():
                        self.close_run(run)
                    else:
                        self.carve(cell_id, east)
                elif north is not None:
                    # East edge: the run must close before the row ends
                    self.close_run(run)
                elif east is not None:
                    # Top row never closes upward
                    self.carve(cell_id, east)
                else:
                    continue

                if self.should_report():
                    yield f"Carving... Row: {cell_id.row} Links: {self.step_count}"

        yield "Done"

    def close_run(self, run: List[Id]):
        """Connects one random member of the run to the row above, then starts a new run."""
        chosen = self.decisions.choice(run)
        self.carve(chosen, self.grid.get_by_id(chosen).north())
        run.clear()


def sidewinder(rows: int, columns: int, seed: Optional[int] = None,
               decisions: Optional[DecisionSource] = None) -> Grid:
    return Sidewinder(Grid(rows, columns), seed=seed, decisions=decisions).run_all()
