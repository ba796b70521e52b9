import logging
from abc import ABC, abstractmethod
from typing import Iterator, Optional

from twisty_maze.core.grid import Grid
from twisty_maze.algo.random_source import DecisionSource, RandomDecisions

logger = logging.getLogger(__name__)


class Generator(ABC):
    # Yield a progress string every N carved links
    REPORT_EVERY = 100

    def __init__(self, grid: Grid, seed: Optional[int] = None, decisions: Optional[DecisionSource] = None):
        self.grid = grid
        self.seed = seed
        self.decisions = decisions if decisions is not None else RandomDecisions(seed)
        self.step_count = 0
        self.report_every = self.REPORT_EVERY

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def carve(self, cell_id, neighbor_id):
        self.grid.link_by_id(cell_id, neighbor_id)
        self.step_count += 1

    def should_report(self) -> bool:
        return self.step_count % self.report_every == 0

    def run_all(self) -> Grid:
        """Helper to run the generator to completion."""
        logger.debug("%s on %dx%d grid", type(self).__name__,
                     self.grid.row_count(), self.grid.column_count())
        for _ in self.run():
            pass
        logger.debug("%s carved %d links", type(self).__name__, self.step_count)
        return self.grid
