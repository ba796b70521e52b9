from collections import deque

from twisty_maze.core.cell import Id
from twisty_maze.core.grid import Grid


class MazeAnalyzer:
    @staticmethod
    def count_links(grid: Grid) -> int:
        return grid.link_count()

    @staticmethod
    def is_connected(grid: Grid) -> bool:
        """
        Breadth-first walk over links from (0, 0).
        Connected iff every cell is reached.
        """
        start = Id(0, 0)
        seen = {start}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            for nxt in grid.get_by_id(current).links():
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)

        return len(seen) == grid.size()

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        # A connected graph with V - 1 edges is a spanning tree
        return grid.link_count() == grid.size() - 1 and MazeAnalyzer.is_connected(grid)

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        corridors = 0  # 2 exits
        intersections = 0  # 3+ exits

        for cell in grid:
            exits = len(cell.links())
            if exits == 1: dead_ends += 1
            elif exits == 2: corridors += 1
            elif exits >= 3: intersections += 1

        total = grid.size()
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "links": grid.link_count(),
            "dead_end_percent": (dead_ends / total) * 100,
        }
