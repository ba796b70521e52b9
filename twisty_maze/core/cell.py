from typing import Dict, List, NamedTuple, Optional


class Id(NamedTuple):
    """
    Immutable (row, col) address of a cell.
    Tuple ordering gives row-major comparison, so ids sort the way the grid is laid out.
    """
    row: int
    col: int


class Configuration(NamedTuple):
    north: Optional[Id] = None
    south: Optional[Id] = None
    east: Optional[Id] = None
    west: Optional[Id] = None


class Cell:
    __slots__ = ('_id', 'configuration', '_links')

    def __init__(self, row: int, col: int):
        self._id = Id(row, col)
        self.configuration = Configuration()
        # Neighbor Id -> passable flag
        self._links: Dict[Id, bool] = {}

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.col}, links={len(self._links)})"

    @property
    def row(self) -> int:
        return self._id.row

    @property
    def col(self) -> int:
        return self._id.col

    def id(self) -> Id:
        return self._id

    def configure(self, north: Optional[Id] = None, south: Optional[Id] = None,
                  east: Optional[Id] = None, west: Optional[Id] = None):
        """
        Sets the four neighbor references. Called once by Grid at construction;
        a second call replaces the previous configuration entirely.
        """
        self.configuration = Configuration(north, south, east, west)

    def neighbors(self) -> List[Id]:
        """Configured neighbors in N, S, E, W order. Missing directions are skipped."""
        return [n for n in self.configuration if n is not None]

    def north(self) -> Optional[Id]:
        return self.configuration.north

    def south(self) -> Optional[Id]:
        return self.configuration.south

    def east(self) -> Optional[Id]:
        return self.configuration.east

    def west(self) -> Optional[Id]:
        return self.configuration.west

    def is_linked(self, other) -> bool:
        return self._links.get(Id(*other), False)

    def link(self, other: "Cell"):
        """
        Opens a passage between this cell and 'other' on both sides.
        Adjacency is NOT checked here; Grid.link does that.
        """
        self._links[other.id()] = True
        other._links[self.id()] = True

    def links(self) -> List[Id]:
        return sorted(k for k, passable in self._links.items() if passable)

    def _has_wall(self, neighbor: Optional[Id]) -> bool:
        return neighbor is None or not self.is_linked(neighbor)

    def has_north_wall(self) -> bool:
        return self._has_wall(self.configuration.north)

    def has_south_wall(self) -> bool:
        return self._has_wall(self.configuration.south)

    def has_east_wall(self) -> bool:
        return self._has_wall(self.configuration.east)

    def has_west_wall(self) -> bool:
        return self._has_wall(self.configuration.west)
