import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from twisty_maze.core.cell import Cell, Id


class TestCell(unittest.TestCase):
    def test_id(self):
        cell = Cell(1, 2)
        self.assertEqual(cell.id(), Id(1, 2))
        self.assertEqual(cell.id(), (1, 2))

    def test_ids_order_row_major(self):
        ids = [Id(1, 0), Id(0, 2), Id(0, 1), Id(1, 1)]
        self.assertEqual(sorted(ids), [Id(0, 1), Id(0, 2), Id(1, 0), Id(1, 1)])

    def test_cells_can_be_linked(self):
        cell1 = Cell(1, 1)
        cell2 = Cell(1, 2)
        self.assertFalse(cell1.is_linked(cell2.id()))
        self.assertFalse(cell2.is_linked(cell1.id()))

        cell1.link(cell2)
        self.assertTrue(cell1.is_linked(cell2.id()))
        self.assertTrue(cell2.is_linked(cell1.id()))

    def test_link_is_idempotent(self):
        cell1 = Cell(0, 0)
        cell2 = Cell(0, 1)
        cell1.link(cell2)
        cell2.link(cell1)
        cell1.link(cell2)
        self.assertEqual(cell1.links(), [Id(0, 1)])
        self.assertEqual(cell2.links(), [Id(0, 0)])

    def test_list_of_linked(self):
        cell1, cell2, cell3, cell4 = Cell(1, 1), Cell(1, 2), Cell(1, 3), Cell(1, 4)
        cell2.link(cell1)
        cell2.link(cell3)
        cell3.link(cell4)
        self.assertEqual(cell2.links(), [cell1.id(), cell3.id()])

    def test_unknown_cell_is_not_linked(self):
        self.assertFalse(Cell(0, 0).is_linked(Id(7, 7)))

    def test_starts_with_no_neighbors(self):
        cell = Cell(1, 2)
        self.assertEqual(cell.neighbors(), [])
        self.assertIsNone(cell.north())
        self.assertIsNone(cell.west())

    def test_knows_its_neighbors(self):
        cell = Cell(1, 1)
        cell.configure(north=Id(0, 1), west=Id(1, 0))
        self.assertEqual(cell.neighbors(), [Id(0, 1), Id(1, 0)])
        self.assertEqual(cell.north(), Id(0, 1))
        self.assertIsNone(cell.south())

    def test_configure_replaces_previous(self):
        cell = Cell(1, 1)
        cell.configure(north=Id(0, 1), south=Id(2, 1))
        cell.configure(east=Id(1, 2))
        self.assertEqual(cell.neighbors(), [Id(1, 2)])

    def test_configure_positional(self):
        cell = Cell(1, 1)
        cell.configure(Id(0, 1), Id(2, 1), Id(1, 2), Id(1, 0))
        self.assertEqual(cell.north(), Id(0, 1))
        self.assertEqual(cell.south(), Id(2, 1))
        self.assertEqual(cell.east(), Id(1, 2))
        self.assertEqual(cell.west(), Id(1, 0))
        self.assertEqual(cell.neighbors(), [Id(0, 1), Id(2, 1), Id(1, 2), Id(1, 0)])

    def test_configure_north_only(self):
        cell = Cell(1, 1)
        cell.configure(Id(0, 1))
        self.assertEqual(cell.north(), Id(0, 1))
        self.assertIsNone(cell.east())
        self.assertEqual(cell.neighbors(), [Id(0, 1)])

    def test_id_is_read_only(self):
        cell = Cell(2, 3)
        with self.assertRaises(AttributeError):
            cell.row = 5
        with self.assertRaises(AttributeError):
            cell.col = 5
        self.assertEqual(cell.id(), Id(2, 3))
        self.assertEqual((cell.row, cell.col), (2, 3))

    def test_walls(self):
        cell = Cell(0, 0)
        south = Cell(1, 0)
        east = Cell(0, 1)
        cell.configure(south=south.id(), east=east.id())

        # Edges with no neighbor are always walls
        self.assertTrue(cell.has_north_wall())
        self.assertTrue(cell.has_south_wall())
        self.assertTrue(cell.has_east_wall())

        cell.link(south)
        self.assertFalse(cell.has_south_wall())
        self.assertTrue(cell.has_east_wall())

        cell.link(east)
        self.assertFalse(cell.has_east_wall())
        self.assertTrue(cell.has_west_wall())


if __name__ == '__main__':
    unittest.main()
