import unittest

from daedalus.config import GenerationConfig
from daedalus.dungeon import FLOOR, WALL, GenerationMethod, OutOfBounds, RogueDungeon
from daedalus.dungeon.rooms import Rect, Room, interior


class TestPlaceRoom(unittest.TestCase):
    def setUp(self):
        self.d = RogueDungeon(12, 16, seed=5, config=GenerationConfig())

    def test_place_room_carves_inclusive_rectangle(self):
        self.assertTrue(self.d.place_room((2, 3), (4, 6)))
        for r in range(12):
            for c in range(16):
                inside = 2 <= r <= 4 and 3 <= c <= 6
                self.assertEqual(self.d.tile_at(r, c), FLOOR if inside else WALL)
        self.assertEqual(self.d.rooms, [Room(2, 3, 3, 4)])

    def test_touching_or_overlapping_room_rejected(self):
        self.assertTrue(self.d.place_room((2, 2), (4, 4)))
        self.assertFalse(self.d.place_room((3, 3), (6, 6)))  # overlap
        self.assertFalse(self.d.place_room((5, 2), (7, 4)))  # shares an edge
        self.assertTrue(self.d.place_room((6, 2), (8, 4)))  # one wall row between
        self.assertEqual(len(self.d.rooms), 2)

    def test_inverted_rectangle_rejected(self):
        self.assertFalse(self.d.place_room((5, 5), (3, 7)))
        self.assertFalse(self.d.place_room((3, 7), (5, 5)))
        self.assertEqual(self.d.rooms, [])

    def test_out_of_bounds_corner(self):
        with self.assertRaises(OutOfBounds):
            self.d.place_room((0, 0), (12, 3))
        with self.assertRaises(OutOfBounds):
            self.d.place_room((-1, 0), (2, 2))
        self.assertEqual(self.d.rooms, [])


class TestRects(unittest.TestCase):
    def test_rect_geometry(self):
        r = Rect(2, 3, 4, 5)
        self.assertEqual((r.bottom, r.right, r.area), (5, 7, 20))
        self.assertEqual(r.center, (3, 5))
        self.assertTrue(r.contains(5, 7))
        self.assertFalse(r.contains(6, 7))
        self.assertEqual(len(list(r.cells())), 20)

    def test_interior_keeps_border_when_possible(self):
        self.assertEqual(interior(10, 12), Rect(1, 1, 8, 10))
        self.assertEqual(interior(2, 12), Rect(0, 1, 2, 10))
        self.assertEqual(interior(1, 2), Rect(0, 0, 1, 2))


def test_bsp_rooms_never_touch():
    for seed in range(6):
        d = RogueDungeon(40, 60, seed=seed, config=GenerationConfig())
        d.generate(GenerationMethod.BSP)
        rooms = d.rooms
        assert len(rooms) == d.metrics["leaves"] == d.metrics["rooms"]
        for i, a in enumerate(rooms):
            for b in rooms[i + 1:]:
                assert not a.touches(b)
        assert d.metrics["corridors"] == len(rooms) - 1


def test_bsp_depth_zero_is_single_room():
    d = RogueDungeon(20, 20, seed=1, config=GenerationConfig(bsp_max_depth=0))
    d.generate(GenerationMethod.BSP)
    assert len(d.rooms) == 1
    assert d.find_path()


def test_rooms_reset_on_regenerate():
    d = RogueDungeon(30, 30, seed=2, config=GenerationConfig())
    d.generate(GenerationMethod.BSP)
    assert d.rooms
    d.generate(GenerationMethod.CELLULAR_AUTOMATA)
    assert d.rooms == []
