import pytest

from daedalus.dungeon import Coord, Grid2D, InvalidDimension, OutOfBounds


@pytest.mark.parametrize("rows,cols", [(0, 5), (5, 0), (0, 0), (-1, 3)])
def test_invalid_dimensions_rejected(rows, cols):
    with pytest.raises(InvalidDimension):
        Grid2D(rows, cols, 0)


def test_dimensions_and_default_fill():
    g = Grid2D(3, 4, "x")
    assert (g.rows, g.cols) == (3, 4)
    assert len(g) == 12
    assert all(v == "x" for _, v in g.cells())


def test_row_major_layout_and_export():
    g = Grid2D(2, 3, 0)
    g.set(0, 2, 5)
    g.set(1, 0, 7)
    buf = [99]  # pre-existing contents are replaced
    out = g.export(buf)
    assert out is buf
    assert buf == [0, 0, 5, 7, 0, 0]


def test_export_into_bytearray():
    g = Grid2D(2, 2, 1)
    g.set(1, 1, 3)
    buf = bytearray()
    g.export(buf)
    assert list(buf) == [1, 1, 1, 3]


@pytest.mark.parametrize("i,j", [(3, 0), (0, 4), (-1, 0), (0, -1), (10, 10)])
def test_out_of_bounds_fails_fast(i, j):
    g = Grid2D(3, 4, 0)
    with pytest.raises(OutOfBounds):
        g.at(i, j)
    with pytest.raises(OutOfBounds):
        g.set(i, j, 1)
    assert not g.in_bounds(i, j)


def test_out_of_bounds_is_an_index_error():
    g = Grid2D(1, 1, 0)
    with pytest.raises(IndexError) as exc:
        g.at(1, 0)
    assert exc.value.row == 1 and exc.value.rows == 1


def test_copy_is_independent():
    g = Grid2D(2, 2, 0)
    clone = g.copy()
    clone.set(0, 0, 1)
    assert g.at(0, 0) == 0
    assert clone != g
    clone.set(0, 0, 0)
    assert clone == g


def test_fill_and_cells_order():
    g = Grid2D(2, 2, 0)
    g.fill(4)
    cells = list(g.cells())
    assert [c for c, _ in cells] == [Coord(0, 0), Coord(0, 1), Coord(1, 0), Coord(1, 1)]
    assert {v for _, v in cells} == {4}
