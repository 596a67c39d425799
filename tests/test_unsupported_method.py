import pytest

from daedalus.config import GenerationConfig
from daedalus.dungeon import (
    Dungeon,
    GenerationError,
    GenerationMethod,
    GenerationState,
    InvalidDimension,
    RogueDungeon,
    UnsupportedMethod,
    FLOOR,
)
from daedalus.dungeon.generators import GENERATORS


def _prepared_dungeon(cls=Dungeon):
    d = cls(6, 6, seed=99, config=GenerationConfig())
    d.set_tile(1, 1, FLOOR)
    d.set_entrance(1, 2)
    d.set_exit(4, 4)
    return d


@pytest.mark.parametrize("method", [m for m in GenerationMethod if m is not GenerationMethod.NAIVE])
def test_base_dungeon_rejects_non_naive_methods(method):
    d = _prepared_dungeon()
    before = d.export_tiles()
    with pytest.raises(UnsupportedMethod) as exc:
        d.generate(method)
    assert exc.value.method is method
    assert "Dungeon" in str(exc.value)
    assert d.export_tiles() == before
    assert d.entrance == (1, 2)
    assert d.exit == (4, 4)
    assert d.state == GenerationState.GENERATED
    assert d.method is None


def test_unknown_method_value_is_value_error():
    d = RogueDungeon(5, 5, seed=1, config=GenerationConfig())
    with pytest.raises(ValueError):
        d.generate(42)


def test_failing_strategy_rolls_back_everything(monkeypatch):
    d = _prepared_dungeon(RogueDungeon)
    d.place_room((2, 1), (3, 2))
    before = d.export_tiles()
    rooms_before = list(d.rooms)

    def explode(dungeon, rng, config):
        rng.random()
        dungeon.tiles.fill(FLOOR)
        raise RuntimeError("boom")

    monkeypatch.setitem(GENERATORS, GenerationMethod.BSP, explode)
    with pytest.raises(RuntimeError):
        d.generate(GenerationMethod.BSP)
    assert d.export_tiles() == before
    assert d.entrance == (1, 2) and d.exit == (4, 4)
    assert d.state == GenerationState.GENERATED
    assert d.rooms == rooms_before

    # Random stream was rewound as well: next run matches an untouched model
    d.generate(GenerationMethod.DRUNKEN_WALK)
    fresh = RogueDungeon(6, 6, seed=99, config=GenerationConfig())
    fresh.generate(GenerationMethod.DRUNKEN_WALK)
    assert d.export_tiles() == fresh.export_tiles()


def test_strategy_without_endpoints_is_generation_error(monkeypatch):
    d = RogueDungeon(5, 5, seed=3, config=GenerationConfig())

    def no_endpoints(dungeon, rng, config):
        dungeon.tiles.fill(FLOOR)
        return {}

    monkeypatch.setitem(GENERATORS, GenerationMethod.VORONOI, no_endpoints)
    with pytest.raises(GenerationError):
        d.generate(GenerationMethod.VORONOI)
    assert all(v == 0 for v in d.export_tiles())
    assert d.state == GenerationState.UNINITIALIZED


def test_one_by_one_grid_is_invalid_for_generation():
    d = Dungeon(1, 1, seed=1, config=GenerationConfig())
    with pytest.raises(InvalidDimension):
        d.generate(GenerationMethod.NAIVE)
    assert d.state == GenerationState.UNINITIALIZED
