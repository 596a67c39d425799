from daedalus.config import GenerationConfig
from daedalus.dungeon import Dungeon, GenerationMethod, GenerationState
from tests.dungeon_test_utils import assert_valid_path

EXPECTED_10x10 = "\n".join(["<........."] + [".........."] * 8 + [".........>"])


def test_naive_10x10_seed_42_fixed_layout():
    d = Dungeon(10, 10, seed=42, config=GenerationConfig())
    d.generate(GenerationMethod.NAIVE)
    assert d.to_ascii() == EXPECTED_10x10
    assert d.entrance == (0, 0)
    assert d.exit == (9, 9)
    assert d.state == GenerationState.VALIDATED
    assert d.find_path()
    path = d.hot_path()
    assert len(path) - 1 == 18
    assert d.metrics["path_length"] == 18
    assert_valid_path(d, path)


def test_naive_export_encoding():
    d = Dungeon(3, 4, seed=1, config=GenerationConfig())
    d.generate(GenerationMethod.NAIVE)
    assert d.export_tiles() == [2, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 3]


def test_naive_accepts_raw_method_value():
    d = Dungeon(2, 2, seed=1, config=GenerationConfig())
    d.generate(0)
    assert d.method is GenerationMethod.NAIVE


def test_generation_without_validation_stays_generated():
    d = Dungeon(4, 4, seed=3, config=GenerationConfig(validate_on_generate=False))
    d.generate(GenerationMethod.NAIVE)
    assert d.state == GenerationState.GENERATED
    assert d.metrics["path_length"] is None
    assert d.find_path()
    assert d.state == GenerationState.VALIDATED


def test_naive_metrics_and_dict_export():
    d = Dungeon(5, 5, seed=11, config=GenerationConfig())
    d.generate(GenerationMethod.NAIVE)
    m = d.metrics
    assert m["method"] == "NAIVE"
    assert m["seed"] == 11
    assert m["tiles_wall"] == 0
    assert m["tiles_floor"] == 25
    assert m["floor_ratio"] == 1.0
    assert set(m["phase_ms"]) == {"carve", "validate"}
    data = d.to_dict()
    assert data["rows"] == 5 and data["cols"] == 5
    assert data["entrance"] == [0, 0]
    assert data["exit"] == [4, 4]
    assert data["state"] == "validated"
    assert len(data["hot_path"]) == 9
    assert len(data["tiles"]) == 25


def test_metrics_disabled():
    d = Dungeon(4, 4, seed=2, config=GenerationConfig(enable_metrics=False))
    d.generate(GenerationMethod.NAIVE)
    assert d.metrics == {}
    assert d.find_path()
