import json

import pytest

from daedalus import logging_utils
from daedalus.config import GenerationConfig
from daedalus.dungeon import Dungeon, GenerationMethod
from daedalus.logging_utils import get_logger, set_level


def test_key_value_format(capsys):
    get_logger("test").info(event="hello", count=3, note="two words", skipped=None)
    line = capsys.readouterr().out.strip()
    assert line.startswith("level=info ts=")
    assert "event=hello" in line
    assert "count=3" in line
    assert "note=two_words" in line
    assert "skipped" not in line
    assert line.endswith("logger=test")


def test_json_mode(capsys, monkeypatch):
    monkeypatch.setattr(logging_utils, "JSON_MODE", True)
    get_logger("test").warn(event="careful", seed=7)
    rec = json.loads(capsys.readouterr().out)
    assert rec["level"] == "warn"
    assert rec["event"] == "careful"
    assert rec["seed"] == 7
    assert rec["logger"] == "test"


def test_errors_go_to_stderr(capsys):
    get_logger("test").error(event="bad")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "event=bad" in captured.err


def test_set_level_filters(capsys):
    set_level("warn")
    log = get_logger("test")
    log.info(event="quiet")
    log.debug(event="quieter")
    log.warn(event="loud")
    out = capsys.readouterr().out
    assert "quiet" not in out
    assert "event=loud" in out


def test_set_level_rejects_unknown():
    with pytest.raises(ValueError):
        set_level("verbose")


def test_get_logger_is_cached():
    assert get_logger("same") is get_logger("same")


def test_generate_logs_event(capsys):
    d = Dungeon(4, 4, seed=21, config=GenerationConfig())
    d.generate(GenerationMethod.NAIVE)
    out = capsys.readouterr().out
    assert "event=dungeon_generated" in out
    assert "method=NAIVE" in out
    assert "seed=21" in out
    assert "logger=daedalus.dungeon" in out


def test_unreachable_exit_logs_warning(capsys):
    d = Dungeon(3, 3, seed=1, config=GenerationConfig())
    d.set_entrance(0, 0)
    d.set_exit(2, 2)
    assert d.find_path() is False
    assert "event=path_not_found" in capsys.readouterr().out
