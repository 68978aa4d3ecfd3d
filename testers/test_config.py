# -*- coding: utf-8 -*-
import json
import logging

import numpy as np
import pytest

from basicmath.utils.config import Config, DEFAULT_CONFIG
from basicmath.utils.logger import logger, set_level


def test_defaults_without_file(tmp_path):
    path = tmp_path / "missing.json"
    cfg = Config(str(path))
    assert cfg["precision"] == "double"
    assert cfg["log_level"] == "INFO"
    assert cfg.precision is np.float64
    assert not path.exists()


def test_singleton(tmp_path):
    first = Config(str(tmp_path / "a.json"))
    assert Config(str(tmp_path / "b.json")) is first
    Config.reset()
    assert Config(str(tmp_path / "b.json")) is not first


def test_loads_file(tmp_path):
    path = tmp_path / "basicmath.json"
    path.write_text(json.dumps({"precision": "single"}), encoding="utf-8")
    cfg = Config(str(path))
    assert cfg.precision is np.float32
    # отсутствующие ключи берутся из значений по‑умолчанию
    assert cfg["log_level"] == DEFAULT_CONFIG["log_level"]


def test_invalid_file_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "basicmath.json"
    path.write_text("{not json", encoding="utf-8")
    cfg = Config(str(path))
    assert cfg.data == DEFAULT_CONFIG
    assert "Failed to read config" in caplog.text


def test_non_object_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "basicmath.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert Config(str(path)).data == DEFAULT_CONFIG


def test_setitem_saves(tmp_path):
    path = tmp_path / "basicmath.json"
    cfg = Config(str(path))
    cfg["precision"] = "single"
    assert json.loads(path.read_text(encoding="utf-8"))["precision"] == "single"
    cfg.reload()
    assert cfg.precision is np.float32


def test_unknown_precision_raises(tmp_path):
    cfg = Config(str(tmp_path / "basicmath.json"))
    cfg.data["precision"] = "quad"
    with pytest.raises(ValueError):
        cfg.precision


def test_log_level_applied(tmp_path):
    path = tmp_path / "basicmath.json"
    path.write_text(json.dumps({"log_level": "DEBUG"}), encoding="utf-8")
    Config(str(path))
    assert logger.level == logging.DEBUG


def test_bad_log_level_is_reported(tmp_path, caplog):
    path = tmp_path / "basicmath.json"
    path.write_text(json.dumps({"log_level": "LOUD"}), encoding="utf-8")
    Config(str(path))
    assert "Unknown log level" in caplog.text


def test_set_level():
    set_level("warning")
    assert logger.level == logging.WARNING
    set_level(logging.DEBUG)
    assert logger.level == logging.DEBUG
    with pytest.raises(ValueError):
        set_level("LOUD")
