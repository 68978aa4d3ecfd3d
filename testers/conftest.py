# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: чистый Config в tmp‑каталоге и
параметризация по точности (Vec3f / Vec3d).
"""

import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from basicmath.math.vec3 import Vec3f, Vec3d
from basicmath.utils.config import Config
from basicmath.utils.logger import logger


@pytest.fixture(autouse=True)
def fresh_config(tmp_path, monkeypatch):
    """Каждый тест получает новый Config и рабочий каталог tmp_path."""
    monkeypatch.chdir(tmp_path)
    Config.reset()
    yield
    Config.reset()
    logger.setLevel(logging.INFO)


@pytest.fixture(params=[Vec3f, Vec3d], ids=["single", "double"])
def vec_cls(request):
    """Класс вектора нужной точности."""
    return request.param
