"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – используются настройки по‑умолчанию
(файл создаётся только при явном save()).
"""

import copy
import json
from pathlib import Path
from basicmath.utils.logger import logger, set_level

DEFAULT_CONFIG = {
    "precision": "double",
    "log_level": "INFO",
}


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "basicmath.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Забыть текущий экземпляр (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        self.data = copy.deepcopy(DEFAULT_CONFIG)
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError("top-level JSON value must be an object")
                self.data.update(loaded)
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
        else:
            logger.debug(f"[Config] No config file at {self.path} – using defaults.")
        self._apply_log_level()

    def _apply_log_level(self):
        try:
            set_level(self["log_level"])
        except ValueError as exc:
            logger.error(f"[Config] {exc}")

    def reload(self):
        self._load()

    def save(self):
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=4)
        logger.info("[Config] Configuration saved.")

    @property
    def precision(self):
        """numpy‑тип скаляра для точности по‑умолчанию."""
        from basicmath.math.precision import resolve_dtype
        return resolve_dtype(self["precision"])

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        if key == "log_level":
            self._apply_log_level()
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)
