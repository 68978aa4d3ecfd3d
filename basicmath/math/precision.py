# basicmath/math/precision.py
"""
Точность скаляров: «single» → numpy.float32, «double» → numpy.float64.

Все вычисления выполняются в numpy‑скалярах выбранного типа, поэтому
результаты одинарной точности округляются так же, как 32‑битные float.
"""

import numpy as np

SINGLE = "single"
DOUBLE = "double"

_BY_NAME = {
    SINGLE: np.float32,
    DOUBLE: np.float64,
}


def resolve_dtype(precision):
    """Имя точности / numpy‑тип → numpy‑тип скаляра (np.float32 или np.float64)."""
    if precision is None:
        raise ValueError("Precision must not be None")
    if isinstance(precision, str):
        try:
            return _BY_NAME[precision.lower()]
        except KeyError:
            raise ValueError(f"Unknown precision: {precision!r}") from None
    try:
        dtype = np.dtype(precision).type
    except TypeError:
        raise ValueError(f"Unknown precision: {precision!r}") from None
    if dtype not in (np.float32, np.float64):
        raise ValueError(f"Unsupported precision: {precision!r}")
    return dtype


def precision_name(dtype) -> str:
    """Обратное преобразование: numpy‑тип → «single» / «double»."""
    dtype = resolve_dtype(dtype)
    return SINGLE if dtype is np.float32 else DOUBLE
