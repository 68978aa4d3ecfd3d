# basicmath/math/linear.py
# ---------------------------------------------------------------
# Скалярная интерполяция:
# - lerp   – линейная интерполяция с зажимом параметра,
# - sample – кусочно‑линейная выборка по равномерной последовательности.
# ---------------------------------------------------------------

import numpy as np

from basicmath.math.precision import DOUBLE, resolve_dtype
from basicmath.utils.logger import logger


def lerp(from_, to, value, precision=DOUBLE):
    """
    Линейная интерполяция между `from_` и `to`.

    value > 1 → `to`, value < 0 → `from_`, иначе
    from_ * (1 - value) + to * value (в выбранной точности).
    """
    dtype = resolve_dtype(precision)
    with np.errstate(all="ignore"):
        from_, to, value = dtype(from_), dtype(to), dtype(value)
        if value > 1:
            return to
        if value < 0:
            return from_
        return from_ * (dtype(1) - value) + to * value


def sample(values, t, precision=DOUBLE):
    """
    Значение в позиции `t` ∈ [0, 1] последовательности `values`,
    отсчёты которой равномерно распределены по [0, 1].

    Пустая последовательность – не ошибка: возвращается NaN.
    """
    dtype = resolve_dtype(precision)
    count = len(values)
    if count == 0:
        logger.debug("[sample] empty sequence – returning NaN")
        return dtype(np.nan)
    with np.errstate(all="ignore"):
        return _interpolate(values, count, dtype(t), dtype)


def _interpolate(values, count, t, dtype):
    if count == 1 or t <= 0:
        return dtype(values[0])
    if t >= 1:
        return dtype(values[count - 1])
    if np.isnan(t):
        return dtype(np.nan)

    position = t * dtype(count - 1)
    lower = int(np.floor(position))
    # округление t*(count-1) может дать последний индекс
    if lower > count - 2:
        lower = count - 2
    upper = lower + 1

    low = dtype(values[lower])
    high = dtype(values[upper])
    return low + (high - low) * (position - dtype(lower))
