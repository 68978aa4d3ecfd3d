# basicmath/math/integer.py
# ---------------------------------------------------------------
# Наибольший общий делитель (НОД) для неотрицательных целых:
# - gcd_pair     – алгоритм Евклида для двух чисел,
# - gcd_sequence – рекурсивная попарная редукция массива,
# - gcd          – «перегрузка»: gcd(a, b) или gcd(values).
# ---------------------------------------------------------------

import numpy as np

from basicmath.utils.logger import logger


def _as_unsigned(value) -> int:
    if not isinstance(value, (int, np.integer)):
        raise TypeError(f"GCD expects integers, got {type(value).__name__}")
    value = int(value)
    if value < 0:
        raise ValueError(f"GCD expects non-negative integers, got {value}")
    return value


def gcd_pair(a, b) -> int:
    """НОД двух чисел (алгоритм Евклида). gcd(0, b) = b, gcd(a, 0) = a."""
    a = _as_unsigned(a)
    b = _as_unsigned(b)
    if a == 0:
        return b
    if b == 0:
        return a
    while b != 0:
        a, b = b, a % b
    return a


def gcd_sequence(values) -> int:
    """
    НОД массива через попарную рекурсивную редукцию.

    Пустой массив → ValueError, один элемент возвращается как есть,
    два – gcd_pair.
    """
    values = [_as_unsigned(v) for v in values]
    if not values:
        raise ValueError("gcd_sequence() requires at least one value")
    return _reduce(values)


def _reduce(values) -> int:
    count = len(values)
    if count == 1:
        return values[0]
    if count == 2:
        return gcd_pair(values[0], values[1])

    # NOTE: это НЕ обычное дерево попарной редукции.
    # Нечётная длина → шаг 1: пары перекрываются (0‑1, 1‑2, …), а последний
    # слот буфера не перезаписывается и остаётся старым значением.
    # Чётная длина → шаг 2: пары 0‑1, 2‑3, …, нечётные слоты не трогаются.
    # Для нечётных длин результат по раундам отличается от стандартной
    # редукции – не «исправлять».
    stride = 1 if count % 2 == 1 else 2
    buffer = list(values)
    for i in range(0, count - 1, stride):
        buffer[i] = gcd_pair(values[i], values[i + 1])

    # рекурсия только по записанным слотам, иначе буфер не уменьшается
    if stride == 1:
        written = buffer[:count - 1]
    else:
        written = buffer[::2]
    logger.debug(f"[gcd] round: {count} values, stride {stride} → {written}")
    return _reduce(written)


def gcd(a, b=None) -> int:
    """gcd(a, b) → gcd_pair(a, b); gcd(values) → gcd_sequence(values)."""
    if b is None:
        return gcd_sequence(a)
    return gcd_pair(a, b)
