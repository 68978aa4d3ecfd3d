# basicmath/math/vec3.py
"""
3‑мерный вектор с параметризуемой точностью.

x – вперёд, y – влево (под прямым углом к x), z – вверх.

Реализация одна (Vec3), точность задаётся атрибутом класса `dtype`:
    * Vec3f – numpy.float32
    * Vec3d – numpy.float64

Все арифметические операции возвращают новый объект. Деление на ноль
не перехватывается – inf/NaN распространяются по правилам IEEE‑754.

Особенности, которые сохранены намеренно:
    * == и != при сравнении с None оба возвращают False;
    * <, >, <=, >= сравнивают квадраты длин, а не компоненты;
    * хэш – по идентичности объекта (равные векторы могут иметь
      разный хэш, поэтому как ключ словаря «по значению» не годятся).
"""

import operator
from typing import Iterator, Tuple

import numpy as np

from basicmath.math import linear
from basicmath.math.precision import resolve_dtype
from basicmath.utils.config import Config

# знаменатель меньше этого значения → angle() возвращает 0
ANGLE_EPSILON = 0.1


def _quiet():
    return np.errstate(all="ignore")


def _is_scalar(value) -> bool:
    # bool – не скаляр; int больше float64 даёт OverflowError при приведении
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


class _Constant:
    """Константа класса: при каждом обращении – новый вектор точности класса."""

    def __init__(self, factory):
        self._factory = factory

    def __get__(self, instance, owner):
        return self._factory(owner)


class Vec3:
    """Вектор‑3 (x, y, z) в точности `dtype`."""

    __slots__ = ("_v",)

    dtype = np.float64

    # numpy‑скаляры слева от вектора отдают операцию нашим __r*__/__gt__ и т.п.
    __array_ufunc__ = None

    def __init__(self, x: float, y: float, z: float = 0.0):
        # переполнение при приведении к float32 даёт inf без предупреждения
        with _quiet():
            self._v = np.array([x, y, z], dtype=self.dtype)

    # -----------------------------------------------------------------
    # константы
    # -----------------------------------------------------------------
    ZERO = _Constant(lambda cls: cls(0.0, 0.0, 0.0))
    UP = _Constant(lambda cls: cls(0.0, 0.0, 1.0))
    FORWARD = _Constant(lambda cls: cls(1.0, 0.0, 0.0))
    LEFT = _Constant(lambda cls: cls(0.0, 1.0, 0.0))
    RIGHT = _Constant(lambda cls: -cls.LEFT)
    DOWN = _Constant(lambda cls: -cls.UP)
    BACK = _Constant(lambda cls: -cls.FORWARD)
    # только для вывода ошибок (все компоненты NaN)
    ERROR = _Constant(lambda cls: cls(np.nan, np.nan, np.nan))

    # -----------------------------------------------------------------
    # свойства (c‑сеттерами)
    # -----------------------------------------------------------------
    @property
    def x(self):
        """Вперёд."""
        return self._v[0]

    @x.setter
    def x(self, value: float) -> None:
        self._set(0, value)

    @property
    def y(self):
        """Влево."""
        return self._v[1]

    @y.setter
    def y(self, value: float) -> None:
        self._set(1, value)

    @property
    def z(self):
        """Вверх."""
        return self._v[2]

    @z.setter
    def z(self, value: float) -> None:
        self._set(2, value)

    # -----------------------------------------------------------------
    # доступ по индексу 0/1/2 (без отрицательных индексов)
    # -----------------------------------------------------------------
    @staticmethod
    def _check_index(index) -> int:
        if (isinstance(index, (int, np.integer)) and not isinstance(index, bool)
                and 0 <= index <= 2):
            return int(index)
        raise IndexError(f"Vec3 index out of range: {index!r}")

    def __getitem__(self, index):
        return self._v[self._check_index(index)]

    def __setitem__(self, index, value: float) -> None:
        self._set(self._check_index(index), value)

    def _set(self, index: int, value) -> None:
        with _quiet():
            self._v[index] = value

    def __len__(self) -> int:
        return 3

    def __iter__(self) -> Iterator:
        return iter((self._v[0], self._v[1], self._v[2]))

    # -----------------------------------------------------------------
    # приведение операндов
    # -----------------------------------------------------------------
    def _same(self, other) -> bool:
        return isinstance(other, Vec3) and other.dtype is self.dtype

    def _scalar(self, value):
        with _quiet():
            return self.dtype(value)

    def _new(self, array) -> "Vec3":
        return type(self)(*array)

    # -----------------------------------------------------------------
    # арифметика (операторы возвращают новый объект)
    # -----------------------------------------------------------------
    def __add__(self, other: "Vec3") -> "Vec3":
        if not self._same(other):
            return NotImplemented
        with _quiet():
            return self._new(self._v + other._v)

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not self._same(other):
            return NotImplemented
        with _quiet():
            return self._new(self._v - other._v)

    def __mul__(self, other) -> "Vec3":
        """Поэлементное произведение или умножение на скаляр."""
        with _quiet():
            if self._same(other):
                return self._new(self._v * other._v)
            if _is_scalar(other):
                return self._new(self._v * self._scalar(other))
        return NotImplemented

    def __rmul__(self, other) -> "Vec3":
        if _is_scalar(other):
            return self * other
        return NotImplemented

    def __truediv__(self, other) -> "Vec3":
        """Поэлементное деление или деление на скаляр."""
        with _quiet():
            if self._same(other):
                return self._new(self._v / other._v)
            if _is_scalar(other):
                return self._new(self._v / self._scalar(other))
        return NotImplemented

    def __rtruediv__(self, other) -> "Vec3":
        """s / v = (s / x, s / y, s / z) – это не обратная операция к v / s."""
        if not _is_scalar(other):
            return NotImplemented
        with _quiet():
            return self._new(self._scalar(other) / self._v)

    def __neg__(self) -> "Vec3":
        return self._new(-self._v)

    def __pos__(self) -> "Vec3":
        return self

    # -----------------------------------------------------------------
    # равенство (NaN == NaN покомпонентно) и хэш
    # -----------------------------------------------------------------
    def __eq__(self, other):
        if other is None:
            return False
        if not isinstance(other, Vec3):
            return NotImplemented
        if other.dtype is not self.dtype:
            return False
        a, b = self._v, other._v
        return bool(np.all((a == b) | (np.isnan(a) & np.isnan(b))))

    def __ne__(self, other):
        # с None – тоже False (как и ==)
        if other is None:
            return False
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return equal
        return not equal

    # хэш по идентичности, не по компонентам
    __hash__ = object.__hash__

    # -----------------------------------------------------------------
    # порядок – по квадрату длины (для скаляра s – по s * s)
    # -----------------------------------------------------------------
    def _compare(self, other, op):
        if self._same(other):
            key = other.sqr_length()
        elif _is_scalar(other):
            with _quiet():
                s = self._scalar(other)
                key = s * s
        else:
            return NotImplemented
        return bool(op(self.sqr_length(), key))

    def __lt__(self, other):
        return self._compare(other, operator.lt)

    def __gt__(self, other):
        return self._compare(other, operator.gt)

    def __le__(self, other):
        return self._compare(other, operator.le)

    def __ge__(self, other):
        return self._compare(other, operator.ge)

    # -----------------------------------------------------------------
    # вспомогательные методы
    # -----------------------------------------------------------------
    def reduce(self):
        """Сумма компонент x + y + z."""
        with _quiet():
            return self._v[0] + self._v[1] + self._v[2]

    def sqr_length(self):
        """Квадрат длины."""
        return (self * self).reduce()

    def length(self):
        """Евклидова длина."""
        return np.sqrt(self.sqr_length())

    def normalized(self) -> "Vec3":
        """Вектор того же направления длины 1 (для нулевого – NaN)."""
        return self / self.length()

    def center(self, other: "Vec3") -> "Vec3":
        return center(self, other)

    def distance(self, other: "Vec3"):
        return distance(self, other)

    def dot(self, other: "Vec3"):
        return dot(self, other)

    def cross(self, other: "Vec3") -> "Vec3":
        return cross(self, other)

    def intersect_2d_quadrant(self, point: "Vec3", quadrant: int) -> bool:
        """
        Лежит ли этот вектор в квадранте 1–4 относительно `point`
        (учитываются только x и y). Другие номера → False.
        """
        if quadrant == 1:
            return bool(self.x > point.x and self.y < point.y)
        if quadrant == 2:
            return bool(self.x < point.x and self.y < point.y)
        if quadrant == 3:
            return bool(self.x < point.x and self.y > point.y)
        if quadrant == 4:
            return bool(self.x > point.x and self.y > point.y)
        return False

    def copy(self) -> "Vec3":
        return self._new(self._v)

    def as_np(self) -> np.ndarray:
        """Копия 3‑компонентного ndarray."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v.tolist())

    # -----------------------------------------------------------------
    # представление
    # -----------------------------------------------------------------
    def _components(self) -> str:
        # str(), а не format(): format расширяет float32 до float
        return ", ".join(str(c) for c in self._v)

    def to_short_string(self) -> str:
        return "[" + self._components() + "]"

    def __str__(self) -> str:
        return self.to_short_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._components()})"


class Vec3f(Vec3):
    """Вектор‑3 одинарной точности (float32)."""

    __slots__ = ()

    dtype = np.float32


class Vec3d(Vec3):
    """Вектор‑3 двойной точности (float64)."""

    __slots__ = ()

    dtype = np.float64


# ---------------------------------------------------------------------
# попарные функции
# ---------------------------------------------------------------------
def _require_same(a: Vec3, b: Vec3) -> None:
    if not (isinstance(a, Vec3) and a._same(b)):
        raise TypeError(
            f"Expected two vectors of the same precision, got "
            f"{type(a).__name__} and {type(b).__name__}"
        )


def center(a: Vec3, b: Vec3) -> Vec3:
    """Середина отрезка a‑b: (a + b) * 0.5."""
    _require_same(a, b)
    return (a + b) * 0.5


def distance(a: Vec3, b: Vec3):
    """Расстояние между точками a и b."""
    _require_same(a, b)
    return (a - b).length()


def dot(a: Vec3, b: Vec3):
    """Скалярное произведение."""
    _require_same(a, b)
    return (a * b).reduce()


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Векторное произведение (правая тройка)."""
    _require_same(a, b)
    with _quiet():
        return type(a)(
            a.y * b.z - a.z * b.y,
            a.z * b.x - a.x * b.z,
            a.x * b.y - a.y * b.x,
        )


def angle(from_: Vec3, to: Vec3):
    """Угол между векторами в градусах; почти нулевые векторы → 0."""
    _require_same(from_, to)
    dtype = from_.dtype
    with _quiet():
        denominator = np.sqrt(from_.sqr_length() * to.sqr_length())
        if denominator < dtype(ANGLE_EPSILON):
            return dtype(0.0)
        cosine = dot(from_, to) / denominator
        if cosine < dtype(-1.0):
            cosine = dtype(-1.0)
        if cosine > dtype(1.0):
            cosine = dtype(1.0)
        return np.arccos(cosine) * dtype(1.0) / (dtype(np.pi) * dtype(2.0) / dtype(360.0))


def signed_angle(from_: Vec3, to: Vec3, axis: Vec3):
    """
    «Знаковый угол»: возвращает только знак, +1 или -1
    (1, если angle * dot(axis, cross(from_, to)) >= 0).
    """
    dtype = from_.dtype
    with _quiet():
        signed = angle(from_, to) * dot(axis, cross(from_, to))
    return dtype(1.0) if signed >= dtype(0.0) else dtype(-1.0)


def lerp(from_: Vec3, to: Vec3, value: float) -> Vec3:
    """Покомпонентный linear.lerp в точности вектора."""
    _require_same(from_, to)
    dtype = from_.dtype
    return type(from_)(
        linear.lerp(from_.x, to.x, value, dtype),
        linear.lerp(from_.y, to.y, value, dtype),
        linear.lerp(from_.z, to.z, value, dtype),
    )


def make_vec3(x: float, y: float, z: float = 0.0, precision=None) -> Vec3:
    """Vec3f или Vec3d; без `precision` – точность из Config."""
    dtype = Config().precision if precision is None else resolve_dtype(precision)
    cls = Vec3f if dtype is np.float32 else Vec3d
    return cls(x, y, z)
