# どこで: `src/surfkit/core/values.py`。
# 何を: パラメータスロットが保持する数値表現（整数 4 種 / float32 / float ベクトル 3 種）を定義する。
# なぜ: スロットの種類を「格納値の実行時型」だけで判別できるよう、閉じた表現集合を 1 箇所に置くため。

from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from typing import ClassVar, Union

import numpy as np

UINT32_MAX = 0xFFFF_FFFF


def _wrap_unsigned(value: int, bits: int) -> int:
    return int(value) & ((1 << bits) - 1)


def _wrap_signed(value: int, bits: int) -> int:
    v = _wrap_unsigned(value, bits)
    if v >= 1 << (bits - 1):
        v -= 1 << bits
    return v


def to_float32(value: float) -> float:
    """値を IEEE-754 binary32 へ丸めた Python float を返す。"""

    # 範囲外は inf へ落ちる（C の float キャストと同じ）。警告は出さない。
    with np.errstate(over="ignore"):
        return float(np.float32(value))


def wrap_uint32(value: int) -> int:
    """整数を下位 32bit で切り詰めた符号なし値を返す。"""

    return _wrap_unsigned(value, 32)


def truncate_to_uint32(value: float) -> int:
    """float を 0 方向へ切り捨て、符号なし 32bit へ切り詰めて返す。

    Notes
    -----
    - 四捨五入はしない（`2.9 -> 2`, `-1.5 -> -1 -> 4294967295`）。
    - NaN / inf は 0 を返す。
    """

    f = float(value)
    if not math.isfinite(f):
        return 0
    return wrap_uint32(math.trunc(f))


@dataclass(frozen=True, slots=True)
class Int32:
    """符号付き 32bit 整数スロット。"""

    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _wrap_signed(self.value, 32))


@dataclass(frozen=True, slots=True)
class UInt32:
    """符号なし 32bit 整数スロット。"""

    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _wrap_unsigned(self.value, 32))


@dataclass(frozen=True, slots=True)
class Int64:
    """符号付き 64bit 整数スロット。"""

    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _wrap_signed(self.value, 64))


@dataclass(frozen=True, slots=True)
class UInt64:
    """符号なし 64bit 整数スロット。"""

    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _wrap_unsigned(self.value, 64))


@dataclass(frozen=True, slots=True)
class Float32:
    """32bit float スロット。"""

    value: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", to_float32(self.value))


class _FloatVector:
    """float ベクトルの共通処理（成分は生成時に float32 へ丸める）。"""

    __slots__ = ()

    ARITY: ClassVar[int]

    def __post_init__(self) -> None:
        for f in fields(self):  # type: ignore[arg-type]
            object.__setattr__(self, f.name, to_float32(getattr(self, f.name)))

    @property
    def components(self) -> tuple[float, ...]:
        """成分を (x, y, ...) の順で返す。"""

        return tuple(getattr(self, f.name) for f in fields(self))  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class Float2(_FloatVector):
    """2 成分 float ベクトルスロット。"""

    ARITY: ClassVar[int] = 2

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True, slots=True)
class Float3(_FloatVector):
    """3 成分 float ベクトルスロット。"""

    ARITY: ClassVar[int] = 3

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True, slots=True)
class Float4(_FloatVector):
    """4 成分 float ベクトルスロット。"""

    ARITY: ClassVar[int] = 4

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


SlotValue = Union[Int32, UInt32, Int64, UInt64, Float32, Float2, Float3, Float4]
FloatVector = Union[Float2, Float3, Float4]

INTEGER_TYPES: tuple[type, ...] = (Int32, UInt32, Int64, UInt64)
VECTOR_TYPES: tuple[type, ...] = (Float2, Float3, Float4)
SLOT_TYPES: tuple[type, ...] = (*INTEGER_TYPES, Float32, *VECTOR_TYPES)

_COMPONENT_NAMES = ("x", "y", "z", "w")


def component_name(vector: FloatVector, box_id: int) -> str:
    """box_id が指す成分名を返す。

    0..ARITY-2 はそのまま対応し、それ以外（範囲外/負数）は最後の成分へフォールバックする。
    例: Float3 なら 0 -> x, 1 -> y, その他 -> z。
    """

    last = vector.ARITY - 1
    if 0 <= box_id < last:
        return _COMPONENT_NAMES[box_id]
    return _COMPONENT_NAMES[last]


def get_component(vector: FloatVector, box_id: int) -> float:
    """box_id が指す成分の値を返す。"""

    return float(getattr(vector, component_name(vector, box_id)))


def with_component(vector: FloatVector, box_id: int, value: float) -> FloatVector:
    """box_id が指す成分だけを value に差し替えた新しいベクトルを返す。"""

    return replace(vector, **{component_name(vector, box_id): float(value)})


def is_slot_value(value: object) -> bool:
    """value がサポート対象のスロット表現なら True を返す。"""

    return isinstance(value, SLOT_TYPES)


__all__ = [
    "UINT32_MAX",
    "Int32",
    "UInt32",
    "Int64",
    "UInt64",
    "Float32",
    "Float2",
    "Float3",
    "Float4",
    "SlotValue",
    "FloatVector",
    "INTEGER_TYPES",
    "VECTOR_TYPES",
    "SLOT_TYPES",
    "component_name",
    "get_component",
    "with_component",
    "is_slot_value",
    "to_float32",
    "truncate_to_uint32",
    "wrap_uint32",
]
