# どこで: `src/surfkit/core/accessor.py`。
# 何を: ノードのスロット値と符号なし 32bit 整数の相互変換（読み出し/書き戻し）を提供する。
# なぜ: 値ボックスがスロットの具体型やベクトル成分を意識せずに編集できるようにするため。

from __future__ import annotations

import logging

from .archetype import NodeElementArchetype
from .node import SurfaceNode
from .values import (
    INTEGER_TYPES,
    Float32,
    Int32,
    Int64,
    UInt32,
    UInt64,
    get_component,
    is_slot_value,
    truncate_to_uint32,
    with_component,
    wrap_uint32,
)

_logger = logging.getLogger(__name__)


def get_uint(
    parent_node: SurfaceNode,
    arch: NodeElementArchetype,
    custom_value: object | None = None,
) -> int:
    """スロット値を符号なし 32bit 整数として返す。型変換とベクトル成分の取り出しを行う。

    Parameters
    ----------
    parent_node : SurfaceNode
        値を持つノード。`custom_value` を渡す場合は参照しない。
    arch : NodeElementArchetype
        対象スロットと成分。
    custom_value : object | None
        ノードの値の代わりに使う値（未確定値のプレビュー用）。

    Returns
    -------
    int
        0..2**32-1。未対応の型、または「スロット無し」なら 0。
    """

    if arch.value_index < 0 and custom_value is None:
        return 0

    value = custom_value if custom_value is not None else parent_node.value_at(arch.value_index)

    if not is_slot_value(value):
        return 0
    # 値ボックスはベクトルの 1 成分（Float3.y など）を編集し得る。どの成分かは box_id が示す。
    if isinstance(value, INTEGER_TYPES):
        return wrap_uint32(value.value)
    if isinstance(value, Float32):
        return truncate_to_uint32(value.value)
    return truncate_to_uint32(get_component(value, arch.box_id))


def set_uint(parent_node: SurfaceNode, arch: NodeElementArchetype, to_set: int) -> None:
    """符号なし 32bit 整数をスロットへ書き戻す。型変換とベクトル成分の差し替えを行う。

    スロットの種類（整数/float/ベクトル）は変えない。未対応の型は Int32(0) で置き換える。
    反映は `parent_node.set_value()` 経由で行う。
    """

    if arch.value_index < 0:
        return

    to_set = wrap_uint32(to_set)
    value = parent_node.value_at(arch.value_index)
    if not is_slot_value(value):
        _logger.debug(
            "未対応のスロット型を 0 で置き換えます: index=%d type=%s",
            arch.value_index,
            type(value).__name__,
        )
        parent_node.set_value(arch.value_index, Int32(0))
        return

    to_set_f = float(to_set)
    new_value: object
    if isinstance(value, Int32):
        new_value = Int32(to_set)
    elif isinstance(value, UInt32):
        new_value = UInt32(to_set)
    elif isinstance(value, Int64):
        new_value = Int64(to_set)
    elif isinstance(value, UInt64):
        new_value = UInt64(to_set)
    elif isinstance(value, Float32):
        new_value = Float32(to_set_f)
    else:
        new_value = with_component(value, arch.box_id, to_set_f)

    parent_node.set_value(arch.value_index, new_value)


__all__ = ["get_uint", "set_uint"]
