# どこで: `src/surfkit/core/__init__.py`。
# 何を: ノード値バインディングのコア（GUI 非依存）の公開エイリアスをまとめる。
# なぜ: interactive 層やテストから最小インポートで使えるようにするため。

from .accessor import get_uint, set_uint
from .archetype import NodeElementArchetype, unsigned_integer
from .events import Event, Subscription
from .node import SurfaceNode
from .values import (
    UINT32_MAX,
    Float2,
    Float3,
    Float4,
    Float32,
    Int32,
    Int64,
    SlotValue,
    UInt32,
    UInt64,
)

__all__ = [
    "get_uint",
    "set_uint",
    "NodeElementArchetype",
    "unsigned_integer",
    "Event",
    "Subscription",
    "SurfaceNode",
    "UINT32_MAX",
    "Float2",
    "Float3",
    "Float4",
    "Float32",
    "Int32",
    "Int64",
    "SlotValue",
    "UInt32",
    "UInt64",
]
