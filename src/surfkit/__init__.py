# どこで: `src/surfkit/__init__.py`。
# 何を: ルート `surfkit` パッケージを定義する。
# なぜ: import 起点を `surfkit` に統一するため。

from __future__ import annotations

from surfkit.core import (
    Float2,
    Float3,
    Float4,
    Float32,
    Int32,
    Int64,
    NodeElementArchetype,
    SurfaceNode,
    UInt32,
    UInt64,
    get_uint,
    set_uint,
    unsigned_integer,
)

__all__ = [
    "Float2",
    "Float3",
    "Float4",
    "Float32",
    "Int32",
    "Int64",
    "NodeElementArchetype",
    "SurfaceNode",
    "UInt32",
    "UInt64",
    "get_uint",
    "set_uint",
    "unsigned_integer",
]
