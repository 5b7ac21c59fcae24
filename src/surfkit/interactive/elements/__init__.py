# どこで: `src/surfkit/interactive/elements/__init__.py`。
# 何を: ノード要素（値ボックス）の公開 API を集約する。
# なぜ: 実装を部品ごとに分割しつつ、利用側の import パスを安定させるため。

from __future__ import annotations

from .unsigned_integer_value import UnsignedIntegerValue
from .value_box import UIntValueBox

__all__ = ["UIntValueBox", "UnsignedIntegerValue"]
