# どこで: `src/surfkit/core/node.py`。
# 何を: パラメータ値リストを所有するサーフェスノード（SurfaceNode）を定義する。
# なぜ: 値の変更経路を `set_value` / `set_values` に一本化し、変更通知と dirty 管理を 1 箇所で行うため。

from __future__ import annotations

import logging
from collections.abc import Iterable

from .events import Event

_logger = logging.getLogger(__name__)


class SurfaceNode:
    """順序付きのパラメータ値リストを持つノード。

    Notes
    -----
    - 値は型付きスロット表現（`surfkit.core.values`）を想定するが、任意オブジェクトも保持できる。
    - `values_changed` は値が差し替えられた「後」に発火する。購読者はペイロードを受け取らず、
      必要な値を読み直す。
    """

    def __init__(self, values: Iterable[object] = (), *, title: str = "Node") -> None:
        self.title = str(title)
        self._values: list[object] = list(values)
        self._dirty = False
        self.values_changed = Event(f"{self.title}.values_changed")

    @property
    def values(self) -> tuple[object, ...]:
        """現在の値リスト（読み取り専用のコピー）。"""

        return tuple(self._values)

    def value_at(self, index: int) -> object:
        """index 番目のスロット値を返す（リスト全体はコピーしない）。"""

        return self._values[self._check_index(index)]

    def _check_index(self, index: int) -> int:
        i = int(index)
        if i < 0 or i >= len(self._values):
            raise IndexError(
                f"value index が範囲外です: node={self.title!r} index={i} count={len(self._values)}"
            )
        return i

    @property
    def is_dirty(self) -> bool:
        """生成後（または `clear_dirty()` 後）に値が変更されていれば True。"""

        return self._dirty

    def clear_dirty(self) -> None:
        self._dirty = False

    def set_value(self, index: int, value: object) -> None:
        """index 番目のスロットを value で置き換え、変更通知を発火する。"""

        i = self._check_index(index)
        self._values[i] = value
        self._dirty = True
        _logger.debug("set_value: node=%r index=%d value=%r", self.title, i, value)
        self.values_changed.fire()

    def set_values(self, values: Iterable[object]) -> None:
        """全スロットをまとめて置き換え、変更通知を 1 回だけ発火する。

        スロット数は変えられない（数が異なる場合は ValueError）。
        """

        new_values = list(values)
        if len(new_values) != len(self._values):
            raise ValueError(
                "values の数が一致しません: "
                f"node={self.title!r} expected={len(self._values)} got={len(new_values)}"
            )
        self._values = new_values
        self._dirty = True
        _logger.debug("set_values: node=%r count=%d", self.title, len(new_values))
        self.values_changed.fire()


__all__ = ["SurfaceNode"]
