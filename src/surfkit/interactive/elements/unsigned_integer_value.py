# どこで: `src/surfkit/interactive/elements/unsigned_integer_value.py`。
# 何を: ノードの 1 スロット（またはベクトルの 1 成分）に結び付いた符号なし整数の値ボックスを提供する。
# なぜ: 同じノードに結び付いた複数の値ボックスを、ノードの変更通知だけで一貫させるため。

from __future__ import annotations

import logging
from typing import Any

from surfkit.core.accessor import get_uint, set_uint
from surfkit.core.archetype import NodeElementArchetype
from surfkit.core.node import SurfaceNode

from .value_box import UIntValueBox

_logger = logging.getLogger(__name__)


class UnsignedIntegerValue(UIntValueBox):
    """SurfaceNode の値を編集する符号なし整数の要素。

    Notes
    -----
    - 生成時に `get_uint` で値を読み、`parent_node.values_changed` を購読する。
    - 通知を受けたら値を読み直す。ただし編集中は読み直さない（編集途中の値を潰さない）。
    - 確定値が変わったら `set_uint` でノードへ書き戻す。続く通知で自分自身も読み直すが、
      読み直しは変更フックを呼ばないため書き込みは往復しない。
    - `close()`（または with 文の終了）で購読を解除する。
    """

    def __init__(
        self,
        parent_node: SurfaceNode,
        archetype: NodeElementArchetype,
        *,
        width: float | None = None,
        slide_speed: float | None = None,
    ) -> None:
        x, y = archetype.position
        super().__init__(
            get_uint(parent_node, archetype),
            x,
            y,
            width,
            archetype.value_min,
            archetype.value_max,
            slide_speed,
        )
        self.parent_node = parent_node
        self.archetype = archetype
        self._writing = False
        self._subscription = parent_node.values_changed.subscribe(self._on_node_values_changed)

    @property
    def is_closed(self) -> bool:
        return not self._subscription.active

    def _on_node_values_changed(self) -> None:
        if self.is_editing:
            return
        self.set_value_silently(get_uint(self.parent_node, self.archetype))

    def commit(self) -> None:
        was_editing = self.is_editing
        super().commit()
        # 編集中に見送った外部変更をここで取り込む（書き込み直後なら同じ値を読むだけ）。
        if was_editing and self.archetype.has_value and not self.is_closed:
            self._on_node_values_changed()

    def cancel(self) -> None:
        was_editing = self.is_editing
        super().cancel()
        if was_editing and self.archetype.has_value and not self.is_closed:
            self._on_node_values_changed()

    def on_value_changed(self) -> None:
        super().on_value_changed()
        # 自分の書き込みが起こした通知の中から、もう一度書き込まない。
        if self._writing or self.is_closed:
            return
        self._writing = True
        try:
            set_uint(self.parent_node, self.archetype, self.value)
        finally:
            self._writing = False

    def draw(self, imgui: Any) -> bool:
        changed = super().draw(imgui)

        # 枠線（フォーカス中は ImGui 側の強調表示に任せる）
        if not self.is_focused:
            x0, y0 = imgui.get_item_rect_min()
            x1, y1 = imgui.get_item_rect_max()
            color = imgui.get_color_u32_rgba(*self.border_color)
            imgui.get_window_draw_list().add_rect(x0, y0, x1, y1, color)
        return changed

    def close(self) -> None:
        """ノードの変更通知の購読を解除する（二重 close は無視する）。"""

        if self.is_closed:
            return
        self._subscription.close()
        _logger.debug(
            "unsubscribed: node=%r value_index=%d",
            self.parent_node.title,
            self.archetype.value_index,
        )

    def __enter__(self) -> UnsignedIntegerValue:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["UnsignedIntegerValue"]
