# どこで: `src/surfkit/interactive/surface_gui/gui.py`。
# 何を: 1 つの SurfaceNode の要素（値ボックス）を pyimgui で描画する GUI（初期化/1フレーム描画/破棄）を提供する。
# なぜ: 依存の重いライフサイクル管理を 1 箇所に閉じ込め、要素側を純粋に保つため。

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from typing import Any

from surfkit.core.archetype import NodeElementArchetype
from surfkit.core.node import SurfaceNode
from surfkit.interactive.elements import UnsignedIntegerValue

from .pyglet_backend import clear_window, create_renderer, sync_io_for_window

_logger = logging.getLogger(__name__)


def create_elements(
    node: SurfaceNode, archetypes: Iterable[NodeElementArchetype]
) -> list[UnsignedIntegerValue]:
    """archetype ごとに node へ結び付いた値ボックスを生成して返す。"""

    return [UnsignedIntegerValue(node, arch) for arch in archetypes]


def draw_elements(imgui: Any, elements: Iterable[UnsignedIntegerValue]) -> bool:
    """要素を archetype の位置へ並べて描画し、どれかの編集値が動いたら True を返す。"""

    changed_any = False
    for i, element in enumerate(elements):
        # 同じラベル（"##value"）が並ぶため、要素ごとに ID スコープを分ける。
        imgui.push_id(str(i))
        try:
            imgui.set_cursor_pos((element.x, element.y))
            changed_any = element.draw(imgui) or changed_any
        finally:
            imgui.pop_id()
    return changed_any


class NodeElementsGUI:
    """pyimgui で SurfaceNode の値を編集するための最小 GUI。

    `draw_frame()` を呼ぶことで 1 フレーム分の UI を描画する。
    """

    def __init__(
        self,
        gui_window: Any,
        *,
        node: SurfaceNode,
        archetypes: Iterable[NodeElementArchetype],
        title: str | None = None,
    ) -> None:
        """GUI の初期化（要素生成 / ImGui コンテキスト / renderer 作成）。"""

        import imgui  # type: ignore[import-untyped]

        self._window = gui_window
        self._node = node
        self._title = node.title if title is None else str(title)
        self.elements = create_elements(node, archetypes)

        # ImGui は「グローバルな current context」を前提にするため、自前コンテキストを作って切り替えながら使う。
        self._imgui = imgui
        self._context = imgui.create_context()
        imgui.style_colors_dark()
        imgui.set_current_context(self._context)
        self._renderer = create_renderer(gui_window)

        self._prev_time = time.monotonic()
        self._closed = False
        _logger.debug("node gui opened: node=%r elements=%d", self._title, len(self.elements))

    def draw_frame(self) -> bool:
        """1 フレーム分の GUI を描画する。編集値が動いたら True を返す。

        `flip()` は呼ばない。呼び出し側（pyglet の `Window.draw`）が担当する。
        """

        if self._closed:
            return False

        now = time.monotonic()
        dt = now - self._prev_time
        self._prev_time = now

        imgui = self._imgui
        imgui.set_current_context(self._context)

        imgui.new_frame()
        sync_io_for_window(imgui, self._window, dt=dt)

        # ノードは 1 ウィンドウで全面表示する（位置/サイズ固定）。
        imgui.set_next_window_position(0, 0)
        imgui.set_next_window_size(self._window.width, self._window.height)
        imgui.begin(
            self._title,
            flags=imgui.WINDOW_NO_RESIZE
            | imgui.WINDOW_NO_COLLAPSE
            | imgui.WINDOW_NO_TITLE_BAR,
        )
        try:
            changed = draw_elements(imgui, self.elements)
        finally:
            imgui.end()

        imgui.render()

        clear_window(self._window)
        self._renderer.render(imgui.get_draw_data())
        return changed

    def close(self) -> None:
        """要素の購読を解除し、コンテキストとウィンドウを破棄する。"""

        # 二重 close を許容する（呼び出し側の finally から安全に呼べるようにする）。
        if self._closed:
            return
        self._closed = True

        for element in self.elements:
            element.close()

        shutdown = getattr(self._renderer, "shutdown", None)
        if callable(shutdown):
            shutdown()
        self._imgui.destroy_context(self._context)
        self._window.close()


__all__ = ["NodeElementsGUI", "create_elements", "draw_elements"]
