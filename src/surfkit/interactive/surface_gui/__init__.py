# どこで: `src/surfkit/interactive/surface_gui/__init__.py`。
# 何を: ノード GUI の公開 API を集約する。
# なぜ: 実装を責務ごとに分割しつつ、利用側の import パスを安定させるため。

from __future__ import annotations

from .gui import NodeElementsGUI, create_elements, draw_elements
from .pyglet_backend import open_node_window

__all__ = [
    "NodeElementsGUI",
    "create_elements",
    "draw_elements",
    "open_node_window",
]
