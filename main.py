"""
どこで: リポジトリ直下 `main.py`。
何を: 整数/float/ベクトルのスロットを持つノードを作り、値ボックスを別ウィンドウで表示する。
なぜ: 同じノードに結び付いた値ボックス同士が通知で同期することを目視確認するため。
"""

import logging

from surfkit import Float3, Int32, SurfaceNode, UInt64, unsigned_integer
from surfkit.interactive.runtime.node_gui_system import run_node_gui

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    node = SurfaceNode([Int32(3), UInt64(40), Float3(1.0, 2.0, 3.0)], title="demo")
    archetypes = [
        unsigned_integer(10, 10, value_index=0, value_max=100),
        unsigned_integer(10, 40, value_index=1),
        unsigned_integer(10, 70, value_index=2, component=0),
        unsigned_integer(70, 70, value_index=2, component=1),
        unsigned_integer(130, 70, value_index=2, component=2),
        # 同じ成分へ 2 つ目の値ボックスを結び付け、片方の編集がもう片方へ伝わることを見る。
        unsigned_integer(130, 100, value_index=2, component=2),
    ]
    run_node_gui(node, archetypes)
