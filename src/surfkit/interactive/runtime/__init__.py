# どこで: `src/surfkit/interactive/runtime/__init__.py`。
# 何を: interactive 実行時の「ループ/サブシステム」実装をまとめるパッケージ定義。
# なぜ: GUI の初期化/描画/後始末をサブシステム単位で差し替えられるようにするため。

from __future__ import annotations

__all__ = []
