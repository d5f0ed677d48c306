# どこで: `src/escher/api/__init__.py`。
# 何を: 公開 API（ヘッドレス export）を再エクスポートする。

from __future__ import annotations

from .export import Export, default_output_path

__all__ = ["Export", "default_output_path"]
