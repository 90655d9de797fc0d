"""
文件路径：textfit/processors/engines/__init__.py

说明：绘制引擎包，当前仅有 ReportLab 单列预览实现：`reportlab.py`。
"""

from typing import List

__all__: List[str] = []
