"""
文件路径：textfit/processors/__init__.py

说明：
- 分行结果的消费方：
  - layout.py（按字体名换行、按内容计算列宽）
  - engines/reportlab.py（单列预览 PDF 绘制）
"""

from typing import List

__all__: List[str] = []
