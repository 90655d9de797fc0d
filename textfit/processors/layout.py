"""
文件路径：textfit/processors/layout.py

说明：按字体名调用分行与测宽的布局函数（ReportLab 字体度量）。
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..components import (
    ReportLabFontMetrics,
    break_lines,
    measure,
    split_input_lines,
)


def wrap_text_lines(
    font_name: str,
    font_size: float,
    text: str,
    max_width: Optional[float],
    strict: bool = False,
) -> List[str]:
    """按最大行宽将文本分行。

    - 若 max_width 为空或 <=0，则不换行，仅按原始换行符拆分；
    - 使用 ReportLab 字体度量；非 strict 模式下缺字按空格宽度计算。
    """
    if text is None:
        return []
    if max_width is None or max_width <= 0:
        return split_input_lines(str(text))
    font = ReportLabFontMetrics(font_name) if strict else ReportLabFontMetrics.with_space_fallback(font_name)
    return break_lines(str(text), font, font_size, max_width)


def fit_column_width(
    texts: Iterable[str],
    font_name: str,
    font_size: float,
    padding: float = 0.0,
) -> float:
    """按内容计算列宽：最宽文本（多行取最宽一行）加左右内边距。"""
    font = ReportLabFontMetrics.with_space_fallback(font_name)
    widest = 0.0
    for text in texts:
        widest = max(widest, measure(str(text), font, font_size))
    return widest + 2 * padding


__all__ = ["wrap_text_lines", "fit_column_width"]
