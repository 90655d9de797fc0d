"""
文件路径：textfit/components/text.py

说明：文本宽度测量与按宽度分行。

- `measure`：逐字符累加前进宽度（千分单位 / 1000 * 字号），多行文本取最宽一行；
- `break_lines`：贪心前向扫描，断点优先级为 空白 > 标点（. , / -）> 强制按字符拆分
  （强制拆分时行尾追加续行标记 "-"）。

扫描对每个输入行只查询一次字形宽度，宽度增量累加，不对已测前缀重复测量。
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..variables import (
    CONST_BREAK_PUNCTUATION,
    CONST_BREAK_WHITESPACE,
    CONST_CONTINUATION_MARKER,
    CONST_FONT_UNITS_PER_EM,
    CONST_NEWLINE_PATTERN,
)
from .errors import InvalidParameterError
from .fonts import FontMetricSource


logger = logging.getLogger(__name__)

_NEWLINE_RE = re.compile(CONST_NEWLINE_PATTERN)


@dataclass(frozen=True)
class BreakTier:
    """断点层级：命中 `delimiters` 中任一字符后，其后位置即为候选断点。

    属性：
        name: 层级名称（日志用）。
        delimiters: 分隔字符集合。
        trim_delimiter: 断行时是否丢弃行尾的分隔符本身（空白层为 True）。
    """

    name: str
    delimiters: str
    trim_delimiter: bool = False

    def matches(self, char: str) -> bool:
        return char in self.delimiters


# 按优先级排列；新增分隔符（如特定语言的标点）只需在此追加层级
BREAK_TIERS: Tuple[BreakTier, ...] = (
    BreakTier("whitespace", CONST_BREAK_WHITESPACE, trim_delimiter=True),
    BreakTier("punctuation", CONST_BREAK_PUNCTUATION),
)


def _require_positive(name: str, value: float) -> None:
    if not value > 0:
        raise InvalidParameterError(name, value)


def split_input_lines(text: str) -> List[str]:
    """按显式换行（\\n 或 \\r\\n）拆分，k 个换行总是得到 k+1 段。"""
    return _NEWLINE_RE.split(text)


def _advances(line: str, font: FontMetricSource, size: float) -> List[float]:
    scale = size / CONST_FONT_UNITS_PER_EM
    return [font.glyph_width(ch) * scale for ch in line]


def _sum_widths(widths: Sequence[float]) -> float:
    total = 0.0
    for w in widths:
        total += w
    return total


def measure(text: str, font: FontMetricSource, size: float) -> float:
    """测量文本渲染宽度；含换行时返回最宽一行的宽度。

    参数：
        text: 待测文本，可包含显式换行。
        font: 字体度量源。
        size: 字号（pt）。

    返回：
        宽度（与字号同一单位，通常为 pt）。

    异常：
        InvalidParameterError: size 非正。
        UnsupportedGlyphError: 字体缺字且无回退宽度。
    """
    _require_positive("size", size)
    widest = 0.0
    for line in split_input_lines(text):
        widest = max(widest, _sum_widths(_advances(line, font, size)))
    return widest


def does_text_line_fit(line: str, font: FontMetricSource, size: float, max_width: float) -> bool:
    """单行文本是否可放入 max_width。"""
    return measure(line, font, size) <= max_width


def _trim_break_space(segment: str) -> str:
    if segment.endswith(CONST_BREAK_WHITESPACE):
        return segment[: -len(CONST_BREAK_WHITESPACE)]
    return segment


def _wrap_line(
    line: str,
    widths: List[float],
    font: FontMetricSource,
    size: float,
    max_width: float,
) -> List[str]:
    """对单个超宽输入行执行分层断点扫描。"""
    result: List[str] = []
    marker_width: Optional[float] = None
    n = len(line)
    start = 0

    while start < n:
        # 扫描：累加宽度直到下一个字符放不下
        running = 0.0
        prefix = [0.0]
        marks: List[Optional[int]] = [None] * len(BREAK_TIERS)
        end = start
        while end < n and running + widths[end] <= max_width:
            running += widths[end]
            prefix.append(running)
            ch = line[end]
            end += 1
            for i, tier in enumerate(BREAK_TIERS):
                if tier.matches(ch):
                    # 段首的空白不作为断点，否则会产生空行
                    if not (tier.trim_delimiter and end == start + 1):
                        marks[i] = end
                    break

        if end == n:
            # 行尾即断点：去掉单个尾随空格；只剩该空格时不再单独成行
            tail = _trim_break_space(line[start:])
            if tail or not result:
                result.append(tail)
            break

        # 下一个字符正是空白：窗口恰好止于词边界，直接在此断行并吞掉该空白
        edge = line[end]
        if end > start and any(t.trim_delimiter and t.matches(edge) for t in BREAK_TIERS):
            segment = _trim_break_space(line[start:end])
            if segment:
                result.append(segment)
            start = end + 1
            continue

        # 输出：按层级优先级选择最近的断点
        chosen = None
        for i, tier in enumerate(BREAK_TIERS):
            if marks[i] is not None:
                chosen = (tier, marks[i])
                break

        if chosen is not None:
            tier, cut = chosen
            segment = line[start:cut]
            result.append(_trim_break_space(segment) if tier.trim_delimiter else segment)
            start = cut
            continue

        # 强制拆分：找能连同续行标记一起放下的最长前缀，至少消耗一个字符
        if marker_width is None:
            marker_width = _sum_widths(_advances(CONST_CONTINUATION_MARKER, font, size))
        fitted = end - start
        while fitted > 0 and prefix[fitted] + marker_width > max_width:
            fitted -= 1
        if fitted == 0:
            fitted = 1
            logger.debug("字符 %r 宽度 %.3f 超过行宽 %.3f，单独成行", line[start], widths[start], max_width)
        cut = start + fitted
        segment = line[start:cut]
        if cut < n:
            segment += CONST_CONTINUATION_MARKER
        logger.debug("无可用分隔符，强制拆分：%r", segment)
        result.append(segment)
        start = cut

    return result


def break_lines(text: str, font: FontMetricSource, size: float, max_width: float) -> List[str]:
    """按最大行宽将段落分行。

    - 显式换行处必定断行，各段顺序保持不变；
    - 整段放得下时原样输出；
    - 否则按 空白 > 标点 > 强制拆分 的优先级选择最靠右的可用断点。

    参数：
        text: 段落文本。
        font: 字体度量源。
        size: 字号（pt）。
        max_width: 最大行宽（pt）。

    返回：
        输出行列表。

    异常：
        InvalidParameterError: size 或 max_width 非正（在任何测量之前检查）。
        UnsupportedGlyphError: 字体缺字且无回退宽度，原样向上抛出。
    """
    _require_positive("size", size)
    _require_positive("max_width", max_width)

    lines: List[str] = []
    for line in split_input_lines(text):
        widths = _advances(line, font, size)
        if _sum_widths(widths) <= max_width:
            lines.append(line)
        else:
            lines.extend(_wrap_line(line, widths, font, size, max_width))
    return lines


__all__ = [
    "BreakTier",
    "BREAK_TIERS",
    "split_input_lines",
    "measure",
    "does_text_line_fit",
    "break_lines",
]
