"""
文件路径：textfit/components/fonts.py

说明：字体度量源（FontMetricSource）及其实现。

- 分行算法只依赖 `glyph_width(char)` 这一能力接口，不耦合具体的字体加载方式；
- `ReportLabFontMetrics`：读取 ReportLab `pdfmetrics` 注册表中的字体宽度
  （Standard 14 Type1 字体走编码宽度表，TrueType 字体走码位宽度表）；
- `TableFontMetrics`：字符 -> 宽度 的查表实现，适用于位图字体与测试替身。

宽度单位统一为字号的千分之一（per-mille）。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional, Protocol, Union, runtime_checkable

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from ..variables import CONST_FALLBACK_TO_SPACE_WIDTH, CONST_FONT_UNITS_PER_EM
from .errors import FontNotFoundError, UnsupportedGlyphError


logger = logging.getLogger(__name__)


@runtime_checkable
class FontMetricSource(Protocol):
    """字体度量能力接口：返回单个字符的前进宽度（千分单位）。

    缺字时应抛出 `UnsupportedGlyphError`，或按自身策略返回回退宽度。
    实现必须对并发读取安全（分行算法只读不写）。
    """

    def glyph_width(self, char: str) -> float:
        ...


class TableFontMetrics:
    """查表字体度量：`widths` 为 字符 -> 千分宽度 的映射。

    参数：
        widths: 字符宽度表。
        name: 字体名称，仅用于日志与错误信息。
        fallback_width: 缺字时的替代宽度；None 表示缺字即报错。
    """

    def __init__(
        self,
        widths: Mapping[str, float],
        name: str = "table",
        fallback_width: Optional[float] = None,
    ) -> None:
        self.name = name
        self.fallback_width = fallback_width
        self._widths = dict(widths)

    def glyph_width(self, char: str) -> float:
        width = self._widths.get(char)
        if width is not None:
            return width
        if self.fallback_width is None:
            raise UnsupportedGlyphError(char, self.name)
        return self.fallback_width

    @classmethod
    def monospace(cls, width: float = 600.0, name: str = "monospace") -> "TableFontMetrics":
        """等宽字体：任意字符宽度均为 `width`。"""
        return cls({}, name=name, fallback_width=width)


class ReportLabFontMetrics:
    """基于 ReportLab 字体注册表的度量源。

    - Type1（含 Helvetica 等 Standard 14）：按字体编码将字符映射为码位，
      读取 `font.widths`；无法编码即视为缺字。
    - TrueType：读取 `font.face.charWidths`（码位 -> 千分宽度）。
    - 其他字体（如 CID 字体）：退回 `pdfmetrics.stringWidth` 以千分字号计算。

    参数：
        font_name: 已注册（或 ReportLab 可自动注册的 Standard 14）字体名。
        fallback_width: 缺字时的替代宽度；None 表示缺字即抛出 UnsupportedGlyphError。

    异常：
        FontNotFoundError: 字体不存在。
    """

    def __init__(self, font_name: str, fallback_width: Optional[float] = None) -> None:
        try:
            self._font = pdfmetrics.getFont(font_name)
        except Exception as exc:  # noqa: BLE001
            raise FontNotFoundError(font_name) from exc
        self.name = font_name
        self.fallback_width = fallback_width
        self._is_ttf = isinstance(self._font, TTFont)

    @classmethod
    def with_space_fallback(cls, font_name: str) -> "ReportLabFontMetrics":
        """缺字时以该字体自身的空格宽度替代，保证渲染不中断。"""
        metrics = cls(font_name)
        metrics.fallback_width = metrics.glyph_width(" ")
        return metrics

    def _lookup(self, char: str) -> Optional[float]:
        font = self._font
        if self._is_ttf:
            return font.face.charWidths.get(ord(char))
        enc_name = getattr(font, "encName", None)
        widths = getattr(font, "widths", None)
        if enc_name and widths is not None:
            try:
                encoded = char.encode(enc_name)
            except UnicodeEncodeError:
                return None
            if len(encoded) != 1:
                return None
            return float(widths[encoded[0]])
        return pdfmetrics.stringWidth(char, self.name, CONST_FONT_UNITS_PER_EM)

    def glyph_width(self, char: str) -> float:
        width = self._lookup(char)
        if width is not None:
            return width
        if self.fallback_width is None:
            raise UnsupportedGlyphError(char, self.name)
        logger.debug("字体 %s 缺字 %r，使用回退宽度 %s", self.name, char, self.fallback_width)
        return self.fallback_width


def register_ttf_font(font_name: str, ttf_path: Union[str, Path]) -> str:
    """将 TTF/OTF 字体文件注册到 ReportLab，返回注册名。

    参数：
        font_name: 注册名（后续绘制与度量使用）。
        ttf_path: 字体文件路径。
    """
    path = Path(ttf_path)
    if not path.exists():
        raise FontNotFoundError(str(path))
    pdfmetrics.registerFont(TTFont(font_name, str(path)))
    return font_name


def load_font_metrics(
    font_name: str,
    ttf_path: Optional[Union[str, Path]] = None,
    strict: bool = not CONST_FALLBACK_TO_SPACE_WIDTH,
) -> ReportLabFontMetrics:
    """按名称获取度量源；若给出 `ttf_path` 则先注册该字体文件。

    参数：
        font_name: 字体名。
        ttf_path: 可选的 TTF/OTF 文件路径。
        strict: True 时缺字直接报错，否则以空格宽度替代。
    """
    if ttf_path is not None:
        register_ttf_font(font_name, ttf_path)
    if strict:
        return ReportLabFontMetrics(font_name)
    return ReportLabFontMetrics.with_space_fallback(font_name)


def font_height(font_name: str, font_size: float) -> float:
    """字体行高（上升高度 - 下降深度），单位 pt。"""
    ascent, descent = pdfmetrics.getAscentDescent(font_name, font_size)
    return float(ascent - descent)


__all__ = [
    "FontMetricSource",
    "TableFontMetrics",
    "ReportLabFontMetrics",
    "register_ttf_font",
    "load_font_metrics",
    "font_height",
]
