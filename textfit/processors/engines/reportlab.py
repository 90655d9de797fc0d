"""
文件路径：textfit/processors/engines/reportlab.py

说明：ReportLab 单列预览：将每个段落分行后自上而下绘制，放不下时换页。
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Tuple

from reportlab.pdfgen import canvas

from ...components import FileHandler, font_height, get_logger
from ...variables import (
    CONST_PAGE_SIZE_DEFAULT,
    STYLE_LINE_SPACING_RATIO,
    STYLE_PAGE_MARGIN,
    STYLE_PARAGRAPH_GAP,
)
from ..layout import wrap_text_lines


logger = get_logger(__name__)


def build_column_pdf(
    paragraphs: Iterable[str],
    output_path: Path,
    *,
    font_name: str,
    font_size: float,
    max_width: float,
    line_spacing: Optional[float] = None,
    margin: float = STYLE_PAGE_MARGIN,
    page_size: Tuple[float, float] = CONST_PAGE_SIZE_DEFAULT,
    strict: bool = False,
) -> int:
    """生成单列预览 PDF，返回绘制的行数。

    参数：
        paragraphs: 段落文本序列。
        output_path: 输出 PDF 路径。
        font_name: 已注册的字体名。
        font_size: 字号（pt）。
        max_width: 列宽（pt），即分行的最大行宽。
        line_spacing: 行距（pt）；None 时按字体高度 * STYLE_LINE_SPACING_RATIO。
        margin: 页边距（pt）。
        page_size: 页面尺寸 (宽, 高)。
        strict: True 时缺字直接抛出 UnsupportedGlyphError，与命令行 --strict 一致。
    """
    FileHandler.ensure_parent_writable(output_path)
    page_w, page_h = page_size
    spacing = line_spacing if line_spacing is not None else font_height(font_name, font_size) * STYLE_LINE_SPACING_RATIO

    c = canvas.Canvas(str(output_path), pagesize=(page_w, page_h))
    c.setFont(font_name, font_size)
    top_y = page_h - margin - font_size
    current_y = top_y
    drawn = 0
    pages = 1

    for text in paragraphs:
        for line in wrap_text_lines(font_name=font_name, font_size=font_size, text=text, max_width=max_width, strict=strict):
            if current_y < margin:
                c.showPage()
                c.setFont(font_name, font_size)
                current_y = top_y
                pages += 1
            c.drawString(margin, current_y, line)
            current_y -= spacing
            drawn += 1
        current_y -= STYLE_PARAGRAPH_GAP

    c.showPage()
    c.save()
    logger.info("已生成预览 PDF：%s（%s 行，%s 页）", output_path, drawn, pages)
    return drawn


__all__ = ["build_column_pdf"]
