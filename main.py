"""
文件路径：main.py

命令行入口：
- 功能：按字体度量测量文本宽度，或按最大行宽分行并逐行输出；可选生成单列预览 PDF。
- 依赖：`textfit/components`、`textfit/processors`、`textfit/variables.py`。

快速使用示例：
    # 1) 按 68pt 列宽、8pt Helvetica 分行
    python main.py --text "https://averylonginternetdnsnamewhich-maybe-breaks-easytable.com" --size 8 --max-width 68

    # 2) 只测量宽度（多行取最宽一行）
    python main.py --text "this is a small text" --measure

    # 3) 从文件读取段落，使用自带 TTF 字体，并生成预览 PDF
    python main.py --text-file notes.txt --font MyFont --ttf fonts/MyFont.ttf --max-width 200 --preview

变量引用说明（来自 textfit/variables.py）：
- STYLE_FONT_NAME, STYLE_FONT_SIZE_DEFAULT, CONST_ENCODING, CONST_FALLBACK_TO_SPACE_WIDTH
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from textfit.components import (
    FileHandler,
    FontNotFoundError,
    InvalidParameterError,
    UnsupportedGlyphError,
    break_lines,
    get_logger,
    load_font_metrics,
    measure,
)
from textfit.processors.engines.reportlab import build_column_pdf
from textfit.variables import (
    CONST_ENCODING,
    CONST_FALLBACK_TO_SPACE_WIDTH,
    STYLE_FONT_NAME,
    STYLE_FONT_SIZE_DEFAULT,
)


logger = get_logger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="文本宽度测量与按列宽分行（基于字体度量）")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", type=str, default=None, help="待处理文本，可包含 \\n 换行")
    source.add_argument("--text-file", dest="text_file", type=Path, default=None, help="从 UTF-8 文本文件读取段落")
    parser.add_argument("--font", type=str, default=STYLE_FONT_NAME, help=f"字体名，默认 {STYLE_FONT_NAME}")
    parser.add_argument("--ttf", type=Path, default=None, help="TTF/OTF 字体文件，将以 --font 名称注册")
    parser.add_argument("--size", type=float, default=STYLE_FONT_SIZE_DEFAULT, help=f"字号（pt），默认 {STYLE_FONT_SIZE_DEFAULT}")
    parser.add_argument("--max-width", dest="max_width", type=float, default=None, help="最大行宽（pt）；分行模式必填")
    parser.add_argument("--measure", action="store_true", help="只输出文本宽度（多行取最宽一行）")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=not CONST_FALLBACK_TO_SPACE_WIDTH,
        help="缺字时报错，而不是按空格宽度替代",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--pdf", type=Path, default=None, help="将分行结果绘制到该 PDF 路径")
    output.add_argument("--preview", action="store_true", help="将分行结果绘制到 output/ 下带时间戳的 PDF")
    args = parser.parse_args(argv)
    if not args.measure and args.max_width is None:
        parser.error("分行模式需要 --max-width")
    return args


def read_text_from_args(args: argparse.Namespace) -> str:
    if args.text_file is not None:
        FileHandler.validate_readable_file(args.text_file)
        return args.text_file.read_text(encoding=CONST_ENCODING)
    return str(args.text)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    text = read_text_from_args(args)

    try:
        font = load_font_metrics(args.font, ttf_path=args.ttf, strict=args.strict)
        if args.measure:
            print(f"{measure(text, font, args.size):.3f}")
            return EXIT_OK
        lines = break_lines(text, font, args.size, args.max_width)
    except (InvalidParameterError, UnsupportedGlyphError, FontNotFoundError) as exc:
        logger.error("处理失败：%s", exc)
        return EXIT_USAGE

    for line in lines:
        print(line)
    logger.info("分行完成：%s 行（font=%s, size=%s, max_width=%s）", len(lines), args.font, args.size, args.max_width)

    pdf_path: Optional[Path] = args.pdf
    if pdf_path is None and args.preview:
        pdf_path = FileHandler.timestamped_output_path(args.text_file)
    if pdf_path is not None:
        build_column_pdf(
            [text],
            pdf_path,
            font_name=args.font,
            font_size=args.size,
            max_width=args.max_width,
            strict=args.strict,
        )
        print(f"预览 PDF 已保存至：{pdf_path}")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
