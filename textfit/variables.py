"""
文件路径：textfit/variables.py

模块职责：
- 统一管理全局跨模块变量，确保模块化、无冲突、可追溯，可复用。
- 变量命名规范：{分类前缀}_{描述性名称}（全大写+下划线）。
  - PATH_：路径相关
  - STYLE_：样式相关
  - CONST_：通用常量
  - ERR_：错误码

使用说明：
- 业务模块严禁定义新的全局变量，必须从本模块导入所需常量。
- 目录路径均使用 pathlib.Path 对象表示，使用时如需字符串请显式 str() 转换。
"""

from pathlib import Path
from typing import Tuple


# =============================
# 路径（PATH_）
# =============================
# 项目根目录：定位到当前文件（variables.py）的上两级目录
PATH_ROOT: Path = Path(__file__).resolve().parents[1]

PATH_OUTPUT_DIR: Path = PATH_ROOT / "output"
PATH_LOGS_DIR: Path = PATH_ROOT / "logs"
PATH_LOG_FILE: Path = PATH_LOGS_DIR / "app.log"  # 应用运行日志


# =============================
# 样式（STYLE_）
# =============================
STYLE_FONT_NAME: str = "Helvetica"  # 默认字体：ReportLab 内置 Standard 14 字体，自带 AFM 宽度表
STYLE_FONT_SIZE_DEFAULT: float = 12.0  # 默认字体大小（pt）
STYLE_LINE_SPACING_RATIO: float = 1.2  # 行距 = 字体高度 * 该倍数（未显式给出行距时）
STYLE_PAGE_MARGIN: float = 36.0  # 预览 PDF 页边距（pt）
STYLE_PARAGRAPH_GAP: float = 6.0  # 预览 PDF 段落间额外留白（pt）


# =============================
# 常量（CONST_）
# =============================
CONST_ENCODING: str = "utf-8"  # 文件读写默认编码

# 字体度量单位：宽度以字号的千分之一表示（AFM/TrueType 度量的通行约定）
CONST_FONT_UNITS_PER_EM: float = 1000.0

# 显式换行：\n 与 \r\n 均视为一次换行
CONST_NEWLINE_PATTERN: str = r"\r?\n"

# 断行分隔符，按优先级：先空白，后标点
CONST_BREAK_WHITESPACE: str = " "
CONST_BREAK_PUNCTUATION: str = ".,/-"

# 强制按字符拆分时追加的续行标记
CONST_CONTINUATION_MARKER: str = "-"

# 缺字时默认以空格宽度替代（False 则抛出 UnsupportedGlyphError）
CONST_FALLBACK_TO_SPACE_WIDTH: bool = True

CONST_DEFAULT_PREVIEW_SUFFIX: str = "_preview.pdf"  # 预览 PDF 文件名后缀
CONST_PAGE_SIZE_DEFAULT: Tuple[float, float] = (595.28, 841.89)  # A4

# 日志格式（供 logging.basicConfig 使用）
CONST_LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
CONST_LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"


# =============================
# 错误码（ERR_）
# =============================
# 1xxx：文件/路径相关
ERR_FILE_NOT_FOUND: int = 1001  # 输入文件不存在
ERR_PATH_NOT_WRITABLE: int = 1003  # 目标路径不可写

# 2xxx：字体/度量相关
ERR_UNSUPPORTED_GLYPH: int = 2101  # 字体度量表中无此字符且未定义回退宽度
ERR_FONT_NOT_FOUND: int = 2102  # 字体未注册且未提供字体文件

# 4xxx：参数/数据相关
ERR_INVALID_PARAMETER: int = 4003  # 字号或行宽非正


# =============================
# 导出声明
# =============================
__all__ = [
    # PATH_
    "PATH_ROOT",
    "PATH_OUTPUT_DIR",
    "PATH_LOGS_DIR",
    "PATH_LOG_FILE",
    # STYLE_
    "STYLE_FONT_NAME",
    "STYLE_FONT_SIZE_DEFAULT",
    "STYLE_LINE_SPACING_RATIO",
    "STYLE_PAGE_MARGIN",
    "STYLE_PARAGRAPH_GAP",
    # CONST_
    "CONST_ENCODING",
    "CONST_FONT_UNITS_PER_EM",
    "CONST_NEWLINE_PATTERN",
    "CONST_BREAK_WHITESPACE",
    "CONST_BREAK_PUNCTUATION",
    "CONST_CONTINUATION_MARKER",
    "CONST_FALLBACK_TO_SPACE_WIDTH",
    "CONST_DEFAULT_PREVIEW_SUFFIX",
    "CONST_PAGE_SIZE_DEFAULT",
    "CONST_LOG_FORMAT",
    "CONST_LOG_DATEFMT",
    # ERR_
    "ERR_FILE_NOT_FOUND",
    "ERR_PATH_NOT_WRITABLE",
    "ERR_UNSUPPORTED_GLYPH",
    "ERR_FONT_NOT_FOUND",
    "ERR_INVALID_PARAMETER",
]
