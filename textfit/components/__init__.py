"""
文件路径：textfit/components/__init__.py

说明：
- 组件包入口：日志、文件处理、错误处理，以及宽度测量/分行/字体度量的聚合导出；
- 业务模块与测试统一使用 `from textfit.components import ...` 导入。
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

from ..variables import (
    PATH_LOGS_DIR,
    PATH_OUTPUT_DIR,
    PATH_LOG_FILE,
    CONST_DEFAULT_PREVIEW_SUFFIX,
    CONST_LOG_FORMAT,
    CONST_LOG_DATEFMT,
    ERR_PATH_NOT_WRITABLE,
    ERR_FILE_NOT_FOUND,
)

# 聚合导出：拆分后的子模块
from .errors import (
    ErrorHandler,
    FontNotFoundError,
    InvalidParameterError,
    UnsupportedGlyphError,
)
from .fonts import (
    FontMetricSource,
    ReportLabFontMetrics,
    TableFontMetrics,
    font_height,
    load_font_metrics,
    register_ttf_font,
)
from .text import (
    BREAK_TIERS,
    BreakTier,
    break_lines,
    does_text_line_fit,
    measure,
    split_input_lines,
)


# =============================
# 日志工具
# =============================
_LOGGER_CONFIGURED: bool = False


def get_logger(name: str) -> logging.Logger:
    """获取 logger，首次调用时配置文件与控制台双输出。

    参数：
        name: 日志记录器名称（一般使用 __name__）。

    返回：
        logging.Logger 对象。
    """
    global _LOGGER_CONFIGURED
    if not _LOGGER_CONFIGURED:
        # 确保日志目录存在
        PATH_LOGS_DIR.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(PATH_LOG_FILE, encoding="utf-8")
        console_handler = logging.StreamHandler()
        logging.basicConfig(
            level=logging.INFO,
            format=CONST_LOG_FORMAT,
            datefmt=CONST_LOG_DATEFMT,
            handlers=[file_handler, console_handler],
        )
        _LOGGER_CONFIGURED = True
    return logging.getLogger(name)


# =============================
# 文件操作
# =============================
class FileHandler:
    """文件与路径相关的通用处理器。"""

    @staticmethod
    def validate_readable_file(path: Path) -> None:
        """校验文件可读。

        异常：
            FileNotFoundError: 文件不存在或不可读。
        """
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(ErrorHandler.format_error(ERR_FILE_NOT_FOUND, f"文件不存在或不可读: {path}"))

    @staticmethod
    def ensure_parent_writable(target: Path) -> None:
        """确保目标文件的父目录可写，不存在则创建。

        异常：
            PermissionError: 目录不可写。
        """
        parent = target.parent
        parent.mkdir(parents=True, exist_ok=True)
        # Windows 上 os.access 可能不可靠，尝试创建临时文件验证
        probe = parent / f".__writable_probe_{int(time.time()*1000)}"
        try:
            with open(probe, "w", encoding="utf-8") as f:  # noqa: P103
                f.write("probe")
        except OSError as exc:
            raise PermissionError(ErrorHandler.format_error(ERR_PATH_NOT_WRITABLE, f"目录不可写: {parent}")) from exc
        probe.unlink(missing_ok=True)

    @staticmethod
    def timestamped_output_path(
        source: Optional[Path],
        suffix: str = CONST_DEFAULT_PREVIEW_SUFFIX,
        output_dir: Optional[Path] = None,
    ) -> Path:
        """生成带时间戳的输出路径，默认位于 output 目录。

        参数：
            source: 源文本文件路径；None 则使用 "textfit" 作为文件名前缀。
            suffix: 输出文件名后缀（默认 "_preview.pdf"）。
            output_dir: 自定义输出目录。

        返回：
            例如 output/notes_20240101_120000_preview.pdf
        """
        target_dir = output_dir if output_dir is not None else PATH_OUTPUT_DIR
        target_dir.mkdir(parents=True, exist_ok=True)
        ts = time.strftime("%Y%m%d_%H%M%S")
        stem = source.stem if source is not None else "textfit"
        return target_dir / f"{stem}_{ts}{suffix}"


# =============================
# 导出声明
# =============================
__all__ = [
    # 日志工具
    "get_logger",
    # 文件操作
    "FileHandler",
    # 错误处理
    "ErrorHandler",
    "UnsupportedGlyphError",
    "InvalidParameterError",
    "FontNotFoundError",
    # 字体度量
    "FontMetricSource",
    "TableFontMetrics",
    "ReportLabFontMetrics",
    "register_ttf_font",
    "load_font_metrics",
    "font_height",
    # 宽度测量与分行
    "BreakTier",
    "BREAK_TIERS",
    "split_input_lines",
    "measure",
    "does_text_line_fit",
    "break_lines",
]
