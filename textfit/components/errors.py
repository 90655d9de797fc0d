"""
文件路径：textfit/components/errors.py

说明：错误码格式化与度量/分行相关异常，从包入口拆分而来。
异常信息统一为 "[错误码] 描述" 格式，错误码来自 `textfit/variables.py`。
"""

from __future__ import annotations

from typing import Optional

from ..variables import (
    ERR_FONT_NOT_FOUND,
    ERR_INVALID_PARAMETER,
    ERR_UNSUPPORTED_GLYPH,
)


class ErrorHandler:
    """错误处理相关工具。"""

    @staticmethod
    def format_error(err_code: int, message: str) -> str:
        """生成统一错误信息字符串。"""
        return f"[{err_code}] {message}"


class UnsupportedGlyphError(LookupError):
    """字体度量表中没有该字符，且字体源未定义回退宽度。

    属性：
        char: 缺失的字符。
        font_name: 字体名称（可能为 None）。
    """

    code = ERR_UNSUPPORTED_GLYPH

    def __init__(self, char: str, font_name: Optional[str] = None) -> None:
        self.char = char
        self.font_name = font_name
        super().__init__(
            ErrorHandler.format_error(
                self.code, f"字体 {font_name or '<unknown>'} 不支持字符 {char!r}（U+{ord(char):04X}）"
            )
        )


class InvalidParameterError(ValueError):
    """字号或最大行宽等参数非法（必须为正数）。"""

    code = ERR_INVALID_PARAMETER

    def __init__(self, name: str, value: object) -> None:
        self.name = name
        self.value = value
        super().__init__(ErrorHandler.format_error(self.code, f"参数 {name} 必须为正数，当前值：{value!r}"))


class FontNotFoundError(LookupError):
    """字体未在 ReportLab 注册，且未提供可注册的字体文件。"""

    code = ERR_FONT_NOT_FOUND

    def __init__(self, font_name: str) -> None:
        self.font_name = font_name
        super().__init__(ErrorHandler.format_error(self.code, f"未找到字体：{font_name}"))


__all__ = [
    "ErrorHandler",
    "UnsupportedGlyphError",
    "InvalidParameterError",
    "FontNotFoundError",
]
