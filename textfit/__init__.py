"""
文件路径：textfit/__init__.py

textfit：基于字体度量的文本宽度测量与按列宽分行。

常用入口：
    from textfit.components import ReportLabFontMetrics, break_lines, measure

    font = ReportLabFontMetrics("Helvetica")
    lines = break_lines("https://example.com/a/very/long/path", font, 8, 68)
"""

__version__ = "0.3.0"
