from __future__ import annotations

"""
pytest 全局配置：将项目根目录加入 sys.path，确保 `from textfit...` 与 `import main` 可被导入。
"""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)


@pytest.fixture
def helvetica():
    from textfit.components import ReportLabFontMetrics

    return ReportLabFontMetrics("Helvetica")


@pytest.fixture
def mono():
    # 每个字符 500 千分单位：字号 10 时恰好 5pt/字符，便于手算
    from textfit.components import TableFontMetrics

    return TableFontMetrics.monospace(500.0)
