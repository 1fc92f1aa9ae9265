from __future__ import annotations
import re

# "1,234" / "3.14" 这类带分隔符的数字一律加引号，避免表格软件按分隔符拆开
_NUMBER_WITH_SEPARATOR = re.compile(r"[0-9]+[,.][0-9]+")


def needs_quotes(value: str) -> bool:
    return (
        "," in value
        or '"' in value
        or "\n" in value
        or _NUMBER_WITH_SEPARATOR.search(value) is not None
    )


def escape_csv(value: str | None) -> str:
    """
    转义单个单元格。

    触发加引号的条件（任一即可）：
      - 含逗号、双引号或换行
      - 含 "数字 + 逗号/点 + 数字" 的片段，如 "1,234"、"v1.2"
    内部双引号一律加倍。
    """
    if value is None:
        return ""
    escaped = value.replace('"', '""')
    return f'"{escaped}"' if needs_quotes(value) else escaped


def unescape_csv(cell: str) -> str:
    """escape_csv 的逆操作（仅针对单个单元格）"""
    if len(cell) >= 2 and cell.startswith('"') and cell.endswith('"'):
        cell = cell[1:-1]
    return cell.replace('""', '"')
