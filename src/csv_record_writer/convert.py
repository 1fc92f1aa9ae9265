"""字段值 → CSV 单元格字符串"""
from __future__ import annotations
from collections.abc import Collection, Mapping
from enum import Enum
from typing import Any
from csv_record_writer.escape import escape_csv

ITEM_SEPARATOR = ";"
KEY_VALUE_SEPARATOR = ":"


def _display(value: Any) -> str:
    """Map 键值的显示形式：枚举取常量名，嵌套容器递归展开"""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, Mapping):
        return "{" + ", ".join(f"{_display(k)}={_display(v)}" for k, v in value.items()) + "}"
    if _is_container(value):
        return "[" + ", ".join(_display(item) for item in value) + "]"
    return str(value)


def _is_container(value: Any) -> bool:
    # 字符串本身也是 Collection，按标量处理；bytes 按字节序列展开
    return isinstance(value, Collection) and not isinstance(value, str)


def convert_value(value: Any) -> str:
    """
    按类型分派转换，对任何输入都返回字符串。

    规则（按优先级）：
      None          → ""
      Mapping       → key:value 以 ";" 连接，保持原迭代顺序，枚举键值取常量名
      list/tuple/set/bytes → 元素递归转换后以 ";" 连接
      Enum          → 常量名，不转义
      其余          → str(value) 后转义
    """
    if value is None:
        return ""

    if isinstance(value, Mapping):
        return ITEM_SEPARATOR.join(
            escape_csv(_display(k)) + KEY_VALUE_SEPARATOR + escape_csv(_display(v))
            for k, v in value.items()
        )

    if _is_container(value):
        return ITEM_SEPARATOR.join(convert_value(item) for item in value)

    if isinstance(value, Enum):
        return value.name

    return escape_csv(str(value))
