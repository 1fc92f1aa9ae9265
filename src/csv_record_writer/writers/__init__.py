"""writer 注册表"""
from __future__ import annotations
import importlib

_REGISTRY: dict[str, type] = {}

_BUILTIN_MODULES = [
    "csv_record_writer.writers.csv_writer",
]


def register(name: str):
    def decorator(cls):
        _REGISTRY[name] = cls
        return cls
    return decorator


def discover() -> None:
    """导入内置 writer，确保已注册"""
    for module in _BUILTIN_MODULES:
        importlib.import_module(module)


def get_writer(name: str, **kwargs):
    cls = _REGISTRY.get(name)
    if cls is None:
        raise KeyError(f"未知导出格式: {name}，可用: {', '.join(sorted(_REGISTRY))}")
    return cls(**kwargs)
