"""导出异常"""
from __future__ import annotations


class CsvWriterError(Exception):
    pass


class PreconditionError(CsvWriterError, ValueError):
    """调用参数不合法（空数据 / 空文件名），在任何 I/O 之前抛出"""


class ResourceError(CsvWriterError):
    """写入过程中的失败：由 writer 记录日志后吞掉，不向调用方抛出"""


class FieldAccessError(ResourceError):

    def __init__(self, field_name: str, cause: BaseException):
        super().__init__(f"读取字段 {field_name} 失败: {cause}")
        self.field_name = field_name
