"""
导出字段声明与解析。

每个记录类型对应一张静态字段表（字段名 → 顺序、表头、取值函数），
在注册时构建一次，之后每次导出直接复用。

    @csv_record
    @dataclass
    class Person:
        first_name: str = csv_field(1, "First name")
        nickname: str = ""          # 未声明，不导出
"""
from __future__ import annotations
import dataclasses
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Callable, Iterable

CSV_METADATA_KEY = "csv"

Accessor = Callable[[Any], Any]


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    order: int
    header: str
    accessor: Accessor

    @property
    def label(self) -> str:
        """表头：未指定时回退到字段名"""
        return self.header or self.name


@dataclass(frozen=True)
class CsvMeta:
    order: int
    header: str = ""


_SCHEMAS: dict[type, list[FieldDescriptor]] = {}


def csv_field(order: int, header: str = "", **kwargs) -> Any:
    """dataclasses.field 的包装，附带导出元数据"""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[CSV_METADATA_KEY] = CsvMeta(order=order, header=header)
    return dataclasses.field(metadata=metadata, **kwargs)


def describe(
    name: str,
    order: int,
    header: str = "",
    accessor: Accessor | None = None,
) -> FieldDescriptor:
    return FieldDescriptor(
        name=name,
        order=order,
        header=header,
        accessor=accessor or attrgetter(name),
    )


def register_schema(record_type: type, descriptors: Iterable[FieldDescriptor]) -> None:
    # sorted 是稳定排序：order 相同的字段保持声明顺序
    _SCHEMAS[record_type] = sorted(descriptors, key=attrgetter("order"))


def _from_dataclass(record_type: type) -> list[FieldDescriptor]:
    descriptors = []
    for f in dataclasses.fields(record_type):
        meta = f.metadata.get(CSV_METADATA_KEY)
        if meta is None:
            continue
        descriptors.append(describe(f.name, meta.order, meta.header))
    return descriptors


def csv_record(cls: type) -> type:
    """类装饰器：在定义时登记 dataclass 的导出字段表"""
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"csv_record 只能用于 dataclass: {cls.__name__}")
    register_schema(cls, _from_dataclass(cls))
    return cls


def resolve(record_type: type) -> list[FieldDescriptor]:
    """
    返回记录类型的导出字段，按 order 升序，同序按声明顺序。

    未登记的 dataclass 在首次解析时按字段元数据登记；
    其他未登记类型没有可导出字段，返回空列表。
    """
    descriptors = _SCHEMAS.get(record_type)
    if descriptors is None:
        if dataclasses.is_dataclass(record_type):
            register_schema(record_type, _from_dataclass(record_type))
            descriptors = _SCHEMAS[record_type]
        else:
            descriptors = []
    return list(descriptors)
