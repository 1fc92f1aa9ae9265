from __future__ import annotations
import os
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any
from csv_record_writer.errors import PreconditionError


class BaseWriter(ABC):

    @abstractmethod
    def write_to_file(self, records: Sequence[Any], destination: str | os.PathLike) -> None:
        """把同类型记录写入文件（新建或覆盖）"""
        ...

    @staticmethod
    def check_records(records) -> list:
        if records is None:
            raise PreconditionError("数据不能为 None")
        records = list(records)
        if not records:
            raise PreconditionError("数据不能为空")
        return records

    @staticmethod
    def check_destination(destination) -> None:
        # Path("") 会被规范成 "."，同样视为未给出文件名
        if destination is None or os.fspath(destination) in ("", "."):
            raise PreconditionError("文件名不能为空")
