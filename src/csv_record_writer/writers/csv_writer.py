from __future__ import annotations
import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Callable
from csv_record_writer.config import WriterConfig
from csv_record_writer.convert import convert_value
from csv_record_writer.errors import FieldAccessError, ResourceError
from csv_record_writer.escape import escape_csv
from csv_record_writer.schema import FieldDescriptor, resolve
from csv_record_writer.writers import register
from csv_record_writer.writers.base import BaseWriter

logger = logging.getLogger(__name__)

DELIMITER = ","


@register("csv")
class CsvWriter(BaseWriter):
    """
    按字段声明把一批同类型记录写成 CSV。

    写入中途的 I/O 错误或字段读取错误不会抛出：交给 on_error 报告后直接返回，
    已写入的行保留在磁盘上。调用方若需确认完整性，请重新读取文件。
    """

    def __init__(
        self,
        config: WriterConfig | None = None,
        on_error: Callable[[str], None] | None = None,
    ) -> None:
        self.config = config or WriterConfig()
        self.on_error = on_error or logger.error

    @property
    def line_terminator(self) -> str:
        return self.config.line_terminator or os.linesep

    # ── 行渲染 ──────────────────────────────────────────
    @staticmethod
    def header_line(fields: list[FieldDescriptor]) -> str:
        return DELIMITER.join(escape_csv(fd.label) for fd in fields)

    @staticmethod
    def format_row(fields: list[FieldDescriptor], record: Any) -> str:
        cells = []
        for fd in fields:
            try:
                value = fd.accessor(record)
            except Exception as exc:
                raise FieldAccessError(fd.name, exc) from exc
            cells.append(convert_value(value))
        return DELIMITER.join(cells)

    # ── 写文件 ──────────────────────────────────────────
    def write_to_file(self, records: Sequence[Any], destination: str | os.PathLike) -> None:
        records = self.check_records(records)
        self.check_destination(destination)

        fields = resolve(type(records[0]))
        fp = Path(destination)
        eol = self.line_terminator
        written = 0

        try:
            if self.config.create_dirs:
                fp.parent.mkdir(parents=True, exist_ok=True)
            with open(fp, "w", encoding=self.config.encoding, newline="") as f:
                f.write(self.header_line(fields) + eol)
                for record in records:
                    f.write(self.format_row(fields, record) + eol)
                    written += 1
        except (OSError, UnicodeError, LookupError, ResourceError) as exc:
            # LookupError: 未知编码；UnicodeError: 字符无法用所选编码表示
            self.on_error(f"写入文件失败 {fp}: {exc}")
            return

        logger.info("CSV 导出完成: %s (%d 行, %d 列)", fp, written, len(fields))

    def dumps(self, records: Sequence[Any]) -> str:
        """在内存中渲染同样的内容；无目标文件，错误直接抛出"""
        records = self.check_records(records)
        fields = resolve(type(records[0]))
        eol = self.config.line_terminator or "\n"
        lines = [self.header_line(fields)]
        lines.extend(self.format_row(fields, record) for record in records)
        return "".join(line + eol for line in lines)
