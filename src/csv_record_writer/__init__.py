from csv_record_writer.config import WriterConfig
from csv_record_writer.convert import convert_value
from csv_record_writer.errors import (
    CsvWriterError,
    FieldAccessError,
    PreconditionError,
    ResourceError,
)
from csv_record_writer.escape import escape_csv, unescape_csv
from csv_record_writer.schema import (
    FieldDescriptor,
    csv_field,
    csv_record,
    describe,
    register_schema,
    resolve,
)
from csv_record_writer.writers.csv_writer import CsvWriter

__all__ = [
    "CsvWriter",
    "CsvWriterError",
    "FieldAccessError",
    "FieldDescriptor",
    "PreconditionError",
    "ResourceError",
    "WriterConfig",
    "convert_value",
    "csv_field",
    "csv_record",
    "describe",
    "escape_csv",
    "register_schema",
    "resolve",
    "unescape_csv",
]
