"""示例记录类型"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from csv_record_writer.schema import csv_field, csv_record


class Month(Enum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


@csv_record
@dataclass
class Person:
    first_name: str | None = csv_field(1, "First name", default=None)
    last_name: str | None = csv_field(2, "Last name", default=None)
    day_of_birth: int = csv_field(3, "Day of birth", default=0)
    month_of_birth: Month | None = csv_field(4, "Month of birth", default=None)
    year_of_birth: int = csv_field(5, "Year of birth", default=0)


@csv_record
@dataclass
class Student:
    name: str | None = csv_field(1, "Name", default=None)
    score: list[str] = csv_field(2, "Scores", default_factory=list)


@csv_record
@dataclass
class Sample:
    strings: tuple[str, ...] = csv_field(1, "strings", default=())
    doubles: tuple[float, ...] = csv_field(2, "doubles", default=())
    set: set[int] = csv_field(3, "set", default_factory=set)
    map: dict[str, str] = csv_field(4, "map", default_factory=dict)


MODELS: dict[str, type] = {
    "person": Person,
    "student": Student,
    "sample": Sample,
}

__all__ = ["Month", "Person", "Student", "Sample", "MODELS"]
