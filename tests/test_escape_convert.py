from enum import Enum
from csv_record_writer.convert import convert_value
from csv_record_writer.escape import escape_csv, needs_quotes, unescape_csv
from csv_record_writer.models import Month


class Odd(Enum):
    PLAIN = 1


# 名字含逗号的枚举常量只能用函数式 API 构造
Weird = Enum("Weird", [("A,B", 1)])


class Color(str, Enum):
    RED = "r,g"


class Shouty:
    def __str__(self):
        return "x,y"


def test_escape_plain_text_untouched():
    assert escape_csv("Ann") == "Ann"
    assert escape_csv("") == ""
    assert escape_csv("B;2") == "B;2"


def test_escape_none():
    assert escape_csv(None) == ""


def test_escape_comma_and_quote():
    assert escape_csv("A,1") == '"A,1"'
    assert escape_csv('Test"') == '"Test"""'
    assert escape_csv('C"3') == '"C""3"'


def test_escape_newline():
    assert escape_csv("line1\nline2") == '"line1\nline2"'


def test_escape_number_with_separator():
    """带分隔符的数字片段一律加引号，包括版本号等非数值文本"""
    assert escape_csv("1,234") == '"1,234"'
    assert escape_csv("3.14") == '"3.14"'
    assert escape_csv("v1.2.0") == '"v1.2.0"'
    assert escape_csv("abc12.5xyz") == '"abc12.5xyz"'
    # 分隔符两侧必须都有数字
    assert not needs_quotes("1.")
    assert not needs_quotes(".5")
    assert not needs_quotes("a.b")


def test_unescape_recovers_original():
    for original in ["A,1", 'Test"', '"', '""', "1.5", "plain", 'a "quoted" word, here']:
        assert unescape_csv(escape_csv(original)) == original


def test_convert_none():
    assert convert_value(None) == ""


def test_convert_scalars():
    assert convert_value(0) == "0"
    assert convert_value(1990) == "1990"
    assert convert_value("") == ""
    assert convert_value(3.14) == '"3.14"'
    assert convert_value(Shouty()) == '"x,y"'


def test_convert_list_joined_with_semicolon():
    assert convert_value(["1", "5", "3"]) == "1;5;3"
    assert convert_value([]) == ""


def test_convert_elements_escaped_individually():
    assert convert_value(["A,1", "B;2", 'C"3']) == '"A,1";B;2;"C""3"'
    assert convert_value((1.5, 2.0)) == '"1.5";"2.0"'


def test_convert_nested_sequences():
    assert convert_value([["a", "b"], ["c"], []]) == "a;b;c;"
    assert convert_value([None, "x"]) == ";x"


def test_convert_set_and_frozenset():
    assert convert_value({7}) == "7"
    assert sorted(convert_value(frozenset({1, 2, 3})).split(";")) == ["1", "2", "3"]


def test_convert_mapping_keeps_insertion_order():
    assert convert_value({"b": "2", "a": "1"}) == "b:2;a:1"
    assert convert_value({"k": "1,5", "n": None}) == 'k:"1,5";n:'
    assert convert_value({}) == ""


def test_convert_enum_uses_name_without_escaping():
    assert convert_value(Month.JUNE) == "JUNE"
    assert convert_value(Odd.PLAIN) == "PLAIN"
    assert convert_value(Weird["A,B"]) == "A,B"
    # str 混入的枚举同样按常量名输出
    assert convert_value(Color.RED) == "RED"


def test_convert_enum_inside_list():
    assert convert_value([Month.JANUARY, Month.MAY]) == "JANUARY;MAY"


def test_convert_mapping_with_enum_keys_and_values():
    assert convert_value({"m": Month.JUNE}) == "m:JUNE"
    assert convert_value({Month.MAY: "x"}) == "MAY:x"
    # Map 值为容器时按显示形式展开，其中的枚举同样取常量名
    assert convert_value({"ms": [Month.JUNE, Month.MAY]}) == 'ms:"[JUNE, MAY]"'


def test_convert_bytes_as_byte_sequence():
    assert convert_value(b"ab") == "97;98"
    assert convert_value(bytearray(b"\x01")) == "1"
    assert convert_value(b"") == ""
