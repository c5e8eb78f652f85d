from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Literal, Union

import pytest

from kvargs.parser.utils import coerce_bool, coerce_enum, coerce_value


class Mode(Enum):
    DEV = "dev"
    PROD = "prod"


class Level(Enum):
    LOW = 1
    HIGH = 2


@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int, 42),
        ("3.5", float, 3.5),
        ("hello", str, "hello"),
        ("yes", bool, True),
        ("Off", bool, False),
    ],
)
def test_coerce_value_basic(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


def test_coerce_bool_rejects_unknown_words():
    with pytest.raises(ValueError):
        coerce_bool("maybe")


def test_union_coercion():
    assert coerce_value("123", int | str) == 123
    assert coerce_value("abc", int | str) == "abc"
    assert coerce_value("123", Union[int, str]) == 123
    with pytest.raises(ValueError) as excinfo:
        coerce_value("abc", int | float)
    assert "could not be coerced" in str(excinfo.value)


def test_literal_coercion():
    assert coerce_value("dev", Literal["dev", "prod"]) == "dev"
    with pytest.raises(ValueError):
        coerce_value("staging", Literal["dev", "prod"])


def test_enum_coercion():
    assert coerce_value("dev", Mode) is Mode.DEV
    assert coerce_value("PROD", Mode) is Mode.PROD
    assert coerce_value("prod", Mode) is Mode.PROD
    assert coerce_enum("2", Level) is Level.HIGH
    assert coerce_enum("low", Level) is Level.LOW
    with pytest.raises(ValueError):
        coerce_value("staging", Mode)


def test_path_coercion():
    result = coerce_value("/tmp/out.txt", Path)
    assert isinstance(result, Path)
    assert str(result) == "/tmp/out.txt"


def test_datetime_coercion():
    result = coerce_value("2023-10-01T13:00:00", datetime)
    assert (result.year, result.month, result.hour) == (2023, 10, 13)
    with pytest.raises(ValueError):
        coerce_value("not-a-date", datetime)


def test_int_failure_is_value_error():
    with pytest.raises(ValueError):
        coerce_value("ten", int)
