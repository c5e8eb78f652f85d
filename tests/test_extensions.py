import io
from enum import Enum

import pytest
from rich.console import Console

from kvargs import ArgumentParser, OutcomeKind, ParserExtension
from kvargs.exceptions import KvargsError
from kvargs.extensions import CallbackExtension, NullExtension, OptionTable


class Color(Enum):
    RED = "red"
    BLUE = "blue"


@pytest.fixture
def options():
    table = OptionTable()
    table.add_option("name", help="who to greet", default="world")
    table.add_option("count", help="how many times", type=int, default=1)
    table.add_option("verbose", help="chatty output", type=bool, default=False)
    table.add_option("color", type=Color, default=Color.RED)
    table.add_option("size", choices=["s", "m", "l"])
    return table


def test_extensions_satisfy_protocol(options):
    assert isinstance(options, ParserExtension)
    assert isinstance(NullExtension(), ParserExtension)
    assert isinstance(CallbackExtension(lambda o, v: True), ParserExtension)


def test_null_extension():
    extension = NullExtension()
    assert extension.handle_option("anything", "1") is False
    assert extension.describe_usage() == ""


def test_callback_extension():
    seen = {}

    def handle(option, value):
        if option != "key":
            return False
        seen[option] = value
        return True

    extension = CallbackExtension(handle, lambda: "  key=<VALUE>\n")
    assert extension.handle_option("key", "v") is True
    assert extension.handle_option("other", "v") is False
    assert seen == {"key": "v"}
    assert extension.describe_usage() == "  key=<VALUE>\n"
    assert CallbackExtension(handle).describe_usage() == ""


def test_callback_extension_requires_callables():
    with pytest.raises(TypeError):
        CallbackExtension("not callable")
    with pytest.raises(TypeError):
        CallbackExtension(lambda o, v: True, "not callable")


def test_option_table_defaults(options):
    assert options.as_dict() == {
        "name": "world",
        "count": 1,
        "verbose": False,
        "color": Color.RED,
        "size": None,
    }
    assert options.get("size", "m") == "m"


def test_option_table_coerces_values(options):
    assert options.handle_option("count", "3") is True
    assert options.handle_option("color", "blue") is True
    assert options.handle_option("verbose", "") is True
    assert options.get("count") == 3
    assert options.get("color") is Color.BLUE
    assert options.get("verbose") is True


def test_option_table_bool_accepts_explicit_value(options):
    assert options.handle_option("verbose", "off") is True
    assert options.get("verbose") is False


def test_option_table_rejects_bad_values(options):
    assert options.handle_option("count", "three") is False
    assert options.handle_option("count", "") is False
    assert options.handle_option("size", "xl") is False
    assert options.handle_option("missing", "1") is False
    assert options.get("count") == 1
    assert options.get("size") is None


def test_option_table_registration_errors(options):
    with pytest.raises(KvargsError):
        options.add_option("name")
    with pytest.raises(KvargsError):
        options.add_option("")
    with pytest.raises(KvargsError):
        options.add_option("a=b")
    with pytest.raises(KvargsError):
        options.add_option("--help")


def test_option_table_usage(options):
    assert options.describe_usage() == (
        "  name=<STR>\n"
        "                       who to greet\n"
        "  count=<INT>\n"
        "                       how many times\n"
        "  verbose[=<BOOL>]\n"
        "                       chatty output\n"
        "  color=<red|blue>\n"
        "  size=<s|m|l>\n"
    )


def test_option_table_usage_uses_its_delimiter():
    table = OptionTable(delimiter=":")
    table.add_option("port", type=int)
    assert table.describe_usage() == "  port:<INT>\n"


def test_option_table_with_parser(options):
    output = io.StringIO()
    parser = ArgumentParser(
        extension=options, console=Console(file=output, color_system=None)
    )
    outcome = parser.parse(["greet", "name=Ada", "count=2", "verbose", "size=m"])
    assert outcome.kind == OutcomeKind.SUCCESS
    assert options.as_dict() == {
        "name": "Ada",
        "count": 2,
        "verbose": True,
        "color": Color.RED,
        "size": "m",
    }
    assert output.getvalue() == ""


def test_option_table_bad_value_is_reported_by_parser(options):
    output = io.StringIO()
    parser = ArgumentParser(
        extension=options, console=Console(file=output, color_system=None)
    )
    outcome = parser.parse(["greet", "count=many"])
    assert outcome.kind == OutcomeKind.FATAL
    text = output.getvalue()
    assert text.startswith("ERROR: Unsupported option: count\n")
    assert "  count=<INT>\n" in text
