import pytest

from kvargs.exceptions import (
    AmbiguousOptionError,
    EmptyOptionError,
    MissingValueError,
    OptionSyntaxError,
)
from kvargs.parser import ArgumentParser, ParsedArgument, separate_option_from_value


@pytest.mark.parametrize("raw", ["--help", "verbose", "x", "-v", "a b"])
def test_bare_option_has_empty_value(raw):
    result = separate_option_from_value(raw)
    assert result == ParsedArgument(option=raw, value="", raw=raw)
    assert result.is_flag


@pytest.mark.parametrize(
    "raw, option, value",
    [
        ("foo=bar", "foo", "bar"),
        ("count=3", "count", "3"),
        ("path=/tmp/some file", "path", "/tmp/some file"),
        ("--name=value", "--name", "value"),
    ],
)
def test_single_delimiter_splits(raw, option, value):
    result = separate_option_from_value(raw)
    assert result.option == option
    assert result.value == value
    assert not result.is_flag


@pytest.mark.parametrize("raw", ["foo==bar", "a=b=c", "==", "=a=", "x=y="])
def test_repeated_delimiter_is_ambiguous(raw):
    with pytest.raises(AmbiguousOptionError) as excinfo:
        separate_option_from_value(raw)
    assert excinfo.value.raw == raw
    assert raw in str(excinfo.value)


@pytest.mark.parametrize("raw", ["foo=", "="])
def test_trailing_delimiter_is_missing_value(raw):
    with pytest.raises(MissingValueError):
        separate_option_from_value(raw)


def test_empty_string_is_rejected():
    with pytest.raises(EmptyOptionError):
        separate_option_from_value("")


def test_leading_delimiter_passes_through_with_empty_option():
    result = separate_option_from_value("=value")
    assert result.option == ""
    assert result.value == "value"


def test_custom_delimiter():
    assert separate_option_from_value("key:value", ":") == ParsedArgument(
        "key", "value", "key:value"
    )
    # The default delimiter is an ordinary character once another is configured.
    assert separate_option_from_value("a=b", ":").option == "a=b"
    with pytest.raises(OptionSyntaxError):
        separate_option_from_value("a:b:c", ":")


def test_parser_method_uses_configured_delimiter():
    parser = ArgumentParser(delimiter=",")
    result = parser.separate_option_from_value("size,10")
    assert (result.option, result.value) == ("size", "10")


@pytest.mark.parametrize("raw", ["foo==bar", "foo="])
def test_error_message_names_raw_argument_only(raw):
    with pytest.raises(OptionSyntaxError) as excinfo:
        separate_option_from_value(raw)
    assert str(excinfo.value) == f"Invalid argument string: {raw}"
