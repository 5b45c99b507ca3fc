import sys
from io import StringIO
from unittest.mock import call

import pytest

from adapters.text_streams import TextStreamDestination, TextStreamSource
from core.domain.errors import InvalidArgumentError
from core.services.copier import Copier


# --- copy (single character) ---


def test_copy_newline_first_reads_once_and_writes_nothing(source, destination):
    source.read_char.return_value = "\n"

    Copier(source, destination).copy()

    source.read_char.assert_called_once_with()
    destination.write_char.assert_not_called()


def test_copy_writes_characters_until_newline(source, destination):
    source.read_char.side_effect = ["a", "b", "c", "\n"]

    Copier(source, destination).copy()

    assert source.read_char.call_count == 4
    assert destination.write_char.call_args_list == [call("a"), call("b"), call("c")]
    assert call("\n") not in destination.write_char.call_args_list


def test_copy_stops_reading_at_first_newline(source, destination):
    source.read_char.side_effect = ["x", "\n", "y", "\n"]

    Copier(source, destination).copy()

    assert source.read_char.call_count == 2
    destination.write_char.assert_called_once_with("x")


def test_copy_source_error_on_first_read_propagates(source, destination):
    source.read_char.side_effect = Exception("An error occured")

    with pytest.raises(Exception, match="An error occured"):
        Copier(source, destination).copy()

    source.read_char.assert_called_once_with()
    destination.write_char.assert_not_called()


def test_copy_source_error_on_third_read_after_two_writes(source, destination):
    error = OSError("device gone")
    source.read_char.side_effect = ["a", "b", error, "c", "\n"]

    with pytest.raises(OSError) as excinfo:
        Copier(source, destination).copy()

    assert excinfo.value is error
    assert source.read_char.call_count == 3
    assert destination.write_char.call_args_list == [call("a"), call("b")]


def test_copy_long_line_does_not_grow_the_stack():
    length = sys.getrecursionlimit() * 3
    out = StringIO()

    Copier(TextStreamSource(StringIO("x" * length + "\nrest")), TextStreamDestination(out)).copy()

    assert out.getvalue() == "x" * length


# --- copy_multiple (chunked) ---


@pytest.mark.parametrize("max_char_count", [0, -1, -5])
def test_copy_multiple_rejects_counts_below_one(source, destination, max_char_count):
    with pytest.raises(InvalidArgumentError, match="maximum character count must not be less than 1"):
        Copier(source, destination).copy_multiple(max_char_count)

    source.read_chars.assert_not_called()
    destination.write_chars.assert_not_called()


def test_invalid_argument_is_a_value_error(source, destination):
    with pytest.raises(ValueError):
        Copier(source, destination).copy_multiple(0)


def test_copy_multiple_empty_chunk_writes_nothing(source, destination):
    source.read_chars.return_value = []

    Copier(source, destination).copy_multiple(10)

    source.read_chars.assert_called_once_with(10)
    destination.write_chars.assert_not_called()


def test_copy_multiple_leading_newline_writes_nothing(source, destination):
    source.read_chars.return_value = ["\n", "a", "b", "c", "d"]

    Copier(source, destination).copy_multiple(5)

    source.read_chars.assert_called_once_with(5)
    destination.write_chars.assert_not_called()


def test_copy_multiple_truncates_at_newline_and_stops(source, destination):
    source.read_chars.side_effect = [["a", "b", "\n", "c", "d"], ["e"]]

    Copier(source, destination).copy_multiple(5)

    source.read_chars.assert_called_once_with(5)
    destination.write_chars.assert_called_once_with(["a", "b"])


def test_copy_multiple_newline_in_last_position_of_full_chunk_stops(source, destination):
    source.read_chars.side_effect = [["a", "b", "c", "\n"], ["d"]]

    Copier(source, destination).copy_multiple(4)

    assert source.read_chars.call_count == 1
    destination.write_chars.assert_called_once_with(["a", "b", "c"])


def test_copy_multiple_short_chunk_is_written_unmodified(source, destination):
    characters = ["1", "2", "3"]
    source.read_chars.return_value = characters

    Copier(source, destination).copy_multiple(4)

    source.read_chars.assert_called_once_with(4)
    destination.write_chars.assert_called_once_with(characters)


def test_copy_multiple_full_chunk_continues_until_short_chunk(source, destination):
    source.read_chars.side_effect = [["a", "b", "c", "d"], ["a", "b"]]

    Copier(source, destination).copy_multiple(4)

    assert source.read_chars.call_args_list == [call(4), call(4)]
    assert destination.write_chars.call_args_list == [
        call(["a", "b", "c", "d"]),
        call(["a", "b"]),
    ]


def test_copy_multiple_full_chunk_continues_until_empty_chunk(source, destination):
    source.read_chars.side_effect = [["a", "b", "c", "d"], []]

    Copier(source, destination).copy_multiple(4)

    assert source.read_chars.call_count == 2
    destination.write_chars.assert_called_once_with(["a", "b", "c", "d"])


def test_copy_multiple_full_chunk_then_leading_newline(source, destination):
    source.read_chars.side_effect = [["a", "b"], ["\n", "z"], ["q"]]

    Copier(source, destination).copy_multiple(2)

    assert source.read_chars.call_count == 2
    destination.write_chars.assert_called_once_with(["a", "b"])


def test_copy_multiple_accepts_string_chunks(source, destination):
    source.read_chars.side_effect = ["abc", "de\nf"]

    Copier(source, destination).copy_multiple(3)

    assert destination.write_chars.call_args_list == [call("abc"), call("de")]


def test_copy_multiple_source_error_propagates_without_write(source, destination):
    source.read_chars.side_effect = Exception("An error occured")

    with pytest.raises(Exception, match="An error occured"):
        Copier(source, destination).copy_multiple(10)

    source.read_chars.assert_called_once_with(10)
    destination.write_chars.assert_not_called()


def test_copy_multiple_source_error_after_full_chunk(source, destination):
    source.read_chars.side_effect = [["a", "b"], RuntimeError("read failed")]

    with pytest.raises(RuntimeError, match="read failed"):
        Copier(source, destination).copy_multiple(2)

    assert source.read_chars.call_count == 2
    destination.write_chars.assert_called_once_with(["a", "b"])


def test_copy_multiple_long_line_with_real_streams():
    text = "0123456789" * 500 + "\ntail"
    out = StringIO()

    Copier(TextStreamSource(StringIO(text)), TextStreamDestination(out)).copy_multiple(1)

    assert out.getvalue() == "0123456789" * 500
