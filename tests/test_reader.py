import io
import math

import pytest

from span.core.errors import StreamReadError
from span.core.reader import iter_numbers, iter_tokens


def test_iter_tokens_splits_lines_and_whitespace():
    assert list(iter_tokens(io.StringIO("1 2\n\n 3\t4\n"))) == ["1", "2", "3", "4"]


def test_iter_numbers_parses_floats():
    assert list(iter_numbers(io.StringIO("1e3\n-2.5\n7"))) == [1000.0, -2.5, 7.0]


def test_iter_numbers_skips_garbage(caplog):
    assert list(iter_numbers(io.StringIO("10\nhello\n80 world\n"))) == [10.0, 80.0]
    assert "'hello'" in caplog.text
    assert "'world'" in caplog.text


def test_iter_numbers_passes_non_finite_through():
    values = list(iter_numbers(io.StringIO("nan inf -inf")))
    assert math.isnan(values[0])
    assert values[1:] == [math.inf, -math.inf]


def test_iter_numbers_is_lazy():
    consumed = []

    def lines():
        for line in ["1\n", "2\n", "3\n"]:
            consumed.append(line)
            yield line

    numbers = iter_numbers(lines())
    assert next(numbers) == 1.0
    assert consumed == ["1\n"]


def test_decode_error_becomes_stream_read_error():
    stream = io.TextIOWrapper(io.BytesIO(b"1\n\xff\xfe\n"), encoding="utf-8")
    with pytest.raises(StreamReadError):
        list(iter_numbers(stream))
