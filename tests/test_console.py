"""Unit tests for canirun.utils.console — safe output and table rendering."""

import io

import pytest

from canirun.utils.console import render_table, safe_print, safe_str, status_mark


class AsciiStream(io.StringIO):
    encoding = "ascii"

    def write(self, s):
        s.encode("ascii")
        return super().write(s)


class TestSafeStr:
    def test_normal_string(self):
        assert safe_str("hello") == "hello"

    def test_bytes_input(self):
        assert safe_str(b"hello bytes") == "hello bytes"

    def test_non_string(self):
        assert safe_str(42) == "42"
        assert safe_str(None) == "None"

    def test_unencodable_is_escaped(self):
        assert safe_str("Windows® 10", encoding="ascii") == "Windows\\xae 10"

    def test_unknown_codec_passes_through(self):
        assert safe_str("ü", encoding="no-such-codec") == "ü"


class TestSafePrint:
    def test_prints_to_stream(self):
        stream = io.StringIO()
        safe_print("a", "b", "c", file=stream)
        assert stream.getvalue() == "a b c\n"

    def test_custom_separator_and_end(self):
        stream = io.StringIO()
        safe_print("a", "b", sep="-", end="!", file=stream, flush=True)
        assert stream.getvalue() == "a-b!"

    def test_narrow_console(self):
        stream = AsciiStream()
        safe_print("GeForce™ RTX", file=stream)
        assert stream.getvalue() == "GeForce\\u2122 RTX\n"

    def test_unexpected_kwargs_raises(self):
        with pytest.raises(TypeError, match="unexpected"):
            safe_print("x", bad_arg=True)


class TestStatusMark:
    @pytest.mark.parametrize("status,mark", [
        ("pass", "[OK]"), ("fail", "[X]"), ("warn", "[!]"), ("info", "[?]"), ("other", "[ ]"),
    ])
    def test_marks(self, status, mark):
        assert status_mark(status) == mark


class TestRenderTable:
    def test_columns_aligned(self):
        out = render_table(("Component", "Yours"), [("Graphics", "RTX 3070"), ("Storage", None)])
        lines = out.splitlines()
        assert lines[0] == "Component  Yours   "
        assert set(lines[1]) == {"-"}
        assert lines[2] == "Graphics   RTX 3070"
        assert lines[3].rstrip() == "Storage"

    def test_long_cells_truncated(self):
        out = render_table(("A",), [("x" * 50,)], max_width=10)
        assert out.splitlines()[2] == "xxxxxxx..."
