"""Encoding-safe terminal output and small text-table rendering for the CLI."""

import sys
from typing import Any, Iterable, Sequence

_DEFAULT_ERRORS = "backslashreplace"

STATUS_MARKS = {
    "pass": "[OK]",
    "fail": "[X]",
    "warn": "[!]",
    "info": "[?]",
}


def _stream_encoding(stream) -> str:
    return getattr(stream, "encoding", None) or "utf-8"


def safe_str(x: Any, encoding: str | None = None, errors: str = _DEFAULT_ERRORS) -> str:
    """Coerce ``x`` to text that can be written with ``encoding`` without raising."""
    if isinstance(x, bytes):
        return x.decode(encoding or "utf-8", errors=errors)

    s = str(x)
    enc = encoding or _stream_encoding(sys.stdout)
    try:
        s.encode(enc)
        return s
    except UnicodeEncodeError:
        return s.encode(enc, errors=errors).decode(enc, errors=errors)
    except LookupError:
        # unknown codec name on an exotic stream
        return s


def safe_print(*args: Any, sep: str = " ", end: str = "\n", file=None, flush: bool = False) -> None:
    """``print`` replacement that never dies on a console with a narrow codepage."""
    stream = file if file is not None else sys.stdout
    encoding = _stream_encoding(stream)
    text = sep.join(safe_str(a, encoding=encoding) for a in args) + end
    try:
        stream.write(text)
    except UnicodeEncodeError:
        stream.write(text.encode(encoding, errors=_DEFAULT_ERRORS).decode(encoding, errors=_DEFAULT_ERRORS))
    if flush:
        stream.flush()


def status_mark(status: str) -> str:
    return STATUS_MARKS.get(status, "[ ]")


def render_table(headers: Sequence[str], rows: Iterable[Sequence[Any]], max_width: int = 38) -> str:
    """Render ``rows`` as a fixed-width text table; long cells are truncated."""
    def _cell(v: Any) -> str:
        s = str(v) if v is not None else ""
        return s if len(s) <= max_width else s[: max_width - 3] + "..."

    body = [[_cell(v) for v in row] for row in rows]
    widths = [len(h) for h in headers]
    for row in body:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    line = "  ".join(h.ljust(widths[i]) for i, h in enumerate(headers))
    out = [line, "-" * len(line)]
    for row in body:
        out.append("  ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)))
    return "\n".join(out)
