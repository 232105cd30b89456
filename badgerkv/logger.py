"""Loggers used by the store for its diagnostic messages."""

from __future__ import annotations

import json
import re
import sys
import time
from typing import Any, TextIO

_VERB = re.compile(r"%([-+# 0]*\d*(?:\.\d+)?)([a-zA-Z%])")


def _plain(arg: Any) -> str:
    if arg is None:
        return "<nil>"
    if isinstance(arg, bool):
        return "true" if arg else "false"
    if isinstance(arg, (bytes, bytearray)):
        return "[" + " ".join(str(b) for b in arg) + "]"
    return str(arg)


def _text(arg: Any) -> str:
    if isinstance(arg, (bytes, bytearray)):
        return bytes(arg).decode("utf-8", errors="replace")
    return _plain(arg)


def _render(flags: str, verb: str, arg: Any) -> str:
    try:
        if verb == "v":
            return ("%" + flags.replace("+", "").replace("#", "") + "s") % _plain(arg)
        if verb == "s":
            return ("%" + flags.replace("+", "").replace("#", "") + "s") % _text(arg)
        if verb == "q":
            return json.dumps(_text(arg), ensure_ascii=False)
        if verb == "t":
            return _plain(bool(arg))
        if verb in "xX" and isinstance(arg, (bytes, bytearray, str)):
            data = arg.encode() if isinstance(arg, str) else bytes(arg)
            out = data.hex()
            return out.upper() if verb == "X" else out
        if verb in "dxXobeEfFgG":
            return ("%" + flags + verb) % arg
    except (TypeError, ValueError):
        pass
    return f"%!{verb}({type(arg).__name__}={_plain(arg)})"


def _sprintf(fmt: str, args: tuple[Any, ...]) -> str:
    """Format ``fmt`` with printf-style verbs, including ``%v`` and ``%q``."""
    pending = iter(args)
    out: list[str] = []
    pos = 0
    for match in _VERB.finditer(fmt):
        out.append(fmt[pos:match.start()])
        pos = match.end()
        flags, verb = match.groups()
        if verb == "%":
            out.append("%")
            continue
        try:
            arg = next(pending)
        except StopIteration:
            out.append(f"%!{verb}(MISSING)")
            continue
        out.append(_render(flags, verb, arg))
    out.append(fmt[pos:])
    extra = list(pending)
    if extra:
        out.append(
            "%!(EXTRA " + ", ".join(f"{type(a).__name__}={_plain(a)}" for a in extra) + ")"
        )
    return "".join(out)


class Logger:
    """Writes leveled, formatted messages to a text stream (stderr by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def _emit(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        if not line.endswith("\n"):
            line += "\n"
        stream.write(line)

    def errorf(self, fmt: str, *args: Any) -> None:
        self._emit("ERROR: " + _sprintf(fmt, args))

    def warningf(self, fmt: str, *args: Any) -> None:
        self._emit("WARNING: " + _sprintf(fmt, args))

    def infof(self, fmt: str, *args: Any) -> None:
        self._emit("INFO: " + _sprintf(fmt, args))

    def debugf(self, fmt: str, *args: Any) -> None:
        self._emit("DEBUG: " + _sprintf(fmt, args))


class DefaultLogger(Logger):
    """Logger that prefixes each line with ``badger`` and the local date and time."""

    prefix = "badger "

    def _emit(self, line: str) -> None:
        stamp = time.strftime("%Y/%m/%d %H:%M:%S")
        super()._emit(f"{self.prefix}{stamp} {line}")

    def errorf(self, fmt: str, *args: Any) -> None:
        super().errorf(fmt, *args)

    def warningf(self, fmt: str, *args: Any) -> None:
        super().warningf(fmt, *args)

    def infof(self, fmt: str, *args: Any) -> None:
        super().infof(fmt, *args)

    def debugf(self, fmt: str, *args: Any) -> None:
        super().debugf(fmt, *args)


default_logger = DefaultLogger()