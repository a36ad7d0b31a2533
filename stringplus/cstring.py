"""Byte-buffer and NUL-terminated string operations with C library semantics.

Text arguments are ordinary ``str`` objects. As in C, a ``"\\0"`` character
ends a string, so anything after it is ignored. Functions that would return
a pointer into their argument return an index instead, or ``None`` where C
would return a null pointer.
"""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice

__all__ = [
    "memchr",
    "memcmp",
    "memcpy",
    "memset",
    "strncpy",
    "strcpy",
    "strlen",
    "strcmp",
    "strncmp",
    "strcat",
    "strncat",
    "strchr",
    "strrchr",
    "strstr",
    "strpbrk",
    "strcspn",
    "tokenize",
]

_NUL = "\0"


def _cstr(text: str) -> str:
    """Return the part of ``text`` before its first NUL character."""
    return text.split(_NUL, 1)[0]


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    return chr(c)


def _check_length(data, n: int, name: str) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    if n > len(data):
        raise ValueError(f"{name} holds fewer than {n} bytes")


def memchr(data: bytes | bytearray | memoryview, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` in the first ``n`` bytes."""
    _check_length(data, n, "data")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray | memoryview, b: bytes | bytearray | memoryview, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    _check_length(a, n, "a")
    _check_length(b, n, "b")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray | memoryview, n: int) -> bytearray:
    """Copy ``n`` bytes of ``src`` into the start of ``dest`` and return ``dest``."""
    _check_length(dest, n, "dest")
    _check_length(src, n, "src")
    dest[:n] = bytes(src[:n])
    return dest


def memset(dest: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``dest`` with ``c`` and return ``dest``."""
    _check_length(dest, n, "dest")
    dest[:n] = bytes([c & 0xFF]) * n
    return dest


def strncpy(dest: str, src: str, n: int) -> str:
    """Return ``dest`` after copying at most ``n`` characters of ``src`` over it.

    When ``src`` is shorter than ``n`` the result ends with ``src``; otherwise
    the tail of ``dest`` past ``n`` characters is kept.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    src = _cstr(src)
    if len(src) < n:
        return src
    return src[:n] + _cstr(dest)[n:]


def strcpy(dest: str, src: str) -> str:
    """Return the string ``dest`` holds after ``src`` is copied into it."""
    return _cstr(src)


def strlen(text: str) -> int:
    """Return the number of characters before the terminating NUL."""
    return len(_cstr(text))


def _compare(a: Iterator[str], b: Iterator[str]) -> int:
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
        if x == _NUL:
            break
    return 0


def strcmp(a: str, b: str) -> int:
    """Compare two strings; return the code difference at the first mismatch."""
    return _compare(iter(_cstr(a) + _NUL), iter(_cstr(b) + _NUL))


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _compare(islice(_cstr(a) + _NUL, n), islice(_cstr(b) + _NUL, n))


def strcat(dest: str, src: str) -> str:
    """Return ``src`` appended to ``dest``."""
    return _cstr(dest) + _cstr(src)


def strncat(dest: str, src: str, n: int) -> str:
    """Return at most ``n`` characters of ``src`` appended to ``dest``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _cstr(dest) + _cstr(src)[:n]


def strchr(text: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``text``; NUL finds the terminator."""
    text = _cstr(text)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``text``; NUL finds the terminator."""
    text = _cstr(text)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strstr(haystack: str, needle: str) -> int | None:
    """Return the index where ``needle`` first occurs in ``haystack``."""
    index = _cstr(haystack).find(_cstr(needle))
    return None if index < 0 else index


def strpbrk(text: str, accept: str) -> int | None:
    """Return the index of the first character of ``text`` found in ``accept``."""
    accepted = set(_cstr(accept))
    return next((i for i, ch in enumerate(_cstr(text)) if ch in accepted), None)


def strcspn(text: str, reject: str) -> int:
    """Return the length of the leading part of ``text`` free of ``reject`` characters."""
    rejected = set(_cstr(reject))
    text = _cstr(text)
    return next((i for i, ch in enumerate(text) if ch in rejected), len(text))


def tokenize(text: str, delimiters: str) -> Iterator[str]:
    """Yield the non-empty pieces of ``text`` separated by any of ``delimiters``."""
    delims = set(_cstr(delimiters))
    token: list[str] = []
    for ch in _cstr(text):
        if ch in delims:
            if token:
                yield "".join(token)
                token = []
        else:
            token.append(ch)
    if token:
        yield "".join(token)