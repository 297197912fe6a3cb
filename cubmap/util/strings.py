"""String helpers: searching, comparing, copying, trimming and splitting."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional

_TERMINATOR = "\0"


def _require_text(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, not {type(value).__name__}")
    return value


def _require_char(value: object, name: str) -> str:
    text = _require_text(value, name)
    if len(text) != 1:
        raise ValueError(f"{name} must be a single character, got {text!r}")
    return text


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _require_text(text, "text")
    _require_char(sep, "sep")
    return [piece for piece in text.split(sep) if piece]


def strchr(text: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or None.

    Searching for the NUL character gives the length of ``text``, the
    position of its terminator.
    """
    _require_text(text, "text")
    _require_char(c, "c")
    if c == _TERMINATOR:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or None.

    Searching for the NUL character gives the length of ``text``.
    """
    _require_text(text, "text")
    _require_char(c, "c")
    if c == _TERMINATOR:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(_require_text(text, "text"))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each character of ``chars`` in place with ``func(index, char)``."""
    for index, ch in enumerate(list(chars)):
        chars[index] = func(index, ch)


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return _require_text(first, "first") + _require_text(second, "second")


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting string and the length that was attempted: the
    original length of ``dst`` plus that of ``src``, or ``size`` plus the
    length of ``src`` when ``dst`` already fills the buffer.
    """
    _require_text(dst, "dst")
    _require_text(src, "src")
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copy and the full length of ``src``. A size of 0 copies
    nothing.
    """
    _require_text(src, "src")
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlen(text: Optional[str]) -> int:
    """Length of ``text``; None counts as empty."""
    if text is None:
        return 0
    return len(_require_text(text, "text"))


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    _require_text(text, "text")
    return "".join(func(index, ch) for index, ch in enumerate(text))


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference of the first differing pair, where the end
    of a string counts as code 0, or 0 when they agree.
    """
    _require_text(first, "first")
    _require_text(second, "second")
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return ord(a) - ord(b)
    compared = min(len(first), len(second), n)
    if compared == n:
        return 0
    a = ord(first[compared]) if compared < len(first) else 0
    b = ord(second[compared]) if compared < len(second) else 0
    return a - b


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first ``little`` lying wholly within the first ``length``
    characters of ``big``, or None. An empty ``little`` is found at 0."""
    _require_text(big, "big")
    _require_text(little, "little")
    if length < 0:
        raise ValueError("length must not be negative")
    if not little:
        return 0
    index = big.find(little, 0, min(length, len(big)))
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    _require_text(text, "text")
    _require_text(charset, "charset")
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``; empty past the end."""
    _require_text(text, "text")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]