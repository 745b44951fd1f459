"""String comparison, searching, splitting and building helpers.

Comparisons follow C conventions: they return the difference between the
first pair of differing characters, with the end of a string counting as
code 0. Searches return an index into the string, or None when nothing is
found.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Tuple, Union

_TRIM_CHARS = " \n\t"


def _code_at(s: str, i: int) -> int:
    return ord(s[i]) if i < len(s) else 0


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first differing character codes, or 0 if equal."""
    for a, b in zip(s1, s2):
        if a != b:
            return ord(a) - ord(b)
    common = min(len(s1), len(s2))
    return _code_at(s1, common) - _code_at(s2, common)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Like strcmp, but looks at no more than the first n characters."""
    if n <= 0:
        return 0
    return strcmp(s1[:n], s2[:n])


def strequ(s1: Optional[str], s2: Optional[str]) -> bool:
    """True when both strings are equal; two missing strings count as equal."""
    if s1 is None and s2 is None:
        return True
    if s1 is None or s2 is None:
        return False
    return strcmp(s1, s2) == 0


def strnequ(s1: Optional[str], s2: Optional[str], n: int) -> bool:
    """True when the first n characters of both strings are equal."""
    if s1 is None and s2 is None:
        return True
    if s1 is None or s2 is None:
        return False
    return strncmp(s1, s2, n) == 0


def strstr(big: str, little: str) -> Optional[int]:
    """Index of the first occurrence of little in big; 0 for an empty needle."""
    index = big.find(little)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of little in big where the match lies within the first length characters."""
    if not little:
        return 0
    if length <= 0:
        return None
    index = big[:length].find(little)
    return None if index < 0 else index


def _search_code(c: Union[str, int]) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if c < 0:
        c += 256
    if c > 255:
        c -= 256
    return c


def strchr(s: str, c: Union[str, int]) -> Optional[int]:
    """Index of the first occurrence of c; code 0 matches the end of the string."""
    code = _search_code(c)
    if code == 0:
        return len(s)
    for index, ch in enumerate(s):
        if ord(ch) == code:
            return index
    return None


def strrchr(s: str, c: Union[str, int]) -> Optional[int]:
    """Index of the last occurrence of c; code 0 matches the end of the string."""
    code = _search_code(c)
    if code == 0:
        return len(s)
    for index in reversed(range(len(s))):
        if ord(s[index]) == code:
            return index
    return None


def strsplit(s: str, sep: str) -> List[str]:
    """Words of s separated by runs of the character sep; empty words are dropped."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def count_words(s: Optional[str], sep: str) -> int:
    """Number of words that strsplit would return; 0 for a missing string."""
    if not s:
        return 0
    return len(strsplit(s, sep))


def strtrim(s: str) -> str:
    """Remove spaces, newlines and tabs from both ends."""
    return s.strip(_TRIM_CHARS)


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one is treated as absent."""
    if s1 is None and s2 is None:
        return None
    if s1 is None:
        return s2
    if s2 is None:
        return s1
    return s1 + s2


def strsub(s: str, start: int, length: int) -> str:
    """The substring of length characters beginning at start."""
    if start < 0 or length < 0 or start + length > len(s):
        raise ValueError(
            f"substring [{start}, {start + length}) is outside a string of length {len(s)}"
        )
    return s[start:start + length]


def strmap(s: str, func: Callable[[str], str]) -> str:
    """Apply func to every character and join the results."""
    return "".join(func(ch) for ch in s)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Apply func to every index and character and join the results."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters including the terminator.

    Returns the new contents and the length the full result would have had.
    """
    length = min(len(dst), max(size, 0))
    if length >= size:
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:max(room, 0)], length + len(src)


def sort_argv(args: Iterable[str]) -> List[str]:
    """Arguments sorted by character code, as strcmp orders them."""
    return sorted(args)