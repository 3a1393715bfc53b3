"""Substitute ``{name}`` placeholders in a filename pattern.

The scanner is deliberately small and strict:

* ``{name}`` is replaced by ``variables[name]``; *name* is every character
  between the braces, taken verbatim, and must not be empty;
* ``{{`` and ``}}`` produce literal ``{`` and ``}``;
* an unmatched ``{``, a lone ``}``, an empty ``{}`` or a ``{`` inside a
  placeholder is a :class:`~exifmatic.utils.errors.PatternError`;
* a placeholder absent from *variables* is a
  :class:`~exifmatic.utils.errors.PatternError` listing every missing name.

Substitution is a single pass; values are inserted as-is and never
re-scanned, so a value containing braces is harmless.
"""

from __future__ import annotations

from typing import Iterator, List, Mapping, Tuple, Union

from .utils.errors import PatternError

__all__ = ["format_pattern", "placeholders"]


class _Placeholder(str):
    """Marker type separating placeholder names from literal chunks."""


_Token = Union[str, _Placeholder]


def _tokenize(pattern: str) -> Iterator[_Token]:
    """Yield literal chunks and :class:`_Placeholder` names from *pattern*.

    Raises:
        PatternError: On malformed braces.
    """
    literal: List[str] = []
    i, size = 0, len(pattern)
    while i < size:
        ch = pattern[i]
        if ch == "{":
            if pattern.startswith("{{", i):
                literal.append("{")
                i += 2
                continue
            end = pattern.find("}", i + 1)
            if end == -1:
                raise PatternError(pattern, position=i, reason=f"unclosed '{{' at {i}")
            name = pattern[i + 1 : end]
            if not name:
                raise PatternError(pattern, position=i, reason=f"empty placeholder at {i}")
            nested = name.find("{")
            if nested != -1:
                pos = i + 1 + nested
                raise PatternError(pattern, position=pos, reason=f"nested '{{' at {pos}")
            if literal:
                yield "".join(literal)
                literal = []
            yield _Placeholder(name)
            i = end + 1
        elif ch == "}":
            if pattern.startswith("}}", i):
                literal.append("}")
                i += 2
                continue
            raise PatternError(pattern, position=i, reason=f"single '}}' at {i}")
        else:
            literal.append(ch)
            i += 1
    if literal:
        yield "".join(literal)


def placeholders(pattern: str) -> List[str]:
    """Return placeholder names used by *pattern*, in order of first use."""
    seen: List[str] = []
    for token in _tokenize(pattern):
        if isinstance(token, _Placeholder) and token not in seen:
            seen.append(str(token))
    return seen


def format_pattern(pattern: str, variables: Mapping[str, str]) -> str:
    """Return *pattern* with every placeholder replaced from *variables*.

    Args:
        pattern: Filename pattern such as ``"{y}{m}{D}_{t}.{e}"``.
        variables: Merged variable mapping.

    Returns:
        The fully substituted string.

    Raises:
        PatternError: When the pattern is malformed or references a name that
            is absent from *variables*.  No partial result is returned.
    """
    tokens: List[Tuple[bool, str]] = [
        (isinstance(token, _Placeholder), str(token)) for token in _tokenize(pattern)
    ]
    missing: List[str] = []
    for is_name, text in tokens:
        if is_name and text not in variables and text not in missing:
            missing.append(text)
    if missing:
        raise PatternError(pattern, missing=missing)
    return "".join(variables[text] if is_name else text for is_name, text in tokens)
