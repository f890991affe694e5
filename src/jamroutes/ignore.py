"""Glob matching for ``ignored_file_patterns``.

Patterns follow minimatch conventions, matched against ``/``-separated
paths relative to the app root (e.g. ``routes/admin/page.tsx``):

- ``*`` and ``?`` never cross a ``/``
- ``**`` as a whole segment spans zero or more segments, so
  ``**/ignored/**`` matches ``routes/ignored`` and everything below it
- ``[abc]`` / ``[!abc]`` character classes
- ``{a,b}`` brace alternatives and ``{1..3}`` / ``{a..c}`` ranges
- ``+(a|b)``, ``@(a|b)``, ``?(a|b)``, ``*(a|b)`` and ``!(a|b)`` extglobs
- a leading ``!`` negates the pattern (``!(`` starts an extglob instead)
- a trailing ``/`` only matches paths that end in ``/``
- wildcards never match a leading ``.`` unless the pattern spells it out
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

# One path segment that is not a dotfile
_SEGMENT = r"(?!\.)[^/]+"

_BRACE_RE = re.compile(r"\{([^{}]*)\}")
_NUMERIC_RANGE_RE = re.compile(r"(-?\d+)\.\.(-?\d+)(?:\.\.(-?\d+))?")
_ALPHA_RANGE_RE = re.compile(r"([a-zA-Z])\.\.([a-zA-Z])(?:\.\.(-?\d+))?")

# Extglob type -> regex quantifier; "!" is handled separately
_EXTGLOB_QUANTIFIERS = {"@": "", "?": "?", "+": "+", "*": "*"}


def _stepped(first: int, last: int, step: str | None) -> range:
    size = abs(int(step)) if step else 1
    size = size or 1
    if first <= last:
        return range(first, last + 1, size)
    return range(first, last - 1, -size)


def _is_padded(number: str) -> bool:
    digits = number.lstrip("-")
    return len(digits) > 1 and digits.startswith("0")


def _brace_options(body: str) -> list[str] | None:
    """Options of one brace group, or None when it is literal text."""
    if "," in body:
        return body.split(",")

    numeric = _NUMERIC_RANGE_RE.fullmatch(body)
    if numeric is not None:
        first, last, step = numeric.groups()
        width = max(len(first), len(last)) if _is_padded(first) or _is_padded(last) else 0
        return [str(n).zfill(width) for n in _stepped(int(first), int(last), step)]

    alpha = _ALPHA_RANGE_RE.fullmatch(body)
    if alpha is not None:
        first, last, step = alpha.groups()
        return [chr(n) for n in _stepped(ord(first), ord(last), step)]

    return None


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternatives and ``{1..3}`` ranges, innermost first.

    Groups with a single option such as ``{a}`` stay literal.
    """
    start = 0
    while True:
        match = _BRACE_RE.search(pattern, start)
        if match is None:
            return [pattern]
        options = _brace_options(match.group(1))
        if options is not None:
            break
        start = match.start() + 1

    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for option in options:
        expanded.extend(expand_braces(f"{head}{option}{tail}"))
    return expanded


def _closing_paren(text: str, start: int) -> int:
    """Index of the ``)`` closing the ``(`` at ``start``, or -1."""
    depth = 0
    i = start
    while i < len(text):
        c = text[i]
        if c == "\\":
            i += 2
            continue
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return -1


def _split_alternatives(body: str) -> list[str]:
    """Split an extglob body on top-level ``|``."""
    alternatives: list[str] = []
    current: list[str] = []
    depth = 0
    i = 0
    while i < len(body):
        c = body[i]
        if c == "\\" and i + 1 < len(body):
            current.append(body[i : i + 2])
            i += 2
            continue
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
        elif c == "|" and depth == 0:
            alternatives.append("".join(current))
            current = []
            i += 1
            continue
        current.append(c)
        i += 1
    alternatives.append("".join(current))
    return alternatives


def _translate_class(segment: str, i: int) -> tuple[str, int] | None:
    """Translate the ``[...]`` class opening at ``i``.

    Returns the regex fragment and the index of the closing ``]``, or
    None when the bracket is never closed.  A ``]`` right after the
    opening bracket (or its negation) is a literal member.
    """
    start = i + 1
    negate = start < len(segment) and segment[start] in "!^"
    if negate:
        start += 1
    end = segment.find("]", start + 1)
    if end == -1:
        return None
    body = segment[start:end]
    for special in ("\\", "[", "]"):
        body = body.replace(special, f"\\{special}")
    return f"[{'^/' if negate else ''}{body}]", end


def _translate_body(text: str) -> str:
    """Translate glob text within one segment, without the dotfile guard."""
    out: list[str] = []
    i, n = 0, len(text)
    while i < n:
        c = text[i]
        if c in "!@?+*" and i + 1 < n and text[i + 1] == "(":
            end = _closing_paren(text, i + 1)
            if end != -1:
                alternatives = "|".join(
                    _translate_body(alt) for alt in _split_alternatives(text[i + 2 : end])
                )
                if c == "!":
                    # Anything in this segment that the alternatives plus
                    # the remaining text would not match in full
                    rest = _translate_body(text[end + 1 :])
                    out.append(f"(?:(?!(?:{alternatives}){rest}(?:/|$))[^/]*?){rest}")
                    return "".join(out)
                out.append(f"(?:{alternatives}){_EXTGLOB_QUANTIFIERS[c]}")
                i = end + 1
                continue
        if c == "*":
            # Collapse runs of stars inside a segment
            while i + 1 < n and text[i + 1] == "*" and text[i + 2 : i + 3] != "(":
                i += 1
            out.append(r"[^/]*")
        elif c == "?":
            out.append(r"[^/]")
        elif c == "[":
            translated = _translate_class(text, i)
            if translated is None:
                out.append(re.escape(c))
            else:
                fragment, i = translated
                out.append(fragment)
        elif c == "\\" and i + 1 < n:
            i += 1
            out.append(re.escape(text[i]))
        else:
            out.append(re.escape(c))
        i += 1
    return "".join(out)


def _translate_segment(segment: str) -> str:
    """Translate one non-globstar segment to a regex fragment."""
    guard = "" if segment.startswith(".") else r"(?!\.)"
    return guard + _translate_body(segment)


def translate(pattern: str) -> str:
    """Translate a brace-free glob into a regex for ``re.fullmatch``."""
    parts = [p for p in pattern.split("/") if p not in ("", ".")]
    trailing_slash = pattern.endswith("/") and bool(parts)
    # a/**/**/b is a/**/b
    collapsed: list[str] = []
    for part in parts:
        if part == "**" and collapsed and collapsed[-1] == "**":
            continue
        collapsed.append(part)

    out: list[str] = []
    if collapsed == ["**"]:
        out.append(f"(?:{_SEGMENT}(?:/{_SEGMENT})*)?")
    else:
        last = len(collapsed) - 1
        for i, part in enumerate(collapsed):
            previous_globstar = i > 0 and collapsed[i - 1] == "**"
            if part == "**":
                if i == last:
                    out.append(f"(?:/{_SEGMENT})*")
                else:
                    if i > 0:
                        out.append("/")
                    out.append(f"(?:{_SEGMENT}/)*")
                continue
            if i > 0 and not previous_globstar:
                out.append("/")
            out.append(_translate_segment(part))
    if trailing_slash:
        out.append("/")
    return "".join(out)


@dataclass(frozen=True, slots=True)
class IgnoreMatcher:
    """A compiled ignore pattern."""

    pattern: str
    regexes: tuple[re.Pattern[str], ...]
    negate: bool = False

    @classmethod
    def compile(cls, pattern: str) -> IgnoreMatcher:
        negate = False
        body = pattern
        while body.startswith("!") and not body.startswith("!("):
            negate = not negate
            body = body[1:]
        if body.startswith("#"):
            # minimatch treats comment patterns as matching nothing
            return cls(pattern=pattern, regexes=(), negate=negate)
        regexes = tuple(re.compile(translate(p)) for p in expand_braces(body))
        return cls(pattern=pattern, regexes=regexes, negate=negate)

    def match(self, path: str) -> bool:
        normalized = path.replace("\\", "/").removeprefix("./")
        hit = any(regex.fullmatch(normalized) for regex in self.regexes)
        return hit != self.negate


def build_ignore(patterns: Iterable[str]) -> Callable[[str], bool]:
    """Compile patterns into a ``should_ignore(relative_path)`` predicate."""
    matchers = tuple(IgnoreMatcher.compile(p) for p in patterns)
    if not matchers:
        return _ignore_nothing

    def should_ignore(path: str) -> bool:
        return any(matcher.match(path) for matcher in matchers)

    return should_ignore


def _ignore_nothing(path: str) -> bool:
    return False
