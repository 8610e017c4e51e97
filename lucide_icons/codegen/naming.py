from __future__ import annotations

import keyword

from .errors import InvalidIconNameError

# Characters that only separate words; they never reach the identifier.
SEPARATORS = frozenset("-_ .")


def _is_word_char(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def split_words(stem: str) -> list[str]:
    """
    Split a file stem into words.

    Boundaries are separator characters, a lower-case letter or digit followed
    by a capital, and the last capital of an acronym run when a lower-case
    letter follows it ("XMLHttp" -> "XML", "Http").
    """
    words: list[str] = []
    current: list[str] = []
    for i, ch in enumerate(stem):
        if ch in SEPARATORS:
            if current:
                words.append("".join(current))
                current = []
            continue
        if not _is_word_char(ch):
            raise InvalidIconNameError(stem, f"unsupported character {ch!r}")

        if current and ch.isupper():
            prev = current[-1]
            nxt = stem[i + 1] if i + 1 < len(stem) else ""
            if prev.islower() or prev.isdigit() or (prev.isupper() and nxt.islower()):
                words.append("".join(current))
                current = []
        current.append(ch)

    if current:
        words.append("".join(current))
    return words


def to_upper_camel_case(stem: str) -> str:
    return "".join(w[:1].upper() + w[1:].lower() for w in split_words(stem))


def variant_name(stem: str) -> str:
    """Identifier used for the enum member generated from `stem`."""
    name = to_upper_camel_case(stem)
    if not name:
        raise InvalidIconNameError(stem, "no letters or digits to build an identifier from")
    if name[0].isdigit():
        name = f"N{name}"
    if keyword.iskeyword(name) or not name.isidentifier():
        raise InvalidIconNameError(stem, f"'{name}' is not usable as an identifier")
    return name
