"""Key casing transform used for attribute, meta and relationship names."""

from __future__ import annotations

from typing import Any, List


def split_words(value: str) -> List[str]:
    """Split ``value`` into words on delimiters and case changes.

    Any non-alphanumeric character is a delimiter. An upper-case letter starts
    a new word when it follows a lower-case letter or a digit, or when it ends
    an acronym (``"XMLHttp"`` -> ``["XML", "Http"]``). Word case is preserved.
    """
    words: List[str] = []
    current: List[str] = []
    for index, char in enumerate(value):
        if not char.isalnum():
            if current:
                words.append("".join(current))
                current = []
            continue
        if current and char.isupper():
            previous = current[-1]
            following = value[index + 1] if index + 1 < len(value) else ""
            if previous.islower() or previous.isdigit() or (previous.isupper() and following.islower()):
                words.append("".join(current))
                current = []
        current.append(char)
    if current:
        words.append("".join(current))
    return words


def camelize(value: Any) -> str:
    """Return ``value`` in lower camel case.

    The first word is lower-cased and every following word gets an upper-case
    first letter; the rest of each word keeps its case so that camelizing an
    already camelized key is a no-op (``"user_ID"`` -> ``"userID"``).
    """
    if not isinstance(value, str):
        value = str(value)
    words = split_words(value)
    if not words:
        return ""
    head, *rest = words
    camelized = head.lower() + "".join(word[:1].upper() + word[1:] for word in rest)
    # case mapping can emit combining marks ("\u0130".lower() is "i\u0307")
    return "".join(char for char in camelized if char.isalnum())


__all__ = ["camelize", "split_words"]
