"""
Naming utilities for doclifecycle collections.
"""

import re


_WORD_BOUNDARY_RE = re.compile("((?<=[a-z0-9])[A-Z]|(?!^)[A-Z](?=[a-z]))")
_ES_SUFFIXES = ("s", "x", "z", "ch", "sh")


def camel_to_snake(name: str) -> str:
    return _WORD_BOUNDARY_RE.sub(r"_\1", name).lower()


def pluralize(word: str) -> str:
    """
    Naive English plural used for default collection names.
    """
    if not word:
        return word
    if word.endswith(_ES_SUFFIXES):
        return word + "es"
    if word.endswith("y") and len(word) > 1 and word[-2] not in "aeiou":
        return word[:-1] + "ies"
    return word + "s"


def collection_name_for(model_name: str) -> str:
    """
    ``BlogPost`` -> ``blog_posts``.
    """
    return pluralize(camel_to_snake(model_name))
