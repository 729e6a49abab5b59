"""Word inflection for labels derived from column and collection names."""

import re

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

_IRREGULAR = {
    "person": "people",
    "man": "men",
    "woman": "women",
    "child": "children",
    "mouse": "mice",
}
_UNCOUNTABLE = {"data", "equipment", "information", "media", "news", "series", "species"}

_PLURAL_RULES = [
    (re.compile(r"(quiz)$", re.I), r"\1zes"),
    (re.compile(r"([^aeiouy]|qu)y$", re.I), r"\1ies"),
    (re.compile(r"(x|ch|ss|sh|z)$", re.I), r"\1es"),
    (re.compile(r"(?:([^f])fe|([lr])f)$", re.I), r"\1\2ves"),
    (re.compile(r"(bu|campu|statu|viru|alia)s$", re.I), r"\1ses"),
    (re.compile(r"s$", re.I), "s"),
    (re.compile(r"$"), "s"),
]


def underscore(word: str) -> str:
    """``BlogPost`` -> ``blog_post``."""
    return _CAMEL_BOUNDARY.sub("_", word).replace("-", "_").lower()


def humanize(word: str) -> str:
    """``blog_post`` -> ``Blog Post``."""
    return " ".join(part[:1].upper() + part[1:] for part in word.replace("_", " ").split(" "))


def pluralize(word: str) -> str:
    if not word:
        return word
    lower = word.lower()
    if lower in _UNCOUNTABLE:
        return word
    if lower in _IRREGULAR:
        plural = _IRREGULAR[lower]
        return word[0] + plural[1:]
    for pattern, replacement in _PLURAL_RULES:
        if pattern.search(word):
            return pattern.sub(replacement, word, count=1)
    return word


def tableize(name: str) -> str:
    """``BlogPost`` -> ``blog_posts``; only the last word is pluralized."""
    head, _, tail = underscore(name).rpartition("_")
    return f"{head}_{pluralize(tail)}" if head else pluralize(tail)
