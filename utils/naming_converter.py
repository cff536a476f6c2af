"""Detect the naming convention of an identifier and convert it to others.

Supported conventions are camelCase, PascalCase, snake_case, kebab-case,
UPPER_SNAKE_CASE and spaced case.  Anything that does not look like one of
those is reported as ``NamingConvention.UNKNOWN``; every function here is
total and never raises for string input.
"""

import re
from enum import Enum


class NamingConvention(Enum):
    CAMEL_CASE = "camelCase"
    PASCAL_CASE = "pascalCase"
    SNAKE_CASE = "snakeCase"
    KEBAB_CASE = "kebabCase"
    UPPER_SNAKE_CASE = "upperSnakeCase"
    SPACED_CASE = "spacedCase"
    UNKNOWN = "unknown"

    @property
    def label(self):
        return CONVENTION_LABELS[self]


CONVENTION_LABELS = {
    NamingConvention.CAMEL_CASE: "Lower camel case (camelCase)",
    NamingConvention.PASCAL_CASE: "Upper camel case (PascalCase)",
    NamingConvention.SNAKE_CASE: "Snake case (snake_case)",
    NamingConvention.KEBAB_CASE: "Kebab case (kebab-case)",
    NamingConvention.UPPER_SNAKE_CASE: "Upper snake case (UPPER_SNAKE_CASE)",
    NamingConvention.SPACED_CASE: "Spaced case (spaced case)",
    NamingConvention.UNKNOWN: "Unknown convention",
}

# Display order, also the key order of convert_all().
TARGET_CONVENTIONS = [
    NamingConvention.CAMEL_CASE,
    NamingConvention.PASCAL_CASE,
    NamingConvention.SNAKE_CASE,
    NamingConvention.KEBAB_CASE,
    NamingConvention.UPPER_SNAKE_CASE,
    NamingConvention.SPACED_CASE,
]

# lower->Upper, and the last capital of an acronym before a capitalized word
CAMEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

SEPARATORS = {
    NamingConvention.SNAKE_CASE: "_",
    NamingConvention.UPPER_SNAKE_CASE: "_",
    NamingConvention.KEBAB_CASE: "-",
    NamingConvention.SPACED_CASE: " ",
}


def convention_label(convention) -> str:
    return CONVENTION_LABELS[as_convention(convention)]


def as_convention(value) -> NamingConvention:
    """Accept either a ``NamingConvention`` or its string value."""
    if isinstance(value, NamingConvention):
        return value
    return NamingConvention(value)


def detect(identifier: str) -> NamingConvention:
    """Classify *identifier*.

    The checks run in a fixed order and the first match wins, so a string
    holding both ``-`` and ``_`` is kebab case.
    """
    if not identifier or not any(
        ch.isupper() or ch in "_- " for ch in identifier
    ):
        return NamingConvention.UNKNOWN

    if "-" in identifier:
        return NamingConvention.KEBAB_CASE

    if " " in identifier:
        return NamingConvention.SPACED_CASE

    if "_" in identifier:
        if all(ch.isupper() for ch in identifier if ch.isalpha()):
            return NamingConvention.UPPER_SNAKE_CASE
        return NamingConvention.SNAKE_CASE

    if identifier[0].isupper():
        return NamingConvention.PASCAL_CASE

    if any(ch.isupper() for ch in identifier[1:]):
        return NamingConvention.CAMEL_CASE

    return NamingConvention.UNKNOWN


def tokenize(identifier: str) -> list:
    """Split *identifier* into words according to its detected convention."""
    if not identifier:
        return []

    convention = detect(identifier)

    if convention in (NamingConvention.CAMEL_CASE, NamingConvention.PASCAL_CASE):
        return CAMEL_BOUNDARY.split(identifier)

    separator = SEPARATORS.get(convention)
    if separator is None:
        return [identifier]
    return [word for word in identifier.split(separator) if word]


def capitalize_word(word):
    return word[:1].upper() + word[1:].lower()


def join_words(words, target):
    if target == NamingConvention.CAMEL_CASE:
        return words[0].lower() + "".join(capitalize_word(w) for w in words[1:])
    if target == NamingConvention.PASCAL_CASE:
        return "".join(capitalize_word(w) for w in words)
    if target == NamingConvention.UPPER_SNAKE_CASE:
        return "_".join(w.upper() for w in words)
    return SEPARATORS[target].join(w.lower() for w in words)


def convert(identifier: str, target) -> str:
    target = as_convention(target)
    words = tokenize(identifier)
    if not words or target == NamingConvention.UNKNOWN:
        return identifier
    return join_words(words, target)


def convert_all(identifier: str) -> dict:
    if not identifier:
        return {}
    return {target: convert(identifier, target) for target in TARGET_CONVENTIONS}


def describe(identifier: str) -> dict:
    """Everything a converter screen shows for *identifier*."""
    detected = detect(identifier)
    conversions = convert_all(identifier)
    return {
        "input": identifier,
        "detected": detected.value,
        "detected_label": detected.label,
        "conversions": [
            {
                "convention": convention.value,
                "label": convention.label,
                "value": value,
            }
            for convention, value in conversions.items()
        ],
    }
