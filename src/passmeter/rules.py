"""
Built-in rule table shared by the category and message chains.
"""

import re
from enum import Enum
from typing import Callable, Dict, Pattern

MIN_LENGTH = 8

UPPERCASE_RE = re.compile(r'[A-Z]')
LOWERCASE_RE = re.compile(r'[a-z]')
DIGIT_RE = re.compile(r'[0-9]')
REPEATING_RUN_RE = re.compile(r'(.)\1{2,}')

# The category and message chains each carry their own literal.
CATEGORY_SPECIAL_RE = re.compile(r'[!@#$*%^&+=]')
MESSAGE_SPECIAL_RE = re.compile(r'[!@#*$%^&+=]')

REPEATING_CHARS_MESSAGE = "Password contains too many repeating characters"
MISSING_MESSAGE = "N/A"

DEFAULT_MESSAGES: Dict[str, str] = {
    "tooShort": "Password is too short",
    "uppercase": "Password must contain at least one uppercase letter",
    "lowercase": "Password must contain at least one lowercase letter",
    "numeric": "Password must contain at least one numeric digit",
    "specialChar": "Password must contain at least one special character",
    "lengthRequirement": "Password Length must be greater than 8 characters.",
}


class Category(Enum):
    """Coarse strength tier driving the meter."""

    EMPTY = ""
    TOO_SHORT = "Too Short"
    WEAK = "Weak"
    STRONG = "Strong"

    @property
    def label(self) -> str:
        return self.value

    @property
    def percent(self) -> int:
        return _PERCENT[self]


_PERCENT = {
    Category.EMPTY: 0,
    Category.TOO_SHORT: 0,
    Category.WEAK: 50,
    Category.STRONG: 100,
}


def _matches(pattern: Pattern) -> Callable[[str], bool]:
    return lambda password: pattern.search(password) is not None


# Stage predicates, each returning True when the stage passes.
STAGES: Dict[str, Callable[[str], bool]] = {
    "minLength": lambda password: len(password) >= MIN_LENGTH,
    "noRepeatingRun": lambda password: REPEATING_RUN_RE.search(password) is None,
    "uppercase": _matches(UPPERCASE_RE),
    "lowercase": _matches(LOWERCASE_RE),
    "numeric": _matches(DIGIT_RE),
    "specialChar": _matches(MESSAGE_SPECIAL_RE),
    "categorySpecialChar": _matches(CATEGORY_SPECIAL_RE),
}

# Order in which the message chain reports a missing character class.
CHARACTER_CLASS_ORDER = ("uppercase", "lowercase", "numeric", "specialChar")
