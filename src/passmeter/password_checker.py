"""
Password strength classification.

Two independent chains run over the same stage table: one picks the
meter category, the other picks the first unmet requirement to show the
user. They are ordered differently and can disagree; for example
``"Aaaa1111!"`` is STRONG while still reporting repeating characters.

Lengths and repeating runs count Unicode code points: an emoji is one
character here, not the two UTF-16 units a browser's ``length`` reports.
"""

from dataclasses import dataclass
from typing import Optional

from .config import MeterOptions
from .rules import (
    CHARACTER_CLASS_ORDER,
    REPEATING_CHARS_MESSAGE,
    STAGES,
    Category,
)

_DEFAULT_OPTIONS = MeterOptions()


@dataclass(frozen=True)
class ClassificationResult:
    """Category plus the advisory message for one password."""
    category: Category
    message: str = ""


class PasswordChecker:
    """Classify passwords against the default or a custom rule chain."""

    @staticmethod
    def category(password: str, options: Optional[MeterOptions] = None) -> Category:
        """Return the meter category for ``password``."""
        options = options or _DEFAULT_OPTIONS

        if len(password) == 0:
            return Category.EMPTY

        if options.custom_rules is not None:
            for category, stage in options.custom_rules.stages():
                if not stage.passes(password):
                    return category
            return Category.STRONG

        if not STAGES["minLength"](password):
            return Category.TOO_SHORT

        if (STAGES["uppercase"](password)
                and STAGES["numeric"](password)
                and STAGES["lowercase"](password)
                and STAGES["categorySpecialChar"](password)):
            return Category.STRONG
        return Category.WEAK

    @staticmethod
    def message(password: str, options: Optional[MeterOptions] = None) -> str:
        """Return the first unmet requirement for ``password``, or ''."""
        options = options or _DEFAULT_OPTIONS

        if len(password) == 0:
            return ""

        if options.custom_rules is not None:
            for _, stage in options.custom_rules.stages():
                if not stage.passes(password):
                    return stage.failure_message
            return ""

        if not STAGES["minLength"](password):
            return options.messages.get("lengthRequirement")

        if not STAGES["noRepeatingRun"](password):
            return REPEATING_CHARS_MESSAGE

        for key in CHARACTER_CLASS_ORDER:
            if not STAGES[key](password):
                return options.messages.get(key)
        return ""

    @staticmethod
    def check_strength(password: str, options: Optional[MeterOptions] = None) -> ClassificationResult:
        """Classify ``password`` into its category and advisory message."""
        return ClassificationResult(
            category=PasswordChecker.category(password, options),
            message=PasswordChecker.message(password, options),
        )


def classify(password: str, options: Optional[MeterOptions] = None) -> ClassificationResult:
    """Shortcut for :meth:`PasswordChecker.check_strength`."""
    return PasswordChecker.check_strength(password, options)
