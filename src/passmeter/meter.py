"""
Display state for a three-segment strength bar.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .config import MeterOptions
from .password_checker import ClassificationResult, classify
from .rules import Category

ARIA_VALUE_MIN = 0
ARIA_VALUE_MAX = 100

# Number of segments lit for each category.
_LIT_SEGMENTS = {
    Category.EMPTY: 0,
    Category.TOO_SHORT: 1,
    Category.WEAK: 2,
    Category.STRONG: 3,
}


@dataclass(frozen=True)
class MeterState:
    """Everything a front end needs to paint the meter."""
    category: Category
    message: str
    color: str
    segments: Tuple[Optional[str], Optional[str], Optional[str]]
    error_text: Optional[str]

    @property
    def label(self) -> str:
        return self.category.label

    @property
    def percent(self) -> int:
        return self.category.percent

    def aria_attributes(self) -> Dict[str, object]:
        """Attributes for a ``role="progressbar"`` element."""
        return {
            "role": "progressbar",
            "aria-valuenow": self.percent,
            "aria-valuemin": ARIA_VALUE_MIN,
            "aria-valuemax": ARIA_VALUE_MAX,
        }


def segment_colors(category: Category, color: str) -> Tuple[Optional[str], Optional[str], Optional[str]]:
    """Color each lit segment with the current tier color; unlit segments are None."""
    lit = _LIT_SEGMENTS[category]
    return tuple(color if i < lit else None for i in range(3))


def error_text(result: ClassificationResult, options: MeterOptions) -> Optional[str]:
    """A static override wins; otherwise show the message when there is one."""
    if options.error_msg:
        return options.error_msg
    return result.message or None


def build_state(password: str, options: Optional[MeterOptions] = None) -> MeterState:
    """Classify ``password`` and derive the meter's display state."""
    options = options or MeterOptions()
    result = classify(password, options)
    color = options.colors.for_category(result.category)
    return MeterState(
        category=result.category,
        message=result.message,
        color=color,
        segments=segment_colors(result.category, color),
        error_text=error_text(result, options),
    )
