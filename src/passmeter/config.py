"""
Caller-suppliable configuration for the classifier and the meter.

Every table falls back to built-in values for entries the caller leaves
unset, so a partial table is always valid.
"""

import json
import re
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Pattern, Union

from .errors import ConfigurationError, RuleChainError
from .rules import DEFAULT_MESSAGES, MISSING_MESSAGE, Category

DEFAULT_CONFIG_FILE = "passmeter.json"

COLORS = {
    "yellow": "#FFC107",
    "red": "#F44336",
    "green": "#4CAF50",
    "grayLight": "#E0E0E0",
}


def _snake_case(key: str) -> str:
    return re.sub(r'(?<!^)(?=[A-Z])', '_', key).lower()


def _camel_case(name: str) -> str:
    head, *rest = name.split('_')
    return head + ''.join(part.title() for part in rest)


def _table_kwargs(cls, data: Dict[str, Any], what: str) -> Dict[str, Optional[str]]:
    """Normalise camelCase or snake_case keys into ``cls`` field names."""
    if not isinstance(data, dict):
        raise ConfigurationError(f"{what} must be a mapping, got {type(data).__name__}")
    names = {f.name for f in fields(cls)}
    kwargs = {}
    for key, value in data.items():
        name = _snake_case(key)
        if name not in names:
            raise ConfigurationError(f"Unknown {what} key: {key!r}")
        if value is not None and not isinstance(value, str):
            raise ConfigurationError(f"{what} entry {key!r} must be a string")
        kwargs[name] = value
    return kwargs


def _end_of_input(pattern: str) -> str:
    """Make a trailing `$` match only at the very end, never before a final newline."""
    if pattern.endswith("$"):
        escapes = len(pattern[:-1]) - len(pattern[:-1].rstrip("\\"))
        if escapes % 2 == 0:
            return pattern[:-1] + r"\Z"
    return pattern


@dataclass
class MessageTable:
    """Display strings for the default rule chain."""
    too_short: Optional[str] = None
    uppercase: Optional[str] = None
    lowercase: Optional[str] = None
    numeric: Optional[str] = None
    special_char: Optional[str] = None
    length_requirement: Optional[str] = None

    def get(self, key: str) -> str:
        """Return the caller's entry for ``key`` or the built-in default."""
        name = _snake_case(key)
        value = getattr(self, name, None)
        return value or DEFAULT_MESSAGES[_camel_case(name)]

    def to_dict(self) -> Dict[str, str]:
        return {_camel_case(f.name): self.get(f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MessageTable':
        return cls(**_table_kwargs(cls, data, "message table"))


@dataclass
class ColorTable:
    """Bar colors for each tier plus the neutral ``default`` slot."""
    too_short: str = COLORS["yellow"]
    weak: str = COLORS["red"]
    strong: str = COLORS["green"]
    default: str = COLORS["grayLight"]

    def for_category(self, category: Category) -> str:
        if category is Category.TOO_SHORT:
            return self.too_short
        if category is Category.WEAK:
            return self.weak
        if category is Category.STRONG:
            return self.strong
        return self.default

    def to_dict(self) -> Dict[str, str]:
        return {_camel_case(f.name): getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ColorTable':
        kwargs = _table_kwargs(cls, data, "color table")
        return cls(**{name: value for name, value in kwargs.items() if value})


@dataclass
class CustomStage:
    """One caller-supplied stage: a pattern that must match, and its message."""
    pattern: Union[str, Pattern]
    message: str = ""
    source: str = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if isinstance(self.pattern, str):
            self.source = self.pattern
            try:
                self.pattern = re.compile(_end_of_input(self.pattern))
            except re.error as e:
                raise RuleChainError(f"Invalid pattern {self.pattern!r}: {e}") from e
        elif not isinstance(self.pattern, re.Pattern):
            raise RuleChainError(
                f"Stage pattern must be a string or compiled pattern, got {type(self.pattern).__name__}"
            )
        else:
            self.source = self.pattern.pattern
        if self.message is None:
            self.message = ""
        elif not isinstance(self.message, str):
            raise RuleChainError(
                f"Stage message must be a string, got {type(self.message).__name__}"
            )

    def passes(self, password: str) -> bool:
        return self.pattern.search(password) is not None

    @property
    def failure_message(self) -> str:
        return self.message or MISSING_MESSAGE

    def to_dict(self) -> Dict[str, str]:
        return {"regex": self.source, "errorMessage": self.message}

    @classmethod
    def from_dict(cls, data: Any) -> 'CustomStage':
        if isinstance(data, CustomStage):
            return data
        if not isinstance(data, dict):
            raise RuleChainError(f"Stage must be a mapping, got {type(data).__name__}")
        pattern = data.get("regex", data.get("pattern"))
        if pattern is None:
            raise RuleChainError("Stage is missing its 'regex'")
        message = data.get("errorMessage", data.get("message", ""))
        return cls(pattern, message)


@dataclass
class CustomRuleChain:
    """Replacement for the default rules: three stages, always in this order."""
    too_short: CustomStage
    weak: CustomStage
    strong: CustomStage

    STAGE_NAMES = ("too_short", "weak", "strong")

    def stages(self):
        """Yield ``(category, stage)`` pairs in evaluation order."""
        yield Category.TOO_SHORT, self.too_short
        yield Category.WEAK, self.weak
        yield Category.STRONG, self.strong

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {_camel_case(name): getattr(self, name).to_dict() for name in self.STAGE_NAMES}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CustomRuleChain':
        if not isinstance(data, dict):
            raise RuleChainError(f"Custom rule chain must be a mapping, got {type(data).__name__}")
        stages = {}
        for key, value in data.items():
            name = _snake_case(key)
            if name not in cls.STAGE_NAMES:
                raise RuleChainError(f"Unknown custom stage: {key!r}")
            stages[name] = CustomStage.from_dict(value)
        missing = [_camel_case(name) for name in cls.STAGE_NAMES if name not in stages]
        if missing:
            raise RuleChainError(f"Custom rule chain is missing stages: {', '.join(missing)}")
        return cls(**stages)


_OPTION_KEYS = {
    "messages": "messages",
    "errorMessages": "messages",
    "colors": "colors",
    "customRules": "custom_rules",
    "custom_rules": "custom_rules",
    "customValidations": "custom_rules",
    "isCustomValidations": "custom_rules",
    "errorMsg": "error_msg",
    "error_msg": "error_msg",
}


@dataclass
class MeterOptions:
    """Everything a caller may supply alongside the password."""
    messages: MessageTable = field(default_factory=MessageTable)
    colors: ColorTable = field(default_factory=ColorTable)
    custom_rules: Optional[CustomRuleChain] = None
    error_msg: Optional[str] = None

    @property
    def is_custom(self) -> bool:
        return self.custom_rules is not None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "messages": self.messages.to_dict(),
            "colors": self.colors.to_dict(),
        }
        if self.custom_rules is not None:
            data["customValidations"] = self.custom_rules.to_dict()
        if self.error_msg:
            data["errorMsg"] = self.error_msg
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MeterOptions':
        if not isinstance(data, dict):
            raise ConfigurationError(f"Options must be a mapping, got {type(data).__name__}")
        values = {}
        for key, value in data.items():
            if key not in _OPTION_KEYS:
                raise ConfigurationError(f"Unknown option: {key!r}")
            values[_OPTION_KEYS[key]] = value

        options = cls()
        if values.get("messages") is not None:
            options.messages = MessageTable.from_dict(values["messages"])
        if values.get("colors") is not None:
            options.colors = ColorTable.from_dict(values["colors"])
        if values.get("custom_rules") is not None:
            options.custom_rules = CustomRuleChain.from_dict(values["custom_rules"])
        error_msg = values.get("error_msg")
        if error_msg is not None and not isinstance(error_msg, str):
            raise ConfigurationError("errorMsg must be a string")
        options.error_msg = error_msg or None
        return options


def load_options(path: str) -> MeterOptions:
    """Read :class:`MeterOptions` from a JSON file."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
    return MeterOptions.from_dict(data)
