"""
Custom exceptions for passmeter.
"""

class PassmeterError(Exception):
    """Base exception for passmeter."""
    pass

class ConfigurationError(PassmeterError):
    """Malformed message, color or option configuration."""
    pass

class RuleChainError(ConfigurationError):
    """Custom rule chain is incomplete or has an invalid pattern."""
    pass

class ClipboardError(PassmeterError):
    """Clipboard could not be read."""
    pass
