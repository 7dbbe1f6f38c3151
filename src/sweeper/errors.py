"""
Exceptions raised by the configuration and layout providers.
"""


class ConfigError(ValueError):
    """Configuration is unreadable, incomplete or out of range."""


class LayoutError(ValueError):
    """A board layout could not be read or failed strict validation."""
