"""Custom exceptions for podfeed."""


class PodfeedError(Exception):
    """Base exception for all podfeed errors."""

    pass


class ConfigError(PodfeedError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""

    pass
