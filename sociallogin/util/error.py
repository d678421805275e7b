"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings are present but unusable (e.g. wrong database driver)."""

    pass


class DependencyInjectionError(UtilError):
    """No provider implementation matches the requested component."""

    pass
