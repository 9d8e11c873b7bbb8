"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """A configured value cannot be used at runtime.

    Raised when a setting passes validation but the resource it names is
    unusable, e.g. a font path that Pillow cannot open.
    """

    def __init__(self, setting: str, message: str):
        self.setting = setting
        super().__init__(f"{setting}: {message}")
