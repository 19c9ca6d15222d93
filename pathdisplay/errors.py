"""Exceptions raised by pathdisplay."""


class PathDisplayError(Exception):
    """Base class for pathdisplay errors."""


class ConfigurationError(PathDisplayError):
    """A path display configuration could not be interpreted."""
