class EasyConfError(Exception):
    """Base class for easyconf errors."""


class NoMatchingBackendError(EasyConfError):
    """Raised when no registered backend matches a filename."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"No backend could be found to load {filename!r}")
        self.filename = filename


class UnknownBackendError(EasyConfError, KeyError):
    """Raised when a backend identifier is not in the backend table."""

    def __str__(self) -> str:
        return f"Unknown backend {self.args[0]!r}"


class ConfigLoadError(EasyConfError):
    """Raised when a configuration file cannot be loaded."""


class ConfigNotFoundError(ConfigLoadError, FileNotFoundError):
    """Raised when the configuration file does not exist."""


class ConfigReadError(ConfigLoadError):
    """Raised for IO failures while reading a configuration file."""


class ConfigDecodeError(ConfigLoadError):
    """Raised when a backend fails to parse its file."""


class InvalidRootError(ConfigDecodeError):
    """Raised when a decoded file is not rooted in a mapping."""


class RequiredValueMissingError(EasyConfError, LookupError):
    """Raised when a required value is not present in the config."""

    def __init__(self, query: str) -> None:
        super().__init__(f"Required value {query!r} not found in config")
        self.query = query


class ReadOnlyError(EasyConfError):
    """Raised when attempting to modify or save a read-only config."""


class NoFormatSetError(EasyConfError):
    """Raised when saving before any file has been loaded."""


class ConfigWriteError(EasyConfError):
    """Raised when a configuration file cannot be written."""
