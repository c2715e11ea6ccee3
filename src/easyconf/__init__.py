from .backends import BACKENDS, BackendRegistry, BaseBackend
from .core import Config
from .errors import (
    ConfigDecodeError,
    ConfigLoadError,
    ConfigNotFoundError,
    ConfigWriteError,
    EasyConfError,
    NoFormatSetError,
    NoMatchingBackendError,
    ReadOnlyError,
    RequiredValueMissingError,
)
from .resolver import MISSING, resolve

__all__ = [
    "BACKENDS",
    "BackendRegistry",
    "BaseBackend",
    "Config",
    "ConfigDecodeError",
    "ConfigLoadError",
    "ConfigNotFoundError",
    "ConfigWriteError",
    "EasyConfError",
    "MISSING",
    "NoFormatSetError",
    "NoMatchingBackendError",
    "ReadOnlyError",
    "RequiredValueMissingError",
    "resolve",
]
