"""Backend table and per-config registry."""
from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Iterator
from typing import NamedTuple

from ..errors import NoMatchingBackendError, UnknownBackendError
from .base import BaseBackend
from .json_backend import Json5Backend, JsonBackend
from .toml_backend import TomlBackend
from .yaml_backend import YamlBackend

__all__ = [
    "BACKENDS",
    "BackendDescriptor",
    "BackendRegistry",
    "BaseBackend",
    "DEFAULT_BACKENDS",
    "get_backend",
    "suffix_pattern",
]

logger = logging.getLogger(__name__)

Predicate = Callable[[str], bool]

BACKENDS: dict[str, type[BaseBackend]] = {
    JsonBackend.name: JsonBackend,
    Json5Backend.name: Json5Backend,
    YamlBackend.name: YamlBackend,
    TomlBackend.name: TomlBackend,
}

DEFAULT_BACKENDS: tuple[str, ...] = ("json", "json5", "yaml")


def suffix_pattern(suffixes: Iterable[str]) -> re.Pattern[str]:
    """Return a pattern matching filenames that end in one of *suffixes*."""
    return re.compile("(?:" + "|".join(re.escape(s) for s in suffixes) + ")$")


def get_backend(identifier: str) -> BaseBackend:
    try:
        backend_cls = BACKENDS[identifier]
    except KeyError:
        raise UnknownBackendError(identifier) from None
    return backend_cls()


def _as_predicate(test: str | re.Pattern[str] | Predicate) -> Predicate:
    if isinstance(test, str):
        test = re.compile(test)
    if isinstance(test, re.Pattern):
        return lambda filename: test.search(filename) is not None
    if callable(test):
        return test
    raise TypeError(f"Backend predicate must be a pattern or callable, not {test!r}")


class BackendDescriptor(NamedTuple):
    test: Predicate
    backend: BaseBackend


class BackendRegistry:
    """Ordered ``(predicate, backend)`` pairs; the first match wins."""

    def __init__(self, descriptors: Iterable[BackendDescriptor] | None = None) -> None:
        if descriptors is None:
            self._descriptors: list[BackendDescriptor] = []
            for name in DEFAULT_BACKENDS:
                backend = get_backend(name)
                test = _as_predicate(suffix_pattern(backend.suffixes))
                self._descriptors.append(BackendDescriptor(test, backend))
        else:
            self._descriptors = list(descriptors)

    def register(
        self,
        test: str | re.Pattern[str] | Predicate,
        backend: str | BaseBackend,
        *,
        first: bool = False,
    ) -> BackendDescriptor:
        """Add a backend for filenames matching *test*.

        *test* is a regular expression searched in the filename or a callable
        taking the filename. *backend* is an identifier from :data:`BACKENDS`
        or a backend instance. New descriptors are tried after the existing
        ones unless *first* is set.
        """
        if isinstance(backend, str):
            backend = get_backend(backend)
        elif not isinstance(backend, BaseBackend):
            raise TypeError(f"Expected a backend identifier or instance, not {backend!r}")
        descriptor = BackendDescriptor(_as_predicate(test), backend)
        if first:
            self._descriptors.insert(0, descriptor)
        else:
            self._descriptors.append(descriptor)
        logger.debug("registered backend %s (first=%s)", backend.name, first)
        return descriptor

    def resolve(self, filename: str) -> BaseBackend:
        for descriptor in self._descriptors:
            if descriptor.test(filename):
                logger.debug("selected %s backend for %s", descriptor.backend.name, filename)
                return descriptor.backend
        raise NoMatchingBackendError(filename)

    def __iter__(self) -> Iterator[BackendDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)
