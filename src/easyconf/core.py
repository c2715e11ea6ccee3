from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from .backends import BackendDescriptor, BackendRegistry, BaseBackend
from .errors import EasyConfError, NoFormatSetError, ReadOnlyError, RequiredValueMissingError
from .paths import user_config_file
from .resolver import MISSING, KeyPath, describe, resolve, resolve_first

logger = logging.getLogger("easyconf")

Query = str | KeyPath | Sequence[str | KeyPath]


def _label(query: Query) -> str:
    return describe([query] if isinstance(query, (str, tuple)) else query)


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            value = float(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValueError(value)


def _as_float(value: Any) -> float:
    if isinstance(value, bool):
        raise TypeError(value)
    if isinstance(value, (int, float, str)):
        return float(value)
    raise TypeError(value)


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).lower() if isinstance(value, (int, str)) else None
    if text in {"true", "1"}:
        return True
    if text in {"false", "0"}:
        return False
    raise ValueError(value)


class Config:
    """A structured configuration file.

    The file is loaded lazily on first access through the backend whose
    pattern matches the filename::

        config = Config("settings.json", rw=True)
        name = config.get("companies.acme.users.0.name")
        config.set("name", "John Smith")
        config.save()

    ``ro`` disables :meth:`set`; ``rw`` enables :meth:`save`.  ``ro`` wins
    if both are given.  ``compact`` asks for dense output from formats that
    support it (JSON) and is ignored by the others.
    """

    def __init__(
        self,
        filename: str | Path,
        *,
        ro: bool = False,
        rw: bool = False,
        compact: bool = False,
        registry: BackendRegistry | None = None,
    ) -> None:
        self._filename = Path(filename)
        self._ro = bool(ro)
        self._rw = bool(rw) and not self._ro
        self._compact = bool(compact)
        self.registry = registry if registry is not None else BackendRegistry()
        self._backend: BaseBackend | None = None
        self._data: dict[str, Any] | None = None

    @classmethod
    def for_app(cls, app_name: str, filename: str = "config.yaml", **kwargs: Any) -> Config:
        """Return a config for *filename* in the user config dir of *app_name*."""
        return cls(user_config_file(app_name, filename), **kwargs)

    def __repr__(self) -> str:
        mode = "ro" if self._ro else "rw" if self._rw else "default"
        return f"{type(self).__name__}({str(self._filename)!r}, mode={mode})"

    @property
    def filename(self) -> Path:
        return self._filename

    @property
    def ro(self) -> bool:
        return self._ro

    @property
    def rw(self) -> bool:
        return self._rw

    @property
    def compact(self) -> bool:
        return self._compact

    @property
    def format(self) -> str | None:
        """Name of the backend used by the last successful load."""
        return self._backend.name if self._backend is not None else None

    @property
    def loaded(self) -> bool:
        return self._data is not None

    # ----- loading -----

    def register_backend(
        self,
        test: str | re.Pattern[str] | Callable[[str], bool],
        backend: str | BaseBackend,
        *,
        first: bool = False,
    ) -> BackendDescriptor:
        if self.loaded:
            raise EasyConfError("Backends must be registered before the config is loaded")
        return self.registry.register(test, backend, first=first)

    def load(self, filename: str | Path) -> dict[str, Any]:
        """Decode *filename* with the backend the registry selects for it.

        The cached tree and :attr:`format` are left alone; they only follow
        the file this config was created for.
        """
        return self._read(filename)[1]

    def _read(self, filename: str | Path) -> tuple[BaseBackend, dict[str, Any]]:
        backend = self.registry.resolve(str(filename))
        data = backend.load(filename)
        logger.debug("loaded %s using %s backend", filename, backend.name)
        return backend, data

    @property
    def data(self) -> dict[str, Any]:
        if self._data is None:
            self._backend, self._data = self._read(self._filename)
        return self._data

    def reload(self) -> dict[str, Any]:
        self._data = None
        return self.data

    # ----- queries -----

    def get(self, query: Query, *, default: Any = MISSING, required: bool = False) -> Any:
        """Return the value at *query*.

        Nested values use a dotted syntax, so ``"companies.acme.users.0.name"``
        reads ``data["companies"]["acme"]["users"][0]["name"]``.  A list of
        queries is searched in order and the first that exists wins.

        When nothing is found *default* is returned if given, otherwise
        :class:`RequiredValueMissingError` is raised if *required* is set,
        otherwise ``None`` is returned.
        """
        if isinstance(query, (str, tuple)):
            value = resolve(self.data, query)
            attempted = _label(query)
        else:
            queries = list(query)
            _, value = resolve_first(self.data, queries)
            attempted = describe(queries)
        if value is not MISSING:
            return value
        if default is not MISSING:
            return default
        if required:
            raise RequiredValueMissingError(attempted)
        return None

    def has(self, key: str) -> bool:
        return key in self.data

    def __contains__(self, key: object) -> bool:
        return key in self.data

    # ----- typed helper getters -----

    def _typed(self, key: Query, default: Any, convert: Callable[[Any], Any], kind: str) -> Any:
        value = self.get(key, default=MISSING)
        if value is MISSING:
            return default
        if value is None:
            return None
        try:
            return convert(value)
        except (TypeError, ValueError):
            raise TypeError(f"Expected {kind} for {_label(key)}, got {value!r}") from None

    def get_int(self, key: Query, *, default: int | None = None) -> int | None:
        """Return an int value, or *default* when *key* is absent.

        A stored null comes back as ``None``; anything that is not an integral
        number raises ``TypeError``.
        """
        return self._typed(key, default, _as_int, "int")

    def get_float(self, key: Query, *, default: float | None = None) -> float | None:
        return self._typed(key, default, _as_float, "float")

    def get_bool(self, key: Query, *, default: bool | None = None) -> bool | None:
        return self._typed(key, default, _as_bool, "bool")

    # ----- mutation -----

    def set(self, key: str, value: Any) -> None:
        """Set top-level *key* to *value*.

        Dotted keys are stored verbatim; nested assignment is not supported.
        """
        if self._ro:
            raise ReadOnlyError("Attempt to change read-only config")
        self.data[key] = value

    def save(self) -> None:
        """Save back to :attr:`filename`.  Only available with ``rw``."""
        if self._ro or not self._rw:
            raise ReadOnlyError("Attempt to save config without 'rw' mode enabled")
        if self._backend is None or self._data is None:
            raise NoFormatSetError("No format set, cannot save")
        self._backend.save(self._filename, self._data, compact=self._compact)
        logger.debug("saved %s using %s backend", self._filename, self._backend.name)
