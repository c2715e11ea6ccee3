from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..errors import ConfigDecodeError, ConfigWriteError, InvalidRootError
from ..fileio import read_text, write_text


class BaseBackend(ABC):
    """Abstract base backend.

    A backend turns one file format into a configuration tree and back.
    Subclasses implement :meth:`decode` and :meth:`encode`; reading and
    writing the file itself is shared here.
    """

    name: str = ""
    suffixes: tuple[str, ...] = ()

    @abstractmethod
    def decode(self, text: str) -> Any:
        pass

    @abstractmethod
    def encode(self, data: Mapping[str, Any], *, compact: bool = False) -> str:
        pass

    def load(self, path: str | Path) -> dict[str, Any]:
        raw = read_text(path)
        if raw.strip() == "":
            return {}
        try:
            data = self.decode(raw)
        except Exception as exc:  # codec specific decoding errors
            raise ConfigDecodeError(f"{path}: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, Mapping):
            raise InvalidRootError(
                f"Root of {self.name} config {str(path)!r} must be a mapping"
            )
        return dict(data)

    def save(self, path: str | Path, data: Mapping[str, Any], *, compact: bool = False) -> None:
        try:
            text = self.encode(data, compact=compact)
        except Exception as exc:  # codec specific encoding errors
            raise ConfigWriteError(f"Cannot serialize config as {self.name}: {exc}") from exc
        write_text(path, text)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
