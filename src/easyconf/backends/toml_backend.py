from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import tomlkit

from .base import BaseBackend


class TomlBackend(BaseBackend):
    """TOML file backend.

    Not registered by default; add it with
    ``config.register_backend(r"\\.toml$", "toml")``.
    """

    name = "toml"
    suffixes = (".toml",)

    def decode(self, text: str) -> Any:
        return tomlkit.parse(text).unwrap()

    def encode(self, data: Mapping[str, Any], *, compact: bool = False) -> str:
        return tomlkit.dumps(dict(data))
