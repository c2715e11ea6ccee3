from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import pyjson5

from .base import BaseBackend


class JsonBackend(BaseBackend):
    """JSON file backend."""

    name = "json"
    suffixes = (".json", ".jsn")

    def decode(self, text: str) -> Any:
        return json.loads(text)

    def encode(self, data: Mapping[str, Any], *, compact: bool = False) -> str:
        if compact:
            return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


class Json5Backend(JsonBackend):
    """JSON5 backend; relaxed on read, writes plain JSON."""

    name = "json5"
    suffixes = (".json5",)

    def decode(self, text: str) -> Any:
        return pyjson5.decode(text)
