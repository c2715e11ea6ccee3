from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import yaml

from .base import BaseBackend


class _StringKeyLoader(yaml.SafeLoader):
    """Safe loader whose mapping keys are always strings.

    Scalar keys keep their source text, so ``80:`` stays ``"80"`` and
    ``on:`` stays ``"on"`` instead of becoming ``80`` and ``True``.
    """

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[str, Any]:
        self.flatten_mapping(node)
        mapping: dict[str, Any] = {}
        for key_node, value_node in node.value:
            if isinstance(key_node, yaml.ScalarNode):
                key = key_node.value
            else:
                key = str(self.construct_object(key_node, deep=True))
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping


class YamlBackend(BaseBackend):
    """YAML file backend.

    YAML has no dense form, so ``compact`` is accepted and ignored.
    """

    name = "yaml"
    suffixes = (".yaml", ".yml")

    def decode(self, text: str) -> Any:
        return yaml.load(text, Loader=_StringKeyLoader)

    def encode(self, data: Mapping[str, Any], *, compact: bool = False) -> str:
        return yaml.safe_dump(dict(data), sort_keys=False, allow_unicode=True)
