"""Functional modules loaded into EMQX broker and enterprise nodes."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

_DEFAULT_BROKER_MODULES = (
    ("emqx_mod_acl_internal", True),
    ("emqx_mod_presence", True),
)


@dataclass
class EmqxBrokerModule:
    name: str = ""
    enable: bool = False


@dataclass
class EmqxBrokerModuleList:
    items: list[EmqxBrokerModule] | None = None

    def default(self) -> None:
        """Add the built-in modules that are not listed yet."""
        if self.items is None:
            self.items = []
        for name, enable in _DEFAULT_BROKER_MODULES:
            if self.lookup(name) is None:
                self.items.append(EmqxBrokerModule(name=name, enable=enable))

    def lookup(self, name: str) -> EmqxBrokerModule | None:
        """Return the first module called ``name``, or None."""
        return next((m for m in self.items or () if m.name == name), None)

    def __str__(self) -> str:
        return "".join(
            f"{{{m.name}, {str(m.enable).lower()}}}.\n" for m in self.items or ()
        )


@dataclass
class EmqxEnterpriseModule:
    name: str = ""
    enable: bool = False
    configs: Any = None

    def __post_init__(self) -> None:
        if isinstance(self.configs, (bytes, bytearray, str)):
            self.configs = json.loads(self.configs) if self.configs else None

    def to_dict(self) -> dict:
        """Serialise to the wire form; empty name and false enable are left out."""
        data: dict = {}
        if self.name:
            data["name"] = self.name
        if self.enable:
            data["enable"] = True
        data["configs"] = self.configs
        return data


@dataclass
class EmqxEnterpriseModuleList:
    items: list[EmqxEnterpriseModule] | None = None

    def __str__(self) -> str:
        if self.items is None:
            return ""
        return json.dumps(
            [m.to_dict() for m in self.items],
            separators=(",", ":"),
            ensure_ascii=False,
        )