"""The EmqxPlugin resource, which loads a plugin into matching EMQX nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .meta import GROUP_VERSION, ObjectMeta


class PluginPhase(str, Enum):
    LOADED = "loaded"


@dataclass
class EmqxPluginSpec:
    plugin_name: str = ""
    selector: dict[str, str] = field(default_factory=dict)
    config: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        data: dict = {}
        if self.plugin_name:
            data["pluginName"] = self.plugin_name
        if self.selector:
            data["selector"] = dict(self.selector)
        if self.config:
            data["config"] = dict(self.config)
        return data


@dataclass
class EmqxPluginStatus:
    phase: PluginPhase | None = None

    def to_dict(self) -> dict:
        return {"phase": self.phase.value} if self.phase else {}


@dataclass
class EmqxPlugin:
    """A plugin to be loaded into the EMQX nodes its selector matches."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: EmqxPluginSpec = field(default_factory=EmqxPluginSpec)
    status: EmqxPluginStatus = field(default_factory=EmqxPluginStatus)
    api_version: str = str(GROUP_VERSION)
    kind: str = "EmqxPlugin"

    def to_dict(self) -> dict:
        """Serialise to the wire form of the resource."""
        data: dict = {}
        if self.api_version:
            data["apiVersion"] = self.api_version
        if self.kind:
            data["kind"] = self.kind
        data["metadata"] = self.metadata.to_dict()
        data["spec"] = self.spec.to_dict()
        data["status"] = self.status.to_dict()
        return data


@dataclass
class EmqxPluginList:
    items: list[EmqxPlugin] = field(default_factory=list)
    api_version: str = str(GROUP_VERSION)
    kind: str = "EmqxPluginList"

    def to_dict(self) -> dict:
        data: dict = {}
        if self.api_version:
            data["apiVersion"] = self.api_version
        if self.kind:
            data["kind"] = self.kind
        data["metadata"] = {}
        data["items"] = [item.to_dict() for item in self.items]
        return data