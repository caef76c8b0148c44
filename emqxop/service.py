"""Service template exposing EMQX ports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .meta import ObjectMeta

_LAST_APPLIED = "kubectl.kubernetes.io/last-applied-configuration"


@dataclass
class ServicePort:
    name: str = ""
    port: int = 0
    protocol: str = ""
    target_port: int | str | None = None
    node_port: int = 0


@dataclass
class ServiceSpec:
    type: str = ""
    selector: dict[str, str] = field(default_factory=dict)
    ports: list[ServicePort] = field(default_factory=list)

    def is_zero(self) -> bool:
        return not (self.type or self.selector or self.ports)


@dataclass
class ServiceTemplate:
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: ServiceSpec = field(default_factory=ServiceSpec)

    def default(self, emqx: Any) -> None:
        """Fill metadata, selector and the management port from ``emqx``."""
        self.metadata.namespace = emqx.namespace
        if not self.metadata.name:
            self.metadata.name = emqx.name
        for key, value in (emqx.labels or {}).items():
            self.metadata.labels.setdefault(key, value)
        for key, value in (emqx.annotations or {}).items():
            if key != _LAST_APPLIED:
                self.metadata.annotations.setdefault(key, value)

        self.spec.selector = dict(emqx.labels or {})
        self.merge_ports(
            [
                ServicePort(
                    name="http-management-8081",
                    port=8081,
                    protocol="TCP",
                    target_port=8081,
                )
            ]
        )

    def merge_ports(self, ports: list[ServicePort]) -> None:
        """Append ``ports``, keeping the first port of each name."""
        merged: dict[str, ServicePort] = {}
        for port in [*self.spec.ports, *ports]:
            merged.setdefault(port.name, port)
        self.spec.ports = list(merged.values())

    def is_zero(self) -> bool:
        return self.metadata.is_zero() and self.spec.is_zero()