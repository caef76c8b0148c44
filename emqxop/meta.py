"""API group identity and object metadata shared by the resource types."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class GroupVersion:
    """An API group paired with one of its versions."""

    group: str
    version: str

    def __str__(self) -> str:
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"


GROUP_VERSION = GroupVersion(group="apps.emqx.io", version="v1beta3")


@dataclass
class ObjectMeta:
    """Name, namespace, labels and annotations of a resource."""

    name: str = ""
    namespace: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Serialise to the wire form, leaving out empty fields."""
        data: dict = {}
        if self.name:
            data["name"] = self.name
        if self.namespace:
            data["namespace"] = self.namespace
        if self.labels:
            data["labels"] = dict(self.labels)
        if self.annotations:
            data["annotations"] = dict(self.annotations)
        return data

    def is_zero(self) -> bool:
        return not (self.name or self.namespace or self.labels or self.annotations)