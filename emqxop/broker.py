"""The EmqxBroker resource and the shape shared by EMQX resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from .config import EmqxConfig
from .meta import GROUP_VERSION, ObjectMeta
from .modules import EmqxBrokerModule
from .service import ServicePort, ServiceTemplate
from .status import Condition, EmqxNode, Status


@runtime_checkable
class Emqx(Protocol):
    """What every EMQX resource offers to the code that reconciles it."""

    metadata: ObjectMeta
    status: Status

    @property
    def name(self) -> str: ...

    @property
    def namespace(self) -> str: ...

    @property
    def labels(self) -> dict[str, str]: ...

    @property
    def annotations(self) -> dict[str, str]: ...

    @property
    def replicas(self) -> int | None: ...

    @property
    def image(self) -> str: ...

    @property
    def registry(self) -> str: ...

    @property
    def username(self) -> str: ...

    @property
    def password(self) -> str: ...

    @property
    def emqx_config(self) -> EmqxConfig | None: ...

    @property
    def service_template(self) -> ServiceTemplate: ...


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _set_if(data: dict, key: str, value: Any) -> None:
    """Store ``value`` unless it is empty, as an omitempty field does."""
    if value:
        data[key] = _plain(value)


def _set_if_present(data: dict, key: str, value: Any) -> None:
    """Store ``value`` unless it is None, as an omitempty pointer does."""
    if value is not None:
        data[key] = _plain(value)


def _port_to_dict(port: ServicePort) -> dict:
    data: dict = {}
    _set_if(data, "name", port.name)
    _set_if(data, "protocol", port.protocol)
    data["port"] = port.port
    _set_if_present(data, "targetPort", port.target_port)
    _set_if(data, "nodePort", port.node_port)
    return data


def _service_template_to_dict(template: ServiceTemplate) -> dict:
    spec: dict = {}
    _set_if(spec, "ports", [_port_to_dict(p) for p in template.spec.ports])
    _set_if(spec, "selector", dict(template.spec.selector))
    _set_if(spec, "type", template.spec.type)
    return {"metadata": template.metadata.to_dict(), "spec": spec}


def _condition_to_dict(condition: Condition) -> dict:
    data = {"type": _plain(condition.type), "status": _plain(condition.status)}
    _set_if(data, "lastUpdateTime", condition.last_update_time)
    _set_if(data, "lastTransitionTime", condition.last_transition_time)
    _set_if(data, "reason", condition.reason)
    _set_if(data, "message", condition.message)
    return data


def _node_to_dict(node: EmqxNode) -> dict:
    data: dict = {}
    _set_if(data, "node", node.node)
    _set_if(data, "node_status", node.node_status)
    _set_if(data, "otp_release", node.otp_release)
    _set_if(data, "version", node.version)
    return data


def _status_to_dict(status: Status) -> dict:
    data: dict = {}
    _set_if(data, "conditions", [_condition_to_dict(c) for c in status.conditions])
    _set_if(data, "emqxNodes", [_node_to_dict(n) for n in status.emqx_nodes])
    _set_if(data, "replicas", status.replicas)
    _set_if(data, "readyReplicas", status.ready_replicas)
    return data


def _broker_module_to_dict(module: EmqxBrokerModule) -> dict:
    data: dict = {}
    _set_if(data, "name", module.name)
    _set_if(data, "enable", module.enable)
    return data


@dataclass
class EmqxBrokerTemplate:
    """Settings of the EMQX broker container."""

    registry: str = ""
    image: str = ""
    image_pull_policy: str = ""
    username: str = ""
    password: str = ""
    extra_volumes: list[dict] = field(default_factory=list)
    extra_volume_mounts: list[dict] = field(default_factory=list)
    emqx_config: EmqxConfig | None = None
    args: list[str] = field(default_factory=list)
    security_context: dict | None = None
    resources: dict = field(default_factory=dict)
    readiness_probe: dict | None = None
    liveness_probe: dict | None = None
    startup_probe: dict | None = None
    service_template: ServiceTemplate = field(default_factory=ServiceTemplate)
    acl: list[str] = field(default_factory=list)
    modules: list[EmqxBrokerModule] = field(default_factory=list)

    def to_dict(self) -> dict:
        data: dict = {}
        _set_if(data, "registry", self.registry)
        _set_if(data, "image", self.image)
        _set_if(data, "imagePullPolicy", self.image_pull_policy)
        _set_if(data, "username", self.username)
        _set_if(data, "password", self.password)
        _set_if(data, "extraVolumes", list(self.extra_volumes))
        _set_if(data, "extraVolumeMounts", list(self.extra_volume_mounts))
        _set_if(data, "config", dict(self.emqx_config or {}))
        _set_if(data, "args", list(self.args))
        _set_if_present(data, "securityContext", self.security_context)
        data["resources"] = dict(self.resources)
        _set_if_present(data, "readinessProbe", self.readiness_probe)
        _set_if_present(data, "livenessProbe", self.liveness_probe)
        _set_if_present(data, "startupProbe", self.startup_probe)
        data["serviceTemplate"] = _service_template_to_dict(self.service_template)
        _set_if(data, "acl", list(self.acl))
        _set_if(data, "modules", [_broker_module_to_dict(m) for m in self.modules])
        return data


@dataclass
class EmqxBrokerSpec:
    """Desired state of an EmqxBroker."""

    replicas: int | None = None
    image_pull_secrets: list[dict] = field(default_factory=list)
    persistent: dict = field(default_factory=dict)
    env: list[dict] = field(default_factory=list)
    affinity: dict | None = None
    tolerations: list[dict] = field(default_factory=list)
    node_name: str = ""
    node_selector: dict[str, str] = field(default_factory=dict)
    init_containers: list[dict] = field(default_factory=list)
    extra_containers: list[dict] = field(default_factory=list)
    emqx_template: EmqxBrokerTemplate = field(default_factory=EmqxBrokerTemplate)

    def to_dict(self) -> dict:
        data: dict = {}
        _set_if_present(data, "replicas", self.replicas)
        _set_if(data, "imagePullSecrets", list(self.image_pull_secrets))
        data["persistent"] = dict(self.persistent)
        _set_if(data, "env", list(self.env))
        _set_if_present(data, "affinity", self.affinity)
        _set_if(data, "toleRations", list(self.tolerations))
        _set_if(data, "nodeName", self.node_name)
        _set_if(data, "nodeSelector", dict(self.node_selector))
        _set_if(data, "initContainers", list(self.init_containers))
        _set_if(data, "extraContainers", list(self.extra_containers))
        data["emqxTemplate"] = self.emqx_template.to_dict()
        return data


class _EmqxResource:
    """Accessors shared by resources whose template holds the EMQX settings."""

    metadata: ObjectMeta
    spec: Any

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    @property
    def labels(self) -> dict[str, str]:
        return self.metadata.labels

    @property
    def annotations(self) -> dict[str, str]:
        return self.metadata.annotations

    @property
    def replicas(self) -> int | None:
        return self.spec.replicas

    @replicas.setter
    def replicas(self, value: int | None) -> None:
        self.spec.replicas = value

    @property
    def image(self) -> str:
        return self.spec.emqx_template.image

    @image.setter
    def image(self, value: str) -> None:
        self.spec.emqx_template.image = value

    @property
    def registry(self) -> str:
        return self.spec.emqx_template.registry

    @registry.setter
    def registry(self, value: str) -> None:
        self.spec.emqx_template.registry = value

    @property
    def username(self) -> str:
        return self.spec.emqx_template.username

    @username.setter
    def username(self, value: str) -> None:
        self.spec.emqx_template.username = value

    @property
    def password(self) -> str:
        return self.spec.emqx_template.password

    @password.setter
    def password(self, value: str) -> None:
        self.spec.emqx_template.password = value

    @property
    def emqx_config(self) -> EmqxConfig | None:
        return self.spec.emqx_template.emqx_config

    @emqx_config.setter
    def emqx_config(self, value: EmqxConfig | None) -> None:
        self.spec.emqx_template.emqx_config = value

    @property
    def service_template(self) -> ServiceTemplate:
        return self.spec.emqx_template.service_template

    @service_template.setter
    def service_template(self, value: ServiceTemplate) -> None:
        self.spec.emqx_template.service_template = value


@dataclass
class EmqxBroker(_EmqxResource):
    """An EMQX broker cluster resource."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: EmqxBrokerSpec = field(default_factory=EmqxBrokerSpec)
    status: Status = field(default_factory=Status)
    api_version: str = str(GROUP_VERSION)
    kind: str = "EmqxBroker"

    def to_dict(self) -> dict:
        """Serialise to the wire form of the resource."""
        data: dict = {}
        _set_if(data, "apiVersion", self.api_version)
        _set_if(data, "kind", self.kind)
        data["metadata"] = self.metadata.to_dict()
        data["spec"] = self.spec.to_dict()
        data["status"] = _status_to_dict(self.status)
        return data


@dataclass
class EmqxBrokerList:
    """A list of EmqxBroker resources."""

    items: list[EmqxBroker] = field(default_factory=list)
    api_version: str = str(GROUP_VERSION)
    kind: str = "EmqxBrokerList"

    def to_dict(self) -> dict:
        data: dict = {}
        _set_if(data, "apiVersion", self.api_version)
        _set_if(data, "kind", self.kind)
        data["metadata"] = {}
        data["items"] = [item.to_dict() for item in self.items]
        return data