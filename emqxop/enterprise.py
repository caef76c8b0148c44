"""The EmqxEnterprise resource and its licence."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field

from .broker import _EmqxResource, _service_template_to_dict, _set_if
from .broker import _set_if_present, _status_to_dict
from .config import EmqxConfig
from .meta import GROUP_VERSION, ObjectMeta
from .modules import EmqxEnterpriseModule
from .service import ServiceTemplate
from .status import Status


@dataclass
class License:
    """Licence of an EMQX Enterprise cluster, inline or held in a secret."""

    data: bytes = b""
    string_data: str = ""
    secret_name: str = ""

    def is_zero(self) -> bool:
        return not (self.data or self.string_data or self.secret_name)

    def to_dict(self) -> dict:
        """Serialise to the wire form; binary data is base64 encoded."""
        result: dict = {}
        if self.data:
            result["data"] = base64.b64encode(self.data).decode("ascii")
        _set_if(result, "stringData", self.string_data)
        _set_if(result, "secretName", self.secret_name)
        return result


@dataclass
class EmqxEnterpriseTemplate:
    """Settings of the EMQX Enterprise container."""

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
    modules: list[EmqxEnterpriseModule] = field(default_factory=list)
    license: License = field(default_factory=License)

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
        _set_if(data, "modules", [m.to_dict() for m in self.modules])
        data["license"] = self.license.to_dict()
        return data


@dataclass
class EmqxEnterpriseSpec:
    """Desired state of an EmqxEnterprise."""

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
    emqx_template: EmqxEnterpriseTemplate = field(
        default_factory=EmqxEnterpriseTemplate
    )

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


@dataclass
class EmqxEnterprise(_EmqxResource):
    """An EMQX Enterprise cluster resource."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: EmqxEnterpriseSpec = field(default_factory=EmqxEnterpriseSpec)
    status: Status = field(default_factory=Status)
    api_version: str = str(GROUP_VERSION)
    kind: str = "EmqxEnterprise"

    @property
    def license(self) -> License:
        return self.spec.emqx_template.license

    @license.setter
    def license(self, value: License) -> None:
        self.spec.emqx_template.license = value

    @property
    def modules(self) -> list[EmqxEnterpriseModule]:
        return self.spec.emqx_template.modules

    @modules.setter
    def modules(self, value: list[EmqxEnterpriseModule]) -> None:
        self.spec.emqx_template.modules = value

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
class EmqxEnterpriseList:
    """A list of EmqxEnterprise resources."""

    items: list[EmqxEnterprise] = field(default_factory=list)
    api_version: str = str(GROUP_VERSION)
    kind: str = "EmqxEnterpriseList"

    def to_dict(self) -> dict:
        data: dict = {}
        _set_if(data, "apiVersion", self.api_version)
        _set_if(data, "kind", self.kind)
        data["metadata"] = {}
        data["items"] = [item.to_dict() for item in self.items]
        return data