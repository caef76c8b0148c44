import pytest

from emqxop.broker import Emqx, EmqxBroker, EmqxBrokerList, EmqxBrokerSpec
from emqxop.config import EmqxConfig
from emqxop.meta import ObjectMeta
from emqxop.modules import EmqxBrokerModule
from emqxop.names import Names
from emqxop.service import ServiceTemplate
from emqxop.status import Condition, ConditionStatus, ConditionType


@pytest.fixture
def broker():
    return EmqxBroker(
        metadata=ObjectMeta(
            name="emqx",
            namespace="default",
            labels={"foo": "bar"},
            annotations={"foo": "bar"},
        )
    )


def test_to_dict_carries_type_and_metadata(broker):
    data = broker.to_dict()
    assert data["apiVersion"] == "apps.emqx.io/v1beta3"
    assert data["kind"] == "EmqxBroker"
    assert data["metadata"] == broker.metadata.to_dict()


def test_replicas_omitted_when_unset(broker):
    assert "replicas" not in broker.to_dict()["spec"]
    broker.replicas = 3
    assert broker.spec.replicas == 3
    assert broker.to_dict()["spec"]["replicas"] == 3


def test_empty_template_keeps_struct_fields(broker):
    template = broker.to_dict()["spec"]["emqxTemplate"]
    assert template["resources"] == {}
    assert template["serviceTemplate"] == {"metadata": {}, "spec": {}}
    assert "image" not in template


def test_properties_delegate_to_template(broker):
    broker.image = "emqx/emqx:4.4.8"
    broker.username = "admin"
    assert broker.spec.emqx_template.image == "emqx/emqx:4.4.8"
    assert broker.to_dict()["spec"]["emqxTemplate"]["username"] == "admin"


def test_metadata_properties(broker):
    assert broker.name == broker.metadata.name
    assert broker.namespace == broker.metadata.namespace
    assert broker.labels is broker.metadata.labels
    assert isinstance(broker, Emqx) and broker.annotations == {"foo": "bar"}


def test_names_from_broker(broker):
    assert Names(broker).headless_svc() == "emqx-headless"


def test_config_default_uses_broker(broker):
    config = EmqxConfig({"name": "kept"})
    config.default(broker)
    assert config["name"] == "kept"
    assert config["cluster.dns.app"] == broker.name
    assert config["cluster.dns.name"].startswith(Names(broker).headless_svc())


def test_service_template_default_from_broker(broker):
    broker.metadata.annotations[
        "kubectl.kubernetes.io/last-applied-configuration"
    ] = "{}"
    template = ServiceTemplate()
    template.default(broker)
    assert template.metadata.name == broker.name
    assert template.spec.selector == broker.labels
    assert "kubectl.kubernetes.io/last-applied-configuration" not in (
        template.metadata.annotations
    )
    broker.service_template = template
    ports = broker.to_dict()["spec"]["emqxTemplate"]["serviceTemplate"]["spec"]["ports"]
    assert [p["name"] for p in ports] == ["http-management-8081"]


def test_modules_omit_false_enable(broker):
    broker.spec.emqx_template.modules = [
        EmqxBrokerModule(name="foo", enable=True),
        EmqxBrokerModule(name="bar", enable=False),
    ]
    modules = broker.to_dict()["spec"]["emqxTemplate"]["modules"]
    assert modules == [{"name": "foo", "enable": True}, {"name": "bar"}]


def test_config_serialised(broker):
    broker.emqx_config = EmqxConfig({"foo": "bar"})
    assert broker.to_dict()["spec"]["emqxTemplate"]["config"] == {"foo": "bar"}


def test_status_conditions_serialised(broker):
    broker.status.set_condition(
        Condition(type=ConditionType.RUNNING, status=ConditionStatus.TRUE)
    )
    condition = broker.status.conditions[0]
    serialised = broker.to_dict()["status"]["conditions"][0]
    assert serialised["type"] == "Running"
    assert serialised["status"] == "True"
    assert serialised["lastUpdateTime"] == condition.last_update_time
    assert "lastUpdateAt" not in serialised


def test_spec_fields_camel_case():
    spec = EmqxBrokerSpec(node_name="fake-node", tolerations=[{"key": "foo"}])
    data = spec.to_dict()
    assert data["nodeName"] == "fake-node"
    assert data["toleRations"] == [{"key": "foo"}]


def test_list_to_dict(broker):
    listing = EmqxBrokerList(items=[broker, EmqxBroker()])
    data = listing.to_dict()
    assert data["kind"] == "EmqxBrokerList"
    assert len(data["items"]) == 2
    assert data["items"][0] == broker.to_dict()
    assert EmqxBrokerList().to_dict()["items"] == []