from emqxop.config import EmqxConfig
from emqxop.meta import ObjectMeta


def _emqx():
    return ObjectMeta(name="emqx", namespace="default")


def test_default_fills_cluster_settings():
    config = EmqxConfig()
    config.default(_emqx())
    assert config["name"] == "emqx"
    assert config["log.to"] == "console"
    assert config["cluster.discovery"] == "dns"
    assert config["cluster.dns.type"] == "srv"
    assert config["cluster.dns.app"] == "emqx"
    assert config["listener.tcp.internal"] == ""


def test_default_dns_name_uses_headless_service():
    config = EmqxConfig()
    config.default(_emqx())
    assert config["cluster.dns.name"] == "emqx-headless.default.svc.cluster.local"


def test_default_keeps_existing_values():
    config = EmqxConfig({"log.to": "file", "foo": "bar"})
    config.default(_emqx())
    assert config["log.to"] == "file"
    assert config["foo"] == "bar"
    assert config["cluster.discovery"] == "dns"


def test_default_is_idempotent():
    config = EmqxConfig()
    config.default(_emqx())
    first = dict(config)
    config.default(_emqx())
    assert dict(config) == first