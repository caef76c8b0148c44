from emqxop.modules import (
    EmqxBrokerModule,
    EmqxBrokerModuleList,
    EmqxEnterpriseModule,
    EmqxEnterpriseModuleList,
)


def _sorted(modules):
    return sorted(modules, key=lambda m: (m.name, m.enable))


def test_broker_modules_default():
    modules = EmqxBrokerModuleList(
        items=[
            EmqxBrokerModule(name="foo", enable=True),
            EmqxBrokerModule(name="bar", enable=False),
            EmqxBrokerModule(name="emqx_mod_presence", enable=False),
        ]
    )
    modules.default()
    assert _sorted(modules.items) == _sorted(
        [
            EmqxBrokerModule(name="foo", enable=True),
            EmqxBrokerModule(name="bar", enable=False),
            EmqxBrokerModule(name="emqx_mod_acl_internal", enable=True),
            EmqxBrokerModule(name="emqx_mod_presence", enable=False),
        ]
    )


def test_broker_modules_default_from_nothing():
    modules = EmqxBrokerModuleList()
    modules.default()
    assert modules.items == [
        EmqxBrokerModule(name="emqx_mod_acl_internal", enable=True),
        EmqxBrokerModule(name="emqx_mod_presence", enable=True),
    ]


def test_broker_modules_lookup():
    foo = EmqxBrokerModule(name="foo", enable=True)
    modules = EmqxBrokerModuleList(items=[foo])
    assert modules.lookup("foo") == foo
    assert modules.lookup("missing") is None
    assert EmqxBrokerModuleList().lookup("foo") is None


def test_broker_modules_string():
    modules = EmqxBrokerModuleList(
        items=[
            EmqxBrokerModule(name="foo", enable=True),
            EmqxBrokerModule(name="bar", enable=False),
        ]
    )
    assert str(modules) == "{foo, true}.\n{bar, false}.\n"


def test_enterprise_modules_string_empty():
    assert str(EmqxEnterpriseModuleList()) == ""


def test_enterprise_modules_string():
    modules = EmqxEnterpriseModuleList(
        items=[
            EmqxEnterpriseModule(
                name="internal_acl",
                enable=True,
                configs=b'{"acl_rule_file": "/mounted/acl/acl.conf"}',
            ),
            EmqxEnterpriseModule(
                name="retainer",
                enable=True,
                configs=b"""{
                    "expiry_interval": 0,
                    "max_payload_size": "1MB",
                    "max_retained_messages": 0,
                    "storage_type": "ram"
                }""",
            ),
        ]
    )
    assert str(modules) == (
        '[{"name":"internal_acl","enable":true,"configs":{"acl_rule_file":"/mounted/acl/acl.conf"}},'
        '{"name":"retainer","enable":true,"configs":{"expiry_interval":0,"max_payload_size":"1MB",'
        '"max_retained_messages":0,"storage_type":"ram"}}]'
    )


def test_enterprise_module_to_dict_leaves_out_false_enable():
    module = EmqxEnterpriseModule(name="retainer", configs={"storage_type": "ram"})
    assert module.to_dict() == {"name": "retainer", "configs": {"storage_type": "ram"}}