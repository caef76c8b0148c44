# emqxop

Plain Python models for describing EMQX clusters as custom resources
in the `apps.emqx.io/v1beta3` API group. The package has no dependencies.

## Modules

- `emqxop.meta`: `GroupVersion`, the `GROUP_VERSION` constant
  (`apps.emqx.io/v1beta3`), and `ObjectMeta`, which holds a resource's
  name, namespace, labels and annotations.
- `emqxop.names`: `Names` builds the names of dependent objects from a
  resource's name: `headless_svc()`, `license()`, `acl()`,
  `plugins_config()`, `loaded_modules()` and `data()`.
- `emqxop.config`: `EmqxConfig`, a dict of flat EMQX options. Its
  `default(emqx)` method fills in the DNS cluster-discovery settings
  without overwriting keys that are already set.
- `emqxop.modules`: broker and enterprise module lists.
  `EmqxBrokerModuleList.default()` adds `emqx_mod_acl_internal` and
  `emqx_mod_presence` if they are missing. `str()` renders broker modules
  in EMQX's loaded-modules format and enterprise modules as compact JSON.
- `emqxop.service`: `ServicePort`, `ServiceSpec` and `ServiceTemplate`.
  `ServiceTemplate.default(emqx)` copies namespace, name, labels and
  annotations from a resource. It leaves out the
  `kubectl.kubernetes.io/last-applied-configuration` annotation. It sets
  the selector and adds the `http-management-8081` port.
  `merge_ports(ports)` keeps the first port of each name.
- `emqxop.status`: `Status`, `Condition`, `ConditionType`,
  `ConditionStatus`, `EmqxNode`, `new_condition()` and
  `index_condition()`.
- `emqxop.broker`: the `EmqxBroker` resource, its `EmqxBrokerSpec` and
  `EmqxBrokerTemplate`, `EmqxBrokerList`, and the `Emqx` protocol that
  broker and enterprise resources satisfy.
- `emqxop.enterprise`: the `EmqxEnterprise` resource, its spec and
  template, `EmqxEnterpriseList`, and `License`.
- `emqxop.plugin`: the `EmqxPlugin` resource, `EmqxPluginSpec`,
  `EmqxPluginStatus`, `PluginPhase` and `EmqxPluginList`.

The resources and lists have `to_dict()`, which returns the wire form as
plain dicts with camelCase keys and empty fields left out. Serialise the
result with `json` or a YAML library.

## Installation

```
pip install emqxop
```

To install with the test tools:

```
pip install "emqxop[test]"
```

## Examples

### A broker and its default configuration

```python
from emqxop.broker import EmqxBroker
from emqxop.config import EmqxConfig
from emqxop.meta import ObjectMeta

broker = EmqxBroker(metadata=ObjectMeta(name="emqx", namespace="default"))
config = EmqxConfig()
config.default(broker)
config["cluster.dns.name"]  # "emqx-headless.default.svc.cluster.local"
config["cluster.discovery"]  # "dns"

broker.to_dict()["apiVersion"]  # "apps.emqx.io/v1beta3"
```

### Broker modules

```python
from emqxop.modules import EmqxBrokerModule, EmqxBrokerModuleList

modules = EmqxBrokerModuleList([EmqxBrokerModule(name="foo", enable=True)])
modules.default()
str(modules)
# "{foo, true}.\n{emqx_mod_acl_internal, true}.\n{emqx_mod_presence, true}.\n"
```

Enterprise module configs may be given as a JSON string or bytes. They
are parsed when the module is created:

```python
from emqxop.modules import EmqxEnterpriseModule, EmqxEnterpriseModuleList

modules = EmqxEnterpriseModuleList([
    EmqxEnterpriseModule(
        name="internal_acl",
        enable=True,
        configs='{"acl_rule_file": "/mounted/acl/acl.conf"}',
    )
])
str(modules)
# '[{"name":"internal_acl","enable":true,"configs":{"acl_rule_file":"/mounted/acl/acl.conf"}}]'
```

An enterprise module list with no items renders as an empty string.

### Service ports

```python
from emqxop.service import ServicePort, ServiceSpec, ServiceTemplate

template = ServiceTemplate(spec=ServiceSpec(ports=[ServicePort(name="exist", port=8080)]))
template.merge_ports([
    ServicePort(name="exist", port=8081),
    ServicePort(name="not-exist", port=8082),
])
# template.spec.ports: "exist" on 8080, then "not-exist" on 8082
```

### Status conditions

`set_condition` stamps a condition with the current time. If the status
already has a condition of that type, the new one replaces it. The
earlier transition time is kept when the status value has not changed.
Conditions are ordered newest first. `is_running()` is true only when the
newest condition is a true `Running` condition.

```python
from emqxop.status import Condition, ConditionStatus, ConditionType, Status

status = Status()
status.set_condition(Condition(type=ConditionType.RUNNING, status=ConditionStatus.TRUE))
status.is_running()  # True
```

### Derived names

```python
from emqxop.meta import ObjectMeta
from emqxop.names import Names

names = Names(ObjectMeta(name="emqx", namespace="default"))
names.headless_svc()  # "emqx-headless"
names.data()          # "emqx-data"
```

## What this package does not do

It only holds and defaults resource descriptions. It does not:

- connect to a Kubernetes API server;
- reconcile or deploy clusters;
- validate resources;
- convert resources to or from other API versions;
- read resources back from dicts, JSON or YAML.

## Running the tests

```
pytest
```