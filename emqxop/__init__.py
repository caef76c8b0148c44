"""Resource models for EMQX clusters: brokers, enterprise brokers, plugins, services, modules and status."""

__version__ = "0.1.0"