"""EMQX broker configuration as a flat key/value mapping."""

from __future__ import annotations

from typing import Any

from .names import Names


class EmqxConfig(dict):
    """Flat EMQX configuration keyed by dotted option names."""

    def default(self, emqx: Any) -> None:
        """Fill in cluster settings for ``emqx`` without overwriting keys."""
        headless = Names(emqx).headless_svc()
        cluster_config = {
            "name": emqx.name,
            "log.to": "console",
            "cluster.discovery": "dns",
            "cluster.dns.type": "srv",
            "cluster.dns.app": emqx.name,
            "cluster.dns.name": f"{headless}.{emqx.namespace}.svc.cluster.local",
            "listener.tcp.internal": "",
        }
        for key, value in cluster_config.items():
            self.setdefault(key, value)