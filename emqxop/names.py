"""Names of the objects derived from an EMQX resource."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Names:
    """Derives dependent object names from an object with a ``name``."""

    obj: Any

    def _suffixed(self, suffix: str) -> str:
        return f"{self.obj.name}-{suffix}"

    def headless_svc(self) -> str:
        return self._suffixed("headless")

    def license(self) -> str:
        return self._suffixed("license")

    def acl(self) -> str:
        return self._suffixed("acl")

    def plugins_config(self) -> str:
        return self._suffixed("plugins-config")

    def loaded_modules(self) -> str:
        return self._suffixed("loaded-modules")

    def data(self) -> str:
        return self._suffixed("data")