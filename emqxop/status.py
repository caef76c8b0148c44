"""Observed state of an EMQX cluster and its conditions."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ConditionType(str, Enum):
    PLUGIN_INITIALIZED = "PluginInitialized"
    RUNNING = "Running"


class ConditionStatus(str, Enum):
    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


@dataclass
class Condition:
    type: ConditionType
    status: ConditionStatus
    last_update_time: str = ""
    last_update_at: datetime | None = None
    last_transition_time: str = ""
    reason: str = ""
    message: str = ""


@dataclass
class EmqxNode:
    node: str = ""
    node_status: str = ""
    otp_release: str = ""
    version: str = ""


def new_condition(
    cond_type: ConditionType, status: ConditionStatus, reason: str, message: str
) -> Condition:
    return Condition(type=cond_type, status=status, reason=reason, message=message)


def index_condition(status: "Status", cond_type: ConditionType) -> int | None:
    """Position of the first condition of ``cond_type``, or None."""
    return next(
        (i for i, c in enumerate(status.conditions) if c.type == cond_type), None
    )


def _rfc3339(moment: datetime) -> str:
    text = moment.isoformat(timespec="seconds")
    return text[:-6] + "Z" if text.endswith("+00:00") else text


_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


@dataclass
class Status:
    conditions: list[Condition] = field(default_factory=list)
    emqx_nodes: list[EmqxNode] = field(default_factory=list)
    replicas: int = 0
    ready_replicas: int = 0

    def is_running(self) -> bool:
        """True when the newest condition is a true Running condition."""
        index = index_condition(self, ConditionType.RUNNING)
        return index == 0 and self.conditions[0].status == ConditionStatus.TRUE

    def is_plugin_initialized(self) -> bool:
        index = index_condition(self, ConditionType.PLUGIN_INITIALIZED)
        if index is None:
            return False
        return self.conditions[index].status == ConditionStatus.TRUE

    def set_condition(self, condition: Condition) -> None:
        """Record ``condition`` with fresh timestamps, newest first."""
        now = datetime.now().astimezone()
        stamp = _rfc3339(now)
        updated = dataclasses.replace(
            condition,
            last_update_at=now,
            last_update_time=stamp,
            last_transition_time=stamp,
        )
        index = index_condition(self, updated.type)
        if index is None:
            self.conditions.append(updated)
        else:
            previous = self.conditions[index]
            if previous.status == updated.status and previous.last_transition_time:
                updated.last_transition_time = previous.last_transition_time
            self.conditions[index] = updated

        self.conditions.sort(key=lambda c: c.last_update_at or _EPOCH, reverse=True)