"""Immutable domain models for Marathon apps, tasks, and registration intents.

Models are frozen dataclasses. Sequence fields are normalized to tuples and label
mappings to read-only mapping proxies in `__post_init__`, so a value decoded from one
response cannot be mutated by any later caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

CONSUL_LABEL_KEY = "consul"


def _domain_freeze_labels(labels: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(labels or {}))


@dataclass(frozen=True)
class HealthCheck:
    """Declared health-check definition of an app.

    Attributes:
        path: HTTP path probed by the check.
        port_index: Index into the task's ports probed by the check.
        protocol: Check protocol (`HTTP`, `TCP`, `COMMAND`, ...).
        grace_period_seconds: Startup grace period.
        interval_seconds: Probe interval.
        timeout_seconds: Probe timeout.
        max_consecutive_failures: Failures tolerated before the task is killed.
    """

    path: str = ""
    port_index: int = 0
    protocol: str = ""
    grace_period_seconds: int = 0
    interval_seconds: int = 0
    timeout_seconds: int = 0
    max_consecutive_failures: int = 0


@dataclass(frozen=True)
class HealthCheckResult:
    """Observed health-check outcome for one task.

    Attributes:
        alive: Whether the last probe succeeded.
    """

    alive: bool = False


@dataclass(frozen=True)
class PortDefinition:
    """Positionally indexed port metadata declared on an app.

    Attributes:
        port: Declared service port number, 0 when unset.
        protocol: Declared transport protocol.
        name: Optional port name.
        labels: Port-scoped label mapping.
    """

    port: int = 0
    protocol: str = ""
    name: str = ""
    labels: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", _domain_freeze_labels(self.labels))


@dataclass(frozen=True)
class Task:
    """Running instance of an app bound to a host and assigned ports.

    Attributes:
        id: Task identifier.
        app_id: Owning app identifier.
        host: Agent host running the task.
        ports: Assigned host ports, positionally correlated with port definitions.
        health_check_results: Observed health-check results.
    """

    id: str = ""
    app_id: str = ""
    host: str = ""
    ports: tuple[int, ...] = ()
    health_check_results: tuple[HealthCheckResult, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "ports", tuple(self.ports))
        object.__setattr__(self, "health_check_results", tuple(self.health_check_results))


@dataclass(frozen=True)
class App:
    """Marathon application definition with embedded tasks.

    Attributes:
        id: Absolute slash-delimited app identifier, e.g. `/group/sub/name`.
        labels: App label mapping.
        health_checks: Declared health checks.
        port_definitions: Declared port definitions, index-significant.
        tasks: Embedded running tasks.
    """

    id: str = ""
    labels: Mapping[str, str] = field(default_factory=dict)
    health_checks: tuple[HealthCheck, ...] = ()
    port_definitions: tuple[PortDefinition, ...] = ()
    tasks: tuple[Task, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", _domain_freeze_labels(self.labels))
        object.__setattr__(self, "health_checks", tuple(self.health_checks))
        object.__setattr__(self, "port_definitions", tuple(self.port_definitions))
        object.__setattr__(self, "tasks", tuple(self.tasks))


@dataclass(frozen=True)
class RegistrationIntent:
    """Derived service registration for one task.

    Attributes:
        name: Service name.
        port: Published task port.
        tags: Ordered, duplicate-free tag list.
    """

    name: str
    port: int
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", tuple(self.tags))


def domain_app_is_consul_app(app: App) -> bool:
    """Return whether the app carries the reserved `consul` label.

    Args:
        app: App to inspect.

    Returns:
        bool: True when the label key is present, regardless of its value.
    """

    return CONSUL_LABEL_KEY in app.labels


def domain_app_has_health_checks(app: App) -> bool:
    """Return whether the app declares at least one health check."""

    return len(app.health_checks) > 0


def domain_task_is_healthy(task: Task) -> bool:
    """Return whether every observed health-check result of the task is alive.

    Args:
        task: Task to inspect.

    Returns:
        bool: True when at least one result exists and all results are alive.
    """

    if not task.health_check_results:
        return False
    return all(result.alive for result in task.health_check_results)


def domain_task_id_app_id(task_id: str) -> str:
    """Derive the owning app identifier from a Marathon task identifier.

    Marathon encodes the app path in the task id prefix with `_` replacing `/`,
    followed by `.` and an instance uuid: `group_sub_name.<uuid>`.

    Args:
        task_id: Marathon task identifier.

    Returns:
        str: Absolute app identifier, e.g. `/group/sub/name`.
    """

    app_segment, _, _ = task_id.rpartition(".")
    if not app_segment:
        app_segment = task_id
    return "/" + app_segment.replace("_", "/")
