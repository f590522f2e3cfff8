"""Decoding helpers from Marathon REST payload bytes into domain models.

Decoding is strict about JSON syntax and container shapes but lenient about missing
fields: an absent or `null` field decodes to the model's empty default, matching how
Marathon omits unset attributes. A field present with the wrong JSON type is a decode
error, never a best-effort coercion.
"""

from __future__ import annotations

import json
from typing import Any

from .errors import DomainDecodeError
from .models import App, HealthCheck, HealthCheckResult, PortDefinition, Task


def domain_parse_apps(payload: bytes) -> list[App]:
    """Decode an app collection response `{"apps": [...]}`.

    Args:
        payload: Raw response body.

    Returns:
        list[App]: Decoded apps in response order; empty when the list is empty.

    Raises:
        DomainDecodeError: Raised for empty, malformed, or wrongly shaped payloads.
    """

    document = _domain_load_json_object(payload, context_label="apps")
    raw_apps = _domain_read_list(document, "apps", context_label="apps")
    return [_domain_build_app(raw_app) for raw_app in _domain_require_objects(raw_apps, "apps")]


def domain_parse_app(payload: bytes) -> App:
    """Decode a single app response `{"app": {...}}`.

    An empty object, or an `app` object with no fields, decodes to an empty `App`.

    Args:
        payload: Raw response body.

    Returns:
        App: Decoded app.

    Raises:
        DomainDecodeError: Raised for empty, malformed, or wrongly shaped payloads.
    """

    document = _domain_load_json_object(payload, context_label="app")
    raw_app = document.get("app")
    if raw_app is None:
        return App()
    if not isinstance(raw_app, dict):
        raise DomainDecodeError("Marathon payload field `app` must be an object")
    return _domain_build_app(raw_app)


def domain_parse_tasks(payload: bytes) -> list[Task]:
    """Decode a task list response `{"tasks": [...]}`.

    Args:
        payload: Raw response body.

    Returns:
        list[Task]: Decoded tasks in response order.

    Raises:
        DomainDecodeError: Raised for empty, malformed, or wrongly shaped payloads.
    """

    document = _domain_load_json_object(payload, context_label="tasks")
    raw_tasks = _domain_read_list(document, "tasks", context_label="tasks")
    return [_domain_build_task(raw_task) for raw_task in _domain_require_objects(raw_tasks, "tasks")]


def domain_parse_task(payload: bytes) -> Task:
    """Decode one bare task object, as carried by task status events.

    Args:
        payload: Raw JSON object bytes.

    Returns:
        Task: Decoded task.

    Raises:
        DomainDecodeError: Raised for empty, malformed, or wrongly shaped payloads.
    """

    return _domain_build_task(_domain_load_json_object(payload, context_label="task"))


def domain_parse_leader(payload: bytes) -> str:
    """Decode a leader response `{"leader": "host:port"}`.

    Args:
        payload: Raw response body.

    Returns:
        str: Leader address, unmodified.

    Raises:
        DomainDecodeError: Raised when the body is malformed or `leader` is not a string.
    """

    document = _domain_load_json_object(payload, context_label="leader")
    leader = document.get("leader")
    if not isinstance(leader, str):
        raise DomainDecodeError("Marathon payload field `leader` must be a string")
    return leader


def _domain_load_json_object(payload: bytes, context_label: str) -> dict[str, Any]:
    """Parse payload bytes as one JSON object.

    Args:
        payload: Raw bytes.
        context_label: Context label for error messages.

    Returns:
        dict[str, Any]: Parsed top-level object.

    Raises:
        DomainDecodeError: Raised for empty bytes, invalid JSON, or a non-object document.
    """

    if not payload or not payload.strip():
        raise DomainDecodeError(f"Marathon payload is empty for context={context_label}")
    try:
        document = json.loads(payload)
    except (UnicodeDecodeError, json.JSONDecodeError) as error:
        raise DomainDecodeError(f"Marathon JSON parse failed for context={context_label}") from error
    if not isinstance(document, dict):
        raise DomainDecodeError(f"Marathon payload must be a JSON object for context={context_label}")
    return document


def _domain_read_list(document: dict[str, Any], key: str, context_label: str) -> list[Any]:
    value = document.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise DomainDecodeError(f"Marathon payload field `{key}` must be a list for context={context_label}")
    return value


def _domain_require_objects(values: list[Any], key: str) -> list[dict[str, Any]]:
    for value in values:
        if not isinstance(value, dict):
            raise DomainDecodeError(f"Marathon payload field `{key}` must contain only objects")
    return values


def _domain_read_str(document: dict[str, Any], key: str) -> str:
    value = document.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DomainDecodeError(f"Marathon payload field `{key}` must be a string")
    return value


def _domain_read_int(document: dict[str, Any], key: str) -> int:
    value = document.get(key)
    if value is None:
        return 0
    # bool is an int subclass in Python but never a valid JSON number here
    if isinstance(value, bool) or not isinstance(value, int):
        raise DomainDecodeError(f"Marathon payload field `{key}` must be an integer")
    return value


def _domain_read_bool(document: dict[str, Any], key: str) -> bool:
    value = document.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise DomainDecodeError(f"Marathon payload field `{key}` must be a boolean")
    return value


def _domain_read_labels(document: dict[str, Any]) -> dict[str, str]:
    value = document.get("labels")
    if value is None:
        return {}
    if not isinstance(value, dict) or not all(isinstance(label, str) for label in value.values()):
        raise DomainDecodeError("Marathon payload field `labels` must map strings to strings")
    return dict(value)


def _domain_build_app(raw_app: dict[str, Any]) -> App:
    return App(
        id=_domain_read_str(raw_app, "id"),
        labels=_domain_read_labels(raw_app),
        health_checks=tuple(
            _domain_build_health_check(raw_check)
            for raw_check in _domain_require_objects(
                _domain_read_list(raw_app, "healthChecks", context_label="app"), "healthChecks"
            )
        ),
        port_definitions=tuple(
            _domain_build_port_definition(raw_definition)
            for raw_definition in _domain_require_objects(
                _domain_read_list(raw_app, "portDefinitions", context_label="app"), "portDefinitions"
            )
        ),
        tasks=tuple(
            _domain_build_task(raw_task)
            for raw_task in _domain_require_objects(_domain_read_list(raw_app, "tasks", context_label="app"), "tasks")
        ),
    )


def _domain_build_health_check(raw_check: dict[str, Any]) -> HealthCheck:
    return HealthCheck(
        path=_domain_read_str(raw_check, "path"),
        port_index=_domain_read_int(raw_check, "portIndex"),
        protocol=_domain_read_str(raw_check, "protocol"),
        grace_period_seconds=_domain_read_int(raw_check, "gracePeriodSeconds"),
        interval_seconds=_domain_read_int(raw_check, "intervalSeconds"),
        timeout_seconds=_domain_read_int(raw_check, "timeoutSeconds"),
        max_consecutive_failures=_domain_read_int(raw_check, "maxConsecutiveFailures"),
    )


def _domain_build_port_definition(raw_definition: dict[str, Any]) -> PortDefinition:
    return PortDefinition(
        port=_domain_read_int(raw_definition, "port"),
        protocol=_domain_read_str(raw_definition, "protocol"),
        name=_domain_read_str(raw_definition, "name"),
        labels=_domain_read_labels(raw_definition),
    )


def _domain_build_task(raw_task: dict[str, Any]) -> Task:
    raw_ports = _domain_read_list(raw_task, "ports", context_label="task")
    for port in raw_ports:
        if isinstance(port, bool) or not isinstance(port, int):
            raise DomainDecodeError("Marathon payload field `ports` must contain only integers")
    return Task(
        id=_domain_read_str(raw_task, "id"),
        app_id=_domain_read_str(raw_task, "appId"),
        host=_domain_read_str(raw_task, "host"),
        ports=tuple(raw_ports),
        health_check_results=tuple(
            HealthCheckResult(alive=_domain_read_bool(raw_result, "alive"))
            for raw_result in _domain_require_objects(
                _domain_read_list(raw_task, "healthCheckResults", context_label="task"), "healthCheckResults"
            )
        ),
    )
