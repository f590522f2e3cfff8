"""Label-driven derivation of service registration intents for Marathon tasks.

The `consul` label drives three decisions:

- On a port definition, a non-blank value marks that definition as the published
  port and may override the service name and contribute extra tags.
- On the app, a value other than blank or `true` overrides the service name.
- Without an override, the service name is the app id with `/` replaced by the
  configured separator.

Every other label whose value is `tag` contributes its key as a service tag.
"""

from __future__ import annotations

from typing import Mapping

from .errors import DomainPortIndexError
from .models import CONSUL_LABEL_KEY, App, PortDefinition, RegistrationIntent, Task

_CONSUL_LABEL_ENABLED_VALUE = "true"
_TAG_LABEL_VALUE = "tag"


def domain_derive_registration_intent(app: App, task: Task, separator: str) -> RegistrationIntent:
    """Derive the service name, published port, and tags for one task of an app.

    Args:
        app: Owning app of the task.
        task: Task to register.
        separator: Separator joining app id or label path segments into the name.

    Returns:
        RegistrationIntent: Derived name, port, and ordered tags.

    Raises:
        DomainPortIndexError: Raised when the task has no port at the selected index.
    """

    port_index, port_definition = _domain_find_consul_port_definition(app.port_definitions)
    return RegistrationIntent(
        name=_domain_resolve_service_name(app, port_definition, separator),
        port=_domain_resolve_port(task, port_index),
        tags=_domain_collect_tags(app.labels, port_definition),
    )


def _domain_find_consul_port_definition(
    port_definitions: tuple[PortDefinition, ...],
) -> tuple[int, PortDefinition | None]:
    """Return the first port definition with a non-blank `consul` label.

    Args:
        port_definitions: App port definitions in declaration order.

    Returns:
        tuple[int, PortDefinition | None]: Index and definition, or `(0, None)` when none qualifies.
    """

    for index, port_definition in enumerate(port_definitions):
        if port_definition.labels.get(CONSUL_LABEL_KEY, "").strip():
            return index, port_definition
    return 0, None


def _domain_resolve_service_name(app: App, port_definition: PortDefinition | None, separator: str) -> str:
    candidate_labels: list[str] = []
    if port_definition is not None:
        candidate_labels.append(port_definition.labels[CONSUL_LABEL_KEY])
    if CONSUL_LABEL_KEY in app.labels:
        candidate_labels.append(app.labels[CONSUL_LABEL_KEY])

    for label_value in candidate_labels:
        normalized_value = label_value.strip()
        if not normalized_value or normalized_value == _CONSUL_LABEL_ENABLED_VALUE:
            continue
        name = _domain_join_path_segments(normalized_value, separator)
        if name:
            return name

    return _domain_join_path_segments(app.id, separator)


def _domain_join_path_segments(path: str, separator: str) -> str:
    """Join the non-blank `/`-delimited segments of a path with the separator.

    Args:
        path: Slash-delimited path, e.g. `/group/sub/name`.
        separator: Output separator.

    Returns:
        str: Joined segments; empty when the path has no non-blank segment.
    """

    segments = [segment.strip() for segment in path.split("/") if segment.strip()]
    return separator.join(segments)


def _domain_resolve_port(task: Task, port_index: int) -> int:
    if port_index >= len(task.ports):
        raise DomainPortIndexError(port_index=port_index, port_count=len(task.ports))
    return task.ports[port_index]


def _domain_collect_tags(
    app_labels: Mapping[str, str],
    port_definition: PortDefinition | None,
) -> tuple[str, ...]:
    label_items = list(app_labels.items())
    if port_definition is not None:
        label_items.extend(port_definition.labels.items())

    # dict preserves first-seen order while collapsing duplicates
    tags = dict.fromkeys(
        key for key, value in label_items if key != CONSUL_LABEL_KEY and value == _TAG_LABEL_VALUE
    )
    return tuple(tags)
