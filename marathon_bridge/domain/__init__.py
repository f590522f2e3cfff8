"""Domain models, payload decoding, and registration-intent derivation."""

from .errors import DomainDecodeError, DomainPortIndexError
from .marathon_parsing import (
    domain_parse_app,
    domain_parse_apps,
    domain_parse_leader,
    domain_parse_task,
    domain_parse_tasks,
)
from .models import (
    CONSUL_LABEL_KEY,
    App,
    HealthCheck,
    HealthCheckResult,
    PortDefinition,
    RegistrationIntent,
    Task,
    domain_app_has_health_checks,
    domain_app_is_consul_app,
    domain_task_id_app_id,
    domain_task_is_healthy,
)
from .registration import domain_derive_registration_intent

__all__ = [
    "App",
    "CONSUL_LABEL_KEY",
    "DomainDecodeError",
    "DomainPortIndexError",
    "HealthCheck",
    "HealthCheckResult",
    "PortDefinition",
    "RegistrationIntent",
    "Task",
    "domain_app_has_health_checks",
    "domain_app_is_consul_app",
    "domain_derive_registration_intent",
    "domain_parse_app",
    "domain_parse_apps",
    "domain_parse_leader",
    "domain_parse_task",
    "domain_parse_tasks",
    "domain_task_id_app_id",
    "domain_task_is_healthy",
]
