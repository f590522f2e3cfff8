"""Main module entrypoint for one-shot Marathon inspection commands.

This module validates startup configuration, queries Marathon once, and prints
results as JSON lines to stdout.
"""

import argparse
import json
import logging

from marathon_bridge.adapters import MarathonAdapterError, MarathonClientPort
from marathon_bridge.bootstrap import bootstrap_create_marathon_client
from marathon_bridge.config import config_load_settings
from marathon_bridge.domain import DomainPortIndexError, domain_derive_registration_intent, domain_task_is_healthy

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Run selected command with validated startup configuration.

    Args:
        argv: Optional argument list; defaults to process arguments.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with status 1 when the Marathon call fails.
    """

    argument_parser = argparse.ArgumentParser(description="Marathon bridge inspection entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="apps",
        choices=("apps", "leader"),
        help="`apps` prints registration intents for every task of consul-labelled apps, "
        "`leader` prints the current Marathon leader",
        type=str,
    )
    argument_parser.add_argument(
        "--log-level",
        dest="log_level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Root logging level",
    )
    parsed_arguments = argument_parser.parse_args(argv)
    logging.basicConfig(
        level=parsed_arguments.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = config_load_settings()
    with bootstrap_create_marathon_client(settings=settings) as marathon_client:
        try:
            if parsed_arguments.command == "leader":
                print(marathon_client.adapter_leader())
                return

            for intent_record in main_collect_registration_intents(
                marathon_client=marathon_client,
                separator=settings.consul_name_separator,
            ):
                print(json.dumps(intent_record, sort_keys=True))
        except MarathonAdapterError as error:
            logger.error("Marathon request failed: %s", error)
            raise SystemExit(1) from error


def main_collect_registration_intents(
    marathon_client: MarathonClientPort,
    separator: str,
) -> list[dict[str, object]]:
    """Derive registration intents for every task of every consul-labelled app.

    Tasks whose port list does not cover the selected port definition are skipped
    with a warning.

    Args:
        marathon_client: Marathon client port implementation.
        separator: Service name separator.

    Returns:
        list[dict[str, object]]: One record per task with intent and health fields.

    Raises:
        MarathonAdapterError: Raised when fetching apps fails.
    """

    intent_records: list[dict[str, object]] = []
    for app in marathon_client.adapter_consul_apps():
        for task in app.tasks:
            try:
                intent = domain_derive_registration_intent(app=app, task=task, separator=separator)
            except DomainPortIndexError as error:
                logger.warning("Skipping task %s of app %s: %s", task.id, app.id, error)
                continue
            intent_records.append(
                {
                    "app_id": app.id,
                    "task_id": task.id,
                    "host": task.host,
                    "healthy": domain_task_is_healthy(task),
                    "name": intent.name,
                    "port": intent.port,
                    "tags": list(intent.tags),
                }
            )
    return intent_records


if __name__ == "__main__":
    main()
