"""Typed interfaces for adapter-layer responsibilities."""

from typing import Protocol

from marathon_bridge.domain import App, Task


class MarathonClientPort(Protocol):
    """Port definition for read-only access to the Marathon REST API."""

    def adapter_consul_apps(self) -> list[App]:
        """Return apps carrying the `consul` label, with tasks embedded.

        Returns:
            list[App]: Labelled apps; empty when none exist.

        Raises:
            MarathonAdapterError: Raised on configuration, transport, status, or decode failure.
        """

    def adapter_app(self, app_id: str) -> App:
        """Return one app with tasks embedded.

        Args:
            app_id: Absolute app identifier.

        Returns:
            App: Decoded app, possibly with all-empty fields.

        Raises:
            MarathonAdapterError: Raised on configuration, transport, status, or decode failure.
        """

    def adapter_tasks(self, app_id: str) -> list[Task]:
        """Return running tasks of one app.

        Args:
            app_id: Absolute app identifier.

        Returns:
            list[Task]: Decoded tasks; empty when none run.

        Raises:
            MarathonAdapterError: Raised on configuration, transport, status, or decode failure.
        """

    def adapter_leader(self) -> str:
        """Return the current Marathon leader address.

        Returns:
            str: Leader `host:port`, unmodified.

        Raises:
            MarathonAdapterError: Raised on configuration, transport, status, or decode failure.
        """
