"""Typed exceptions raised by domain decoding and intent derivation."""

from __future__ import annotations


class DomainDecodeError(ValueError):
    """Payload bytes are empty, not valid JSON, or not shaped as expected."""


class DomainPortIndexError(ValueError):
    """Selected port index does not exist in the task's port list.

    Attributes:
        port_index: Index selected from the app's port definitions.
        port_count: Number of ports assigned to the task.
    """

    def __init__(self, port_index: int, port_count: int):
        super().__init__(f"task has no port at index {port_index} (task ports: {port_count})")
        self.port_index = port_index
        self.port_count = port_count
