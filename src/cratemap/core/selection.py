"""
Selection state machine.

Tracks which node, if any, the user is inspecting. There are two states,
``Idle`` and ``Selected(node_id)``, and three transitions:

- ``pick(id)``: always ends in ``Selected(id)``, even when ``id`` is already
  selected, so the detail view is shown again.
- ``dismiss()``: ends in ``Idle``. A no-op when already idle.
- ``reload()``: ends in ``Idle`` unconditionally. Node ids are only meaningful
  within one fetched graph, so a selection never survives a reload.

The detail view is visible exactly while the state is ``Selected``. Listeners
are told about every transition; the controller does no I/O of its own.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    """No node selected."""


@dataclass(frozen=True)
class Selected:
    node_id: int


Selection = Union[Idle, Selected]

SelectionListener = Callable[[Selection], None]


class SelectionController:
    """Single-selection controller driving detail view visibility."""

    def __init__(self):
        self._state: Selection = Idle()
        self._listeners: List[SelectionListener] = []

    @property
    def state(self) -> Selection:
        return self._state

    @property
    def selected_id(self) -> Optional[int]:
        if isinstance(self._state, Selected):
            return self._state.node_id
        return None

    @property
    def is_detail_visible(self) -> bool:
        return isinstance(self._state, Selected)

    def subscribe(self, listener: SelectionListener) -> Callable[[], None]:
        """
        Register a listener called with the new state after every transition.

        Returns:
            Callable[[], None]: Call it to unsubscribe.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def pick(self, node_id: int) -> Selection:
        """Select ``node_id``, replacing any current selection."""
        return self._transition(Selected(node_id), "pick")

    def dismiss(self) -> Selection:
        """Close the detail view."""
        return self._transition(Idle(), "dismiss")

    def reload(self) -> Selection:
        """Drop the selection because a new graph replaced the current one."""
        return self._transition(Idle(), "reload")

    def _transition(self, new_state: Selection, event: str) -> Selection:
        logger.debug(f"selection {event}: {self._state} -> {new_state}")
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
        return new_state
