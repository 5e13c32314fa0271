"""Forward-only pipeline state with transitions deferred to frame end."""

from __future__ import annotations

import logging

from tankarena.core.enums import Step
from tankarena.core.errors import InternalStateViolation

logger = logging.getLogger(__name__)


class StateMachine:
    """Holds the current ``Step`` and at most one requested next step.

    ``set_next`` only records the request; ``apply_transition`` (run by the
    frame loop after all systems) makes it current. Requests must move
    strictly forward.
    """

    __slots__ = ("_current", "_next")

    def __init__(self, initial: Step = Step.LOAD_MAP) -> None:
        self._current = initial
        self._next: Step | None = None

    @property
    def current(self) -> Step:
        return self._current

    @property
    def requested(self) -> Step | None:
        return self._next

    @property
    def is_terminal(self) -> bool:
        return self._current == Step.FINISHED

    def in_state(self, step: Step) -> bool:
        return self._current == step

    def set_next(self, step: Step) -> None:
        if step <= self._current:
            raise InternalStateViolation(
                f"pipeline cannot move from {self._current.name} back to {step.name}"
            )
        self._next = step

    def apply_transition(self) -> bool:
        """Make the requested step current. Returns True if the state changed."""
        if self._next is None:
            return False
        logger.info("Pipeline %s -> %s", self._current.name, self._next.name)
        self._current, self._next = self._next, None
        return True
