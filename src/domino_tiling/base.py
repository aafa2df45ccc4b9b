"""
Base class for solvers.

BaseSolver provides the shared event system (start/tick/end callbacks) and
the run() contract. Concrete solvers hold their configuration in properties
and expose results as properties after run().
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from typing_extensions import Self

from .types import Event, EventType


class BaseSolver(ABC):
    """
    Abstract base class for solvers.

    Provides shared infrastructure:
    - Event system (start/tick/end events)
    - run() returning self for chaining

    Example:
        solver = SomeSolver(on_tick=lambda e: print(e["flow"]))
        solver.run()
    """

    def __init__(
        self,
        *,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
    ) -> None:
        """
        Initialize event callbacks.

        Args:
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
        """
        self._events: dict[EventType, Callable[[Optional[Event]], None]] = {}

        if on_start:
            self._events[EventType.start] = on_start
        if on_tick:
            self._events[EventType.tick] = on_tick
        if on_end:
            self._events[EventType.end] = on_end

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: EventType | str, callback: Callable[[Optional[Event]], None]) -> Self:
        """
        Subscribe to a solver event.

        Args:
            event: Event type (EventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = EventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """
        Trigger an event, calling the registered callback.

        Args:
            event: Event payload with type and optional data
        """
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    # -------------------------------------------------------------------------
    # Abstract Methods
    # -------------------------------------------------------------------------

    @abstractmethod
    def run(self) -> Self:
        """
        Run the solver.

        Returns:
            self (for chaining)
        """
        pass


__all__ = ["BaseSolver"]
