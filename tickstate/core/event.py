# tickstate/core/event.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Generic, List, Tuple

from tickstate.core.errors import ValidationError
from tickstate.core.types import Listener, S, Unsubscribe

DEFAULT_HISTORY_SIZE = 100


@dataclass(frozen=True)
class TransitionEvent(Generic[S]):
    """
    Immutable record of one committed state change.

    :param from_state: Identifier of the state that was left.
    :param to_state: Identifier of the state that was entered.
    :param timestamp: Wall-clock time of the change, in seconds since the epoch.
    """

    from_state: S
    to_state: S
    timestamp: float = field(default_factory=time.time)


class _Subscription:
    """
    One listener registration. Registering the same callable twice yields two
    subscriptions, each removed only by its own unsubscribe function.
    """

    __slots__ = ("listener", "active")

    def __init__(self, listener: Listener) -> None:
        self.listener = listener
        self.active = True


class EventLog(Generic[S]):
    """
    Bounded FIFO history of transition events plus a synchronous listener
    registry. Once ``max_history`` events are stored, each new event evicts the
    oldest one.
    """

    def __init__(self, max_history: int = DEFAULT_HISTORY_SIZE) -> None:
        """
        :param max_history: Maximum number of events retained.
        :raises ValidationError: If max_history is not a positive integer.
        """
        if isinstance(max_history, bool) or not isinstance(max_history, int) or max_history < 1:
            raise ValidationError(f"History size must be a positive integer, got {max_history!r}")
        self._max_history = max_history
        self._history: Deque[TransitionEvent[S]] = deque(maxlen=max_history)
        self._subscriptions: List[_Subscription] = []

    @property
    def max_history(self) -> int:
        return self._max_history

    @property
    def listener_count(self) -> int:
        return len(self._subscriptions)

    def __len__(self) -> int:
        return len(self._history)

    def on(self, listener: Listener) -> Unsubscribe:
        """
        Register a listener for every future event.

        :param listener: Callable receiving each TransitionEvent.
        :return: A function removing exactly this registration. Calling it more
            than once is harmless.
        """
        subscription = _Subscription(listener)
        self._subscriptions.append(subscription)

        def unsubscribe() -> None:
            if not subscription.active:
                return
            subscription.active = False
            for i, candidate in enumerate(self._subscriptions):
                if candidate is subscription:
                    del self._subscriptions[i]
                    break

        return unsubscribe

    def emit(self, event: TransitionEvent[S]) -> None:
        """
        Record the event, then notify listeners in registration order.

        Listeners registered when emission begins are the ones notified; a
        listener unsubscribed by an earlier listener during the same emission is
        skipped. Listener exceptions propagate to the caller.
        """
        self._history.append(event)
        for subscription in list(self._subscriptions):
            if subscription.active:
                subscription.listener(event)

    def get_history(self) -> Tuple[TransitionEvent[S], ...]:
        """Return the retained events, oldest first."""
        return tuple(self._history)

    def clear(self) -> None:
        """Drop all history and all listeners."""
        self._history.clear()
        for subscription in self._subscriptions:
            subscription.active = False
        self._subscriptions.clear()
