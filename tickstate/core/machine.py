# tickstate/core/machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Dict, Generic, Iterable, Optional, Tuple

from tickstate.core.config import MachineConfig
from tickstate.core.errors import MachineNotStartedError, StateNotFoundError, TransitionDeniedError
from tickstate.core.event import DEFAULT_HISTORY_SIZE, EventLog, TransitionEvent
from tickstate.core.state import StateProtocol
from tickstate.core.types import C, Listener, S, Unsubscribe
from tickstate.core.validations import Validator

logger = logging.getLogger(__name__)


class StateMachine(Generic[C, S]):
    """
    A finite state machine managing one current state for a caller-owned
    context.

    The machine is either unstarted (no current state) or started. ``start()``
    enters the initial state, ``update(dt)`` drives the current state once per
    tick, and ``transition_to()`` moves between states subject to the current
    state's guard. Every committed change is recorded in a bounded history and
    sent to subscribed listeners.

    Runtime Invariants:
    - A current state exists if and only if the machine is started.
    - A transition runs: exit old state, move pointer, emit event, enter new
      state. Exceptions from hooks or listeners propagate with no rollback.
    - A denied transition runs no hooks and emits no event.

    Not thread-safe; calls must be serialized by the embedding application.
    """

    def __init__(self, config: MachineConfig[C, S], validator: Optional[Validator] = None) -> None:
        """
        :param config: States, initial state id, context and history size.
        :param validator: Optional validator for configuration checks.
        :raises DuplicateStateError: If two states share an identifier.
        :raises StateNotFoundError: If the initial state is not among the states.
        :raises ValidationError: If the configuration is otherwise malformed.
        """
        self._validator = validator or Validator()
        self._state_map: Dict[S, StateProtocol] = self._validator.validate_config(config)
        self._initial_state_id: S = config.initial_state
        self._context: C = config.context
        self._event_log: EventLog[S] = EventLog(config.history_size)
        self._current_state: Optional[StateProtocol] = None
        self._started = False

    @classmethod
    def from_states(
        cls,
        states: Iterable[StateProtocol],
        initial_state: S,
        context: C,
        history_size: int = DEFAULT_HISTORY_SIZE,
    ) -> "StateMachine[C, S]":
        """Build a machine without constructing a MachineConfig first."""
        return cls(MachineConfig(tuple(states), initial_state, context, history_size))

    @property
    def context(self) -> C:
        return self._context

    @property
    def is_started(self) -> bool:
        return self._started

    @property
    def current_state_id(self) -> S:
        """
        Identifier of the current state.

        :raises MachineNotStartedError: If the machine is not started.
        """
        return self._require_current().id

    @property
    def states(self) -> Tuple[S, ...]:
        """Registered state identifiers, in declaration order."""
        return tuple(self._state_map)

    @property
    def event_log(self) -> EventLog[S]:
        return self._event_log

    def has_state(self, state_id: S) -> bool:
        return state_id in self._state_map

    def start(self) -> None:
        """
        Enter the initial state. Does nothing if already started.

        :raises StateNotFoundError: If the initial state is no longer registered.
        """
        if self._started:
            return

        state = self._state_map.get(self._initial_state_id)
        if state is None:
            raise StateNotFoundError(self._initial_state_id)

        self._current_state = state
        self._started = True
        logger.debug("Starting state machine in %r", state.id)
        state.on_enter(self._context, None)

    def stop(self) -> None:
        """Exit the current state and clear it. Does nothing if not started."""
        if not self._started or self._current_state is None:
            return

        state = self._current_state
        logger.debug("Stopping state machine in %r", state.id)
        state.on_exit(self._context, None)
        self._current_state = None
        self._started = False

    def transition_to(self, state_id: S) -> None:
        """
        Move to another state.

        Targeting the current state is a full self-transition: exit, event and
        re-entry all happen.

        :param state_id: Identifier of the target state.
        :raises MachineNotStartedError: If the machine is not started.
        :raises StateNotFoundError: If no state has that identifier.
        :raises TransitionDeniedError: If the current state's guard refuses.
        """
        source = self._require_current()
        target = self._state_map.get(state_id)
        if target is None:
            raise StateNotFoundError(state_id)

        if not source.can_transition_to(state_id, self._context):
            logger.debug("Transition %r -> %r denied by guard", source.id, state_id)
            raise TransitionDeniedError(source.id, state_id)

        event = TransitionEvent(source.id, target.id)

        source.on_exit(self._context, target.id)
        self._current_state = target
        logger.debug("Transition %r -> %r", source.id, target.id)
        self._event_log.emit(event)
        target.on_enter(self._context, source.id)

    def update(self, dt: float) -> None:
        """
        Run one tick of the current state. If its ``on_update`` returns an
        identifier, transition there with the usual guard checks.

        :param dt: Elapsed time since the previous tick.
        :raises MachineNotStartedError: If the machine is not started.
        :raises TransitionDeniedError: If a requested transition is refused.
        """
        state = self._require_current()
        next_id = state.on_update(self._context, dt)
        if next_id is not None:
            self.transition_to(next_id)

    def on(self, listener: Listener) -> Unsubscribe:
        """
        Subscribe to future transition events. History is not replayed.

        :param listener: Called synchronously with each TransitionEvent.
        :return: Function removing this subscription.
        """
        return self._event_log.on(listener)

    def get_history(self) -> Tuple[TransitionEvent[S], ...]:
        """Snapshot of recorded transitions, oldest first."""
        return self._event_log.get_history()

    def _require_current(self) -> StateProtocol:
        if not self._started or self._current_state is None:
            raise MachineNotStartedError()
        return self._current_state

    def __repr__(self) -> str:
        current = self._current_state.id if self._current_state is not None else None
        return f"{type(self).__name__}(current={current!r}, started={self._started})"
