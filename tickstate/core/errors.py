# tickstate/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Hashable


class StateMachineError(Exception):
    """
    Base exception class for errors raised by the state machine runtime.
    """


class ValidationError(StateMachineError):
    """
    Raised when a machine configuration violates a construction-time constraint.
    """


class DuplicateStateError(ValidationError):
    """
    Raised when two states supplied to one machine share an identifier.
    """

    def __init__(self, state_id: Hashable) -> None:
        super().__init__(f"Duplicate state id: {state_id!r}")
        self.state_id = state_id


class StateNotFoundError(StateMachineError):
    """
    Raised when a referenced state identifier has no registered state.
    """

    def __init__(self, state_id: Hashable) -> None:
        super().__init__(f"State not found: {state_id!r}")
        self.state_id = state_id


class MachineNotStartedError(StateMachineError):
    """
    Raised when an operation requires a started machine.
    """

    def __init__(self, message: str = "State machine has not been started. Call start() first.") -> None:
        super().__init__(message)


class TransitionError(StateMachineError):
    """
    Raised when an attempted state transition is invalid or cannot be completed.
    """


class TransitionDeniedError(TransitionError):
    """
    Raised when the current state's guard rejects a requested transition.
    """

    def __init__(self, from_state: Hashable, to_state: Hashable) -> None:
        super().__init__(f"Transition denied: {from_state!r} -> {to_state!r}")
        self.from_state = from_state
        self.to_state = to_state
