"""
Core package providing the state machine runtime.

Architecture:
- States implement one flat interface, looked up by identifier
- The machine owns the current-state pointer and the transition history
- Hierarchical states compose machines by owning a child instance

Design Patterns:
- State Pattern for per-state behavior
- Observer Pattern for transition listeners
- Composite Pattern for nested machines
"""

# Import order matters to avoid circular dependencies
from .errors import (
    DuplicateStateError,
    MachineNotStartedError,
    StateMachineError,
    StateNotFoundError,
    TransitionDeniedError,
    TransitionError,
    ValidationError,
)
from .state import BaseState, StateProtocol
from .event import DEFAULT_HISTORY_SIZE, EventLog, TransitionEvent
from .config import MachineConfig
from .validations import Validator
from .machine import StateMachine
from .hierarchical import HierarchicalState

__all__ = [
    # Errors
    "StateMachineError",
    "ValidationError",
    "DuplicateStateError",
    "StateNotFoundError",
    "MachineNotStartedError",
    "TransitionError",
    "TransitionDeniedError",
    # States
    "StateProtocol",
    "BaseState",
    "HierarchicalState",
    # Events
    "DEFAULT_HISTORY_SIZE",
    "EventLog",
    "TransitionEvent",
    # Machine
    "MachineConfig",
    "Validator",
    "StateMachine",
]
