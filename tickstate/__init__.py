"""tickstate: embeddable tick-driven finite state machine runtime

This package manages a single current state for a caller-owned context object,
drives per-tick updates, executes guarded transitions and records a bounded
history of state changes.

Responsibilities:
    - State contract and no-op base implementation
    - Guarded transitions with ordered lifecycle hooks
    - Hierarchical composition through nested machines
    - Transition history and listener notification
    - Fixed-rate tick execution

Cross-cutting Concerns:
    Thread Safety:
        - Machines are single-threaded; callers serialize access
        - The executor's stop flag is the only lock-protected value

    Error Handling:
        - Structured error hierarchy rooted at StateMachineError
        - Hook and listener exceptions propagate unchanged

    Logging:
        - Module-level loggers under the ``tickstate`` namespace
        - DEBUG records only; handlers are left to the application
"""

from .core import (
    BaseState,
    DuplicateStateError,
    EventLog,
    HierarchicalState,
    MachineConfig,
    MachineNotStartedError,
    StateMachine,
    StateMachineError,
    StateNotFoundError,
    StateProtocol,
    TransitionDeniedError,
    TransitionError,
    TransitionEvent,
    ValidationError,
)
from .runtime import Executor

__version__ = "0.1.0"

__all__ = [
    "BaseState",
    "DuplicateStateError",
    "EventLog",
    "Executor",
    "HierarchicalState",
    "MachineConfig",
    "MachineNotStartedError",
    "StateMachine",
    "StateMachineError",
    "StateNotFoundError",
    "StateProtocol",
    "TransitionDeniedError",
    "TransitionError",
    "TransitionEvent",
    "ValidationError",
]
