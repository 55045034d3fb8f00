# tickstate/core/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Type definitions shared across the runtime.

Kept free of runtime imports from other modules so that state.py, event.py
and machine.py can all depend on it.
"""

from typing import TYPE_CHECKING, Any, Callable, Hashable, TypeVar

if TYPE_CHECKING:
    from tickstate.core.event import TransitionEvent

# Context bound to a machine. Opaque to the runtime.
C = TypeVar("C")

# State identifier. Anything hashable: str, Enum member, int.
S = TypeVar("S", bound=Hashable)

StateID = Hashable

# Callback types
Listener = Callable[["TransitionEvent[Any]"], None]
Unsubscribe = Callable[[], None]
