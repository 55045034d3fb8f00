# tickstate/core/config.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Tuple

from tickstate.core.event import DEFAULT_HISTORY_SIZE
from tickstate.core.types import C, S

if TYPE_CHECKING:
    from tickstate.core.state import StateProtocol


@dataclass(frozen=True)
class MachineConfig(Generic[C, S]):
    """
    Immutable bundle a StateMachine is built from.

    :param states: Every state of the machine, in declaration order.
    :param initial_state: Identifier of the state entered by ``start()``.
    :param context: Caller-owned object handed by reference to every hook.
    :param history_size: Capacity of the transition history.
    """

    states: Tuple["StateProtocol", ...]
    initial_state: S
    context: C
    history_size: int = DEFAULT_HISTORY_SIZE

    def __post_init__(self) -> None:
        # Accept any iterable but freeze it, so later mutation of the caller's
        # list cannot change the machine.
        if not isinstance(self.states, tuple):
            object.__setattr__(self, "states", tuple(self.states))

    def replace(self, **changes: Any) -> "MachineConfig[C, S]":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)
