# tickstate/core/hierarchical.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from tickstate.core.config import MachineConfig
from tickstate.core.machine import StateMachine
from tickstate.core.state import BaseState
from tickstate.core.types import C, S

logger = logging.getLogger(__name__)

# Identifier type of the child machine's states.
CS = TypeVar("CS")


class HierarchicalState(BaseState[C, S], ABC, Generic[C, S, CS]):
    """
    A state that owns a nested StateMachine for the duration of one activation.

    Entering the state builds a fresh child machine from
    ``create_child_config()`` and starts it, so the child's initial state is
    entered within the same call. Each tick is forwarded to the child. Exiting
    the state stops the child, exiting its current state, and drops it.

    The child shares the parent's context unless ``create_child_config``
    returns a config carrying a different one.
    """

    _child_machine: Optional[StateMachine[C, CS]] = None

    @abstractmethod
    def create_child_config(self, ctx: C) -> MachineConfig[C, CS]:
        """
        Build the configuration of the child machine.

        :param ctx: The parent machine's context.
        """
        raise NotImplementedError

    @property
    def child_machine(self) -> Optional[StateMachine[C, CS]]:
        """The running child machine, or None while this state is inactive."""
        return self._child_machine

    @property
    def child_state_id(self) -> Optional[CS]:
        if self._child_machine is None or not self._child_machine.is_started:
            return None
        return self._child_machine.current_state_id

    def on_enter(self, ctx: C, previous_id: Optional[S]) -> None:
        config = self.create_child_config(ctx)
        self._child_machine = StateMachine(config)
        logger.debug("Starting child machine of %r", self.id)
        self._child_machine.start()

    def on_update(self, ctx: C, dt: float) -> Optional[S]:
        """
        Drive the child machine. Subclasses adding parent-level transitions
        should call this first and then inspect the context or child state.
        """
        if self._child_machine is not None:
            self._child_machine.update(dt)
        return None

    def on_exit(self, ctx: C, next_id: Optional[S]) -> None:
        child = self._child_machine
        self._child_machine = None
        if child is not None:
            logger.debug("Stopping child machine of %r", self.id)
            child.stop()
