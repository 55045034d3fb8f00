# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from dataclasses import dataclass, field
from typing import List, Optional

import pytest

from tickstate.core.state import BaseState


@dataclass
class MoveContext:
    """Shared context for the movement test machine."""

    speed: float = 0
    log: List[str] = field(default_factory=list)


class IdleState(BaseState[MoveContext, str]):
    id = "idle"

    def on_enter(self, ctx: MoveContext, previous_id: Optional[str]) -> None:
        ctx.log.append("enter:idle")

    def on_exit(self, ctx: MoveContext, next_id: Optional[str]) -> None:
        ctx.log.append("exit:idle")


class WalkingState(BaseState[MoveContext, str]):
    id = "walking"

    def on_enter(self, ctx: MoveContext, previous_id: Optional[str]) -> None:
        ctx.speed = 1
        ctx.log.append("enter:walking")

    def on_update(self, ctx: MoveContext, dt: float) -> Optional[str]:
        ctx.speed += dt
        if ctx.speed >= 5:
            return "running"
        return None

    def on_exit(self, ctx: MoveContext, next_id: Optional[str]) -> None:
        ctx.log.append("exit:walking")


class RunningState(BaseState[MoveContext, str]):
    id = "running"

    def on_enter(self, ctx: MoveContext, previous_id: Optional[str]) -> None:
        ctx.log.append("enter:running")

    def on_exit(self, ctx: MoveContext, next_id: Optional[str]) -> None:
        ctx.log.append("exit:running")


class StoppedState(BaseState[MoveContext, str]):
    id = "stopped"

    def on_enter(self, ctx: MoveContext, previous_id: Optional[str]) -> None:
        ctx.speed = 0
        ctx.log.append("enter:stopped")


@pytest.fixture
def move_context() -> MoveContext:
    return MoveContext()


@pytest.fixture
def move_states():
    """Fresh idle/walking/running/stopped states."""
    return [IdleState(), WalkingState(), RunningState(), StoppedState()]


@pytest.fixture
def config_factory(move_states, move_context):
    """Returns a factory building a movement MachineConfig with overrides."""
    from tickstate.core.config import MachineConfig

    def _factory(**overrides):
        config = MachineConfig(states=move_states, initial_state="idle", context=move_context)
        return config.replace(**overrides) if overrides else config

    return _factory


@pytest.fixture
def machine_factory(config_factory):
    """Returns a factory function to create a movement state machine."""
    from tickstate.core.machine import StateMachine

    def _factory(**overrides):
        return StateMachine(config_factory(**overrides))

    return _factory


@pytest.fixture
def machine(machine_factory):
    return machine_factory()


@pytest.fixture
def started_machine(machine):
    machine.start()
    return machine


@pytest.fixture
def error_classes():
    """Provides a tuple of error classes for quick reference."""
    from tickstate.core.errors import (
        DuplicateStateError,
        MachineNotStartedError,
        StateMachineError,
        StateNotFoundError,
        TransitionDeniedError,
        TransitionError,
        ValidationError,
    )

    return (
        StateMachineError,
        ValidationError,
        DuplicateStateError,
        StateNotFoundError,
        MachineNotStartedError,
        TransitionError,
        TransitionDeniedError,
    )
