# tickstate/core/state.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Generic, Optional, Protocol, runtime_checkable

from tickstate.core.types import C, S, StateID


@runtime_checkable
class StateProtocol(Protocol):
    """
    Protocol every state must satisfy to be driven by a StateMachine.

    Runtime Invariants:
    - ``id`` is fixed for the lifetime of the state.
    - Hooks are synchronous and run to completion.
    - Machine bookkeeping (previous/next state) arrives as arguments; the
      state itself stores none of it.
    """

    id: StateID

    def can_transition_to(self, target_id: StateID, ctx: object) -> bool:
        """Return False to deny leaving this state for ``target_id``."""
        ...

    def on_enter(self, ctx: object, previous_id: Optional[StateID]) -> None:
        """Called once when the state becomes current."""
        ...

    def on_update(self, ctx: object, dt: float) -> Optional[StateID]:
        """Called once per tick; return an id to request a transition."""
        ...

    def on_exit(self, ctx: object, next_id: Optional[StateID]) -> None:
        """Called once when the state stops being current."""
        ...


class BaseState(Generic[C, S]):
    """
    Default state implementation. The guard always permits and all three
    lifecycle hooks are no-ops, so concrete states override only what they
    need.

    The identifier may be declared as a class attribute::

        class Idle(BaseState[Ctx, str]):
            id = "idle"

    or passed to the constructor: ``BaseState("idle")``.

    Work that would otherwise be asynchronous belongs in its own state whose
    ``on_update`` polls a completion flag on the context.
    """

    id: S

    def __init__(self, state_id: Optional[S] = None) -> None:
        """
        :param state_id: Identifier for this state, overriding any class attribute.
        """
        if state_id is not None:
            self.id = state_id

    def can_transition_to(self, target_id: S, ctx: C) -> bool:
        """
        Guard consulted before the machine leaves this state.

        :param target_id: Identifier of the state being requested.
        :param ctx: The machine's context.
        :return: True to permit the transition.
        """
        return True

    def on_enter(self, ctx: C, previous_id: Optional[S]) -> None:
        """
        :param ctx: The machine's context.
        :param previous_id: State being left, or None on the machine's first activation.
        """

    def on_update(self, ctx: C, dt: float) -> Optional[S]:
        """
        :param ctx: The machine's context.
        :param dt: Elapsed time since the previous tick.
        :return: Identifier to transition to, or None to remain.
        """
        return None

    def on_exit(self, ctx: C, next_id: Optional[S]) -> None:
        """
        :param ctx: The machine's context.
        :param next_id: State being entered, or None when the machine stops.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={getattr(self, 'id', None)!r})"
