# tests/unit/core/test_state.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from enum import Enum


class Light(Enum):
    RED = "red"
    GREEN = "green"


def test_base_state_defaults():
    from tickstate.core.state import BaseState

    s = BaseState("idle")
    ctx = object()
    assert s.id == "idle"
    assert s.can_transition_to("anything", ctx) is True
    assert s.on_enter(ctx, None) is None
    assert s.on_update(ctx, 0.5) is None
    assert s.on_exit(ctx, None) is None


def test_class_attribute_id():
    from tickstate.core.state import BaseState

    class Red(BaseState):
        id = Light.RED

    assert Red().id is Light.RED
    assert Red(Light.GREEN).id is Light.GREEN


def test_state_satisfies_protocol():
    from tickstate.core.state import BaseState, StateProtocol

    assert isinstance(BaseState("x"), StateProtocol)


def test_duck_typed_state_satisfies_protocol():
    from tickstate.core.state import StateProtocol

    class Plain:
        id = "plain"

        def can_transition_to(self, target_id, ctx):
            return False

        def on_enter(self, ctx, previous_id):
            pass

        def on_update(self, ctx, dt):
            return None

        def on_exit(self, ctx, next_id):
            pass

    assert isinstance(Plain(), StateProtocol)


def test_state_does_not_store_context():
    from tickstate.core.state import BaseState

    s = BaseState("idle")
    s.on_enter({"k": 1}, "prev")
    assert not hasattr(s, "ctx")
    assert not hasattr(s, "previous_id")


def test_repr():
    from tickstate.core.state import BaseState

    assert repr(BaseState("idle")) == "BaseState(id='idle')"
