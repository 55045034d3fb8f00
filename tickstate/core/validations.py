# tickstate/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, Dict

from tickstate.core.errors import DuplicateStateError, StateNotFoundError, ValidationError
from tickstate.core.types import StateID

if TYPE_CHECKING:
    from tickstate.core.config import MachineConfig
    from tickstate.core.state import StateProtocol


class Validator:
    """
    Performs construction-time validation of a machine configuration, ensuring
    the state set and initial state conform to the runtime's rules.
    """

    def validate_config(self, config: "MachineConfig") -> Dict[StateID, "StateProtocol"]:
        """
        Check the configuration and build the identifier lookup table.

        :param config: The configuration to validate.
        :return: Mapping from state identifier to state, in declaration order.
        :raises ValidationError: If the state set is empty, a state has no id,
            or the history size is not a positive integer.
        :raises DuplicateStateError: If two states share an identifier.
        :raises StateNotFoundError: If the initial state is not in the state set.
        """
        _DefaultValidationRules.validate_history_size(config.history_size)
        state_map = _DefaultValidationRules.build_state_map(config.states)
        if config.initial_state not in state_map:
            raise StateNotFoundError(config.initial_state)
        return state_map


class _DefaultValidationRules:
    """
    Built-in rules applied to every configuration.
    """

    @staticmethod
    def validate_history_size(history_size: int) -> None:
        if isinstance(history_size, bool) or not isinstance(history_size, int) or history_size < 1:
            raise ValidationError(f"History size must be a positive integer, got {history_size!r}")

    @staticmethod
    def build_state_map(states) -> Dict[StateID, "StateProtocol"]:
        if not states:
            raise ValidationError("A state machine needs at least one state.")

        state_map: Dict[StateID, "StateProtocol"] = {}
        for state in states:
            state_id = getattr(state, "id", None)
            if state_id is None:
                raise ValidationError(f"State {state!r} has no id.")
            if state_id in state_map:
                raise DuplicateStateError(state_id)
            state_map[state_id] = state
        return state_map
