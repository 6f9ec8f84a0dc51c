"""Тесты для Pause State Machine.

Coverage:
- ACTIVE → PAUSED, PAUSED → ACTIVE
- Повторные pause / unpause (no-op)
- allows_balance_mutation
"""

import pytest

from src.core.domain.token_state import PauseState
from src.pause.state_machine import PauseAction, PauseStateMachine


@pytest.fixture
def sm():
    return PauseStateMachine()


class TestPauseStateMachine:
    """Тесты Pause State Machine."""

    def test_active_to_paused(self, sm):
        result = sm.evaluate_transition(PauseState.ACTIVE, PauseAction.PAUSE)

        assert result.new_state == PauseState.PAUSED
        assert result.previous_state == PauseState.ACTIVE
        assert result.transition_occurred
        assert result.transition_reason == "pause_ACTIVE_to_PAUSED"

    def test_paused_to_active(self, sm):
        result = sm.evaluate_transition(PauseState.PAUSED, PauseAction.UNPAUSE)

        assert result.new_state == PauseState.ACTIVE
        assert result.transition_occurred
        assert result.transition_reason == "unpause_PAUSED_to_ACTIVE"

    def test_redundant_pause_is_noop(self, sm):
        result = sm.evaluate_transition(PauseState.PAUSED, PauseAction.PAUSE)

        assert result.new_state == PauseState.PAUSED
        assert not result.transition_occurred
        assert result.transition_reason == "already_paused"

    def test_redundant_unpause_is_noop(self, sm):
        result = sm.evaluate_transition(PauseState.ACTIVE, PauseAction.UNPAUSE)

        assert result.new_state == PauseState.ACTIVE
        assert not result.transition_occurred
        assert result.transition_reason == "already_active"

    def test_toggle_indefinitely(self, sm):
        """Терминального состояния нет."""
        state = PauseState.ACTIVE
        for _ in range(5):
            state = sm.evaluate_transition(state, PauseAction.PAUSE).new_state
            assert state == PauseState.PAUSED
            state = sm.evaluate_transition(state, PauseAction.UNPAUSE).new_state
            assert state == PauseState.ACTIVE

    def test_allows_balance_mutation(self):
        assert PauseStateMachine.allows_balance_mutation(PauseState.ACTIVE)
        assert not PauseStateMachine.allows_balance_mutation(PauseState.PAUSED)
