"""Tests for battle resolution against the dice odds tables."""

import pytest

from riskLogic import Rules
from validators import InvariantViolation


class TestDiceCaps:

    def test_attacking_allowed(self):
        assert Rules.attacking_allowed(1) == 1
        assert Rules.attacking_allowed(3) == 3
        assert Rules.attacking_allowed(10) == 3

    def test_defending_allowed(self):
        assert Rules.defending_allowed(1) == 1
        assert Rules.defending_allowed(2) == 2
        assert Rules.defending_allowed(7) == 2


class TestOneArmyAtStake:

    @pytest.mark.parametrize("attacking, defending, threshold", [
        (1, 1, 0.5833),
        (2, 1, 0.4213),
        (3, 1, 0.3403),
        (1, 2, 0.7454),
    ])
    def test_threshold(self, attacking, defending, threshold):
        assert Rules.resolve_battle(attacking, defending, 0.0) == (1, 0)
        assert Rules.resolve_battle(attacking, defending, threshold) == (1, 0)
        assert Rules.resolve_battle(attacking, defending, threshold + 0.0001) == (0, 1)
        assert Rules.resolve_battle(attacking, defending, 0.9999) == (0, 1)

    def test_one_on_one_boundary(self):
        assert Rules.resolve_battle(1, 1, 0.5833) == (1, 0)
        assert Rules.resolve_battle(1, 1, 0.5834) == (0, 1)


class TestTwoArmiesAtStake:

    def test_two_on_two(self):
        assert Rules.resolve_battle(2, 2, 0.4483) == (2, 0)
        assert Rules.resolve_battle(2, 2, 0.4484) == (0, 2)
        assert Rules.resolve_battle(2, 2, 0.6758) == (0, 2)
        assert Rules.resolve_battle(2, 2, 0.6760) == (1, 1)

    def test_three_on_two(self):
        assert Rules.resolve_battle(3, 2, 0.2926) == (2, 0)
        assert Rules.resolve_battle(3, 2, 0.3000) == (0, 2)
        assert Rules.resolve_battle(3, 2, 0.6642) == (0, 2)
        assert Rules.resolve_battle(3, 2, 0.6644) == (1, 1)
        assert Rules.resolve_battle(3, 2, 0.9999) == (1, 1)

    def test_losses_never_exceed_armies_at_stake(self):
        for attacking, defending in Rules.TWO_ARMIES_AT_STAKE:
            for step in range(100):
                attacker_losses, defender_losses = Rules.resolve_battle(
                    attacking, defending, step / 100)
                assert attacker_losses + defender_losses == 2


class TestInvalidBattles:

    @pytest.mark.parametrize("attacking, defending", [
        (0, 1), (1, 0), (4, 1), (2, 3), (0, 0),
    ])
    def test_no_odds_is_fatal(self, attacking, defending):
        with pytest.raises(InvariantViolation):
            Rules.resolve_battle(attacking, defending, 0.5)

    @pytest.mark.parametrize("roll", [-0.1, 1.0, 1.5])
    def test_roll_out_of_range_is_fatal(self, roll):
        with pytest.raises(InvariantViolation):
            Rules.resolve_battle(1, 1, roll)
