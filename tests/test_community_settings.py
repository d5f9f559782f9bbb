"""Tests for seed data and its integrity checks."""

import pytest

from community.config import (
    DEFAULT_PRIZES, DEFAULT_RANKS, avatar_for, validate_prize_table, validate_rank_ladder
)


class TestRankLadder:
    def test_seed_is_valid(self):
        assert validate_rank_ladder(DEFAULT_RANKS) is True

    def test_seed_is_sorted_with_single_floor(self):
        points = [rank['minPoints'] for rank in DEFAULT_RANKS]
        assert points == sorted(points)
        assert points.count(0) == 1

    @pytest.mark.parametrize('ranks', [
        [],
        [{'name': 'A', 'minPoints': 0}, {'name': 'B', 'minPoints': 0}],
        [{'name': 'A', 'minPoints': 10}],
        [{'name': 'A', 'minPoints': 0}, {'name': 'A', 'minPoints': 5}],
        [{'name': 'A', 'minPoints': 0}, {'name': 'B', 'minPoints': -5}],
    ])
    def test_invalid_ladders(self, ranks):
        with pytest.raises(ValueError):
            validate_rank_ladder(ranks)


class TestPrizeTable:
    def test_seed_is_valid(self):
        assert validate_prize_table(DEFAULT_PRIZES) is True

    @pytest.mark.parametrize('prizes', [
        [],
        [{'value': 10, 'probability': 0}],
        [{'value': -1, 'probability': 5}],
        [{'value': 10, 'probability': '5'}],
    ])
    def test_invalid_tables(self, prizes):
        with pytest.raises(ValueError):
            validate_prize_table(prizes)


def test_avatar_is_deterministic_and_quoted():
    assert avatar_for('alice') == 'https://api.dicebear.com/7.x/avataaars/svg?seed=alice'
    assert avatar_for('alice') == avatar_for('alice')
    assert avatar_for('a b&c') == 'https://api.dicebear.com/7.x/avataaars/svg?seed=a%20b%26c'
