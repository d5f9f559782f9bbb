"""Tests for the weighted draw and the roulette."""

import random
from collections import Counter

import pytest

from community.config import DEFAULT_PRIZES
from community.storage import ROULETTE
from community.utils.errors import NotFoundError, StorageError
from community.utils.helpers import weighted_choice


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def weight(item):
    return item['w']


class TestWeightedChoice:
    def test_single_item_always_selected(self):
        rng = random.Random(7)
        items = [{'name': 'only', 'w': 100}]
        assert all(weighted_choice(items, weight, rng) is items[0] for _ in range(1000))

    def test_equal_weights_split_evenly(self):
        rng = random.Random(42)
        items = [{'name': 'a', 'w': 5}, {'name': 'b', 'w': 5}]
        counts = Counter(weighted_choice(items, weight, rng)['name'] for _ in range(10000))
        assert 4500 <= counts['a'] <= 5500
        assert 4500 <= counts['b'] <= 5500

    def test_weights_need_not_sum_to_100(self):
        rng = random.Random(3)
        items = [{'name': 'rare', 'w': 1}, {'name': 'common', 'w': 3}]
        counts = Counter(weighted_choice(items, weight, rng)['name'] for _ in range(10000))
        assert 2000 <= counts['rare'] <= 3000

    def test_walk_order(self):
        items = [{'name': 'a', 'w': 1}, {'name': 'b', 'w': 1}, {'name': 'c', 'w': 2}]
        assert weighted_choice(items, weight, FixedRandom(0.0))['name'] == 'a'
        assert weighted_choice(items, weight, FixedRandom(0.25))['name'] == 'a'
        assert weighted_choice(items, weight, FixedRandom(0.3))['name'] == 'b'
        assert weighted_choice(items, weight, FixedRandom(0.9))['name'] == 'c'

    def test_falls_back_to_last_item(self):
        items = [{'name': 'a', 'w': 1}, {'name': 'b', 'w': 1}]
        assert weighted_choice(items, weight, FixedRandom(1.5))['name'] == 'b'

    def test_empty_or_weightless(self):
        with pytest.raises(ValueError):
            weighted_choice([], weight)
        with pytest.raises(ValueError):
            weighted_choice([{'w': 0}], weight)


class TestSpin:
    def test_config_exposes_prize_table(self, roulette_service):
        assert roulette_service.get_config() == {'prizes': DEFAULT_PRIZES}

    def test_single_prize_always_wins(self, store, roulette_service, user_service, alice):
        store.save(ROULETTE, {'prizes': [
            {'id': 1, 'name': 'Hundred', 'value': 100, 'color': '#fff', 'probability': 100}
        ]})

        for spin_number in range(1, 1001):
            result = roulette_service.spin(alice['id'])
            assert result['prize']['name'] == 'Hundred'
            assert result['newPoints'] == 100 * spin_number

        assert user_service.get_user(alice['id'])['points'] == 100000

    def test_credit_is_persisted(self, roulette_service, user_service, alice):
        result = roulette_service.spin(alice['id'])
        assert result['prize'] in DEFAULT_PRIZES
        assert user_service.get_user(alice['id'])['points'] == result['newPoints'] == result['prize']['value']

    def test_zero_value_prize_counts(self, store, roulette_service, user_service, alice):
        store.save(ROULETTE, {'prizes': [
            {'id': 6, 'name': 'Tente novamente', 'value': 0, 'color': '#00ffff', 'probability': 2}
        ]})
        result = roulette_service.spin(alice['id'])
        assert result == {'prize': store.load(ROULETTE)['prizes'][0], 'newPoints': 0}

    def test_does_not_change_rank(self, store, roulette_service, user_service, alice):
        store.save(ROULETTE, {'prizes': [
            {'id': 5, 'name': 'Jackpot!', 'value': 5000, 'color': '#ff00ff', 'probability': 8}
        ]})
        roulette_service.spin(alice['id'])
        assert user_service.get_user(alice['id'])['rank'] == 'Membro'

    def test_unknown_user(self, roulette_service, user_service):
        with pytest.raises(NotFoundError):
            roulette_service.spin(12345)

    def test_empty_prize_table(self, store, roulette_service, user_service, alice):
        store.save(ROULETTE, {'prizes': []})
        with pytest.raises(StorageError):
            roulette_service.spin(alice['id'])
        assert user_service.get_user(alice['id'])['points'] == 0
