"""
Community Configuration Constants Module

Seed data for the rank ladder and the roulette prize table, plus the
integrity checks applied to them. These values are written to storage the
first time the server starts and are treated as read-mostly afterwards.
"""

from typing import Dict, Final, List
from urllib.parse import quote

DEFAULT_RANKS: Final[List[Dict]] = [
    {'id': 1, 'name': 'Membro', 'minPoints': 0, 'color': '#00ff00'},
    {'id': 2, 'name': 'Bronze', 'minPoints': 100, 'color': '#cd7f32'},
    {'id': 3, 'name': 'Prata', 'minPoints': 250, 'color': '#c0c0c0'},
    {'id': 4, 'name': 'Ouro', 'minPoints': 500, 'color': '#ffd700'},
    {'id': 5, 'name': 'Diamante', 'minPoints': 1000, 'color': '#b9f2ff'},
    {'id': 6, 'name': 'Mestre', 'minPoints': 2000, 'color': '#ff6b6b'},
]
"""
Rank ladder ordered by minPoints. Exactly one tier sits at 0 and acts as
the floor every new user starts on.
"""

DEFAULT_PRIZES: Final[List[Dict]] = [
    {'id': 1, 'name': '10 Moedas', 'value': 10, 'color': '#ff0000', 'probability': 30},
    {'id': 2, 'name': '25 Moedas', 'value': 25, 'color': '#00ff00', 'probability': 25},
    {'id': 3, 'name': '50 Moedas', 'value': 50, 'color': '#0000ff', 'probability': 20},
    {'id': 4, 'name': '100 Moedas', 'value': 100, 'color': '#ffff00', 'probability': 15},
    {'id': 5, 'name': 'Jackpot!', 'value': 500, 'color': '#ff00ff', 'probability': 8},
    {'id': 6, 'name': 'Tente novamente', 'value': 0, 'color': '#00ffff', 'probability': 2},
]
"""
Roulette prizes. `probability` is a relative weight, not a percentage.
"""

DEFAULT_FLOOR_RANK: Final[str] = DEFAULT_RANKS[0]['name']

AVATAR_URL_TEMPLATE: Final[str] = 'https://api.dicebear.com/7.x/avataaars/svg?seed={seed}'


def avatar_for(username: str) -> str:
    """Build the deterministic avatar URI for a username."""
    return AVATAR_URL_TEMPLATE.format(seed=quote(username, safe=''))


def validate_rank_ladder(ranks: List[Dict]) -> bool:
    """
    Validates the rank ladder.

    This function checks that:
    1. The ladder is not empty
    2. Every rank has a unique name and a non-negative integer minPoints
    3. Exactly one rank has minPoints == 0 (the floor tier)

    Returns:
        bool: True if the ladder passes all checks

    Raises:
        ValueError: Describing the first violated rule
    """
    if not ranks:
        raise ValueError("Rank ladder cannot be empty")

    names = set()
    for index, rank in enumerate(ranks):
        name = rank.get('name')
        min_points = rank.get('minPoints')
        if not name:
            raise ValueError(f"Rank at index {index} has no name")
        if name in names:
            raise ValueError(f"Duplicate rank name '{name}'")
        names.add(name)
        if not isinstance(min_points, int) or isinstance(min_points, bool) or min_points < 0:
            raise ValueError(f"Rank '{name}' has invalid minPoints {min_points!r}")

    floors = [rank for rank in ranks if rank['minPoints'] == 0]
    if len(floors) != 1:
        raise ValueError(f"Rank ladder must have exactly one floor tier, found {len(floors)}")

    return True


def validate_prize_table(prizes: List[Dict]) -> bool:
    """
    Validates the roulette prize table.

    Raises:
        ValueError: If the table is empty, a value is negative or a
            probability is not a positive number
    """
    if not prizes:
        raise ValueError("Prize table cannot be empty")

    for index, prize in enumerate(prizes):
        value = prize.get('value')
        weight = prize.get('probability')
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise ValueError(f"Prize at index {index} has invalid value {value!r}")
        if not isinstance(weight, (int, float)) or isinstance(weight, bool) or weight <= 0:
            raise ValueError(f"Prize at index {index} has invalid probability {weight!r}")

    return True
