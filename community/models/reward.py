"""
Rank and Prize Data Models

Configuration records for the rank ladder and the roulette prize table.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Rank:
    """A named band of the ladder starting at `min_points`."""
    id: int
    name: str
    min_points: int
    color: str

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'Rank':
        return cls(
            id=record['id'],
            name=record['name'],
            min_points=record.get('minPoints', 0),
            color=record.get('color', '')
        )

    def to_record(self) -> Dict[str, Any]:
        return {'id': self.id, 'name': self.name, 'minPoints': self.min_points, 'color': self.color}


@dataclass(frozen=True)
class Prize:
    """Roulette prize; `probability` is a relative weight."""
    id: int
    name: str
    value: int
    color: str
    probability: float

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'Prize':
        return cls(
            id=record['id'],
            name=record['name'],
            value=record.get('value', 0),
            color=record.get('color', ''),
            probability=record.get('probability', 0)
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'value': self.value,
            'color': self.color,
            'probability': self.probability
        }
