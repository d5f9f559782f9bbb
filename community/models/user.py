"""
User Data Models

Contains user-related data structures.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class UserStatus(Enum):
    """Presence status shown next to a user."""
    ONLINE = "online"
    OFFLINE = "offline"


@dataclass
class User:
    """User data model. Persisted with camelCase keys."""
    id: int
    username: str
    email: str
    password: str
    points: int = 0
    rank: str = ""
    join_date: str = ""
    last_login: str = ""
    avatar: str = ""
    status: str = UserStatus.ONLINE.value

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'User':
        return cls(
            id=record['id'],
            username=record['username'],
            email=record.get('email', ''),
            password=record.get('password', ''),
            points=record.get('points', 0),
            rank=record.get('rank', ''),
            join_date=record.get('joinDate', ''),
            last_login=record.get('lastLogin', ''),
            avatar=record.get('avatar', ''),
            status=record.get('status', UserStatus.OFFLINE.value)
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
            'password': self.password,
            'points': self.points,
            'rank': self.rank,
            'joinDate': self.join_date,
            'lastLogin': self.last_login,
            'avatar': self.avatar,
            'status': self.status
        }

    def to_public(self) -> Dict[str, Any]:
        """Outward-facing projection; never carries the password."""
        record = self.to_record()
        del record['password']
        return record
