"""
Message Data Models
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Message:
    """
    Chat message. `username` and `avatar` are copied from the poster when
    the message is created and are never refreshed afterwards.
    """
    id: int
    user_id: int
    username: str
    avatar: str
    text: str
    timestamp: str

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'Message':
        return cls(
            id=record['id'],
            user_id=record['userId'],
            username=record.get('username', ''),
            avatar=record.get('avatar', ''),
            text=record.get('text', ''),
            timestamp=record['timestamp']
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'userId': self.user_id,
            'username': self.username,
            'avatar': self.avatar,
            'text': self.text,
            'timestamp': self.timestamp
        }
