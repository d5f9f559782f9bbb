"""
Message Service

Append-only chat feed with newest-first offset/limit pagination.
"""

from datetime import datetime
from typing import Any, Callable, Dict, Optional

from ..models.message import Message
from ..storage.record_store import IdAllocator, MESSAGES, RecordStore
from ..utils.activity_logger import activity_logger
from ..utils.errors import ValidationError
from ..utils.helpers import parse_timestamp, to_int, utc_now

DEFAULT_PAGE_SIZE = 50


class MessageService:
    """Posts and pages through the messages collection."""

    def __init__(self, store: RecordStore, user_service,
                 clock: Optional[Callable[[], datetime]] = None,
                 id_allocator: Optional[IdAllocator] = None,
                 page_size: int = DEFAULT_PAGE_SIZE):
        self.store = store
        self.user_service = user_service
        self.clock = clock or utc_now
        self.ids = id_allocator or IdAllocator()
        self.page_size = page_size

    def post(self, user_id: Any, text: Any) -> Dict[str, Any]:
        """
        Append a message from `user_id`.

        The poster's current username and avatar are copied into the
        message and stay as they were even if the user changes them later.

        Args:
            user_id: Poster id (numeric strings are accepted)
            text: Message body

        Returns:
            The stored message

        Raises:
            ValidationError: If text is blank or user_id is not an integer
            NotFoundError: If the user does not exist
        """
        poster_id = to_int(user_id)
        if poster_id is None:
            raise ValidationError("userId is required")
        if not isinstance(text, str) or not text.strip():
            raise ValidationError("text is required")

        # Resolve the poster before taking the messages lock
        user = self.user_service.get_record(poster_id)

        with self.store.transaction(MESSAGES) as records:
            message = Message(
                id=self.ids.next_id(r.get('id') for r in records),
                user_id=user.id,
                username=user.username,
                avatar=user.avatar,
                text=text,
                timestamp=self.clock().isoformat()
            )
            records.append(message.to_record())

        activity_logger.log_event('message_posted', user.id, message_id=message.id)
        return message.to_record()

    def list(self, limit: Any = None, offset: Any = None) -> Dict[str, Any]:
        """
        Page through messages, most recent first.

        Args:
            limit: Page size; non-numeric or missing means the default page
                size, negative values clamp to 0
            offset: Messages to skip; missing means 0, negative clamps to 0

        Returns:
            Dict with 'messages', 'total' and 'hasMore'
        """
        limit = max(to_int(limit, self.page_size), 0)
        offset = max(to_int(offset, 0), 0)

        records = self.store.load(MESSAGES)
        # sorted() is stable, so equal timestamps keep insertion order
        ordered = sorted(records, key=lambda r: parse_timestamp(r['timestamp']), reverse=True)

        return {
            'messages': ordered[offset:offset + limit],
            'total': len(records),
            'hasMore': offset + limit < len(records)
        }

    def count(self) -> int:
        return len(self.store.load(MESSAGES))


# Global service instance
_message_service = None


def get_message_service() -> Optional[MessageService]:
    """Get the global message service instance."""
    return _message_service


def initialize_message_service(store: RecordStore, user_service, **kwargs) -> MessageService:
    """Initialize the global message service instance."""
    global _message_service
    _message_service = MessageService(store, user_service, **kwargs)
    return _message_service
