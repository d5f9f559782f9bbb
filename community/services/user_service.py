"""
User Service

Handles user registration, login, profile updates and point credits on top
of the users collection.
"""

from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from ..config.community_settings import DEFAULT_FLOOR_RANK, avatar_for
from ..models.user import User, UserStatus
from ..storage.record_store import IdAllocator, RecordStore, USERS
from ..utils.activity_logger import activity_logger
from ..utils.errors import ConflictError, NotFoundError, UnauthorizedError, ValidationError
from ..utils.helpers import utc_now
from .rank_service import load_ladder

UPDATABLE_FIELDS = ('username', 'email', 'password', 'points', 'rank', 'avatar', 'status')
STRING_FIELDS = ('username', 'email', 'password', 'rank', 'avatar')


def _require_text(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required")
    return value


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class UserService:
    """
    User directory backed by the users collection.

    Every mutation runs inside a store transaction, so the read, the change
    and the write of the whole collection happen as one unit.
    """

    def __init__(self, store: RecordStore,
                 clock: Optional[Callable[[], datetime]] = None,
                 id_allocator: Optional[IdAllocator] = None):
        self.store = store
        self.clock = clock or utc_now
        self.ids = id_allocator or IdAllocator()

    def _now(self) -> str:
        return self.clock().isoformat()

    @staticmethod
    def _find_index(records: List[Dict], user_id: int) -> int:
        for index, record in enumerate(records):
            if record.get('id') == user_id:
                return index
        raise NotFoundError("User not found")

    def list_users(self) -> List[Dict[str, Any]]:
        """Return every user without passwords."""
        return [User.from_record(record).to_public() for record in self.store.load(USERS)]

    def get_record(self, user_id: int) -> User:
        """
        Get the full user model, password included, for collaborating services.

        Raises:
            NotFoundError: If no user has this id
        """
        records = self.store.load(USERS)
        return User.from_record(records[self._find_index(records, user_id)])

    def get_user(self, user_id: int) -> Dict[str, Any]:
        """Public projection of a single user."""
        return self.get_record(user_id).to_public()

    def register(self, username: Any, email: Any, password: Any) -> Dict[str, Any]:
        """
        Register a new user.

        Args:
            username: Unique display name
            email: Unique email address
            password: Stored as given and compared exactly on login

        Returns:
            Public projection of the new user

        Raises:
            ValidationError: If a field is missing or not a string
            ConflictError: If the username or email is already taken
        """
        _require_text(username, 'username')
        _require_text(email, 'email')
        _require_text(password, 'password')

        # Ladder is read before the users lock is taken
        ladder = load_ladder(self.store)
        floor_rank = ladder[0].name if ladder else None

        with self.store.transaction(USERS) as records:
            if any(r.get('username') == username or r.get('email') == email for r in records):
                raise ConflictError("Username or email already exists")

            now = self._now()
            user = User(
                id=self.ids.next_id(r.get('id') for r in records),
                username=username,
                email=email,
                password=password,
                points=0,
                rank=floor_rank or DEFAULT_FLOOR_RANK,
                join_date=now,
                last_login=now,
                avatar=avatar_for(username),
                status=UserStatus.ONLINE.value
            )
            records.append(user.to_record())

        activity_logger.log_event('user_registered', user.id, username=username)
        return user.to_public()

    def authenticate(self, username: Any, password: Any) -> Dict[str, Any]:
        """
        Check credentials and mark the user online.

        Raises:
            ValidationError: If username or password is missing
            UnauthorizedError: If no user matches both fields exactly
        """
        _require_text(username, 'username')
        _require_text(password, 'password')

        with self.store.transaction(USERS) as records:
            for record in records:
                if record.get('username') == username and record.get('password') == password:
                    record['lastLogin'] = self._now()
                    record['status'] = UserStatus.ONLINE.value
                    user = User.from_record(record)
                    break
            else:
                raise UnauthorizedError("Invalid credentials")

        return user.to_public()

    def update_user(self, user_id: int, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Shallow-merge `fields` over the stored user.

        `id` is never changed; any other key outside UPDATABLE_FIELDS is
        rejected.

        Raises:
            NotFoundError: If the user does not exist
            ValidationError: If a field is unknown or has an invalid value
            ConflictError: If the new username or email belongs to someone else
        """
        if not isinstance(fields, dict):
            raise ValidationError("Update must be an object")

        changes = {key: value for key, value in fields.items() if key != 'id'}
        unknown = sorted(set(changes) - set(UPDATABLE_FIELDS))
        if unknown:
            raise ValidationError(f"Fields cannot be updated: {', '.join(unknown)}")

        for key in STRING_FIELDS:
            if key in changes:
                _require_text(changes[key], key)
        if 'points' in changes and (not _is_int(changes['points']) or changes['points'] < 0):
            raise ValidationError("points must be a non-negative integer")
        if 'status' in changes and changes['status'] not in [s.value for s in UserStatus]:
            raise ValidationError("status must be 'online' or 'offline'")

        with self.store.transaction(USERS) as records:
            index = self._find_index(records, user_id)
            for key in ('username', 'email'):
                if key in changes and any(
                        r.get(key) == changes[key] and r.get('id') != user_id for r in records):
                    raise ConflictError("Username or email already exists")

            records[index] = {**records[index], **changes}
            user = User.from_record(records[index])

        return user.to_public()

    def set_status(self, user_id: int, status: UserStatus) -> Dict[str, Any]:
        """Set a user's presence status."""
        return self.update_user(user_id, {'status': status.value})

    def credit_points(self, user_id: int, amount: int) -> int:
        """
        Add `amount` to a user's points. The stored rank is left untouched.

        Returns:
            The user's new point total

        Raises:
            NotFoundError: If the user does not exist
            ValidationError: If amount is not an integer or the total would go negative
        """
        if not _is_int(amount):
            raise ValidationError("amount must be an integer")

        with self.store.transaction(USERS) as records:
            record = records[self._find_index(records, user_id)]
            total = record.get('points', 0) + amount
            if total < 0:
                raise ValidationError("points cannot go below zero")
            record['points'] = total

        return total


# Global service instance
_user_service = None


def get_user_service() -> Optional[UserService]:
    """Get the global user service instance."""
    return _user_service


def initialize_user_service(store: RecordStore, **kwargs) -> UserService:
    """Initialize the global user service instance."""
    global _user_service
    _user_service = UserService(store, **kwargs)
    return _user_service
