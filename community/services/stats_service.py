"""
Stats Service

Read-only rollup over users and messages.
"""

from typing import Any, Dict, Optional

from ..models.user import UserStatus

DEFAULT_TOP_USERS = 10


class StatsService:
    """Aggregates community counters and the points leaderboard."""

    def __init__(self, user_service, message_service, top_limit: int = DEFAULT_TOP_USERS):
        self.user_service = user_service
        self.message_service = message_service
        self.top_limit = top_limit

    def get_stats(self) -> Dict[str, Any]:
        users = self.user_service.list_users()
        # Stable sort keeps registration order among equal scores
        leaders = sorted(users, key=lambda u: u['points'], reverse=True)[:self.top_limit]

        return {
            'totalUsers': len(users),
            'totalMessages': self.message_service.count(),
            'onlineUsers': sum(1 for u in users if u['status'] == UserStatus.ONLINE.value),
            'topUsers': [
                {'username': u['username'], 'points': u['points'], 'rank': u['rank']}
                for u in leaders
            ]
        }


# Global service instance
_stats_service = None


def get_stats_service() -> Optional[StatsService]:
    """Get the global stats service instance."""
    return _stats_service


def initialize_stats_service(user_service, message_service, **kwargs) -> StatsService:
    """Initialize the global stats service instance."""
    global _stats_service
    _stats_service = StatsService(user_service, message_service, **kwargs)
    return _stats_service
