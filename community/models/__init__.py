"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .message import Message
from .reward import Prize, Rank
from .user import User, UserStatus

__all__ = ['Message', 'Prize', 'Rank', 'User', 'UserStatus']
