"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- community_settings.py: Seed data and its integrity rules (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .community_settings import (
    DEFAULT_RANKS, DEFAULT_PRIZES, DEFAULT_FLOOR_RANK, avatar_for,
    validate_rank_ladder, validate_prize_table
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Community rules
    'DEFAULT_RANKS', 'DEFAULT_PRIZES', 'DEFAULT_FLOOR_RANK', 'avatar_for',
    'validate_rank_ladder', 'validate_prize_table'
]
