"""
blue_archive: typed client for Blue Archive student data

Fetches the students document, decodes it into frozen pydantic models and
offers lookups and attribute filters over the in-memory dataset.
"""

__version__ = "0.5.0"
__author__ = "blue_archive Contributors"

import logging

# Silent unless the application (or setup_logging) configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Core service imports
from .data import BlueArchiveFetcher, StudentDataset, StudentLoader
from .api import ApiClient, Endpoint, HttpTransport, Query, Transport
from .utils.logging_config import setup_logging

# Errors
from .errors import (
    BlueArchiveError,
    DeserializationError,
    EmptyDatasetError,
    RequestError,
)

# Main data models
from .enums import (
    Armor, BulletType, Club, Position, Rarity, Region, School, Squad, TacticalRole,
    Unknown, WeaponType, parse_enum
)
from .types import ID, Effect, Gear, Skill, Student, Summon, Weapon

__all__ = [
    # Services
    'BlueArchiveFetcher',
    'StudentDataset',
    'StudentLoader',
    'ApiClient',
    'Endpoint',
    'HttpTransport',
    'Transport',
    'Query',

    # Logging
    'setup_logging',

    # Errors
    'BlueArchiveError',
    'DeserializationError',
    'EmptyDatasetError',
    'RequestError',

    # Enumerations
    'Armor',
    'BulletType',
    'Club',
    'Position',
    'Rarity',
    'Region',
    'School',
    'Squad',
    'TacticalRole',
    'Unknown',
    'WeaponType',
    'parse_enum',

    # Data models
    'ID',
    'Effect',
    'Gear',
    'Skill',
    'Student',
    'Summon',
    'Weapon',
]
