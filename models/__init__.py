"""
Models package for FM Role Scout.

Provides data models for the role catalogue, players and import results.
"""
from .constants import ATTRIBUTE_CODES, ATTRIBUTE_SLOTS, IDENTITY_FIELDS
from .role_definitions import Role, RoleCatalogue
from .player import CalculatedAttributes, ImportResult, Player, RoleFit

__all__ = [
    'ATTRIBUTE_CODES',
    'ATTRIBUTE_SLOTS',
    'IDENTITY_FIELDS',
    'Role',
    'RoleCatalogue',
    'CalculatedAttributes',
    'ImportResult',
    'Player',
    'RoleFit'
]
