"""
Analyzers Package

Contains the derived attribute calculator and the role fit scorer.
"""

from .derived_attributes import calculate_derived_attributes
from .role_fit_scorer import RoleFitScorer

__all__ = ['calculate_derived_attributes', 'RoleFitScorer']
