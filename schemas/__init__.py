"""
Validation Schemas Package

Contains Pydantic models for validating player batches sent for re-scoring.
"""

from .player_batch import NumericValue, TextValue, ScoreRequestSchema, to_attribute_map

__all__ = ['NumericValue', 'TextValue', 'ScoreRequestSchema', 'to_attribute_map']
