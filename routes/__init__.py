"""
Routes Package - Blueprint Registration

Exposes the role catalogue, player import and re-scoring as a JSON API.
"""

from .players import players_bp

__all__ = ['players_bp']
