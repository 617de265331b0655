"""
Player Data Models

Dataclasses for players imported from Football Manager attribute exports,
their derived attributes, role scores and the result of an import.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class CalculatedAttributes:
    """
    Composite attributes derived from the raw attribute map.

    Attributes:
        speed: Mean of Pace and Acceleration
        work_rate: Mean of Work Rate and Stamina
        set_pieces: Mean of the positive set-piece attributes
                    (Corners, Free Kicks, Penalties, Throw-ins)
    """
    speed: float = 0.0
    work_rate: float = 0.0
    set_pieces: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {
            'speed': self.speed,
            'work_rate': self.work_rate,
            'set_pieces': self.set_pieces
        }


@dataclass(frozen=True)
class RoleFit:
    """One entry of a player's role ranking."""
    code: str
    name: str
    score: float

    def to_dict(self) -> Dict:
        return {'code': self.code, 'name': self.name, 'score': self.score}


@dataclass(frozen=True)
class Player:
    """
    A player row from an attribute export.

    Attributes:
        name: Player's full name
        nationality: Nationality as exported (e.g. "ENG")
        club: Current club
        position: Exported position string (e.g. "D (C)", "AM (RL), ST (C)")
        attributes: Raw attribute map keyed by column header; unknown
                    columns are kept as-is
        calculated_attributes: Speed, work rate and set-piece ability
        role_scores: Role code -> fit score (0-100)
        best_roles: Highest-scoring roles, best first
    """
    name: str
    nationality: str = ""
    club: str = ""
    position: str = ""
    attributes: Dict[str, float] = field(default_factory=dict)
    calculated_attributes: CalculatedAttributes = field(default_factory=CalculatedAttributes)
    role_scores: Dict[str, float] = field(default_factory=dict)
    best_roles: List[RoleFit] = field(default_factory=list)

    def get_attribute(self, code: str) -> float:
        """Raw attribute value, 0 when the export had no such column."""
        return self.attributes.get(code, 0.0)

    def to_dict(self) -> Dict:
        return {
            'name': self.name,
            'nationality': self.nationality,
            'club': self.club,
            'position': self.position,
            'attributes': dict(self.attributes),
            'calculated_attributes': self.calculated_attributes.to_dict(),
            'role_scores': dict(self.role_scores),
            'best_roles': [fit.to_dict() for fit in self.best_roles]
        }


@dataclass(frozen=True)
class ImportResult:
    """
    Outcome of importing one player export.

    Use ImportResult.ok() or ImportResult.failure() so that a result is
    either successful with players or failed with an error message.
    """
    success: bool
    player_count: int
    players: List[Player]
    error: Optional[str] = None

    @classmethod
    def ok(cls, players: List[Player]) -> 'ImportResult':
        return cls(success=True, player_count=len(players), players=list(players), error=None)

    @classmethod
    def failure(cls, message: str) -> 'ImportResult':
        return cls(success=False, player_count=0, players=[], error=message)

    def to_dict(self) -> Dict:
        return {
            'success': self.success,
            'player_count': self.player_count,
            'players': [player.to_dict() for player in self.players],
            'error': self.error
        }
