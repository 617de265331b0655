"""
Derived Attribute Calculator

Composite attributes computed from a player's raw attribute map. Missing
columns count as 0.
"""

from typing import Mapping

from models.constants import ACCELERATION, PACE, SET_PIECE_ATTRIBUTES, STAMINA, WORK_RATE
from models.player import CalculatedAttributes


def calculate_derived_attributes(attributes: Mapping[str, float]) -> CalculatedAttributes:
    """
    Calculate speed, work rate and set-piece ability.

    Args:
        attributes: Raw attribute map (column header -> value)

    Returns:
        CalculatedAttributes where
        - speed = (Pac + Acc) / 2
        - work_rate = (Wor + Sta) / 2
        - set_pieces = mean of the positive values among Cor, Fre, Pen, Thr
          (0 when none are positive)
    """
    speed = (attributes.get(PACE, 0.0) + attributes.get(ACCELERATION, 0.0)) / 2
    work_rate = (attributes.get(WORK_RATE, 0.0) + attributes.get(STAMINA, 0.0)) / 2

    set_piece_values = [
        attributes.get(attr, 0.0)
        for attr in SET_PIECE_ATTRIBUTES
        if attributes.get(attr, 0.0) > 0
    ]
    set_pieces = sum(set_piece_values) / len(set_piece_values) if set_piece_values else 0.0

    return CalculatedAttributes(
        speed=speed,
        work_rate=work_rate,
        set_pieces=set_pieces
    )
