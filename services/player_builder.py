"""
Player Record Builder

Maps the header and rows of a ParsedTable onto Player records. The Name,
Nationality, Club and Position columns are copied as text; every other
column is parsed into the raw attribute map.
"""

import logging
from typing import List, Optional, Sequence

from analyzers.derived_attributes import calculate_derived_attributes
from analyzers.role_fit_scorer import RoleFitScorer
from models.constants import (
    CLUB_FIELD,
    MISSING_MARKER,
    NAME_FIELD,
    NATIONALITY_FIELD,
    POSITION_FIELD,
)
from models.player import Player
from models.role_definitions import RoleCatalogue
from services.attribute_parser import parse_attribute_value
from services.import_errors import EmptyResultError
from services.table_importer import ParsedTable

logger = logging.getLogger(__name__)


class PlayerRecordBuilder:
    """Builds scored Player records from parsed export rows."""

    def __init__(self, catalogue: RoleCatalogue):
        self.scorer = RoleFitScorer(catalogue)

    def build_players(self, table: ParsedTable, source_label: str) -> List[Player]:
        """
        Build a Player for every row with a usable name.

        Args:
            table: Header and rows from a table adapter
            source_label: Format name used in the error message ("HTML", "CSV")

        Returns:
            Players in source row order

        Raises:
            EmptyResultError: If no row produced a player
        """
        players = []
        skipped = 0

        for row in table.rows:
            player = self.build_player(table.header, row)
            if player is None:
                skipped += 1
                continue
            players.append(player)

        if skipped:
            logger.debug(f"Skipped {skipped} {source_label} rows without a player name")

        if not players:
            raise EmptyResultError(f"No valid player data found in {source_label} file")

        return players

    def build_player(self, header: Sequence[str], row: Sequence[str]) -> Optional[Player]:
        """
        Build one Player from a row.

        Args:
            header: Column names
            row: Cell text, aligned with header

        Returns:
            Player object, or None if the name is empty or "-"
        """
        identity = {
            NAME_FIELD: '',
            NATIONALITY_FIELD: '',
            CLUB_FIELD: '',
            POSITION_FIELD: ''
        }
        attributes = {}

        for column, value in zip(header, row):
            if column in identity:
                identity[column] = value
            else:
                attributes[column] = parse_attribute_value(value)

        name = identity[NAME_FIELD]
        if not name or name == MISSING_MARKER:
            return None

        role_scores = self.scorer.score_all(attributes)

        return Player(
            name=name,
            nationality=identity[NATIONALITY_FIELD],
            club=identity[CLUB_FIELD],
            position=identity[POSITION_FIELD],
            attributes=attributes,
            calculated_attributes=calculate_derived_attributes(attributes),
            role_scores=role_scores,
            best_roles=self.scorer.best_roles(role_scores)
        )
