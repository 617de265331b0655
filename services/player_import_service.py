"""
Player Import Service - Orchestrates the import and scoring workflow.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Union

from analyzers.role_fit_scorer import RoleFitScorer
from models.constants import BEST_ROLES_KEY, MAX_PLAYERS, ROLE_SCORES_KEY
from models.player import ImportResult, Player
from models.role_definitions import RoleCatalogue
from schemas.player_batch import ScoreRequestSchema, to_attribute_map
from services.import_errors import FileReadError, PlayerImportError, SizeLimitExceededError
from services.player_builder import PlayerRecordBuilder
from services.table_importer import AdapterFactory

logger = logging.getLogger(__name__)


class PlayerImportService:
    """Manages the end-to-end player import process."""

    def __init__(self, catalogue: RoleCatalogue, max_players: int = MAX_PLAYERS):
        """
        Initialize the import service.

        Args:
            catalogue: Role catalogue used for every import (read only)
            max_players: Largest number of players a single file may hold
        """
        self.catalogue = catalogue
        self.max_players = max_players
        self.adapter_factory = AdapterFactory()
        self.builder = PlayerRecordBuilder(catalogue)
        self.scorer = self.builder.scorer

    def import_file(self, file_path: Union[str, Path]) -> ImportResult:
        """
        Import a player export from disk.

        1. Picks the adapter from the file extension
        2. Reads the file
        3. Parses the table and builds scored players
        4. Enforces the player limit

        Args:
            file_path: Path to an .html, .htm or .csv export

        Returns:
            ImportResult; failures are reported through its error field
        """
        try:
            adapter = self.adapter_factory.get_adapter(file_path)
            content = self._read_file(file_path)
            players = self._import(content, adapter)
        except PlayerImportError as e:
            logger.warning(f"Import of {file_path} failed: {e}")
            return ImportResult.failure(str(e))

        logger.info(f"Imported {len(players)} players from {file_path}")
        return ImportResult.ok(players)

    def import_content(self, content: str, filename: str) -> ImportResult:
        """
        Import a player export that is already in memory (e.g. an upload).

        Args:
            content: File content
            filename: Original file name, used to pick the adapter

        Returns:
            ImportResult; failures are reported through its error field
        """
        try:
            adapter = self.adapter_factory.get_adapter(filename)
            players = self._import(content, adapter)
        except PlayerImportError as e:
            logger.warning(f"Import of {filename} failed: {e}")
            return ImportResult.failure(str(e))

        logger.info(f"Imported {len(players)} players from {filename}")
        return ImportResult.ok(players)

    def score_selected(self, players: Iterable[Mapping[str, Any]],
                       role_codes: Iterable[str]) -> List[Dict[str, Any]]:
        """
        Recompute role scores for already-imported player records.

        Args:
            players: Player records (field name -> number or text)
            role_codes: Codes of the roles to score; unknown codes are ignored

        Returns:
            Copies of the input records with a "roleScores" dict and a
            "bestRoles" ranking of those scores added

        Raises:
            pydantic.ValidationError: If a record is not a mapping or a code
                is not a string
        """
        batch = ScoreRequestSchema(players=list(players), role_codes=list(role_codes))
        results = []

        for player_data in batch.players:
            attributes = to_attribute_map(player_data)
            result = dict(player_data)
            scores = self.scorer.score_selected(attributes, batch.role_codes)
            result[ROLE_SCORES_KEY] = scores
            result[BEST_ROLES_KEY] = [fit.to_dict() for fit in self.scorer.best_roles(scores)]
            results.append(result)

        return results

    def _import(self, content: str, adapter) -> List[Player]:
        table = adapter.parse(content)
        players = self.builder.build_players(table, adapter.source_label)

        if len(players) > self.max_players:
            raise SizeLimitExceededError(
                f"File too large: {len(players)} players found (maximum {self.max_players:,})"
            )

        return players

    def _read_file(self, file_path: Union[str, Path]) -> str:
        """Read a whole export as text, dropping any UTF-8 byte order mark."""
        try:
            with open(file_path, 'r', encoding='utf-8-sig') as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(f"Failed to read file: {e}") from e
