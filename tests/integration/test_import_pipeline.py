"""
Integration Tests for the Player Import Pipeline

Runs real export files from disk through PlayerImportService: adapter
selection, table parsing, player building, scoring and the size limit.
"""

import pytest
from pydantic import ValidationError
from models.constants import BEST_ROLES_KEY, ROLE_SCORES_KEY
from models.player import ImportResult
from services.player_import_service import PlayerImportService


class TestImportFile:
    """End-to-end imports from files on disk."""

    def test_csv_export(self, import_service, write_export):
        """Test ranges, missing markers and nameless rows in one CSV."""
        path = write_export('squad.csv', "Name,Pac\nAlice,14-16\nBob,-\n-,10\n")

        result = import_service.import_file(path)

        assert isinstance(result, ImportResult)
        assert result.success is True
        assert result.error is None
        assert result.player_count == 2
        assert [p.name for p in result.players] == ['Alice', 'Bob']
        assert result.players[0].attributes['Pac'] == 15.0
        assert result.players[1].attributes['Pac'] == 0.0

    def test_html_export(self, import_service, write_export, sample_html):
        path = write_export('squad.html', sample_html)

        result = import_service.import_file(path)

        assert result.success is True
        assert result.player_count == 2

        kane, van_dijk = result.players
        assert kane.club == 'Bayern'
        assert kane.position == 'ST (C)'
        assert van_dijk.attributes['Pac'] == 14.0
        # Stopper: Tck 18 (w5), Hea 17 (w5), Str 18 (w10)
        assert van_dijk.role_scores['sd'] == pytest.approx((0.9 * 5 + 0.85 * 5 + 0.9 * 10) / 20 * 100)
        assert kane.role_scores['st'] > van_dijk.role_scores['st']

    def test_htm_extension_uppercase(self, import_service, write_export, sample_html):
        path = write_export('SQUAD.HTM', sample_html)
        assert import_service.import_file(path).success is True

    def test_byte_order_mark_is_ignored(self, import_service, tmp_path):
        """Test a UTF-8 BOM does not end up in the first header cell."""
        path = tmp_path / 'bom.csv'
        path.write_bytes(b'\xef\xbb\xbfName,Pac\nAlice,12\n')

        result = import_service.import_file(path)

        assert result.success is True
        assert result.players[0].name == 'Alice'

    def test_every_player_scored_for_every_role(self, role_catalogue, write_export, sample_html):
        service = PlayerImportService(role_catalogue)
        path = write_export('squad.html', sample_html)

        result = service.import_file(path)

        for player in result.players:
            assert len(player.role_scores) == len(role_catalogue)
            assert all(0.0 <= score <= 100.0 for score in player.role_scores.values())

    def test_to_dict(self, import_service, write_export):
        path = write_export('squad.csv', "Name,Club,Pac,Acc\nAlice,Leeds,12,14\n")

        data = import_service.import_file(path).to_dict()

        assert data['success'] is True
        assert data['player_count'] == 1
        assert data['players'][0]['club'] == 'Leeds'
        assert data['players'][0]['calculated_attributes']['speed'] == 13.0
        assert set(data['players'][0]['role_scores']) == {'st', 'sd', 'emp'}


class TestImportFailures:
    """Failures come back as unsuccessful results, never exceptions."""

    def test_unsupported_extension(self, import_service, write_export):
        path = write_export('squad.xlsx', "Name,Pac\nAlice,12\n")

        result = import_service.import_file(path)

        assert result.success is False
        assert result.player_count == 0
        assert result.players == []
        assert result.error == "Unsupported file format. Please use HTML or CSV files."

    def test_missing_file(self, import_service, tmp_path):
        result = import_service.import_file(tmp_path / 'missing.csv')

        assert result.success is False
        assert result.error.startswith("Failed to read file")

    def test_unsupported_extension_checked_before_reading(self, import_service, tmp_path):
        result = import_service.import_file(tmp_path / 'missing.txt')
        assert result.error.startswith("Unsupported file format")

    def test_html_rows_all_wrong_width(self, import_service, write_export):
        html = "<table><tr><th>Name</th><th>Fin</th><th>Pac</th></tr><tr><td>A</td><td>1</td></tr></table>"
        path = write_export('squad.html', html)

        result = import_service.import_file(path)

        assert result.success is False
        assert result.error == "No valid player data found in HTML file"

    def test_html_without_table(self, import_service, write_export):
        path = write_export('squad.html', "<html><body>Nothing</body></html>")

        result = import_service.import_file(path)

        assert result.error == "No table found in HTML file"

    def test_csv_without_named_players(self, import_service, write_export):
        path = write_export('squad.csv', "Name,Pac\n-,10\n,12\n")

        result = import_service.import_file(path)

        assert result.error == "No valid player data found in CSV file"

    def test_malformed_csv(self, import_service, write_export):
        path = write_export('squad.csv', "Name,Pac\nAlice,10,11\n")

        result = import_service.import_file(path)

        assert result.success is False
        assert result.error.startswith("Failed to read CSV record")

    def test_empty_csv(self, import_service, write_export):
        path = write_export('squad.csv', "")

        result = import_service.import_file(path)

        assert result.error.startswith("Failed to read CSV headers")


class TestPlayerLimit:
    """Test the maximum number of players per file."""

    @staticmethod
    def _csv(count):
        lines = ["Name,Fin,Pac"]
        lines.extend(f"Player {i},{i % 20 + 1},12" for i in range(count))
        return "\n".join(lines) + "\n"

    def test_exactly_at_limit(self, import_service, write_export):
        path = write_export('big.csv', self._csv(20000))

        result = import_service.import_file(path)

        assert result.success is True
        assert result.player_count == 20000

    def test_over_limit(self, import_service, write_export):
        path = write_export('big.csv', self._csv(20001))

        result = import_service.import_file(path)

        assert result.success is False
        assert result.error == "File too large: 20001 players found (maximum 20,000)"

    def test_custom_limit(self, small_catalogue, write_export):
        service = PlayerImportService(small_catalogue, max_players=2)
        path = write_export('squad.csv', self._csv(3))

        result = service.import_file(path)

        assert result.error == "File too large: 3 players found (maximum 2)"

    def test_nameless_rows_do_not_count(self, small_catalogue, write_export):
        service = PlayerImportService(small_catalogue, max_players=1)
        path = write_export('squad.csv', "Name,Pac\nAlice,10\n-,11\n")

        assert service.import_file(path).success is True


class TestImportContent:
    """Imports of content already in memory."""

    def test_import_content_csv(self, import_service):
        result = import_service.import_content("Name,Fin\nAlice,20\n", 'upload.csv')

        assert result.success is True
        assert result.players[0].role_scores['st'] == pytest.approx(50.0)

    def test_import_content_unsupported(self, import_service):
        result = import_service.import_content("Name,Fin\nAlice,20\n", 'upload.json')
        assert result.success is False


class TestScoreSelected:
    """Re-scoring of already imported player records."""

    def test_adds_role_scores(self, import_service):
        players = [{'name': 'Alice', 'Fin': 20, 'Pac': '18-20'}]

        results = import_service.score_selected(players, ['st', 'sd'])

        assert results[0]['name'] == 'Alice'
        assert results[0]['Fin'] == 20
        assert results[0][ROLE_SCORES_KEY]['st'] == pytest.approx(97.5)
        assert results[0][ROLE_SCORES_KEY]['sd'] == 0.0

    def test_input_records_are_not_modified(self, import_service):
        players = [{'name': 'Alice', 'Fin': 20}]

        import_service.score_selected(players, ['st'])

        assert ROLE_SCORES_KEY not in players[0]

    def test_unknown_codes_are_omitted(self, import_service):
        results = import_service.score_selected([{'Fin': 10}], ['st', 'zzz'])
        assert list(results[0][ROLE_SCORES_KEY]) == ['st']

    def test_non_numeric_fields_are_ignored(self, import_service):
        players = [{'Fin': True, 'Pac': None, 'Tck': [1], 'Str': {'v': 20}}]

        results = import_service.score_selected(players, ['st', 'sd'])

        assert results[0][ROLE_SCORES_KEY] == {'st': 0.0, 'sd': 0.0}

    def test_padded_codes_are_not_trimmed(self, import_service):
        """Test codes must match exactly."""
        results = import_service.score_selected([{'Fin': 10}], [' st', 'st '])
        assert results[0][ROLE_SCORES_KEY] == {}

    def test_adds_best_roles(self, import_service):
        """Test the ranking of the requested roles, best first."""
        players = [{'Fin': 4, 'Pac': 4, 'Tck': 20, 'Hea': 20, 'Str': 20}]

        results = import_service.score_selected(players, ['st', 'sd'])

        assert results[0][BEST_ROLES_KEY] == [
            {'code': 'sd', 'name': 'Stopper - Defend', 'score': pytest.approx(100.0)},
            {'code': 'st', 'name': 'Striker - Attack', 'score': pytest.approx(20.0)},
        ]

    def test_rescores_imported_players(self, import_service):
        """Test players returned by an import score the same when sent back."""
        imported = import_service.import_content("Name,Fin,Pac\nAlice,20,14\n", 'squad.csv')
        record = imported.players[0].to_dict()

        results = import_service.score_selected([record], ['st'])

        assert results[0][ROLE_SCORES_KEY]['st'] == pytest.approx(imported.players[0].role_scores['st'])
        assert results[0][ROLE_SCORES_KEY]['st'] == pytest.approx(85.0)

    def test_empty_batch(self, import_service):
        assert import_service.score_selected([], ['st']) == []

    def test_invalid_batch_shape(self, import_service):
        with pytest.raises(ValidationError):
            import_service.score_selected(['Alice'], ['st'])

    def test_invalid_batch_is_a_value_error(self, import_service):
        with pytest.raises(ValueError):
            import_service.score_selected([{'Fin': 10}], [12])
