"""
Tabular Importer for Football Manager Attribute Exports

Two adapters turn raw file content into a canonical ParsedTable: a header
row plus data rows of the same length. HTML exports ("Print screen" from a
player search view) are read with BeautifulSoup; CSV exports with pandas.
"""

import logging
from dataclasses import dataclass, field
from io import StringIO
from pathlib import Path
from typing import List, Union

import pandas as pd
from bs4 import BeautifulSoup

from models.constants import CSV_EXTENSIONS, HTML_EXTENSIONS
from services.import_errors import StructuralError, UnsupportedFormatError

logger = logging.getLogger(__name__)


@dataclass
class ParsedTable:
    """
    Header and data rows extracted from an export.

    Every row has exactly len(header) cells.
    """
    header: List[str]
    rows: List[List[str]] = field(default_factory=list)


class HTMLTableAdapter:
    """Reads the first table of an HTML export."""

    source_label = 'HTML'

    def parse(self, content: str) -> ParsedTable:
        """
        Parse HTML content into a ParsedTable.

        The first row of the first table is the header (th or td cells).
        Later rows whose cell count differs from the header are skipped.

        Args:
            content: Raw HTML document

        Returns:
            ParsedTable with the header and the rows that match it

        Raises:
            StructuralError: If there is no table or the table has no rows
        """
        soup = BeautifulSoup(content, 'html.parser')

        table = soup.find('table')
        if not table:
            raise StructuralError("No table found in HTML file")

        rows = table.find_all('tr')
        if not rows:
            raise StructuralError("No header row found")

        header = self._row_cells(rows[0])
        parsed = ParsedTable(header=header)

        for index, row in enumerate(rows[1:], start=2):
            cells = self._row_cells(row)
            if len(cells) != len(header):
                logger.debug(
                    f"Skipping HTML row {index}: {len(cells)} cells, header has {len(header)}"
                )
                continue
            parsed.rows.append(cells)

        return parsed

    def _row_cells(self, row) -> List[str]:
        return [self._clean_cell_text(cell.get_text()) for cell in row.find_all(['th', 'td'])]

    def _clean_cell_text(self, text: str) -> str:
        """
        Clean cell text (strip whitespace).

        Args:
            text: Raw cell text

        Returns:
            Cleaned text
        """
        return text.strip()


class CSVTableAdapter:
    """Reads a comma-separated export whose first record is the header."""

    source_label = 'CSV'

    def parse(self, content: str) -> ParsedTable:
        """
        Parse CSV content into a ParsedTable.

        Cells are kept as text exactly as written. The header is read as an
        ordinary record so that repeated column names are preserved.

        Args:
            content: Raw CSV text

        Returns:
            ParsedTable with the header and every data record

        Raises:
            StructuralError: If the content is empty or a record does not
                have the same number of fields as the header
        """
        try:
            df = pd.read_csv(
                StringIO(content),
                header=None,
                dtype=object,
                keep_default_na=False,
                skip_blank_lines=True,
                engine='python'
            )
        except pd.errors.EmptyDataError as e:
            raise StructuralError(f"Failed to read CSV headers: {str(e)}") from e
        except pd.errors.ParserError as e:
            raise StructuralError(f"Failed to read CSV record: {str(e)}") from e

        records = df.values.tolist()
        header = [str(cell) for cell in records[0]]
        parsed = ParsedTable(header=header)

        for index, record in enumerate(records[1:], start=2):
            # Fields missing from a short record come back as None; empty fields stay ''
            if any(pd.isna(cell) for cell in record):
                present = sum(1 for cell in record if not pd.isna(cell))
                raise StructuralError(
                    f"Failed to read CSV record: record {index} has {present} fields, "
                    f"expected {len(header)}"
                )
            parsed.rows.append([str(cell) for cell in record])

        return parsed


class AdapterFactory:
    """Selects the table adapter from a file name's extension."""

    @staticmethod
    def get_adapter(filename: Union[str, Path]) -> Union[HTMLTableAdapter, CSVTableAdapter]:
        """
        Return the adapter matching the file extension.

        Raises:
            UnsupportedFormatError: For anything but .html, .htm and .csv
        """
        suffix = Path(str(filename)).suffix.lower()

        if suffix in HTML_EXTENSIONS:
            return HTMLTableAdapter()
        if suffix in CSV_EXTENSIONS:
            return CSVTableAdapter()

        raise UnsupportedFormatError("Unsupported file format. Please use HTML or CSV files.")
