"""
Services Package - Import Pipeline

Cell parsing, table adapters and the import error taxonomy. The
orchestrating PlayerImportService lives in services.player_import_service.
"""

from .attribute_parser import parse_attribute_value
from .import_errors import (
    PlayerImportError,
    FileReadError,
    UnsupportedFormatError,
    StructuralError,
    EmptyResultError,
    SizeLimitExceededError
)
from .table_importer import AdapterFactory, CSVTableAdapter, HTMLTableAdapter, ParsedTable

__all__ = [
    'parse_attribute_value',
    'PlayerImportError',
    'FileReadError',
    'UnsupportedFormatError',
    'StructuralError',
    'EmptyResultError',
    'SizeLimitExceededError',
    'AdapterFactory',
    'CSVTableAdapter',
    'HTMLTableAdapter',
    'ParsedTable'
]
