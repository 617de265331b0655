"""
Player Batch Validation Schemas

Pydantic models for player batches sent back for re-scoring. Each raw
record value becomes either a numeric or a textual attribute value and is
then converted into a plain attribute map for the scorer.
"""

from typing import Annotated, Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from services.attribute_parser import parse_attribute_value

# Key under which imported players carry their raw attribute map
NESTED_ATTRIBUTES_KEY = 'attributes'


class NumericValue(BaseModel):
    """A value that was already a number."""
    model_config = ConfigDict(frozen=True)

    kind: Literal['numeric'] = 'numeric'
    value: float

    def as_number(self) -> float:
        return self.value


class TextValue(BaseModel):
    """A value given as text (e.g. "14-16" or "-")."""
    model_config = ConfigDict(frozen=True)

    kind: Literal['textual'] = 'textual'
    text: str

    def as_number(self) -> float:
        return parse_attribute_value(self.text)


AttributeValue = Annotated[Union[NumericValue, TextValue], Field(discriminator='kind')]

attribute_value_adapter = TypeAdapter(AttributeValue)


class ScoreRequestSchema(BaseModel):
    """
    Validation schema for a re-scoring request.

    Players are kept as raw records so they can be returned unchanged
    apart from their new role scores. Role codes are matched exactly.
    """
    players: List[Dict[str, Any]] = Field(
        ...,
        description="Previously imported player records"
    )
    role_codes: List[str] = Field(
        ...,
        description="Codes of the roles to score"
    )


def to_attribute_value(raw: Any) -> Optional[AttributeValue]:
    """
    Classify a raw record value.

    Args:
        raw: Value from a deserialized player record

    Returns:
        NumericValue for numbers, TextValue for strings, None for anything
        else (booleans, nulls, lists, nested objects)
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return attribute_value_adapter.validate_python({'kind': 'numeric', 'value': raw})
    if isinstance(raw, str):
        return attribute_value_adapter.validate_python({'kind': 'textual', 'text': raw})
    return None


def flatten_record(record: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Lift a nested "attributes" mapping to the top level of a record.

    Players returned by an import keep their attribute values under
    "attributes"; those entries take precedence over top-level fields of
    the same name.
    """
    fields = dict(record)
    nested = fields.pop(NESTED_ATTRIBUTES_KEY, None)
    if isinstance(nested, Mapping):
        fields.update(nested)
    elif nested is not None:
        fields[NESTED_ATTRIBUTES_KEY] = nested
    return fields


def to_attribute_values(record: Mapping[str, Any]) -> Dict[str, AttributeValue]:
    """Convert every usable field of a raw record into an AttributeValue."""
    values = {}
    for key, raw in flatten_record(record).items():
        value = to_attribute_value(raw)
        if value is not None:
            values[key] = value
    return values


def to_attribute_map(record: Mapping[str, Any]) -> Dict[str, float]:
    """
    Convert a raw player record into a raw attribute map.

    Args:
        record: Player record (field name -> number, text or other JSON
                value), either flat or with an "attributes" mapping

    Returns:
        Dict of {field name: number}; text is parsed with the attribute
        value parser, other values are dropped
    """
    return {key: value.as_number() for key, value in to_attribute_values(record).items()}
