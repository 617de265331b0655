"""
Role Definitions for Football Manager Player Scouting

Roles are positional archetypes (e.g. "Advanced Forward - Attack") defined by
an integer weight 0-20 for each of the 40 attribute slots. The catalogue is
loaded from the bundled data/roles.json once, at application start, and is
never mutated afterwards. Services receive it explicitly.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from models.constants import (
    ATTRIBUTE_CODES,
    ROLE_CODE_KEY,
    ROLE_NAME_KEY,
)

logger = logging.getLogger(__name__)

DEFAULT_ROLES_PATH = Path(__file__).resolve().parent.parent / 'data' / 'roles.json'


@dataclass(frozen=True)
class Role:
    """
    A positional archetype used to score player suitability.

    Attributes:
        name: Display name including the duty (e.g. "Winger - Attack")
        code: Unique short code used as the scoring key (e.g. "wa")
        weights: Read-only mapping of attribute code -> weight (0-20),
                 one entry for each of the 40 attribute slots
    """
    name: str
    code: str
    weights: Mapping[str, int]

    @classmethod
    def from_record(cls, record: Mapping) -> 'Role':
        """
        Build a Role from a dataset record.

        Slots absent from the record get a weight of 0.
        """
        weights = {
            attr: int(record.get(attr, 0) or 0)
            for attr in ATTRIBUTE_CODES
        }
        return cls(
            name=str(record[ROLE_NAME_KEY]),
            code=str(record[ROLE_CODE_KEY]),
            weights=MappingProxyType(weights)
        )

    @property
    def weighted_attributes(self) -> Tuple[Tuple[str, int], ...]:
        """(attribute, weight) pairs that contribute to this role's score."""
        return tuple(
            (attr, self.weights[attr])
            for attr in ATTRIBUTE_CODES
            if self.weights.get(attr, 0) > 0
        )

    def to_dict(self) -> Dict:
        """Serialize in the same shape as the bundled dataset."""
        data = {ROLE_NAME_KEY: self.name, ROLE_CODE_KEY: self.code}
        data.update(self.weights)
        return data


@dataclass(frozen=True)
class RoleCatalogue:
    """
    Immutable, ordered collection of roles with O(1) lookup by code.

    Build one with load_default(), from_json() or from_records() and pass
    it by reference into the importer and scorer.
    """
    roles: Tuple[Role, ...]
    _by_code: Mapping[str, Role] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Build the code index on initialization."""
        index = {}
        for role in self.roles:
            # First definition wins if the dataset repeats a code
            index.setdefault(role.code, role)
        object.__setattr__(self, 'roles', tuple(self.roles))
        object.__setattr__(self, '_by_code', MappingProxyType(index))

    @classmethod
    def from_records(cls, records: Iterable[Mapping]) -> 'RoleCatalogue':
        return cls(roles=tuple(Role.from_record(record) for record in records))

    @classmethod
    def from_json(cls, json_path) -> 'RoleCatalogue':
        """
        Load a catalogue from a JSON file holding a list of role records.

        Args:
            json_path: Path to the roles JSON file

        Returns:
            RoleCatalogue with one Role per record, in file order
        """
        with open(json_path, 'r', encoding='utf-8') as f:
            records = json.load(f)

        catalogue = cls.from_records(records)
        logger.info(f"Loaded {len(catalogue)} tactical roles from {json_path}")
        return catalogue

    @classmethod
    def load_default(cls) -> 'RoleCatalogue':
        """Load the catalogue bundled with the application."""
        return cls.from_json(DEFAULT_ROLES_PATH)

    def __len__(self) -> int:
        return len(self.roles)

    def __iter__(self):
        return iter(self.roles)

    def __contains__(self, code) -> bool:
        return code in self._by_code

    def get_roles(self) -> Tuple[Role, ...]:
        """Full catalogue snapshot."""
        return self.roles

    def get_role_by_code(self, code: str) -> Optional[Role]:
        """Exact-match lookup by role code."""
        return self._by_code.get(code)

    def get_roles_by_duty(self, duty: str) -> List[Role]:
        """Roles whose display name contains the given substring."""
        return [role for role in self.roles if duty in role.name]

    def get_all_role_names(self) -> List[Dict[str, str]]:
        return [{'name': role.name, 'code': role.code} for role in self.roles]

    def get_all_attributes(self) -> List[str]:
        """Sorted attribute codes that roles carry weights for."""
        return sorted(ATTRIBUTE_CODES)
