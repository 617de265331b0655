"""
Role Fit Scorer - Scores players against role weight profiles

Each role weights the 40 attribute slots from 0 to 20. A player's fit for a
role is the weighted mean of their normalized attributes, as a percentage:

    score = sum(min(value / 20, 1) * weight) / sum(weight) * 100

Only slots with a positive weight take part. Values above 20 are capped at
1.0 once normalized; values below 0 are left as they are, so negative
attributes can pull a score below 0. A role whose weights are all 0
scores 0 for every player.
"""

from typing import Dict, Iterable, List, Mapping, Tuple

from models.constants import BEST_ROLES_COUNT, MAX_ATTRIBUTE_VALUE
from models.player import RoleFit
from models.role_definitions import Role, RoleCatalogue


class RoleFitScorer:
    """Evaluates how well a player's attributes match each role."""

    def __init__(self, catalogue: RoleCatalogue):
        """
        Initialize the scorer.

        Args:
            catalogue: Role catalogue to score against (read only)
        """
        self.catalogue = catalogue
        # Contributing (attribute, weight) pairs per role code, same code precedence as the catalogue
        self._weighted = {}
        for role in catalogue:
            self._weighted.setdefault(role.code, role.weighted_attributes)

    def score_role(self, attributes: Mapping[str, float], role: Role) -> float:
        """
        Calculate how well an attribute map fits a single role.

        Args:
            attributes: Raw attribute map (attribute code -> value)
            role: Role to evaluate against

        Returns:
            Fit score, 0-100 for attributes within 0-20
        """
        return self._weighted_score(attributes, role.weighted_attributes)

    def score_all(self, attributes: Mapping[str, float]) -> Dict[str, float]:
        """Score every role in the catalogue, keyed by role code."""
        return self.score_selected(attributes, [role.code for role in self.catalogue])

    def score_selected(self, attributes: Mapping[str, float],
                       role_codes: Iterable[str]) -> Dict[str, float]:
        """
        Score only the requested roles.

        Args:
            attributes: Raw attribute map
            role_codes: Role codes to score

        Returns:
            Dict of {role code: score}; codes missing from the catalogue
            are skipped silently
        """
        return {
            code: self._weighted_score(attributes, self._weighted[code])
            for code in role_codes
            if code in self._weighted
        }

    def best_roles(self, role_scores: Mapping[str, float], top_n: int = BEST_ROLES_COUNT) -> List[RoleFit]:
        """
        Rank scored roles from best to worst.

        Args:
            role_scores: Dict of {role code: score}
            top_n: Maximum number of roles to return

        Returns:
            List of RoleFit objects, sorted by score (ties keep input order)
        """
        ranked = sorted(role_scores.items(), key=lambda item: item[1], reverse=True)

        fits = []
        for code, score in ranked[:top_n]:
            role = self.catalogue.get_role_by_code(code)
            fits.append(RoleFit(code=code, name=role.name if role else code, score=score))
        return fits

    def _weighted_score(self, attributes: Mapping[str, float],
                        weighted: Tuple[Tuple[str, int], ...]) -> float:
        total_score = 0.0
        weight_sum = 0

        for attr, weight in weighted:
            player_value = attributes.get(attr, 0.0)
            normalized_value = min(player_value / MAX_ATTRIBUTE_VALUE, 1.0)
            total_score += normalized_value * weight
            weight_sum += weight

        if weight_sum > 0:
            return (total_score / weight_sum) * 100
        return 0.0
