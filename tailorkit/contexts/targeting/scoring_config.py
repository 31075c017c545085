"""
Scoring weights for chunk relevance.

The defaults are the fixed constants of the relevance formula. A YAML file
can override any of them (e.g., for experiments); only the keys present in
the file change, and type_boosts entries are merged into the default table.

Example scoring_weights.yaml:
    keyword_weight: 0.25
    type_boosts:
      cv_skills: 0.5
      cl_body: 0.1
"""

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from tailorkit.contexts.segmentation.chunk_data_structure import ChunkType
from tailorkit.contexts.targeting.exceptions import ScoringConfigError

load_dotenv()
_weights_path = os.getenv("SCORING_WEIGHTS_PATH")
SCORING_WEIGHTS_PATH = Path(_weights_path) if _weights_path else None

# Additive boost per chunk type; types not listed get no boost
DEFAULT_TYPE_BOOSTS = MappingProxyType(
    {
        ChunkType.SUMMARY: 0.3,
        ChunkType.SKILLS: 0.4,
        ChunkType.EXPERIENCE_BULLET: 0.2,
        ChunkType.MISSION_FIT: 0.3,
        ChunkType.COVER_LETTER_BODY: 0.2,
        ChunkType.SKILL_DEMONSTRATION: 0.4,
        ChunkType.ACHIEVEMENT_CLAIM: 0.3,
        ChunkType.EXPERIENCE_MAPPING: 0.3,
    }
)


@dataclass(frozen=True)
class ScoringWeights:
    """
    Weights and caps of the relevance formula.

    raw = min(keyword_weight * keywords, keyword_cap)
        + min(required_skill_weight * required hits, required_skill_cap)
        + min(preferred_skill_weight * preferred hits, preferred_skill_cap)
        + type boost
    score = min(raw / normalizer, 1.0)
    """

    keyword_weight: float = 0.3
    keyword_cap: float = 3.0
    required_skill_weight: float = 0.5
    required_skill_cap: float = 5.0
    preferred_skill_weight: float = 0.2
    preferred_skill_cap: float = 2.0
    normalizer: float = 10.0
    type_boosts: Mapping[ChunkType, float] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_TYPE_BOOSTS))
    )

    def boost_for(self, chunk_type: ChunkType) -> float:
        return self.type_boosts.get(chunk_type, 0.0)


def _parse_number(name: str, value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ScoringConfigError(f"Scoring weight '{name}' must be a number, got {value!r}")
    if number < 0:
        raise ScoringConfigError(f"Scoring weight '{name}' must be non-negative, got {number}")
    return number


def _parse_type_boosts(value: Any) -> Mapping[ChunkType, float]:
    if not isinstance(value, dict):
        raise ScoringConfigError("type_boosts must be a mapping of chunk type to boost")

    boosts = dict(DEFAULT_TYPE_BOOSTS)
    for label, boost in value.items():
        try:
            chunk_type = ChunkType(label)
        except ValueError:
            available = [t.value for t in ChunkType]
            raise ScoringConfigError(
                f"Unknown chunk type '{label}' in type_boosts. Available types: {available}"
            )
        boosts[chunk_type] = _parse_number(f"type_boosts.{label}", boost)
    return MappingProxyType(boosts)


def weights_from_dict(overrides: dict[str, Any]) -> ScoringWeights:
    """
    Apply overrides to the default weights.

    Args:
        overrides: Field name -> value; type_boosts maps chunk type labels to boosts

    Returns:
        ScoringWeights with overrides applied

    Raises:
        ScoringConfigError: On unknown keys, non-numeric or negative values,
            unknown chunk types, or a zero normalizer
    """
    known = [f.name for f in fields(ScoringWeights)]
    unknown = sorted(set(overrides) - set(known))
    if unknown:
        raise ScoringConfigError(f"Unknown scoring weight(s): {unknown}. Available: {known}")

    values: dict[str, Any] = {}
    for name, value in overrides.items():
        if name == "type_boosts":
            values[name] = _parse_type_boosts(value)
        else:
            values[name] = _parse_number(name, value)

    if values.get("normalizer") == 0:
        raise ScoringConfigError("Scoring weight 'normalizer' must be greater than zero")

    return replace(ScoringWeights(), **values)


def load_scoring_weights(config_path: Optional[Path] = None) -> ScoringWeights:
    """
    Load scoring weights, applying a YAML override file when one is given.

    Args:
        config_path: Optional YAML file (defaults to SCORING_WEIGHTS_PATH env
            variable; defaults only when neither is set)

    Returns:
        ScoringWeights

    Raises:
        ScoringConfigError: If the file content is invalid
    """
    if config_path is None:
        config_path = SCORING_WEIGHTS_PATH
    if config_path is None:
        return ScoringWeights()

    config_path = Path(config_path)
    overrides = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True) or {}
    if not isinstance(overrides, dict):
        raise ScoringConfigError("Scoring weights file must contain a mapping", config_path)

    try:
        return weights_from_dict(overrides)
    except ScoringConfigError as e:
        raise ScoringConfigError(e.message, config_path) from e
