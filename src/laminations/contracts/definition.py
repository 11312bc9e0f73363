"""
LaminationDefinition — Configured Lamination

A lamination definition document (JSON, see lamination_definition.json) is
schema-validated, then its textual fractions are parsed into a frozen
Pydantic model ready to drive the forest builder and the pullback engine.

Example document:
    {
        "schema_version": "1",
        "name": "rabbit",
        "base": 2,
        "branches": [{"chord": ["_001", "1_010"], "endpoints": ["_001"]}],
        "leaves": [["_001", "_010", "_100"]]
    }
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator

from pydantic import BaseModel, Field

from laminations.branches.forest import BranchSpec, build_partition, make_branch_spec
from laminations.branches.region import BranchRegion
from laminations.core.domain.chord import Chord
from laminations.core.domain.fraction import parse_unsafe_factory
from laminations.core.domain.polygon import Polygon
from laminations.pullback.engine import iterates

from .validators import validate_lamination_definition

logger = logging.getLogger(__name__)


class LaminationDefinition(BaseModel):
    """Degree, branch specs and initial leaves of a lamination."""

    name: str | None = Field(None, description="Human-readable label")
    base: int = Field(..., ge=2, description="Degree of the digit shift")
    specs: tuple[BranchSpec, ...] = Field(default=(), description="Explicit branch specs")
    leaves: tuple[Polygon, ...] = Field(..., min_length=1, description="Initial generation")

    model_config = {"frozen": True}

    def build_branches(self) -> list[BranchRegion]:
        """Exactly base disjoint branch regions (background branch included)."""
        return build_partition(self.base, self.specs)

    def iterates(self) -> Iterator[list[Polygon]]:
        return iterates(self.leaves, self.build_branches())


def load_lamination_definition(data: Dict[str, Any]) -> LaminationDefinition:
    """
    Build a LaminationDefinition from a decoded JSON document.

    Args:
        data: Document matching lamination_definition.json

    Returns:
        Parsed definition

    Raises:
        jsonschema.ValidationError: If the document violates the schema
        FractionParseError: If a fraction string is malformed for the base
    """
    validate_lamination_definition(data)

    base = data["base"]
    fraction = parse_unsafe_factory(base)

    specs = []
    for branch in data["branches"]:
        chord = Chord.create(*(fraction(text) for text in branch["chord"]))
        endpoints = (fraction(text) for text in branch.get("endpoints", []))
        specs.append(make_branch_spec(chord, *endpoints, flip=branch.get("flip", False)))

    leaves = [Polygon.create(fraction(text) for text in leaf) for leaf in data["leaves"]]

    logger.debug(
        "Loaded lamination %r: base %d, %d branch specs, %d leaves",
        data.get("name"),
        base,
        len(specs),
        len(leaves),
    )

    return LaminationDefinition(
        name=data.get("name"), base=base, specs=tuple(specs), leaves=tuple(leaves)
    )


def load_lamination_definition_file(path: str | Path) -> LaminationDefinition:
    """Read, validate and parse a lamination definition JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return load_lamination_definition(data)
