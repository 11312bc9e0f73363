"""
Laminations of the circle under iterated digit-shift (Bernoulli) maps.

Points of the circle are canonical base-b fractions; chords and polygons are
built from them, the circle is split into b inverse branches by a nested
region forest, and polygons are pulled back through the branches to generate
successive generations of a lamination.
"""

from laminations.branches import (
    BranchForest,
    BranchRegion,
    BranchSpec,
    build_branches,
    build_partition,
    complement,
    make_branch_spec,
    make_builder,
    maybe_add_final_branch,
)
from laminations.core.domain import (
    Chord,
    CircularFraction,
    FractionParseError,
    FractionParseResult,
    InvalidDigitError,
    Polygon,
    parse,
    parse_unsafe,
)
from laminations.pullback import (
    LaminationState,
    advance,
    iterates,
    map_generation_forward,
    pull_back,
)

__all__ = [
    # Domain
    "CircularFraction",
    "Chord",
    "Polygon",
    "InvalidDigitError",
    "FractionParseError",
    "FractionParseResult",
    "parse",
    "parse_unsafe",
    # Branches
    "BranchRegion",
    "BranchSpec",
    "BranchForest",
    "complement",
    "make_branch_spec",
    "build_branches",
    "build_partition",
    "maybe_add_final_branch",
    "make_builder",
    # Pullback
    "LaminationState",
    "advance",
    "iterates",
    "map_generation_forward",
    "pull_back",
]
