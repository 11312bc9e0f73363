"""Branches — regions of the circle and the forest that partitions it.

- region: boolean algebra of point predicates
- forest: nesting of branch specs into b disjoint inverse branches
"""

from .forest import (
    BranchForest,
    BranchNode,
    BranchSpec,
    build_branches,
    build_forest,
    build_partition,
    make_branch_spec,
    make_builder,
    maybe_add_final_branch,
)
from .region import (
    BranchRegion,
    and_,
    chord,
    complement,
    none_of,
    not_,
    or_,
    point,
    unit,
)

__all__ = [
    "BranchRegion",
    "complement",
    "unit",
    "or_",
    "and_",
    "not_",
    "none_of",
    "point",
    "chord",
    "BranchSpec",
    "BranchNode",
    "BranchForest",
    "make_branch_spec",
    "build_forest",
    "build_branches",
    "build_partition",
    "maybe_add_final_branch",
    "make_builder",
]
