"""
Lamination Pullback Engine — Generations of a Lamination

Pulls polygons back through the inverse branches of the digit shift:
- every vertex has base preimages (CircularFraction.map_backward)
- the preimages of all vertices form one pool
- branches claim points from the pool in order, first branch wins
- each non-empty claim is a polygon of the next generation

Iteration is an explicit state machine: LaminationState holds the current
generation and the branch list, advance() computes exactly one next
generation. iterates() is a thin generator over advance() and never
terminates on its own.

CRITICAL INVARIANTS:
1. A preimage point is assigned to at most one branch
2. Branches with no preimage are dropped silently (expected steady state)
3. Every generation is a fresh tuple; states are never mutated
4. map_generation_forward(pull_back_generation(L)) == L up to order and duplicates
"""

import logging
from dataclasses import dataclass
from itertools import combinations, islice
from typing import Iterable, Iterator, Sequence

from laminations.branches.region import BranchRegion
from laminations.core.domain.fraction import CircularFraction
from laminations.core.domain.polygon import Polygon

logger = logging.getLogger(__name__)


# =============================================================================
# PULLBACK
# =============================================================================


@dataclass(frozen=True)
class PreimagePoint:
    """Preimage of a polygon vertex, tagged with the vertex index it came from."""

    point: CircularFraction
    source_index: int


def collect_preimages(polygon: Polygon) -> list[PreimagePoint]:
    """Pool of all base·len(polygon) preimages, grouped by source vertex."""
    return [
        PreimagePoint(point=preimage, source_index=index)
        for index, vertex in enumerate(polygon.points)
        for preimage in vertex.map_backward()
    ]


def pull_back(polygon: Polygon, branches: Sequence[BranchRegion]) -> list[Polygon]:
    """
    Preimage polygons of polygon, one per branch that receives points.

    Args:
        polygon: Leaf of the current generation
        branches: Disjoint regions in priority order

    Returns:
        New polygons in branch order; a preimage satisfying several branch
        predicates belongs to the first of them only
    """
    pool = collect_preimages(polygon)
    result = []

    for branch_index, branch in enumerate(branches):
        claimed, remaining = [], []
        for preimage in pool:
            (claimed if branch.contains(preimage.point) else remaining).append(preimage)

        if not claimed:
            logger.debug("Branch %d empty for polygon %s", branch_index, polygon)
            continue

        pool = remaining
        result.append(Polygon.create(preimage.point for preimage in claimed))

    if pool:
        logger.debug(
            "%d preimages of %s outside every branch (vertices %s)",
            len(pool),
            polygon,
            sorted({preimage.source_index for preimage in pool}),
        )

    return result


def pull_back_generation(
    leaves: Iterable[Polygon], branches: Sequence[BranchRegion]
) -> list[Polygon]:
    """Pull back every leaf and flatten the results, leaf order first."""
    return [new_leaf for leaf in leaves for new_leaf in pull_back(leaf, branches)]


# =============================================================================
# ITERATION STATE
# =============================================================================


@dataclass(frozen=True)
class LaminationState:
    """One generation of a lamination plus what is needed to compute the next."""

    generation: tuple[Polygon, ...]
    branches: tuple[BranchRegion, ...]

    # 0 for the initial leaves
    index: int = 0


def initial_state(
    leaves: Iterable[Polygon], branches: Iterable[BranchRegion]
) -> LaminationState:
    return LaminationState(generation=tuple(leaves), branches=tuple(branches), index=0)


def advance(state: LaminationState) -> LaminationState:
    """Compute exactly one next generation."""
    generation = tuple(pull_back_generation(state.generation, state.branches))
    logger.debug(
        "Generation %d: %d polygons -> %d polygons",
        state.index + 1,
        len(state.generation),
        len(generation),
    )
    return LaminationState(generation=generation, branches=state.branches, index=state.index + 1)


def iterates(
    leaves: Iterable[Polygon], branches: Iterable[BranchRegion]
) -> Iterator[list[Polygon]]:
    """
    Unbounded sequence of generations, starting with the initial leaves.

    Restart by calling iterates() again; stop by no longer consuming.
    """
    state = initial_state(leaves, branches)
    while True:
        yield list(state.generation)
        state = advance(state)


def take_generations(
    leaves: Iterable[Polygon], branches: Iterable[BranchRegion], count: int
) -> list[list[Polygon]]:
    """First count generations of iterates()."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return list(islice(iterates(leaves, branches), count))


# =============================================================================
# FORWARD MAP & VALIDATION
# =============================================================================


def remove_duplicates(polygons: Iterable[Polygon]) -> list[Polygon]:
    """Keep the first polygon of every canonical text form, order preserved."""
    seen: set[str] = set()
    result = []
    for polygon in polygons:
        key = str(polygon)
        if key in seen:
            continue
        seen.add(key)
        result.append(polygon)
    return result


def map_generation_forward(leaves: Iterable[Polygon]) -> list[Polygon]:
    """
    Forward image of a generation with duplicates removed.

    Several branches map onto the same polygon, so the image of a pulled-back
    generation is the previous generation once duplicates are dropped.
    """
    return remove_duplicates(leaf.map_forward() for leaf in leaves)


def crossing_pairs(leaves: Sequence[Polygon]) -> list[tuple[int, int]]:
    """
    Index pairs of leaves with at least one pair of crossing edges.

    Empty for a genuine (non-crossing) lamination.
    """
    edges = [leaf.to_chords() for leaf in leaves]
    return [
        (i, j)
        for i, j in combinations(range(len(leaves)), 2)
        if any(a.intersects(b) for a in edges[i] for b in edges[j])
    ]
