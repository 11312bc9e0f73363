"""
Branch Forest — Partition of the Circle into Inverse Branches

Turns a list of BranchSpec (chord, identified endpoints, flip) into a flat
list of pairwise disjoint BranchRegion covering the circle, one per inverse
branch of the degree-b digit shift.

Algorithm:
1. Each spec becomes a BranchNode owning the region simple(chord, *endpoints, flip)
2. Nodes are inserted one at a time into a BranchForest (nested regions become
   descendants, regions that swallow existing roots adopt them)
3. Every node emits its region without the regions of its children, post-order
4. If fewer than base regions came out, the complement of all of them is
   appended as the background branch

The forest is an immutable value (arena of nodes + parent index per node);
insert() returns a new forest. Genuinely crossing specs are not detected:
they end up as sibling roots.
"""

import logging
from dataclasses import dataclass, field
from functools import reduce
from typing import Callable, Iterator, Optional, Sequence

from pydantic import BaseModel, Field

from laminations.branches.region import BranchRegion, complement
from laminations.core.domain.chord import Chord
from laminations.core.domain.fraction import CircularFraction

logger = logging.getLogger(__name__)


# =============================================================================
# SPEC
# =============================================================================


class BranchSpec(BaseModel):
    """
    Input descriptor of one explicitly specified branch.

    Only used while building the forest; not part of the lamination state.
    """

    chord: Chord = Field(..., description="Critical chord bounding the branch")
    endpoints: tuple[CircularFraction, ...] = Field(
        default=(), description="Boundary points owned by the branch"
    )
    flip: bool = Field(default=False, description="Use the majority side of the chord")

    model_config = {"frozen": True}

    def to_region(self) -> BranchRegion:
        return BranchRegion.simple(self.chord, *self.endpoints, flip=self.flip)


def make_branch_spec(
    chord: Chord, *endpoints: CircularFraction, flip: bool = False
) -> BranchSpec:
    return BranchSpec(chord=chord, endpoints=tuple(endpoints), flip=flip)


# =============================================================================
# NODE
# =============================================================================


@dataclass(frozen=True)
class BranchNode:
    """Spec together with its (not yet carved) region."""

    spec: BranchSpec
    region: BranchRegion

    @classmethod
    def from_spec(cls, spec: BranchSpec) -> "BranchNode":
        return cls(spec=spec, region=spec.to_region())

    def contains(self, other: "BranchNode") -> bool:
        """
        Region of other nests inside this node's region.

        Boundary-aware test, all three conditions required:
        1. Both endpoints of other's chord lie on the closed designated side
           of this node's chord
        2. Every endpoint of other's chord claimed by other's region is also
           claimed by this region (a region never nests into one that leaves
           out a boundary point it owns)
        3. other's designated arc is strictly shorter than this one; this
           separates the two sides of the same diameter and identical specs
        """
        own_chord, own_flip = self.spec.chord, self.spec.flip
        other_chord = other.spec.chord

        for endpoint in other_chord.endpoints:
            if not own_chord.contains_loose(endpoint, own_flip):
                return False
            if other.region.contains(endpoint) and not self.region.contains(endpoint):
                return False

        return other_chord.side_measure(other.spec.flip) < own_chord.side_measure(own_flip)


# =============================================================================
# FOREST
# =============================================================================


@dataclass(frozen=True)
class BranchForest:
    """
    Immutable nesting forest of branch nodes.

    parents[i] is the index of the parent of nodes[i], None for roots.
    """

    nodes: tuple[BranchNode, ...] = field(default=())
    parents: tuple[Optional[int], ...] = field(default=())

    def children_of(self, parent: Optional[int]) -> tuple[int, ...]:
        return tuple(idx for idx, p in enumerate(self.parents) if p == parent)

    def roots(self) -> tuple[int, ...]:
        return self.children_of(None)

    def insert(self, spec: BranchSpec) -> "BranchForest":
        """
        New forest with spec inserted.

        Descends into whichever existing node contains the new one, then
        adopts every sibling the new node contains.
        """
        node = BranchNode.from_spec(spec)
        new_index = len(self.nodes)

        parent: Optional[int] = None
        descended = True
        while descended:
            descended = False
            for child in self.children_of(parent):
                if self.nodes[child].contains(node):
                    parent = child
                    descended = True
                    break

        parents = list(self.parents)
        for sibling in self.children_of(parent):
            if node.contains(self.nodes[sibling]):
                logger.debug("Branch %s adopts branch %s", spec.chord, self.nodes[sibling].spec.chord)
                parents[sibling] = new_index

        if parent is not None:
            logger.debug("Branch %s nested in %s", spec.chord, self.nodes[parent].spec.chord)
        parents.append(parent)

        return BranchForest(nodes=self.nodes + (node,), parents=tuple(parents))

    def post_order(self, index: int) -> Iterator[int]:
        """Descendants of index (children first), then index itself."""
        for child in self.children_of(index):
            yield from self.post_order(child)
        yield index

    def regions(self) -> list[BranchRegion]:
        """
        Disjoint regions, post-order per tree, trees in root order.

        Each node's region excludes the regions of its direct children, whose
        own regions in turn exclude their children.
        """
        result = []
        for root in self.roots():
            for index in self.post_order(root):
                children = self.children_of(index)
                result.append(
                    self.nodes[index].region.without(*(self.nodes[c].region for c in children))
                )
        return result


# =============================================================================
# BUILDERS
# =============================================================================


def build_forest(specs: Sequence[BranchSpec]) -> BranchForest:
    return reduce(BranchForest.insert, specs, BranchForest())


def build_branches(specs: Sequence[BranchSpec]) -> list[BranchRegion]:
    """
    Disjoint regions for the explicitly specified branches.

    Args:
        specs: Branch specs in any order

    Returns:
        One region per spec (the background branch is not included)
    """
    forest = build_forest(specs)
    logger.debug("Branch forest: %d nodes, %d roots", len(forest.nodes), len(forest.roots()))
    return forest.regions()


def maybe_add_final_branch(base: int, regions: Sequence[BranchRegion]) -> list[BranchRegion]:
    """
    Complete a region list to exactly base branches.

    If fewer than base regions are given, the complement of all of them is
    appended as the single unlabeled background branch.
    """
    if len(regions) >= base:
        if len(regions) > base:
            logger.warning("%d branch regions for a degree-%d map", len(regions), base)
        return list(regions)

    return [*regions, complement(*regions)]


def build_partition(base: int, specs: Sequence[BranchSpec]) -> list[BranchRegion]:
    return maybe_add_final_branch(base, build_branches(specs))


def make_builder(base: int) -> Callable[[Sequence[BranchSpec]], list[BranchRegion]]:
    def builder(specs: Sequence[BranchSpec]) -> list[BranchRegion]:
        return build_partition(base, specs)

    return builder
