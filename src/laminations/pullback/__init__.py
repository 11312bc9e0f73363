"""Pullback — generations of a lamination."""

from .engine import (
    LaminationState,
    PreimagePoint,
    advance,
    collect_preimages,
    crossing_pairs,
    initial_state,
    iterates,
    map_generation_forward,
    pull_back,
    pull_back_generation,
    remove_duplicates,
    take_generations,
)

__all__ = [
    "PreimagePoint",
    "LaminationState",
    "collect_preimages",
    "pull_back",
    "pull_back_generation",
    "initial_state",
    "advance",
    "iterates",
    "take_generations",
    "remove_duplicates",
    "map_generation_forward",
    "crossing_pairs",
]
