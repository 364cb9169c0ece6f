"""
Hypothesis bridge.

Turns generation descriptions into hypothesis strategies: hypothesis supplies
the size hint and the randomness source, the description decides the value.
This is how property tests consume providers.
"""

from typing import Any

from hypothesis import strategies as st

from ..config import get_generation_config
from ..utilities.validators import validate_size
from .gen import Gen, Parameters
from .registry import arbitrary


def parameters(max_size: int | None = None) -> st.SearchStrategy[Parameters]:
    """Strategy for generation parameters with sizes in [0, max_size]."""
    if max_size is None:
        max_size = get_generation_config().max_size
    validate_size(max_size, "max_size")
    return st.builds(
        Parameters,
        size=st.integers(min_value=0, max_value=max_size),
        rng=st.randoms(use_true_random=False),
    )


def to_strategy(gen: Gen, max_size: int | None = None) -> st.SearchStrategy:
    """Strategy drawing values from a generation description."""
    return parameters(max_size).map(gen.apply)


def strategy_for(tp: Any, max_size: int | None = None) -> st.SearchStrategy:
    """Strategy drawing values from the canonical provider of tp."""
    return to_strategy(arbitrary(tp), max_size)
