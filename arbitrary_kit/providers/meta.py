"""
Providers for the engine's own configuration records and for synthetic
properties, used to self-test the framework.
"""

from ..core.gen import Gen, Parameters, choose, frequency, zip_gens
from ..core.prop import Prop, exception, falsified, for_all, implies, passed, proved, undecided
from ..core.registry import arbitrary, provides
from ..domain.check_parameters import CheckParameters
from ..utilities.constants import INT32_MAX


def _check_parameters_from(min_successful: int, discard_ratio: float, min_size: int, offset: int):
    # max_size is drawn above min_size so max_size >= min_size always holds
    return zip_gens(choose(min_size, min_size + offset), choose(1, 4)).map(
        lambda rest: CheckParameters(
            min_successful_tests=min_successful,
            max_discard_ratio=discard_ratio,
            min_size=min_size,
            max_size=rest[0],
            workers=rest[1],
        )
    )


@provides(CheckParameters)
def check_parameters() -> Gen[CheckParameters]:
    return zip_gens(choose(10, 200), choose(0.2, 10.0), choose(0, 500), choose(0, 500)).flat_map(
        lambda fields: _check_parameters_from(*fields)
    )


@provides(Parameters)
def generation_parameters() -> Gen[Parameters]:
    """Parameters with a non-negative size and an independent source."""
    return zip_gens(choose(0, INT32_MAX), choose(0, 2**64 - 1)).map(
        lambda fields: Parameters.seeded(*fields)
    )


@provides(Prop)
def props() -> Gen[Prop]:
    undecided_or_passed = for_all(arbitrary(bool), lambda b: implies(b, True))
    return frequency(
        (4, falsified),
        (4, passed),
        (3, proved),
        (3, undecided_or_passed),
        (2, undecided),
        (1, exception(None)),
    )
