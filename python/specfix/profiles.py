"""
Sampling ranges.

A :class:`Profile` fixes, for every function family, the interval each
argument is drawn from. The ranges are hand-picked so the reference
evaluator stays inside its domain; they are not a guarantee.
"""

from dataclasses import dataclass
import math
from typing import Optional, Tuple

Range = Tuple[float, float]


@dataclass(frozen=True)
class Profile:
    name: str
    bessel_order: Range
    bessel_arg: Range
    bessel_index: Range
    beta: Range
    ellint_phi: Range
    ellint_char_lo: float
    # Upper bound for the characteristic on top of 1/sin^2(phi); None means
    # no extra bound except where sin(phi) vanishes.
    ellint_char_cap: Optional[float]
    expint: Range
    hermite_degree: Range
    hermite_arg: Range
    laguerre_degree: Range
    laguerre_arg: Range
    legendre_degree: Range
    legendre_arg: Range
    zeta: Range
    gamma: Range
    gamma_pole_chance: float = 0.1


BOOST = Profile(
    name="boost",
    bessel_order=(-100, 100),
    bessel_arg=(-100, 100),
    bessel_index=(0, 100),
    beta=(0, 100),
    ellint_phi=(-100, 100),
    ellint_char_lo=-100,
    ellint_char_cap=None,
    expint=(-100, 100),
    hermite_degree=(0, 100),
    hermite_arg=(-100, 100),
    laguerre_degree=(0, 100),
    laguerre_arg=(-100, 100),
    legendre_degree=(0, 100),
    legendre_arg=(-1, 1),
    zeta=(-100, 100),
    gamma=(-100, 100),
)

K = 10

STD = Profile(
    name="std",
    bessel_order=(0, K),
    bessel_arg=(0, K),
    bessel_index=(0, K),
    beta=(0, K),
    ellint_phi=(0, math.pi / 2),
    ellint_char_lo=-K,
    ellint_char_cap=K,
    expint=(-K, K),
    hermite_degree=(0, K),
    hermite_arg=(-K, K),
    laguerre_degree=(0, K),
    laguerre_arg=(0, K),
    legendre_degree=(0, 3),
    legendre_arg=(0, 1),
    zeta=(-K, K),
    gamma=(-K, K),
)

PROFILES = {p.name: p for p in (BOOST, STD)}

DEFAULT_PROFILE = BOOST.name


def get_profile(profile):
    """Look up a profile by name. A :class:`Profile` instance passes through."""
    if isinstance(profile, Profile):
        return profile
    try:
        return PROFILES[profile]
    except KeyError:
        expected = ", ".join(sorted(PROFILES))
        raise ValueError(
            f"unknown profile {profile!r}, expected one of {expected}"
        ) from None
