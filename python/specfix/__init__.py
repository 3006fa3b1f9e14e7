"""
specfix
=======

Reference fixtures for special-function implementations.

Arguments are sampled at random inside a domain-appropriate range, evaluated
with :mod:`scipy.special`, and written as ``[name, args..., result]`` records
that a test suite in any language can replay.

Provides access to:
- Sampler (seedable, domain-constrained random draws)
- ReferenceEvaluator / ScipyEvaluator (trusted reference values)
- RecordSink (collection rendering, CSV export)
- generate / run (the driver)

Quick Start
-----------
>>> import specfix

>>> # Reproducible run of the beta routine only
>>> sampler = specfix.Sampler.from_seed(1234)
>>> sink = specfix.generate(sampler=sampler, count=3, routines=["betas"])
>>> len(sink)
4
>>> sink.records[-1]
('clamp', 1, 6, 5, 5)

>>> # Render as the array-of-arrays literal
>>> text = sink.render()
>>> text.splitlines()[0], text.splitlines()[-1]
('[', ']')
"""

from specfix.driver import CLAMP_RECORD, DEFAULT_COUNT, generate, run
from specfix.evaluator import DomainError, ReferenceEvaluator, ScipyEvaluator
from specfix.profiles import BOOST, PROFILES, STD, Profile, get_profile
from specfix.routines import PRODUCES, ROUTINES
from specfix.sampler import Sampler
from specfix.sink import ARITY, COLUMNS, RecordSink

__all__ = [
    "ARITY",
    "BOOST",
    "CLAMP_RECORD",
    "COLUMNS",
    "DEFAULT_COUNT",
    "DomainError",
    "PRODUCES",
    "PROFILES",
    "Profile",
    "RecordSink",
    "ReferenceEvaluator",
    "ROUTINES",
    "STD",
    "Sampler",
    "ScipyEvaluator",
    "generate",
    "get_profile",
    "run",
]
