"""
This :obj:`specfix.driver` module runs the whole generation: every routine
``count`` times in declared order, then the fixed ``clamp`` record. The click
command line in ``__main__`` is a thin wrapper around :func:`run`.
"""

import logging
import os
import sys

import structlog

from specfix.evaluator import ScipyEvaluator
from specfix.profiles import DEFAULT_PROFILE, get_profile
from specfix.routines import select
from specfix.sampler import Sampler
from specfix.sink import RecordSink

structlog.configure(
    wrapper_class=structlog.make_filtering_bound_logger(
        int(os.environ.get("SPECFIX_LOG_LEVEL", logging.INFO))
    ),
    logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
)

logger = structlog.get_logger(__name__)

DEFAULT_COUNT = 100

# Exercises a plain utility in the same fixture format.
CLAMP_RECORD = ("clamp", 1, 6, 5, 5)


def generate(
    evaluator=None,
    sampler=None,
    count: int = DEFAULT_COUNT,
    profile=DEFAULT_PROFILE,
    routines=None,
) -> RecordSink:
    """Generate the fixture collection.

    Args:
        evaluator (ReferenceEvaluator): Source of reference values, by default
            :class:`ScipyEvaluator`.
        sampler (Sampler): Random source, by default seeded from OS entropy.
        count (int): Iterations per routine.
        profile (str | Profile): Sampling ranges.
        routines (list[str]): Restrict to these routines; declared order is kept.

    Returns:
        RecordSink: All records, ending with the ``clamp`` record.

    Raises:
        DomainError: A sampled argument fell outside an evaluator's domain.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if evaluator is None:
        evaluator = ScipyEvaluator()
    if sampler is None:
        sampler = Sampler.from_seed()
    profile = get_profile(profile)
    selected = select(routines)

    logger.info(
        "generating fixtures",
        profile=profile.name,
        count=count,
        seed=getattr(sampler, "seed", None),
        routines=[name for name, _ in selected],
    )

    sink = RecordSink()
    for name, routine in selected:
        for _ in range(count):
            routine(sink, evaluator, sampler, profile)
        logger.debug("routine done", routine=name, records=len(sink))
    sink.append(*CLAMP_RECORD)

    logger.info("generated fixtures", records=len(sink))
    return sink


def run(stream=None, csv_dir=None, **kwargs):
    """Generate and write the collection to ``stream`` (stdout by default).

    With ``csv_dir`` set, a CSV file per function is written there as well.
    """
    sink = generate(**kwargs)
    sink.write(stream)
    if csv_dir is not None:
        sink.write_csv(csv_dir)
    return sink
