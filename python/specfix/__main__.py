import click

import specfix.driver as driver
from specfix.evaluator import DomainError
from specfix.profiles import DEFAULT_PROFILE, PROFILES
from specfix.routines import ROUTINES
from specfix.sampler import Sampler


# ---------------------------------------------------------------------------------------
# SPECFIX
# ---------------------------------------------------------------------------------------
#
# This is the entry point to run the fixture generator as a command line interface.
#
@click.command(name="specfix")
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=0),
    default=driver.DEFAULT_COUNT,
    show_default=True,
    help="iterations per routine",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="seed for the random generator (default: fresh OS entropy)",
)
@click.option(
    "--profile",
    type=click.Choice(sorted(PROFILES)),
    default=DEFAULT_PROFILE,
    show_default=True,
    help="sampling ranges to use",
)
@click.option(
    "--only",
    "routines",
    multiple=True,
    type=click.Choice(list(ROUTINES)),
    help="run only this routine (repeatable)",
)
@click.option(
    "--output",
    "-o",
    type=click.File("w"),
    default="-",
    help="where to write the fixture collection (default: stdout)",
)
@click.option(
    "--csv-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="also write one CSV per function into this directory",
)
def cli(count, seed, profile, routines, output, csv_dir):
    """Generate reference fixtures for special functions.

    Writes a list of [name, args..., result] records to the output, one
    routine after another, ending with a fixed clamp record.
    """
    try:
        driver.run(
            stream=output,
            csv_dir=csv_dir,
            sampler=Sampler.from_seed(seed),
            count=count,
            profile=profile,
            routines=list(routines),
        )
    except DomainError as de:
        driver.logger.error(str(de))
        raise click.ClickException(str(de))


if __name__ == "__main__":
    cli()
