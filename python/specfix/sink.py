"""
Record sink.

Fixture records accumulate in insertion order and are written once, as an
array-of-arrays literal with a trailing comma after every record::

    [
    	["beta", 2.0, 3.0, 0.08333333333333333],
    	["clamp", 1, 6, 5, 5],
    ]

Values are rendered the way :func:`json.dumps` renders them, so non-finite
results appear as ``Infinity``, ``-Infinity`` and ``NaN``.
"""

from collections import Counter
import json
import os
import sys

import pandas as pd
import structlog

logger = structlog.get_logger(__name__)

# Column names of every record kind, excluding the leading function name.
COLUMNS = {
    "cyl_bessel_i": ("v", "x", "result"),
    "cyl_bessel_j": ("v", "x", "result"),
    "cyl_bessel_k": ("v", "x", "result"),
    "cyl_neumann": ("v", "x", "result"),
    "sph_bessel": ("n", "x", "result"),
    "sph_neumann": ("n", "x", "result"),
    "beta": ("x", "y", "result"),
    "ellint_1": ("k", "phi", "result"),
    "ellint_2": ("k", "phi", "result"),
    "ellint_3": ("k", "nu", "phi", "result"),
    "comp_ellint_1": ("k", "result"),
    "comp_ellint_2": ("k", "result"),
    "comp_ellint_3": ("k", "nu", "result"),
    "expint": ("x", "result"),
    "hermite": ("n", "x", "result"),
    "laguerre": ("n", "x", "result"),
    "assoc_laguerre": ("n", "m", "x", "result"),
    "legendre": ("n", "x", "result"),
    "assoc_legendre": ("n", "m", "x", "result"),
    "riemann_zeta": ("x", "result"),
    "tgamma": ("x", "result"),
    "lgamma": ("x", "result"),
    "clamp": ("v", "lo", "hi", "result"),
}

# Total field count of each record, name included.
ARITY = {name: len(cols) + 1 for name, cols in COLUMNS.items()}


def render_record(record):
    return "\t[" + ", ".join(json.dumps(v) for v in record) + "],"


class RecordSink:
    def __init__(self):
        self._records = []

    def __len__(self):
        return len(self._records)

    @property
    def records(self):
        return tuple(self._records)

    def append(self, name, *values):
        record = (name,) + values
        self._records.append(record)
        return record

    def counts(self):
        return Counter(r[0] for r in self._records)

    def render(self):
        lines = ["["]
        lines.extend(render_record(r) for r in self._records)
        lines.append("]")
        return "\n".join(lines) + "\n"

    def write(self, stream=None):
        if stream is None:
            stream = sys.stdout
        stream.write(self.render())
        stream.flush()

    def to_frames(self):
        """Split the records into one :class:`pandas.DataFrame` per function."""
        rows = {}
        for record in self._records:
            rows.setdefault(record[0], []).append(record[1:])
        return {
            name: pd.DataFrame(data, columns=list(COLUMNS[name]))
            for name, data in rows.items()
        }

    def write_csv(self, directory):
        """Write ``<name>.csv`` for every function into ``directory``."""
        os.makedirs(directory, exist_ok=True)
        paths = []
        for name, df in self.to_frames().items():
            filepath = os.path.join(directory, f"{name}.csv")
            df.to_csv(filepath, index=False, float_format="%.18e")
            logger.info("wrote csv", path=filepath, cases=len(df))
            paths.append(filepath)
        return paths
