import io
import math
import os

import pandas as pd
import pytest

from specfix.routines import PRODUCES
from specfix.sink import ARITY, COLUMNS, RecordSink, render_record


def test_render_layout():
    sink = RecordSink()
    sink.append("beta", 2.0, 3.0, 0.25)
    sink.append("clamp", 1, 6, 5, 5)
    assert sink.render() == (
        "[\n"
        '\t["beta", 2.0, 3.0, 0.25],\n'
        '\t["clamp", 1, 6, 5, 5],\n'
        "]\n"
    )


def test_render_empty():
    assert RecordSink().render() == "[\n]\n"


def test_render_non_finite():
    assert render_record(("tgamma", -2.0, math.nan)) == '\t["tgamma", -2.0, NaN],'
    assert render_record(("tgamma", 0.0, math.inf)) == '\t["tgamma", 0.0, Infinity],'
    assert render_record(("tgamma", -0.0, -math.inf)) == '\t["tgamma", -0.0, -Infinity],'


def test_render_keeps_full_precision():
    line = render_record(("expint", 0.1, 1 / 3))
    assert line == '\t["expint", 0.1, 0.3333333333333333],'


def test_write_to_stream():
    sink = RecordSink()
    sink.append("riemann_zeta", 2.0, math.pi ** 2 / 6)
    out = io.StringIO()
    sink.write(out)
    assert out.getvalue() == sink.render()


def test_records_in_insertion_order():
    sink = RecordSink()
    sink.append("expint", 1.0, 2.0)
    sink.append("beta", 1.0, 1.0, 1.0)
    sink.append("expint", 3.0, 4.0)
    assert len(sink) == 3
    assert [r[0] for r in sink.records] == ["expint", "beta", "expint"]
    assert sink.counts() == {"expint": 2, "beta": 1}


def test_every_produced_name_has_columns():
    for names in PRODUCES.values():
        for name in names:
            assert name in COLUMNS
    assert ARITY["clamp"] == 5
    assert ARITY["ellint_3"] == 5
    assert ARITY["beta"] == 4


def test_to_frames():
    sink = RecordSink()
    sink.append("hermite", 2, 0.5, -1.0)
    sink.append("hermite", 3, 1.0, -4.0)
    sink.append("beta", 2.0, 3.0, 1 / 12)
    frames = sink.to_frames()
    assert set(frames) == {"hermite", "beta"}
    assert list(frames["hermite"].columns) == ["n", "x", "result"]
    assert len(frames["hermite"]) == 2
    assert frames["beta"]["result"].iloc[0] == 1 / 12


def test_write_csv(tmp_path):
    sink = RecordSink()
    sink.append("beta", 2.0, 3.0, 1 / 12)
    sink.append("clamp", 1, 6, 5, 5)
    paths = sink.write_csv(tmp_path / "csv")
    assert sorted(os.path.basename(p) for p in paths) == ["beta.csv", "clamp.csv"]
    df = pd.read_csv(tmp_path / "csv" / "beta.csv")
    assert list(df.columns) == ["x", "y", "result"]
    assert df["result"].iloc[0] == pytest.approx(1 / 12)
