import pytest

from specfix.evaluator import ReferenceEvaluator


class StubEvaluator(ReferenceEvaluator):
    """Records every call and answers with the sum of the arguments."""

    def __init__(self):
        self.calls = []

    def evaluate(self, name, *args):
        self.calls.append((name,) + args)
        return float(sum(args))


class ScriptedSampler:
    """Hands out pre-chosen values in order, whatever the requested range."""

    def __init__(self, *values):
        self.values = list(values)
        self.requests = []

    def _next(self, kind, *bounds):
        self.requests.append((kind,) + bounds)
        return self.values.pop(0)

    def uniform(self, lo, hi):
        return self._next("uniform", lo, hi)

    def integer(self, lo, hi):
        return self._next("integer", lo, hi)

    def chance(self, p):
        return self._next("chance", p)


@pytest.fixture
def stub_evaluator():
    return StubEvaluator()
