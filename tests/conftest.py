import pytest

from lis.builtins import register
from lis.config import EvalOptions
from lis.evaluation.evaluator import evaluate
from lis.reader.parser import parse
from lis.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(env):
    """Evaluate each source line in order in the shared env; return the last value."""
    def _run(*sources, options=None):
        result = None
        for source in sources:
            result = evaluate(parse(source), env, options or EvalOptions())
        return result
    return _run
