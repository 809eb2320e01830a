import pytest

from lumen.builtin.env_builtin import register
from lumen.interpreter import Interpreter
from lumen.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    return register(Environment())


@pytest.fixture
def interp(monkeypatch):
    """Interpreter session without a prelude, isolated from LUMEN_* settings."""
    monkeypatch.delenv("LUMEN_PRELUDE_PATH", raising=False)
    return Interpreter(prelude=None)


@pytest.fixture
def run(interp):
    """Evaluate each line in order and return the last result."""
    def _run(*lines):
        result = None
        for line in lines:
            result = interp.parse_eval(line)
        return result
    return _run
