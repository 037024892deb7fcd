import pytest

from mallet.interpreter import Interpreter, build_global_env


@pytest.fixture
def interp():
    """A fresh interpreter (builtins + prelude) for each test."""
    return Interpreter()


@pytest.fixture
def env():
    """A fresh global environment for tests that drive the evaluator directly."""
    return build_global_env()
