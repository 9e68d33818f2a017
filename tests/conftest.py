import pytest

from mal.interpreter import Interpreter
from mal.types.environment import Environment
from mal.builtin.env_builtin import register


@pytest.fixture
def env():
    """Fresh global environment: a child of a root loaded with builtins."""
    root = Environment()
    register(root)
    return root.extend()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def rep(interp):
    """Read, evaluate and print one line in a shared interpreter."""
    return interp.rep
