"""
Pytest configuration and shared fixtures.
"""

import tempfile
import shutil
import pytest

from pathdsl import NamedSegment, RELATIVE_ROOT, ABSOLUTE_ROOT
from pathdsl.config import SEPARATOR_ENV_VAR


@pytest.fixture
def temp_dir():
    """Fixture that provides a temporary directory and cleans it up after test"""
    tmp = tempfile.mkdtemp()
    yield tmp
    shutil.rmtree(tmp)


@pytest.fixture
def named():
    """Fixture that builds named segments, failing the test on invalid text"""
    def make(text, sep="/"):
        return NamedSegment.parse(text, sep).get()
    return make


@pytest.fixture
def hello_there(named):
    """Fixture that provides the absolute path /hello/there"""
    return ABSOLUTE_ROOT.child(named("hello")).child(named("there"))


@pytest.fixture
def up_up_world(named):
    """Fixture that provides the relative path ../../world"""
    return RELATIVE_ROOT.parent().parent().child(named("world"))


@pytest.fixture
def clean_env(monkeypatch):
    """
    Fixture that removes the separator variable from the environment.

    Loading .env files is disabled so a developer's local .env cannot
    leak a separator into the test.
    """
    monkeypatch.delenv(SEPARATOR_ENV_VAR, raising=False)
    monkeypatch.setattr("pathdsl.config.load_dotenv", lambda *args, **kwargs: False)
    return monkeypatch
