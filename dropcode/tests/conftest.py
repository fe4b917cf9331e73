"""
dropcode/tests/conftest.py

Shared pytest fixtures for the dropcode test suite.
"""

import io
import json

import pytest

from dropcode import config
from dropcode.prompt import PromptSession


@pytest.fixture(autouse=True)
def isolated_config_file(tmp_path, monkeypatch):
    """
    Point CONFIG_FILE at a temp location so the user's real
    ~/.config/dropcode/config.json is never read or written.
    """
    path = tmp_path / 'config' / 'config.json'
    monkeypatch.setattr(config, 'CONFIG_FILE', path)
    monkeypatch.delenv('NO_COLOR', raising=False)
    monkeypatch.delenv('FORCE_COLOR', raising=False)
    return path


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """An empty working directory the test runs inside."""
    d = tmp_path / 'work'
    d.mkdir()
    monkeypatch.chdir(d)
    return d


@pytest.fixture
def scripted_prompt():
    """
    Build a PromptSession fed from a list of answer lines.
    The output stream is available as session.output.
    """
    def make(*answers):
        stdin = io.StringIO(''.join(f'{a}\n' for a in answers))
        stdout = io.StringIO()
        session = PromptSession(stdin=stdin, stdout=stdout)
        session.output = stdout
        return session
    return make


@pytest.fixture
def write_config(isolated_config_file):
    """Write a dict as the user's config.json."""
    def write(cfg):
        isolated_config_file.parent.mkdir(parents=True, exist_ok=True)
        isolated_config_file.write_text(json.dumps(cfg))
        return isolated_config_file
    return write
