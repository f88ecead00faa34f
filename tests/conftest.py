"""
Pytest configuration and shared fixtures for friendgraph tests.

Provides the sample graphs, temporary directories and a recording console
used across unit tests.
"""
import json
import shutil
import tempfile
from pathlib import Path

import pytest
from rich.console import Console

from friendgraph.samples import build_chain_graph, build_cluster_graph


@pytest.fixture
def temp_dir():
    """Provide a temporary directory that's cleaned up after tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path)


@pytest.fixture
def chain_graph():
    """10-20-30-40-50-60 plus 30-50 and 40-60, every friendship both ways."""
    return build_chain_graph()


@pytest.fixture
def cluster_graph():
    """The seven person graph with one-way friendships."""
    return build_cluster_graph()


@pytest.fixture
def recording_console():
    """A wide console that records output instead of writing to a terminal."""
    return Console(record=True, width=200, force_terminal=False, color_system=None)


@pytest.fixture
def settings_file(temp_dir):
    """Write a settings file and return its path."""

    def _write(data):
        path = temp_dir / "settings.json"
        path.write_text(json.dumps(data) if not isinstance(data, str) else data)
        return path

    return _write
