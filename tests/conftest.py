"""Test configuration and fixtures."""

import pytest

from tests.helpers import make_node


@pytest.fixture
def chain_nodes():
    """root(tagged) -> A(untagged) -> B(untagged) -> C(tagged)."""
    return [
        make_node("root00000000aaaa", tags=["base:latest"], virtual_size=1000, size=1000),
        make_node("aaaaaaaaaaaa0001", "root00000000aaaa", virtual_size=2000, size=1000),
        make_node("bbbbbbbbbbbb0002", "aaaaaaaaaaaa0001", virtual_size=3000, size=1000),
        make_node("cccccccccccc0003", "bbbbbbbbbbbb0002", tags=["app:v1"], virtual_size=4000, size=1000),
    ]


@pytest.fixture
def branching_nodes():
    """A root with two children, one of which has a child of its own."""
    return [
        make_node("root00000000aaaa", tags=["base:latest"], virtual_size=1000, size=1000),
        make_node("left00000000bbbb", "root00000000aaaa", virtual_size=1500, size=500),
        make_node("right0000000cccc", "root00000000aaaa", tags=["app:v1", "app:latest"], virtual_size=2500, size=1500),
        make_node("leaf00000000dddd", "left00000000bbbb", tags=["tool:1.0"], virtual_size=1536, size=36),
    ]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep user configuration files out of the tests."""
    monkeypatch.delenv("DOCKVIZ_CONFIG", raising=False)
    monkeypatch.delenv("IN_DOCKER", raising=False)
    monkeypatch.chdir(tmp_path)
