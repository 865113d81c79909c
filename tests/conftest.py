"""
Shared fixtures for the tree tests.
"""

import io

import pytest

from mmtree import log
from mmtree.tree.multimap import MultiMapTree
from treecheck import check_invariants


@pytest.fixture
def invariants():
    return check_invariants


@pytest.fixture
def sample():
    tree = MultiMapTree()
    for k in [5, 3, 8, 1, 4, 8, 8]:
        tree.insert(k, "v" + str(k))
    return tree


@pytest.fixture
def logbuf(monkeypatch):
    buf = io.StringIO()
    monkeypatch.setattr(log, "logger",
                        log.Logger(log.LOG_DEBUG3, buf, colors='never'))
    return buf
