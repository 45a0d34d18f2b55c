"""Shared fixtures for search tree tests."""

import pytest

from search_tree import BinarySearchTree
from tests.helpers import SAMPLE_VALUES, build


@pytest.fixture
def empty_tree():
    return BinarySearchTree()


@pytest.fixture
def sample_tree():
    """
    Tree built from SAMPLE_VALUES:

         33
       /    \\
     20      40
    /  \\       \\
   11   30      50
       /  \\    /
      21  31  41
    """
    return build(SAMPLE_VALUES)
