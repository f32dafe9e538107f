import logging
import random
import string
from typing import List

import pytest

from prefixtree import RadixNode


@pytest.fixture
def sample_tree() -> RadixNode:
    """
    Hand built tree::

        () -> (1, 2)=0 -> (3,)=1
                       -> (-3,)=2
           -> (9, 8, 7)=3
    """
    root: RadixNode = RadixNode()

    prefix = RadixNode((1, 2), 0)
    prefix.children = [RadixNode((3,), 1), RadixNode((-3,), 2)]

    root.children = [prefix, RadixNode((9, 8, 7), 3)]
    return root


@pytest.fixture
def words() -> List[str]:
    rnd = random.Random(42)
    return [
        "".join(rnd.choice("abc") for _ in range(rnd.randint(0, 8)))
        for _ in range(300)
    ] + list(string.ascii_lowercase)


@pytest.fixture
def restore_logging():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level

    try:
        yield
    finally:
        root_logger.handlers[:] = handlers
        root_logger.setLevel(level)
