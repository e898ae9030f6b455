import collections
import itertools
import secrets

import numpy as np
import pandas as pd


def random_string():
    return secrets.token_hex()[:8]


def get_duplicates(values):
    counts = collections.Counter(values)
    duplicates = [k for k, v in counts.items() if v > 1]
    return duplicates


def is_missing(value):
    """Return True if ``value`` is a missing scalar (None, nan, NA, NaT...).

    Containers such as lists are never missing.
    """
    isna = pd.isna(value)
    if isinstance(isna, (bool, np.bool_)):
        return bool(isna)
    return False


class ElementIdGenerator:
    """Generate identifiers for HTML elements that never repeat in a process.

    Identifiers look like ``"reactable-3f9a0c1e-0"``: a prefix, a random token
    drawn once when the generator is created, and a counter incremented at
    each call. The token keeps identifiers apart when several processes (e.g.
    several notebook kernels) write into the same page; the counter keeps
    them apart within a process.

    >>> from reportkit._utils import ElementIdGenerator
    >>> gen = ElementIdGenerator(token="abc")
    >>> gen(), gen()
    ('reactable-abc-0', 'reactable-abc-1')
    """

    def __init__(self, prefix="reactable", token=None):
        self.prefix = prefix
        self.token = random_string() if token is None else token
        self._counter = itertools.count()

    def __call__(self):
        return f"{self.prefix}-{self.token}-{next(self._counter)}"


_default_id_generator = ElementIdGenerator()


def new_element_id(id_generator=None):
    """Return a fresh element id from ``id_generator`` (a callable).

    The process-wide default generator is used when ``id_generator`` is None.
    """
    if id_generator is None:
        id_generator = _default_id_generator
    element_id = id_generator()
    if not isinstance(element_id, str) or not element_id:
        raise ValueError(
            f"The id generator must return a non-empty string, got {element_id!r}."
        )
    return element_id
