"""
Random identifier generator backed by uuid4.
"""

import uuid

from .base import IdGenerator


class UuidIdGenerator(IdGenerator):
    """
    Default generator: every call returns a random version 4 UUID string.
    """

    def generate_id(self) -> str:
        return str(uuid.uuid4())


_default_generator = UuidIdGenerator()


def get_unique_id() -> str:
    """Return a fresh random identifier from the shared default generator."""
    return _default_generator.generate_id()
