"""
Deterministic identifier generator for testing fieldtree.

This module provides a generator with a predictable id stream so tests can
assert on exact table keys.
"""

from typing import Optional

from ..config import config
from .base import IdGenerator


class SequentialIdGenerator(IdGenerator):
    """
    Generator that returns `<prefix>1`, `<prefix>2`, ... in call order.
    """

    def __init__(self, prefix: Optional[str] = None, start: int = 1):
        """
        Initialize the sequential generator.
        
        Args:
            prefix: Text prepended to the counter (defaults to `ids.prefix` from config)
            start: First counter value
        """
        self.prefix = config.id_prefix if prefix is None else prefix
        self._next = start

    def generate_id(self) -> str:
        value = f"{self.prefix}{self._next}"
        self._next += 1
        return value

    def reset(self, start: int = 1) -> None:
        """Restart the sequence."""
        self._next = start
