"""Identifier generators for normalized table rows."""

from .base import IdGenerator
from .uuid_generator import UuidIdGenerator, get_unique_id
from .sequential import SequentialIdGenerator

__all__ = ["IdGenerator", "UuidIdGenerator", "SequentialIdGenerator", "get_unique_id"]
