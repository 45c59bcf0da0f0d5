"""
Base identifier generator interface for fieldtree.

This module defines the abstract interface that row identifier sources must implement.
"""

from abc import ABC, abstractmethod


class IdGenerator(ABC):
    """
    Abstract base class for identifier generators.
    
    The normalizer asks for one fresh identifier per field. Implementations
    must never hand out the same identifier twice.
    """
    
    @abstractmethod
    def generate_id(self) -> str:
        """
        Produce a new identifier.
        
        Returns:
            An identifier not returned before by this generator
        """
        pass
