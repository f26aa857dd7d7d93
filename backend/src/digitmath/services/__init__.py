"""
Services package - Operations composed from the domain arithmetic.
"""

from .factorial import FactorialService

__all__ = ["FactorialService"]
