"""
digitmath - Arbitrary-precision decimal arithmetic on digit arrays.

Addition is the only arithmetic primitive; multiplication and factorial
are built on top of it.
"""

__version__ = "1.0.0"
