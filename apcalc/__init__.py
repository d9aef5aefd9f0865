"""Arbitrary-precision integer arithmetic on decimal digit sequences, with a command line front end."""

__version__ = "0.1.0"
__all__ = ["arith", "cli"]