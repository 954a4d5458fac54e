"""
Application common module.

Contains building blocks shared by application services:
- Result: Result type for service outcomes
"""

from .result import Failure, Result, Success

__all__ = [
    "Failure",
    "Result",
    "Success",
]
