"""
Composite guards - combine stages into one guard.
"""

from hetuguard.guards.composite.base import CompositeGuard

__all__ = ["CompositeGuard"]
