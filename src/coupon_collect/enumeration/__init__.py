"""
Module: enumeration

Purpose:
    Enumeration of the composition space of a pack: every way G items can
    be split across K kinds, each produced exactly once.

Key Functions:
    - count_compositions(): Size of the composition space

Key Classes:
    - CompositionEnumerator: Lazy single-pass iterator

Used By:
    - coupon_collect.probability: Distribution assembly
"""

from .enumerator import CompositionEnumerator, count_compositions

__all__ = [
    "CompositionEnumerator",
    "count_compositions",
]
