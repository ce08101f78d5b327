"""Base type aliases shared across puzzlegraph modules."""

from __future__ import annotations

from typing import Hashable, TypeVar, Union

# Caller-supplied node value; only hashing and equality are required.
Node = TypeVar("Node", bound=Hashable)

# Edge weight or accumulated path distance.
Cost = Union[int, float]
