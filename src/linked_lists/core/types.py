"""Common type definitions shared by the linked list components."""

from __future__ import annotations

from typing import TypeVar

# Node values are opaque to the list, so no bound is placed on T
T = TypeVar("T")
