"""
Core types for the token graph.
"""

from typing import TypeAlias

TokenId: TypeAlias = int
Span: TypeAlias = tuple[int, int]
Buffer: TypeAlias = bytes | bytearray | memoryview
