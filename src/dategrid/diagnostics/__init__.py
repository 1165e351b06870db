"""Diagnostics package.

- pretty_month, round_trip: always available, stdlib only
- grid_shapes: optional (requires the `diagnostics` extra: numpy, matplotlib)
"""

__all__ = ["pretty_month", "grid_shapes", "round_trip"]
