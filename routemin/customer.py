"""Customers (and the depot) of a vehicle routing problem with time windows."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(eq=False)
class Customer:
    """A customer with location, demand, time window and service time.

    Besides the problem data a customer carries the cached values the
    route evaluation keeps up to date while it sits in a route.
    """

    id: int
    x: float = 0.0
    y: float = 0.0
    demand: float = 0.0
    e: float = 0.0
    l: float = 0.0  # noqa: E741
    s: float = 0.0
    # Arrival times used while searching feasible ejections.
    a_temp: float = 0.0
    a_earliest_temp: float = 0.0
    a_earliest: float = 0.0
    # Time-window bookkeeping.
    a: float = 0.0
    z: float = 0.0
    tw_pf: float = 0.0
    tw_sf: float = 0.0
    # Capacity bookkeeping: prefix and suffix demand sums.
    demand_pf: float = 0.0
    demand_sf: float = 0.0
    # Distance bookkeeping: prefix and suffix travel distances.
    dist_pf: float = 0.0
    dist_sf: float = 0.0
    route: Any = field(default=None, repr=False)
    idx: int = -1

    def dup(self) -> Customer:
        """Return a copy of this customer that belongs to no route."""
        return replace(self, route=None, idx=-1)

    def is_ejected(self) -> bool:
        """Whether the customer is outside any route."""
        return self.route is None