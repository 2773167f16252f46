"""Capacity penalty of routes and its change under route modifications.

A route is a sequence of customers that starts and ends with a depot.
Each customer caches ``demand_pf`` (sum of demands from the start of the
route up to and including it) and ``demand_sf`` (sum from it to the end).
The penalty of a route is the amount by which its total demand exceeds
the vehicle capacity.
"""

from __future__ import annotations

from collections.abc import Sequence

from routemin.customer import Customer

Route = Sequence[Customer]


def _position(route: Route, c: Customer) -> int:
    idx = c.idx
    if 0 <= idx < len(route) and route[idx] is c:
        return idx
    for i, other in enumerate(route):
        if other is c:
            return i
    raise ValueError(f"customer {c.id} is not in the route")


def _next(route: Route, c: Customer) -> Customer:
    pos = _position(route, c)
    if pos + 1 >= len(route):
        raise ValueError(f"customer {c.id} has no successor in the route")
    return route[pos + 1]


def _tail(route: Route) -> Customer:
    if not route:
        raise ValueError("route is empty")
    return route[-1]


def _require_distinct(v_route: Route, w_route: Route) -> None:
    if v_route is w_route:
        raise ValueError("the modification needs two different routes")


def c_penalty_init(route: Route) -> None:
    """Compute the prefix and suffix demand sums of every customer."""
    total = 0.0
    for c in route:
        total += c.demand
        c.demand_pf = total
    total = 0.0
    for c in reversed(route):
        total += c.demand
        c.demand_sf = total


def c_penalty_update_forward(route: Route, start: Customer | None) -> None:
    """Recompute prefix sums from ``start`` to the end of the route."""
    if start is None:
        return
    pos = _position(route, start)
    if pos == 0:
        start.demand_pf = start.demand
        pos = 1
        if pos >= len(route):
            return
    total = route[pos - 1].demand_pf
    for c in route[pos:]:
        total += c.demand
        c.demand_pf = total


def c_penalty_update_backward(route: Route, start: Customer | None) -> None:
    """Recompute suffix sums from ``start`` back to the start of the route."""
    if start is None:
        return
    pos = _position(route, start)
    if pos == len(route) - 1:
        start.demand_sf = start.demand
        pos -= 1
        if pos < 0:
            return
    total = route[pos + 1].demand_sf
    for c in reversed(route[: pos + 1]):
        total += c.demand
        c.demand_sf = total


def c_penalty(route: Route, capacity: float) -> float:
    """Capacity excess of the route."""
    return max(0.0, _tail(route).demand_pf - capacity)


def insert_penalty(route: Route, v: Customer, w: Customer, capacity: float) -> float:
    """Penalty of ``route`` after inserting ``w`` before ``v``."""
    return max(0.0, _tail(route).demand_pf + w.demand - capacity)


def insert_delta(route: Route, v: Customer, w: Customer, capacity: float) -> float:
    """Change of penalty from inserting ``w`` before ``v``."""
    return insert_penalty(route, v, w, capacity) - c_penalty(route, capacity)


def replace_penalty(route: Route, v: Customer, w: Customer, capacity: float) -> float:
    """Penalty of ``route`` after replacing ``v`` with ``w``."""
    return max(0.0, _tail(route).demand_pf - v.demand + w.demand - capacity)


def replace_delta(route: Route, v: Customer, w: Customer, capacity: float) -> float:
    """Change of penalty from replacing ``v`` with ``w``."""
    return replace_penalty(route, v, w, capacity) - c_penalty(route, capacity)


def eject_penalty(route: Route, v: Customer, capacity: float) -> float:
    """Penalty of ``route`` after removing ``v``."""
    return max(0.0, _tail(route).demand_pf - v.demand - capacity)


def eject_delta(route: Route, v: Customer, capacity: float) -> float:
    """Change of penalty from removing ``v``."""
    return eject_penalty(route, v, capacity) - c_penalty(route, capacity)


def one_opt_penalty(
    v_route: Route, v: Customer, w_route: Route, w: Customer, capacity: float
) -> float:
    """Penalty of the route made of ``v_route`` up to ``v`` and ``w_route`` after ``w``."""
    _require_distinct(v_route, w_route)
    w_plus = _next(w_route, w)
    return max(0.0, v.demand_pf + w_plus.demand_sf - capacity)


def two_opt_penalty_delta(
    v_route: Route, v: Customer, w_route: Route, w: Customer, capacity: float
) -> float:
    """Change of total penalty from swapping the tails after ``v`` and ``w``."""
    _require_distinct(v_route, w_route)
    return (
        one_opt_penalty(v_route, v, w_route, w, capacity) - c_penalty(v_route, capacity)
    ) + (
        one_opt_penalty(w_route, w, v_route, v, capacity) - c_penalty(w_route, capacity)
    )


def out_relocate_penalty_delta(
    v_route: Route, v: Customer, w_route: Route, w: Customer, capacity: float
) -> float:
    """Change of total penalty from moving ``w`` to just before ``v``.

    Moves within one route do not change its capacity penalty.
    """
    if v_route is w_route:
        return 0.0
    return eject_delta(w_route, w, capacity) + insert_delta(v_route, v, w, capacity)


def exchange_penalty_delta(
    v_route: Route, v: Customer, w_route: Route, w: Customer, capacity: float
) -> float:
    """Change of total penalty from swapping ``v`` and ``w``.

    Swaps within one route do not change its capacity penalty.
    """
    if v_route is w_route:
        return 0.0
    return replace_delta(v_route, v, w, capacity) + replace_delta(w_route, w, v, capacity)