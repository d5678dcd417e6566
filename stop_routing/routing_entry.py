import math

# Cost of a destination with no known route
INFINITE_COST = math.inf


def add_costs(first, second):
    """
    Add two route costs, saturating to INFINITE_COST if either is unreachable.
    """
    if first == INFINITE_COST or second == INFINITE_COST:
        return INFINITE_COST
    return first + second


class RoutingEntry:
    """
    One row of a routing table: the next stop to travel to and the total cost
    of reaching the destination through it.

    An entry with no next stop and an infinite cost means there is currently no
    known route to the destination. Entries are never changed once built; a
    better route replaces the whole entry.
    """

    __slots__ = ('_next', '_cost')

    def __init__(self, next_stop=None, cost=INFINITE_COST):
        """
        Store the given next stop and cost.

        A missing next stop, a negative cost or an infinite cost silently gives
        the "no route" entry instead, for both fields.
        """
        if next_stop is None or cost < 0 or cost == INFINITE_COST:
            next_stop, cost = None, INFINITE_COST
        object.__setattr__(self, '_next', next_stop)
        object.__setattr__(self, '_cost', cost)

    def __setattr__(self, name, value):
        raise AttributeError(f"RoutingEntry is immutable, cannot set '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"RoutingEntry is immutable, cannot delete '{name}'")

    @property
    def next(self):
        return self._next

    @property
    def cost(self):
        return self._cost

    def get_cost(self):
        return self._cost

    def get_next(self):
        return self._next

    def is_reachable(self):
        return self._next is not None

    def __eq__(self, other):
        if not isinstance(other, RoutingEntry):
            return NotImplemented
        return self._next is other._next and self._cost == other._cost

    def __hash__(self):
        return hash((id(self._next), self._cost))

    def __repr__(self):
        if not self.is_reachable():
            return "RoutingEntry(no route)"
        return f"RoutingEntry({self._next!r}, {self._cost})"
