import enum
import logging
from collections import deque

from .config import Config
from .routing_entry import RoutingEntry, INFINITE_COST, add_costs


class SyncState(enum.Enum):
    UNSYNCED = "unsynced"
    SYNCING = "syncing"
    CONVERGED = "converged"


class RoutingTable:
    """
    Maps destination stops to RoutingEntry objects for a single stop.

    The table tells passengers at its stop which neighbouring stop to go to
    next in order to reach their final destination. Tables learn routes by
    exchanging entries with the tables of neighbouring stops until the whole
    network agrees on the cheapest paths.
    """

    def __init__(self, stop):
        """
        Create a table for the given stop, seeded with a zero-cost route from
        the stop to itself.
        """
        self._stop = stop
        self._entries = {stop: RoutingEntry(stop, 0)}
        self._state = SyncState.UNSYNCED
        self._in_sync_run = False

    @property
    def state(self):
        return self._state

    def get_stop(self):
        """Return the stop this table routes for."""
        return self._stop

    def add_neighbour(self, neighbour):
        """
        Register a direct neighbour of this table's stop.

        The neighbour becomes a destination whose cost is the distance between
        the two stops and whose next stop is the neighbour itself. The entry is
        installed even if a cheaper route was already known, then the table is
        synchronised with the rest of the network.
        """
        self._stop.add_neighbouring_stop(neighbour)
        cost = self._stop.distance_to(neighbour)

        self._entries[neighbour] = RoutingEntry(neighbour, cost)
        self._mark_changed()
        logging.debug(f"{self._stop!r}: direct link to {neighbour!r} at cost {cost}")
        self.synchronise()

    def add_or_update_entry(self, destination, new_cost, intermediate):
        """
        Add a route to destination, or replace the current one if new_cost is
        strictly lower.

        Args:
            destination: The stop being routed to
            new_cost: Total cost of reaching destination via intermediate
            intermediate: The next stop to go to on the way to destination

        Returns:
            bool: True if the table changed, False if it stayed the same
        """
        entry = RoutingEntry(intermediate, new_cost)

        if destination not in self._entries:
            self._entries[destination] = entry
            self._mark_changed()
            logging.debug(f"{self._stop!r}: new route to {destination!r} via {intermediate!r} ({new_cost})")
            return True

        # A negative cost or missing intermediate collapses to "no route", which never wins
        if entry.get_cost() < self.cost_to(destination):
            self._entries[destination] = entry
            self._mark_changed()
            logging.debug(f"{self._stop!r}: cheaper route to {destination!r} via {intermediate!r} ({new_cost})")
            return True

        return False

    def cost_to(self, stop):
        """
        Returns the cost of reaching stop, or INFINITE_COST if it is not in the table.
        """
        entry = self._entries.get(stop)
        if entry is None:
            return INFINITE_COST
        return entry.get_cost()

    def get_costs(self):
        """Return a copy of the destination -> cost mapping."""
        return {destination: entry.get_cost() for destination, entry in self._entries.items()}

    def get_entry(self, destination):
        """Return the entry for destination, or a "no route" entry if unknown."""
        return self._entries.get(destination, RoutingEntry())

    def destinations(self):
        return list(self._entries)

    def next_stop(self, destination):
        """
        Returns the stop passengers should go to next in order to reach
        destination, or None if destination is None or not in the table.
        """
        if destination is None or destination not in self._entries:
            return None
        return self._entries[destination].get_next()

    def route_to(self, destination):
        """
        Follow next stops from this table's stop until destination is reached.

        Returns:
            list: The stops visited, starting with this table's stop and ending
            with destination. Empty if there is no route or the hops loop.
        """
        if self.next_stop(destination) is None:
            return []

        route = [self._stop]
        current = self._stop
        while current is not destination:
            nxt = current.get_routing_table().next_stop(destination)
            if nxt is None or nxt in route:
                logging.warning(f"Broken route from {self._stop!r} to {destination!r} at {current!r}")
                return []
            route.append(nxt)
            current = nxt
        return route

    def traverse_network(self):
        """
        Returns every stop reachable from this table's stop by following
        neighbour links, including the stop itself.

        Uses an explicit stack so large networks do not hit the recursion limit.
        """
        reachable = set()
        stack = [self._stop]

        while stack:
            current = stack.pop()
            if current in reachable:
                continue
            reachable.add(current)
            for neighbour in current.get_neighbours():
                if neighbour not in reachable:
                    stack.append(neighbour)

        return reachable

    def transfer_entries(self, other):
        """
        Offer every entry in this table to the table of the neighbouring stop other.

        Each destination is offered at the cost of getting from other to this
        table's stop plus the cost from here to the destination, with this
        table's stop as the next stop.

        Returns:
            bool: True if other's table gained or improved at least one entry
        """
        if Config.STRICT_NEIGHBOURS and other not in self._stop.get_neighbours():
            logging.warning(f"Refusing to transfer entries from {self._stop!r} to non-neighbour {other!r}")
            return False

        return self._offer_entries(other)

    def _offer_entries(self, other):
        other_table = other.get_routing_table()
        cost_to_other = self.cost_to(other)
        changed = False

        for destination in list(self._entries):
            new_cost = add_costs(cost_to_other, self.cost_to(destination))
            if other_table.add_or_update_entry(destination, new_cost, self._stop):
                changed = True

        return changed

    def synchronise(self):
        """
        Exchange entries between neighbouring tables across the reachable
        network until no table changes.

        Every reachable stop starts out queued. When a stop's entries improve a
        neighbour's table, that neighbour is queued again so its new routes are
        passed on in turn. Once the queue is empty, every reachable stop with a
        route back to this table's stop offers its entries here too, since
        links are one-way and this stop may not be anyone's neighbour. If that
        improves this table, the queue restarts from this stop. The run ends
        when a full round changes nothing.

        Returns:
            int: The number of transfers that changed a table
        """
        reachable = self.traverse_network()
        tables = [stop.get_routing_table() for stop in reachable]
        for table in tables:
            table._begin_sync()

        queue = deque(reachable)
        queued = set(reachable)
        changes = 0
        passes = 0

        while queue:
            while queue:
                current = queue.popleft()
                queued.discard(current)
                passes += 1
                current_table = current.get_routing_table()

                for neighbour in current.get_neighbours():
                    if not current_table.transfer_entries(neighbour):
                        continue
                    changes += 1
                    if neighbour not in queued:
                        queue.append(neighbour)
                        queued.add(neighbour)

            if self._pull_from(reachable):
                changes += 1
                queue.append(self._stop)
                queued.add(self._stop)

        for table in tables:
            table._end_sync()

        logging.info(f"Synchronised {len(reachable)} stops from {self._stop!r}: "
                     f"{changes} table updates in {passes} steps")
        return changes

    def _pull_from(self, stops):
        """Offer the entries of every stop in stops to this table."""
        changed = False
        for stop in stops:
            if stop is self._stop:
                continue
            table = stop.get_routing_table()
            # No known way back means every offer would be unreachable
            if table.cost_to(self._stop) == INFINITE_COST:
                continue
            if table._offer_entries(self._stop):
                changed = True
        return changed

    def _mark_changed(self):
        if not self._in_sync_run:
            self._state = SyncState.SYNCING

    def _begin_sync(self):
        self._in_sync_run = True
        self._state = SyncState.SYNCING

    def _end_sync(self):
        self._in_sync_run = False
        self._state = SyncState.CONVERGED

    def __len__(self):
        return len(self._entries)

    def __contains__(self, destination):
        return destination in self._entries

    def __repr__(self):
        return f"RoutingTable({self._stop!r}, {len(self._entries)} destinations)"
