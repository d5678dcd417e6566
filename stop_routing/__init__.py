"""
Stop Routing

Distance-vector routing between the stops of a transport network. Every stop
owns a routing table which learns the cheapest route to every other reachable
stop by exchanging entries with its neighbours until the network converges.

Example:
    from stop_routing import Stop

    a = Stop("A", 0, 0)
    b = Stop("B", 2, 0)
    c = Stop("C", 2, 3)
    a.connect(b)
    b.connect(c)

    a.get_routing_table().cost_to(c)    # 5
    a.get_routing_table().next_stop(c)  # Stop(B, 2, 0)
"""

from .routing_entry import RoutingEntry, INFINITE_COST
from .routing_table import RoutingTable, SyncState
from .stop import Stop

__all__ = ['RoutingEntry', 'RoutingTable', 'SyncState', 'Stop', 'INFINITE_COST']
