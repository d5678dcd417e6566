import math

from .config import Config
from .routing_table import RoutingTable


def manhattan_distance(x1, y1, x2, y2):
    """
    Manhattan distance between two points, rounded up to a whole number.
    """
    return int(math.ceil(abs(x1 - x2) + abs(y1 - y2)))


def euclidean_distance(x1, y1, x2, y2):
    """
    Straight-line distance between two points, rounded up to a whole number.

    Rounding up keeps the triangle inequality, so a direct link is never
    dearer than a detour through a third stop.
    """
    return int(math.ceil(math.hypot(x1 - x2, y1 - y2)))


DISTANCE_METRICS = {
    "manhattan": manhattan_distance,
    "euclidean": euclidean_distance,
}


class Stop:
    """
    A stop in the transport network.

    Stops are compared by identity: two stops with the same name and position
    are still different stops. Each stop owns exactly one RoutingTable.
    """

    def __init__(self, name, x, y):
        self.name = name
        self.x = float(x)
        self.y = float(y)
        self._neighbours = set()
        self._routing_table = RoutingTable(self)

    def get_name(self):
        return self.name

    def get_x(self):
        return self.x

    def get_y(self):
        return self.y

    def get_neighbours(self):
        """Return a copy of the stops directly adjacent to this one."""
        return set(self._neighbours)

    def add_neighbouring_stop(self, stop):
        # A stop is never its own neighbour
        if stop is None or stop is self:
            return
        self._neighbours.add(stop)

    def get_routing_table(self):
        return self._routing_table

    def distance_to(self, stop):
        """
        Distance from this stop to the given stop using Config.DISTANCE_METRIC.

        Raises:
            ValueError: If the configured metric is not supported
        """
        metric = DISTANCE_METRICS.get(Config.DISTANCE_METRIC)
        if metric is None:
            raise ValueError(f"Unsupported distance metric: {Config.DISTANCE_METRIC}")
        return metric(self.x, self.y, stop.x, stop.y)

    def connect(self, other):
        """Link this stop and other in both directions."""
        self._routing_table.add_neighbour(other)
        other.get_routing_table().add_neighbour(self)

    def __repr__(self):
        return f"Stop({self.name}, {self.x}, {self.y})"
