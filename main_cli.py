#!/usr/bin/env python3
import argparse
import logging
import sys
import os

# Add the parent directory to the path so we can import the package
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from stop_routing.config import Config
from stop_routing.routing_entry import INFINITE_COST
from stop_routing.stop import Stop


def setup_logging(debug=False):
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else getattr(logging, Config.LOG_LEVEL, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def parse_stop(value):
    """
    Parse a stop given as NAME:X,Y into a Stop.

    Raises:
        ValueError: If the value is malformed
    """
    try:
        name, coords = value.split(":", 1)
        x, y = coords.split(",")
        return Stop(name.strip(), float(x), float(y))
    except ValueError:
        raise ValueError(f"Invalid stop '{value}', expected NAME:X,Y")


def parse_link(value):
    """Parse a link given as A-B into a pair of stop names."""
    parts = value.split("-")
    if len(parts) != 2 or not all(part.strip() for part in parts):
        raise ValueError(f"Invalid link '{value}', expected A-B")
    return parts[0].strip(), parts[1].strip()


def build_network(stop_args, link_args):
    """
    Create the stops and connect every link in both directions.

    Returns:
        dict: Stop name -> Stop
    """
    stops = {}
    for value in stop_args or []:
        stop = parse_stop(value)
        if stop.name in stops:
            raise ValueError(f"Duplicate stop '{stop.name}'")
        stops[stop.name] = stop

    for value in link_args or []:
        first, second = parse_link(value)
        for name in (first, second):
            if name not in stops:
                raise ValueError(f"Unknown stop '{name}' in link '{value}'")
        logging.debug(f"Linking {first} <-> {second}")
        stops[first].connect(stops[second])

    return stops


def format_cost(cost):
    return "unreachable" if cost == INFINITE_COST else str(cost)


def show_route(stops, from_name, to_name):
    """Print the cost and hops between two named stops."""
    for name in (from_name, to_name):
        if name not in stops:
            print(f"❌ Unknown stop: {name}")
            return False

    table = stops[from_name].get_routing_table()
    destination = stops[to_name]
    route = table.route_to(destination)

    if not route:
        print(f"❌ No route from {from_name} to {to_name}")
        return False

    print(f"✅ Route from {from_name} to {to_name}:")
    print(f"  💰 Cost: {format_cost(table.cost_to(destination))}")
    print(f"  🚏 Stops: {' -> '.join(stop.name for stop in route)}")
    return True


def show_table(stops, name):
    """Print every entry in a stop's routing table."""
    if name not in stops:
        print(f"❌ Unknown stop: {name}")
        return False

    table = stops[name].get_routing_table()
    print(f"📋 Routing table for {name} ({len(table)} destinations):")
    for destination in sorted(table.destinations(), key=lambda stop: stop.name):
        next_stop = table.next_stop(destination)
        via = next_stop.name if next_stop else "-"
        print(f"  {destination.name:<12} via {via:<12} cost {format_cost(table.cost_to(destination))}")
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Stop Routing CLI - Build a small network and inspect its routing tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Cheapest route between two stops
  ./main_cli.py route A C --stop A:0,0 --stop B:2,0 --stop C:2,3 --link A-B --link B-C

  # Full routing table of a stop
  ./main_cli.py table A --stop A:0,0 --stop B:2,0 --link A-B
        """
    )

    parser.add_argument('--debug', action='store_true', help='Enable debug logging')

    network_parser = argparse.ArgumentParser(add_help=False)
    network_parser.add_argument('--stop', dest='stops', action='append', help='Stop as NAME:X,Y (repeatable)')
    network_parser.add_argument('--link', dest='links', action='append', help='Link as A-B (repeatable)')

    subparsers = parser.add_subparsers(dest='command', help='Sub-command help')

    # Route command
    route_parser = subparsers.add_parser('route', parents=[network_parser], help='Show the route between two stops')
    route_parser.add_argument('from_stop', type=str, help='Starting stop name')
    route_parser.add_argument('to_stop', type=str, help='Destination stop name')

    # Table command
    table_parser = subparsers.add_parser('table', parents=[network_parser], help="Show a stop's routing table")
    table_parser.add_argument('stop_name', type=str, help='Stop name')

    args = parser.parse_args(argv)
    setup_logging(args.debug or Config.DEBUG)

    if args.command not in ('route', 'table'):
        parser.print_help()
        return 1

    try:
        stops = build_network(args.stops, args.links)
    except ValueError as e:
        print(f"❌ {e}")
        return 1

    if args.command == 'route':
        ok = show_route(stops, args.from_stop, args.to_stop)
    else:
        ok = show_table(stops, args.stop_name)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
