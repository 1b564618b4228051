"""Warehouse placement module built on the graph engine."""

from .location import UnreachablePolicy, average_distances, find_optimal_warehouse_location

__all__ = ['UnreachablePolicy', 'average_distances', 'find_optimal_warehouse_location']
