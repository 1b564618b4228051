"""Weighted directed graph module."""

from .graph import Edge, Graph, InvalidArgumentError, path_distance

__all__ = ['Edge', 'Graph', 'InvalidArgumentError', 'path_distance']
