"""Visualization module for graphs and query results."""

from .graph_visualizer import GraphVisualizer

__all__ = ['GraphVisualizer']
