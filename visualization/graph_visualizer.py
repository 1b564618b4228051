"""
Graph Visualizer

Draws a weighted directed graph showing:
- Vertices (light blue circles) and edges (gray arrows with distances)
- A breadth-first walk with visit order numbers
- A shortest path between two vertices
- The optimal warehouse location (orange diamond)
"""

import logging
import matplotlib.pyplot as plt
import networkx as nx
from typing import Dict, List, Tuple

from graph.graph import Graph, path_distance
from placement.location import UnreachablePolicy, find_optimal_warehouse_location

logger = logging.getLogger(__name__)


class GraphVisualizer:
    """Visualizes a Graph and the results of queries run against it."""

    def __init__(self, graph: Graph, seed: int = 42):
        """
        Initialize the visualizer with a graph.

        Args:
            graph: Graph to draw
            seed: Seed for the spring layout, so repeated plots line up
        """
        self.graph = graph
        self.seed = seed
        self.fig = None
        self.ax = None

    def create_networkx_graph(self) -> nx.DiGraph:
        """
        Convert the graph to a NetworkX DiGraph.

        Parallel edges collapse into one arc carrying the smallest distance
        and a ``parallel`` count.
        """
        G = nx.DiGraph()

        for vertex in self.graph.vertices():
            G.add_node(vertex, degree=self.graph.degree(vertex))

        for vertex in self.graph.vertices():
            for edge in self.graph.edges(vertex):
                if G.has_edge(edge.from_vertex, edge.to_vertex):
                    data = G.edges[edge.from_vertex, edge.to_vertex]
                    data['weight'] = min(data['weight'], edge.distance)
                    data['parallel'] += 1
                else:
                    G.add_edge(edge.from_vertex, edge.to_vertex,
                               weight=edge.distance, parallel=1)

        return G

    def _layout(self, G: nx.DiGraph) -> Dict:
        return nx.spring_layout(G, seed=self.seed)

    def plot_graph(self,
                   figsize: Tuple[int, int] = (12, 9),
                   title: str = "Graph",
                   show_labels: bool = True) -> None:
        """
        Plot all vertices and edges.

        Args:
            figsize: Figure size (width, height)
            title: Plot title
            show_labels: Whether to draw vertex names
        """
        G = self.create_networkx_graph()
        pos = self._layout(G)

        self.close()
        self.fig, self.ax = plt.subplots(figsize=figsize)

        nx.draw_networkx_edges(
            G, pos,
            edge_color='gray',
            width=1.5,
            alpha=0.6,
            arrows=True,
            arrowsize=15,
            ax=self.ax
        )
        nx.draw_networkx_nodes(
            G, pos,
            node_color='lightblue',
            node_size=600,
            edgecolors='black',
            label='Vertices',
            ax=self.ax
        )
        if show_labels:
            nx.draw_networkx_labels(G, pos, font_size=10, font_weight='bold', ax=self.ax)

        edge_labels = {(u, v): f"{d['weight']}" for u, v, d in G.edges(data=True)}
        nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels, font_size=8, ax=self.ax)

        self.ax.set_title(title, fontsize=16, fontweight='bold')
        self.ax.legend(fontsize=10, loc='upper right')
        self.ax.axis('off')
        plt.tight_layout()

    def plot_walk(self, start, color: str = 'green', figsize: Tuple[int, int] = (12, 9)) -> List:
        """
        Plot a breadth-first walk, numbering vertices in visit order.

        Returns:
            The walk as returned by ``Graph.walk``
        """
        walk = self.graph.walk(start)
        self.plot_graph(figsize=figsize, title=f"Breadth-first walk from {start}", show_labels=False)

        G = self.create_networkx_graph()
        pos = self._layout(G)

        if walk:
            nx.draw_networkx_nodes(
                G, pos,
                nodelist=walk,
                node_color=color,
                node_size=600,
                alpha=0.8,
                ax=self.ax
            )
            sequence_labels = {vertex: f"{i}" for i, vertex in enumerate(walk)}
            nx.draw_networkx_labels(
                G, pos,
                labels=sequence_labels,
                font_size=10,
                font_color='white',
                font_weight='bold',
                ax=self.ax
            )

        return walk

    def plot_path(self,
                  from_vertex,
                  to_vertex,
                  path_color: str = 'blue',
                  figsize: Tuple[int, int] = (12, 9)) -> List:
        """
        Plot the shortest path between two vertices on top of the graph.

        Args:
            from_vertex: Source vertex
            to_vertex: Target vertex
            path_color: Color for the path
            figsize: Figure size (width, height)

        Returns:
            The path as returned by ``Graph.shortest_path``
        """
        path = self.graph.shortest_path(from_vertex, to_vertex)
        self.plot_graph(figsize=figsize, title=f"Shortest path {from_vertex} -> {to_vertex}")

        G = self.create_networkx_graph()
        pos = self._layout(G)

        if path:
            path_edges = [(edge.from_vertex, edge.to_vertex) for edge in path]
            nx.draw_networkx_edges(
                G, pos,
                edgelist=path_edges,
                edge_color=path_color,
                width=4,
                alpha=0.8,
                arrows=True,
                arrowsize=20,
                arrowstyle='->',
                ax=self.ax
            )
            path_vertices = [from_vertex] + [edge.to_vertex for edge in path]
            nx.draw_networkx_nodes(
                G, pos,
                nodelist=path_vertices,
                node_color=path_color,
                node_size=600,
                alpha=0.7,
                ax=self.ax
            )

        stats_text = "\n".join([
            f"Edges: {len(path)}",
            f"Distance: {path_distance(path)}" if path else "No path",
        ])
        self.ax.text(
            0.02, 0.98, stats_text,
            transform=self.ax.transAxes,
            fontsize=12,
            verticalalignment='top',
            bbox=dict(boxstyle='round', facecolor='wheat', alpha=0.9)
        )

        return path

    def plot_warehouse_location(self,
                                unreachable: UnreachablePolicy = UnreachablePolicy.EXCLUDE,
                                figsize: Tuple[int, int] = (12, 9)):
        """
        Plot the graph with the optimal warehouse location highlighted.

        Returns:
            The chosen vertex
        """
        location = find_optimal_warehouse_location(self.graph, unreachable)
        self.plot_graph(figsize=figsize, title=f"Warehouse location: {location}")

        G = self.create_networkx_graph()
        pos = self._layout(G)

        nx.draw_networkx_nodes(
            G, pos,
            nodelist=[location],
            node_color='orange',
            node_size=1200,
            node_shape='D',
            label='Warehouse',
            edgecolors='darkred',
            linewidths=3,
            ax=self.ax
        )
        self.ax.legend(fontsize=10, loc='upper right')

        return location

    def save_plot(self, filename: str, dpi: int = 300) -> None:
        """
        Save the current plot to a file.

        Args:
            filename: Output filename (with extension)
            dpi: Resolution in dots per inch
        """
        if self.fig is None:
            raise ValueError("No plot to save. Create a plot first.")

        self.fig.savefig(filename, dpi=dpi, bbox_inches='tight')
        logger.info(f"Plot saved to {filename}")

    def show(self) -> None:
        """Display the current plot."""
        if self.fig is None:
            raise ValueError("No plot to show. Create a plot first.")
        plt.show()

    def close(self) -> None:
        """Close the current plot."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
