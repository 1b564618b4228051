#!/usr/bin/env python3
"""
Warehouse Location Demo
=======================

One graph + BFS walk + shortest path = one warehouse location
"""

import sys
import logging
import os
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from graph.graph import Graph, path_distance
from placement.location import average_distances, find_optimal_warehouse_location
from visualization.graph_visualizer import GraphVisualizer

# Setup simple logging
logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

# Configuration
OUTPUT_DIR = "output"
ROADS = [
    ("A", "B", 1.0),
    ("A", "C", 4.0),
    ("B", "C", 2.0),
    ("C", "D", 1.0),
    ("D", "E", 3.0),
    ("E", "C", 2.0),
]

print("\n" + "="*60)
print("WAREHOUSE LOCATION")
print("="*60 + "\n")

# 1. Build graph
print("1. Building graph...")
graph = Graph()
for from_vertex, to_vertex, distance in ROADS:
    graph.add_edge(from_vertex, to_vertex, distance)
print(f"   ✓ {graph.order()} locations, {graph.size()} roads\n")

# 2. Walk
print("2. Walking from A...")
print(f"   ✓ Visit order: {' → '.join(graph.walk('A'))}\n")

# 3. Shortest path
print("3. Finding shortest path A → E...")
path = graph.shortest_path("A", "E")
if path:
    print(f"   ✓ Path: {' → '.join(['A'] + [edge.to_vertex for edge in path])}")
    print(f"   ✓ Distance: {path_distance(path):.2f} units\n")
else:
    print("   ✗ No path found\n")

# 4. Warehouse location
print("4. Choosing warehouse location...")
for vertex, average in average_distances(graph).items():
    print(f"   {vertex}: average distance {average:.2f}")
location = find_optimal_warehouse_location(graph)
print(f"   ✓ Warehouse: {location}\n")

# 5. Visualize
print("5. Creating visualization...")
os.makedirs(OUTPUT_DIR, exist_ok=True)
viz = GraphVisualizer(graph)
viz.plot_warehouse_location()
viz.save_plot(f"{OUTPUT_DIR}/warehouse_location.png")
viz.close()
print(f"   ✓ Saved: {OUTPUT_DIR}/warehouse_location.png\n")

print("="*60)
print("COMPLETE!")
print("="*60)
