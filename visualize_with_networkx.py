import logging
import os

import matplotlib.pyplot as plt
import networkx as nx

from weighted_graph import Direction, GridMaze, Juncture, LoggingObserver, MazeGraph, to_networkx

logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

width = int(os.environ.get("MAZE_WIDTH", "5"))
height = int(os.environ.get("MAZE_HEIGHT", "4"))
if width < 2 or height < 1:
    raise SystemExit(f"MAZE_WIDTH must be at least 2 and MAZE_HEIGHT at least 1, got {width}x{height}.")

# Build a small maze with a couple of walls and one expensive corridor
maze = GridMaze(width, height)
# Wall off the right side of column 1, leaving the bottom row open
for y in range(height - 1 if width > 2 else 0):
    maze.add_wall(Juncture(1, y), Direction.TO_RIGHT)
for x in range(width - 1):
    maze.set_weight(Juncture(x, height - 1), Direction.TO_RIGHT, 3)

g = MazeGraph(maze)
g.add_observer(LoggingObserver(logging.getLogger("maze")))

start = Juncture(0, 0)
end = Juncture(width - 1, 0)
result = g.do_dijkstra(start, end)

# Convert to networkx and lay the junctures out on their grid coordinates
G = to_networkx(g)
pos = {j: (j.x, -j.y) for j in G.nodes}
path_edges = list(zip(result.path, result.path[1:]))

plt.figure(figsize=(6, 6))
nx.draw(
    G,
    pos,
    with_labels=False,
    node_color=["orange" if j in result.path else "lightblue" for j in G.nodes],
    edge_color="gray",
    node_size=300,
    arrows=False,
)
nx.draw_networkx_edges(G, pos, edgelist=path_edges, edge_color="red", width=2.5, arrows=False)
plt.title(f"Dijkstra {start} -> {end}, cost {result.cost}")
plt.tight_layout()
if os.environ.get("SHOW_PLOT", "1") == "1":
    plt.show()
