"""Query algorithms over `WeightedDiGraph`.

- ``path_cost``: cost of a direct edge or of an explicit vertex sequence.
- ``traversal``: depth-first reachability.
- ``path_count``: walk counting under hop or cost bounds.
- ``spf``: Dijkstra shortest-path distances.
"""

from routegraph.algorithms.base import INF_COST, Cost, PathCondition
from routegraph.algorithms.path_cost import cost_between_neighbors, cost_of_path
from routegraph.algorithms.path_count import (
    count_paths,
    count_paths_at_most_hops,
    count_paths_cost_bounded,
    count_paths_exact_hops,
)
from routegraph.algorithms.spf import dijkstra, shortest_path
from routegraph.algorithms.traversal import dfs, traverse

__all__ = [
    "Cost",
    "INF_COST",
    "PathCondition",
    "cost_between_neighbors",
    "cost_of_path",
    "count_paths",
    "count_paths_at_most_hops",
    "count_paths_cost_bounded",
    "count_paths_exact_hops",
    "dfs",
    "dijkstra",
    "shortest_path",
    "traverse",
]
