# Copyright 2021 DeepMind Technologies Limited. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================

"""Reference checks for the shortest-path algorithms, built on `networkx`."""

from typing import Dict, Hashable, Optional

from algos._src.algorithms import graphs
import networkx as nx
import numpy as np


_Node = Hashable


def to_networkx(graph: graphs.Graph) -> nx.DiGraph:
  """Converts an adjacency mapping into a weighted `networkx.DiGraph`."""
  g = nx.DiGraph()
  g.add_nodes_from(graph)
  for u, edges in graph.items():
    for v, w in edges.items():
      g.add_edge(u, v, weight=w)
  return g


def _reachable_subgraph(graph: graphs.Graph, source: _Node) -> nx.DiGraph:
  g = to_networkx(graph)
  g.add_node(source)
  nodes = nx.descendants(g, source) | {source}
  return g.subgraph(nodes).copy()


def reachable_negative_cycle(graph: graphs.Graph, source: _Node) -> bool:
  """Whether some negative-weight cycle can be reached from `source`."""
  return nx.negative_edge_cycle(_reachable_subgraph(graph, source))


def reference_distances(graph: graphs.Graph,
                        source: _Node) -> Optional[Dict[_Node, float]]:
  """Shortest distances computed by `networkx`, `None` on a negative cycle."""
  if reachable_negative_cycle(graph, source):
    return None
  g = _reachable_subgraph(graph, source)
  return dict(nx.single_source_bellman_ford_path_length(g, source))


def brute_force_distances(graph: graphs.Graph,
                          source: _Node) -> Dict[_Node, float]:
  """Minimum weight over all simple paths; exponential, small graphs only.

  Only meaningful when no negative cycle is reachable from `source`.
  """
  g = _reachable_subgraph(graph, source)
  dist = {source: 0}
  for target in g:
    if target == source:
      continue
    dist[target] = min(
        nx.path_weight(g, path, weight='weight')
        for path in nx.all_simple_paths(g, source, target))
  return dist


def check_valid_paths(graph: graphs.Graph, source: _Node,
                      paths: Optional[graphs.Paths]) -> bool:
  """Checks a shortest-path result against the `networkx` reference.

  Every record must point at an existing edge, its distance must extend the
  predecessor's distance by that edge's weight, and must be optimal.

  Args:
    graph: The input graph.
    source: The source node.
    paths: Output of `bellman_ford` or `dijkstra`.

  Returns:
    True iff `paths` is a valid answer for `(graph, source)`.
  """
  expected = reference_distances(graph, source)
  if expected is None or paths is None:
    return expected is None and paths is None

  if set(paths) != set(expected) or paths[source] is not None:
    return False

  for v, record in paths.items():
    if v == source:
      continue
    if record is None or record.predecessor not in paths:
      return False
    p = record.predecessor
    if v not in graph.get(p, {}):
      return False
    dist_p = 0 if p == source else paths[p].distance
    if not np.isclose(dist_p + graph[p][v], record.distance):
      return False
    if not np.isclose(record.distance, expected[v]):
      return False

  return True
