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

"""Graph algorithms over adjacency mappings.

Currently implements the following:
- Bellman-Ford's single-source shortest path (Bellman, 1958)
- Dijkstra's single-source shortest path (Dijkstra, 1959)
- Depth-first search (Moore, 1959)

A graph is a mapping from node to a mapping from neighbour to edge weight.
Shortest-path results map every node reachable from the source to either
`None` (the source itself) or a `PathRecord(predecessor, distance)`.

See "Introduction to Algorithms" 3ed (CLRS3) for more information.

"""
# pylint: disable=invalid-name


import heapq
import itertools
import numbers
from typing import Dict, Hashable, List, NamedTuple, Optional

from absl import logging
import chex
import numpy as np


_Array = np.ndarray
_Node = Hashable
_Weight = numbers.Real  # int, float, Fraction, numpy scalars

Graph = Dict[_Node, Dict[_Node, _Weight]]


class PathRecord(NamedTuple):
  """Predecessor and total distance of a node on its shortest path."""
  predecessor: _Node
  distance: _Weight


Paths = Dict[_Node, Optional[PathRecord]]


def add_edge(graph: Graph, u: _Node, v: _Node, weight: _Weight) -> None:
  """Inserts (or overwrites) the directed edge `u -> v`.

  Both endpoints are guaranteed to exist as vertices of `graph` afterwards;
  `v` gets an empty out-edge mapping if it was not yet known.

  Args:
    graph: The graph to modify in place.
    u: Tail of the edge.
    v: Head of the edge.
    weight: Edge weight; may be negative.
  """
  graph.setdefault(u, {})[v] = weight
  graph.setdefault(v, {})


def from_adjacency(A: _Array) -> Graph:
  """Builds a graph from a square adjacency matrix.

  Non-zero entries `A[u, v]` become edges `u -> v` of that weight; every row
  index becomes a vertex, even without incident edges.

  Args:
    A: Square matrix of shape `[n, n]`.

  Returns:
    The adjacency mapping, with plain Python scalars as weights.
  """
  chex.assert_rank(A, 2)
  if A.shape[0] != A.shape[1]:
    raise ValueError(f'Adjacency matrix must be square, got shape {A.shape}.')

  graph = {u: {} for u in range(A.shape[0])}
  for u, v in zip(*np.nonzero(A)):
    add_edge(graph, int(u), int(v), A[u, v].item())
  return graph


def _vertices(graph: Graph, source: _Node) -> List[_Node]:
  """All nodes of `graph`, including heads that are not outer keys."""
  nodes = dict.fromkeys(graph)
  for edges in graph.values():
    nodes.update(dict.fromkeys(edges))
  nodes.setdefault(source)
  return list(nodes)


def bellman_ford(graph: Graph, source: _Node) -> Optional[Paths]:
  """Bellman-Ford's single-source shortest path (Bellman, 1958).

  Args:
    graph: Weighted directed graph; weights may be negative.
    source: Start node. It does not need to be a key of `graph`.

  Returns:
    A mapping from every node reachable from `source` to its `PathRecord`
    (`None` for the source itself), or `None` if a negative-weight cycle is
    reachable from `source`. Nodes that cannot be reached are absent.
  """

  d = {source: 0}
  pi = {source: None}

  for _ in range(len(_vertices(graph, source)) - 1):
    changed = False
    for u, edges in graph.items():
      if u not in d:
        continue
      for v, w in edges.items():
        if v not in d or d[u] + w < d[v]:
          d[v] = d[u] + w
          pi[v] = u
          changed = True
    if not changed:
      break

  # One more pass: any edge that still relaxes lies on (or behind) a negative
  # cycle. Self-loops are included, `d[u] + w < d[u]` iff `w < 0`.
  for u, edges in graph.items():
    if u not in d:
      continue
    for v, w in edges.items():
      if v not in d or d[u] + w < d[v]:
        logging.vlog(1, 'Negative cycle through edge %r -> %r reachable '
                     'from %r.', u, v, source)
        return None

  return {
      v: None if v == source else PathRecord(pi[v], d[v]) for v in d
  }


def dijkstra(graph: Graph, source: _Node) -> Paths:
  """Dijkstra's single-source shortest path (Dijkstra, 1959).

  Args:
    graph: Weighted directed graph with non-negative weights.
    source: Start node. It does not need to be a key of `graph`.

  Returns:
    Same layout as `bellman_ford`, without the negative-cycle case.

  Raises:
    ValueError: if a negative edge is reachable from `source`.
  """

  d = {source: 0}
  pi = {source: None}
  mark = set()
  counter = itertools.count()  # drop-in tie breaker, nodes need not compare
  queue = [(0, next(counter), source)]

  while queue:
    dist_u, _, u = heapq.heappop(queue)
    if u in mark or dist_u > d[u]:
      continue
    mark.add(u)
    for v, w in graph.get(u, {}).items():
      if w < 0:
        raise ValueError(
            f'Negative edge {u!r} -> {v!r} ({w!r}) reachable from {source!r}; '
            'use `bellman_ford` instead.')
      if v not in mark and (v not in d or dist_u + w < d[v]):
        d[v] = dist_u + w
        pi[v] = u
        heapq.heappush(queue, (d[v], next(counter), v))

  return {
      v: None if v == source else PathRecord(pi[v], d[v]) for v in d
  }


def depth_first_search(graph: Graph, root: _Node,
                       objective: _Node) -> Optional[List[_Node]]:
  """Depth-first search (Moore, 1959).

  Neighbours are explored in stored order; each node is visited at most once,
  so the root is never revisited, even through a back edge.

  Args:
    graph: Directed graph; weights are ignored.
    root: Node to start from.
    objective: Node to look for.

  Returns:
    The nodes in visiting order, ending with `objective`, or `None` if
    `objective` is not reachable from `root`.
  """

  history = []
  seen = {root}
  stack = [root]
  while stack:
    u = stack.pop()
    history.append(u)
    if u == objective:
      return history
    for v in reversed(list(graph.get(u, {}))):
      if v not in seen:
        seen.add(v)
        stack.append(v)

  return None
