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

"""Unit tests for `check_graphs.py`."""

from absl.testing import absltest

from algos._src.algorithms import check_graphs
from algos._src.algorithms import graphs


def _make_graph(edges):
  graph = {}
  for u, v, w in edges:
    graphs.add_edge(graph, u, v, w)
  return graph


# Two routes from 'a' to 'd': a-b-d (3) and a-c-d (2).
DIAMOND = _make_graph([
    ('a', 'b', 1),
    ('a', 'c', 4),
    ('b', 'd', 2),
    ('c', 'd', -2),
    ('e', 'a', 1),
])


class CheckGraphsTest(absltest.TestCase):

  def test_to_networkx(self):
    g = check_graphs.to_networkx(DIAMOND)
    self.assertCountEqual(g.nodes, ['a', 'b', 'c', 'd', 'e'])
    self.assertEqual(g.number_of_edges(), 5)
    self.assertEqual(g['c']['d']['weight'], -2)

  def test_brute_force_distances(self):
    self.assertEqual(
        check_graphs.brute_force_distances(DIAMOND, 'a'),
        {'a': 0, 'b': 1, 'c': 4, 'd': 2})
    self.assertEqual(check_graphs.brute_force_distances(DIAMOND, 'd'),
                     {'d': 0})

  def test_reference_distances(self):
    self.assertEqual(
        check_graphs.reference_distances(DIAMOND, 'e'),
        {'e': 0, 'a': 1, 'b': 2, 'c': 5, 'd': 3})
    self.assertEqual(check_graphs.reference_distances({}, 'x'), {'x': 0})

  def test_reachable_negative_cycle(self):
    graph = _make_graph([(0, 1, 1), (2, 3, -2), (3, 2, 1)])
    self.assertFalse(check_graphs.reachable_negative_cycle(graph, 0))
    self.assertTrue(check_graphs.reachable_negative_cycle(graph, 2))
    self.assertIsNone(check_graphs.reference_distances(graph, 3))

    self.assertTrue(
        check_graphs.reachable_negative_cycle({'a': {'a': -1}}, 'a'))

  def test_check_valid_paths(self):
    paths = graphs.bellman_ford(DIAMOND, 'a')
    self.assertTrue(check_graphs.check_valid_paths(DIAMOND, 'a', paths))

    wrong_predecessor = dict(paths)
    wrong_predecessor['d'] = graphs.PathRecord('b', 2)
    self.assertFalse(
        check_graphs.check_valid_paths(DIAMOND, 'a', wrong_predecessor))

    not_optimal = dict(paths)
    not_optimal['d'] = graphs.PathRecord('b', 3)
    self.assertFalse(check_graphs.check_valid_paths(DIAMOND, 'a', not_optimal))

    missing = dict(paths)
    del missing['d']
    self.assertFalse(check_graphs.check_valid_paths(DIAMOND, 'a', missing))

    self.assertFalse(check_graphs.check_valid_paths(DIAMOND, 'a', None))

  def test_check_valid_paths_negative_cycle(self):
    graph = _make_graph([(0, 1, 1), (1, 0, -3)])
    self.assertTrue(check_graphs.check_valid_paths(graph, 0, None))
    self.assertFalse(
        check_graphs.check_valid_paths(graph, 0, {0: None,
                                                  1: graphs.PathRecord(0, 1)}))


if __name__ == '__main__':
  absltest.main()
