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

"""Unit tests for `samplers.py`."""

from absl.testing import absltest
from absl.testing import parameterized

from algos._src import samplers
from algos._src.algorithms import check_graphs
import numpy as np


class SamplersTest(parameterized.TestCase):

  @parameterized.parameters(*samplers.SAMPLERS)
  def test_sampler_determinism(self, name):
    num_samples = 3
    num_nodes = 10
    sampler_1 = samplers.build_sampler(name, num_samples, num_nodes, seed=0)
    sampler_2 = samplers.build_sampler(name, num_samples, num_nodes, seed=0)

    np.random.seed(47)  # Set seed
    feedback_1 = sampler_1.next()
    np.random.seed(48)  # Set a different seed
    feedback_2 = sampler_2.next()

    # Validate that datasets are the same.
    self.assertEqual(feedback_1, feedback_2)

  @parameterized.parameters(*samplers.SAMPLERS)
  def test_sampler_batch_determinism(self, name):
    num_samples = 10
    batch_size = 5
    num_nodes = 6
    sampler_1 = samplers.build_sampler(name, num_samples, num_nodes, seed=1)
    sampler_2 = samplers.build_sampler(name, num_samples, num_nodes, seed=1)

    np.random.seed(0)
    feedback_1 = sampler_1.next(batch_size)
    np.random.seed(0)
    feedback_2 = sampler_2.next(batch_size)

    self.assertLen(feedback_1.inputs, batch_size)
    self.assertLen(feedback_1.outputs, batch_size)
    self.assertEqual(feedback_1, feedback_2)

  def test_batch_too_large(self):
    sampler = samplers.build_sampler('bellman_ford', 2, 4, seed=0)
    with self.assertRaises(ValueError):
      sampler.next(3)

  def test_unknown_algorithm(self):
    with self.assertRaises(NotImplementedError):
      samplers.build_sampler('floyd_warshall', 2, 4)

  def test_dijkstra_rejects_negative_weights(self):
    with self.assertRaises(ValueError):
      samplers.build_sampler('dijkstra', 2, 4, low=-1.)

  def test_bellman_ford_outputs(self):
    sampler = samplers.build_sampler(
        'bellman_ford', 20, 5, seed=3, p=0.4, low=-0.3, high=1.)
    feedback = sampler.next()
    for (graph, source), paths in zip(feedback.inputs, feedback.outputs):
      self.assertCountEqual(graph, range(5))
      self.assertTrue(check_graphs.check_valid_paths(graph, source, paths))

  def test_random_digraph_weights(self):
    sampler = samplers.build_sampler(
        'bellman_ford', 10, 6, seed=7, p=0.5, low=-0.5, high=2.)
    unweighted = samplers.build_sampler('depth_first_search', 10, 6, seed=7)
    for graph, _ in sampler.next().inputs:
      for edges in graph.values():
        for w in edges.values():
          self.assertBetween(w, -0.5, 2.)
    for graph, _, _ in unweighted.next().inputs:
      for edges in graph.values():
        self.assertTrue(all(w == 1 for w in edges.values()))

  def test_depth_first_search_outputs(self):
    sampler = samplers.build_sampler('depth_first_search', 10, 6, seed=5)
    feedback = sampler.next()
    for (graph, root, objective), history in zip(feedback.inputs,
                                                 feedback.outputs):
      reachable = check_graphs.reference_distances(graph, root)
      if objective in reachable:
        self.assertEqual(history[0], root)
        self.assertEqual(history[-1], objective)
        self.assertLen(set(history), len(history))
      else:
        self.assertIsNone(history)


if __name__ == '__main__':
  absltest.main()
