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

"""Run one or more graph algorithms on sampled graphs and validate them."""

import time

from absl import app
from absl import flags
from absl import logging
import algos
from algos._src.algorithms import check_graphs
import numpy as np


flags.DEFINE_list('algorithms', ['bellman_ford', 'dijkstra'],
                  'Which algorithms to run.')
flags.DEFINE_list('lengths', ['4', '8', '16', '32'],
                  'Which graph sizes (number of nodes) to sample.')
flags.DEFINE_integer('num_samples', 100, 'Number of graphs per size.')
flags.DEFINE_integer('seed', 42, 'Random seed to set')
flags.DEFINE_float('p', 0.3, 'Edge probability of the sampled graphs.')
flags.DEFINE_float('low', -0.1,
                   'Lower bound of sampled edge weights. Negative values '
                   'produce negative edges (and possibly negative cycles) '
                   'for `bellman_ford`; it is clipped to 0 for `dijkstra`.')
flags.DEFINE_float('high', 1.0, 'Upper bound of sampled edge weights.')
flags.DEFINE_boolean('validate', True,
                     'Whether to check every output against networkx.')

FLAGS = flags.FLAGS


def _sampler_kwargs(algorithm):
  if algorithm == 'depth_first_search':
    return dict(p=FLAGS.p)
  low = max(FLAGS.low, 0.) if algorithm == 'dijkstra' else FLAGS.low
  return dict(p=FLAGS.p, low=low, high=FLAGS.high)


def _is_valid(algorithm, data, output):
  if algorithm == 'depth_first_search':
    graph, root, objective = data
    reachable = check_graphs.reference_distances(graph, root)
    if objective not in reachable:
      return output is None
    return output is not None and output[-1] == objective
  graph, source = data
  return check_graphs.check_valid_paths(graph, source, output)


def main(unused_argv):
  lengths = [int(x) for x in FLAGS.lengths]
  rng = np.random.RandomState(FLAGS.seed)

  for algorithm in FLAGS.algorithms:
    for length in lengths:
      logging.info('Sampling %d graphs of %d nodes for %s',
                   FLAGS.num_samples, length, algorithm)
      start = time.time()
      sampler = algos.build_sampler(
          algorithm,
          FLAGS.num_samples,
          length,
          seed=rng.randint(2**31 - 1),
          **_sampler_kwargs(algorithm))
      feedback = sampler.next()
      elapsed = time.time() - start

      num_none = sum(out is None for out in feedback.outputs)
      num_invalid = 0
      if FLAGS.validate:
        for data, output in zip(feedback.inputs, feedback.outputs):
          if not _is_valid(algorithm, data, output):
            num_invalid += 1
            logging.warning('Invalid output of %s: %r', algorithm, output)

      logging.info('(%s, n=%d) %d samples in %.3fs, %d without result, '
                   '%d invalid', algorithm, length, FLAGS.num_samples,
                   elapsed, num_none, num_invalid)

  logging.info('Done!')


if __name__ == '__main__':
  app.run(main)
