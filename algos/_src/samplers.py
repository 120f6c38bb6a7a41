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

"""Sampling utilities."""

import abc
import collections

from typing import Any, Callable, List, Optional

from algos._src import algorithms
import numpy as np


_Array = np.ndarray

Algorithm = Callable[..., Any]
Feedback = collections.namedtuple('Feedback', ['inputs', 'outputs'])


class Sampler(abc.ABC):
  """Sampler abstract base class."""

  def __init__(
      self,
      algorithm: Algorithm,
      num_samples: int,
      *args,
      seed: Optional[int] = None,
      **kwargs,
  ):
    """Initializes a `Sampler`.

    Args:
      algorithm: The algorithm to sample from.
      num_samples: Number of algorithm inputs to sample.
      *args: Sampler args, e.g. the number of nodes.
      seed: RNG seed.
      **kwargs: Sampler kwargs.
    """

    # Use `RandomState` to ensure deterministic sampling across Numpy versions.
    self._rng = np.random.RandomState(seed)
    self._num_samples = num_samples

    self._inputs = []
    self._outputs = []
    for _ in range(num_samples):
      data = self._sample_data(*args, **kwargs)
      self._inputs.append(data)
      self._outputs.append(algorithm(*data))

  def next(self, batch_size: Optional[int] = None) -> Feedback:
    """Subsamples inputs and outputs from the pre-generated dataset.

    Args:
      batch_size: Optional batch size. If `None`, returns entire dataset.

    Returns:
      Subsampled inputs with the matching algorithm outputs.
    """
    if batch_size:
      if batch_size > self._num_samples:
        raise ValueError(
            f'Batch size {batch_size} > dataset size {self._num_samples}.')

      # Returns a fixed-size random batch.
      indices = np.random.choice(self._num_samples, (batch_size,), replace=True)
      inputs = [self._inputs[i] for i in indices]
      outputs = [self._outputs[i] for i in indices]

    else:
      # Returns the full dataset.
      inputs = list(self._inputs)
      outputs = list(self._outputs)

    return Feedback(inputs, outputs)

  @abc.abstractmethod
  def _sample_data(self, length: int, *args, **kwargs) -> List[Any]:
    pass

  def _random_digraph(self, nb_nodes, p=0.5, weighted=False, low=0.0,
                      high=1.0):
    """Random directed Erdos-Renyi graph, as an adjacency matrix.

    Self-loops are allowed. Edge weights are drawn from U[low, high] when
    `weighted`, otherwise every edge weighs 1.
    """

    mask = self._rng.binomial(1, p, size=(nb_nodes, nb_nodes))
    if not weighted:
      return mask
    weights = self._rng.uniform(low=low, high=high, size=(nb_nodes, nb_nodes))
    return mask * weights


def build_sampler(
    name: str,
    num_samples: int,
    *args,
    seed: Optional[int] = None,
    **kwargs,
) -> Sampler:
  """Builds a sampler. See `Sampler` documentation."""

  if name not in SAMPLERS:
    raise NotImplementedError(f'No implementation of algorithm {name}.')
  algorithm = getattr(algorithms, name)
  return SAMPLERS[name](algorithm, num_samples, *args, seed=seed, **kwargs)


class ShortestPathSampler(Sampler):
  """Shortest path sampler. Weighted digraph with weights from U[low, high].

  With `low < 0` some samples contain negative cycles.
  """

  def _sample_data(
      self,
      length: int,
      p: float = 0.5,
      low: float = 0.,
      high: float = 1.,
  ):
    mat = self._random_digraph(
        nb_nodes=length, p=p, weighted=True, low=low, high=high)
    source_node = int(self._rng.choice(length))
    return [algorithms.from_adjacency(mat), source_node]


class NonNegativePathSampler(ShortestPathSampler):
  """Shortest path sampler restricted to non-negative weights."""

  def _sample_data(
      self,
      length: int,
      p: float = 0.5,
      low: float = 0.,
      high: float = 1.,
  ):
    if low < 0:
      raise ValueError(f'Weights must be non-negative, got low={low}.')
    return super()._sample_data(length, p=p, low=low, high=high)


class SearchSampler(Sampler):
  """Search sampler. Unweighted digraph with a random root and objective."""

  def _sample_data(
      self,
      length: int,
      p: float = 0.3,
  ):
    mat = self._random_digraph(nb_nodes=length, p=p)
    root, objective = self._rng.choice(length, size=(2,))
    return [algorithms.from_adjacency(mat), int(root), int(objective)]


SAMPLERS = {
    'bellman_ford': ShortestPathSampler,
    'dijkstra': NonNegativePathSampler,
    'depth_first_search': SearchSampler,
}
