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

"""Classic graph algorithms: shortest paths and search over adjacency maps."""

from algos._src import algorithms
from algos._src.algorithms import add_edge
from algos._src.algorithms import bellman_ford
from algos._src.algorithms import depth_first_search
from algos._src.algorithms import dijkstra
from algos._src.algorithms import from_adjacency
from algos._src.algorithms import Graph
from algos._src.algorithms import PathRecord
from algos._src.algorithms import Paths
from algos._src.samplers import build_sampler
from algos._src.samplers import Feedback
from algos._src.samplers import Sampler
from algos._src.samplers import SAMPLERS

__version__ = "1.0.0"

__all__ = (
    "add_edge",
    "algorithms",
    "bellman_ford",
    "build_sampler",
    "depth_first_search",
    "dijkstra",
    "Feedback",
    "from_adjacency",
    "Graph",
    "PathRecord",
    "Paths",
    "Sampler",
    "SAMPLERS",
)
