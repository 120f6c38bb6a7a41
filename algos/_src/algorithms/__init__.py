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

"""Algorithm implementations."""

# pylint:disable=g-bad-import-order

from algos._src.algorithms.graphs import add_edge
from algos._src.algorithms.graphs import from_adjacency
from algos._src.algorithms.graphs import Graph
from algos._src.algorithms.graphs import PathRecord
from algos._src.algorithms.graphs import Paths

from algos._src.algorithms.graphs import bellman_ford
from algos._src.algorithms.graphs import dijkstra
from algos._src.algorithms.graphs import depth_first_search
