from __future__ import annotations

import math
from enum import IntEnum
from typing import Union

#: Numeric path cost. Edge weights are integers; ``INF_COST`` marks "unreached".
Cost = Union[int, float]

#: Distance recorded for vertices not (yet) reached by shortest-path search.
INF_COST = math.inf


class PathCondition(IntEnum):
    """
    Bounding conditions for walk counting between two vertices.
    """

    #: Walks with at most ``limit`` hops.
    AT_MOST_HOPS = 1
    #: Walks with exactly ``limit`` hops.
    EXACT_HOPS = 2
    #: Walks whose total cost is strictly less than ``limit``.
    COST_BOUNDED = 3
