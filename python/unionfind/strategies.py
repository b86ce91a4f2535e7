###############################################################################
# Copyright (C) 2023 Oliver Michael Kamperis
# Email: olliekampo@gmail.com
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or any later version.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for details.
#
# You should have received a copy of the GNU General Public License along with
# this program. If not, see <https://www.gnu.org/licenses/>.

"""Module for selecting and creating union-find data structures by name."""

import enum
from typing import Literal, TypeAlias

from unionfind.pathcompression import WeightedQuickUnionWithPathCompression
from unionfind.protocols import UnionFind
from unionfind.quickfind import QuickFind
from unionfind.quickunion import QuickUnion
from unionfind.weightedquickunion import WeightedQuickUnion

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "UnionFindStrategy",
    "UnionFindStrategyNames",
    "create_union_find"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


UnionFindStrategyNames: TypeAlias = Literal[
    "quick_find",
    "quick_union",
    "weighted",
    "weighted_path_compression"
]


class UnionFindStrategy(enum.Enum):
    """
    The union-find data structures that can be created by
    `create_union_find`.

    Items
    -----
    `QUICK_FIND` - Constant time find, linear time union.

    `QUICK_UNION` - Unbalanced trees, linear time find and union in the
    worst case.

    `WEIGHTED` - Trees balanced by rank, logarithmic time find and union.

    `WEIGHTED_PATH_COMPRESSION` - Trees balanced by rank with path halving,
    near-constant amortised time find and union.
    """

    QUICK_FIND = QuickFind
    QUICK_UNION = QuickUnion
    WEIGHTED = WeightedQuickUnion
    WEIGHTED_PATH_COMPRESSION = WeightedQuickUnionWithPathCompression


def create_union_find(
    n: int,
    strategy: UnionFindStrategy | UnionFindStrategyNames = (
        "weighted_path_compression"
    ),
    debug: bool = False
) -> UnionFind:
    """
    Create a new union-find with the elements `{0, ..., n-1}`.

    Parameters
    ----------
    `n: int` - The number of elements.

    `strategy: UnionFindStrategy | str = "weighted_path_compression"` - The
    union-find data structure to create, either a strategy item or its name
    (case-insensitive).

    `debug: bool = False` - Whether the union-find logs debug messages.

    Raises
    ------
    `ValueError` - If the strategy name is not valid, or `n` is negative.
    """
    if not isinstance(strategy, UnionFindStrategy):
        try:
            strategy = UnionFindStrategy[strategy.upper()]
        except (KeyError, AttributeError) as exc:
            names = ", ".join(item.name.lower() for item in UnionFindStrategy)
            raise ValueError(
                f"Unknown union-find strategy {strategy!r}. "
                f"Choose from; {names}."
            ) from exc
    return strategy.value(n, debug=debug)
