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

"""Module containing the weighted quick-union union-find data structure."""

import logging

import numpy as np

from unionfind.protocols import (check_element, check_size, path_to_root,
                                 readonly_view, root_of)

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "WeightedQuickUnion",
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


class WeightedQuickUnion:
    """
    A weighted quick-union union-find data structure, using the union-by-rank
    algorithm.

    This is the same as a quick-union, except that union operations always
    attach the shorter tree under the root of the taller tree. The rank of a
    root is an upper bound on the height of its tree. If the ranks of the two
    roots are the same, then the root of the tree containing the second
    element becomes the root of the combined tree, and its rank increases by
    one.

    If the taller tree were instead put onto the shorter tree, the trees could
    grow linearly, a tree with n elements could become a straight chain n
    elements long. Union by rank keeps the height of every tree at most
    `floor(log2(n))`, so find and union operations are logarithmic time.

    Example Usage
    -------------
    ```
    >>> wqu = WeightedQuickUnion(7)
    >>> wqu.union(2, 3)
    >>> wqu.union(3, 6)
    >>> wqu.union(1, 5)
    >>> wqu.union(1, 3)
    >>> wqu.find(1)
    3
    >>> int(wqu.ranks[3])
    2
    ```

    Instances are not thread-safe.
    """

    __WEIGHTED_QUICK_UNION_LOGGER = logging.getLogger("WeightedQuickUnion")

    __slots__ = {
        "_parent_of": "The parent of each element.",
        "_rank_of": "The rank of each element, only meaningful for roots.",
        "__debug": "Whether to log debug messages."
    }

    def __init__(self, n: int, *, debug: bool = False) -> None:
        """
        Create a new weighted quick-union with the elements `{0, ..., n-1}`,
        where each element is initially the root of its own tree of rank zero.

        Raises
        ------
        `ValueError` - If `n` is negative.
        """
        n = check_size(n)
        # The arrays are also operated on directly by
        # `WeightedQuickUnionWithPathCompression`.
        self._parent_of: np.ndarray = np.arange(n, dtype=np.intp)
        self._rank_of: np.ndarray = np.zeros(n, dtype=np.intp)
        self.__debug: bool = debug
        if self.__debug:
            self.__WEIGHTED_QUICK_UNION_LOGGER.debug(
                "Creating new weighted quick-union with: n=%s", n
            )

    def __repr__(self) -> str:
        """
        Return an instantiable string representation of the weighted
        quick-union.
        """
        return f"{self.__class__.__name__}({len(self._parent_of)})"

    def __len__(self) -> int:
        """Get the number of elements in the weighted quick-union."""
        return len(self._parent_of)

    @property
    def parents(self) -> np.ndarray:
        """Get a read-only view of the parent of each element."""
        return readonly_view(self._parent_of)

    @property
    def ranks(self) -> np.ndarray:
        """Get a read-only view of the rank of each element."""
        return readonly_view(self._rank_of)

    def count(self) -> int:
        """Get the number of elements in the weighted quick-union."""
        return len(self._parent_of)

    def root(self, element: int) -> int:
        """
        Find the root of the tree containing the given element, without
        compressing the path to it.

        The element is not checked, use `find` for checked access.
        """
        return root_of(self._parent_of, element)

    def find(self, p: int, /) -> int:
        """Find the root of the tree containing the element `p`."""
        p = check_element(p, len(self._parent_of), "p")
        return self.root(p)

    def find_path(self, p: int, /) -> list[int]:
        """
        Find the current path from the element `p` to the root of its tree.

        The list will contain only the given element if and only if it is a
        root.
        """
        p = check_element(p, len(self._parent_of), "p")
        return path_to_root(self._parent_of, p)

    def is_connected(self, p: int, q: int, /) -> bool:
        """Whether the elements `p` and `q` are in the same tree."""
        size = len(self._parent_of)
        p = check_element(p, size, "p", "check connectedness")
        q = check_element(q, size, "q", "check connectedness")
        return self.root(p) == self.root(q)

    def union(self, p: int, q: int, /) -> None:
        """
        Union the trees containing the elements `p` and `q` together, using
        the union-by-rank algorithm.

        The root of the tree with the lower rank is attached under the root of
        the tree with the higher rank. On equal ranks, the root of the tree
        containing `q` becomes the root of the combined tree.
        """
        size = len(self._parent_of)
        p = check_element(p, size, "p", "union elements")
        q = check_element(q, size, "q", "union elements")
        self.link(self.root(p), self.root(q))

    def link(self, p_root: int, q_root: int) -> None:
        """
        Attach one of the given roots under the other by rank.

        Does nothing if the roots are the same, such that redundant unions
        never create cycles or grow ranks.
        """
        if p_root == q_root:
            return
        parent_of: np.ndarray = self._parent_of
        rank_of: np.ndarray = self._rank_of
        p_rank = int(rank_of[p_root])
        q_rank = int(rank_of[q_root])
        if p_rank > q_rank:
            parent_of[q_root] = p_root
            rank_of[p_root] = max(p_rank, q_rank + 1)
            new_root = p_root
        else:
            parent_of[p_root] = q_root
            rank_of[q_root] = max(q_rank, p_rank + 1)
            new_root = q_root
        if self.__debug:
            self.__WEIGHTED_QUICK_UNION_LOGGER.debug(
                "Linked roots %s and %s under root %s with rank %s.",
                p_root, q_root, new_root, rank_of[new_root]
            )
