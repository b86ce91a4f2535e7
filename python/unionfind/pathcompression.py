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

"""
Module containing the weighted quick-union with path compression union-find
data structure.

Unlike the other union-find data structures, finding the root of an element
modifies the data structure, so even concurrent queries must be serialised by
the caller.
"""

import logging

import numpy as np

from unionfind.protocols import check_element, check_size
from unionfind.weightedquickunion import WeightedQuickUnion

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "WeightedQuickUnionWithPathCompression",
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


class WeightedQuickUnionWithPathCompression:
    """
    A weighted quick-union union-find data structure, with path splitting.

    Wraps a weighted quick-union, operating directly on its parent and rank
    arrays, but replaces its root finding with one that partially compresses
    the path from the given element to the root during the iterative search
    for the root. This replaces the parent of every visited element on the
    path with its grandparent, roughly halving the depth of the path for
    future look-ups, and avoids the need for a second loop to perform the
    compression.

    The compressing root finding is used by all operations, including union,
    such that the roots whose ranks are compared are found by the same
    traversal that compresses their paths. Compression never changes ranks,
    so ranks remain upper bounds on the tree heights.

    With union by rank, an arbitrarily long sequence of operations runs in
    near-constant amortised time per operation.

    Instances are not thread-safe.
    """

    __PATH_COMPRESSION_LOGGER = logging.getLogger(
        "WeightedQuickUnionWithPathCompression"
    )

    __slots__ = {
        "__wqu": "The wrapped weighted quick-union.",
        "__debug": "Whether to log debug messages."
    }

    def __init__(self, n: int, *, debug: bool = False) -> None:
        """
        Create a new weighted quick-union with path compression with the
        elements `{0, ..., n-1}`, where each element is initially the root of
        its own tree of rank zero.

        Raises
        ------
        `ValueError` - If `n` is negative.
        """
        n = check_size(n)
        self.__wqu = WeightedQuickUnion(n, debug=debug)
        self.__debug: bool = debug
        if self.__debug:
            self.__PATH_COMPRESSION_LOGGER.debug(
                "Creating new weighted quick-union with path compression "
                "with: n=%s", n
            )

    def __repr__(self) -> str:
        """
        Return an instantiable string representation of the weighted
        quick-union with path compression.
        """
        return f"{self.__class__.__name__}({len(self.__wqu)})"

    def __len__(self) -> int:
        """Get the number of elements."""
        return len(self.__wqu)

    @property
    def parents(self) -> np.ndarray:
        """Get a read-only view of the parent of each element."""
        return self.__wqu.parents

    @property
    def ranks(self) -> np.ndarray:
        """Get a read-only view of the rank of each element."""
        return self.__wqu.ranks

    def count(self) -> int:
        """Get the number of elements."""
        return self.__wqu.count()

    def root(self, element: int) -> int:
        """
        Find the root of the tree containing the given element, splitting the
        path to it.

        The element is not checked, use `find` for checked access.
        """
        # Set the parent of every visited element on the path
        # to the root to be the parent of its parent.
        parent_of: np.ndarray = self.__wqu._parent_of
        while (parent := int(parent_of[element])) != element:
            grandparent = int(parent_of[parent])
            if grandparent != parent:
                parent_of[element] = grandparent
                if self.__debug:
                    self.__PATH_COMPRESSION_LOGGER.debug(
                        "Compressed parent of %s from %s to %s.",
                        element, parent, grandparent
                    )
            element = parent
        return element

    def find(self, p: int, /) -> int:
        """
        Find the root of the tree containing the element `p`, splitting the
        path from the element to the root.
        """
        p = check_element(p, len(self.__wqu), "p")
        return self.root(p)

    def find_path(self, p: int, /) -> list[int]:
        """
        Find the current path from the element `p` to the root of its tree,
        without compressing it.
        """
        return self.__wqu.find_path(p)

    def is_connected(self, p: int, q: int, /) -> bool:
        """
        Whether the elements `p` and `q` are in the same tree, splitting the
        paths from both elements to their roots.
        """
        size = len(self.__wqu)
        p = check_element(p, size, "p", "check connectedness")
        q = check_element(q, size, "q", "check connectedness")
        return self.root(p) == self.root(q)

    def union(self, p: int, q: int, /) -> None:
        """
        Union the trees containing the elements `p` and `q` together, using
        the union-by-rank algorithm, splitting the paths from both elements to
        their roots.
        """
        size = len(self.__wqu)
        p = check_element(p, size, "p", "union elements")
        q = check_element(q, size, "q", "union elements")
        self.__wqu.link(self.root(p), self.root(q))
