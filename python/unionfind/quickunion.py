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

"""Module containing the quick-union union-find data structure."""

import logging

import numpy as np

from unionfind.protocols import (check_element, check_size, path_to_root,
                                 readonly_view, root_of)

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "QuickUnion",
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


class QuickUnion:
    """
    A quick-union union-find data structure.

    Each class is represented by its root, and all other elements of the
    class are stored in a tree structure that connects them to their root.
    Finding the class of an element reduces to following the parents of the
    element up its tree until a root is found (an element whose parent is
    itself).

    Union operations simply set the parent of the root of the first class to
    be the root of the second class. No balancing is done, so the trees can
    degenerate into chains, making both union and find operations linear time
    in the worst case.

    Instances are not thread-safe.
    """

    __QUICK_UNION_LOGGER = logging.getLogger("QuickUnion")

    __slots__ = {
        "__parent_of": "The parent of each element.",
        "__debug": "Whether to log debug messages."
    }

    def __init__(self, n: int, *, debug: bool = False) -> None:
        """
        Create a new quick-union with the elements `{0, ..., n-1}`, where each
        element is initially the root of its own tree.

        Raises
        ------
        `ValueError` - If `n` is negative.
        """
        n = check_size(n)
        self.__parent_of: np.ndarray = np.arange(n, dtype=np.intp)
        self.__debug: bool = debug
        if self.__debug:
            self.__QUICK_UNION_LOGGER.debug(
                "Creating new quick-union with: n=%s", n
            )

    def __repr__(self) -> str:
        """Return an instantiable string representation of the quick-union."""
        return f"{self.__class__.__name__}({len(self.__parent_of)})"

    def __len__(self) -> int:
        """Get the number of elements in the quick-union."""
        return len(self.__parent_of)

    @property
    def parents(self) -> np.ndarray:
        """Get a read-only view of the parent of each element."""
        return readonly_view(self.__parent_of)

    def count(self) -> int:
        """Get the number of elements in the quick-union."""
        return len(self.__parent_of)

    def find(self, p: int, /) -> int:
        """Find the root of the tree containing the element `p`."""
        p = check_element(p, len(self.__parent_of), "p")
        return root_of(self.__parent_of, p)

    def find_path(self, p: int, /) -> list[int]:
        """
        Find the current path from the element `p` to the root of its tree.

        The list will contain only the given element if and only if it is a
        root.
        """
        p = check_element(p, len(self.__parent_of), "p")
        return path_to_root(self.__parent_of, p)

    def is_connected(self, p: int, q: int, /) -> bool:
        """Whether the elements `p` and `q` are in the same tree."""
        size = len(self.__parent_of)
        p = check_element(p, size, "p", "check connectedness")
        q = check_element(q, size, "q", "check connectedness")
        return root_of(self.__parent_of, p) == root_of(self.__parent_of, q)

    def union(self, p: int, q: int, /) -> None:
        """
        Union the tree containing `p` onto the tree containing `q`.

        The root of the combined tree is the root of the original tree
        containing `q`.
        """
        size = len(self.__parent_of)
        p = check_element(p, size, "p", "union elements")
        q = check_element(q, size, "q", "union elements")
        p_root = root_of(self.__parent_of, p)
        q_root = root_of(self.__parent_of, q)
        if p_root == q_root:
            return
        self.__parent_of[p_root] = q_root
        if self.__debug:
            self.__QUICK_UNION_LOGGER.debug(
                "Set parent of root %s to root %s.", p_root, q_root
            )
