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

"""Module containing the quick-find union-find data structure."""

import logging

import numpy as np

from unionfind.protocols import check_element, check_size, readonly_view

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "QuickFind",
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


class QuickFind:
    """
    A quick-find union-find data structure.

    Explicitly keeps track of the class identifier of every element, such
    that finding the class of an element, and checking whether two elements
    are connected, are constant time. Unfortunately, union operations are
    linear time in the number of elements, since unioning two classes
    involves reassigning the identifier of all elements of one of the classes.

    Appropriate when unions are rare relative to queries.

    Example Usage
    -------------
    ```
    >>> qf = QuickFind(7)
    >>> qf.union(0, 1)
    >>> qf.is_connected(0, 1)
    True
    >>> qf.is_connected(0, 2)
    False
    >>> qf.find(0)
    1
    ```

    Instances are not thread-safe.
    """

    __QUICK_FIND_LOGGER = logging.getLogger("QuickFind")

    __slots__ = {
        "__ids": "The class identifier of each element.",
        "__debug": "Whether to log debug messages."
    }

    def __init__(self, n: int, *, debug: bool = False) -> None:
        """
        Create a new quick-find with the elements `{0, ..., n-1}`, where each
        element is initially in its own class.

        Raises
        ------
        `ValueError` - If `n` is negative.
        """
        n = check_size(n)
        self.__ids: np.ndarray = np.arange(n, dtype=np.intp)
        self.__debug: bool = debug
        if self.__debug:
            self.__QUICK_FIND_LOGGER.debug(
                "Creating new quick-find with: n=%s", n
            )

    def __repr__(self) -> str:
        """Return an instantiable string representation of the quick-find."""
        return f"{self.__class__.__name__}({len(self.__ids)})"

    def __len__(self) -> int:
        """Get the number of elements in the quick-find."""
        return len(self.__ids)

    @property
    def component_ids(self) -> np.ndarray:
        """Get a read-only view of the class identifier of each element."""
        return readonly_view(self.__ids)

    def count(self) -> int:
        """Get the number of elements in the quick-find."""
        return len(self.__ids)

    def find(self, p: int, /) -> int:
        """Get the class identifier of the element `p`."""
        p = check_element(p, len(self.__ids), "p")
        return int(self.__ids[p])

    def is_connected(self, p: int, q: int, /) -> bool:
        """Whether the elements `p` and `q` are in the same class."""
        size = len(self.__ids)
        p = check_element(p, size, "p", "check connectedness")
        q = check_element(q, size, "q", "check connectedness")
        return bool(self.__ids[p] == self.__ids[q])

    def union(self, p: int, q: int, /) -> None:
        """
        Merge the class containing `p` into the class containing `q`.

        Every element with the class identifier of `p` is given the class
        identifier of `q`.
        """
        size = len(self.__ids)
        p = check_element(p, size, "p", "union elements")
        q = check_element(q, size, "q", "union elements")
        ids: np.ndarray = self.__ids
        p_id = ids[p]
        q_id = ids[q]
        if p_id == q_id:
            return
        ids[ids == p_id] = q_id
        if self.__debug:
            self.__QUICK_FIND_LOGGER.debug(
                "Unioned class %s into class %s.", p_id, q_id
            )
