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
Module defining the protocol shared by all union-find data structures, and
functions for operating on any union-find through that protocol.

A union-find (also called a disjoint-set) tracks a fixed universe of `n`
integer elements `{0, ..., n-1}`, partitioned into disjoint classes. The
classes can be merged (unioned), and any two elements can be checked for
membership of the same class.

The implementations do not inherit from a common base class, they only
satisfy the `UnionFind` protocol structurally. None of them are thread-safe.
"""

import operator
from typing import Protocol, runtime_checkable

import numpy as np

from unionfind._unionfind_errors import (EmptyStructureError,
                                         IndexOutOfRangeError)

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "UnionFind",
    "check_size",
    "check_element",
    "readonly_view",
    "root_of",
    "path_to_root",
    "find_all_sets",
    "count_sets"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


@runtime_checkable
class UnionFind(Protocol):
    """
    Protocol for type hinting and checking union-find data structures over
    the integer elements `{0, ..., n-1}`.
    """

    def union(self, p: int, q: int, /) -> None:
        """
        Merge the classes containing the elements `p` and `q`.

        Does nothing if the elements are already connected.
        """
        ...

    def is_connected(self, p: int, q: int, /) -> bool:
        """Whether the elements `p` and `q` are in the same class."""
        ...

    def find(self, p: int, /) -> int:
        """
        Get the identifier of the class containing the element `p`.

        Two elements are connected if and only if their class identifiers are
        equal.
        """
        ...

    def count(self) -> int:
        """Get the number of elements in the union-find."""
        ...


def check_size(n: int) -> int:
    """
    Check that the given number of elements is a valid size for a union-find.

    Raises
    ------
    `TypeError` - If `n` is not an integer.

    `ValueError` - If `n` is negative.
    """
    n = operator.index(n)
    if n < 0:
        raise ValueError(
            f"The number of elements must be non-negative. Got; {n}."
        )
    return n


def check_element(
    element: int,
    size: int,
    name: str = "element",
    operation: str = "find an element"
) -> int:
    """
    Check that the given element is valid for a union-find of the given size,
    and return it as a plain integer.

    Raises
    ------
    `TypeError` - If the element is not an integer.

    `EmptyStructureError` - If the union-find has no elements.

    `IndexOutOfRangeError` - If the element is not in the range `[0, size)`.
    """
    element = operator.index(element)
    if size == 0:
        raise EmptyStructureError(operation)
    if not 0 <= element < size:
        raise IndexOutOfRangeError(element, size, name)
    return element


def readonly_view(array: np.ndarray) -> np.ndarray:
    """Get a view of the given array that cannot be written to."""
    view = array.view()
    view.flags.writeable = False
    return view


def root_of(parent_of: np.ndarray, element: int) -> int:
    """
    Find the root of the tree containing the given element in a parent array,
    without compressing the path to it.
    """
    # An element is a root if its parent is itself.
    while (parent := int(parent_of[element])) != element:
        element = parent
    return element


def path_to_root(parent_of: np.ndarray, element: int) -> list[int]:
    """
    Find the path from the given element to the root of its tree in a parent
    array.

    The list will contain only the given element if and only if it is a
    root.
    """
    path: list[int] = [element]
    while (parent := int(parent_of[element])) != element:
        path.append(parent)
        element = parent
    return path


def find_all_sets(union_find: UnionFind) -> dict[int, frozenset[int]]:
    """
    Find all distinct classes of the given union-find.

    Returns
    -------
    `dict[int, frozenset[int]]` - A dictionary, whose keys are the class
    identifiers of each distinct class, and the values are the elements of
    the classes themselves.
    """
    sets: dict[int, set[int]] = {}
    for element in range(union_find.count()):
        sets.setdefault(union_find.find(element), set()).add(element)
    return {root: frozenset(set_) for root, set_ in sets.items()}


def count_sets(union_find: UnionFind) -> int:
    """Get the number of distinct classes in the given union-find."""
    return len({union_find.find(element)
                for element in range(union_find.count())})
