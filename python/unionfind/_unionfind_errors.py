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

"""Module for all union-find related errors."""

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.0.0"

__all__ = (
    "UnionFindError",
    "EmptyStructureError",
    "IndexOutOfRangeError"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


class UnionFindError(Exception):
    """Base class for all errors raised by union-find data structures."""
    pass


class EmptyStructureError(UnionFindError):
    """
    Raised when an element is queried or unioned on a union-find with no
    elements.
    """

    def __init__(self, operation: str) -> None:
        """Create a new empty structure error for the named operation."""
        super().__init__(
            f"Cannot {operation} on an empty union-find (it has no elements)."
        )
        self.operation: str = operation


class IndexOutOfRangeError(UnionFindError, IndexError):
    """
    Raised when an element identifier is not in the range `[0, bound)` of a
    union-find with `bound` elements.
    """

    def __init__(self, element: int, bound: int, name: str = "element") -> None:
        """
        Create a new index out of range error.

        Parameters
        ----------
        `element: int` - The offending element identifier.

        `bound: int` - The number of elements in the union-find, the valid
        identifiers are in the range `[0, bound)`.

        `name: str = "element"` - The name of the argument that held the
        offending element, used in the error message.
        """
        super().__init__(
            f"The {name} {element} is out of range, valid elements are "
            f"in the range [0, {bound})."
        )
        self.element: int = element
        self.bound: int = bound
