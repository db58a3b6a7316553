# -*- coding: utf-8 -*-
#
# This file is part of `textparts`, a library for reversible plain text structures
#
# Copyright © 2019-2020 by Wilbert Berendsen <info@wilbertberendsen.nl>
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
Some utility functions.
"""


def positive_index(index, length):
    """Return a non-negative index for a sequence of ``length``.

    Negative indices count from the end, as usual in Python. Returns None
    if a negative index reaches beyond the start. Positive indices are
    returned unchanged, even if they are larger than the length.

    """
    if index >= 0:
        return index
    index += length
    return index if index >= 0 else None


def positive_index_checked(index, length, accept_too_big=True, name="index"):
    """Like :func:`positive_index`, but raise :exc:`~.exceptions.RangeError`
    when the index is out of range.

    If ``accept_too_big`` is True, a positive index beyond the end is
    returned as is. If None, an index equal to the length is accepted (i.e.
    one past the last element), but larger indices are not. If False, only
    indices of existing elements are accepted.

    """
    from .exceptions import RangeError
    pos = positive_index(index, length)
    if pos is None:
        raise RangeError("{} {} too small for sequence; minimum: -{}".format(name, index, length))
    if accept_too_big is not True:
        limit = length if accept_too_big is None else length - 1
        if pos > limit:
            raise RangeError("{} {} is larger than the last index ({})".format(name, index, length - 1))
    return pos


def clip_count(start, stop, length):
    r"""Return the number of elements a range from ``start`` upto ``stop``
    selects in a sequence of ``length`` elements.

    Both ``start`` and ``stop`` must already be non-negative. For example::

        >>> clip_count(3, 5, 4)
        1
        >>> clip_count(3, 2, 4)
        0

    """
    stop = min(stop, length)
    return max(0, stop - start)
