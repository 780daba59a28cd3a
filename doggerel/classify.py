# -*- coding: utf-8 -*-
#
# This file is part of `doggerel`, a library for the Doggerel markup language
#
# Copyright © 2026 by the doggerel authors
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
Classify a line of Doggerel text, looking only at its first character(s).

    >>> from doggerel.classify import classify
    >>> classify("== Subsection\\n")
    Classification(kind=<LineKind.BRANCH: 'branch'>, level=2)
    >>> classify("some text\\n").kind
    <LineKind.TEXT: 'text'>

"""

import collections
import enum

from .config import DEFAULT


class LineKind(enum.Enum):
    """The kind of a line."""
    BRANCH = "branch"
    LEAF = "leaf"
    COMMENT = "comment"
    TEXT = "text"


#: The result of :func:`classify`; the level is 0 for non-branch lines.
Classification = collections.namedtuple("Classification", "kind level")


def branch_level(line, dialect=None):
    """Return the number of branch markers at the start of the line."""
    marker = (dialect or DEFAULT).branch
    return len(line) - len(line.lstrip(marker))


def classify(line, dialect=None):
    """Return a :class:`Classification` for the line.

    Every string has a classification; the empty string is text.

    """
    dialect = dialect or DEFAULT
    first = line[:1]
    if first == dialect.branch:
        return Classification(LineKind.BRANCH, branch_level(line, dialect))
    elif first == dialect.leaf:
        return Classification(LineKind.LEAF, 0)
    elif first == dialect.comment:
        return Classification(LineKind.COMMENT, 0)
    return Classification(LineKind.TEXT, 0)
