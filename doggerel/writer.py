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
Write a tree as canonical Doggerel text.

The output is such that parsing it again results in the same tree. To make
this possible, the writer puts blank lines and separator lines between the
nodes:

* a blank line precedes every node, except between two single-line leaves and
  before the first node of the document;
* after a nested branch, a line with only branch markers closes it before
  other nodes follow;
* two text blocks in a row (or a text block after a long value) are
  separated by an empty leaf line, otherwise they would be read back as one.

"""

import io

from .config import DEFAULT
from .tree import Kind


# pseudo kind for the position right after a branch header
_HEADER = object()


def leaf_text(leaf, dialect=None):
    """Return the text of a single leaf, ending with a newline."""
    dialect = dialect or DEFAULT
    kind = leaf.kind
    if kind is Kind.LEAF:
        text = dialect.leaf
        if leaf.key:
            text += ' ' + leaf.key
        if leaf.value:
            text += dialect.separator + ' ' + leaf.value
        return text + '\n'
    elif kind is Kind.LONG:
        return dialect.leaf + ' ' + leaf.key + dialect.separator + '\n\n' + _terminated(leaf.value)
    elif kind is Kind.TEXT:
        return _terminated(leaf.value)
    elif kind is Kind.COMMENT:
        return ''.join(
            (dialect.comment + ' ' + line if line else dialect.comment) + '\n'
            for line in leaf.value.rstrip('\n').split('\n'))
    raise ValueError("not a leaf kind: {!r}".format(kind))


def _terminated(value):
    """Add a newline to a non-empty value if it doesn't end with one."""
    if value and not value.endswith('\n'):
        value += '\n'
    return value


def write(branch, file, dialect=None):
    """Write branch and all its descendants to the file-like object.

    Only the ``write`` method of the file is used. Errors raised by the file
    propagate.

    """
    _write_branch(branch, file.write, dialect or DEFAULT)


def _write_branch(branch, write, dialect):
    level = branch.level
    previous = None
    if level:
        write(dialect.branch * level + ' ' + branch.name + '\n')
        previous = _HEADER
    for node in branch:
        kind = node.kind
        if previous is Kind.BRANCH and kind is not Kind.BRANCH:
            write('\n' + dialect.branch * (level + 1) + '\n')
        if previous is not None and not (kind is Kind.LEAF and previous is Kind.LEAF):
            write('\n')
        if kind is Kind.TEXT and previous in (Kind.TEXT, Kind.LONG):
            write(dialect.leaf + '\n\n')
        if kind is Kind.BRANCH:
            _write_branch(node, write, dialect)
        else:
            write(leaf_text(node, dialect))
        previous = kind


def render(branch, dialect=None):
    """Return the Doggerel text of branch and all its descendants."""
    f = io.StringIO()
    write(branch, f, dialect)
    return f.getvalue()
