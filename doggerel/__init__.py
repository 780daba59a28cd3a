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
The doggerel module.

Doggerel is a small markup language for hierarchical notes and configuration
files: branches (sections), key-value leaves, long values, free text and
comments. Read a document with :func:`parse` or :func:`load`, and write it
back with :func:`render` or :func:`to_json`::

    >>> import doggerel
    >>> doc = doggerel.parse("= Fruit\\n- apples: 3\\n- pears: 2\\n")
    >>> print(doggerel.render(doc), end='')
    = Fruit

    - apples: 3
    - pears: 2

On first import, the Doggerel language definition is added to the *parce*
based registry, see :func:`find`.

"""

from .pkginfo import version, version_string
from .config import Dialect
from .tree import Branch, Kind, Leaf
from .parser import Parser, parse
from .writer import render, write
from .jsonout import to_json, write_json
from .registry import find


__all__ = (
    'Branch', 'Dialect', 'Kind', 'Leaf', 'Parser',
    'find', 'load', 'parse', 'render', 'to_json', 'write', 'write_json',
    'version', 'version_string',
)


def load(filename, encoding="utf-8", errors=None, dialect=None):
    """Convenience function to read and parse the Doggerel file ``filename``.

    Returns the root :class:`Branch`. The ``encoding`` and ``errors`` arguments
    are passed to Python's :func:`open` function. Raises :class:`OSError` if
    the file can't be read.

    """
    with open(filename, encoding=encoding, errors=errors) as f:
        return parse(f, dialect)
