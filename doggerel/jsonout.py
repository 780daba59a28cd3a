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
Write a tree as JSON.

A branch becomes an object with one member, named after the branch, holding
the list of its children; a leaf becomes an object with one member, its key,
holding the value::

    >>> from doggerel.tree import Branch, Leaf
    >>> to_json(Branch("", Leaf("x", 'a"b')))
    '{ "": [ { "x": "a\\\\"b" } ] }'

By default only newlines and double quotes in values are escaped, and names
and keys are written as they are. Values containing backslashes or other
control characters then result in invalid JSON. Use ``strict=True`` to escape
all names, keys and values properly; the layout stays the same.

"""

import io
import json

from .tree import Branch


def _name(text):
    return '"' + text + '"'


def _value(text):
    return '"' + text.replace('\n', '\\n').replace('"', '\\"') + '"'


def _strict(text):
    return json.dumps(text, ensure_ascii=False)


def write_json(node, file, strict=False):
    """Write the JSON representation of node to the file-like object."""
    name, value = (_strict, _strict) if strict else (_name, _value)
    _write_node(node, file.write, name, value)


def _write_node(node, write, name, value):
    if isinstance(node, Branch):
        write('{ ' + name(node.name) + ': [ ')
        last = len(node) - 1
        for i, child in enumerate(node):
            _write_node(child, write, name, value)
            if i < last:
                write(',')
            write(' ')
        write('] }')
    else:
        write('{ ' + name(node.key) + ': ' + value(node.value) + ' }')


def to_json(node, strict=False):
    """Return the JSON representation of node (a Branch or a Leaf)."""
    f = io.StringIO()
    write_json(node, f, strict)
    return f.getvalue()
