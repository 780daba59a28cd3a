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
The Doggerel document tree.

A document is a root :class:`Branch` with an empty name. A Branch has a name
and an ordered list of child nodes, which can be other branches or
:class:`Leaf` nodes. A Leaf has a :class:`Kind`, a key and a value.

You can build a tree in one expression::

    >>> from doggerel.tree import Branch, Leaf
    >>> doc = Branch("",
    ...     Leaf("title", "Notes"),
    ...     Branch("Shopping",
    ...         Leaf.comment("for the weekend"),
    ...         Leaf("eggs", "12"),
    ...         Leaf.long("remarks", "Fresh ones,\\nif possible.")))
    >>> print(doc, end='')
    - title: Notes

    = Shopping

    # for the weekend

    - eggs: 12

    - remarks:

    Fresh ones,
    if possible.

Children added with :meth:`Branch.append` and :meth:`Branch.insert` get their
parent set to the branch; the parent is a weak reference (see
:class:`~doggerel.node.Node`).

"""

import enum
import reprlib

from .node import Node


#: The key of every comment leaf.
COMMENT_KEY = '#'


class Kind(enum.Enum):
    """The variants of the tree nodes."""
    BRANCH = "branch"       #: a named branch (section)
    LEAF = "leaf"           #: a single-line key: value leaf
    LONG = "long"           #: a leaf with a multi-line value
    TEXT = "text"           #: a free text block
    COMMENT = "comment"     #: a comment block


def _block(value):
    """Return value with exactly one trailing newline."""
    return value.rstrip('\n') + '\n'


class Branch(Node):
    """A named branch.

    Only the root branch of a document has an empty name. Child nodes can be
    given to the constructor, they are checked the same way as by
    :meth:`append`.

    """
    __slots__ = ('name',)

    kind = Kind.BRANCH

    def __init__(self, name="", *children):
        self.name = name
        super().__init__(*children)

    def __repr__(self):
        c = "child" if len(self) == 1 else "children"
        return '<Branch {!r} ({} {})>'.format(self.name, len(self), c)

    def __str__(self):
        from . import writer
        return writer.render(self)

    @property
    def key(self):
        """The name of the branch."""
        return self.name

    @property
    def level(self):
        """The number of ancestor branches; 0 for the root."""
        return self.depth()

    def copy(self, with_children=True):
        """Return a copy of this Branch, by default with copies of the children."""
        children = (n.copy() for n in self) if with_children else ()
        return type(self)(self.name, *children)

    def body_equals(self, other):
        """Compare the name."""
        return self.name == other.name

    def _check_child(self, node):
        if not isinstance(node, (Branch, Leaf)):
            raise TypeError("can't add {!r} to a Branch".format(node))
        super()._check_child(node)
        if isinstance(node, Branch) and not node.name:
            raise ValueError("only the root branch can have an empty name")

    def insert(self, node, position):
        """Insert node at position; its parent is set to this branch.

        Note the argument order, node first. Returns False and does nothing
        if position is negative or larger than the number of children,
        otherwise True.

        """
        if not 0 <= position <= len(self):
            return False
        super().insert(position, node)
        return True

    def write(self, file, dialect=None):
        """Write the text representation to a file-like object."""
        from . import writer
        writer.write(self, file, dialect)

    def to_json(self, strict=False):
        """Return the JSON representation, see :func:`~doggerel.jsonout.to_json`."""
        from . import jsonout
        return jsonout.to_json(self, strict)

    def write_json(self, file, strict=False):
        """Write the JSON representation to a file-like object."""
        from . import jsonout
        jsonout.write_json(self, file, strict)


class Leaf(Node):
    """A leaf, holding a key and a value.

    Use the :meth:`long`, :meth:`text` and :meth:`comment` constructors to
    create the multi-line kinds, they make sure the value ends with a newline.

    A Leaf can't have child nodes.

    """
    __slots__ = ('kind', 'key', 'value')

    def __init__(self, key="", value="", kind=Kind.LEAF):
        self.kind = kind
        self.key = key
        self.value = value
        super().__init__()

    @classmethod
    def long(cls, key, value=""):
        """Create a leaf with a multi-line value."""
        return cls(key, _block(value), Kind.LONG)

    @classmethod
    def text(cls, value):
        """Create a free text leaf."""
        return cls("", _block(value), Kind.TEXT)

    @classmethod
    def comment(cls, value):
        """Create a comment leaf; value is the comment text without markers."""
        return cls(COMMENT_KEY, _block(value), Kind.COMMENT)

    def __repr__(self):
        key = ' {!r}'.format(self.key) if self.key and self.kind is not Kind.COMMENT else ''
        return '<Leaf {}{} {}>'.format(self.kind.value, key, reprlib.repr(self.value))

    def __str__(self):
        from . import writer
        return writer.leaf_text(self)

    def _check_child(self, node):
        raise TypeError("a Leaf can't have child nodes")

    def append_value(self, text):
        """Add text to the end of the value."""
        self.value += text

    def copy(self, with_children=True):
        """Return a copy of this Leaf."""
        return type(self)(self.key, self.value, self.kind)

    def body_equals(self, other):
        """Compare kind, key and value."""
        return self.kind is other.kind and self.key == other.key and self.value == other.value

    def to_json(self, strict=False):
        """Return the JSON representation, see :func:`~doggerel.jsonout.to_json`."""
        from . import jsonout
        return jsonout.to_json(self, strict)
