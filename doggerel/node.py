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
The base of the Doggerel tree model (:mod:`doggerel.tree`).

A :class:`Node` is a Python list of child nodes with a :attr:`~Node.parent`.
A node is attached to at most one parent, and only through
:meth:`~Node.append`, :meth:`~Node.extend`, :meth:`~Node.insert` or the
constructor, which all check the child first.

"""

import weakref


_NO_PARENT = lambda: None


class Node(list):
    """A list of child nodes, with a weak reference to the parent node.

    Because the parent is a weak reference, a tree lives as long as there is
    a reference to its root. A node always evaluates to True, even without
    children. Nodes compare by identity.

    """

    __slots__ = ('__weakref__', '_parent')

    def __init__(self, *children):
        self._parent = _NO_PARENT
        for node in children:
            self.append(node)

    def __repr__(self):
        c = "child" if len(self) == 1 else "children"
        return '<{} ({} {})>'.format(type(self).__name__, len(self), c)

    def __bool__(self):
        return True

    __hash__ = object.__hash__

    def __eq__(self, other):
        return self is other

    def __ne__(self, other):
        return self is not other

    @property
    def parent(self):
        """The parent node, or None."""
        return self._parent()

    @parent.setter
    def parent(self, node):
        self._parent = _NO_PARENT if node is None else weakref.ref(node)

    @parent.deleter
    def parent(self):
        self._parent = _NO_PARENT

    def _check_child(self, node):
        """Raise an exception if node can't become a child of this node.

        Subclasses extend this with their own rules.

        """
        if not isinstance(node, Node):
            raise TypeError("can't add {!r} to {!r}".format(node, self))
        if node.parent is not None:
            raise ValueError("{!r} already has a parent".format(node))
        if node is self or any(n is node for n in self.ancestors()):
            raise ValueError("can't add {!r} to its own descendant".format(node))

    def _adopt(self, node):
        self._check_child(node)
        node.parent = self

    def append(self, node):
        """Append node; its parent is set to this node."""
        self._adopt(node)
        list.append(self, node)

    def extend(self, nodes):
        """Append all nodes."""
        for node in nodes:
            self.append(node)

    def insert(self, index, node):
        """Insert node before index; its parent is set to this node."""
        self._adopt(node)
        list.insert(self, index, node)

    def ancestors(self):
        """Yield the parent, its parent, and so on up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def depth(self):
        """The number of ancestors; 0 for a node without parent."""
        return sum(1 for _ in self.ancestors())

    def equals(self, other):
        """Return True if other has the same type, contents and children.

        :meth:`body_equals` compares the contents of the nodes themselves.

        """
        return (type(self) is type(other) and len(self) == len(other)
                and self.body_equals(other)
                and all(a.equals(b) for a, b in zip(self, other)))

    def body_equals(self, other):
        return True

    def outline(self, indent="  "):
        """Yield one line per node, indented to show the structure."""
        stack = [(0, self)]
        while stack:
            level, node = stack.pop()
            yield indent * level + repr(node)
            stack.extend((level + 1, n) for n in reversed(node))

    def dump(self, file=None, indent="  "):
        """Print the :meth:`outline` to file (default stdout)."""
        for line in self.outline(indent):
            print(line, file=file)
