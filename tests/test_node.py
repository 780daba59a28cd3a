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
Test the Node base class.
"""

### find doggerel
import sys
sys.path.insert(0, '.')

import io

import pytest

from doggerel.node import Node


class A(Node):
    pass


class B(Node):
    pass


def test_main():
    tree = A(
        B(
            A(),
            B(),
        ),
        A(
            B(),
        ),
    )
    assert tree[0].parent is tree and tree[1][0].parent is tree[1]
    assert tree.parent is None
    assert list(tree[1][0].ancestors()) == [tree[1], tree]
    assert tree[1][0].depth() == 2 and tree.depth() == 0
    assert bool(A())                         # empty nodes are True too
    assert tree[0] != tree[1][0]             # identity compare

    assert tree.equals(A(B(A(), B()), A(B())))
    assert not tree.equals(A(B(A(), B()), A(A())))
    assert not tree.equals(A(B(A(), B()), A()))

    n = A()
    child = B()
    n.insert(0, child)
    n.extend([A(), B()])
    n.append(A())
    assert [type(c) for c in n] == [B, A, B, A]
    assert all(c.parent is n for c in n)

    with pytest.raises(ValueError):
        tree.append(child)                  # already has a parent
    with pytest.raises(ValueError):
        n[1].append(n)                      # would make a cycle
    with pytest.raises(TypeError):
        n.append([])

    del child.parent
    assert child.parent is None

    f = io.StringIO()
    tree.dump(f)
    assert f.getvalue().splitlines() == [
        "<A (2 children)>",
        "  <B (2 children)>",
        "    <A (0 children)>",
        "    <B (0 children)>",
        "  <A (1 child)>",
        "    <B (0 children)>",
    ]
    assert list(A(B()).outline("- ")) == ["<A (1 child)>", "- <B (0 children)>"]


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
