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
Test the writer, by comparing the output with the expected text and by
parsing the output again.
"""

### find doggerel
import sys
sys.path.insert(0, '.')

import io

import pytest

from doggerel.config import Dialect
from doggerel.parser import parse
from doggerel.tree import Branch, Leaf
from doggerel.writer import render, write


doc = Branch("",
    Leaf.comment("settings for the demo"),
    Leaf("name", "demo"),
    Leaf("debug"),
    Branch("Server",
        Leaf("host", "localhost"),
        Leaf("port", "8080"),
        Branch("TLS",
            Leaf("cert", "/etc/cert.pem")),
        Leaf.long("motd", "Welcome!\n\nBe nice."),
        Leaf.text("Free text after a long value."),
        Leaf.text("And another paragraph.")),
    Leaf.text("Back at the top."),
)


doc_text = '''\
# settings for the demo

- name: demo
- debug

= Server

- host: localhost
- port: 8080

== TLS

- cert: /etc/cert.pem

==

- motd:

Welcome!

Be nice.

-

Free text after a long value.

-

And another paragraph.

=

Back at the top.
'''


def check_output(tree, dialect=None):
    """Return True if the tree survives writing and reading back."""
    text = render(tree, dialect)
    tree2 = parse(text, dialect)
    return tree.equals(tree2) and render(tree2, dialect) == text


def test_main():
    assert render(Branch()) == ""
    assert render(Branch("", Leaf("k", "v"))) == "- k: v\n"

    assert render(doc) == doc_text
    assert str(doc) == doc_text
    assert parse(doc_text).equals(doc)
    assert check_output(doc)

    # a subtree starts with its own header
    assert render(doc[3]).startswith("= Server\n\n- host: localhost\n")

    f = io.StringIO()
    write(doc, f)
    assert f.getvalue() == doc_text
    f = io.StringIO()
    doc.write(f)
    assert f.getvalue() == doc_text

    assert check_output(Branch("", Leaf.text("one"), Leaf.text("two")))
    assert render(Branch("", Leaf.text("one"), Leaf.text("two"))) == "one\n\n-\n\ntwo\n"
    assert check_output(Branch("", Leaf.comment("a"), Leaf.comment("b\nc")))
    assert check_output(Branch("",
        Branch("A", Branch("B", Branch("C"))),
        Branch("D", Leaf.long("empty")),
        Leaf("after", "branches")))
    assert render(Branch("", Branch("A"), Branch("B"))) == "= A\n\n= B\n"


def test_dialect():
    d = Dialect(branch='*', leaf='+', comment=';', separator='=')
    tree = Branch("",
        Branch("S",
            Leaf("a", "1"),
            Leaf.long("b", "x\ny"),
            Leaf.comment("note")),
        Leaf("c", "2"))
    assert render(tree, d) == "* S\n\n+ a= 1\n\n+ b=\n\nx\ny\n\n; note\n\n*\n\n+ c= 2\n"
    assert check_output(tree, d)


def test_write_errors():
    class Broken:
        def write(self, text):
            raise OSError("disk full")

    with pytest.raises(OSError):
        write(doc, Broken())


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
