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
Doggerel language definition, to tokenize Doggerel text with *parce*, for
example for syntax highlighting in an editor::

    >>> import parce
    >>> from doggerel.lang.doggerel import Doggerel
    >>> tree = parce.root(Doggerel.root, "= Section\\n- key: value\\n")
    >>> [t.text for t in tree.tokens()]
    ['=', 'Section', '-', 'key', ':', 'value']

This definition describes the standard dialect. It looks at every line on
its own, just like the parser does, so the lines of a long value are
tokenized as text.

"""

import re

import parce.action as a
from parce import Language, default_action, lexicon


class Doggerel(Language):
    """Doggerel language definition."""

    @lexicon(re_flags=re.MULTILINE)
    def root(cls):
        yield r'^=+', a.Delimiter.Branch, cls.branch
        yield r'^-', a.Delimiter.Leaf, cls.leaf
        yield r'^#', a.Comment, cls.comment
        yield r'^[^\n]+', a.Text

    @lexicon(re_flags=re.MULTILINE)
    def branch(cls):
        """The name of a branch, after the level markers."""
        yield r'$', a.Name.Namespace, -1
        yield r'\S(?:[^\n]*\S)?', a.Name.Namespace

    @lexicon(re_flags=re.MULTILINE)
    def leaf(cls):
        """The key of a leaf, up to the separator."""
        yield r'$', a.Name.Variable, -1
        yield r':', a.Delimiter.Separator, cls.value
        yield r'[^:\s](?:[^:\n]*[^:\s])?', a.Name.Variable

    @lexicon(re_flags=re.MULTILINE)
    def value(cls):
        """The value of a leaf, after the separator."""
        yield r'$', a.Literal.String, -2
        yield r'\S(?:[^\n]*\S)?', a.Literal.String

    @lexicon(re_flags=re.MULTILINE)
    def comment(cls):
        yield r'$', a.Comment, -1
        yield default_action, a.Comment
