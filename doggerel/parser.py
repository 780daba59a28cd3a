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
Parse Doggerel text into a tree of :class:`~doggerel.tree.Branch` and
:class:`~doggerel.tree.Leaf` nodes.

The parser reads the text line by line. Every line is classified (see
:mod:`doggerel.classify`) and then handled by :func:`step`, which gets the
current :class:`State` and returns the new one. The state knows the branch
being built, its level, the leaf that was created last and the current
:class:`Context`: whether we are inside a multi-line value or a comment
block.

The parser does its best and never raises an exception on malformed input:
lines that can't be used (a branch more than one level deeper than the
current one, a leaf without key and value, or a leaf without separator if the
dialect requires one) are silently dropped. Dropped branch lines and leaf
lines without separator are logged at the DEBUG level.

    >>> from doggerel.parser import parse
    >>> doc = parse("= Section\\n- key: value\\n")
    >>> doc.dump()
    <Branch '' (1 child)>
      <Branch 'Section' (1 child)>
        <Leaf leaf 'key' 'value'>

"""

import collections
import enum
import io
import logging

from .classify import LineKind, classify
from .config import DEFAULT
from .tree import Branch, Kind, Leaf


logger = logging.getLogger(__name__)


class Context(enum.Enum):
    """The kind of multi-line block the parser is in."""
    DEFAULT = "default"
    LONG_VALUE = "long value"       #: text lines are added to the current leaf
    COMMENT_BLOCK = "comment block" #: comment lines are added to the current leaf


#: The parser state: the open branch, its level, the current leaf and context.
State = collections.namedtuple("State", "branch level leaf context")


def initial_state(root):
    """Return the State to start parsing into the root branch."""
    return State(root, 0, None, Context.DEFAULT)


def close_value(value):
    """Return the finished value of a multi-line leaf.

    Leading blank lines and trailing whitespace are removed, and one newline
    is added.

    """
    lines = value.splitlines(True)
    while lines and not lines[0].strip():
        del lines[0]
    return ''.join(lines).rstrip() + '\n'


def comment_body(text, dialect=None):
    """Return the text of a comment line without the marker and one space."""
    body = text[len((dialect or DEFAULT).comment):]
    return body[1:] if body.startswith(' ') else body


def step(state, line, dialect=None):
    """Handle one line and return the new :class:`State`.

    The tree is extended as needed. The line may or may not end with a
    newline.

    """
    dialect = dialect or DEFAULT
    text = line.rstrip('\r\n')
    kind, level = classify(text, dialect)

    # leave the current block before handling an element that ends it
    if state.context is Context.LONG_VALUE and kind is not LineKind.TEXT:
        state.leaf.value = close_value(state.leaf.value)
        state = state._replace(context=Context.DEFAULT)
    elif state.context is Context.COMMENT_BLOCK and kind is not LineKind.COMMENT:
        state = state._replace(context=Context.DEFAULT)

    return _handlers[kind](state, text, level, dialect)


def _branch(state, text, level, dialect):
    """Handle a branch line: go up zero or more levels, and open a new branch."""
    delta = level - state.level
    if delta > 1:
        logger.debug("dropped branch line %r: level %d follows level %d", text, level, state.level)
        return state
    branch, depth = state.branch, state.level
    while delta <= 0 and depth > 0:
        branch = branch.parent
        depth -= 1
        delta += 1
    name = text[level:].strip()
    if name:
        node = Branch(name)
        branch.append(node)
        branch, depth = node, depth + 1
    return state._replace(branch=branch, level=depth)


def _leaf(state, text, level, dialect):
    """Handle a leaf line; a key with separator but no value starts a long leaf."""
    key, separator, value = text[len(dialect.leaf):].partition(dialect.separator)
    key, value = key.strip(), value.strip()
    if not key and not value:
        return state
    if not separator and dialect.require_separator:
        logger.debug("dropped leaf line %r: no %r separator", text, dialect.separator)
        return state
    if separator and not value:
        leaf = Leaf(key, "", Kind.LONG)
        context = Context.LONG_VALUE
    else:
        leaf = Leaf(key, value)
        context = Context.DEFAULT
    state.branch.append(leaf)
    return state._replace(leaf=leaf, context=context)


def _comment(state, text, level, dialect):
    """Handle a comment line; consecutive comment lines form one leaf."""
    body = comment_body(text, dialect)
    if state.context is Context.COMMENT_BLOCK:
        state.leaf.append_value(body + '\n')
        return state
    leaf = Leaf.comment(body)
    state.branch.append(leaf)
    return state._replace(leaf=leaf, context=Context.COMMENT_BLOCK)


def _text(state, text, level, dialect):
    """Handle a text line; it continues a long value or starts a text block."""
    if state.context is Context.LONG_VALUE:
        state.leaf.append_value(text + '\n')
        return state
    if not text.strip():
        return state
    leaf = Leaf("", text + '\n', Kind.TEXT)
    state.branch.append(leaf)
    return state._replace(leaf=leaf, context=Context.LONG_VALUE)


_handlers = {
    LineKind.BRANCH: _branch,
    LineKind.LEAF: _leaf,
    LineKind.COMMENT: _comment,
    LineKind.TEXT: _text,
}


def lines(source):
    """Yield the lines of source, which can be a (byte) string or an iterable of lines.

    Bytes are decoded as UTF-8. Bytes that are not valid UTF-8 do not cause an
    error: they end up as lone surrogates in the text (the "surrogateescape"
    error handler), and encoding a value with that handler gives the original
    bytes back.

    """
    if isinstance(source, bytes):
        source = source.decode('utf-8', 'surrogateescape')
    if isinstance(source, str):
        source = io.StringIO(source)
    for line in source:
        yield line.decode('utf-8', 'surrogateescape') if isinstance(line, bytes) else line


class Parser:
    """Parses Doggerel text into a tree.

    A Parser can be used for any number of documents; every call to
    :meth:`parse` starts with a fresh state.

    """
    def __init__(self, dialect=None):
        self.dialect = dialect or DEFAULT

    def parse(self, source):
        """Parse source and return the root :class:`~doggerel.tree.Branch`.

        The source can be a string, bytes, or an iterable of lines such as an
        open file.

        """
        root = Branch()
        state = initial_state(root)
        for line in lines(source):
            state = step(state, line, self.dialect)
        # an empty leaf finishes a dangling long value
        step(state, self.dialect.leaf, self.dialect)
        return root


def parse(source, dialect=None):
    """Parse source with a new :class:`Parser` and return the root branch."""
    return Parser(dialect).parse(source)
