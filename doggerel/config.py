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
The :class:`Dialect` describes the marker characters of a Doggerel document.

The defaults are the ones of the standard grammar::

    = Section
    - key: value
    - long:

    A long value, spanning
    multiple lines.

    # a comment
    == Subsection

A Dialect can be given to the parser, the writer and the classifier. Override
any of the markers using keyword arguments::

    >>> from doggerel.config import Dialect
    >>> d = Dialect(branch='*', separator='=')
    >>> d.branch, d.leaf
    ('*', '-')

"""


class Dialect:
    """Marker characters and grammar switches of a Doggerel dialect.

    The class attributes are the defaults; keyword arguments given to the
    constructor override them for the instance. Markers must be single,
    distinct, non-space characters; a :class:`ValueError` is raised
    otherwise.

    """
    branch = '='                #: repeated to denote the level of a branch
    leaf = '-'                  #: starts a leaf line
    comment = '#'               #: starts a comment line
    separator = ':'             #: separates the key and the value of a leaf
    require_separator = False   #: if True, leaf lines without separator are dropped

    _markers = ('branch', 'leaf', 'comment', 'separator')

    def __init__(self, **attrs):
        for attribute, value in attrs.items():
            if attribute.startswith('_') or not hasattr(type(self), attribute):
                raise TypeError("unknown dialect attribute: {!r}".format(attribute))
            setattr(self, attribute, value)
        markers = [getattr(self, name) for name in self._markers]
        for name, value in zip(self._markers, markers):
            if not isinstance(value, str) or len(value) != 1 or value.isspace():
                raise ValueError("{} marker must be one non-space character, got {!r}".format(name, value))
        if len(set(markers)) != len(markers):
            raise ValueError("dialect markers must be distinct: {!r}".format(markers))

    def __repr__(self):
        return '<{} {}>'.format(type(self).__name__, ' '.join(
            '{}={!r}'.format(name, getattr(self, name))
            for name in self._markers + ('require_separator',)))


#: The standard Doggerel dialect.
DEFAULT = Dialect()
