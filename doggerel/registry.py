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
Registry of the language definitions bundled with :mod:`doggerel`.

When adding languages to :mod:`doggerel.lang` please also add a registration
here. Names not found here are looked up in the registry of :mod:`parce`.

"""

__all__ = ['find', 'registry']


import parce.registry


registry = parce.registry.Registry(parce.registry.registry)


def find(name=None, *, filename=None, mimetype=None, contents=None):
    """Get the root lexicon for a language with name.

    See for all the arguments :func:`parce.find`. If no root lexicon can be
    found in doggerel's bundled languages, falls back to :mod:`parce`.

    """
    return registry.find(name, filename=filename, mimetype=mimetype, contents=contents)


## register bundled languages here
registry.add("doggerel.lang.doggerel.Doggerel.root",
    name = "Doggerel",
    desc = "Doggerel hierarchical notes and configuration markup",
    aliases = ["dgrl"],
    filenames = [("*.dgrl", 1)],
    mimetypes = [("text/x-doggerel", 1)],
)
