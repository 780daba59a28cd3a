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
The ``dgrl`` command.

Reads a Doggerel document from standard input and writes it to standard
output, either as canonical Doggerel text (the default) or as JSON::

    $ dgrl < notes.dgrl
    $ dgrl --json < notes.dgrl
    $ dgrl --tree < notes.dgrl      # outline of the parsed tree

"""

import argparse
import logging
import sys

from . import pkginfo
from .jsonout import write_json
from .parser import parse
from .writer import write


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="dgrl",
        description="Read Doggerel from stdin and write it to stdout.",
    )
    parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Export to JSON",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Escape all JSON strings fully (always valid JSON)",
    )
    parser.add_argument(
        "--tree", "-t",
        action="store_true",
        help="Print an outline of the parsed tree, for debugging",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Report dropped lines on stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s " + pkginfo.version_string,
    )
    parser.add_argument("files", nargs="*", help=argparse.SUPPRESS)
    return parser.parse_args(args)


def main(args=None, stdin=None, stdout=None):
    """Run the command and return the exit status."""
    parsed = parse_args(args)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    if parsed.files:
        print("dgrl reads from stdin only.", file=sys.stderr)
        return 1

    if parsed.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    tree = parse(stdin)
    if parsed.tree:
        tree.dump(stdout)
    elif parsed.json:
        write_json(tree, stdout, parsed.strict)
        stdout.write('\n')
    else:
        write(tree, stdout)
    stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
