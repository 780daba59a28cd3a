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
Test the dgrl command.
"""

### find doggerel
import sys
sys.path.insert(0, '.')

import io

import pytest

from doggerel import version_string
from doggerel.cli import main, parse_args


text = "= Fruit\n- apples: 3\n- pears: 2\n# ripe\n"


def run(args, text):
    stdout = io.StringIO()
    status = main(args, io.StringIO(text), stdout)
    return status, stdout.getvalue()


def test_main():
    args = parse_args([])
    assert args.json is False and args.strict is False and args.files == []
    assert parse_args(["-j"]).json is True

    status, output = run([], text)
    assert status == 0
    assert output == "= Fruit\n\n- apples: 3\n- pears: 2\n\n# ripe\n"

    status, output = run(["--json"], text)
    assert status == 0
    assert output == '{ "": [ { "Fruit": [ { "apples": "3" }, { "pears": "2" }, { "#": "ripe\\n" } ] } ] }\n'

    status, output = run(["-j", "--strict"], '- p: a\\b\n')
    assert output == '{ "": [ { "p": "a\\\\b" } ] }\n'

    status, output = run(["--tree"], text)
    assert status == 0
    assert output.splitlines() == [
        "<Branch '' (1 child)>",
        "  <Branch 'Fruit' (3 children)>",
        "    <Leaf leaf 'apples' '3'>",
        "    <Leaf leaf 'pears' '2'>",
        "    <Leaf comment 'ripe\\n'>",
    ]

    status, output = run(["-v"], "= A\n=== C\n")
    assert status == 0 and output == "= A\n"


def test_usage_errors(capsys):
    status, output = run(["notes.dgrl"], text)
    assert status == 1
    assert output == ""
    assert "stdin only" in capsys.readouterr().err

    with pytest.raises(SystemExit) as exc:
        main(["--no-such-option"])
    assert exc.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert version_string in capsys.readouterr().out


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
