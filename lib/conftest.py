from typing import Dict, Any

import pytest


EXAMPLE_COPYRIGHT = """\
Format: https://www.debian.org/doc/packaging-manuals/copyright-format/1.0/
Upstream-Name: X Solitaire
Source: ftp://ftp.example.com/pub/games

Files: *
Copyright: Copyright 1998 John Doe <jdoe@example.com>
License: GPL-2+

Files: debian/*
Copyright: Copyright 1998 Jane Smith <jsmith@example.net>
License: GPL-2+

License: GPL-2+
 [LICENSE TEXT]
"""


@pytest.fixture(autouse=True)
def doctest_add_example_copyright(doctest_namespace):
    # type: (Dict[str, Any]) -> None
    # Provide a custom namespace for doctests such that the examples need not
    # repeat a full copyright file. Use sparingly.
    # - For this to work, the doctests MUST NOT define the names listed here
    #   (as the assignment would overwrite the example)
    doctest_namespace['EXAMPLE_COPYRIGHT'] = EXAMPLE_COPYRIGHT
