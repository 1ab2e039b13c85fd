import re

import swisscoords


def test_version():
    assert re.match(r'^\d+\.\d+\.\d+', swisscoords.__version__)
