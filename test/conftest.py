import pytest

import sampy.random as sr


@pytest.fixture(autouse=True)
def restore_source():
    prev = sr.get_source()
    yield
    sr.set_source(prev)
