import os
import subprocess
import sys

import numpy as np
import pytest


@pytest.fixture()
def sampy_script(tmp_path):
    content = """import sampy as sp
print(repr(sp.random.uniform()))"""
    p = tmp_path / "sampy_script.py"
    p.write_text(content)
    return p


def run_script(sampy_script, env=None):
    if env is None:
        env = {}
    cmd = [sys.executable, str(sampy_script)]
    fullenv = os.environ.copy()
    for k, v in env.items():
        fullenv[k] = str(v)
    return subprocess.run(
        cmd, env=fullenv, capture_output=True, check=True, text=True
    )


@pytest.mark.parametrize("value", [0, 7, 12345])
def test_seed(sampy_script, value):
    cp = run_script(sampy_script, {"SAMPY_SEED": value})
    assert float(cp.stdout) == np.random.default_rng(value).random()


@pytest.mark.parametrize("value", ["dog", -1, "1.5"])
def test_seed_invalid(sampy_script, value):
    with pytest.raises(subprocess.CalledProcessError):
        run_script(sampy_script, {"SAMPY_SEED": value})


@pytest.mark.parametrize("value", [0, 1, 2])
def test_verbose(sampy_script, value):
    cp = run_script(sampy_script, {"SAMPY_VERBOSE": value, "SAMPY_SEED": 5})
    assert 0.0 <= float(cp.stdout) < 1.0
    if value == 0:
        assert cp.stderr == ""
    else:
        assert "seeded with 5" in cp.stderr


@pytest.mark.parametrize("value", ["foo", 3, -1])
def test_verbose_invalid(sampy_script, value):
    with pytest.raises(subprocess.CalledProcessError):
        run_script(sampy_script, {"SAMPY_VERBOSE": value})
