import os
import re

from setuptools import setup

here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, "sampy", "__init__.py")) as f:
    version = re.search(r'__version__ = "(.*)"', f.read()).group(1)

setup(
    name="sampy",
    version=version,
    description="Shaped random sampling from simple distributions",
    packages=["sampy", "sampy.random"],
    python_requires=">=3.9",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
)
