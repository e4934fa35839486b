import os
import re

from setuptools import setup

proj_root = os.path.abspath(os.path.dirname(__file__))

def read_version():
    with open(os.path.join(proj_root, "pfafft", "__init__.py")) as init_file:
        match = re.search(r'^__version__ = "([^"]+)"', init_file.read(), re.MULTILINE)

    if not match:
        raise RuntimeError("Unable to find __version__ in pfafft/__init__.py")

    return match.group(1)

setup(
    name="pfafft",
    description="Prime-factor (Good-Thomas) FFT planning and execution on numpy arrays",
    packages=["pfafft", "pfafft.base", "pfafft.algorithm", "pfafft.tests"],
    install_requires=[
        "numpy",
    ],
    extras_require={
        "cli": ["click"],
        "test": ["pytest", "click"],
    },
    entry_points={
        "console_scripts": [
            "pfafft-plan=pfafft.cli:cli_entrypoint",
        ],
    },
    python_requires=">=3.8",
    version=read_version(),
    zip_safe=False,
)
