import os

from setuptools import setup


def _version():
    path = os.path.join(os.path.dirname(__file__), "refbst", "__init__.py")
    with open(path) as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split('"')[1]


setup(
    name = "refbst",
    version = _version(),
    description = "unbalanced binary search tree with owning and weak node links",
    packages = ["refbst", "refbst.tree"],
    python_requires = ">=3.8",
    extras_require = {
        "test": [
            "pytest >= 6.0.1",
            "hypothesis >= 6.50.1",
            ],
        },
)
