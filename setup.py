from setuptools import setup


setup(
    name = "mmtree",
    version = "1.0.0",
    description = "ordered multimap built on a parent-linked binary search tree",
    packages = ["mmtree", "mmtree.tree"],
    python_requires = ">=3.6",
    extras_require = {
        "test": ["pytest", "hypothesis"],
        },
)
