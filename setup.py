from setuptools import find_packages, setup

setup(
    name="gpartition",
    version="0.1.0",
    packages=find_packages(exclude=["*.tests"]),
    python_requires=">=3.11",
    extras_require={"test": ["pytest"]},
)
