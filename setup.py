# setup.py
from setuptools import setup, find_packages

setup(
    name="rexpr",
    version="0.1.0",
    description="Flat, immutable expression trees with S-expression printing",
    packages=find_packages(include=["rexpr", "rexpr.*"]),
    python_requires=">=3.8",
    extras_require={"test": ["pytest"]},
    zip_safe=False,
)
