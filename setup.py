# setup.py

from setuptools import setup, find_packages

setup(
    name="route_search",
    version="0.1.0",
    author="Kushagra Bharti",
    description="Exhaustive and greedy shortest-route search with step-paced visualization",
    packages=find_packages(exclude=["tests*", "benchmarks*", "examples*", "scripts*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "pygame",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
)
