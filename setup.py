#!/usr/bin/env python
"""
Setup.py for pyweightgraph.
"""

from setuptools import setup, find_packages

setup(
    name="pyweightgraph",
    version="0.1.0",
    description="In-memory weighted graph with traversal, ordering, shortest path and spanning tree algorithms",
    license="MIT",
    packages=find_packages(include=["weightgraph", "weightgraph.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
