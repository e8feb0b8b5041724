"""
setup.py

Установка решателя пасьянса.

Использование:
    pip install -e .[test]
    pytest
"""

from setuptools import setup

setup(
    name="solitaire_solver",
    version="1.0.0",
    description="Search-based Solitaire Solver (DFS and Beam Search)",
    packages=[
        "core",
        "analysis",
        "heuristics",
        "solvers",
        "solutions",
        "deal_io",
        "utils",
    ],
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "solitaire-solver=main:main",
        ],
    },
    zip_safe=False,
)
