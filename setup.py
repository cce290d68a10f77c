# setup.py
from setuptools import setup, find_packages

setup(
    name="equation-explorer",
    version="0.1.0",
    description="Explore one, no, and infinite solutions of linear equations",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "sympy",
        "matplotlib",
        "pillow",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "equation-explorer = equation_explorer.cli:main",
        ],
    },
)
