"""Setup script for nodeflow."""
from setuptools import setup, find_packages

setup(
    name="nodeflow",
    version="0.1.0",
    description="Dataflow graph engine with memoized, incrementally invalidated evaluation",
    python_requires=">=3.9",
    packages=find_packages(where=".", include=("nodeflow", "nodeflow.*")),
    package_dir={"": "."},
    install_requires=[
        "omegaconf>=2.3",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["nodeflow=nodeflow.cli:main"],
    },
)
