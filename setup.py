"""
Setup configuration for packageGraph package
"""

from setuptools import setup, find_packages

setup(
    name="packageGraph",
    version="0.1.0",
    description="Swift package target dependency graphs as Graphviz DOT",
    author="packageGraph Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "networkx>=2.6",
        "loguru>=0.5",
        "pyyaml>=5.4",
        "pydot>=1.4.2",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "package-graph=packageGraph.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
