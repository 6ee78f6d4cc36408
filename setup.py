"""
Setup script for graphview: interactive view-state engine for typed knowledge graphs
"""

from setuptools import setup, find_packages

setup(
    name="graphview",
    version="1.0.0",
    description="Filter, select and hover-highlight typed knowledge graphs",
    long_description="View-state engine for typed, labeled graphs with NetworkX, Graphviz and pyvis render adapters",
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests*", "docs*", "examples*"]),
    python_requires=">=3.8",
    install_requires=[
        # Core dependencies
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",

        # Visualization
        "networkx>=3.0",
        "matplotlib>=3.6.0",
        "pyvis>=0.3.2",
    ],
    extras_require={
        "visualization": ["graphviz>=0.20.0"],
        "dev": [
            "pytest>=7.0.0",
            "pytest-mock>=3.10.0",
            "graphviz>=0.20.0",
            "black>=22.0.0",
            "isort>=5.10.0",
            "mypy>=1.0.0",
            "flake8>=4.0.0",
        ],
        "all": [
            "graphviz>=0.20.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "graphview=graphview.cli:main",
        ],
    },
    package_data={
        "": ["*.md", "*.txt", "*.json"],
    },
    include_package_data=True,
    license="MIT",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Visualization",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="knowledge-graph graph-visualization networkx graphviz pyvis",
)
