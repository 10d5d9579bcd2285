"""Setup script for metricstext."""

from setuptools import find_packages, setup

setup(
    name="metricstext",
    version="0.1.0",
    description="Render metric snapshots as a deterministic, hierarchical text tree",
    author="metricstext Team",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.24",
        "pyyaml>=6.0",
        "click>=8.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "metricstext=metricstext.cli:cli",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
