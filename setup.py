#!/usr/bin/env python
# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Setup configuration for the adaptiveresonance package.
"""

from setuptools import setup, find_packages
import os

# Read version from package
with open(os.path.join("adaptiveresonance", "__init__.py")) as f:
    for line in f:
        if line.startswith("__version__"):
            version = line.split("=")[1].strip().strip('"').strip("'")
            break

# Read long description from README
long_description = """
# Adaptive Resonance

Adaptive Resonance Theory (ART) clustering and classification in Python.

## Features

- **Unsupervised ART**: FuzzyART (with gamma normalization), Dual Vigilance
  Fuzzy ART (DVFA) and Distributed Dual Vigilance Fuzzy ART (DDVFA) with six
  linkage methods
- **Supervised ARTMAP**: Simplified Fuzzy ARTMAP (SFAM), Default ARTMAP (DAM)
  and Fuzzy ARTMAP (FAM) with match tracking
- **Incremental Learning**: Train one sample at a time or in batches over
  several epochs
- **Cluster Validity Indices**: Xie-Beni, Davies-Bouldin, Partition Separation
  and connectivity (CONN), computed incrementally or in batch

## Installation

```bash
pip install adaptiveresonance
```

## Quick Start

```python
import numpy as np
from adaptiveresonance import DDVFA, XB

# Data is (n_features, n_samples)
data = np.random.rand(4, 500)

# Train an unsupervised module
art = DDVFA(rhoLb=0.6, rhoUb=0.8, maxIter=5)
labels = art.train(data)

# Classify new samples
y_hat = art.classify(np.random.rand(4, 10), get_bmu=True)

# Evaluate the clustering
print(XB().get_cvi(data, labels))
```
"""

setup(
    name="adaptiveresonance",
    version=version,
    description="Adaptive Resonance Theory clustering, ARTMAP classification and cluster validity indices",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="MassiveDataScience",
    license="Apache License 2.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pyspark>=3.4.0",
        "numpy>=1.20.0",
        "tqdm>=4.60.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "black>=22.0.0",
            "flake8>=4.0.0",
            "mypy>=0.950",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
        "Topic :: Software Development :: Libraries",
    ],
    keywords="adaptive-resonance-theory art artmap clustering fuzzy-art machine-learning",
)
