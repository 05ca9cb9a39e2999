"""Shared pytest fixtures for visutils tests."""

from __future__ import annotations

import numpy as np
import pytest


@pytest.fixture()
def tensor1():
    return np.array([1.0, 2.0, 3.0], dtype=np.float32)


@pytest.fixture()
def tensor2():
    return np.arange(1, 10, dtype=np.float32).reshape(3, 3)


@pytest.fixture()
def tensor3():
    return np.arange(1, 28, dtype=np.float32).reshape(3, 3, 3)


@pytest.fixture()
def tensors(tensor1, tensor2, tensor3):
    return [tensor1, tensor2, tensor3]


@pytest.fixture()
def response():
    """3x3 response map with a single vertical ridge of distinct scores."""
    return np.array([[0.0, 0.1, 0.0],
                     [0.0, 0.3, 0.0],
                     [0.0, 0.2, 0.0]])
