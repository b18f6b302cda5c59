#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np
import pytest


@pytest.fixture
def rng():
	return np.random.default_rng(1234)

@pytest.fixture
def ages():
	# -1 below 30 years old, +1 from 30 on
	X = np.array([[18.0], [25.0], [32.0], [45.0], [60.0]])
	y = np.array([-1, -1, 1, 1, 1])
	return X, y

@pytest.fixture
def blobs():
	from sklearn.datasets import make_blobs
	X, y = make_blobs(n_samples=40, centers=[[-2.0, -2.0], [2.0, 2.0]], cluster_std=0.6, random_state=0)
	return X, np.where(y == 0, -1, 1)

@pytest.fixture
def xor():
	X = np.array([[0, 0], [0, 1], [1, 0], [1, 1]], dtype=float)
	Y = np.array([[0], [1], [1], [0]], dtype=float)
	return X, Y
