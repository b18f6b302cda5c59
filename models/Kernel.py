#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np

from errors import UnsupportedKernel, DimensionMismatch


class Kernel:
	"""
	Kernel function used by the SVM to measure similarity between two samples.

	A kernel replaces the dot product of an explicit higher-dimensional feature
	mapping, so the SVM can learn non-linear boundaries while only ever
	evaluating K(x, y) on pairs of original feature vectors.

	Policies
	--------
	linear :
		K(x, y) = Σ_i x_i y_i
	polynomial :
		K(x, y) = (x·y + 1)^degree
	rbf :
		K(x, y) = exp(-gamma · ‖x - y‖²)

	Parameters
	----------
	name : str
		One of "linear", "polynomial", "rbf". Checked at construction.
	degree : int
		Degree of the polynomial kernel (ignored otherwise).
	gamma : float
		Width parameter of the RBF kernel (ignored otherwise).

	Notes
	-----
	`gram` computes every pairwise value of a sample matrix at once and agrees
	entry-for-entry with `evaluate`, it is what the SMO loop caches.
	"""

	NAMES = ("linear", "polynomial", "rbf")

	def __init__(self, name: str = "linear", degree: int = 3, gamma: float = 0.5):
		if name not in self.NAMES:
			raise UnsupportedKernel(name)
		if int(degree) != degree or degree < 1:
			raise ValueError(f"degree must be a positive integer, got {degree}")
		if gamma <= 0:
			raise ValueError(f"gamma must be positive, got {gamma}")
		self.name = name
		self.degree = int(degree)
		self.gamma = float(gamma)

	def __repr__(self) -> str:
		if self.name == "polynomial":
			return f"Kernel('polynomial', degree={self.degree})"
		if self.name == "rbf":
			return f"Kernel('rbf', gamma={self.gamma})"
		return "Kernel('linear')"

	def __call__(self, x, y) -> float:
		return self.evaluate(x, y)

	def evaluate(self, x, y) -> float:
		x = np.asarray(x, dtype=float).reshape(-1)
		y = np.asarray(y, dtype=float).reshape(-1)
		if x.shape != y.shape:
			raise DimensionMismatch(f"kernel inputs differ in length: {x.size} != {y.size}")

		if self.name == "linear":
			return float(np.dot(x, y))
		if self.name == "polynomial":
			return float((np.dot(x, y) + 1.0) ** self.degree)
		diff = x - y
		return float(np.exp(-self.gamma * np.dot(diff, diff)))

	def gram(self, X: np.ndarray, Y: np.ndarray | None = None) -> np.ndarray:
		same = Y is None
		X = np.atleast_2d(np.asarray(X, dtype=float))
		Y = X if same else np.atleast_2d(np.asarray(Y, dtype=float))
		if X.shape[1] != Y.shape[1]:
			raise DimensionMismatch(f"kernel inputs differ in width: {X.shape[1]} != {Y.shape[1]}")

		dots = X @ Y.T
		if self.name == "linear":
			return dots
		if self.name == "polynomial":
			return (dots + 1.0) ** self.degree
		# ‖x-y‖² = ‖x‖² + ‖y‖² - 2 x·y, clipped against rounding below zero
		sq = (X * X).sum(axis=1)[:, None] + (Y * Y).sum(axis=1)[None, :] - 2.0 * dots
		if same:
			np.fill_diagonal(sq, 0.0)
		return np.exp(-self.gamma * np.maximum(sq, 0.0))
