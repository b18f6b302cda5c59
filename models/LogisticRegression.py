#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np

from errors import DimensionMismatch, NotTrainedError
from networks.Neuron import sigmoid


class LogisticRegression:
	"""
	Binary logistic regression trained with full-batch gradient descent.

	Each iteration scores the whole training set with the current parameters,
	then moves both the weights and the intercept along the mean gradient of the
	log-loss:
		err = sigmoid(X·w + b) - y
		b  <- b - η · mean(err)
		w  <- w - η · Xᵀ err / n

	Parameters are passed to `train`; features are not scaled here, standardize
	them first when their ranges differ a lot.
	"""

	typ = 'c'

	def __init__(self):
		self.weights: np.ndarray | None = None
		self.intercept: float = 0.0

	def train(self, X, y, learning_rate: float = 0.01, n_iters: int = 100) -> None:
		X = np.asarray(X, dtype=float)
		y = np.asarray(y, dtype=float).reshape(-1)
		if X.ndim != 2 or X.shape[0] != y.size:
			raise DimensionMismatch(f"{X.shape[0]} samples but {y.size} labels")

		n, d = X.shape
		self.weights = np.zeros(d)
		self.intercept = 0.0

		for _ in range(int(n_iters)):
			error = self.predict_proba(X) - y
			self.intercept -= learning_rate * float(error.sum() / n)
			self.weights -= learning_rate * (X.T @ error) / n

	def predict_proba(self, X) -> np.ndarray:
		if self.weights is None:
			raise NotTrainedError(type(self).__name__)
		X = np.atleast_2d(np.asarray(X, dtype=float))
		if X.shape[1] != self.weights.size:
			raise DimensionMismatch(f"model trained on {self.weights.size} feature(s), got {X.shape[1]}")
		return sigmoid(X @ self.weights + self.intercept)

	def predict(self, X, threshold: float = 0.5) -> np.ndarray:
		return (self.predict_proba(X) >= threshold).astype(int)
