#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np

from errors import DimensionMismatch, NotTrainedError


class LinearRegression:
	"""
	Simple least-squares regression on one explanatory variable.

	Closed form:
		slope     = Σ (x_i - x̄)(y_i - ȳ) / Σ (x_i - x̄)²
		intercept = ȳ - slope · x̄
	"""

	typ = 'r'

	def __init__(self):
		self.slope: float | None = None
		self.intercept: float = 0.0

	def train(self, x, y) -> None:
		x = np.asarray(x, dtype=float)
		if x.ndim == 2 and x.shape[1] == 1:
			x = x[:, 0]
		y = np.asarray(y, dtype=float).reshape(-1)
		if x.ndim != 1 or x.size != y.size:
			raise DimensionMismatch(f"x of shape {x.shape} does not match {y.size} target(s)")

		x_mean, y_mean = x.mean(), y.mean()
		denominator = np.sum((x - x_mean) ** 2)
		if denominator == 0:
			raise ValueError("x is constant, the slope is undefined")

		self.slope = float(np.sum((x - x_mean) * (y - y_mean)) / denominator)
		self.intercept = float(y_mean - self.slope * x_mean)

	def predict(self, x) -> np.ndarray:
		if self.slope is None:
			raise NotTrainedError(type(self).__name__)
		x = np.asarray(x, dtype=float)
		if x.ndim == 2 and x.shape[1] == 1:
			x = x[:, 0]
		return self.slope * x + self.intercept
