#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np

from errors import DimensionMismatch


def sigmoid(z):
	return 1.0 / (1.0 + np.exp(-z))


class Neuron:
	"""
	Single sigmoid unit: out = sigmoid(b + Σ_i w_i · x_i).

	Weights and bias are drawn once, uniformly in [-1, 1], and are only changed
	afterwards through the `weights` / `bias` setters by the layer owning the
	neuron. The neuron itself does no gradient math.

	Parameters
	----------
	input_count : int
		Number of inputs read by the neuron (length of the weight vector).
	rng : np.random.Generator or None
		Generator used for the initial draw; a fresh one if None.
	"""

	def __init__(self, input_count: int, rng: np.random.Generator | None = None):
		if input_count < 1:
			raise ValueError(f"a neuron needs at least one input, got {input_count}")
		rng = np.random.default_rng() if rng is None else rng
		self._weights = rng.uniform(-1.0, 1.0, size=int(input_count))
		self._bias = float(rng.uniform(-1.0, 1.0))

	def __len__(self) -> int:
		return self._weights.size

	@property
	def weights(self) -> np.ndarray:
		return self._weights.copy()

	@weights.setter
	def weights(self, values) -> None:
		values = np.asarray(values, dtype=float).reshape(-1)
		if values.size != self._weights.size:
			raise DimensionMismatch(f"neuron has {self._weights.size} weight(s), got {values.size}")
		self._weights = values.copy()

	@property
	def bias(self) -> float:
		return self._bias

	@bias.setter
	def bias(self, value: float) -> None:
		self._bias = float(value)

	def compute(self, inputs) -> float:
		inputs = np.asarray(inputs, dtype=float).reshape(-1)
		if inputs.size != self._weights.size:
			raise DimensionMismatch(f"neuron expects {self._weights.size} input(s), got {inputs.size}")
		return float(sigmoid(np.dot(self._weights, inputs) + self._bias))
