#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np

from errors import DimensionMismatch
from networks.Neuron import Neuron


class BackpropagationNetwork:
	"""
	Fully connected network with one hidden layer, trained by backpropagation.

	Both layers are lists of sigmoid `Neuron`s sized at construction. Training is
	online: `back_propagation` handles exactly one (input, target) pair and the
	caller decides how many times to loop over its samples.

	Parameters
	----------
	input_size, hidden_size, output_size : int
		Width of the input vector and of each layer.
	learning_rate : float
		Step size of the gradient updates.
	random_state : int, np.random.Generator or None
		Seed (or generator) for the initial weights. Hidden neurons draw first,
		then output neurons, from a single generator.

	Notes
	-----
	For a sample x with target t, hidden activations h and outputs o:
		δ_out[i] = (t_i - o_i) · o_i (1 - o_i)
		δ_hid[i] = (Σ_j δ_out[j] · W_out[j, i]) · h_i (1 - h_i)
		W_out[i, j] += η · δ_out[i] · h_j      b_out[i] += η · δ_out[i]
		W_hid[i, j] += η · δ_hid[i] · x_j      b_hid[i] += η · δ_hid[i]
	δ_hid is computed from W_out before any weight moves.
	"""

	def __init__(self, input_size: int, hidden_size: int, output_size: int,
				 learning_rate: float = 0.1,
				 random_state: int | np.random.Generator | None = None):
		self.input_size = int(input_size)
		self.hidden_size = int(hidden_size)
		self.output_size = int(output_size)
		self.learning_rate = float(learning_rate)

		rng = np.random.default_rng(random_state)
		self.hidden_layer = [Neuron(self.input_size, rng) for _ in range(self.hidden_size)]
		self.output_layer = [Neuron(self.hidden_size, rng) for _ in range(self.output_size)]

	def _as_input(self, values) -> np.ndarray:
		values = np.asarray(values, dtype=float).reshape(-1)
		if values.size != self.input_size:
			raise DimensionMismatch(f"network expects {self.input_size} input(s), got {values.size}")
		return values

	def _hidden_output(self, inputs: np.ndarray) -> np.ndarray:
		return np.array([neuron.compute(inputs) for neuron in self.hidden_layer])

	def _output(self, hidden: np.ndarray) -> np.ndarray:
		return np.array([neuron.compute(hidden) for neuron in self.output_layer])

	def forward_propagation(self, inputs) -> np.ndarray:
		return self._output(self._hidden_output(self._as_input(inputs)))

	def back_propagation(self, inputs, target) -> None:
		inputs = self._as_input(inputs)
		target = np.asarray(target, dtype=float).reshape(-1)
		if target.size != self.output_size:
			raise DimensionMismatch(f"network has {self.output_size} output(s), target has {target.size}")

		hidden = self._hidden_output(inputs)
		output = self._output(hidden)

		output_deltas = (target - output) * output * (1.0 - output)
		W_out = np.array([neuron.weights for neuron in self.output_layer])
		hidden_deltas = (W_out.T @ output_deltas) * hidden * (1.0 - hidden)

		eta = self.learning_rate
		for neuron, delta in zip(self.output_layer, output_deltas):
			neuron.weights = neuron.weights + eta * delta * hidden
			neuron.bias = neuron.bias + eta * delta
		for neuron, delta in zip(self.hidden_layer, hidden_deltas):
			neuron.weights = neuron.weights + eta * delta * inputs
			neuron.bias = neuron.bias + eta * delta
