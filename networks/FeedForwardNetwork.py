#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np

from errors import DimensionMismatch
from networks.Neuron import Neuron


class FeedForwardNetwork:
	"""
	Inference-only multi-layer network of sigmoid neurons.

	`layer_sizes[0]` is both the input width and the number of neurons of the
	first layer; layer k reads the `layer_sizes[k-1]` outputs of layer k-1.
	Weights are random and never trained.
	"""

	def __init__(self, layer_sizes: list[int], random_state: int | np.random.Generator | None = None):
		if len(layer_sizes) == 0 or min(layer_sizes) < 1:
			raise ValueError(f"layer sizes must be positive, got {layer_sizes}")
		rng = np.random.default_rng(random_state)
		self.layer_sizes = [int(s) for s in layer_sizes]
		self.layers: list[list[Neuron]] = []
		n_inputs = self.layer_sizes[0]
		for size in self.layer_sizes:
			self.layers.append([Neuron(n_inputs, rng) for _ in range(size)])
			n_inputs = size

	def forward(self, inputs) -> np.ndarray:
		outputs = np.asarray(inputs, dtype=float).reshape(-1)
		if outputs.size != self.layer_sizes[0]:
			raise DimensionMismatch(f"network expects {self.layer_sizes[0]} input(s), got {outputs.size}")
		for layer in self.layers:
			outputs = np.array([neuron.compute(outputs) for neuron in layer])
		return outputs
