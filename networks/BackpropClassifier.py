#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import logging
import numpy as np

from errors import DimensionMismatch, NotTrainedError
from networks.BackpropagationNetwork import BackpropagationNetwork

log = logging.getLogger(__name__)


class BackpropClassifier:
	"""
	Binary classifier driving a `BackpropagationNetwork` over whole epochs.

	The network only knows single-sample updates; this wrapper owns the epoch
	loop, feeding the samples in order (or reshuffled each epoch when `shuffle`
	is set) and tracking the mean squared error of each epoch in
	`loss_history_`. A fresh network is built by every `train` call, once the
	input width is known.

	Parameters
	----------
	hidden_size : int
		Number of hidden neurons.
	learning_rate : float
		Step size passed to the network.
	epochs : int
		Number of full passes over the training set.
	shuffle : bool
		Whether to shuffle the sample order at each epoch.
	random_state : int or None
		Seed for the weight initialization and the shuffling.
	"""

	typ = 'c'

	def __init__(self, hidden_size: int = 3, learning_rate: float = 0.1,
				 epochs: int = 1000, shuffle: bool = False,
				 random_state: int | None = 0):
		self.hidden_size = int(hidden_size)
		self.learning_rate = float(learning_rate)
		self.epochs = int(epochs)
		self.shuffle = bool(shuffle)
		self.random_state = random_state

		self.network: BackpropagationNetwork | None = None
		self.loss_history_: list[float] = []

	def train(self, X, y) -> "BackpropClassifier":
		X = np.asarray(X, dtype=float)
		Y = np.asarray(y, dtype=float)
		Y = Y.reshape(-1, 1) if Y.ndim == 1 else Y
		if X.ndim != 2 or X.shape[0] != Y.shape[0]:
			raise DimensionMismatch(f"{X.shape[0]} samples but {Y.shape[0]} targets")

		rng = np.random.default_rng(self.random_state)
		self.network = BackpropagationNetwork(X.shape[1], self.hidden_size, Y.shape[1],
											  self.learning_rate, random_state=rng)
		self.loss_history_ = []
		idx = np.arange(X.shape[0])

		for epoch in range(self.epochs):
			if self.shuffle:
				rng.shuffle(idx)
			for k in idx:
				self.network.back_propagation(X[k], Y[k])
			loss = float(np.mean((self._forward(X) - Y) ** 2))
			self.loss_history_.append(loss)
			if epoch % 100 == 0:
				log.debug(f"epoch {epoch}: mse={loss:.6f}")

		if self.loss_history_:
			log.info(f"network trained for {self.epochs} epoch(s), final mse={self.loss_history_[-1]:.6f}")
		return self

	def _forward(self, X: np.ndarray) -> np.ndarray:
		return np.array([self.network.forward_propagation(x) for x in X])

	def predict_proba(self, X) -> np.ndarray:
		if self.network is None:
			raise NotTrainedError(type(self).__name__)
		X = np.atleast_2d(np.asarray(X, dtype=float))
		return self._forward(X)[:, 0]

	def predict(self, X, threshold: float = 0.5) -> np.ndarray:
		return (self.predict_proba(X) >= threshold).astype(int)
