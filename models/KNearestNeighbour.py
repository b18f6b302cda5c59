#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np
from collections import Counter

from errors import DimensionMismatch, NotTrainedError


class KNearestNeighbour:
	"""
	k-nearest-neighbour classifier with Euclidean distance and majority vote.

	Training only stores the samples. A prediction ranks every stored sample by
	distance (stable sort) and votes among the first `k`; on a tie the class
	met first, in distance order, wins.
	"""

	typ = 'c'

	def __init__(self, k: int = 3):
		if k < 1:
			raise ValueError(f"k must be at least 1, got {k}")
		self.k = int(k)
		self._X: np.ndarray | None = None
		self._labels: list = []

	def train(self, features, labels) -> None:
		X = np.asarray(features, dtype=float)
		if X.ndim != 2 or X.shape[0] != len(labels):
			raise DimensionMismatch(f"{X.shape[0]} samples but {len(labels)} labels")
		self._X = X.copy()
		self._labels = list(labels)

	def predict(self, sample):
		if self._X is None:
			raise NotTrainedError(type(self).__name__)
		sample = np.asarray(sample, dtype=float).reshape(-1)
		if sample.size != self._X.shape[1]:
			raise DimensionMismatch(f"model trained on {self._X.shape[1]} feature(s), got {sample.size}")

		distances = np.sqrt(((self._X - sample) ** 2).sum(axis=1))
		nearest = np.argsort(distances, kind="stable")[:self.k]
		votes = Counter(self._labels[i] for i in nearest)
		# most_common keeps first-insertion order among equal counts
		return votes.most_common(1)[0][0]
