#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np
from collections import defaultdict, Counter

from errors import DimensionMismatch, NotTrainedError


class MultinomialNaiveBayes:
	"""
	Naive Bayes classifier over categorical features with Laplace smoothing.

	Training counts, per class, how many samples it has and how often each value
	appears at each feature position. Counts accumulate across `train` calls.

	Scoring
	-------
	For a class c and a sample (v_1, …, v_m):
		score(c) = log P(c) + Σ_k log P(v_k | c, k)
	with, for the counts N_{c,k} of position k in class c:
		seen value   : (N_{c,k}[v] + 1) / (Σ N_{c,k} + |N_{c,k}|)
		unseen value : 1 / (Σ N_{c,k} + |N_{c,k}| + 1)
	The highest score wins; among equal scores the class seen first wins.
	"""

	typ = 'c'

	def __init__(self):
		self.class_counts: Counter = Counter()
		self.feature_counts: dict = defaultdict(lambda: defaultdict(Counter))

	def train(self, dataset, labels) -> None:
		if len(dataset) != len(labels):
			raise DimensionMismatch(f"{len(dataset)} samples but {len(labels)} labels")
		for features, label in zip(dataset, labels):
			self.class_counts[label] += 1
			for position, value in enumerate(features):
				self.feature_counts[label][position][value] += 1

	def _log_likelihood(self, label, position: int, value) -> float:
		counts = self.feature_counts[label].get(position, Counter())
		total, distinct = sum(counts.values()), len(counts)
		if value in counts:
			return float(np.log((counts[value] + 1) / (total + distinct)))
		return float(np.log(1 / (total + distinct + 1)))

	def predict(self, features):
		if not self.class_counts:
			raise NotTrainedError(type(self).__name__)

		n_samples = sum(self.class_counts.values())
		best_class, best_score = None, -np.inf
		for label, count in self.class_counts.items():
			score = np.log(count / n_samples)
			for position, value in enumerate(features):
				score += self._log_likelihood(label, position, value)
			if score > best_score:
				best_class, best_score = label, score
		return best_class
