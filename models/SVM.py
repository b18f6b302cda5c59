#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import logging
import numpy as np

from errors import DimensionMismatch
from models.Kernel import Kernel

log = logging.getLogger(__name__)


class SVM:
	"""
	Kernel Support Vector Machine (binary classification) trained with a
	simplified Sequential Minimal Optimization (SMO) solver.

	The model solves the dual soft-margin problem. Each training sample i gets a
	Lagrange multiplier alpha_i ∈ [0, C]; samples ending with alpha_i > 0 are
	the support vectors and are the only ones kept after training.

	Decision function
	-----------------
		f(x) = b + Σ_k w_k · K(sv_k, x),   with w_k = alpha_k · y_k
		predict(x) = +1 if f(x) ≥ 0 else -1

	Parameters
	----------
	kernel : str or Kernel
		"linear", "polynomial" or "rbf" (or a ready-made Kernel).
	degree : int
		Degree of the polynomial kernel.
	gamma : float
		Width of the RBF kernel.
	random_state : int, np.random.Generator or None
		Source of the random partner selection in SMO. Seed it to make
		training reproducible.

	Notes
	-----
	SMO pass (repeated until `max_iterations` consecutive passes change nothing):
		For every i, E_i = f(x_i) - y_i under the current multipliers.
		If i violates the KKT conditions within `tolerance`:
		    1. draw j ≠ i uniformly,
		    2. bound alpha_j to [L, H]:
		         y_i == y_j : L = max(0, a_i + a_j - C), H = min(C, a_i + a_j)
		         y_i != y_j : L = max(0, a_j - a_i),     H = min(C, C + a_j - a_i)
		    3. eta = 2 K_ij - K_ii - K_jj, skip if L == H or eta ≥ 0,
		    4. a_j ← clip(a_j - y_j (E_i - E_j) / eta, L, H), skip if it barely moved,
		    5. a_i ← a_i + y_i y_j (a_j_old - a_j),
		    6. b ← b1 if 0 < a_i < C, b2 if 0 < a_j < C, else (b1 + b2) / 2.

	The Gram matrix is computed once per `train` call and released with it.
	`max_iterations` counts consecutive unchanged passes (a patience counter),
	the counter resets every time a pass updates a pair.

	Attributes
	----------
	support_vectors_ : np.ndarray
		Training samples with alpha > 0, shape (n_sv, d).
	support_ : np.ndarray
		Indices of those samples in the last training set.
	weights_ : np.ndarray
		Signed coefficients alpha_k · y_k, never zero.
	bias_ : float
		Intercept b.
	converged_ : bool
		False only when training stopped on the `max_passes` safety cap.
	n_passes_ : int
		Number of full passes run by the last `train` call.
	typ : str
		'c' indicating a classification task.
	"""


	typ = 'c'
	signed = True

	def __init__(self,
				 kernel: str | Kernel = "linear",
				 degree: int = 3,
				 gamma: float = 0.5,
				 random_state: int | np.random.Generator | None = None):
		self.kernel = kernel if isinstance(kernel, Kernel) else Kernel(kernel, degree, gamma)
		self.random_state = random_state
		self._rng = np.random.default_rng(random_state)

		self.support_vectors_: np.ndarray = np.empty((0, 0))
		self.support_: np.ndarray = np.empty(0, dtype=int)
		self.weights_: np.ndarray = np.empty(0)
		self.bias_: float = 0.0
		self.converged_: bool = False
		self.n_passes_: int = 0
		self.n_features_: int | None = None

	@property
	def n_support_(self) -> int:
		return int(self.weights_.size)

	def train(self, features, labels,
			  C: float = 1.0,
			  tolerance: float = 1e-3,
			  max_iterations: int = 100,
			  max_passes: int | None = None) -> bool:
		X = np.asarray(features, dtype=float)
		y = np.asarray(labels, dtype=float).reshape(-1)
		if X.ndim != 2:
			raise DimensionMismatch(f"features must be a 2-D matrix, got {X.ndim} dimension(s)")
		n = X.shape[0]
		if y.size != n:
			raise DimensionMismatch(f"{n} samples but {y.size} labels")
		if n < 2:
			raise ValueError("SMO needs at least two training samples")
		if C <= 0 or tolerance <= 0:
			raise ValueError(f"C and tolerance must be positive, got C={C}, tolerance={tolerance}")

		K = self.kernel.gram(X)
		alpha = np.zeros(n)
		b = 0.0
		patience = 0
		passes = 0
		converged = True

		while patience < max_iterations:
			if max_passes is not None and passes >= max_passes:
				converged = False
				break

			changed = 0
			for i in range(n):
				E_i = self._margin(K, alpha, y, b, i) - y[i]
				a_i_old = alpha[i]

				if not ((y[i] * E_i < -tolerance and a_i_old < C)
						or (y[i] * E_i > tolerance and a_i_old > 0)):
					continue

				j = self._partner(i, n)
				E_j = self._margin(K, alpha, y, b, j) - y[j]
				a_j_old = alpha[j]

				if y[i] == y[j]:
					L = max(0.0, a_i_old + a_j_old - C)
					H = min(C, a_i_old + a_j_old)
				else:
					L = max(0.0, a_j_old - a_i_old)
					H = min(C, C + a_j_old - a_i_old)
				if L == H:
					continue

				eta = 2.0 * K[i, j] - K[i, i] - K[j, j]
				if eta >= 0:
					continue

				a_j = a_j_old - y[j] * (E_i - E_j) / eta
				a_j = min(max(a_j, L), H)
				if abs(a_j - a_j_old) < tolerance:
					continue
				a_i = a_i_old + y[i] * y[j] * (a_j_old - a_j)

				b1 = (b - E_i
					  - y[i] * (a_i - a_i_old) * K[i, i]
					  - y[j] * (a_j - a_j_old) * K[i, j])
				b2 = (b - E_j
					  - y[i] * (a_i - a_i_old) * K[i, j]
					  - y[j] * (a_j - a_j_old) * K[j, j])
				if 0 < a_i < C:
					b = b1
				elif 0 < a_j < C:
					b = b2
				else:
					b = (b1 + b2) / 2.0

				alpha[i] = a_i
				alpha[j] = a_j
				changed += 1

			passes += 1
			patience = patience + 1 if changed == 0 else 0
			log.debug(f"SMO pass {passes}: {changed} pair(s) changed, patience {patience}/{max_iterations}")

		sv = alpha > 0
		self.support_ = np.flatnonzero(sv)
		self.support_vectors_ = X[sv].copy()
		self.weights_ = alpha[sv] * y[sv]
		self.bias_ = float(b) if sv.any() else 0.0
		self.n_features_ = X.shape[1]
		self.converged_ = converged
		self.n_passes_ = passes

		log.info(f"SVM({self.kernel!r}) trained: {self.n_support_} support vector(s) out of {n}, "
				 f"bias={self.bias_:.6g}, passes={passes}, converged={converged}")
		return True

	@staticmethod
	def _margin(K: np.ndarray, alpha: np.ndarray, y: np.ndarray, b: float, i: int) -> float:
		return float(np.dot(alpha * y, K[:, i]) + b)

	def _partner(self, i: int, n: int) -> int:
		# uniform over the n - 1 indices different from i
		j = int(self._rng.integers(n - 1))
		return j + 1 if j >= i else j

	def _check_width(self, X: np.ndarray) -> None:
		if self.n_features_ is not None and X.shape[1] != self.n_features_:
			raise DimensionMismatch(f"model trained on {self.n_features_} feature(s), got {X.shape[1]}")

	def decision_function(self, X) -> np.ndarray:
		X = np.atleast_2d(np.asarray(X, dtype=float))
		self._check_width(X)
		if self.n_support_ == 0:
			return np.full(X.shape[0], self.bias_)
		return self.kernel.gram(X, self.support_vectors_) @ self.weights_ + self.bias_

	def decision_value(self, sample) -> float:
		sample = np.asarray(sample, dtype=float).reshape(1, -1)
		return float(self.decision_function(sample)[0])

	def predict(self, sample) -> int:
		return 1 if self.decision_value(sample) >= 0.0 else -1
