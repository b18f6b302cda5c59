#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np
from time import perf_counter
from contextlib import contextmanager
from typing import Dict, Tuple, Any

import utils


@contextmanager
def timer(name: str, store: Dict[str, float] | None = None):
	t0 = perf_counter()
	try:
		yield
	finally:
		dt = perf_counter() - t0
		if store is not None:
			store[name] = dt

def metrics_from_preds(y_true: np.ndarray, y_pred: np.ndarray) -> Dict[str, float | int]:
	tp = int(((y_true == 1) & (y_pred == 1)).sum())
	tn = int(((y_true == 0) & (y_pred == 0)).sum())
	fp = int(((y_true == 0) & (y_pred == 1)).sum())
	fn = int(((y_true == 1) & (y_pred == 0)).sum())
	acc = float((y_pred == y_true).mean())
	prec = tp / (tp + fp) if (tp + fp) > 0 else 0.0
	rec  = tp / (tp + fn) if (tp + fn) > 0 else 0.0
	f1   = 2 * prec * rec / (prec + rec) if (prec + rec) > 0 else 0.0
	return {"acc": acc, "prec": prec, "rec": rec, "f1": f1, "tp": tp, "tn": tn, "fp": fp, "fn": fn}

def evaluate_at_threshold(y_true: np.ndarray, scores: np.ndarray, thr: float) -> Tuple[Dict[str, Any], np.ndarray]:
	y_pred = (scores >= thr).astype(int)
	m = metrics_from_preds(y_true, y_pred)
	return m, y_pred

def search_best_threshold(y_true: np.ndarray, scores: np.ndarray,
						  percentiles: np.ndarray = np.linspace(1, 99, 99)) -> Tuple[Dict[str, Any], np.ndarray, np.ndarray, np.ndarray]:
	"""
	Sweeps thresholds taken at percentiles of the scores, so the grid follows
	whatever scale they are on (decision values or probabilities), and returns
	the best-F1 point along with the recall/precision curve.
	"""
	thr_list = np.percentile(scores, percentiles)
	best = {"thr": 0.0, "f1": -1.0}
	rec_list, prec_list = [], []
	for thr in thr_list:
		m, _ = evaluate_at_threshold(y_true, scores, float(thr))
		rec_list.append(m["rec"]); prec_list.append(m["prec"])
		if m["f1"] > best["f1"]:
			best = {"thr": float(thr), **m}
	return best, np.array(rec_list), np.array(prec_list), thr_list

def roc_curve_from_scores(y_true: np.ndarray, s: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
	thr = np.sort(np.unique(s))
	thr = np.concatenate(([-np.inf], thr, [np.inf]))
	tpr, fpr = [], []
	P, N = int((y_true == 1).sum()), int((y_true == 0).sum())
	for t in thr:
		y_hat = (s >= t).astype(int)
		tp = int(((y_true == 1) & (y_hat == 1)).sum())
		fp = int(((y_true == 0) & (y_hat == 1)).sum())
		tpr.append(tp / P if P > 0 else 0.0)
		fpr.append(fp / N if N > 0 else 0.0)
	return np.array(fpr), np.array(tpr)

def auc_trapz(x: np.ndarray, y: np.ndarray) -> float:
	# ties on x: the curve climbs, lower y first
	order = np.lexsort((y, x))
	x, y = x[order], y[order]
	return float(np.trapezoid(y, x))

def pr_auc(rec: np.ndarray, prec: np.ndarray) -> float:
	# ties on recall: precision only drops as the threshold goes down
	order = np.lexsort((-prec, rec))
	return float(np.trapezoid(prec[order], rec[order]))

def scores_of(model, X: np.ndarray) -> Tuple[np.ndarray, float]:
	"""
	Returns SCORES (not labels) for ROC/PR and the threshold matching them:
	  - decision_function if available (threshold 0)
	  - else predict_proba, positive class (threshold 0.5)
	  - else predict row by row (threshold 0.5)
	"""
	if hasattr(model, "decision_function"):
		return np.asarray(model.decision_function(X), dtype=float), 0.0
	if hasattr(model, "predict_proba"):
		proba = np.asarray(model.predict_proba(X))
		# positive class assumed in column 1
		scores = proba[:, 1] if proba.ndim == 2 and proba.shape[1] > 1 else proba.ravel()
		return scores.astype(float), 0.5
	return np.array([model.predict(x) for x in X], dtype=float), 0.5


# ---------- Benchmark helper ----------
def benchmark_classification(model, X_train: np.ndarray, y_train: np.ndarray,
							 X_test: np.ndarray, y_test: np.ndarray,
							 train_kwargs: Dict[str, Any] | None = None,
							 threshold_grid: np.ndarray | None = None) -> Dict[str, Any]:
	"""
	Trains a model (scratch `train` or scikit `fit`), times fit and scoring,
	then computes metrics at the base threshold of the score scale (0 for an SVM
	decision value, 0.5 for a probability) and at the best-F1 one.
	"""
	y_test = np.asarray(y_test)
	times: Dict[str, float] = {}
	with timer("fit", store=times):
		utils.train_model(model, X_train, y_train, **(train_kwargs or {}))

	with timer("predict(scores)", store=times):
		scores, base_thr = scores_of(model, X_test)

	base_metrics, _ = evaluate_at_threshold(y_test, scores, base_thr)
	base_metrics = {"thr": base_thr, **base_metrics}

	if threshold_grid is None:
		best, rec_list, prec_list, thr_list = search_best_threshold(y_test, scores)
	else:
		best = {"thr": 0.0, "f1": -1.0}
		rec_list, prec_list, thr_list = [], [], threshold_grid
		for thr in threshold_grid:
			m, _ = evaluate_at_threshold(y_test, scores, float(thr))
			rec_list.append(m["rec"]); prec_list.append(m["prec"])
			if m["f1"] > best["f1"]:
				best = {"thr": float(thr), **m}

	fpr, tpr = roc_curve_from_scores(y_test, scores)
	roc_auc = auc_trapz(fpr, tpr)
	pr_area = pr_auc(np.array(rec_list), np.array(prec_list))

	return {
		"model": model,
		"scores": scores,
		"times": times,
		"base_metrics": base_metrics,
		"best_metrics": best,
		"roc": (fpr, tpr, roc_auc),
		"pr": (np.array(rec_list), np.array(prec_list), pr_area),
	}

def benchmark_regression(model, X_train: np.ndarray, y_train: np.ndarray,
						 X_test: np.ndarray, y_test: np.ndarray,
						 train_kwargs: Dict[str, Any] | None = None) -> dict:
	y_test = np.asarray(y_test, dtype=float)
	times = {}
	with timer("fit", store=times):
		utils.train_model(model, X_train, y_train, **(train_kwargs or {}))
	with timer("predict", store=times):
		y_pred = np.asarray(model.predict(X_test), dtype=float)

	mse = float(np.mean((y_test - y_pred) ** 2))
	mae = float(np.mean(np.abs(y_test - y_pred)))
	ss_tot = float(np.sum((y_test - np.mean(y_test)) ** 2))
	ss_res = float(np.sum((y_test - y_pred) ** 2))
	r2 = 1.0 - (ss_res / ss_tot if ss_tot > 0 else 0.0)

	return {"model": model, "y_pred": y_pred, "times": times, "reg_metrics": {"mse": mse, "mae": mae, "r2": r2}}
