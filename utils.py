#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np
import os
import pandas as pd
import logging
import yaml
from platform import system

# scikit-learn imports (aliases to avoid conflicts)
from sklearn.svm import SVC as SkSVC
from sklearn.neural_network import MLPClassifier as SkMLPClassifier
from sklearn.linear_model import LogisticRegression as SkLogisticRegression, LinearRegression as SkLinearRegression
from sklearn.neighbors import KNeighborsClassifier as SkKNeighborsClassifier

from models.SVM import SVM
from models.KNearestNeighbour import KNearestNeighbour
from models.LinearRegression import LinearRegression
from models.LogisticRegression import LogisticRegression
from networks.BackpropClassifier import BackpropClassifier

logging.basicConfig(level=logging.WARNING)
log = logging.getLogger(__name__)

def getPath(script_dir, file_dir):
	plat = system()
	if plat == "Windows":
		script_dir = script_dir.replace("/", "\\")
		file_dir = file_dir.replace("/", "\\")
	else:
		script_dir = script_dir.replace("\\", "/")
		file_dir = file_dir.replace("\\", "/")
	return script_dir, file_dir

def split(X: np.ndarray, y: np.ndarray, test_size=0.2, random_state=42) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
	rng = np.random.default_rng(random_state)
	indices = rng.permutation(len(y))
	split = int(len(y) * (1 - test_size))
	train_idx, test_idx = indices[:split], indices[split:]
	return X[train_idx], X[test_idx], y[train_idx], y[test_idx]

def standardize(X_train: np.ndarray, X_test: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
	mu = X_train.mean(axis=0); sigma = X_train.std(axis=0); sigma[sigma==0] = 1.0
	return (X_train - mu)/sigma, (X_test - mu)/sigma

def read_file(fname: str, sep: str) -> pd.DataFrame:
	script_dir = os.path.dirname(os.path.abspath(__file__))
	script_dir, file_dir = getPath(script_dir, fname)
	full_path = os.path.join(script_dir, file_dir)
	log.debug(f"Reading file: {full_path} (sep='{sep}')")
	return pd.read_csv(full_path, sep=sep)

def read_regression(fname: str) -> pd.DataFrame:
	df = read_file(fname, ",")
	df = df.fillna(df.mean(numeric_only=True))
	df = df.drop(columns=["id"], errors="ignore")
	return df

def read_classif(fname: str) -> pd.DataFrame:
	df = read_file(fname, ",")
	df = df.drop(columns=["Unnamed: 0"], errors="ignore")
	text_cols = df.select_dtypes(include=["object"]).columns
	# Yes/No columns become 1/0, any other text column is one-hot encoded
	binary = [c for c in text_cols if set(df[c].dropna().unique()) <= {"Yes", "No"}]
	for col in binary:
		df[col] = df[col].map({"Yes": 1, "No": 0})
	others = [c for c in text_cols if c not in binary]
	if others:
		df = pd.get_dummies(df, columns=others, drop_first=True, dtype=float)
	return df

def read_file_wtype(fname: str, typ: str) -> pd.DataFrame:
	if typ == "r":
		return read_regression(fname)
	else:
		return read_classif(fname)

def read_params(fname: str = "params.yaml") -> dict[str, dict[str, any]]:
	script_dir = os.path.dirname(os.path.abspath(__file__))
	script_dir, file_dir = getPath(script_dir, fname)
	with open(os.path.join(script_dir, file_dir), "r") as fp:
		params = yaml.safe_load(fp)
	return params or {}

def _section(params: dict, algo_name: str, typ: str, is_sci: bool) -> dict:
	return (
		(params or {}).get(algo_name, {})
			  .get("scikit" if is_sci else "scratch", {})
			  .get(typ, {})
		or {}
	)

def get_class(algo_name: str, typ: str, is_sci: bool = False):
	table = algos_sci_map if is_sci else algos_map
	try:
		return table[algo_name][typ]
	except KeyError:
		raise ValueError(f"{algo_name} doesn't support {type_map.get(typ, typ)}") from None

def build_model(algo_name: str, typ: str, params: dict, is_sci: bool = False):
	"""
	Instantiates a model with the hyperparameters read from params.yaml
	- For scikit: uses model.set_params(**par)
	- For scratch: passes the `init` section to the constructor
	"""
	ModelClass = get_class(algo_name, typ, is_sci)
	par = _section(params, algo_name, typ, is_sci)
	if is_sci:
		model = ModelClass()
		if par:
			model.set_params(**par)
	else:
		model = ModelClass(**(par.get("init") or {}))
	log.debug(f"{algo_name} ({'scikit-learn' if is_sci else 'scratch'}) [{typ}] built with {par}")
	return model

def train_params(algo_name: str, typ: str, params: dict) -> dict:
	return dict(_section(params, algo_name, typ, False).get("train") or {})

def train_model(model, X: np.ndarray, y: np.ndarray, **train_kwargs):
	"""Scratch models expose `train`, scikit estimators `fit`."""
	if hasattr(model, "train"):
		if getattr(model, "signed", False):
			y = np.where(np.asarray(y) <= 0, -1.0, 1.0)
		model.train(X, y, **train_kwargs)
	else:
		model.fit(X, y)
	return model

def print_params(algo_name: str, typ: str, params: dict) -> None:
	for is_sci in (False, True):
		par = _section(params, algo_name, typ, is_sci)
		print(f"\nHyperparameters applied to {algo_name} "
			  f"({'scikit-learn' if is_sci else 'scratch'}) [{typ}] :")
		for k, v in par.items():
			print(f"   {k}: {v}")
		print("-" * 60)

type_map = {"r": "regression", "c": "classification"}
algos_map = {
	"SVM": {"c": SVM},
	"NeuralNetwork": {"c": BackpropClassifier},
	"LogisticRegression": {"c": LogisticRegression},
	"KNN": {"c": KNearestNeighbour},
	"LinearRegression": {"r": LinearRegression},
}
algos_sci_map = {
	"SVM": {"c": SkSVC},
	"NeuralNetwork": {"c": SkMLPClassifier},
	"LogisticRegression": {"c": SkLogisticRegression},
	"KNN": {"c": SkKNeighborsClassifier},
	"LinearRegression": {"r": SkLinearRegression},
}
