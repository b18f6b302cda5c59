#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import matplotlib
matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest
from sklearn.svm import SVC as SkSVC

import bench
import main
import plot
import utils
from models.SVM import SVM
from networks.BackpropClassifier import BackpropClassifier


@pytest.fixture
def people_csv(tmp_path):
	rng = np.random.default_rng(0)
	age = rng.uniform(15, 70, size=60)
	height = 150 + 0.5 * age + rng.normal(scale=3.0, size=60)
	df = pd.DataFrame({
		"Age": age.round(1),
		"Height": height.round(1),
		"City": rng.choice(["Paris", "Lyon", "Nantes"], size=60),
		"Tall": np.where(height > 165, "Yes", "No"),
	})
	path = tmp_path / "people.csv"
	df.to_csv(path, index=False)
	return path


# ---------- metrics ----------
def test_metrics_from_preds():
	m = bench.metrics_from_preds(np.array([1, 1, 0, 0]), np.array([1, 0, 1, 0]))
	assert (m["tp"], m["tn"], m["fp"], m["fn"]) == (1, 1, 1, 1)
	assert m["acc"] == 0.5 and m["f1"] == 0.5

def test_perfect_scores_have_unit_auc():
	y = np.array([0, 0, 1, 1])
	fpr, tpr = bench.roc_curve_from_scores(y, np.array([-2.0, -1.0, 1.0, 2.0]))
	assert bench.auc_trapz(fpr, tpr) == pytest.approx(1.0)

@pytest.mark.parametrize("fpr, tpr", [
	([1, 1, .5, 0, 0, 0], [1, 1, 1, 1, .5, 0]),
	([0, 0, 0, .5, 1, 1], [0, .5, 1, 1, 1, 1]),
])
def test_roc_auc_ignores_point_order_on_vertical_steps(fpr, tpr):
	assert bench.auc_trapz(np.array(fpr, dtype=float), np.array(tpr, dtype=float)) == pytest.approx(1.0)

def test_pr_auc_keeps_the_precision_drop_at_full_recall():
	rec = np.array([1, 1, .5, .5, 0])
	prec = np.array([.5, 1, 1, 1, 1])
	assert bench.pr_auc(rec, prec) == pytest.approx(1.0)
	assert bench.pr_auc(rec[::-1], prec[::-1]) == pytest.approx(1.0)

def test_scores_of_picks_the_right_threshold(blobs):
	X, y = blobs
	svm = SVM(random_state=0)
	utils.train_model(svm, X, (y > 0).astype(int))
	assert bench.scores_of(svm, X)[1] == 0.0
	clf = BackpropClassifier(epochs=5).train(X, (y > 0).astype(int))
	assert bench.scores_of(clf, X)[1] == 0.5


# ---------- configuration ----------
def test_params_file_builds_every_model():
	params = utils.read_params()
	for algo, by_type in utils.algos_map.items():
		for typ in by_type:
			assert utils.build_model(algo, typ, params) is not None
			assert utils.build_model(algo, typ, params, is_sci=True) is not None

def test_scratch_svm_uses_init_and_train_sections():
	params = {"SVM": {"scratch": {"c": {"init": {"kernel": "polynomial", "degree": 2},
										"train": {"C": 5.0}}}}}
	model = utils.build_model("SVM", "c", params)
	assert model.kernel.name == "polynomial" and model.kernel.degree == 2
	assert utils.train_params("SVM", "c", params) == {"C": 5.0}
	assert utils.train_params("KNN", "c", params) == {}

def test_scikit_params_go_through_set_params():
	params = {"SVM": {"scikit": {"c": {"C": 3.0, "kernel": "linear"}}}}
	model = utils.build_model("SVM", "c", params, is_sci=True)
	assert isinstance(model, SkSVC) and model.C == 3.0

def test_unsupported_type_is_rejected():
	with pytest.raises(ValueError, match="KNN doesn't support regression"):
		utils.get_class("KNN", "r")


# ---------- data ----------
def test_split_is_seeded():
	X = np.arange(20).reshape(10, 2)
	y = np.arange(10)
	a = utils.split(X, y, test_size=0.3, random_state=1)
	b = utils.split(X, y, test_size=0.3, random_state=1)
	assert len(a[0]) == 7 and len(a[1]) == 3
	for u, v in zip(a, b):
		np.testing.assert_array_equal(u, v)

def test_read_classif_encodes_text(people_csv):
	df = utils.read_classif(str(people_csv))
	assert set(df["Tall"].unique()) <= {0, 1}
	assert "City" not in df.columns
	assert any(c.startswith("City_") for c in df.columns)


# ---------- benchmark + CLI ----------
def test_benchmark_scratch_svm(blobs):
	X, y = blobs
	y01 = (y > 0).astype(int)
	res = bench.benchmark_classification(SVM("linear", random_state=0), X[:30], y01[:30], X[30:], y01[30:])
	assert res["base_metrics"]["acc"] >= 0.9
	assert set(res["times"]) == {"fit", "predict(scores)"}

def test_report_shows_the_base_threshold_of_each_score_scale(blobs, capsys):
	X, y = blobs
	y01 = (y > 0).astype(int)
	res_svm = bench.benchmark_classification(SVM("linear", random_state=0), X[:30], y01[:30], X[30:], y01[30:])
	res_net = bench.benchmark_classification(BackpropClassifier(epochs=5), X[:30], y01[:30], X[30:], y01[30:])
	assert res_svm["base_metrics"]["thr"] == 0.0
	assert res_net["base_metrics"]["thr"] == 0.5
	plot.print_classification_report([res_svm, res_net], ["SVM", "Network"])
	out = capsys.readouterr().out
	assert "base@thr=0:" in out
	assert "base@thr=0.5:" in out

def test_benchmark_regression():
	x = np.linspace(0, 10, 30).reshape(-1, 1)
	y = 3.0 * x[:, 0] + 1.0
	res = bench.benchmark_regression(utils.build_model("LinearRegression", "r", {}), x, y, x, y)
	assert res["reg_metrics"]["r2"] == pytest.approx(1.0)

def test_cli_classification(people_csv, capsys):
	main.main(["-f", str(people_csv), "-t", "c", "-F", "Tall", "-a", "SVM", "--no-plot"])
	out = capsys.readouterr().out
	assert "Classification report" in out
	assert "SVM_scikit" in out
	assert "support vectors=" in out

def test_loss_plot_renders(monkeypatch):
	monkeypatch.setattr(plot.plt, "show", lambda: None)
	plot.plot_loss_history([0.3, 0.2, 0.1])
	plot.plt.close("all")
