#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np
import pytest

from errors import DimensionMismatch, NotTrainedError
from models.KNearestNeighbour import KNearestNeighbour
from models.LinearRegression import LinearRegression
from models.LogisticRegression import LogisticRegression
from models.MultinomialNaiveBayes import MultinomialNaiveBayes


# ---------- KNearestNeighbour ----------
@pytest.fixture
def lenses():
	features = [
		[6.0, 2.2, 4.0, 1.0], [5.7, 3.0, 4.2, 1.2], [5.7, 2.9, 4.2, 1.3],
		[4.9, 3.1, 1.5, 0.1], [5.4, 3.7, 1.5, 0.2], [5.0, 3.4, 1.6, 0.4],
		[6.7, 3.1, 5.6, 2.4], [6.3, 2.5, 5.0, 1.9], [6.5, 3.0, 5.2, 2.0],
	]
	labels = ["soft"] * 3 + ["medium"] * 3 + ["hard"] * 3
	return features, labels

def test_knn_majority_vote(lenses):
	knn = KNearestNeighbour(3)
	knn.train(*lenses)
	assert knn.predict([6.1, 2.8, 4.7, 1.2]) == "soft"
	assert knn.predict([5.3, 3.2, 1.3, 0.4]) == "medium"

def test_knn_tie_goes_to_nearest_class():
	knn = KNearestNeighbour(2)
	knn.train([[0.0], [1.0], [5.0]], ["a", "b", "b"])
	assert knn.predict([0.4]) == "a"
	assert knn.predict([0.6]) == "b"

def test_knn_errors(lenses):
	with pytest.raises(ValueError):
		KNearestNeighbour(0)
	knn = KNearestNeighbour(1)
	with pytest.raises(NotTrainedError):
		knn.predict([1.0, 2.0, 3.0, 4.0])
	knn.train(*lenses)
	with pytest.raises(DimensionMismatch):
		knn.predict([1.0, 2.0])


# ---------- LinearRegression ----------
def test_linear_regression_closed_form():
	ages = [18, 25, 32, 45, 60]
	heights = [160, 165, 170, 175, 180]
	model = LinearRegression()
	model.train(ages, heights)
	slope, intercept = np.polyfit(ages, heights, 1)
	assert model.slope == pytest.approx(slope)
	assert model.intercept == pytest.approx(intercept)
	np.testing.assert_allclose(model.predict([35, 10, 14]), slope * np.array([35, 10, 14]) + intercept)

def test_linear_regression_errors():
	model = LinearRegression()
	with pytest.raises(NotTrainedError):
		model.predict([1.0])
	with pytest.raises(ValueError):
		model.train([3.0, 3.0, 3.0], [1.0, 2.0, 3.0])
	with pytest.raises(DimensionMismatch):
		model.train([1.0, 2.0], [1.0])
	with pytest.raises(DimensionMismatch):
		model.train(np.ones((3, 2)), [1.0, 2.0, 3.0])


# ---------- LogisticRegression ----------
@pytest.fixture
def people():
	X = np.array([[18, 165], [25, 170], [32, 175], [45, 180], [60, 185],
				  [20, 160], [28, 168], [35, 172], [50, 178], [65, 190]], dtype=float)
	y = np.array([0, 0, 0, 1, 1, 0, 0, 1, 1, 1])
	return (X - X.mean(axis=0)) / X.std(axis=0), y

def test_logistic_regression_separates_people(people):
	X, y = people
	model = LogisticRegression()
	model.train(X, y, learning_rate=0.5, n_iters=2000)
	assert np.mean(model.predict(X) == y) >= 0.9
	assert model.weights[0] > 0

def test_logistic_regression_starts_at_one_half(people):
	X, y = people
	model = LogisticRegression()
	model.train(X, y, n_iters=0)
	np.testing.assert_array_equal(model.predict_proba(X), np.full(len(X), 0.5))
	np.testing.assert_array_equal(model.predict(X), np.ones(len(X), dtype=int))
	np.testing.assert_array_equal(model.predict(X, threshold=0.6), np.zeros(len(X), dtype=int))

def test_logistic_regression_first_step(people):
	X, y = people
	model = LogisticRegression()
	model.train(X, y, learning_rate=0.1, n_iters=1)
	error = 0.5 - y
	assert model.intercept == pytest.approx(-0.1 * error.mean())
	np.testing.assert_allclose(model.weights, -0.1 * X.T @ error / len(y))

def test_logistic_regression_errors(people):
	X, y = people
	model = LogisticRegression()
	with pytest.raises(NotTrainedError):
		model.predict(X)
	with pytest.raises(DimensionMismatch):
		model.train(X, y[:-1])


# ---------- MultinomialNaiveBayes ----------
@pytest.fixture
def tennis():
	dataset = [
		[1, "Sunny", "Hot", "High", "Weak"], [2, "Sunny", "Hot", "High", "Strong"],
		[3, "Overcast", "Hot", "High", "Weak"], [4, "Rain", "Mild", "High", "Weak"],
		[5, "Rain", "Cool", "Normal", "Weak"], [6, "Rain", "Cool", "Normal", "Strong"],
		[7, "Overcast", "Cool", "Normal", "Strong"], [8, "Sunny", "Mild", "High", "Weak"],
		[9, "Sunny", "Cool", "Normal", "Weak"], [10, "Rain", "Mild", "Normal", "Weak"],
		[11, "Sunny", "Mild", "Normal", "Strong"], [12, "Overcast", "Mild", "High", "Strong"],
		[13, "Overcast", "Hot", "Normal", "Weak"], [14, "Rain", "Mild", "High", "Strong"],
	]
	labels = ["No", "No", "Yes", "Yes", "Yes", "No", "Yes", "No", "Yes", "Yes", "Yes", "Yes", "Yes", "No"]
	return dataset, labels

def test_naive_bayes_play_tennis(tennis):
	nb = MultinomialNaiveBayes()
	nb.train(*tennis)
	assert nb.class_counts == {"No": 5, "Yes": 9}
	assert nb.predict([5, "Sunny", "Cool", "High", "Weak"]) == "No"
	assert nb.predict([15, "Overcast", "Cool", "Normal", "Weak"]) == "Yes"

def test_naive_bayes_unseen_values_are_smoothed(tennis):
	nb = MultinomialNaiveBayes()
	nb.train(*tennis)
	# nothing seen: log(1 / (5 + 2 + 1)) for "No" on the outlook position
	assert nb._log_likelihood("No", 1, "Snow") == pytest.approx(np.log(1 / 8))
	assert nb.predict([99, "Snow", "Freezing", "Low", "Calm"]) in {"No", "Yes"}

def test_naive_bayes_accumulates_counts(tennis):
	nb = MultinomialNaiveBayes()
	nb.train(*tennis)
	nb.train(*tennis)
	assert nb.class_counts == {"No": 10, "Yes": 18}
	assert nb.feature_counts["Yes"][1]["Overcast"] == 8

def test_naive_bayes_requires_training():
	with pytest.raises(NotTrainedError):
		MultinomialNaiveBayes().predict(["Sunny"])

def test_naive_bayes_length_mismatch():
	nb = MultinomialNaiveBayes()
	with pytest.raises(DimensionMismatch):
		nb.train([["a"], ["b"]], ["x"])
	assert not nb.class_counts
