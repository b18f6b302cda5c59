#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #


class UnsupportedKernel(ValueError):
	"""Raised when a kernel name is not one of linear, polynomial, rbf."""

	def __init__(self, name):
		super().__init__(f"Unsupported kernel: {name}")
		self.name = name


class DimensionMismatch(ValueError):
	"""Raised when two vectors (or a vector and a layer) disagree in length."""


class NotTrainedError(RuntimeError):
	def __init__(self, model: str):
		super().__init__(f"The model {model} isn't trained, call `train` first")
