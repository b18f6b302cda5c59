#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import argparse
import logging
import numpy as np
import utils
import bench
import plot

parser = argparse.ArgumentParser(description="Machine learning algorithms implementation", formatter_class=argparse.ArgumentDefaultsHelpFormatter)
parser.add_argument("-f", "--file", help="input file", required=True)
parser.add_argument("-t", "--type", help="algorithm type", choices=["r", "regression", "c", "classification"], default="c")
parser.add_argument("-F", "--to-find", help="dependant var to find", required=True)
parser.add_argument("-a", "--algorithm", help="algorithm to train and use", choices=list(utils.algos_map), required=True)
parser.add_argument("-p", "--params", help="hyperparameters file", default="params.yaml")
parser.add_argument("--show-params", help="print the hyperparameters in use", action="store_true")
parser.add_argument("--no-plot", help="skip the matplotlib figures", action="store_true")
parser.add_argument("-v", "--verbose", help="debug logging", action="store_true")


def main(argv=None):
	args = parser.parse_args(argv)
	args.type = args.type[0]
	if args.verbose:
		logging.getLogger().setLevel(logging.DEBUG)

	params = utils.read_params(args.params)
	if args.show_params:
		utils.print_params(args.algorithm, args.type, params)
	model = utils.build_model(args.algorithm, args.type, params)
	model_sci = utils.build_model(args.algorithm, args.type, params, is_sci=True)
	train_kwargs = utils.train_params(args.algorithm, args.type, params)

	# Read and prepare data
	df = utils.read_file_wtype(args.file, args.type)

	y = df[args.to_find].to_numpy(dtype=float)
	X = (df.drop(columns=[args.to_find])
		.select_dtypes(include=[np.number])
		.to_numpy(dtype=float, copy=True))

	X_train, X_test, y_train, y_test = utils.split(X, y)
	X_train, X_test = utils.standardize(X_train, X_test)

	labels = [args.algorithm, f"{args.algorithm}_scikit"]
	if args.type == "c":
		res = bench.benchmark_classification(model, X_train, y_train, X_test, y_test, train_kwargs)
		res_sci = bench.benchmark_classification(model_sci, X_train, y_train, X_test, y_test)

		plot.print_classification_report([res, res_sci], labels)
		if args.algorithm == "SVM":
			plot.print_svm_summary(model)
		if not args.no_plot:
			plot.plot_roc([res, res_sci], labels)
			plot.plot_pr([res, res_sci], labels)
			if args.algorithm == "NeuralNetwork":
				plot.plot_loss_history(model.loss_history_)
	else:
		res = bench.benchmark_regression(model, X_train, y_train, X_test, y_test, train_kwargs)
		res_sci = bench.benchmark_regression(model_sci, X_train, y_train, X_test, y_test)

		plot.print_regression_report([res, res_sci], labels)
		if not args.no_plot:
			plot.plot_regression_parity(y_test, [res, res_sci], labels)

if __name__ == "__main__":
	main()
