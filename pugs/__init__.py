"""Prediction Using Gibbs Sampling (PUGS) over Ensembles of Classifier Chains."""

__version__ = "0.1.0"
