"""Pitch analysis stages: spectrum, fundamental estimate, comparison."""

from .spectral_analyzer import SpectralAnalyzer
from .fundamental_estimator import FundamentalEstimator
from .tuning_comparator import TuningComparator

__all__ = ["SpectralAnalyzer", "FundamentalEstimator", "TuningComparator"]
