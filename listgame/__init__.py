"""Permutations, work functions, pairwise game graphs and MRU move rules for online list update."""

__version__ = "0.1.0"