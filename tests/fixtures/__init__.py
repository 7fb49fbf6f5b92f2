"""Shared test fixtures and Hypothesis strategies for fpalgebra tests."""
