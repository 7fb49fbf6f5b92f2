"""Property-based tests for fpalgebra.

This module contains Hypothesis tests that verify the monad laws and the
classification, match and tap invariants of the Option and Result algebras.
"""
