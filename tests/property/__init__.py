"""Property-based tests for eitherkit.

Hypothesis checks the functor and monad laws and the ordering and
first-error-wins behaviour of the aggregation functions.
"""
