"""HEAT test suite."""
