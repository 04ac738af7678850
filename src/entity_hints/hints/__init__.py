"""Hint providers and the manager that drives them."""
