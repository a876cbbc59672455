"""Athlete result aggregation and ranking engine."""
