"""Intensive property tests for laxdate.

Tests here are marked ``fuzz`` and skipped in normal runs.
Run them via: pytest -m fuzz

Python 3.13+.
"""
