"""Fuzz testing infrastructure for intscan.

This package contains:
- shadow_strtol: Simple regex-based reference implementation for differential testing
- test_engine_property: Differential and robustness properties of the parser engine

Python 3.13+.
"""
