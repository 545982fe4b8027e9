"""
Memoization Benchmark.

Times a direct call of a zero-argument function against a first call
routed through an identity-keyed memo cache and a later cache hit, and
reports which path was faster and by how many milliseconds.
"""

__version__ = "0.1.0"
