"""Fuzz testing infrastructure for lazyshrink.

This package contains:
- test_shrinkers_property: Universal shrinker properties over generated
  nested values (strict simplicity, purity, determinism, termination)

Python 3.13+.
"""
