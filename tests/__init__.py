"""Test suite for bouncecurve.

Test Structure:
- unit/curves/: Bounce profile, evaluator, generators, registry
- unit/config/: Config models and loading
"""
