# simulations/__init__.py
"""
Command-line experiments on top of numeric_demos.

Run via:
    python -m simulations.cli bean --size 50 --depth 50 --trials 100000
    python -m simulations.cli -vv ground-state
"""
