# src/numeric_demos/__init__.py
"""
Two small numeric demos:

  - a Galton board ("bean machine") Monte Carlo simulation
    (bean_machine.py, histogram.py)
  - a Numerov-method search for the ground state energy of a quantum
    harmonic oscillator (numerov.py, ground_state.py)

The two halves share nothing but the error types and the logging setup.
"""
