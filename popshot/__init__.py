"""
popshot
-------
Simulation and combat-resolution core for a timed arcade target shooter.

Entry point for embedding is popshot.systems.level.RoundController; the
headless demo driver runs with `python -m popshot`.
"""

__version__ = "0.1.0"
