"""
World system exports.

Provides the per-tick simulation step and the interaction rules it runs.
"""

from popshot.systems.world.interaction_rules import InteractionRules
from popshot.systems.world.simulation_step import SimulationStep

__all__ = [
    'InteractionRules',
    'SimulationStep',
]
