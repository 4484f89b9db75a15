"""
Combat system exports.
"""

from popshot.systems.combat.combat_resolver import AttackResult, CombatResolver

__all__ = [
    'AttackResult',
    'CombatResolver',
]
