"""
interaction_rules.py
--------------------
Entity-versus-entity rules run once per tick, after every entity has moved.

Responsibilities
----------------
- Ground bosses trample small ground creatures they walk over.
- Flying predators snatch airborne nuisances they pass.
- Lost creatures cost a small random penalty, floored at zero score.
- Relay pending boss vocalizations as events.
- Set off hazards whose fuse has burned down.

Proximity is an absolute-distance box between anchor points, not a shape
intersection.
"""

from popshot.core.debug.debug_logger import DebugLogger
from popshot.core.runtime.game_settings import Interaction
from popshot.core.services.event_manager import BossVocalizeEvent, CreatureEatenEvent
from popshot.core.utils.hit_geometry import within_box
from popshot.entities.entity_types import (
    is_airborne_nuisance, is_boss_class, is_flying_predator,
    is_ground_boss, is_ground_creature, is_hazard_class,
)
from popshot.entities.feedback import FloatingText


class InteractionRules:
    """Applies boss/creature and hazard rules to a RoundContext."""

    def __init__(self, context, resolver):
        """
        Args:
            context: RoundContext to act on
            resolver: CombatResolver used for fuse detonations
        """
        self.context = context
        self.resolver = resolver

    def apply(self) -> int:
        """
        Run every rule once.

        Returns:
            int: Number of creatures lost to bosses this tick
        """
        lost = 0
        for boss in self.context.spawn_manager.live_of(is_boss_class):
            self._relay_vocalize(boss)
            if is_ground_boss(boss.tag):
                lost += self._devour(boss, is_ground_creature, Interaction.TRAMPLE_BOX)
            if is_flying_predator(boss.tag):
                lost += self._devour(boss, is_airborne_nuisance, Interaction.SNATCH_BOX)

        self._burn_fuses()
        return lost

    # ===========================================================
    # Boss Rules
    # ===========================================================

    def _relay_vocalize(self, boss):
        if boss.consume_vocalize():
            self.context.events.dispatch(BossVocalizeEvent(tag=boss.tag, position=(boss.x, boss.y)))

    def _devour(self, boss, prey_filter, box) -> int:
        half_w, half_h = box
        eaten = 0
        for prey in self.context.spawn_manager.live_of(prey_filter):
            if within_box(boss.x, boss.y, prey.x, prey.y, half_w, half_h):
                self._lose_creature(boss, prey)
                eaten += 1
        return eaten

    def _lose_creature(self, boss, prey):
        ctx = self.context
        penalty = ctx.rng.randint(*Interaction.PENALTY_RANGE)

        prey.mark_for_deletion()
        ctx.add_score(-penalty, floor=0)
        ctx.stats.add_creature_lost()
        ctx.add_feedback(FloatingText(prey.x, prey.y, f"-{penalty}", "red"))

        DebugLogger.state(f"{boss.tag} ate {prey.tag} (-{penalty})", category="interaction")
        ctx.events.dispatch(CreatureEatenEvent(
            boss_tag=boss.tag, creature_tag=prey.tag,
            penalty=penalty, position=(prey.x, prey.y),
        ))

    # ===========================================================
    # Hazards
    # ===========================================================

    def _burn_fuses(self):
        for hazard in self.context.spawn_manager.live_of(is_hazard_class):
            if hazard.fuse_expired:
                self.resolver.detonate(hazard)
