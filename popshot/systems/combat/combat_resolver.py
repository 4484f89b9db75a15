"""
combat_resolver.py
------------------
Resolves player attacks and hazard detonations against the live entity set.

Responsibilities
----------------
- Primary (point) hits: newest-first scan, at most one entity resolved.
- Secondary (area) hits: every qualifying entity, one summed score delta.
- Hazard detonation: large blast, idempotent through the deletion flag.
- Pickup effects applied to the round clock and the resource ledger.

Every resolution collects its targets before changing anything, then
applies score, deletions and ledger effects in one block. Nothing here
draws or talks to the network; results go out as FloatingText feedback,
events, and the returned AttackResult.
"""

from dataclasses import dataclass, field
from typing import Optional

from popshot.core.debug.debug_logger import DebugLogger
from popshot.core.runtime.game_settings import Combat, Resources
from popshot.core.services.event_manager import (
    BossKilledEvent, HazardDetonatedEvent, PickupCollectedEvent, TargetPoppedEvent,
)
from popshot.core.utils.hit_geometry import (
    center_distance, distance_to_anchor_rect, is_finite_point,
)
from popshot.entities.entity_types import (
    BonusType, is_boss_class, is_hazard_class, is_pickup_class, is_plain_scoring,
)
from popshot.entities.feedback import FloatingText


# ===========================================================
# Result Type
# ===========================================================

@dataclass
class AttackResult:
    """
    Outcome of one resolution.

    Attributes:
        kind: "primary", "auto", "area" or "detonation"
        x, y: Attack point (hazard position for detonations)
        score_delta: Score change applied by this resolution itself
        affected: Entities hit, damaged or collected
        killed_bosses: Bosses this resolution finished off
        bonus: Bonus type collected by a primary hit, if any
        detonations: Chained hazard detonations
    """
    kind: str
    x: float
    y: float
    score_delta: int = 0
    affected: list = field(default_factory=list)
    killed_bosses: list = field(default_factory=list)
    bonus: Optional[str] = None
    detonations: list = field(default_factory=list)

    @property
    def hit(self) -> bool:
        return bool(self.affected)

    @property
    def total_delta(self) -> int:
        """Score change including chained detonations."""
        return self.score_delta + sum(d.score_delta for d in self.detonations)


BONUS_LABELS = {
    BonusType.TIME: ("+10s", "cyan"),
    BonusType.FULL_AUTO: ("FULL AUTO!", "gold"),
    BonusType.PRIMARY_AMMO: ("+10 AMMO", "gold"),
    BonusType.SECONDARY_AMMO: ("+5 SHELLS", "brown"),
    BonusType.PARTY: ("PARTY MODE!", "magenta"),
}


# ===========================================================
# Combat Resolver
# ===========================================================

class CombatResolver:
    """Applies attacks to a RoundContext."""

    def __init__(self, context):
        """
        Args:
            context: RoundContext holding entities, score, ledger and events
        """
        self.context = context
        DebugLogger.init_entry("CombatResolver Initialized")

    # ===========================================================
    # Primary Attack
    # ===========================================================

    def resolve_primary(self, x: float, y: float, consume_ammo: bool = True) -> Optional[AttackResult]:
        """
        Resolve a point attack.

        While full-auto runs, a player shot only moves the aim point; the
        auto-fire cadence issues the actual shots with consume_ammo=False.

        Args:
            x, y: Attack point
            consume_ammo: Debit one primary round (False for auto-fire)

        Returns:
            AttackResult, or None when the shot was not fired
        """
        ctx = self.context
        ledger = ctx.ledger

        if consume_ammo:
            ledger.set_aim(x, y)
            if ledger.full_auto_active:
                return None
            if not ledger.spend_primary():
                DebugLogger.trace("Primary attack declined: out of ammo")
                return None
            ctx.stats.add_shot("primary")
            result = AttackResult("primary", x, y)
        else:
            ctx.stats.add_shot("auto")
            result = AttackResult("auto", x, y)

        target = self._topmost_hit(x, y)
        if target is None:
            return result

        tag = target.tag
        result.affected.append(target)

        if is_boss_class(tag):
            self._hit_boss(target, x, y, result)
        elif is_hazard_class(tag):
            detonation = self.detonate(target)
            if detonation is not None:
                result.detonations.append(detonation)
        elif is_pickup_class(tag):
            self._collect(target, x, y, result)
        elif is_plain_scoring(tag):
            self._pop(target, result)

        return result

    def _topmost_hit(self, x, y):
        """Newest entity containing the point, or None."""
        for entity in reversed(self.context.spawn_manager.entities):
            if entity.hit_test(x, y):
                return entity
        return None

    def _hit_boss(self, boss, x, y, result):
        ctx = self.context
        bonus = ctx.rng.randint(*Combat.BOSS_HIT_BONUS)
        killed = boss.take_damage(Combat.PRIMARY_BOSS_DAMAGE)

        delta = bonus + (boss.kill_points if killed else 0)
        result.score_delta = ctx.add_score(delta)
        ctx.add_feedback(FloatingText.for_points(x, y, bonus))

        if killed:
            result.killed_bosses.append(boss)
            self._announce_kill(boss)
            ctx.add_feedback(FloatingText(x, y - 50, f"KILLED! +{boss.kill_points}", "lime"))

    def _pop(self, target, result):
        ctx = self.context
        points = target.points
        target.mark_for_deletion()

        result.score_delta = ctx.add_score(points)
        ctx.stats.add_pops()
        ctx.add_feedback(FloatingText.for_points(target.x, target.y, points))
        ctx.events.dispatch(TargetPoppedEvent(tag=target.tag, points=points, position=(target.x, target.y)))

    def _collect(self, pickup, x, y, result):
        ctx = self.context
        pickup.mark_for_deletion()
        self.apply_bonus(pickup.bonus_type)

        result.bonus = pickup.bonus_type
        ctx.stats.add_pickup()
        text, color = BONUS_LABELS.get(pickup.bonus_type, (pickup.bonus_type, "white"))
        ctx.add_feedback(FloatingText(x, y, text, color))
        ctx.events.dispatch(PickupCollectedEvent(bonus_type=pickup.bonus_type, position=(x, y)))

    # ===========================================================
    # Bonus Effects
    # ===========================================================

    def apply_bonus(self, bonus_type: str):
        """Apply one pickup effect to the round clock or the ledger."""
        ctx = self.context
        ledger = ctx.ledger

        if bonus_type == BonusType.TIME:
            ctx.time_left_ms += Resources.PICKUP_TIME_MS
        elif bonus_type == BonusType.FULL_AUTO:
            ledger.activate_full_auto(Resources.FULL_AUTO_DURATION_MS)
        elif bonus_type == BonusType.PRIMARY_AMMO:
            ledger.add_primary(Resources.PICKUP_PRIMARY)
        elif bonus_type == BonusType.SECONDARY_AMMO:
            ledger.add_secondary(Resources.PICKUP_SECONDARY)
        elif bonus_type == BonusType.PARTY:
            ledger.activate_party(Resources.PARTY_DURATION_MS)
        else:
            DebugLogger.warn(f"Unknown bonus type '{bonus_type}' ignored", category="combat")
            return

        DebugLogger.action(f"Bonus applied: {bonus_type}", category="combat")

    # ===========================================================
    # Secondary Attack
    # ===========================================================

    def resolve_area(self, x: float, y: float) -> Optional[AttackResult]:
        """
        Resolve an area attack around (x, y).

        Pickups are immune. Hazards only go off on a direct hit within
        AREA_HAZARD_TRIGGER and detonate after the blast has been applied.

        Returns:
            AttackResult, or None when out of secondary ammo
        """
        ctx = self.context
        if not ctx.ledger.spend_secondary():
            DebugLogger.trace("Area attack declined: out of ammo")
            return None
        ctx.stats.add_shot("secondary")

        result = AttackResult("area", x, y)
        hazards, bosses, plain = [], [], []

        for entity in reversed(ctx.spawn_manager.live_entities()):
            if not is_finite_point(entity.x, entity.y):
                continue
            tag = entity.tag
            if is_pickup_class(tag):
                continue
            if is_hazard_class(tag):
                if center_distance(x, y, entity.x, entity.y) < Combat.AREA_HAZARD_TRIGGER:
                    hazards.append(entity)
            elif is_boss_class(tag):
                gap = distance_to_anchor_rect(x, y, entity.x, entity.y, entity.width, entity.height)
                if gap < Combat.AREA_BLAST_RADIUS:
                    bosses.append(entity)
            elif is_plain_scoring(tag):
                if center_distance(x, y, entity.x, entity.y) < entity.radius + Combat.AREA_BLAST_RADIUS:
                    plain.append(entity)

        delta = 0
        for boss in bosses:
            if boss.take_damage(Combat.AREA_BOSS_DAMAGE):
                delta += boss.kill_points
                result.killed_bosses.append(boss)
            result.affected.append(boss)

        for target in plain:
            target.mark_for_deletion()
            delta += target.points
            result.affected.append(target)

        if plain:
            ctx.stats.add_pops(len(plain))
        for boss in result.killed_bosses:
            self._announce_kill(boss)

        if result.affected:
            result.score_delta = ctx.add_score(delta)
            sign = "+" if delta >= 0 else ""
            ctx.add_feedback(FloatingText(x, y, f"BOOM! {sign}{delta}", "orange"))
        else:
            ctx.add_feedback(FloatingText(x, y, "BOOM!", "orange"))

        for hazard in hazards:
            detonation = self.detonate(hazard)
            if detonation is not None:
                result.affected.append(hazard)
                result.detonations.append(detonation)

        DebugLogger.trace(
            f"Area at ({x:.0f}, {y:.0f}): {len(result.affected)} affected, delta {delta:+d}",
            category="combat"
        )
        return result

    # ===========================================================
    # Hazard Detonation
    # ===========================================================

    def detonate(self, hazard) -> Optional[AttackResult]:
        """
        Blow up a hazard.

        A hazard already marked for deletion is left alone, so the fuse
        path and a direct hit in the same tick resolve only once.

        Returns:
            AttackResult, or None if the hazard was already gone
        """
        if hazard.marked_for_deletion:
            return None

        ctx = self.context
        hazard.detonated = True
        hazard.mark_for_deletion()
        hx, hy = hazard.x, hazard.y

        result = AttackResult("detonation", hx, hy)
        victims = []
        for entity in ctx.spawn_manager.live_entities():
            tag = entity.tag
            if is_pickup_class(tag) or is_hazard_class(tag):
                continue
            if not is_finite_point(entity.x, entity.y):
                continue
            if center_distance(entity.x, entity.y, hx, hy) < Combat.DETONATION_RADIUS:
                victims.append(entity)

        delta = 0
        popped = 0
        for entity in victims:
            if is_boss_class(entity.tag):
                if entity.take_damage(Combat.DETONATION_BOSS_DAMAGE):
                    delta += entity.kill_points
                    result.killed_bosses.append(entity)
            else:
                entity.mark_for_deletion()
                delta += entity.points
                popped += 1
            result.affected.append(entity)

        ctx.stats.add_detonation()
        if popped:
            ctx.stats.add_pops(popped)
        for boss in result.killed_bosses:
            self._announce_kill(boss)

        if result.affected:
            result.score_delta = ctx.add_score(delta)
            sign = "+" if delta >= 0 else ""
            ctx.add_feedback(FloatingText(hx, hy, f"KA-BOOM! {sign}{delta}", "red"))
        else:
            ctx.add_feedback(FloatingText(hx, hy, "KA-BOOM!", "red"))

        DebugLogger.action(
            f"{type(hazard).__name__} detonated: {len(result.affected)} affected, delta {delta:+d}",
            category="combat"
        )
        ctx.events.dispatch(HazardDetonatedEvent(
            tag=hazard.tag, position=(hx, hy),
            affected=len(result.affected), score_delta=result.score_delta,
        ))
        return result

    # ===========================================================
    # Helpers
    # ===========================================================

    def _announce_kill(self, boss):
        ctx = self.context
        ctx.stats.add_boss_kill()
        ctx.events.dispatch(BossKilledEvent(
            tag=boss.tag, kill_points=boss.kill_points, position=(boss.x, boss.y)
        ))
