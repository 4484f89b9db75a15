"""
spawn_policy.py
---------------
Decides which variant, if any, enters the round on a spawn tick.

Responsibilities
----------------
- Run the ordered spawn cascade: party override, gated rules, fallback bands.
- Enforce per-round ceilings and the "none live" rule for non-stacking bosses.
- Create the chosen entity through the EntityRegistry and count it.

The cascade order and the sequence of random draws are part of the game
balance. Each rule only draws once its round/ceiling/exclusivity gates
have passed, and the fallback's shared draw is taken before any rule runs.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from popshot.core.debug.debug_logger import DebugLogger
from popshot.core.errors import ConfigError
from popshot.core.runtime.game_settings import Timing
from popshot.core.services.config_manager import load_config
from popshot.core.services.event_manager import BossSpawnedEvent
from popshot.entities.entity_types import VariantTag, is_boss_class
from popshot.systems.entity_management.entity_registry import EntityRegistry

# Variant packages register their classes on import
import popshot.entities.targets  # noqa: F401
import popshot.entities.creatures  # noqa: F401
import popshot.entities.bosses  # noqa: F401
import popshot.entities.hazards  # noqa: F401
import popshot.entities.items  # noqa: F401


# ===========================================================
# Table Types
# ===========================================================

@dataclass(frozen=True)
class SpawnRule:
    """
    One gated check in the cascade.

    Attributes:
        name: Counter key (unique per rule)
        tag: Variant spawned when the rule passes
        min_round: First round the rule is considered
        ceiling: Max spawns per round, None for uncapped
        chance: Probability of passing once gates are open
        exclusive: Skip while an instance of tag is live
    """
    name: str
    tag: str
    min_round: int = 1
    ceiling: Optional[int] = None
    chance: float = 0.0
    exclusive: bool = False


@dataclass(frozen=True)
class FallbackBands:
    """Cumulative bands over the shared draw when no rule passed."""
    rare_band: float = 0.05
    rare_tag: str = VariantTag.DRAGON
    ground_min_round: int = 3
    ground_chance: float = 0.35
    ground_band: float = 0.25
    ground_tags: Tuple[str, ...] = (VariantTag.MOUSE, VariantTag.HEDGEHOG, VariantTag.GOPHER)
    ground_splits: Tuple[float, ...] = (0.33, 0.66)
    airborne_band: float = 0.75
    airborne_tag: str = VariantTag.BIRD
    default_tag: str = VariantTag.BALLOON

    def pick_ground(self, roll: float) -> str:
        for tag, split in zip(self.ground_tags, self.ground_splits):
            if roll < split:
                return tag
        return self.ground_tags[-1]


DEFAULT_SPAWN_TABLE = {
    "party": {"tag": VariantTag.BALLOON, "speed_multiplier": Timing.PARTY_SPEED_MULTIPLIER},
    "rules": [
        {"name": "birthday_cap", "tag": "birthday_cap", "min_round": 4, "ceiling": 1, "chance": 0.02},
        {"name": "bomb", "tag": "bomb", "min_round": 5, "ceiling": None, "chance": 0.015},
        {"name": "golden_balloon", "tag": "golden_balloon", "min_round": 3, "ceiling": 1, "chance": 0.03},
        {"name": "godzilla", "tag": "godzilla", "min_round": 4, "ceiling": 2, "chance": 0.010, "exclusive": True},
        {"name": "pterodactyl", "tag": "pterodactyl", "min_round": 5, "ceiling": 2, "chance": 0.010, "exclusive": True},
        {"name": "hydra", "tag": "hydra", "min_round": 6, "ceiling": 1, "chance": 0.008, "exclusive": True},
        {"name": "golden_clock", "tag": "golden_clock", "min_round": 2, "ceiling": 2, "chance": 0.015},
        {"name": "ammo_drop", "tag": "ammo_drop", "min_round": 1, "ceiling": 4, "chance": 0.015},
        {"name": "magazine_drop", "tag": "magazine_drop", "min_round": 1, "ceiling": None, "chance": 0.03},
        {"name": "shotgun_drop", "tag": "shotgun_drop", "min_round": 1, "ceiling": None, "chance": 0.02},
    ],
    "fallback": {},
}


# ===========================================================
# Spawn Policy
# ===========================================================

class SpawnPolicy:
    """Ordered, capped, short-circuiting spawn cascade."""

    def __init__(self, data: dict = None, strict: bool = False):
        """
        Args:
            data: Dict shaped like spawn_table.json (defaults used when None)
            strict: Raise ConfigError on a malformed table instead of falling back
        """
        data = data if data is not None else DEFAULT_SPAWN_TABLE
        try:
            self.party_tag, self.party_speed, self.rules, self.fallback = self._parse(data)
        except ConfigError as e:
            if strict:
                raise
            DebugLogger.warn(f"Invalid spawn table ({e}) - using defaults", category="loading")
            self.party_tag, self.party_speed, self.rules, self.fallback = self._parse(DEFAULT_SPAWN_TABLE)

    @classmethod
    def load(cls, filename: str = "spawn_table.json", strict: bool = False) -> "SpawnPolicy":
        data = load_config(filename, DEFAULT_SPAWN_TABLE, strict=strict)
        policy = cls(data, strict=strict)
        DebugLogger.init_sub(f"Spawn cascade: {len(policy.rules)} rules + fallback")
        return policy

    # ===========================================================
    # Parsing
    # ===========================================================

    @staticmethod
    def _parse(data: dict):
        party = data.get("party", {})
        party_tag = party.get("tag", VariantTag.BALLOON)
        party_speed = float(party.get("speed_multiplier", Timing.PARTY_SPEED_MULTIPLIER))

        rules = []
        seen = set()
        for raw in data.get("rules", []):
            try:
                rule = SpawnRule(
                    name=raw["name"],
                    tag=raw["tag"],
                    min_round=int(raw.get("min_round", 1)),
                    ceiling=None if raw.get("ceiling") is None else int(raw["ceiling"]),
                    chance=float(raw.get("chance", 0.0)),
                    exclusive=bool(raw.get("exclusive", False)),
                )
            except (KeyError, TypeError, ValueError) as e:
                raise ConfigError(f"bad spawn rule {raw!r}: {e}") from e
            if rule.name in seen:
                raise ConfigError(f"duplicate spawn rule name '{rule.name}'")
            if not 0.0 <= rule.chance <= 1.0:
                raise ConfigError(f"rule '{rule.name}' chance {rule.chance} outside [0, 1]")
            seen.add(rule.name)
            rules.append(rule)

        fallback_raw = dict(data.get("fallback", {}))
        for key in ("ground_tags", "ground_splits"):
            if key in fallback_raw:
                fallback_raw[key] = tuple(fallback_raw[key])
        try:
            fallback = FallbackBands(**fallback_raw)
        except TypeError as e:
            raise ConfigError(f"bad fallback bands: {e}") from e
        if not fallback.ground_tags:
            raise ConfigError("fallback needs at least one ground tag")

        return party_tag, party_speed, tuple(rules), fallback

    # ===========================================================
    # Decision
    # ===========================================================

    def choose_variant(self, context) -> Tuple[str, float, Optional[SpawnRule]]:
        """
        Walk the cascade once.

        Args:
            context: RoundContext (round number, rng, counters, live entities, ledger)

        Returns:
            (tag, speed_multiplier, rule) where rule is None for party
            and fallback picks
        """
        base_speed = context.config.speed_multiplier

        if context.ledger.party_active:
            return self.party_tag, base_speed * self.party_speed, None

        rng = context.rng
        roll = rng.random()

        for rule in self.rules:
            if self._rule_passes(rule, context):
                return rule.tag, base_speed, rule

        return self._fallback(roll, context), base_speed, None

    def _rule_passes(self, rule: SpawnRule, context) -> bool:
        if context.round_number < rule.min_round:
            return False
        if rule.ceiling is not None and context.spawn_counts.get(rule.name, 0) >= rule.ceiling:
            return False
        if rule.exclusive and context.spawn_manager.any_live(rule.tag):
            return False
        return context.rng.random() < rule.chance

    def _fallback(self, roll: float, context) -> str:
        bands = self.fallback
        if roll < bands.rare_band:
            return bands.rare_tag
        if (context.round_number >= bands.ground_min_round
                and context.rng.random() < bands.ground_chance
                and roll < bands.ground_band):
            return bands.pick_ground(context.rng.random())
        if roll > bands.airborne_band:
            return bands.airborne_tag
        return bands.default_tag

    # ===========================================================
    # Spawning
    # ===========================================================

    def spawn(self, context):
        """
        Choose a variant and add it to the round.

        Returns:
            The new entity, or None if the registry could not build it
        """
        tag, speed_multiplier, rule = self.choose_variant(context)
        entity = EntityRegistry.spawn(tag, context.bounds, context.rng, speed_multiplier)
        if entity is None:
            return None

        if rule is not None:
            context.spawn_counts[rule.name] = context.spawn_counts.get(rule.name, 0) + 1

        context.spawn_manager.add(entity)

        if is_boss_class(tag):
            DebugLogger.action(f"Boss entered: {tag}", category="spawn")
            context.events.dispatch(BossSpawnedEvent(tag=tag))

        return entity
