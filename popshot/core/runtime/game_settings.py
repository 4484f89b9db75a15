"""
game_settings.py
----------------
Centralized constants for the simulation core.

Round tables and spawn probabilities are data (see config/*.json);
the values here are fixed gameplay rules shared by several systems.
"""


# ===========================================================
# Canvas
# ===========================================================

class Display:
    """Default canvas size when the caller does not supply one."""
    WIDTH: int = 1280
    HEIGHT: int = 720


# ===========================================================
# Bounds & Margins
# ===========================================================

class Bounds:
    """Offscreen margins used by self-expiry checks."""
    CREATURE_EXIT_MARGIN: int = 50
    PICKUP_CLEANUP_MARGIN: int = 50
    CLOCK_CLEANUP_MARGIN: int = 100
    HAZARD_CLEANUP_MARGIN: int = 300


# ===========================================================
# Combat
# ===========================================================

class Combat:
    """Attack resolution rules."""
    PRIMARY_BOSS_DAMAGE: int = 1
    BOSS_HIT_BONUS: tuple = (1, 5)

    AREA_BLAST_RADIUS: float = 120.0
    AREA_HAZARD_TRIGGER: float = 40.0   # direct-hit zone for hazards
    AREA_BOSS_DAMAGE: int = 5

    DETONATION_RADIUS: float = 360.0
    DETONATION_BOSS_DAMAGE: int = 10


# ===========================================================
# Resources
# ===========================================================

class Resources:
    """Ammunition, pickup grants and temporary modes."""
    PRIMARY_AMMO: int = 50
    SECONDARY_AMMO: int = 5

    PICKUP_PRIMARY: int = 10
    PICKUP_SECONDARY: int = 5
    PICKUP_TIME_MS: float = 10_000.0

    FULL_AUTO_DURATION_MS: float = 5_000.0
    FULL_AUTO_CADENCE_MS: float = 80.0
    FULL_AUTO_SPREAD: float = 20.0
    TRACE_ORIGIN_JITTER: float = 50.0

    PARTY_DURATION_MS: float = 5_000.0


# ===========================================================
# Interactions
# ===========================================================

class Interaction:
    """Boss-versus-creature proximity boxes (|dx|, |dy|) and penalties."""
    TRAMPLE_BOX: tuple = (50.0, 60.0)
    SNATCH_BOX: tuple = (60.0, 45.0)
    PENALTY_RANGE: tuple = (1, 3)


# ===========================================================
# Timing
# ===========================================================

class Timing:
    """Spawn cadence overrides and feedback lifetimes."""
    PARTY_SPAWN_INTERVAL_MS: float = 40.0
    PARTY_SPEED_MULTIPLIER: float = 1.5

    FLOATING_TEXT_LIFETIME: float = 1.0
    FLOATING_TEXT_RISE_SPEED: float = 50.0
    BULLET_TRACE_LIFETIME: float = 0.2

    VOCALIZE_MIN_GAP: float = 2.0
    VOCALIZE_CHANCE: float = 0.005
