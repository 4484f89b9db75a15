"""
round_config.py
---------------
Round configuration table and the extrapolation past its last entry.

Responsibilities
----------------
- Load the per-round table from rounds.json (falls back to built-in defaults).
- Validate the table shape.
- Resolve any round number >= 1 to a RoundConfig.
"""

from dataclasses import dataclass

from popshot.core.debug.debug_logger import DebugLogger
from popshot.core.errors import ConfigError
from popshot.core.services.config_manager import load_config


# ===========================================================
# Defaults
# ===========================================================

DEFAULT_ROUNDS = {
    "rounds": {
        "1": {"min_points": 35, "duration": 30, "spawn_interval_ms": 1100, "speed_multiplier": 1.0},
        "2": {"min_points": 90, "duration": 30, "spawn_interval_ms": 950, "speed_multiplier": 1.2},
        "3": {"min_points": 175, "duration": 30, "spawn_interval_ms": 850, "speed_multiplier": 1.5},
        "4": {"min_points": 290, "duration": 25, "spawn_interval_ms": 750, "speed_multiplier": 1.8},
        "5": {"min_points": 460, "duration": 25, "spawn_interval_ms": 650, "speed_multiplier": 2.2},
    },
    "extrapolation": {
        "target_growth": 1.5,
        "interval_step_ms": 50,
        "interval_floor_ms": 300,
        "speed_step": 0.3,
        "duration": 25,
    },
}

_ROUND_FIELDS = ("min_points", "duration", "spawn_interval_ms", "speed_multiplier")
_EXTRAPOLATION_FIELDS = ("target_growth", "interval_step_ms", "interval_floor_ms", "speed_step", "duration")


@dataclass(frozen=True)
class RoundConfig:
    """Resolved settings for one round."""
    round_number: int
    min_points: int
    duration: float             # seconds
    spawn_interval_ms: float
    speed_multiplier: float
    extrapolated: bool = False

    @property
    def duration_ms(self) -> float:
        return self.duration * 1000.0


class RoundTable:
    """Lookup from round number to RoundConfig."""

    def __init__(self, data: dict = None, strict: bool = False):
        """
        Args:
            data: Dict shaped like rounds.json (defaults used when None)
            strict: Raise ConfigError on a malformed table instead of falling back
        """
        data = data if data is not None else DEFAULT_ROUNDS
        try:
            self._rounds, self._extrapolation = self._parse(data)
        except ConfigError as e:
            if strict:
                raise
            DebugLogger.warn(f"Invalid round table ({e}) - using defaults", category="loading")
            self._rounds, self._extrapolation = self._parse(DEFAULT_ROUNDS)

        self.last_table_round = max(self._rounds)

    @classmethod
    def load(cls, filename: str = "rounds.json", strict: bool = False) -> "RoundTable":
        data = load_config(filename, DEFAULT_ROUNDS, strict=strict)
        table = cls(data, strict=strict)
        DebugLogger.init_sub(f"Round table: {table.last_table_round} rounds + extrapolation")
        return table

    # ===========================================================
    # Parsing
    # ===========================================================

    @staticmethod
    def _parse(data: dict):
        rounds_raw = data.get("rounds")
        if not isinstance(rounds_raw, dict) or not rounds_raw:
            raise ConfigError("'rounds' must be a non-empty mapping")

        rounds = {}
        for key, entry in rounds_raw.items():
            try:
                number = int(key)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"round key {key!r} is not an integer") from e
            missing = [f for f in _ROUND_FIELDS if f not in entry]
            if missing:
                raise ConfigError(f"round {number} missing fields: {missing}")
            rounds[number] = entry

        expected = list(range(1, len(rounds) + 1))
        if sorted(rounds) != expected:
            raise ConfigError(f"rounds must be numbered 1..{len(rounds)} without gaps")

        extrapolation = data.get("extrapolation", {})
        missing = [f for f in _EXTRAPOLATION_FIELDS if f not in extrapolation]
        if missing:
            raise ConfigError(f"extrapolation missing fields: {missing}")

        return rounds, extrapolation

    # ===========================================================
    # Lookup
    # ===========================================================

    def config_for(self, round_number: int) -> RoundConfig:
        """
        Resolve a round number to its configuration.

        Raises:
            ValueError: round_number is below 1
        """
        if round_number < 1:
            raise ValueError(f"Round numbers start at 1, got {round_number}")

        if round_number in self._rounds:
            entry = self._rounds[round_number]
            return RoundConfig(
                round_number=round_number,
                min_points=int(entry["min_points"]),
                duration=float(entry["duration"]),
                spawn_interval_ms=float(entry["spawn_interval_ms"]),
                speed_multiplier=float(entry["speed_multiplier"]),
            )

        return self._extrapolate(round_number)

    def _extrapolate(self, round_number: int) -> RoundConfig:
        base = self._rounds[self.last_table_round]
        ext = self._extrapolation
        steps = round_number - self.last_table_round

        target = round(base["min_points"] * ext["target_growth"] ** steps)
        interval = max(ext["interval_floor_ms"], base["spawn_interval_ms"] - ext["interval_step_ms"] * steps)
        speed = round(base["speed_multiplier"] + ext["speed_step"] * steps, 3)

        return RoundConfig(
            round_number=round_number,
            min_points=int(target),
            duration=float(ext["duration"]),
            spawn_interval_ms=float(interval),
            speed_multiplier=speed,
            extrapolated=True,
        )
