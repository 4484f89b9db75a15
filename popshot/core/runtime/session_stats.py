"""
session_stats.py
----------------
Tracks statistics for the current play session.
Separated from round state so counters survive retries and round changes.
"""


# ===========================================================
# Session Stats
# ===========================================================

class SessionStats:
    """Container for run-wide counters. Reset when starting a new game."""

    def __init__(self):
        self.high_score = 0
        self.best_round_score = 0
        self.primary_shots = 0
        self.secondary_shots = 0
        self.auto_shots = 0
        self.targets_popped = 0
        self.bosses_killed = 0
        self.pickups_collected = 0
        self.hazards_detonated = 0
        self.creatures_lost = 0
        self.rounds_won = 0
        self.rounds_lost = 0
        self.max_round_reached = 0

    # ===========================================================
    # Shots
    # ===========================================================

    def add_shot(self, kind: str):
        """Count a fired shot. kind is 'primary', 'secondary' or 'auto'."""
        if kind == "primary":
            self.primary_shots += 1
        elif kind == "secondary":
            self.secondary_shots += 1
        elif kind == "auto":
            self.auto_shots += 1

    @property
    def total_shots(self) -> int:
        return self.primary_shots + self.secondary_shots + self.auto_shots

    # ===========================================================
    # Outcomes
    # ===========================================================

    def add_pops(self, count: int = 1):
        self.targets_popped += count

    def add_boss_kill(self):
        self.bosses_killed += 1

    def add_pickup(self):
        self.pickups_collected += 1

    def add_detonation(self):
        self.hazards_detonated += 1

    def add_creature_lost(self):
        self.creatures_lost += 1

    def record_score(self, score: int):
        """Update high score if higher."""
        if score > self.high_score:
            self.high_score = score

    def record_round(self, round_number: int, round_score: int, won: bool):
        """Record a finished round."""
        if won:
            self.rounds_won += 1
        else:
            self.rounds_lost += 1
        if round_score > self.best_round_score:
            self.best_round_score = round_score
        if round_number > self.max_round_reached:
            self.max_round_reached = round_number

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self):
        """Reset all stats for a new run. Preserves high score."""
        high_score = self.high_score
        self.__init__()
        self.high_score = high_score

    def as_dict(self) -> dict:
        return {
            "high_score": self.high_score,
            "best_round_score": self.best_round_score,
            "shots": {
                "primary": self.primary_shots,
                "secondary": self.secondary_shots,
                "auto": self.auto_shots,
            },
            "targets_popped": self.targets_popped,
            "bosses_killed": self.bosses_killed,
            "pickups_collected": self.pickups_collected,
            "hazards_detonated": self.hazards_detonated,
            "creatures_lost": self.creatures_lost,
            "rounds_won": self.rounds_won,
            "rounds_lost": self.rounds_lost,
            "max_round_reached": self.max_round_reached,
        }
