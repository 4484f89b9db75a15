"""
__main__.py
-----------
Headless demo driver: plays seeded rounds with a simulated shooter.

Usage:
    python -m popshot                        # up to 5 rounds, seed 0
    python -m popshot --rounds 8 --seed 42
    python -m popshot --shots-per-second 6 --verbose
"""

import argparse
import random
import sys

from popshot.core.debug.debug_logger import LoggerConfig
from popshot.entities.entity_state import RoundState
from popshot.entities.entity_types import is_hazard_class, is_pickup_class
from popshot.systems.level.round_controller import RoundController


class SimulatedShooter:
    """Picks a live entity now and then and fires at it with some aim error."""

    AIM_ERROR = 12.0
    AREA_CLUSTER = 3

    def __init__(self, controller, shots_per_second: float, rng: random.Random):
        self.controller = controller
        self.shots_per_second = shots_per_second
        self.rng = rng

    def act(self, delta_ms: float):
        if self.rng.random() >= self.shots_per_second * delta_ms / 1000.0:
            return

        live = [e for e in self.controller.context.spawn_manager.live_entities()
                if not is_hazard_class(e.tag)]
        if not live:
            return

        target = self.rng.choice(live)
        x = target.x + self.rng.uniform(-self.AIM_ERROR, self.AIM_ERROR)
        y = target.y + self.rng.uniform(-self.AIM_ERROR, self.AIM_ERROR)
        if target.is_rectangular:
            y -= target.height / 2

        self.controller.set_aim(x, y)
        if len(live) >= self.AREA_CLUSTER and not is_pickup_class(target.tag) and self.rng.random() < 0.1:
            self.controller.resolve_area(x, y)
        else:
            self.controller.resolve_primary(x, y)


def play(rounds: int, seed: int, tick_ms: float, shots_per_second: float) -> RoundController:
    controller = RoundController(seed=seed)
    shooter = SimulatedShooter(controller, shots_per_second, random.Random(seed + 1))

    controller.start_round(1)
    while True:
        while controller.state == RoundState.RUNNING:
            controller.tick(tick_ms)
            shooter.act(tick_ms)

        ctx = controller.context
        outcome = "WON " if controller.state == RoundState.ENDED_WON else "LOST"
        print(f"Round {ctx.round_number:>2}  {outcome}  round score {ctx.round_score:>5} / "
              f"{ctx.config.min_points:<5} total {ctx.score}")

        if controller.state == RoundState.ENDED_LOST or ctx.round_number >= rounds:
            return controller
        controller.next_round()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Headless popshot simulation")
    parser.add_argument("--rounds", type=int, default=5,
                        help="Stop after this many rounds (default 5)")
    parser.add_argument("--seed", type=int, default=0,
                        help="Seed for spawning and the simulated shooter")
    parser.add_argument("--tick-ms", type=float, default=16.0,
                        help="Fixed tick length in milliseconds")
    parser.add_argument("--shots-per-second", type=float, default=4.0,
                        help="Average firing rate of the simulated shooter")
    parser.add_argument("--verbose", action="store_true",
                        help="Show engine logs")

    args = parser.parse_args(argv)
    if args.rounds < 1 or args.tick_ms <= 0:
        parser.error("--rounds must be >= 1 and --tick-ms must be > 0")

    LoggerConfig.ENABLE_LOGGING = args.verbose

    controller = play(args.rounds, args.seed, args.tick_ms, args.shots_per_second)

    print("\nSession stats")
    for key, value in controller.stats.as_dict().items():
        print(f"  {key:<20} {value}")

    spawned = controller.context.spawn_manager.get_spawn_stats()["lifetime_stats"]
    print("\nSpawn stats")
    print(f"  {'total_spawned':<20} {spawned['total_spawned']}")
    print(f"  {'total_swept':<20} {spawned['total_swept']}")
    for tag, count in sorted(spawned["by_tag"].items()):
        print(f"  {tag:<20} {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
