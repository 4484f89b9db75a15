"""
spawn_manager.py
----------------
Owner of the live entity collection and the transient feedback collection.

Responsibilities
----------------
- Hold entities in spawn order (newest last) so hit scans can go newest-first.
- Advance every live entity and feedback item once per tick.
- Sweep entities flagged with `marked_for_deletion` in one order-preserving pass.
"""
from popshot.core.debug.debug_logger import DebugLogger


class SpawnManager:
    """
    Container for everything alive in the current round.

    Entities are only ever appended by add() / add_feedback() and only
    ever removed by sweep(). Nothing else mutates the lists, so callers
    may iterate them freely between sweeps.
    """

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self):
        self.entities = []
        self.feedback = []

        self._spawn_stats = {
            "total_spawned": 0,
            "total_swept": 0,
            "by_tag": {},
        }

        DebugLogger.init_entry("SpawnManager Initialized")

    # ===========================================================
    # Registration
    # ===========================================================
    def add(self, entity):
        """Append a spawned entity. Returns it for chaining."""
        self.entities.append(entity)

        self._spawn_stats["total_spawned"] += 1
        by_tag = self._spawn_stats["by_tag"]
        by_tag[entity.tag] = by_tag.get(entity.tag, 0) + 1

        DebugLogger.system(
            f"Spawned {type(entity).__name__} at ({entity.pos.x:.0f}, {entity.pos.y:.0f})",
            category="spawn"
        )
        return entity

    def add_feedback(self, item):
        self.feedback.append(item)
        return item

    # ===========================================================
    # Queries
    # ===========================================================
    def live_entities(self) -> list:
        """Entities not yet flagged for deletion, oldest first."""
        return [e for e in self.entities if not e.marked_for_deletion]

    def live_of(self, predicate) -> list:
        """Live entities whose tag satisfies predicate(tag)."""
        return [e for e in self.entities if not e.marked_for_deletion and predicate(e.tag)]

    def any_live(self, tag: str) -> bool:
        return any(not e.marked_for_deletion and e.tag == tag for e in self.entities)

    # ===========================================================
    # Update Loop
    # ===========================================================
    def update(self, dt: float):
        """
        Advance all live entities and feedback items.

        Args:
            dt (float): Delta time in seconds.
        """
        for entity in self.live_entities():
            entity.update(dt)

        for item in self.feedback:
            if not item.marked_for_deletion:
                item.update(dt)

    # ===========================================================
    # Cleanup
    # ===========================================================
    def sweep(self) -> int:
        """
        Remove every entity and feedback item marked for deletion.

        Compacts both lists in place, preserving the order of survivors.

        Returns:
            int: Number of entities removed (feedback not counted)
        """
        removed = self._compact(self.entities)
        self._compact(self.feedback)

        if removed > 0:
            self._spawn_stats["total_swept"] += removed
            DebugLogger.state(f"Swept {removed} entities", category="entity_cleanup")
        return removed

    def _compact(self, items: list) -> int:
        total_before = len(items)
        i = 0
        for item in items:
            if not item.marked_for_deletion:
                items[i] = item
                i += 1

        del items[i:]
        return total_before - i

    # ===========================================================
    # Statistics & Reset
    # ===========================================================
    def get_spawn_stats(self) -> dict:
        stats = {
            "active_entities": len(self.entities),
            "active_feedback": len(self.feedback),
            "lifetime_stats": dict(self._spawn_stats, by_tag=dict(self._spawn_stats["by_tag"])),
        }
        return stats

    def reset(self):
        """Drop every entity and feedback item, for a new round."""
        self.entities.clear()
        self.feedback.clear()
        DebugLogger.system("SpawnManager reset", category="spawn")
