"""Collision queries used by the tick's resolution step.

These helpers only find hits; applying their consequences (lives, score,
effects) is the game's job.
"""

from entities_utils import intersects, center_of


def hits(target, entities):
    """Entities overlapping target, in pool order."""
    return [e for e in entities if intersects(target, e)]


def _distance_sq(a, b):
    ax, ay = center_of(a)
    bx, by = center_of(b)
    return (ax - bx) ** 2 + (ay - by) ** 2


def match_bullets(bullets, obstacles):
    """Pair each bullet with at most one obstacle it overlaps.

    When a bullet overlaps several obstacles the one whose centre is closest
    to the bullet's centre wins (ties go to the earlier obstacle in the pool).
    Bullets are processed in pool order and an obstacle claimed by one bullet
    is no longer available to the next.
    """
    claimed = set()
    pairs = []
    for bullet in bullets:
        candidates = [o for o in obstacles if id(o) not in claimed and intersects(bullet, o)]
        if not candidates:
            continue
        target = min(candidates, key=lambda o: _distance_sq(bullet, o))
        claimed.add(id(target))
        pairs.append((bullet, target))
    return pairs
