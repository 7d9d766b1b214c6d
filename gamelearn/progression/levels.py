"""
Level thresholds and computation.

LEVEL_THRESHOLDS is versioned data: index i is the minimum cumulative XP
for level i + 1. Changing a value re-levels every stored user.
"""

LEVEL_THRESHOLDS = (
    0,     # Level 1
    50,    # Level 2
    120,   # Level 3
    200,   # Level 4
    300,   # Level 5
    420,   # Level 6
    560,   # Level 7
    720,   # Level 8
    900,   # Level 9
    1100,  # Level 10
    1320,  # Level 11
    1560,  # Level 12
    1820,  # Level 13
    2100,  # Level 14
    2400,  # Level 15
    2720,  # Level 16
    3060,  # Level 17
    3420,  # Level 18
    3800,  # Level 19
    4200,  # Level 20
)

MAX_LEVEL = len(LEVEL_THRESHOLDS)


def calculate_level(xp: int) -> int:
    """Calculate level from cumulative XP (inclusive lower bounds, capped at MAX_LEVEL)"""
    for i in range(len(LEVEL_THRESHOLDS) - 1, -1, -1):
        if xp >= LEVEL_THRESHOLDS[i]:
            return i + 1
    return 1
