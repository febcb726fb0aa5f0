"""Tuning constants for the procedural angle generator."""

ARM_LENGTH_MIN: int = 50
ARM_LENGTH_MAX: int = 180
ARM_LENGTH_MIN_DIFF: int = 30
ROTATION_RANGE_DEGREES: int = 360

MAX_GENERATION_ATTEMPTS: int = 50
CANDIDATE_ATTEMPTS: int = 20
UNIQUENESS_THRESHOLD: float = 0.5
MIN_SEPARATION: float = 0.8
SEPARATION_JITTER: float = 0.5

CANDIDATE_DELTA_MIN: float = 1.0
CANDIDATE_DELTA_MAX: float = 13.0
VALID_DEGREES_MIN: float = 5.0
VALID_DEGREES_MAX: float = 175.0
ZONE_EDGE_MARGIN: float = 0.2

# Easy, medium and hard pairings against the base angle.
TARGET_DIFFICULTIES: tuple[float, ...] = (0.3, 0.5, 0.8)

# Angles people judge more easily; difficulty grows with distance from them.
REFERENCE_ANGLES: tuple[int, ...] = (0, 30, 45, 60, 90, 120, 135, 150, 180)
REFERENCE_DISTANCE_CAP: float = 15.0
DELTA_DIFFICULTY_SCALE: float = 6.0
DELTA_DIFFICULTY_EXPONENT: float = 1.5
DELTA_FLOOR: float = 0.5

FALLBACK_DEGREES: tuple[float, ...] = (30.0, 35.0, 40.0, 45.0)
