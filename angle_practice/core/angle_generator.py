"""Procedural generation of angle-ranking questions.

Each question pairs a base angle, drawn from one of several perceptual
difficulty zones, with three partner angles chosen so that the base/partner
pairs land near easy, medium and hard discrimination targets. The resulting
four magnitudes are validated, decorated with display-only properties
(rotation and arm lengths) and shuffled into display order.

Generation never raises: after ``max_generation_attempts`` failed attempts a
fixed fallback set is used and a warning is logged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import random

from angle_practice.constants import generator_constants as gc
from angle_practice.constants.test_constants import ANGLES_PER_QUESTION, TOTAL_QUESTIONS
from angle_practice.core.models import Angle, Question

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DifficultyZone:
    """Degree sub-range with a nominal base difficulty."""

    name: str
    min_degrees: float
    max_degrees: float
    base_difficulty: float

    def contains(self, degrees: float) -> bool:
        return self.min_degrees <= degrees <= self.max_degrees


DIFFICULTY_ZONES: tuple[DifficultyZone, ...] = (
    DifficultyZone("NEAR_STRAIGHT", 160, 180, 0.3),
    DifficultyZone("NEAR_RIGHT", 75, 105, 0.4),
    DifficultyZone("NEAR_45", 30, 60, 0.7),
    DifficultyZone("NEAR_135", 120, 150, 0.6),
    DifficultyZone("MID_ACUTE", 15, 30, 0.8),
    DifficultyZone("MID_OBTUSE", 105, 120, 0.8),
    DifficultyZone("VERY_ACUTE", 5, 15, 0.5),
)

_DEFAULT_ZONE = DIFFICULTY_ZONES[4]  # MID_ACUTE, the hardest region


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Tunable limits for question generation."""

    arm_length_min: int = gc.ARM_LENGTH_MIN
    arm_length_max: int = gc.ARM_LENGTH_MAX
    arm_length_min_diff: int = gc.ARM_LENGTH_MIN_DIFF
    max_generation_attempts: int = gc.MAX_GENERATION_ATTEMPTS
    candidate_attempts: int = gc.CANDIDATE_ATTEMPTS
    uniqueness_threshold: float = gc.UNIQUENESS_THRESHOLD
    min_separation: float = gc.MIN_SEPARATION
    separation_jitter: float = gc.SEPARATION_JITTER
    delta_range: tuple[float, float] = (gc.CANDIDATE_DELTA_MIN, gc.CANDIDATE_DELTA_MAX)
    valid_range: tuple[float, float] = (gc.VALID_DEGREES_MIN, gc.VALID_DEGREES_MAX)
    zone_edge_margin: float = gc.ZONE_EDGE_MARGIN
    target_difficulties: tuple[float, ...] = gc.TARGET_DIFFICULTIES
    fallback_degrees: tuple[float, ...] = gc.FALLBACK_DEGREES
    zones: tuple[DifficultyZone, ...] = field(default=DIFFICULTY_ZONES)

    def __post_init__(self) -> None:
        if self.arm_length_min <= 0 or self.arm_length_max <= self.arm_length_min:
            raise ValueError("Arm length range must be positive and non-empty.")
        if self.arm_length_min_diff >= self.arm_length_max - self.arm_length_min:
            raise ValueError("Minimum arm length difference must fit inside the arm length range.")
        if self.max_generation_attempts <= 0:
            raise ValueError("At least one generation attempt is required.")
        if len(self.fallback_degrees) != ANGLES_PER_QUESTION:
            raise ValueError(f"Fallback set must contain exactly {ANGLES_PER_QUESTION} angles.")
        if not self.zones:
            raise ValueError("At least one difficulty zone is required.")


def discrimination_difficulty(angle_1: float, angle_2: float) -> float:
    """Estimate how hard two magnitudes are to rank (higher is harder)."""
    diff = abs(angle_2 - angle_1)
    average = (angle_1 + angle_2) / 2
    distance_to_reference = min(abs(average - ref) for ref in gc.REFERENCE_ANGLES)
    reference_difficulty = min(distance_to_reference / gc.REFERENCE_DISTANCE_CAP, 1.0)
    delta_difficulty = (gc.DELTA_DIFFICULTY_SCALE / max(diff, gc.DELTA_FLOOR)) ** gc.DELTA_DIFFICULTY_EXPONENT
    return reference_difficulty * delta_difficulty


def difficulty_zone_for(degrees: float, zones: tuple[DifficultyZone, ...] = DIFFICULTY_ZONES) -> DifficultyZone:
    for zone in zones:
        if zone.contains(degrees):
            return zone
    return _DEFAULT_ZONE


def validate_angle_set(values: list[float], uniqueness_threshold: float = gc.UNIQUENESS_THRESHOLD) -> bool:
    """Check count, pairwise separation and the [0, 180] range."""
    if len(values) != ANGLES_PER_QUESTION:
        return False
    ordered = sorted(values)
    for lower, upper in zip(ordered, ordered[1:]):
        if upper - lower < uniqueness_threshold:
            return False
    return all(0 <= value <= 180 for value in values)


def get_correct_order(angles: tuple[Angle, ...] | list[Angle]) -> tuple[str, ...]:
    """Return angle ids sorted by degrees, smallest first."""
    return tuple(angle.id for angle in sorted(angles, key=lambda angle: angle.degrees))


def validate_question(question: Question) -> bool:
    """Structural and ground-truth check for a generated question."""
    if not question.id or not question.angles or not question.correct_order:
        return False
    if len(question.angles) != ANGLES_PER_QUESTION or len(question.correct_order) != ANGLES_PER_QUESTION:
        return False

    angle_ids = [angle.id for angle in question.angles]
    if len(set(angle_ids)) != ANGLES_PER_QUESTION:
        return False
    if set(question.correct_order) != set(angle_ids):
        return False

    return get_correct_order(question.angles) == tuple(question.correct_order)


class AngleGenerator:
    """Builds questions from a seedable random source."""

    def __init__(self, config: GeneratorConfig | None = None, rng: random.Random | None = None) -> None:
        self._config = config or GeneratorConfig()
        self._rng = rng or random.Random()

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    def set_seed(self, seed: int | None) -> None:
        self._rng.seed(seed)

    def generate_test_questions(self, count: int = TOTAL_QUESTIONS) -> list[Question]:
        return [self.generate_question(question_id) for question_id in range(1, count + 1)]

    def generate_question(self, question_id: int) -> Question:
        config = self._config
        degrees: list[float] = []
        attempts = 0
        while attempts < config.max_generation_attempts:
            degrees = self.generate_angle_set(self.select_base_angle())
            if validate_angle_set(degrees, config.uniqueness_threshold):
                break
            attempts += 1

        if attempts >= config.max_generation_attempts:
            logger.warning(
                "Question %s: using fallback angle set after %s attempts", question_id, attempts
            )
            degrees = list(config.fallback_degrees)

        angles = [self.make_angle(value, index) for index, value in enumerate(degrees)]
        return Question(
            id=question_id,
            angles=tuple(self.shuffle_angles(angles)),
            correct_order=get_correct_order(angles),
        )

    def select_base_angle(self) -> float:
        zone = self._rng.choice(self._config.zones)
        offset = (zone.max_degrees - zone.min_degrees) * self._config.zone_edge_margin
        return self._rng.uniform(zone.min_degrees + offset, zone.max_degrees - offset)

    def generate_angle_set(self, base_angle: float) -> list[float]:
        config = self._config
        delta_min, delta_max = config.delta_range
        valid_min, valid_max = config.valid_range
        values = [base_angle]

        for target in config.target_difficulties:
            best_angle = base_angle
            best_error = float("inf")
            for _ in range(config.candidate_attempts):
                delta = self._rng.uniform(delta_min, delta_max)
                direction = self._rng.choice((1, -1))
                candidate = base_angle + delta * direction
                if candidate < valid_min or candidate > valid_max:
                    continue
                error = abs(discrimination_difficulty(base_angle, candidate) - target)
                if error < best_error:
                    best_error = error
                    best_angle = candidate
            values.append(best_angle)

        values.sort()
        for i in range(1, len(values)):
            if values[i] - values[i - 1] < config.min_separation:
                values[i] = values[i - 1] + config.min_separation + self._rng.uniform(0, config.separation_jitter)
        return values

    def make_angle(self, degrees: float, index: int) -> Angle:
        config = self._config
        arm_length_1 = self._rng.uniform(config.arm_length_min, config.arm_length_max)
        while True:
            arm_length_2 = self._rng.uniform(config.arm_length_min, config.arm_length_max)
            # Compare the rounded values that are actually displayed.
            if abs(round(arm_length_2) - round(arm_length_1)) >= config.arm_length_min_diff:
                break

        return Angle(
            id=f"angle-{index}-{round(degrees * 100)}",
            degrees=round(degrees, 1),
            rotation=self._rng.randrange(gc.ROTATION_RANGE_DEGREES),
            arm_length_1=round(arm_length_1),
            arm_length_2=round(arm_length_2),
        )

    def shuffle_angles(self, angles: list[Angle]) -> list[Angle]:
        """Uniform shuffle returning a new list."""
        shuffled = list(angles)
        self._rng.shuffle(shuffled)
        return shuffled


_default_generator = AngleGenerator()


def generate_question(question_id: int, rng: random.Random | None = None) -> Question:
    generator = AngleGenerator(rng=rng) if rng is not None else _default_generator
    return generator.generate_question(question_id)


def generate_test_questions(rng: random.Random | None = None) -> list[Question]:
    generator = AngleGenerator(rng=rng) if rng is not None else _default_generator
    return generator.generate_test_questions()
