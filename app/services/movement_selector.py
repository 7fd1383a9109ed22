"""
Movement selection.

Turns symbolic block requests into concrete ExerciseAssignments. Selection is
deterministic round-robin keyed by week number wherever a pool exists, so a
given week always yields the same movements. Rep schemes for strength work
and the gymnastics skill pick go through the context's random source.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.config.programming import (
    ACCESSORIES,
    BENCHMARK_EVERY_N_WEEKS,
    BENCHMARK_WORKOUTS,
    ENDURANCE_BASE_MINUTES,
    ENDURANCE_MAX_MINUTES,
    ENDURANCE_MODALITIES,
    ENDURANCE_WEEKLY_MINUTES,
    GYMNASTICS_CONDITIONING,
    GYMNASTICS_SKILLS,
    MAX_EFFORT_PERCENT,
    MAX_STRENGTH_MOVEMENTS,
    METCON_STYLES,
    MOVEMENT_COMBINATIONS,
    OLYMPIC_BASE_PERCENT,
    OLYMPIC_LIFTS,
    STRENGTH_POOLS,
    STRENGTH_REST_SECONDS,
    STRENGTH_SETS,
    WARM_UPS,
)
from app.core.logging import get_logger
from app.models.enums import LoadType, TrainingGoal
from app.services.generation_types import ExerciseAssignment, GeneratorContext
from app.services.load_calculator import (
    base_percent_for_intensity,
    deload_progression,
    select_rep_scheme,
    wave_progression,
)

logger = get_logger(__name__)

WARM_UP_CATEGORY = "Warm-up"


@dataclass(frozen=True)
class MetconStyle:
    name: str
    duration: int
    format: str


def _region(focus: str) -> str:
    if "upper" in focus:
        return "upper"
    if "lower" in focus:
        return "lower"
    return "general"


def is_benchmark_week(week_number: int) -> bool:
    return week_number % BENCHMARK_EVERY_N_WEEKS == 1


def benchmark_for_week(week_number: int) -> str:
    """Name of the benchmark emitted on a benchmark week.

    Benchmarks rotate once per 6-week cycle: weeks 1, 7, 13 give fran,
    helen, cindy, then the rotation repeats.
    """
    names = list(BENCHMARK_WORKOUTS)
    cycle = (week_number - 1) // BENCHMARK_EVERY_N_WEEKS
    return names[cycle % len(names)]


class MovementSelector:
    def __init__(self, context: GeneratorContext):
        self._context = context

    # ------------------------------------------------------------------
    # Warm-up and accessory
    # ------------------------------------------------------------------

    def warm_up(self, focus: str) -> list[ExerciseAssignment]:
        return [
            ExerciseAssignment(
                exercise_name=entry["name"],
                category=WARM_UP_CATEGORY,
                sets=entry.get("sets"),
                reps=entry.get("reps"),
                duration_seconds=entry.get("duration_seconds"),
                load_type=LoadType.BODYWEIGHT,
            )
            for entry in WARM_UPS[_region(focus)]
        ]

    def accessories(self, focus: str) -> list[ExerciseAssignment]:
        region = "upper" if "upper" in focus else "lower"
        return [
            ExerciseAssignment(
                exercise_name=entry["name"],
                category="Accessory",
                sets=entry["sets"],
                reps=entry["reps"],
                load_type=LoadType(entry["load_type"]),
                rest_seconds=entry["rest_seconds"],
            )
            for entry in ACCESSORIES[region]
        ]

    # ------------------------------------------------------------------
    # Strength
    # ------------------------------------------------------------------

    def primary_strength_movement(self, is_upper: bool, week_number: int) -> dict:
        """Round-robin pick from the upper or lower pool.

        Starts at ``pool[(week - 1) % len(pool)]`` and walks forward past any
        movement already used as a primary lift since the last reset. The
        pick is recorded in the context.
        """
        pool = STRENGTH_POOLS["upper" if is_upper else "lower"]
        start = (week_number - 1) % len(pool)
        chosen = pool[start]
        for offset in range(len(pool)):
            candidate = pool[(start + offset) % len(pool)]
            if candidate["name"] not in self._context.used_exercises:
                chosen = candidate
                break

        self._context.used_exercises.add(chosen["name"])
        return chosen

    def strength(self, focus: str, intensity: int, week_number: int) -> list[ExerciseAssignment]:
        movement = self.primary_strength_movement("upper" in focus, week_number)
        load = deload_progression(week_number, base_percent_for_intensity(intensity))
        return [
            ExerciseAssignment(
                exercise_name=movement["name"],
                category=movement["category"],
                sets=STRENGTH_SETS,
                reps=select_rep_scheme(TrainingGoal.STRENGTH, self._context.rng),
                load_type=LoadType.PERCENTAGE,
                load_value=load,
                rest_seconds=STRENGTH_REST_SECONDS,
                scaling_notes=movement["scaling"],
            )
        ]

    def max_strength(self, week_number: int) -> list[ExerciseAssignment]:
        name = MAX_STRENGTH_MOVEMENTS[week_number % len(MAX_STRENGTH_MOVEMENTS)]
        return [
            ExerciseAssignment(
                exercise_name=name,
                category="Olympic Lift",
                sets=5,
                reps="1",
                load_type=LoadType.PERCENTAGE,
                load_value=MAX_EFFORT_PERCENT,
                rest_seconds=240,
            )
        ]

    # ------------------------------------------------------------------
    # Olympic lifting
    # ------------------------------------------------------------------

    def olympic_skill(self, week_number: int) -> list[ExerciseAssignment]:
        lift = OLYMPIC_LIFTS[(week_number - 1) % len(OLYMPIC_LIFTS)]
        return [
            ExerciseAssignment(
                exercise_name=lift["name"],
                category="Olympic Lift",
                sets=lift["sets"],
                reps=lift["reps"],
                load_type=LoadType.PERCENTAGE,
                load_value=wave_progression(week_number, OLYMPIC_BASE_PERCENT),
                rest_seconds=120,
                scaling_notes=lift["scaling"],
            )
        ]

    def short_conditioning(self) -> list[ExerciseAssignment]:
        return [
            ExerciseAssignment(
                exercise_name="Rowing",
                category="Monostructural",
                duration_seconds=720,
                load_type=LoadType.NONE,
                notes="12 min EMOM: 250m row",
            )
        ]

    # ------------------------------------------------------------------
    # Mixed modal
    # ------------------------------------------------------------------

    def metcon_style(self, week_number: int) -> MetconStyle:
        style = METCON_STYLES[(week_number - 1) % len(METCON_STYLES)]
        return MetconStyle(**style)

    def mixed_modal(self, style: MetconStyle, week_number: int) -> list[ExerciseAssignment]:
        if is_benchmark_week(week_number):
            name = benchmark_for_week(week_number)
            logger.debug("benchmark_substituted", benchmark=name, week=week_number)
            return self.benchmark(name)

        combination = MOVEMENT_COMBINATIONS[(week_number + len(style.name)) % len(MOVEMENT_COMBINATIONS)]
        return [
            ExerciseAssignment(
                exercise_name=movement["name"],
                category=movement["category"],
                reps=movement["reps"],
                load_type=LoadType(movement["load_type"]),
                load_value=movement.get("load_value"),
                notes=style.name,
                scaling_notes=movement["scaling"],
            )
            for movement in combination
        ]

    def benchmark(self, name: str) -> list[ExerciseAssignment]:
        workout = BENCHMARK_WORKOUTS[name]
        return [
            ExerciseAssignment(
                exercise_name=exercise["name"],
                category=exercise["category"],
                reps=exercise["reps"],
                load_type=LoadType.FIXED_WEIGHT if exercise.get("weight") else LoadType.BODYWEIGHT,
                load_value=exercise.get("weight"),
                notes=workout["style"],
                scaling_notes="Classic benchmark workout - scale as needed",
            )
            for exercise in workout["exercises"]
        ]

    # ------------------------------------------------------------------
    # Gymnastics
    # ------------------------------------------------------------------

    def gymnastics_skill(self) -> list[ExerciseAssignment]:
        skill = self._context.rng.choice(GYMNASTICS_SKILLS)
        return [
            ExerciseAssignment(
                exercise_name=skill["name"],
                category="Gymnastics",
                sets=skill["sets"],
                reps=skill["reps"],
                load_type=LoadType.BODYWEIGHT,
                rest_seconds=120,
                scaling_notes=skill["scaling"],
            )
        ]

    def gymnastics_conditioning(self) -> list[ExerciseAssignment]:
        return [
            ExerciseAssignment(
                exercise_name=entry["name"],
                category="Gymnastics",
                reps=entry["reps"],
                load_type=LoadType.BODYWEIGHT,
                notes=entry.get("notes"),
            )
            for entry in GYMNASTICS_CONDITIONING
        ]

    # ------------------------------------------------------------------
    # Endurance and conditioning
    # ------------------------------------------------------------------

    @staticmethod
    def endurance_minutes(week_number: int) -> int:
        return min(ENDURANCE_BASE_MINUTES + week_number * ENDURANCE_WEEKLY_MINUTES, ENDURANCE_MAX_MINUTES)

    def endurance(self, focus: str, week_number: int) -> list[ExerciseAssignment]:
        minutes = self.endurance_minutes(week_number)
        modality = ENDURANCE_MODALITIES[week_number % len(ENDURANCE_MODALITIES)]
        return [
            ExerciseAssignment(
                exercise_name=modality,
                category="Monostructural",
                duration_seconds=minutes * 60,
                load_type=LoadType.NONE,
                notes=f"{focus} effort",
            )
        ]

    def high_intensity_conditioning(self) -> list[ExerciseAssignment]:
        return [
            ExerciseAssignment(
                exercise_name="Assault Bike",
                category="Monostructural",
                reps="50 calories",
                load_type=LoadType.NONE,
            ),
            ExerciseAssignment(
                exercise_name="Deadlifts",
                category="Olympic Lift",
                reps="40",
                load_type=LoadType.FIXED_WEIGHT,
                load_value=102,
            ),
        ]

    def generic_conditioning(self) -> list[ExerciseAssignment]:
        return [
            ExerciseAssignment(
                exercise_name="Mixed Movement",
                category="Gymnastics",
                reps="10",
                load_type=LoadType.BODYWEIGHT,
            )
        ]
