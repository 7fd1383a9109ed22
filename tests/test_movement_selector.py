"""Tests for movement selection and rotation."""
from app.config.programming import (
    BENCHMARK_WORKOUTS,
    MAX_LOAD_PERCENT,
    MAX_STRENGTH_MOVEMENTS,
    METCON_STYLES,
    OLYMPIC_LIFTS,
    STRENGTH_POOLS,
)
from app.models.enums import LoadType
from app.services.generation_types import GeneratorContext
from app.services.movement_selector import (
    MovementSelector,
    benchmark_for_week,
    is_benchmark_week,
)


def make_selector(seed: int = 1) -> tuple[MovementSelector, GeneratorContext]:
    context = GeneratorContext.seeded(seed)
    return MovementSelector(context), context


class TestStrengthRotation:
    def test_six_consecutive_weeks_cover_each_pool(self):
        for region, is_upper in (("upper", True), ("lower", False)):
            picked = set()
            for week in range(1, 7):
                selector, _ = make_selector()
                picked.add(selector.primary_strength_movement(is_upper, week)["name"])

            assert picked == {m["name"] for m in STRENGTH_POOLS[region]}

    def test_rotation_with_shared_context_covers_each_pool(self):
        selector, context = make_selector()
        picked = []
        for week in range(1, 7):
            picked.append(selector.strength("upper_strength", 8, week)[0].exercise_name)
            context.finish_week(week)

        assert sorted(picked) == sorted(m["name"] for m in STRENGTH_POOLS["upper"])

    def test_used_movement_is_skipped(self):
        selector, context = make_selector()

        first = selector.primary_strength_movement(True, 1)
        second = selector.primary_strength_movement(True, 1)

        assert first["name"] == "Strict Press"
        assert second["name"] == "Bench Press"
        assert context.used_exercises == {"Strict Press", "Bench Press"}

    def test_used_set_cleared_after_even_week(self):
        _, context = make_selector()
        context.used_exercises.add("Back Squat")

        context.finish_week(1)
        assert "Back Squat" in context.used_exercises

        context.finish_week(2)
        assert context.used_exercises == set()

    def test_strength_assignment_shape(self):
        selector, _ = make_selector()

        assignment = selector.strength("lower_strength", 8, 4)[0]

        assert assignment.sets == 5
        assert assignment.rest_seconds == 180
        assert assignment.load_type is LoadType.PERCENTAGE
        # Week 4 is a deload week: 85% * 0.7
        assert assignment.load_value == 85 * 0.7
        assert assignment.scaling_notes

    def test_max_strength_indexed_by_week(self):
        selector, _ = make_selector()

        for week in range(1, 11):
            assignment = selector.max_strength(week)[0]
            expected = MAX_STRENGTH_MOVEMENTS[week % len(MAX_STRENGTH_MOVEMENTS)]
            assert assignment.exercise_name == expected
            assert assignment.load_value == 90


class TestOlympic:
    def test_lift_rotation_and_wave_load(self):
        selector, _ = make_selector()

        for week in range(1, 13):
            assignment = selector.olympic_skill(week)[0]
            assert assignment.exercise_name == OLYMPIC_LIFTS[(week - 1) % len(OLYMPIC_LIFTS)]["name"]
            assert 0 < assignment.load_value <= MAX_LOAD_PERCENT

        assert selector.olympic_skill(1)[0].load_value == 75


class TestMetcon:
    def test_style_round_robin(self):
        selector, _ = make_selector()

        names = [selector.metcon_style(w).name for w in range(1, 7)]

        assert names == [s["name"] for s in METCON_STYLES]

    def test_benchmark_weeks(self):
        assert [w for w in range(1, 20) if is_benchmark_week(w)] == [1, 7, 13, 19]

    def test_benchmark_rotation(self):
        assert benchmark_for_week(1) == "fran"
        assert benchmark_for_week(7) == "helen"
        assert benchmark_for_week(13) == "cindy"
        assert benchmark_for_week(19) == "fran"

    def test_benchmark_week_emits_benchmark(self):
        selector, _ = make_selector()

        for week in (1, 7, 13):
            style = selector.metcon_style(week)
            names = [a.exercise_name for a in selector.mixed_modal(style, week)]
            expected = [e["name"] for e in BENCHMARK_WORKOUTS[benchmark_for_week(week)]["exercises"]]
            assert names == expected

    def test_non_benchmark_week_uses_combination(self):
        selector, _ = make_selector()

        style = selector.metcon_style(2)
        assignments = selector.mixed_modal(style, 2)

        assert len(assignments) == 3
        assert all(a.notes == style.name for a in assignments)

    def test_benchmark_loads(self):
        selector, _ = make_selector()

        fran = selector.benchmark("fran")

        assert fran[0].load_type is LoadType.FIXED_WEIGHT
        assert fran[0].load_value == 95
        assert fran[1].load_type is LoadType.BODYWEIGHT
        assert fran[1].load_value is None


class TestOtherBlocks:
    def test_warm_up_by_region(self):
        selector, _ = make_selector()

        assert selector.warm_up("upper_strength")[0].exercise_name == "Arm Circles"
        assert selector.warm_up("lower_strength")[0].exercise_name == "Leg Swings"
        assert selector.warm_up("foundation_movement")[0].exercise_name == "Light Movement"

    def test_endurance_minutes_capped(self):
        assert MovementSelector.endurance_minutes(1) == 32
        assert MovementSelector.endurance_minutes(15) == 60
        assert MovementSelector.endurance_minutes(40) == 60

    def test_endurance_assignment_duration(self):
        selector, _ = make_selector()

        assignment = selector.endurance("endurance", 5)[0]

        assert assignment.duration_seconds == 40 * 60
        assert assignment.load_type is LoadType.NONE

    def test_gymnastics_skill_is_seeded(self):
        first = [make_selector(3)[0].gymnastics_skill()[0].exercise_name for _ in range(3)]
        second = [make_selector(3)[0].gymnastics_skill()[0].exercise_name for _ in range(3)]

        assert first == second
