"""Tests for session block layout."""
import pytest

from app.models.enums import BlockType, SessionType, SubSessionLabel, TrackKind
from app.services.generation_types import DayTemplate, GeneratorContext
from app.services.movement_selector import MovementSelector
from app.services.session_planner import SessionPlanner, session_name
from app.services.track_templates import get_week_plan


@pytest.fixture
def planner() -> SessionPlanner:
    return SessionPlanner(MovementSelector(GeneratorContext.seeded(11)))


def day(focus: str, intensity: int = 7, sub_session=None) -> DayTemplate:
    return DayTemplate(1, focus, intensity, 60, SessionType.STRENGTH, sub_session)


class TestSessionName:
    def test_display_name(self):
        assert session_name(day("upper_strength"), 3) == "Week 3 - Upper Body Strength"

    def test_sub_session_suffix(self):
        name = session_name(day("max_strength", sub_session=SubSessionLabel.AM), 1)

        assert name.startswith("Week 1 - ")
        assert name.endswith(" - AM")


class TestBlockLayout:
    def test_every_track_day_starts_with_warm_up(self, planner):
        for kind in TrackKind:
            for template in get_week_plan(kind):
                planned = planner.plan_session(template, 1)
                first = planned.blocks[0]
                assert first.block_type is BlockType.WARM_UP
                assert first.name == "Dynamic Warm-up"
                assert first.duration_minutes == 10
                assert [b.sequence for b in planned.blocks] == list(range(1, len(planned.blocks) + 1))

    def test_every_non_warm_up_block_has_exercises(self, planner):
        for kind in TrackKind:
            for week in (1, 4, 7):
                for template in get_week_plan(kind):
                    for block in planner.plan_session(template, week).blocks[1:]:
                        assert block.exercises, (kind, week, template.focus, block.name)

    @pytest.mark.parametrize(
        "focus, expected",
        [
            ("upper_strength", [(BlockType.STRENGTH, 25), (BlockType.ACCESSORY, 15)]),
            ("lower_strength", [(BlockType.STRENGTH, 25), (BlockType.ACCESSORY, 15)]),
            ("olympic_skill", [(BlockType.SKILL, 25), (BlockType.METCON, 12)]),
            ("gymnastics", [(BlockType.SKILL, 20), (BlockType.METCON, 15)]),
            ("max_strength", [(BlockType.STRENGTH, 40)]),
            ("conditioning", [(BlockType.METCON, 25)]),
        ],
    )
    def test_focus_dispatch(self, planner, focus, expected):
        planned = planner.plan_session(day(focus), 2)

        assert [(b.block_type, b.duration_minutes) for b in planned.blocks[1:]] == expected

    def test_mixed_modal_block_named_after_style(self, planner):
        planned = planner.plan_session(day("mixed_modal"), 3)
        block = planned.blocks[1]

        assert block.block_type is BlockType.METCON
        assert block.name == "EMOM Conditioning"
        assert block.duration_minutes == 18

    def test_endurance_duration_grows_with_week(self, planner):
        week_one = planner.plan_session(day("endurance"), 1).blocks[1]
        week_twenty = planner.plan_session(day("endurance"), 20).blocks[1]

        assert week_one.name == "Aerobic Work"
        assert week_one.duration_minutes == 32
        assert week_twenty.duration_minutes == 60

    def test_unknown_focus_gets_generic_block(self, planner):
        planned = planner.plan_session(day("dynamic_effort_upper"), 3)

        assert len(planned.blocks) == 2
        generic = planned.blocks[1]
        assert generic.block_type is BlockType.CONDITIONING
        assert generic.name == "General Conditioning"
        assert generic.duration_minutes == 20
