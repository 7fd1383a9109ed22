"""
Session planner.

Decides the ordered block layout for one day template. Every session opens
with a 10 minute warm-up at sequence 1; the remaining blocks depend on the
day's focus. Unknown focuses get a single generic conditioning block rather
than an error.
"""

from __future__ import annotations

from typing import Callable

from app.config.programming import FOCUS_DISPLAY_NAMES
from app.core.logging import get_logger
from app.models.enums import BlockType
from app.services.generation_types import DayTemplate, PlannedBlock, PlannedSession
from app.services.movement_selector import MovementSelector

logger = get_logger(__name__)

WARM_UP_MINUTES = 10

# (block_type, name, duration_minutes, exercises)
BlockSpec = tuple[BlockType, str, int, list]


def session_name(template: DayTemplate, week_number: int) -> str:
    base_name = FOCUS_DISPLAY_NAMES.get(template.focus, template.focus)
    suffix = f" - {template.sub_session.value}" if template.sub_session else ""
    return f"Week {week_number} - {base_name}{suffix}"


class SessionPlanner:
    def __init__(self, selector: MovementSelector):
        self._selector = selector
        self._handlers: dict[str, Callable[[DayTemplate, int], list[BlockSpec]]] = {
            "upper_strength": self._strength_day,
            "lower_strength": self._strength_day,
            "olympic_skill": self._olympic_day,
            "mixed_modal": self._mixed_modal_day,
            "gymnastics": self._gymnastics_day,
            "endurance": self._endurance_day,
            "max_strength": self._max_strength_day,
            "conditioning": self._conditioning_day,
        }

    def plan_session(self, template: DayTemplate, week_number: int) -> PlannedSession:
        specs: list[BlockSpec] = [
            (BlockType.WARM_UP, "Dynamic Warm-up", WARM_UP_MINUTES, self._selector.warm_up(template.focus)),
        ]

        handler = self._handlers.get(template.focus)
        if handler is None:
            logger.info("generic_block_fallback", focus=template.focus, day=template.day)
            handler = self._generic_day
        specs.extend(handler(template, week_number))

        blocks = [
            PlannedBlock(
                block_type=block_type,
                name=name,
                sequence=index,
                duration_minutes=duration,
                exercises=exercises,
            )
            for index, (block_type, name, duration, exercises) in enumerate(specs, start=1)
        ]
        return PlannedSession(
            week_number=week_number,
            template=template,
            name=session_name(template, week_number),
            blocks=blocks,
        )

    def _strength_day(self, template: DayTemplate, week_number: int) -> list[BlockSpec]:
        is_upper = "upper" in template.focus
        return [
            (
                BlockType.STRENGTH,
                "Upper Body Strength" if is_upper else "Lower Body Strength",
                25,
                self._selector.strength(template.focus, template.intensity, week_number),
            ),
            (BlockType.ACCESSORY, "Accessory Work", 15, self._selector.accessories(template.focus)),
        ]

    def _olympic_day(self, template: DayTemplate, week_number: int) -> list[BlockSpec]:
        return [
            (BlockType.SKILL, "Olympic Lifting", 25, self._selector.olympic_skill(week_number)),
            (BlockType.METCON, "Short Conditioning", 12, self._selector.short_conditioning()),
        ]

    def _mixed_modal_day(self, template: DayTemplate, week_number: int) -> list[BlockSpec]:
        style = self._selector.metcon_style(week_number)
        return [
            (
                BlockType.METCON,
                f"{style.name} Conditioning",
                style.duration,
                self._selector.mixed_modal(style, week_number),
            ),
        ]

    def _gymnastics_day(self, template: DayTemplate, week_number: int) -> list[BlockSpec]:
        return [
            (BlockType.SKILL, "Gymnastics Skill", 20, self._selector.gymnastics_skill()),
            (BlockType.METCON, "Gymnastics Conditioning", 15, self._selector.gymnastics_conditioning()),
        ]

    def _endurance_day(self, template: DayTemplate, week_number: int) -> list[BlockSpec]:
        return [
            (
                BlockType.ENDURANCE,
                "Aerobic Work",
                self._selector.endurance_minutes(week_number),
                self._selector.endurance(template.focus, week_number),
            ),
        ]

    def _max_strength_day(self, template: DayTemplate, week_number: int) -> list[BlockSpec]:
        return [(BlockType.STRENGTH, "Max Effort", 40, self._selector.max_strength(week_number))]

    def _conditioning_day(self, template: DayTemplate, week_number: int) -> list[BlockSpec]:
        return [
            (
                BlockType.METCON,
                "High Intensity Conditioning",
                25,
                self._selector.high_intensity_conditioning(),
            ),
        ]

    def _generic_day(self, template: DayTemplate, week_number: int) -> list[BlockSpec]:
        return [(BlockType.CONDITIONING, "General Conditioning", 20, self._selector.generic_conditioning())]
