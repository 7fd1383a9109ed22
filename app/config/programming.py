"""
Programming constants for the track workout generator.

Everything here is hand-authored coaching content: movement pools, rep
schemes, benchmark workouts and the intensity-to-load table. The generator
indexes into these tables by week number, so reordering an entry changes the
output of every track that uses it.
"""

from __future__ import annotations


# ============================================================================
# Load progression
# ============================================================================

INTENSITY_TO_PERCENT: dict[int, float] = {
    1: 40, 2: 50, 3: 60, 4: 65, 5: 70,
    6: 75, 7: 80, 8: 85, 9: 90, 10: 95,
}
DEFAULT_BASE_PERCENT: float = 70

MAX_LOAD_PERCENT: float = 95

LINEAR_WEEKLY_INCREMENT: float = 2.5

# Offsets added to the base percent, repeating every 8 weeks
WAVE_PATTERN: tuple[float, ...] = (0, 2.5, 5, -5, 2.5, 5, 7.5, -7.5)

DELOAD_EVERY_N_WEEKS: int = 4
DELOAD_FACTOR: float = 0.7
DELOAD_BLOCK_INCREMENT: float = 5

OLYMPIC_BASE_PERCENT: float = 75
MAX_EFFORT_PERCENT: float = 90


# ============================================================================
# Rep schemes by training goal
# ============================================================================

REP_SCHEMES: dict[str, list[str]] = {
    "max_strength": ["1", "2", "3", "1-1-1", "2-2-2"],
    "strength": ["3", "5", "3-3-3", "5-5-5", "4-4-4"],
    "power": ["2", "3", "5", "3-3-3", "2-2-2-2"],
    "hypertrophy": ["8-12", "10-15", "12-15", "8-10"],
    "endurance": ["15-20", "20+", "AMRAP", "Max Reps"],
    "conditioning": ["21-15-9", "15-12-9", "10-8-6", "AMRAP", "For Time", "EMOM"],
}


# ============================================================================
# Strength pools
# ============================================================================

STRENGTH_POOLS: dict[str, list[dict]] = {
    "upper": [
        {"name": "Strict Press", "category": "Olympic Lift", "scaling": "Scale to dumbbell press"},
        {"name": "Bench Press", "category": "Olympic Lift", "scaling": "Scale to push-ups"},
        {"name": "Push Press", "category": "Olympic Lift", "scaling": "Scale to dumbbell press"},
        {"name": "Weighted Pull-ups", "category": "Gymnastics", "scaling": "Scale to pull-ups or ring rows"},
        {"name": "Incline Dumbbell Press", "category": "Olympic Lift", "scaling": "Scale weight as needed"},
        {"name": "Weighted Dips", "category": "Gymnastics", "scaling": "Scale to bodyweight dips"},
    ],
    "lower": [
        {"name": "Back Squat", "category": "Olympic Lift", "scaling": "Scale to goblet squats"},
        {"name": "Front Squat", "category": "Olympic Lift", "scaling": "Scale to goblet squats"},
        {"name": "Deadlift", "category": "Olympic Lift", "scaling": "Scale weight as needed"},
        {"name": "Romanian Deadlift", "category": "Olympic Lift", "scaling": "Scale to bodyweight RDL"},
        {"name": "Sumo Deadlift", "category": "Olympic Lift", "scaling": "Scale weight as needed"},
        {"name": "Bulgarian Split Squat", "category": "Accessory", "scaling": "Add weight as needed"},
    ],
}
STRENGTH_SETS: int = 5
STRENGTH_REST_SECONDS: int = 180

MAX_STRENGTH_MOVEMENTS: list[str] = ["Clean & Jerk", "Snatch", "Back Squat", "Deadlift", "Strict Press"]


# ============================================================================
# Olympic lifting
# ============================================================================

OLYMPIC_LIFTS: list[dict] = [
    {"name": "Power Snatch", "sets": 7, "reps": "2", "scaling": "Scale to dumbbell snatch"},
    {"name": "Power Clean", "sets": 6, "reps": "3", "scaling": "Scale to dumbbell clean"},
    {"name": "Clean & Jerk", "sets": 5, "reps": "1+1", "scaling": "Scale to thrusters"},
    {"name": "Snatch", "sets": 5, "reps": "1", "scaling": "Scale to overhead squat"},
    {"name": "Hang Power Clean", "sets": 6, "reps": "3", "scaling": "Scale to dumbbell clean"},
    {"name": "Push Jerk", "sets": 5, "reps": "2", "scaling": "Scale to push press"},
]


# ============================================================================
# Mixed modal conditioning
# ============================================================================

METCON_STYLES: list[dict] = [
    {"name": "For Time", "duration": 15, "format": "sprint"},
    {"name": "AMRAP", "duration": 20, "format": "volume"},
    {"name": "EMOM", "duration": 18, "format": "interval"},
    {"name": "Ladder", "duration": 16, "format": "ascending"},
    {"name": "Tabata", "duration": 12, "format": "high_intensity"},
    {"name": "Chipper", "duration": 25, "format": "long_grind"},
]

MOVEMENT_COMBINATIONS: list[list[dict]] = [
    # Power + gymnastics + monostructural
    [
        {"name": "Deadlifts", "category": "Olympic Lift", "reps": "21", "load_type": "fixed_weight", "load_value": 70, "scaling": "Scale weight as needed"},
        {"name": "Handstand Push-ups", "category": "Gymnastics", "reps": "21", "load_type": "bodyweight", "scaling": "Scale to pike push-ups"},
        {"name": "Box Jumps", "category": "Gymnastics", "reps": "21", "load_type": "bodyweight", "scaling": '24"/20" box'},
    ],
    # Olympic + gymnastics
    [
        {"name": "Thrusters", "category": "Olympic Lift", "reps": "15", "load_type": "fixed_weight", "load_value": 43, "scaling": "RX: 95/65 lbs"},
        {"name": "Chest-to-Bar Pull-ups", "category": "Gymnastics", "reps": "15", "load_type": "bodyweight", "scaling": "Scale to pull-ups"},
        {"name": "Burpee Box Jump Overs", "category": "Gymnastics", "reps": "15", "load_type": "bodyweight", "scaling": "Step over if needed"},
    ],
    # Bodyweight + cardio
    [
        {"name": "Burpees", "category": "Gymnastics", "reps": "10", "load_type": "bodyweight", "scaling": "Step back burpees"},
        {"name": "Air Squats", "category": "Gymnastics", "reps": "15", "load_type": "bodyweight", "scaling": "Full range of motion"},
        {"name": "Push-ups", "category": "Gymnastics", "reps": "20", "load_type": "bodyweight", "scaling": "Knee push-ups"},
    ],
    # Heavy + fast
    [
        {"name": "Front Squats", "category": "Olympic Lift", "reps": "12", "load_type": "fixed_weight", "load_value": 60, "scaling": "Scale weight"},
        {"name": "Toes-to-Bar", "category": "Gymnastics", "reps": "12", "load_type": "bodyweight", "scaling": "Scale to knee raises"},
        {"name": "Rowing", "category": "Monostructural", "reps": "250m", "load_type": "none", "scaling": "Consistent pace"},
    ],
    # Gymnastics heavy
    [
        {"name": "Muscle-ups", "category": "Gymnastics", "reps": "8", "load_type": "bodyweight", "scaling": "Scale to ring rows + dips"},
        {"name": "Overhead Squats", "category": "Olympic Lift", "reps": "12", "load_type": "fixed_weight", "load_value": 35, "scaling": "Scale weight"},
        {"name": "Double Unders", "category": "Gymnastics", "reps": "50", "load_type": "bodyweight", "scaling": "Scale to single unders"},
    ],
    # Endurance mix
    [
        {"name": "Wall Balls", "category": "Olympic Lift", "reps": "20", "load_type": "fixed_weight", "load_value": 9, "scaling": "20/14 lb ball"},
        {"name": "Calorie Row", "category": "Monostructural", "reps": "15", "load_type": "none", "scaling": "Steady pace"},
        {"name": "Handstand Walk", "category": "Gymnastics", "reps": "50 feet", "load_type": "bodyweight", "scaling": "Scale to bear crawl"},
    ],
]

BENCHMARK_EVERY_N_WEEKS: int = 6

# Rotation order matters: weeks 1, 7, 13 emit fran, helen, cindy
BENCHMARK_WORKOUTS: dict[str, dict] = {
    "fran": {
        "style": "For Time",
        "exercises": [
            {"name": "Thrusters", "reps": "21-15-9", "weight": 95, "category": "Olympic Lift"},
            {"name": "Pull-ups", "reps": "21-15-9", "category": "Gymnastics"},
        ],
    },
    "helen": {
        "style": "3 Rounds For Time",
        "exercises": [
            {"name": "Running", "reps": "400m", "category": "Monostructural"},
            {"name": "Kettlebell Swings", "reps": "21", "weight": 53, "category": "Olympic Lift"},
            {"name": "Pull-ups", "reps": "12", "category": "Gymnastics"},
        ],
    },
    "cindy": {
        "style": "20 min AMRAP",
        "exercises": [
            {"name": "Pull-ups", "reps": "5", "category": "Gymnastics"},
            {"name": "Push-ups", "reps": "10", "category": "Gymnastics"},
            {"name": "Air Squats", "reps": "15", "category": "Gymnastics"},
        ],
    },
}


# ============================================================================
# Warm-up, accessory, gymnastics, endurance
# ============================================================================

WARM_UPS: dict[str, list[dict]] = {
    "upper": [
        {"name": "Arm Circles", "sets": 1, "reps": "10 each direction"},
        {"name": "Shoulder Dislocates", "sets": 1, "reps": "10"},
        {"name": "Band Pull-aparts", "sets": 2, "reps": "15"},
    ],
    "lower": [
        {"name": "Leg Swings", "sets": 1, "reps": "10 each direction"},
        {"name": "Walking Lunges", "sets": 1, "reps": "10 each leg"},
        {"name": "Glute Bridges", "sets": 2, "reps": "15"},
    ],
    "general": [
        {"name": "Light Movement", "duration_seconds": 600},
        {"name": "Joint Mobility", "duration_seconds": 300},
    ],
}

ACCESSORIES: dict[str, list[dict]] = {
    "upper": [
        {"name": "Dumbbell Rows", "sets": 3, "reps": "12", "load_type": "fixed_weight", "rest_seconds": 90},
        {"name": "Tricep Extensions", "sets": 3, "reps": "15", "load_type": "fixed_weight", "rest_seconds": 60},
    ],
    "lower": [
        {"name": "Walking Lunges", "sets": 3, "reps": "12 each leg", "load_type": "bodyweight", "rest_seconds": 90},
        {"name": "Calf Raises", "sets": 3, "reps": "20", "load_type": "bodyweight", "rest_seconds": 60},
    ],
}

GYMNASTICS_SKILLS: list[dict] = [
    {"name": "Ring Muscle-ups", "sets": 5, "reps": "3", "scaling": "Scale to ring rows + ring dips"},
    {"name": "Handstand Push-ups", "sets": 4, "reps": "5", "scaling": "Scale to pike push-ups"},
    {"name": "Pistol Squats", "sets": 3, "reps": "5 each leg", "scaling": "Scale to assisted pistols"},
    {"name": "L-sits", "sets": 4, "reps": "15 seconds", "scaling": "Scale to tucked L-sits"},
]

GYMNASTICS_CONDITIONING: list[dict] = [
    {"name": "Toes-to-Bar", "reps": "50", "notes": "For Time"},
    {"name": "Double Unders", "reps": "100"},
    {"name": "Burpees", "reps": "25"},
]

ENDURANCE_MODALITIES: list[str] = ["Running", "Rowing", "Cycling", "Swimming"]
ENDURANCE_BASE_MINUTES: int = 30
ENDURANCE_WEEKLY_MINUTES: int = 2
ENDURANCE_MAX_MINUTES: int = 60


# ============================================================================
# Session naming
# ============================================================================

FOCUS_DISPLAY_NAMES: dict[str, str] = {
    "upper_strength": "Upper Body Strength",
    "lower_strength": "Lower Body Strength",
    "olympic_skill": "Olympic Lifting",
    "mixed_modal": "Mixed Modal",
    "gymnastics": "Gymnastics Focus",
    "endurance": "Aerobic Conditioning",
    "max_strength": "Max Strength",
    "conditioning": "High Intensity",
    "competition_simulation": "Competition Prep",
    "zone2": "Zone 2 Endurance",
    "tempo": "Tempo Work",
    "intervals": "Interval Training",
    "push": "Push Focus",
    "pull": "Pull Focus",
    "legs": "Leg Focus",
    "emom": "EMOM Conditioning",
    "amrap": "AMRAP Challenge",
}


# ============================================================================
# Exercise catalog defaults for entries created during generation
# ============================================================================

DEFAULT_CATALOG_EQUIPMENT: list[str] = ["barbell"]
DEFAULT_CATALOG_SKILL_LEVEL: str = "Intermediate"
