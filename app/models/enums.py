"""Enumerations shared by models, schemas and the generator."""
from enum import Enum


class TrackKind(str, Enum):
    """Weekly template archetypes, keyed by track slug."""
    MEDEIROS_METHOD = "medeiros-method"
    COMPETE = "compete"
    CONJUGATE_STRENGTH = "conjugate-strength"
    ENDURE = "endure"
    BUILD = "build"
    FOUNDATIONS = "foundations"
    MINIMAL_GEAR = "minimal-gear"
    RECOVER_MOBILIZE = "recover-mobilize"


class SessionType(str, Enum):
    STRENGTH = "Strength"
    SKILL = "Skill"
    CONDITIONING = "Conditioning"
    RECOVERY = "Recovery"
    ENDURANCE = "Endurance"
    HYPERTROPHY = "Hypertrophy"
    FOUNDATION = "Foundation"


class SubSessionLabel(str, Enum):
    AM = "AM"
    PM = "PM"


class BlockType(str, Enum):
    WARM_UP = "Warm-Up"
    STRENGTH = "Strength"
    SKILL = "Skill"
    ACCESSORY = "Accessory"
    METCON = "Metcon"
    ENDURANCE = "Endurance"
    CONDITIONING = "Conditioning"


class LoadType(str, Enum):
    PERCENTAGE = "percentage"
    FIXED_WEIGHT = "fixed_weight"
    BODYWEIGHT = "bodyweight"
    NONE = "none"


class TrainingGoal(str, Enum):
    """Keys into the rep-scheme table."""
    MAX_STRENGTH = "max_strength"
    STRENGTH = "strength"
    POWER = "power"
    HYPERTROPHY = "hypertrophy"
    ENDURANCE = "endurance"
    CONDITIONING = "conditioning"
