"""
Typed models for the deserialized Blue Archive data.

All models are frozen pydantic models; decoding is tolerant of field-name
casing, historical aliases and unknown effect types.
"""

from .base import Empty, LenientModel, PresentOrEmpty, present
from .ids import ID
from .effects import (
    EFFECT_TYPES,
    Accumulation,
    BuffAlly,
    BuffSelf,
    BuffTarget,
    CriticalCheck,
    CrowdControl,
    DMGByHit,
    DMGDot,
    DMGEcho,
    DMGEchoWithScaling,
    DMGMulti,
    DMGSingle,
    DMGZone,
    Effect,
    FormChange,
    Frames,
    Heal,
    HealDot,
    HealZone,
    IgnoreDelay,
    Radius,
    RadiusType,
    Restriction,
    ScaleValue,
    Shield,
    SkillKind,
    UnknownEffect,
    effect_adapter,
)
from .students import (
    Gear,
    Height,
    LevelUpType,
    Released,
    Skill,
    Student,
    Summon,
    Weapon,
)

__all__ = [
    # Base
    "LenientModel",
    "Empty",
    "PresentOrEmpty",
    "present",
    "ID",
    # Effects
    "Effect",
    "EFFECT_TYPES",
    "effect_adapter",
    "ScaleValue",
    "Restriction",
    "Frames",
    "Radius",
    "RadiusType",
    "CriticalCheck",
    "SkillKind",
    "Accumulation",
    "BuffSelf",
    "BuffTarget",
    "BuffAlly",
    "DMGSingle",
    "DMGMulti",
    "DMGEcho",
    "DMGEchoWithScaling",
    "DMGDot",
    "DMGZone",
    "DMGByHit",
    "HealDot",
    "Heal",
    "HealZone",
    "CrowdControl",
    "Shield",
    "FormChange",
    "IgnoreDelay",
    "UnknownEffect",
    # Students
    "Student",
    "Skill",
    "Summon",
    "Weapon",
    "Gear",
    "Released",
    "Height",
    "LevelUpType",
]
