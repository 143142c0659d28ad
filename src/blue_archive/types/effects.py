"""
Skill effect schema.

A skill carries a list of effects. Each effect is a JSON object tagged by its
"Type" field, and every type has its own set of (often optional) fields.
`Effect` is the discriminated union over all known types; any record whose
type is missing or not listed here decodes to `UnknownEffect` instead of
failing, because the upstream schema gains new effect types independently of
this package.
"""

from enum import Enum
from typing import Any, Dict, List, Literal, Mapping, Optional, Type, Union

from pydantic import ConfigDict, Discriminator, Tag, TypeAdapter
from typing_extensions import Annotated

from .base import LenientModel, iter_lower_keys

ScaleValue = Union[List[int], List[List[int]]]
"""Single-stage (flat) or multi-stage (nested) scaling table."""


class CriticalCheck(str, Enum):
    CHECK = "Check"
    ALWAYS = "Always"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value: object) -> "CriticalCheck":
        return cls.UNKNOWN


class SkillKind(str, Enum):
    """Slot a skill occupies. Upstream casing varies, so matching ignores case."""
    WEAPON_PASSIVE = "WeaponPassive"
    SUB = "Sub"
    EX = "Ex"
    NORMAL = "Normal"
    AUTO_ATTACK = "AutoAttack"
    PASSIVE = "Passive"
    GEAR_NORMAL = "GearNormal"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value: object) -> "SkillKind":
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return cls.UNKNOWN


class Restriction(LenientModel):
    """Condition limiting which allies a buff applies to."""
    property: str
    operand: str
    value: Union[int, str]


class Frames(LenientModel):
    attack_enter_duration: int
    attack_start_duration: int
    attack_end_duration: int
    attack_burst_round_over_delay: int
    attacking_duration: int
    attack_reload_duration: int

    field_aliases = {"attacking_duration": ("AttackIngDuration",)}


class RadiusType(str, Enum):
    CIRCLE = "Circle"
    BOUNCE = "Bounce"
    FAN = "Fan"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value: object) -> "RadiusType":
        return cls.UNKNOWN


class Radius(LenientModel):
    """Area a skill covers: its shape and size."""
    kind: RadiusType
    radius: int

    field_aliases = {"kind": ("Type",)}


# =============================================================================
# Effect variants
# =============================================================================

class Accumulation(LenientModel):
    type: Literal["Accumulation"] = "Accumulation"
    scale: ScaleValue


class BuffSelf(LenientModel):
    type: Literal["BuffSelf"] = "BuffSelf"
    stat: str
    stack_same: Optional[int] = None
    value: Optional[List[List[int]]] = None
    scale: Optional[List[int]] = None
    channel: Optional[int] = None
    icon: Optional[str] = None


class BuffTarget(LenientModel):
    type: Literal["BuffTarget"] = "BuffTarget"
    restrictions: Optional[List[Restriction]] = None
    value: List[List[int]]
    stat: str
    channel: int


class BuffAlly(LenientModel):
    type: Literal["BuffAlly"] = "BuffAlly"
    restrictions: Optional[List[Restriction]] = None
    value: List[List[int]]
    stat: str
    channel: int


class DMGSingle(LenientModel):
    type: Literal["DMGSingle"] = "DMGSingle"
    source_stat: Optional[str] = None
    critical: Optional[int] = None
    critical_check: Optional[CriticalCheck] = None
    scale: ScaleValue
    ignore_def: Optional[List[int]] = None
    hits: Optional[List[int]] = None
    frames: Optional[Frames] = None


class DMGMulti(LenientModel):
    type: Literal["DMGMulti"] = "DMGMulti"
    critical: Optional[int] = None
    critical_check: Optional[CriticalCheck] = None
    substitute_condition: Optional[str] = None
    hits: List[int]
    hits_parameter: Optional[int] = None
    scale: ScaleValue
    substitute_scale: Optional[List[int]] = None
    ignore_def: Optional[List[int]] = None
    frames: Optional[Frames] = None


class DMGEcho(LenientModel):
    type: Literal["DMGEcho"] = "DMGEcho"
    critical_check: CriticalCheck
    scale: ScaleValue
    ignore_def: Optional[List[int]] = None


class DMGEchoWithScaling(LenientModel):
    type: Literal["DMGEchoWithScaling"] = "DMGEchoWithScaling"
    critical_check: CriticalCheck
    scale: ScaleValue


class DMGDot(LenientModel):
    """Damage over time. Duration and period are sometimes numeric strings."""
    type: Literal["DMGDot"] = "DMGDot"
    duration: int
    period: int
    icon: str
    scale: ScaleValue


class DMGZone(LenientModel):
    type: Literal["DMGZone"] = "DMGZone"
    zone_hit_interval: Optional[int] = None
    zone_duration: Optional[int] = None
    hit_frames: Optional[List[int]] = None
    critical_check: CriticalCheck
    hits: Optional[List[int]] = None
    hits_parameter: Optional[int] = None
    scale: ScaleValue


class DMGByHit(LenientModel):
    type: Literal["DMGByHit"] = "DMGByHit"
    icon: str
    scale: ScaleValue


class HealDot(LenientModel):
    type: Literal["HealDot"] = "HealDot"
    duration: int
    period: int
    scale: ScaleValue


class Heal(LenientModel):
    type: Literal["Heal"] = "Heal"
    scale: ScaleValue


class HealZone(LenientModel):
    type: Literal["HealZone"] = "HealZone"
    hit_frames: List[int]
    scale: ScaleValue


class CrowdControl(LenientModel):
    type: Literal["CrowdControl"] = "CrowdControl"
    chance: int
    icon: str
    scale: ScaleValue


class Shield(LenientModel):
    type: Literal["Shield"] = "Shield"
    scale: ScaleValue


class FormChange(LenientModel):
    type: Literal["FormChange"] = "FormChange"
    hide_form_change_icon: Optional[bool] = None
    frames: Frames
    hits: List[int]
    critical_check: Optional[CriticalCheck] = None
    scale: Optional[List[int]] = None


class IgnoreDelay(LenientModel):
    type: Literal["IgnoreDelay"] = "IgnoreDelay"
    scale: List[int]


class UnknownEffect(LenientModel):
    """Catch-all for effect types this package does not model.

    Keeps the raw type and every other field so the record re-encodes to the
    shape it arrived in.
    """
    model_config = ConfigDict(extra="allow")

    type: Any = None


EFFECT_TYPES: Dict[str, Type[LenientModel]] = {
    cls.model_fields["type"].default: cls
    for cls in (
        Accumulation,
        BuffSelf,
        BuffTarget,
        BuffAlly,
        DMGSingle,
        DMGMulti,
        DMGEcho,
        DMGEchoWithScaling,
        DMGDot,
        DMGZone,
        DMGByHit,
        HealDot,
        Heal,
        HealZone,
        CrowdControl,
        Shield,
        FormChange,
        IgnoreDelay,
    )
}
"""Maps each known "Type" tag to its model."""

UNKNOWN_TAG = "Unknown"


def effect_tag(value: Any) -> str:
    """Pick the union member for a raw record or an already decoded effect."""
    if isinstance(value, UnknownEffect):
        return UNKNOWN_TAG
    if isinstance(value, Mapping):
        tag = next((item for key, item in iter_lower_keys(value) if key == "type"), None)
    else:
        tag = getattr(value, "type", None)
    return tag if isinstance(tag, str) and tag in EFFECT_TYPES else UNKNOWN_TAG


Effect = Annotated[
    Union[
        Annotated[Accumulation, Tag("Accumulation")],
        Annotated[BuffSelf, Tag("BuffSelf")],
        Annotated[BuffTarget, Tag("BuffTarget")],
        Annotated[BuffAlly, Tag("BuffAlly")],
        Annotated[DMGSingle, Tag("DMGSingle")],
        Annotated[DMGMulti, Tag("DMGMulti")],
        Annotated[DMGEcho, Tag("DMGEcho")],
        Annotated[DMGEchoWithScaling, Tag("DMGEchoWithScaling")],
        Annotated[DMGDot, Tag("DMGDot")],
        Annotated[DMGZone, Tag("DMGZone")],
        Annotated[DMGByHit, Tag("DMGByHit")],
        Annotated[HealDot, Tag("HealDot")],
        Annotated[Heal, Tag("Heal")],
        Annotated[HealZone, Tag("HealZone")],
        Annotated[CrowdControl, Tag("CrowdControl")],
        Annotated[Shield, Tag("Shield")],
        Annotated[FormChange, Tag("FormChange")],
        Annotated[IgnoreDelay, Tag("IgnoreDelay")],
        Annotated[UnknownEffect, Tag(UNKNOWN_TAG)],
    ],
    Discriminator(effect_tag),
]
"""Any skill effect; exactly one variant is active per value."""

effect_adapter = TypeAdapter(Effect)
