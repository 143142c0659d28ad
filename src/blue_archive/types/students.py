"""
Student (playable character) schema and its nested records.

Raw string attributes such as school or weapon type are stored exactly as
upstream sends them and converted to the closed enumerations in
`blue_archive.enums` on access, so unseen values never fail decoding.
"""

import html
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from pydantic import ConfigDict, Field, RootModel, field_validator, model_validator

from ..enums import (
    Armor,
    BulletType,
    Club,
    Position,
    Region,
    School,
    Squad,
    TacticalRole,
    Unknown,
    WeaponType,
    parse_enum,
)
from .base import Empty, LenientModel, PresentOrEmpty, present
from .effects import Effect, Radius, SkillKind
from .ids import ID


class Released(RootModel[Tuple[bool, ...]]):
    """Per-region release flags, ordered Japan, Global, China.

    Older data sends a single boolean; it is applied to every region.
    """

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _expand_single_flag(cls, data: object) -> object:
        if isinstance(data, bool):
            return (data,) * len(Region)
        return data

    def in_region(self, region: Region) -> bool:
        """Whether the record is released on the given region's server."""
        return region < len(self.root) and self.root[region]

    @property
    def japan(self) -> bool:
        return self.in_region(Region.JAPAN)

    @property
    def global_(self) -> bool:
        return self.in_region(Region.GLOBAL)

    @property
    def china(self) -> bool:
        return self.in_region(Region.CHINA)


@dataclass(frozen=True)
class Height:
    """Height of a student, metric always present, imperial only for some."""
    metric: str
    imperial: Optional[str] = None


class LevelUpType(str, Enum):
    """Stat growth curve of a unique weapon."""
    STANDARD = "Standard"
    PREMATURE = "Premature"
    LATE_BLOOM = "LateBloom"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value: object) -> "LevelUpType":
        return cls.UNKNOWN


class Skill(LenientModel):
    """A student skill; much of it is kept close to the raw data."""
    kind: SkillKind
    name: Optional[str] = None
    desc: Optional[str] = None
    parameters: Optional[List[List[str]]] = None
    cost: Optional[List[int]] = None
    icon: Optional[str] = None
    radius: Optional[List[Radius]] = None
    effects: List[Effect] = Field(default_factory=list)

    field_aliases = {"kind": ("SkillType",)}


class Summon(LenientModel):
    id: ID
    source_skill: str
    inherit_caster_stat: List[str]
    inherit_caster_amount: Optional[List[List[int]]] = None


class Weapon(LenientModel):
    """Unique weapon of a student."""
    name: str
    description: str
    adaptation_type: str
    adaptation_value: int
    attack_power_1: int
    attack_power_100: int
    max_hp_1: int
    max_hp_100: int
    heal_power_1: int
    heal_power_100: int
    stat_level_up_type: LevelUpType

    field_aliases = {"description": ("Desc",)}


class Gear(LenientModel):
    """Unique gear (favourite item) of a student."""
    released: Released
    stat_type: List[str]
    stat_value: List[List[int]]
    name: str
    description: str
    icon: str
    tier_up_material: List[List[int]]
    tier_up_material_amount: List[List[int]]

    field_aliases = {
        "released": ("IsReleased",),
        "description": ("Desc",),
    }


class Student(LenientModel):
    """A playable student as described by the upstream data."""

    id: ID
    released: Released
    default_order: int
    path_name: str
    dev_name: str
    # Display name, possibly with a variant tag such as "Toki (Bunny)"
    name: str
    age: str
    first_name: str
    last_name: str
    # Profile text, HTML entities decoded
    description: str
    school: str
    club: str
    stars: int
    squad_type: str
    tactic_role: str
    summons: List[Summon] = Field(default_factory=list)
    position: str
    bullet_type: str
    armor_type: str
    street_battle_adaptation: int
    outdoor_battle_adaptation: int
    indoor_battle_adaptation: int
    weapon_type: str
    weapon_img: str
    cover: bool
    equipment: List[str] = Field(default_factory=list)
    collection_bg: str
    collection_texture: Optional[str] = None
    family_name_ruby: Optional[str] = None
    school_year: Optional[str] = None
    # Birthday as "Month Day"
    birthday: str
    character_ssr_new: Optional[str] = None
    hobby: str
    voice_actor: str
    # Birthday as "MM/DD"
    birthday_short: str
    illustrator: str
    designer: str
    char_height_metric: str
    char_height_imperial: Optional[str] = None
    stability_point: int
    attack_power_1: int
    attack_power_100: int
    max_hp_1: int
    max_hp_100: int
    defense_power_1: int
    defense_power_100: int
    heal_power_1: int
    heal_power_100: int
    dodge_point: int
    accuracy_point: int
    critical_point: int
    critical_damage_rate: int
    ammo_count: int
    ammo_cost: int
    range: int
    regen_cost: int
    skills: List[Skill] = Field(default_factory=list)
    favor_stat_type: List[str] = Field(default_factory=list)
    favor_stat_value: List[List[int]] = Field(default_factory=list)
    favor_alts: List[int] = Field(default_factory=list)
    memory_lobby: List[int] = Field(default_factory=list)
    memory_lobby_bgm: str = ""
    favor_item_tags: List[str] = Field(default_factory=list)
    favor_item_unique_tags: List[str] = Field(default_factory=list)
    is_limited: int = 0
    weapon: Weapon
    gear_slot: PresentOrEmpty[Gear] = Field(default_factory=Empty, alias="Gear")
    skill_ex_material: List[List[int]] = Field(default_factory=list)
    skill_ex_material_amount: List[List[int]] = Field(default_factory=list)
    skill_material: List[List[int]] = Field(default_factory=list)
    skill_material_amount: List[List[int]] = Field(default_factory=list)

    field_aliases = {
        "released": ("IsReleased",),
        "age": ("CharacterAge",),
        "first_name": ("PersonalName",),
        "last_name": ("FamilyName",),
        "description": ("ProfileIntroduction",),
        "stars": ("StarGrade",),
        "collection_bg": ("CollectionBG",),
        "character_ssr_new": ("CharacterSSRNew",),
        "voice_actor": ("CharacterVoice",),
        "birthday_short": ("BirthDay",),
        "max_hp_1": ("MaxHP1",),
        "max_hp_100": ("MaxHP100",),
        "memory_lobby_bgm": ("MemoryLobbyBGM",),
    }

    @field_validator("description", mode="before")
    @classmethod
    def _decode_html(cls, value: object) -> object:
        if isinstance(value, str):
            return html.unescape(value)
        return value

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return (
            f"(ID: {self.id}, Name: {self.full_name_last}, "
            f"Age: {self.age}, School: {self.school_enum})"
        )

    # === NAMES AND PROFILE ===

    @property
    def full_name_last(self) -> str:
        """Full name with the family name first, e.g. "Sorasaki Hina"."""
        return f"{self.last_name} {self.first_name}"

    @property
    def full_name_first(self) -> str:
        """Full name with the personal name first, e.g. "Hina Sorasaki"."""
        return f"{self.first_name} {self.last_name}"

    @property
    def quote_ssr(self) -> Optional[str]:
        """The line spoken when recruiting this student, if there is one."""
        if not self.character_ssr_new:
            return None
        return html.unescape(self.character_ssr_new)

    @property
    def height(self) -> Height:
        imperial = self.char_height_imperial
        return Height(
            metric=self.char_height_metric,
            imperial=html.unescape(imperial) if imperial else None,
        )

    @property
    def hobby_text(self) -> Optional[str]:
        """The hobby of the student; upstream writes "None" when there is none."""
        return None if self.hobby == "None" else self.hobby

    @property
    def age_value(self) -> Optional[int]:
        """Numeric age, or None for values such as "Top Secret"."""
        match = re.match(r"\s*(\d+)", self.age)
        return int(match.group(1)) if match else None

    # === RELEASE STATUS ===

    def is_released_in(self, region: Region) -> bool:
        return self.released.in_region(region)

    @property
    def is_released(self) -> bool:
        """Release status on the Global server."""
        return self.is_released_in(Region.GLOBAL)

    @property
    def gear(self) -> Optional[Gear]:
        """The unique gear of the student, None when upstream sent `{}`."""
        return present(self.gear_slot)

    # === TYPED VIEWS OF RAW STRING FIELDS ===

    @property
    def school_enum(self) -> Union[School, Unknown]:
        return parse_enum(School, self.school)

    @property
    def club_enum(self) -> Union[Club, Unknown]:
        return parse_enum(Club, self.club)

    @property
    def squad_enum(self) -> Union[Squad, Unknown]:
        return parse_enum(Squad, self.squad_type)

    @property
    def tactical_role_enum(self) -> Union[TacticalRole, Unknown]:
        return parse_enum(TacticalRole, self.tactic_role)

    @property
    def position_enum(self) -> Union[Position, Unknown]:
        return parse_enum(Position, self.position)

    @property
    def bullet_type_enum(self) -> Union[BulletType, Unknown]:
        return parse_enum(BulletType, self.bullet_type)

    @property
    def armor_enum(self) -> Union[Armor, Unknown]:
        return parse_enum(Armor, self.armor_type)

    @property
    def weapon_type_enum(self) -> Union[WeaponType, Unknown]:
        return parse_enum(WeaponType, self.weapon_type)
