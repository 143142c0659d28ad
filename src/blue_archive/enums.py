"""
Closed enumerations for free-text student fields.

Upstream data stores school, role, weapon type and similar attributes as
plain strings. The enums below cover the values known today; `parse_enum`
maps a raw string onto them and falls back to `Unknown` so that values
introduced upstream later never block decoding.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Type, TypeVar, Union

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True)
class Unknown:
    """A raw value that matched no member of the requested enumeration."""
    value: str

    def __str__(self) -> str:
        return self.value


def parse_enum(enum_cls: Type[E], raw: str) -> Union[E, Unknown]:
    """Map a raw string onto an enum member by exact value match.

    Args:
        enum_cls: Enumeration to look the value up in
        raw: Raw string taken from the upstream data

    Returns:
        The matching member, or `Unknown(raw)` when nothing matches
    """
    for member in enum_cls:
        if member.value == raw:
            return member
    return Unknown(raw)


class Region(IntEnum):
    """Game server region; the value is the index into upstream release flags."""
    JAPAN = 0
    GLOBAL = 1
    CHINA = 2

    @classmethod
    def from_name(cls, name: str) -> "Region":
        """Look a region up by name, ignoring case ("Global", "japan")."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown region: {name!r}") from None


class School(str, Enum):
    """Schools of Kivotos."""
    ABYDOS = "Abydos"
    GEHENNA = "Gehenna"
    HYAKKIYAKO = "Hyakkiyako"
    MILLENNIUM = "Millennium"
    SHANHAIJING = "Shanhaijing"
    TRINITY = "Trinity"
    VALKYRIE = "Valkyrie"
    RED_WINTER = "RedWinter"
    ARIUS = "Arius"
    SRT = "SRT"
    TOKIWADAI = "Tokiwadai"
    SAKUGAWA = "Sakugawa"
    HIGHLANDER = "Highlander"
    WILD_HUNT = "WildHunt"
    ETC = "ETC"

    def __str__(self) -> str:
        return self.value


class TacticalRole(str, Enum):
    DAMAGE_DEALER = "DamageDealer"
    TANKER = "Tanker"
    SUPPORTER = "Supporter"
    HEALER = "Healer"
    VEHICLE = "Vehicle"

    def __str__(self) -> str:
        return self.value


class Squad(str, Enum):
    """Striker (Main) or Special (Support) squad placement."""
    MAIN = "Main"
    SUPPORT = "Support"

    def __str__(self) -> str:
        return self.value


class Position(str, Enum):
    FRONT = "Front"
    MIDDLE = "Middle"
    BACK = "Back"

    def __str__(self) -> str:
        return self.value


class BulletType(str, Enum):
    """Damage (attack) type of a student."""
    EXPLOSION = "Explosion"
    PIERCE = "Pierce"
    MYSTIC = "Mystic"
    SONIC = "Sonic"

    def __str__(self) -> str:
        return self.value


class Armor(str, Enum):
    LIGHT = "LightArmor"
    HEAVY = "HeavyArmor"
    SPECIAL = "Unarmed"
    ELASTIC = "ElasticArmor"

    def __str__(self) -> str:
        return self.value


class WeaponType(str, Enum):
    SG = "SG"
    SMG = "SMG"
    AR = "AR"
    GL = "GL"
    HG = "HG"
    RL = "RL"
    SR = "SR"
    RG = "RG"
    MG = "MG"
    MT = "MT"
    FT = "FT"

    def __str__(self) -> str:
        return self.value


class Club(str, Enum):
    """Clubs students belong to (raw values are upstream dev names)."""
    KOHSHINJO_68 = "Kohshinjo68"
    JUSTICE = "Justice"
    CLEAN_N_CLEARING = "CleanNClearing"
    BOOK_CLUB = "BookClub"
    COUNTERMEASURE = "Countermeasure"
    ENGINEER = "Engineer"
    FOOD_SERVICE = "FoodService"
    FUUKI = "Fuuki"
    GOURMET_CLUB = "GourmetClub"
    HOUKAGO_DESSERT = "HoukagoDessert"
    KNIGHTS_HOSPITALLER = "KnightsHospitaller"
    MATSURI_OFFICE = "MatsuriOffice"
    MEIHUAYUAN = "Meihuayuan"
    ONMYOBU = "Onmyobu"
    REMEDIAL_CLASS = "RemedialClass"
    SPTF = "SPTF"
    SHUGYOBU = "Shugyobu"
    SISTERHOOD = "SisterHood"
    THE_SEMINAR = "TheSeminar"
    TRAINING_CLUB = "TrainingClub"
    TRINITY_VIGILANCE = "TrinityVigilance"
    VERITAS = "Veritas"
    NINPO_KENKYUBU = "NinpoKenkyubu"
    GAME_DEV = "GameDev"
    RED_WINTER_SECRETARY = "RedwinterSecretary"
    EMERGENTOLOGY = "Emergentology"
    RABBIT_PLATOON = "RabbitPlatoon"
    PANDEMONIUM_SOCIETY = "PandemoniumSociety"
    HOT_SPRINGS_DEPARTMENT = "HotSpringsDepartment"
    TEA_PARTY = "TeaParty"
    PUBLIC_PEACE_BUREAU = "PublicPeaceBureau"
    ARIUS_SQUAD = "AriusSqud"
    EMPTY_CLUB = "EmptyClub"
    SANTA_CLAUS = "SantaClaus"

    def __str__(self) -> str:
        return self.value


class Rarity(str, Enum):
    """Item rarity grade; `str()` gives the in-game label ("Super Rare")."""
    N = "N"
    R = "R"
    SR = "SR"
    SSR = "SSR"

    @property
    def display_name(self) -> str:
        return _RARITY_NAMES[self]

    @classmethod
    def from_name(cls, text: str) -> "Rarity":
        """Look a rarity up by grade ("SR") or by label ("Super Rare")."""
        for member in cls:
            if text in (member.value, member.display_name):
                return member
        raise ValueError(f"Unknown rarity: {text!r}")

    def __str__(self) -> str:
        return self.display_name


_RARITY_NAMES = {
    Rarity.N: "Normal",
    Rarity.R: "Rare",
    Rarity.SR: "Super Rare",
    Rarity.SSR: "Super Special Rare",
}
