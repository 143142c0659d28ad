"""Shared fixtures for blue_archive tests."""

import copy
from typing import Any, Dict, List

import orjson
import pytest

from blue_archive.data import StudentDataset
from blue_archive.types import Student

HINA_RAW: Dict[str, Any] = {
    "Id": 10004,
    "IsReleased": [True, True, False],
    "DefaultOrder": 12,
    "PathName": "hina",
    "DevName": "Hina",
    "Name": "Hina",
    "School": "Gehenna",
    "Club": "Fuuki",
    "StarGrade": 3,
    "SquadType": "Main",
    "TacticRole": "DamageDealer",
    "Summons": [],
    "Position": "Back",
    "BulletType": "Explosion",
    "ArmorType": "HeavyArmor",
    "StreetBattleAdaptation": 2,
    "OutdoorBattleAdaptation": 4,
    "IndoorBattleAdaptation": 2,
    "WeaponType": "MG",
    "WeaponImg": "weapon_icon_10004",
    "Cover": False,
    "Equipment": ["Hat", "Gloves", "Watch"],
    "CollectionBG": "BG_HinaRoom",
    "FamilyName": "Sorasaki",
    "PersonalName": "Hina",
    "SchoolYear": "3rd Year",
    "CharacterAge": "17 years old",
    "Birthday": "February 19",
    "CharacterSSRNew": "I&#39;m Hina, chairwoman of the Prefect Team.",
    "ProfileIntroduction": "Chairwoman of the Gehenna Prefect Team &amp; its strongest member.",
    "Hobby": "None",
    "CharacterVoice": "Hirohashi Ryou",
    "BirthDay": "2/19",
    "Illustrator": "DoReMi",
    "Designer": "DoReMi",
    "CharHeightMetric": "142cm",
    "CharHeightImperial": "4&apos;8&quot;",
    "StabilityPoint": 1600,
    "AttackPower1": 373,
    "AttackPower100": 3735,
    "MaxHP1": 2205,
    "MaxHP100": 19859,
    "DefensePower1": 24,
    "DefensePower100": 120,
    "HealPower1": 1433,
    "HealPower100": 4302,
    "DodgePoint": 211,
    "AccuracyPoint": 689,
    "CriticalPoint": 201,
    "CriticalDamageRate": 20000,
    "AmmoCount": 60,
    "AmmoCost": 10,
    "Range": 650,
    "RegenCost": 700,
    "Skills": [
        {
            "SkillType": "ex",
            "Name": "Suppression Start",
            "Desc": "Deals <?1> damage to enemies in a fan-shaped area.",
            "Parameters": [["520%", "598%", "676%", "754%", "910%"]],
            "Cost": [5, 5, 5, 5, 5],
            "Icon": "COMMON_SKILLICON_LINE",
            "Effects": [
                {
                    "Type": "DMGMulti",
                    "CriticalCheck": "Check",
                    "Hits": [1000, 1000, 1000, 1000, 1000],
                    "Scale": [5200, 5980, 6760, 7540, 9100],
                }
            ],
        },
        {
            "SkillType": "autoattack",
            "Effects": [
                {"Type": "DMGSingle", "Scale": [10000], "Hits": [1000]}
            ],
        },
    ],
    "FavorStatType": ["AttackPower", "MaxHP"],
    "FavorStatValue": [[0, 0], [19, 0], [0, 140], [19, 0]],
    "FavorAlts": [],
    "MemoryLobby": [3],
    "MemoryLobbyBGM": "Theme_20",
    "FurnitureInteraction": [],
    "FavorItemTags": ["BC", "Bc"],
    "FavorItemUniqueTags": ["F_Hina"],
    "IsLimited": 0,
    "Weapon": {
        "Name": "Terror of the Last Era",
        "Desc": "A machine gun Hina carries at all times.",
        "AdaptationType": "Street",
        "AdaptationValue": 2,
        "AttackPower1": 129,
        "AttackPower100": 1290,
        "MaxHP1": 0,
        "MaxHP100": 0,
        "HealPower1": 0,
        "HealPower100": 0,
        "StatLevelUpType": "Standard",
    },
    "Gear": {},
    "SkillExMaterial": [[4020, 4010]],
    "SkillExMaterialAmount": [[12, 24]],
    "SkillMaterial": [[4022]],
    "SkillMaterialAmount": [[8]],
}

GEAR_RAW: Dict[str, Any] = {
    "Released": [True, False, False],
    "StatType": ["CriticalPoint_Base"],
    "StatValue": [[180, 180]],
    "Name": "Pocket Watch",
    "Desc": "An old pocket watch that still keeps time.",
    "Icon": "item_icon_gear_10004",
    "TierUpMaterial": [[2000, 2001]],
    "TierUpMaterialAmount": [[10, 5]],
}


def make_student_raw(**overrides: Any) -> Dict[str, Any]:
    """Return a raw student record, based on Hina, with keys replaced.

    A value of None removes the key instead of setting it.
    """
    raw = copy.deepcopy(HINA_RAW)
    for key, value in overrides.items():
        if value is None:
            raw.pop(key, None)
        else:
            raw[key] = value
    return raw


def make_student(**overrides: Any) -> Student:
    """Decode a student from `make_student_raw(**overrides)`."""
    return Student.model_validate(make_student_raw(**overrides))


@pytest.fixture
def hina_raw() -> Dict[str, Any]:
    """Raw record of Hina."""
    return make_student_raw()


@pytest.fixture
def hina() -> Student:
    """Decoded Hina."""
    return make_student()


@pytest.fixture
def roster() -> List[Student]:
    """A small mixed roster covering several schools and release states."""
    return [
        make_student(),
        make_student(
            Id=10015, Name="Asuna", DevName="Asuna", PersonalName="Asuna",
            FamilyName="Ichinose", School="Millennium", Club="CleanNClearing",
            SquadType="Main", TacticRole="DamageDealer", Position="Front",
            WeaponType="SMG", BulletType="Mystic", ArmorType="LightArmor",
            IsReleased=[True, True, True],
        ),
        make_student(
            Id=10005, Name="Mika", DevName="Mika", PersonalName="Mika",
            FamilyName="Misono", School="Trinity", Club="TeaParty",
            SquadType="Main", TacticRole="DamageDealer", Position="Front",
            WeaponType="SMG", BulletType="Pierce", ArmorType="LightArmor",
            IsReleased=[True, False, False],
        ),
        make_student(
            Id=20001, Name="Hanako", DevName="Hanako", PersonalName="Hanako",
            FamilyName="Urawa", School="Trinity", Club="RemedialClass",
            SquadType="Support", TacticRole="Healer", Position="Back",
            WeaponType="SR", BulletType="Pierce", ArmorType="ElasticArmor",
            IsReleased=[True, True, False],
        ),
        make_student(
            Id=26000, Name="Kuzunoha", DevName="Kuzunoha", PersonalName="Kuzunoha",
            FamilyName="", School="Hyakkaryouran", Club="EmptyClub",
            SquadType="Support", TacticRole="Supporter", Position="Back",
            WeaponType="HG", BulletType="Sonic", ArmorType="Unarmed",
            IsReleased=[True, False, False],
        ),
    ]


@pytest.fixture
def dataset(roster: List[Student]) -> StudentDataset:
    """Dataset built from the roster, filtering on Global release flags."""
    return StudentDataset(roster)


@pytest.fixture
def students_document(roster: List[Student]) -> bytes:
    """The roster encoded as an upstream students document."""
    return orjson.dumps([student.to_wire() for student in roster])


class StubTransport:
    """Transport returning canned bodies and recording requested paths."""

    def __init__(self, body: bytes):
        self.body = body
        self.paths: List[str] = []

    def fetch(self, path: str) -> bytes:
        self.paths.append(path)
        return self.body


@pytest.fixture
def stub_transport(students_document: bytes) -> StubTransport:
    return StubTransport(students_document)
