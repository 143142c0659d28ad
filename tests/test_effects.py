"""Tests for the skill effect schema."""

from typing import Any, Dict

import pytest

from blue_archive.data import StudentLoader
from blue_archive.errors import DeserializationError
from blue_archive.types import (
    EFFECT_TYPES,
    BuffTarget,
    CriticalCheck,
    DMGDot,
    DMGMulti,
    DMGSingle,
    Frames,
    Heal,
    Radius,
    RadiusType,
    Skill,
    UnknownEffect,
    effect_adapter,
)

FRAMES_RAW = {
    "AttackEnterDuration": 0,
    "AttackStartDuration": 20,
    "AttackEndDuration": 25,
    "AttackBurstRoundOverDelay": 0,
    "AttackIngDuration": 60,
    "AttackReloadDuration": 45,
}

# One representative raw record per known effect type
EFFECT_SAMPLES: Dict[str, Dict[str, Any]] = {
    "Accumulation": {"Type": "Accumulation", "Scale": [100, 200, 300]},
    "BuffSelf": {
        "Type": "BuffSelf",
        "Stat": "AttackPower_Coefficient",
        "Value": [[1000, 1500]],
        "Channel": 1,
        "Icon": "Buff_AttackPower",
    },
    "BuffTarget": {
        "Type": "BuffTarget",
        "Stat": "DefensePower_Coefficient",
        "Value": [[-2000, -2500]],
        "Channel": 3,
        "Restrictions": [
            {"Property": "SquadType", "Operand": "Equal", "Value": "Main"},
            {"Property": "Stars", "Operand": "GreaterOrEqual", "Value": 3},
        ],
    },
    "BuffAlly": {
        "Type": "BuffAlly",
        "Stat": "HealPower_Base",
        "Value": [[500]],
        "Channel": 2,
    },
    "DMGSingle": {
        "Type": "DMGSingle",
        "SourceStat": "AttackPower",
        "CriticalCheck": "Check",
        "Scale": [[1000, 2000], [3000, 4000]],
        "Hits": [1000],
        "Frames": FRAMES_RAW,
    },
    "DMGMulti": {
        "Type": "DMGMulti",
        "Hits": [500, 500],
        "Scale": [5200, 5980],
        "CriticalCheck": "Always",
    },
    "DMGEcho": {"Type": "DMGEcho", "CriticalCheck": "Always", "Scale": [500]},
    "DMGEchoWithScaling": {
        "Type": "DMGEchoWithScaling",
        "CriticalCheck": "Check",
        "Scale": [[100], [200]],
    },
    "DMGDot": {
        "Type": "DMGDot",
        "Duration": "10000",
        "Period": "1000",
        "Icon": "Burn",
        "Scale": [100, 150],
    },
    "DMGZone": {
        "Type": "DMGZone",
        "ZoneHitInterval": 500,
        "ZoneDuration": 5000,
        "CriticalCheck": "Check",
        "Scale": [300],
    },
    "DMGByHit": {"Type": "DMGByHit", "Icon": "Shock", "Scale": [50]},
    "HealDot": {"Type": "HealDot", "Duration": 8000, "Period": 2000, "Scale": [900]},
    "Heal": {"Type": "Heal", "Scale": [3000, 3500]},
    "HealZone": {"Type": "HealZone", "HitFrames": [0, 30, 60], "Scale": [400]},
    "CrowdControl": {"Type": "CrowdControl", "Chance": 10000, "Icon": "Stun", "Scale": [2000]},
    "Shield": {"Type": "Shield", "Scale": [12000]},
    "FormChange": {
        "Type": "FormChange",
        "HideFormChangeIcon": True,
        "Frames": FRAMES_RAW,
        "Hits": [1000],
    },
    "IgnoreDelay": {"Type": "IgnoreDelay", "Scale": [1]},
}


class TestKnownVariants:
    """Test decoding of every known effect type."""

    def test_samples_cover_every_type(self) -> None:
        """Test there is a sample record for every registered type."""
        assert set(EFFECT_SAMPLES) == set(EFFECT_TYPES)

    @pytest.mark.parametrize("tag", sorted(EFFECT_SAMPLES))
    def test_decodes_to_matching_variant(self, tag: str) -> None:
        """Test each tag decodes to exactly its own model."""
        effect = effect_adapter.validate_python(EFFECT_SAMPLES[tag])
        assert type(effect) is EFFECT_TYPES[tag]
        assert effect.type == tag

    @pytest.mark.parametrize("tag", sorted(EFFECT_SAMPLES))
    def test_wire_round_trip(self, tag: str) -> None:
        """Test re-encoding a decoded effect and decoding again is stable."""
        effect = effect_adapter.validate_python(EFFECT_SAMPLES[tag])
        again = effect_adapter.validate_python(effect.to_wire())
        assert again == effect

    def test_numeric_strings_are_accepted(self) -> None:
        """Test DMGDot duration and period given as strings."""
        effect = effect_adapter.validate_python(EFFECT_SAMPLES["DMGDot"])
        assert isinstance(effect, DMGDot)
        assert effect.duration == 10000
        assert effect.period == 1000

    def test_optional_fields_default_to_none(self) -> None:
        """Test absent optional fields."""
        effect = effect_adapter.validate_python({"Type": "DMGSingle", "Scale": [1]})
        assert isinstance(effect, DMGSingle)
        assert effect.critical_check is None
        assert effect.frames is None
        assert effect.hits is None

    def test_restriction_values(self) -> None:
        """Test restriction values may be strings or integers."""
        effect = effect_adapter.validate_python(EFFECT_SAMPLES["BuffTarget"])
        assert isinstance(effect, BuffTarget)
        assert effect.restrictions is not None
        assert effect.restrictions[0].value == "Main"
        assert effect.restrictions[1].value == 3

    def test_unmodelled_fields_are_ignored(self) -> None:
        """Test extra keys on a known type do not fail decoding."""
        effect = effect_adapter.validate_python(
            {"Type": "Heal", "Scale": [10], "SomethingNew": True}
        )
        assert isinstance(effect, Heal)

    def test_field_names_ignore_case(self) -> None:
        """Test lowercase keys are matched to fields."""
        effect = effect_adapter.validate_python({"type": "Heal", "scale": [10, 20]})
        assert isinstance(effect, Heal)
        assert effect.scale == [10, 20]

    def test_frames_historical_key(self) -> None:
        """Test the misspelt attacking duration key."""
        frames = Frames.model_validate(FRAMES_RAW)
        assert frames.attacking_duration == 60
        assert frames.to_wire()["AttackingDuration"] == 60


class TestScaleValue:
    """Test single-stage and multi-stage scaling tables."""

    def test_flat_scale(self) -> None:
        effect = effect_adapter.validate_python({"Type": "Heal", "Scale": [1, 2, 3]})
        assert effect.scale == [1, 2, 3]

    def test_nested_scale(self) -> None:
        effect = effect_adapter.validate_python({"Type": "Heal", "Scale": [[1, 2], [3, 4]]})
        assert effect.scale == [[1, 2], [3, 4]]


class TestCriticalCheck:
    """Test critical check parsing."""

    def test_known_values(self) -> None:
        effect = effect_adapter.validate_python(EFFECT_SAMPLES["DMGMulti"])
        assert isinstance(effect, DMGMulti)
        assert effect.critical_check is CriticalCheck.ALWAYS

    def test_unknown_value(self) -> None:
        """Test unseen critical check values fall back to UNKNOWN."""
        effect = effect_adapter.validate_python(
            {"Type": "DMGEcho", "CriticalCheck": "Sometimes", "Scale": [1]}
        )
        assert effect.critical_check is CriticalCheck.UNKNOWN


class TestUnknownEffect:
    """Test the catch-all variant."""

    def test_unknown_type(self) -> None:
        """Test an unlisted type decodes without error and keeps its data."""
        raw = {"Type": "Regen", "Value": [1, 2], "Icon": "Regen"}
        effect = effect_adapter.validate_python(raw)
        assert isinstance(effect, UnknownEffect)
        assert effect.type == "Regen"
        assert effect.model_extra == {"Value": [1, 2], "Icon": "Regen"}
        assert effect.to_wire() == raw

    def test_missing_type(self) -> None:
        """Test a record without a type decodes to the catch-all."""
        effect = effect_adapter.validate_python({"Scale": [1]})
        assert isinstance(effect, UnknownEffect)
        assert effect.type is None

    def test_non_string_type(self) -> None:
        effect = effect_adapter.validate_python({"Type": 5})
        assert isinstance(effect, UnknownEffect)
        assert effect.type == 5

    def test_type_tags_are_case_sensitive(self) -> None:
        """Test a differently cased tag is treated as unknown."""
        effect = effect_adapter.validate_python({"Type": "heal", "Scale": [1]})
        assert isinstance(effect, UnknownEffect)

    def test_round_trip(self) -> None:
        effect = effect_adapter.validate_python({"Type": "Regen", "Value": [3]})
        assert effect_adapter.validate_python(effect.to_wire()) == effect


class TestMalformedEffects:
    """Test structurally malformed records of known types."""

    def test_missing_required_field(self) -> None:
        """Test a known type without its required field is an error."""
        with pytest.raises(DeserializationError):
            StudentLoader().decode_effect({"Type": "Heal"})

    def test_wrong_field_type(self) -> None:
        with pytest.raises(DeserializationError):
            StudentLoader().decode_effect(
                {"Type": "DMGDot", "Duration": "soon", "Period": 1, "Icon": "Burn", "Scale": [1]}
            )

    def test_loader_decodes_valid_record(self) -> None:
        effect = StudentLoader().decode_effect(EFFECT_SAMPLES["Shield"])
        assert effect.type == "Shield"


class TestRadius:
    """Test skill area records."""

    def test_decodes_type_alias(self) -> None:
        radius = Radius.model_validate({"Type": "Fan", "Radius": 650})
        assert radius.kind is RadiusType.FAN
        assert radius.radius == 650

    def test_unknown_shape(self) -> None:
        radius = Radius.model_validate({"Type": "Cone", "Radius": 100})
        assert radius.kind is RadiusType.UNKNOWN

    def test_round_trip(self) -> None:
        radius = Radius.model_validate({"Type": "Circle", "Radius": 400})
        assert Radius.model_validate(radius.to_wire()) == radius

    def test_skill_radius(self) -> None:
        skill = Skill.model_validate(
            {"SkillType": "Ex", "Radius": [{"Type": "Circle", "Radius": 400}], "Effects": []}
        )
        assert skill.radius == [Radius(kind=RadiusType.CIRCLE, radius=400)]
        assert Skill.model_validate({"SkillType": "Ex"}).radius is None
