"""
Unit tests for artifact assembly.
"""

import pytest
from artifacts.definitions import ARMOR_FORM_DATA, PROPERTY_DATA, SHAPE_DATA, TOOL_FORM_DATA
from artifacts.effects import ChargeType, PassiveEffect
from artifacts.generation import (
    apply_armor_mod,
    artifact_name,
    build_armor_artifact,
    build_debug_artifact,
    build_natural_artifact,
    build_tool_artifact,
    declared_power,
    generate_fixed_debug_artifact,
    generate_natural_artifact,
    generate_random_artifact,
)
from artifacts.localization import Localizer
from artifacts.registry import get_artifact, is_runtime_artifact
from artifacts.rng import ArtifactRng
from artifacts.types import (
    ARMOR_TYPE,
    TOOL_TYPE,
    ArmorFields,
    ArmorForm,
    ArmorMod,
    ArtifactArmor,
    ArtifactCommon,
    ArtifactProperty,
)
from telemetry.logger import read_events, telemetry

SEEDS = range(200)


def _armor_from_form(form: ArmorForm) -> ArtifactArmor:
    info = ARMOR_FORM_DATA[form]
    return ArtifactArmor(
        common=ArtifactCommon(volume=info.volume, weight=info.weight),
        armor=ArmorFields(
            encumber=info.encumber,
            coverage=info.coverage,
            thickness=info.thickness,
            env_resist=info.env_resist,
            warmth=info.warmth,
            storage=info.storage,
        ),
    )


class TestArtifactName:
    """Tests for artifact_name()."""

    def test_noun_drawn_before_adjective(self, scripted_rng):
        rng = scripted_rng([1, 0])
        assert artifact_name("Harp", rng) == "Harp of Forbidden Dreams"

    def test_localized_template(self, scripted_rng):
        """Translators may reorder the type and the phrase."""
        localizer = Localizer({
            "artifact name (type, noun)\x04%1$s of %2$s": "%2$s: %1$s",
            "Forbidden": "Verboten",
        })
        rng = scripted_rng([1, 0])
        assert artifact_name("Harp", rng, localizer) == "Verboten Dreams: Harp"


class TestToolArtifacts:
    """Tests for build_tool_artifact()."""

    def test_seeded_build_is_reproducible(self):
        assert build_tool_artifact(ArtifactRng(7)) == build_tool_artifact(ArtifactRng(7))

    def test_tool_invariants(self):
        """Structural guarantees for many seeds."""
        forms = {datum.name: datum for datum in TOOL_FORM_DATA[1:]}
        for seed in SEEDS:
            record = build_tool_artifact(ArtifactRng(seed))
            common, tool = record.common, record.tool

            assert record.type == TOOL_TYPE
            assert " of " in common.name
            assert common.sym in {datum.sym for datum in forms.values()}
            assert len(common.materials) == 1
            assert common.description.startswith(f"This is the {common.name}.\n")
            assert common.description.endswith("try activating them.")

            assert tool.def_charges == tool.max_charges
            activated = len(tool.effects_activated)
            assert activated <= tool.max_charges <= 3 * activated
            if tool.max_charges == 0:
                assert tool.charge_type == ChargeType.NULL
            total = len(tool.effects_wielded) + len(tool.effects_carried) + activated
            if tool.max_charges > 0 and tool.charge_type == ChargeType.NULL:
                # Only the 1-in-8 curse removes a recharge mechanism
                assert total >= 4

            for effects in (tool.effects_wielded, tool.effects_carried, tool.effects_activated):
                assert len(effects) <= 5
                assert len(set(effects)) == len(effects)

    def test_extra_weapon_renames(self):
        """Some seeds bolt an extra weapon on, giving "<Adjective> <Form> of ..."."""
        adjectives = ("Heavy ", "Knobbed ", "Spiked ", "Edged ", "Bladed ")
        names = [build_tool_artifact(ArtifactRng(seed)).common.name for seed in SEEDS]
        assert any(name.startswith(adjectives) for name in names)

    def test_sword_is_sheathable(self):
        for seed in SEEDS:
            record = build_tool_artifact(ArtifactRng(seed))
            if record.common.name.startswith("Sword of"):
                assert "SHEATH_SWORD" in record.common.item_flags
                return
        pytest.fail("no sword generated")


class TestArmorArtifacts:
    """Tests for build_armor_artifact() and apply_armor_mod()."""

    def test_armor_invariants(self):
        for seed in SEEDS:
            record = build_armor_artifact(ArtifactRng(seed))
            common, armor = record.common, record.armor

            assert record.type == ARMOR_TYPE
            assert common.sym == "["
            assert " of " in common.name
            if armor.plural:
                assert common.description.startswith(
                    f"This is the {common.name}.\nThey are the only ones of their kind."
                )
            else:
                assert common.description.startswith(
                    f"This is the {common.name}.\nIt is the only one of its kind."
                )
            assert len(armor.effects_worn) <= 5
            assert armor.storage >= 0 and armor.coverage >= 0
            assert common.weight >= 1

    def test_ring_light_mod_clamps(self):
        """A negative delta bigger than the base value clamps to the floor."""
        ring = _armor_from_form(ArmorForm.RING)
        apply_armor_mod(ring, ArmorMod.LIGHT)
        assert ring.common.volume == 250
        assert ring.common.weight == 1
        assert ring.armor.coverage == 0
        assert ring.armor.thickness == 0
        assert ring.armor.env_resist == 0
        assert ring.armor.encumber == -2
        assert ring.armor.warmth == -1

    def test_ring_plated_mod_storage(self):
        ring = _armor_from_form(ArmorForm.RING)
        apply_armor_mod(ring, ArmorMod.PLATED)
        assert ring.armor.storage == 0
        assert ring.common.volume == 1000
        assert ring.common.weight == 1404

    def test_coat_plated_mod_adds(self):
        coat = _armor_from_form(ArmorForm.COAT)
        apply_armor_mod(coat, ArmorMod.PLATED)
        assert coat.common.volume == 4500
        assert coat.common.weight == 3000
        assert coat.armor.encumber == 5
        assert coat.armor.coverage == 82
        assert coat.armor.thickness == 4
        assert coat.armor.env_resist == 1
        assert coat.armor.warmth == 5
        # storage 1000 is not greater than 1000
        assert coat.armor.storage == 0

    @pytest.mark.parametrize("form", [f for f in ArmorForm if f != ArmorForm.NULL], ids=lambda f: f.name)
    @pytest.mark.parametrize("mod", [m for m in ArmorMod if m != ArmorMod.NULL], ids=lambda m: m.name)
    def test_mod_sweep_respects_floors(self, form, mod):
        record = _armor_from_form(form)
        apply_armor_mod(record, mod)
        assert record.common.volume >= 250
        assert record.common.weight >= 1
        assert record.armor.coverage >= 0
        assert record.armor.thickness >= 0
        assert record.armor.env_resist >= 0
        assert record.armor.storage >= 0


class TestNaturalArtifacts:
    """Tests for build_natural_artifact()."""

    def test_natural_invariants(self):
        shapes = {datum.name: datum for datum in SHAPE_DATA[1:]}
        for seed in SEEDS:
            record = build_natural_artifact(rng=ArtifactRng(seed))
            common, tool = record.common, record.tool

            assert record.type == TOOL_TYPE
            assert (common.sym, common.color, common.materials) == (":", "yellow", ["stone"])
            assert (common.melee_bash, common.melee_cut, common.m_to_hit) == (0, 0, 0)

            prop_name, shape_name = common.name.split(" ", 1)
            shape = shapes[shape_name]
            assert min(shape.volume_min, shape.volume_max) <= common.volume <= max(shape.volume_min, shape.volume_max)
            assert common.description.startswith(f"This {shape.desc} ")

            assert tool.effects_wielded == []
            assert len(tool.effects_carried) + len(tool.effects_activated) == 2
            if tool.effects_activated:
                assert 1 <= tool.max_charges <= 4
                assert tool.def_charges == tool.max_charges
                assert tool.charge_type != ChargeType.NULL
            else:
                assert tool.max_charges == 0
                assert tool.charge_type == ChargeType.NULL

    def test_property_is_respected(self, rng):
        record = build_natural_artifact(ArtifactProperty.GLOWING, rng)
        glowing = PROPERTY_DATA[ArtifactProperty.GLOWING]
        assert record.common.name.startswith("glowing ")
        assert record.common.description.endswith(f" {glowing.desc}.")

    def test_null_property_picks_one(self, rng):
        record = build_natural_artifact(ArtifactProperty.NULL, rng)
        property_names = {datum.name for datum in PROPERTY_DATA[1:]}
        assert record.common.name.split(" ", 1)[0] in property_names


class TestDebugArtifact:
    """Tests for the architect's cube."""

    def test_cube(self, rng):
        record = build_debug_artifact(rng)
        common = record.common
        assert common.name.startswith("Cube of ")
        assert common.sym == "*"
        assert common.description == "The architect's cube."
        assert record.tool.effects_carried == [PassiveEffect.SUPER_CLAIRVOYANCE]
        assert 10 <= common.melee_bash <= 20
        assert common.melee_stab == 0
        assert declared_power(record) == 50


class TestRegistration:
    """Tests for the generate_* entry points."""

    def test_generate_registers_runtime_artifacts(self, rng):
        ids = [
            generate_random_artifact(rng),
            generate_natural_artifact(rng=rng),
            generate_fixed_debug_artifact(rng),
        ]
        assert len(set(ids)) == 3
        for artifact_id in ids:
            assert get_artifact(artifact_id).common.id == artifact_id
            assert is_runtime_artifact(artifact_id)

    def test_random_artifact_kinds(self):
        kinds = {get_artifact(generate_random_artifact(ArtifactRng(seed))).type for seed in range(40)}
        assert kinds == {TOOL_TYPE, ARMOR_TYPE}

    def test_generation_emits_telemetry(self, rng, tmp_path, monkeypatch):
        path = tmp_path / "telemetry.jsonl"
        monkeypatch.setattr(telemetry, "path", path)
        monkeypatch.setattr(telemetry, "enabled", True)

        artifact_id = generate_fixed_debug_artifact(rng)

        rows = read_events(path, "artifact_generated")
        assert len(rows) == 1
        assert rows[-1]["id"] == artifact_id
        assert rows[-1]["type"] == TOOL_TYPE
        assert rows[-1]["power"] == 50
