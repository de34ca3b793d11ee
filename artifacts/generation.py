"""
Artifact assembly.

Turns the static tables into concrete ArtifactRecords:

- tool artifacts: a tool form, optional extra weapon, wielded / carried /
  activated effects and a recharge mechanism
- armor artifacts: an armor form, optional armor mod and worn effects
- natural artifacts: a shape + property with hinted effects
- the fixed debug artifact (the architect's cube)

The ``generate_*`` functions register the record and return its id; the
``build_*`` functions return the unregistered record.
"""

from __future__ import annotations

from typing import Optional

from engine.error_handler import logger
from telemetry.logger import telemetry

from .definitions import (
    ARMOR_FORM_DATA,
    ARMOR_MOD_DATA,
    ARTIFACT_ADJECTIVES,
    ARTIFACT_NOUNS,
    PROPERTY_DATA,
    SHAPE_DATA,
    TOOL_FORM_DATA,
    WEAPON_DATA,
)
from .effects import (
    LAST_CHARGE_TYPE,
    ChargeType,
    PassiveEffect,
    effects_cost,
    fill_bad_active,
    fill_bad_passive,
    fill_good_active,
    fill_good_passive,
)
from .localization import Localizer, resolve_localizer
from .registry import register_artifact
from .rng import ArtifactRng, resolve_rng
from .selection import (
    ACTIVATED_POLICY,
    CARRIED_POLICY,
    WIELDED_POLICY,
    WORN_POLICY,
    NaturalLayout,
    pick_natural_effects,
    select_effects,
)
from .types import (
    ArmorFields,
    ArmorForm,
    ArmorMod,
    ArtifactArmor,
    ArtifactCommon,
    ArtifactProperty,
    ArtifactRecord,
    ArtifactShape,
    ArtifactTool,
    ToolFields,
    ToolForm,
    WeaponDatum,
    WeaponType,
    record_effects,
)

# Floors used when a negative mod delta would overshoot the base value
MIN_MODDED_VOLUME = 250  # ml
MIN_MODDED_WEIGHT = 1    # g

# An artifact with this many effects may be cursed to never recharge
CURSE_CHANCE = 8
CURSE_MIN_EFFECTS = 4


# ============================================================================
# Naming
# ============================================================================

def artifact_name(
    type_name: str,
    rng: Optional[ArtifactRng] = None,
    localizer: Optional[Localizer] = None,
) -> str:
    """
    Build "<type> of <phrase>", e.g. "Harp of Forbidden Dreams".

    The noun template is drawn before the adjective.
    """
    rng = resolve_rng(rng)
    loc = resolve_localizer(localizer)
    noun = loc.localize(rng.random_entry(ARTIFACT_NOUNS))
    adjective = loc.localize(rng.random_entry(ARTIFACT_ADJECTIVES))
    phrase = loc.format(noun, adjective)
    return loc.format(
        loc.localize("%1$s of %2$s", context="artifact name (type, noun)"),
        type_name,
        phrase,
    )


def declared_power(record: ArtifactRecord) -> int:
    """Sum of the costs of every effect listed on the record."""
    return effects_cost(record_effects(record))


# ============================================================================
# Tools
# ============================================================================

def _roll_weapon(common: ArtifactCommon, weapon: WeaponDatum, rng: ArtifactRng,
                 stab: bool = True) -> None:
    common.melee_bash += rng.rng(weapon.bash_min, weapon.bash_max)
    common.melee_cut += rng.rng(weapon.cut_min, weapon.cut_max)
    if stab:
        common.melee_stab += rng.rng(weapon.stab_min, weapon.stab_max)
    common.m_to_hit += rng.rng(weapon.to_hit_min, weapon.to_hit_max)
    common.add_flag(weapon.tag)


def _tool_base(form: ToolForm, rng: ArtifactRng, loc: Localizer) -> ArtifactTool:
    info = TOOL_FORM_DATA[form]
    common = ArtifactCommon(
        name=artifact_name(loc.localize(info.name), rng, loc),
        sym=info.sym,
        color=info.color,
        materials=[info.material],
    )
    common.volume = rng.rng(info.volume_min, info.volume_max)
    common.weight = rng.rng(info.weight_min, info.weight_max)
    return ArtifactTool(common=common, tool=ToolFields())


def build_tool_artifact(
    rng: Optional[ArtifactRng] = None,
    localizer: Optional[Localizer] = None,
) -> ArtifactTool:
    rng = resolve_rng(rng)
    loc = resolve_localizer(localizer)

    form = ToolForm(rng.rng(ToolForm.NULL + 1, len(ToolForm) - 1))
    info = TOOL_FORM_DATA[form]
    record = _tool_base(form, rng, loc)
    common = record.common

    _roll_weapon(common, WEAPON_DATA[info.base_weapon], rng)

    # Maybe bolt on an extra weapon
    if rng.one_in(2):
        extra = info.extra_weapons[rng.rng(0, 2)]
        if extra != WeaponType.NULL:
            weapon = WEAPON_DATA[extra]
            common.volume += weapon.volume
            common.weight += weapon.weight
            _roll_weapon(common, weapon, rng)
            type_name = loc.format("%s %s", loc.localize(weapon.adjective), loc.localize(info.name))
            common.name = artifact_name(type_name, rng, loc)

    common.description = loc.format(
        loc.localize(
            "This is the %s.\nIt is the only one of its kind.\n"
            "It may have unknown powers; try activating them."
        ),
        common.name,
    )

    tool = record.tool
    wielded = select_effects(fill_good_passive(), fill_bad_passive(), WIELDED_POLICY, rng)
    tool.effects_wielded = list(wielded.effects)

    carried = select_effects(fill_good_passive(), fill_bad_passive(), CARRIED_POLICY, rng)
    tool.effects_carried = list(carried.effects)

    def add_charges(_effect) -> None:
        tool.max_charges += rng.rng(1, 3)

    activated = select_effects(
        fill_good_active(), fill_bad_active(), ACTIVATED_POLICY, rng, on_pick=add_charges
    )
    tool.effects_activated = list(activated.effects)
    tool.def_charges = tool.max_charges

    if tool.max_charges > 0:
        tool.charge_type = ChargeType(rng.rng(ChargeType.NULL + 1, LAST_CHARGE_TYPE))

    total_effects = sum(s.num_good + s.num_bad for s in (wielded, carried, activated))
    if rng.one_in(CURSE_CHANCE) and total_effects >= CURSE_MIN_EFFECTS:
        tool.charge_type = ChargeType.NULL

    return record


# ============================================================================
# Armor
# ============================================================================

def apply_armor_mod(record: ArtifactArmor, mod: ArmorMod) -> None:
    """
    Apply an armor mod's deltas in place.

    Negative deltas that would overshoot the current value clamp to a floor
    instead: 250 ml volume, 1 g weight, 0 for coverage / thickness /
    environmental resistance / storage. Encumbrance and warmth always add.
    """
    delta = ARMOR_MOD_DATA[mod]
    common = record.common
    armor = record.armor

    if delta.volume >= 0 or common.volume > -delta.volume:
        common.volume += delta.volume
    else:
        common.volume = MIN_MODDED_VOLUME

    if delta.weight >= 0 or common.weight > abs(delta.weight):
        common.weight += delta.weight
    else:
        common.weight = MIN_MODDED_WEIGHT

    armor.encumber += delta.encumber

    if delta.coverage > 0 or armor.coverage > abs(delta.coverage):
        armor.coverage += delta.coverage
    else:
        armor.coverage = 0

    if delta.thickness > 0 or armor.thickness > abs(delta.thickness):
        armor.thickness += delta.thickness
    else:
        armor.thickness = 0

    if delta.env_resist > 0 or armor.env_resist > abs(delta.env_resist):
        armor.env_resist += delta.env_resist
    else:
        armor.env_resist = 0

    armor.warmth += delta.warmth

    if delta.storage > 0 or armor.storage > -delta.storage:
        armor.storage += delta.storage
    else:
        armor.storage = 0


def build_armor_artifact(
    rng: Optional[ArtifactRng] = None,
    localizer: Optional[Localizer] = None,
) -> ArtifactArmor:
    rng = resolve_rng(rng)
    loc = resolve_localizer(localizer)

    form = ArmorForm(rng.rng(ArmorForm.NULL + 1, len(ArmorForm) - 1))
    info = ARMOR_FORM_DATA[form]

    common = ArtifactCommon(
        name=artifact_name(loc.localize(info.name), rng, loc),
        sym="[",
        color=info.color,
        materials=[info.material],
        volume=info.volume,
        weight=info.weight,
        melee_bash=info.melee_bash,
        melee_cut=info.melee_cut,
        m_to_hit=info.melee_hit,
    )
    armor = ArmorFields(
        covers=info.covers,
        encumber=info.encumber,
        coverage=info.coverage,
        thickness=info.thickness,
        env_resist=info.env_resist,
        warmth=info.warmth,
        storage=info.storage,
        plural=info.plural,
    )
    record = ArtifactArmor(common=common, armor=armor)

    if info.plural:
        description = loc.format(
            loc.localize("This is the %s.\nThey are the only ones of their kind."), common.name
        )
    else:
        description = loc.format(
            loc.localize("This is the %s.\nIt is the only one of its kind."), common.name
        )

    if not rng.one_in(4):
        mod = info.available_mods[rng.rng(0, 4)]
        if mod != ArmorMod.NULL:
            apply_armor_mod(record, mod)
            suffix = "\nThey are %s" if info.plural else "\nIt is %s"
            description += loc.format(loc.localize(suffix), loc.localize(ARMOR_MOD_DATA[mod].name))

    common.description = description

    worn = select_effects(fill_good_passive(), fill_bad_passive(), WORN_POLICY, rng)
    armor.effects_worn = list(worn.effects)
    return record


# ============================================================================
# Natural artifacts
# ============================================================================

def build_natural_artifact(
    prop: Optional[ArtifactProperty] = None,
    rng: Optional[ArtifactRng] = None,
    localizer: Optional[Localizer] = None,
) -> ArtifactTool:
    """
    Build a natural (found) artifact.

    Args:
        prop: Property to use; NULL or None picks one at random
        rng: Random source (shared instance if None)
        localizer: Translation hook (identity if None)
    """
    rng = resolve_rng(rng)
    loc = resolve_localizer(localizer)

    shape = ArtifactShape(rng.rng(ArtifactShape.NULL + 1, len(ArtifactShape) - 1))
    shape_data = SHAPE_DATA[shape]
    if prop is None or prop == ArtifactProperty.NULL:
        prop = ArtifactProperty(rng.rng(ArtifactProperty.NULL + 1, len(ArtifactProperty) - 1))
    prop_data = PROPERTY_DATA[prop]

    common = ArtifactCommon(sym=":", color="yellow", materials=["stone"])
    common.volume = rng.rng(shape_data.volume_min, shape_data.volume_max)
    common.weight = rng.rng(shape_data.weight_min, shape_data.weight_max)
    common.name = loc.format(
        loc.localize("%1$s %2$s", context="artifact name (property, shape)"),
        loc.localize(prop_data.name),
        loc.localize(shape_data.name),
    )
    common.description = loc.format(
        loc.localize("This %1$s %2$s.", context="artifact description"),
        loc.localize(shape_data.desc),
        loc.localize(prop_data.desc),
    )
    record = ArtifactTool(common=common, tool=ToolFields())

    layout = NaturalLayout(rng.rng(1, 3))
    pick = pick_natural_effects(prop_data, layout, rng)
    record.tool.effects_carried = pick.passive_effects
    record.tool.effects_activated = pick.active_effects

    # Natural artifacts always recharge
    if record.tool.effects_activated:
        record.tool.max_charges = record.tool.def_charges = rng.rng(1, 4)
        record.tool.charge_type = ChargeType(rng.rng(ChargeType.NULL + 1, LAST_CHARGE_TYPE))

    logger.debug(
        f"Natural artifact {prop.name}/{shape.name}: layout={layout.name} "
        f"value={pick.value} threshold={pick.threshold} attempts={pick.attempts}"
    )
    return record


# ============================================================================
# Debug
# ============================================================================

def build_debug_artifact(
    rng: Optional[ArtifactRng] = None,
    localizer: Optional[Localizer] = None,
) -> ArtifactTool:
    """The architect's cube: a plain cube granting super clairvoyance when carried."""
    rng = resolve_rng(rng)
    loc = resolve_localizer(localizer)

    info = TOOL_FORM_DATA[ToolForm.CUBE]
    record = _tool_base(ToolForm.CUBE, rng, loc)
    _roll_weapon(record.common, WEAPON_DATA[info.base_weapon], rng, stab=False)
    record.common.description = loc.localize("The architect's cube.")
    record.tool.effects_carried = [PassiveEffect.SUPER_CLAIRVOYANCE]
    return record


# ============================================================================
# Registration
# ============================================================================

def _register_generated(record: ArtifactRecord, kind: str) -> str:
    artifact_id = register_artifact(record)
    power = declared_power(record)
    logger.debug(f"Generated {kind} artifact {artifact_id} '{record.common.name}' (power {power})")
    telemetry.log(
        "artifact_generated",
        id=artifact_id,
        type=record.type,
        kind=kind,
        power=power,
    )
    return artifact_id


def generate_random_artifact(
    rng: Optional[ArtifactRng] = None,
    localizer: Optional[Localizer] = None,
) -> str:
    """Generate and register a tool (1 in 2) or armor artifact. Returns its id."""
    rng = resolve_rng(rng)
    if rng.one_in(2):
        return _register_generated(build_tool_artifact(rng, localizer), "tool")
    return _register_generated(build_armor_artifact(rng, localizer), "armor")


def generate_natural_artifact(
    prop: Optional[ArtifactProperty] = None,
    rng: Optional[ArtifactRng] = None,
    localizer: Optional[Localizer] = None,
) -> str:
    return _register_generated(build_natural_artifact(prop, rng, localizer), "natural")


def generate_fixed_debug_artifact(
    rng: Optional[ArtifactRng] = None,
    localizer: Optional[Localizer] = None,
) -> str:
    return _register_generated(build_debug_artifact(rng, localizer), "debug")
