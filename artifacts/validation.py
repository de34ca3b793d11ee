"""
Validation and integrity checking for the static artifact tables.

Table gaps are programming errors: they are reported here (and by the test
suite) instead of being handled during generation.
"""

from typing import Any, Dict, List

from engine.error_handler import ValidationError, logger

from .colors import is_known_color
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
    ACTIVE_EFFECT_COST,
    ACTIVE_EFFECT_NAMES,
    CHARGE_TYPE_NAMES,
    PASSIVE_EFFECT_COST,
    PASSIVE_EFFECT_NAMES,
    ActiveEffect,
    ChargeType,
    PassiveEffect,
    effect_name,
    is_sentinel,
)
from .types import (
    ArmorForm,
    ArmorMod,
    ArtifactProperty,
    ArtifactShape,
    ToolForm,
    WeaponType,
)


def _check_family_costs(family, costs: Dict) -> List[str]:
    errors = []
    for effect in family:
        if effect not in costs:
            errors.append(f"{effect_name(effect)} has no cost entry")
            continue
        cost = costs[effect]
        if is_sentinel(effect):
            if cost != 0:
                errors.append(f"{effect_name(effect)} must cost 0, got {cost}")
        elif effect < family.SPLIT and cost < 0:
            errors.append(f"good effect {effect_name(effect)} has negative cost {cost}")
        elif effect > family.SPLIT and cost > 0:
            errors.append(f"bad effect {effect_name(effect)} has positive cost {cost}")
    if len(costs) != len(family):
        errors.append(f"cost table has {len(costs)} entries for {len(family)} effects")
    return errors


def validate_cost_catalog() -> Dict[str, List[str]]:
    return {
        "passive": _check_family_costs(PassiveEffect, PASSIVE_EFFECT_COST),
        "active": _check_family_costs(ActiveEffect, ACTIVE_EFFECT_COST),
    }


def validate_name_tables() -> List[str]:
    """Every selectable effect / charge type has exactly one name and back."""
    errors = []
    for family, names in ((PassiveEffect, PASSIVE_EFFECT_NAMES), (ActiveEffect, ACTIVE_EFFECT_NAMES)):
        selectable = {e for e in family if not is_sentinel(e)}
        if set(names.values()) != selectable:
            missing = sorted(effect_name(e) for e in selectable - set(names.values()))
            errors.append(f"{family.__name__} names missing: {missing}")
        for name, effect in names.items():
            if effect_name(effect) != name:
                errors.append(f"name '{name}' maps to {effect_name(effect)}")
    if set(CHARGE_TYPE_NAMES.values()) != set(ChargeType):
        errors.append("charge type names incomplete")
    return errors


def _check_hints(label: str, hints, family, good: bool) -> List[str]:
    errors = []
    if len(hints) != 4:
        errors.append(f"{label}: expected 4 hints, got {len(hints)}")
    for hint in hints:
        if hint == family.NULL:
            continue
        in_range = family.NULL < hint < family.SPLIT if good else hint > family.SPLIT
        if not in_range:
            errors.append(f"{label}: {effect_name(hint)} is outside its sub-range")
    return errors


def validate_natural_tables() -> Dict[str, List[str]]:
    results: Dict[str, List[str]] = {"shapes": [], "properties": []}

    if len(SHAPE_DATA) != len(ArtifactShape):
        results["shapes"].append(f"{len(SHAPE_DATA)} shapes for {len(ArtifactShape)} ids")
    for shape, datum in zip(ArtifactShape, SHAPE_DATA):
        if shape == ArtifactShape.NULL:
            continue
        if not datum.name or not datum.desc:
            results["shapes"].append(f"{shape.name}: missing name or description")
        if min(datum.volume_min, datum.volume_max, datum.weight_min, datum.weight_max) < 0:
            results["shapes"].append(f"{shape.name}: negative size")

    if len(PROPERTY_DATA) != len(ArtifactProperty):
        results["properties"].append(
            f"{len(PROPERTY_DATA)} properties for {len(ArtifactProperty)} ids"
        )
    for prop, datum in zip(ArtifactProperty, PROPERTY_DATA):
        if prop == ArtifactProperty.NULL:
            continue
        if not datum.name or not datum.desc:
            results["properties"].append(f"{prop.name}: missing name or description")
        results["properties"] += _check_hints(f"{prop.name}.passive_good", datum.passive_good, PassiveEffect, True)
        results["properties"] += _check_hints(f"{prop.name}.passive_bad", datum.passive_bad, PassiveEffect, False)
        results["properties"] += _check_hints(f"{prop.name}.active_good", datum.active_good, ActiveEffect, True)
        results["properties"] += _check_hints(f"{prop.name}.active_bad", datum.active_bad, ActiveEffect, False)

    return results


def validate_tool_tables() -> Dict[str, List[str]]:
    results: Dict[str, List[str]] = {"weapons": [], "tool_forms": []}

    if len(WEAPON_DATA) != len(WeaponType):
        results["weapons"].append(f"{len(WEAPON_DATA)} weapons for {len(WeaponType)} ids")
    for weapon, datum in zip(WeaponType, WEAPON_DATA):
        for stat in ("bash", "cut", "stab", "to_hit"):
            low = getattr(datum, f"{stat}_min")
            high = getattr(datum, f"{stat}_max")
            if low > high:
                results["weapons"].append(f"{weapon.name}: {stat} range {low} > {high}")

    if len(TOOL_FORM_DATA) != len(ToolForm):
        results["tool_forms"].append(f"{len(TOOL_FORM_DATA)} forms for {len(ToolForm)} ids")
    for form, datum in zip(ToolForm, TOOL_FORM_DATA):
        if len(datum.sym) != 1:
            results["tool_forms"].append(f"{form.name}: symbol must be one character")
        if not is_known_color(datum.color):
            results["tool_forms"].append(f"{form.name}: unknown color '{datum.color}'")
        if form == ToolForm.NULL:
            continue
        if not datum.name:
            results["tool_forms"].append(f"{form.name}: missing name")
        if datum.base_weapon == WeaponType.NULL:
            results["tool_forms"].append(f"{form.name}: base weapon is NULL")
        if len(datum.extra_weapons) != 3:
            results["tool_forms"].append(f"{form.name}: expected 3 extra weapon slots")

    return results


def validate_armor_tables() -> Dict[str, List[str]]:
    results: Dict[str, List[str]] = {"armor_forms": [], "armor_mods": []}

    if len(ARMOR_FORM_DATA) != len(ArmorForm):
        results["armor_forms"].append(f"{len(ARMOR_FORM_DATA)} forms for {len(ArmorForm)} ids")
    for form, datum in zip(ArmorForm, ARMOR_FORM_DATA):
        if not is_known_color(datum.color):
            results["armor_forms"].append(f"{form.name}: unknown color '{datum.color}'")
        if len(datum.available_mods) != 5:
            results["armor_forms"].append(f"{form.name}: expected 5 mod slots")
        if form != ArmorForm.NULL and not datum.name:
            results["armor_forms"].append(f"{form.name}: missing name")
        if min(datum.volume, datum.weight, datum.coverage, datum.storage) < 0:
            results["armor_forms"].append(f"{form.name}: negative base value")

    if len(ARMOR_MOD_DATA) != len(ArmorMod):
        results["armor_mods"].append(f"{len(ARMOR_MOD_DATA)} mods for {len(ArmorMod)} ids")
    for mod, datum in zip(ArmorMod, ARMOR_MOD_DATA):
        if mod != ArmorMod.NULL and not datum.name:
            results["armor_mods"].append(f"{mod.name}: missing description")

    return results


def validate_name_lists() -> List[str]:
    errors = []
    if not ARTIFACT_ADJECTIVES or not ARTIFACT_NOUNS:
        errors.append("empty word list")
    for noun in ARTIFACT_NOUNS:
        if noun.count("%s") != 1:
            errors.append(f"noun template '{noun}' must contain exactly one %s")
    return errors


def run_full_validation() -> Dict[str, Any]:
    """
    Run all validation checks and return a comprehensive report.

    Returns:
        Dict with per-table error lists, the total error count and
        ``overall_valid``
    """
    tables: Dict[str, List[str]] = {}
    tables.update({f"cost_{k}": v for k, v in validate_cost_catalog().items()})
    tables["effect_names"] = validate_name_tables()
    tables.update(validate_natural_tables())
    tables.update(validate_tool_tables())
    tables.update(validate_armor_tables())
    tables["name_lists"] = validate_name_lists()

    error_count = sum(len(errors) for errors in tables.values())
    return {
        "tables": tables,
        "error_count": error_count,
        "overall_valid": error_count == 0,
    }


def ensure_valid() -> None:
    """Raise ValidationError if any static table is inconsistent."""
    report = run_full_validation()
    if report["overall_valid"]:
        return
    for table, errors in report["tables"].items():
        for error in errors:
            logger.error(f"artifact table '{table}': {error}")
    raise ValidationError(f"{report['error_count']} problem(s) in static artifact tables")
