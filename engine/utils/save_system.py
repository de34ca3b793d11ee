"""
Save/Load system for generated artifacts.

Handles serialization and deserialization of runtime artifact types to/from
a JSON file (a single array of artifact objects).
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from artifacts.effects import ActiveEffect, ChargeType, PassiveEffect, is_sentinel
from artifacts.registry import register_artifact, runtime_artifacts
from artifacts.types import (
    ALL_BODY_PARTS,
    ARMOR_TYPE,
    TOOL_TYPE,
    ArmorFields,
    ArtifactArmor,
    ArtifactCommon,
    ArtifactRecord,
    ArtifactTool,
    BodyPart,
    ToolFields,
)
from engine.config import get_config
from engine.error_handler import ArtifactLoadError, log_error, logger
from telemetry.logger import telemetry


def get_save_path() -> Path:
    """Get the configured artifact save file."""
    return Path(get_config().save_file)


def save_artifacts(path: Optional[Path] = None) -> bool:
    """
    Save every runtime artifact to a file.

    The data is written to ``<path>.tmp`` (created exclusively, so a leftover
    or concurrent temp file blocks the save) and then renamed over ``path``.

    Args:
        path: Destination file (defaults to the configured save file)

    Returns:
        True if save was successful, False otherwise
    """
    save_path = Path(path) if path is not None else get_save_path()
    temp_path = save_path.with_name(save_path.name + ".tmp")
    records = runtime_artifacts()
    data = encode_artifacts(records)

    try:
        save_path.parent.mkdir(parents=True, exist_ok=True)
        f = temp_path.open("x", encoding="utf-8")
    except FileExistsError:
        logger.error(
            f"Could not save artifacts: {temp_path} already exists. "
            f"If no other save is running, delete it and save again."
        )
        return False
    except OSError as e:
        log_error(e, "save_artifacts")
        return False

    try:
        with f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        # Atomic rename
        temp_path.replace(save_path)
    except OSError as e:
        log_error(e, "save_artifacts")
        temp_path.unlink(missing_ok=True)
        return False

    logger.info(f"Saved {len(records)} artifact(s) to {save_path}")
    telemetry.log("artifacts_saved", path=str(save_path), count=len(records))
    return True


def load_artifacts(path: Optional[Path] = None) -> List[str]:
    """
    Load artifacts from a save file and register them as runtime artifacts.

    Args:
        path: Save file (defaults to the configured save file)

    Returns:
        Ids of the loaded artifacts in file order (empty if the file is absent)

    Raises:
        ArtifactLoadError: The file is not valid JSON or an entry is malformed
    """
    save_path = Path(path) if path is not None else get_save_path()
    if not save_path.exists():
        return []

    try:
        with save_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ArtifactLoadError(f"{save_path} is not valid UTF-8 JSON: {e}") from e

    records = decode_artifacts(data)
    ids = [register_artifact(record, runtime=True) for record in records]
    logger.info(f"Loaded {len(ids)} artifact(s) from {save_path}")
    telemetry.log("artifacts_loaded", path=str(save_path), count=len(ids))
    return ids


# -----------------------------------------------------------------------------
# Serialization helpers
# -----------------------------------------------------------------------------

def encode_artifacts(records: List[ArtifactRecord]) -> List[Dict[str, Any]]:
    return [serialize_artifact(record) for record in records]


def decode_artifacts(data: Any) -> List[ArtifactRecord]:
    if not isinstance(data, list):
        raise ArtifactLoadError("artifact file must contain a JSON array")
    return [deserialize_artifact(entry) for entry in data]


def _serialize_common(common: ArtifactCommon) -> Dict[str, Any]:
    return {
        "id": common.id,
        "name": common.name,
        "description": common.description,
        "sym": common.sym,
        "color": common.color,
        "price": common.price,
        "materials": list(common.materials),
        "volume": common.volume,
        "weight": common.weight,
        "melee_dam": common.melee_bash,
        "melee_cut": common.melee_cut,
        "melee_stab": common.melee_stab,
        "m_to_hit": common.m_to_hit,
        "item_flags": list(common.item_flags),
        "techniques": list(common.techniques),
    }


def serialize_artifact(record: ArtifactRecord) -> Dict[str, Any]:
    """Convert an artifact record to a JSON-serializable dict."""
    data: Dict[str, Any] = {"type": record.type}
    data.update(_serialize_common(record.common))

    if record.type == TOOL_TYPE:
        tool = record.tool
        data.update({
            "ammo": tool.ammo,
            "max_charges": tool.max_charges,
            "def_charges": tool.def_charges,
            "charges_per_use": tool.charges_per_use,
            "turns_per_charge": tool.turns_per_charge,
            "revert_to": tool.revert_to,
            "charge_type": int(tool.charge_type),
            "effects_wielded": [int(e) for e in tool.effects_wielded],
            "effects_activated": [int(e) for e in tool.effects_activated],
            "effects_carried": [int(e) for e in tool.effects_carried],
        })
    else:
        armor = record.armor
        data.update({
            "covers": int(armor.covers),
            "encumber": armor.encumber,
            "coverage": armor.coverage,
            "material_thickness": armor.thickness,
            "env_resist": armor.env_resist,
            "warmth": armor.warmth,
            "storage": armor.storage,
            "power_armor": armor.power_armor,
            "plural": armor.plural,
            "effects_worn": [int(e) for e in armor.effects_worn],
        })
    return data


# -----------------------------------------------------------------------------
# Deserialization helpers
# -----------------------------------------------------------------------------

_MISSING = object()


def _get(data: Dict[str, Any], key: str, default: Any = _MISSING) -> Any:
    if key not in data:
        if default is _MISSING:
            raise ArtifactLoadError("missing required field", field=key)
        return default
    return data[key]


def _get_int(data: Dict[str, Any], key: str, default: Any = _MISSING) -> int:
    value = _get(data, key, default)
    # bool is an int subclass but never a valid number here
    if isinstance(value, bool) or not isinstance(value, int):
        raise ArtifactLoadError(f"expected an integer, got {value!r}", field=key)
    return value


def _get_str(data: Dict[str, Any], key: str, default: Any = _MISSING) -> str:
    value = _get(data, key, default)
    if not isinstance(value, str):
        raise ArtifactLoadError(f"expected a string, got {value!r}", field=key)
    return value


def _get_bool(data: Dict[str, Any], key: str, default: Any = _MISSING) -> bool:
    value = _get(data, key, default)
    if not isinstance(value, bool):
        raise ArtifactLoadError(f"expected a boolean, got {value!r}", field=key)
    return value


def _get_str_list(data: Dict[str, Any], key: str, default: Any = _MISSING) -> List[str]:
    value = _get(data, key, default)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ArtifactLoadError(f"expected a list of strings, got {value!r}", field=key)
    return list(value)


def _get_effects(data: Dict[str, Any], key: str, family: Callable) -> list:
    value = _get(data, key)
    if not isinstance(value, list):
        raise ArtifactLoadError(f"expected a list of effect ids, got {value!r}", field=key)
    effects = []
    for raw in value:
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise ArtifactLoadError(f"effect id {raw!r} is not an integer", field=key)
        try:
            effect = family(raw)
        except ValueError:
            raise ArtifactLoadError(f"unknown effect id {raw}", field=key) from None
        if is_sentinel(effect):
            raise ArtifactLoadError(f"effect id {raw} is not a real effect", field=key)
        effects.append(effect)
    return effects


def _get_sym(data: Dict[str, Any]) -> str:
    value = _get(data, "sym")
    # Older saves stored the symbol as a character code
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return chr(value)
        except (ValueError, OverflowError):
            raise ArtifactLoadError(f"invalid character code {value}", field="sym") from None
    if isinstance(value, str) and value:
        return value
    raise ArtifactLoadError(f"expected a symbol, got {value!r}", field="sym")


def _get_covers(data: Dict[str, Any]) -> BodyPart:
    value = _get(data, "covers")
    if isinstance(value, str):
        # Legacy bit-string, most significant bit first
        if not value or any(c not in "01" for c in value):
            raise ArtifactLoadError(f"invalid body part bits {value!r}", field="covers")
        value = int(value, 2)
    elif isinstance(value, bool) or not isinstance(value, int):
        raise ArtifactLoadError(f"expected a body part mask, got {value!r}", field="covers")
    if value < 0 or value & ~int(ALL_BODY_PARTS):
        raise ArtifactLoadError(f"unknown body parts in mask {value}", field="covers")
    return BodyPart(value)


def _get_materials(data: Dict[str, Any]) -> List[str]:
    materials = []
    for legacy_key in ("m1", "m2"):
        if legacy_key in data:
            materials.append(_get_str(data, legacy_key))
    materials.extend(_get_str_list(data, "materials", []))
    return materials


def _deserialize_common(data: Dict[str, Any]) -> ArtifactCommon:
    return ArtifactCommon(
        id=_get_str(data, "id"),
        name=_get_str(data, "name"),
        description=_get_str(data, "description"),
        sym=_get_sym(data),
        color=_get_str(data, "color"),
        price=_get_int(data, "price"),
        materials=_get_materials(data),
        volume=_get_int(data, "volume"),
        weight=_get_int(data, "weight"),
        melee_bash=_get_int(data, "melee_dam"),
        melee_cut=_get_int(data, "melee_cut"),
        melee_stab=_get_int(data, "melee_stab", 0),
        m_to_hit=_get_int(data, "m_to_hit"),
        item_flags=_get_str_list(data, "item_flags"),
        techniques=_get_str_list(data, "techniques", []),
    )


def _deserialize_tool(data: Dict[str, Any]) -> ArtifactTool:
    try:
        charge_type = ChargeType(_get_int(data, "charge_type"))
    except ValueError:
        raise ArtifactLoadError(
            f"unknown charge type {data['charge_type']}", field="charge_type"
        ) from None

    tool = ToolFields(
        ammo=_get_str(data, "ammo"),
        max_charges=_get_int(data, "max_charges"),
        def_charges=_get_int(data, "def_charges"),
        charges_per_use=_get_int(data, "charges_per_use"),
        turns_per_charge=_get_int(data, "turns_per_charge"),
        revert_to=_get_str(data, "revert_to"),
        charge_type=charge_type,
        effects_wielded=_get_effects(data, "effects_wielded", PassiveEffect),
        effects_carried=_get_effects(data, "effects_carried", PassiveEffect),
        effects_activated=_get_effects(data, "effects_activated", ActiveEffect),
    )
    return ArtifactTool(common=_deserialize_common(data), tool=tool)


def _deserialize_armor(data: Dict[str, Any]) -> ArtifactArmor:
    armor = ArmorFields(
        covers=_get_covers(data),
        encumber=_get_int(data, "encumber"),
        coverage=_get_int(data, "coverage"),
        thickness=_get_int(data, "material_thickness"),
        env_resist=_get_int(data, "env_resist"),
        warmth=_get_int(data, "warmth"),
        storage=_get_int(data, "storage"),
        power_armor=_get_bool(data, "power_armor"),
        plural=_get_bool(data, "plural", False),
        effects_worn=_get_effects(data, "effects_worn", PassiveEffect),
    )
    return ArtifactArmor(common=_deserialize_common(data), armor=armor)


_DESERIALIZERS = {
    TOOL_TYPE: _deserialize_tool,
    ARMOR_TYPE: _deserialize_armor,
}


def deserialize_artifact(data: Any) -> ArtifactRecord:
    """
    Build an artifact record from a decoded JSON object.

    Raises:
        ArtifactLoadError: naming the offending field
    """
    if not isinstance(data, dict):
        raise ArtifactLoadError(f"artifact entry must be an object, got {data!r}")
    type_name = _get(data, "type")
    deserializer = _DESERIALIZERS.get(type_name) if isinstance(type_name, str) else None
    if deserializer is None:
        raise ArtifactLoadError(f"unknown artifact type {type_name!r}", field="type")
    return deserializer(data)
