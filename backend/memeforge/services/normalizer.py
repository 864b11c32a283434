"""
Coerce an untrusted, model-generated JSON value into a ``GenerationResult``.

The whole output contract lives in :data:`RESULT_SCHEMA`: one entry per wire
key saying whether the value is a string, a list of strings, or a list of
records with per-field fallbacks. :func:`normalize` is total: whatever the
provider (or the server, when called from the client side) sends back, the
result has every field, correctly typed. Unknown keys are dropped.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ..models import GenerationResult

STRING = "string"
STRING_LIST = "string_list"
RECORD_LIST = "record_list"


@dataclass(frozen=True)
class FieldSpec:
    name: str
    kind: str
    # Only used by RECORD_LIST: sub-field name -> fallback string
    defaults: Optional[Dict[str, str]] = field(default=None)


RESULT_SCHEMA = (
    FieldSpec("title", STRING),
    FieldSpec("hook", STRING),
    FieldSpec("description", STRING),
    FieldSpec("hashtags", STRING_LIST),
    FieldSpec("voiceover", STRING_LIST),
    FieldSpec(
        "shotList",
        RECORD_LIST,
        {
            "scene": "Scene improvvisata",
            "visuals": "Visual glitch + overlay meme",
            "sfx": "Bass boost + risate",
        },
    ),
    FieldSpec(
        "editingBeats",
        RECORD_LIST,
        {
            "timestamp": "0s",
            "action": "Cut rapido",
            "notes": "Aggiungi overlay testi meme",
        },
    ),
    FieldSpec("captions", STRING_LIST),
    FieldSpec("callToAction", STRING),
    FieldSpec(
        "soundtrack",
        RECORD_LIST,
        {
            "trackIdea": "Italo-dance sped up",
            "vibe": "Hyperpop + eurobeat",
        },
    ),
    FieldSpec("bRollPrompts", STRING_LIST),
    FieldSpec("automationStack", STRING_LIST),
)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _coerce_string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _coerce_string_list(value: Any) -> List[str]:
    if not _is_sequence(value):
        return []
    return [item for item in value if isinstance(item, str)]


def _coerce_record_list(value: Any, defaults: Dict[str, str]) -> List[Dict[str, str]]:
    if not _is_sequence(value):
        return []
    records = []
    for item in value:
        if not isinstance(item, Mapping):
            continue
        records.append(
            {
                key: item[key] if isinstance(item.get(key), str) else fallback
                for key, fallback in defaults.items()
            }
        )
    return records


def coerce_field(spec: FieldSpec, value: Any) -> Any:
    if spec.kind == STRING:
        return _coerce_string(value)
    if spec.kind == STRING_LIST:
        return _coerce_string_list(value)
    if spec.kind == RECORD_LIST:
        return _coerce_record_list(value, spec.defaults or {})
    raise ValueError(f"Unknown field kind: {spec.kind}")


def coerce_payload(raw: Any) -> Dict[str, Any]:
    """Return a plain dict with exactly the keys in :data:`RESULT_SCHEMA`."""
    source = raw if isinstance(raw, Mapping) else {}
    return {spec.name: coerce_field(spec, source.get(spec.name)) for spec in RESULT_SCHEMA}


def normalize(raw: Any) -> GenerationResult:
    """Sanitize ``raw`` into a fully populated ``GenerationResult``. Never raises."""
    return GenerationResult.model_validate(coerce_payload(raw))
