import json
from typing import Any, Dict


def normalize_custom_fields(value: Any) -> Dict[str, str]:
    """
    Turn a customFields payload into a name -> value mapping.

    Accepts a mapping or its JSON-encoded string. Unparseable strings
    and non-object JSON become an empty mapping. Values are stored as
    strings, None becomes "".
    """
    if value is None or value == "":
        return {}

    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            return {}

    if not isinstance(value, dict):
        return {}

    return {
        str(key): "" if field_value is None else str(field_value)
        for key, field_value in value.items()
    }
