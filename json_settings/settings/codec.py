"""JSON encoding for the settings file.

Formatting is carried by an explicit :class:`JsonCodecConfig` value handed to
each store instead of module-level state, so two stores in one process can
write differently without affecting each other.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional


@dataclass(frozen=True)
class JsonCodecConfig:
    indent: Optional[int] = 2
    # Keep keys whose value is None as explicit `null` instead of dropping them.
    null_values: bool = True
    sort_keys: bool = False
    ensure_ascii: bool = False


DEFAULT_CODEC = JsonCodecConfig()


def encode(items: Mapping[str, Optional[List[str]]], config: JsonCodecConfig = DEFAULT_CODEC) -> str:
    payload: Dict[str, Any] = dict(items)
    if not config.null_values:
        payload = {k: v for k, v in payload.items() if v is not None}
    txt = json.dumps(
        payload,
        indent=config.indent,
        sort_keys=config.sort_keys,
        ensure_ascii=config.ensure_ascii,
    )
    return txt + "\n"


def decode(text: str) -> Dict[str, List[str]]:
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"settings root is not an object (got {type(data).__name__})")
    return data
