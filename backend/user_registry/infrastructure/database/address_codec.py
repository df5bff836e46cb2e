"""Serialize/deserialize boundary for the ``users.address`` column.

Decoding is total: malformed stored content is logged and replaced with the
``Unknown`` sentinel address instead of raising.
"""

import json
import logging
from typing import Any

from user_registry.domain.entities import Address

logger = logging.getLogger(__name__)


def encode_address(address: Address) -> str:
    return json.dumps(address.to_dict())


def decode_address(raw: Any, *, user_id: int | None = None) -> Address:
    """Decode a stored address, falling back to ``Address.unknown()``.

    Some drivers hand back JSON columns already parsed, so mappings are
    accepted as-is.
    """
    try:
        value = json.loads(raw) if isinstance(raw, (str, bytes, bytearray)) else raw
        if not isinstance(value, dict):
            raise ValueError(f"expected an object, got {type(value).__name__}")
        city, house = value["city"], value["house"]
        if city is None or house is None:
            raise ValueError("city and house must not be null")
        return Address(city=str(city), house=str(house))
    except (ValueError, KeyError, RecursionError) as e:
        logger.error("Invalid JSON for user id %s: %s", user_id, e)
        return Address.unknown()
