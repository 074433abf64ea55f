"""JSON serializer implementation."""

import json
from datetime import date, datetime
from typing import Any

from tiercache.core.exceptions import SerializationError

_SCALAR_TYPES = (str, int, float, bool, type(None))
_MARKERS = ("__datetime__", "__date__")


class JsonSerializer:
    """JSON serializer for cache values.

    Only values that read back equal to what was written are accepted:
    JSON scalars, lists, dicts with string keys, dates and datetimes.
    Anything JSON would silently reshape (tuples, sets, bytes, non-string
    dict keys, arbitrary objects) raises SerializationError instead.

    Integers serialize to their plain decimal form, so values written
    through this serializer can be incremented by the remote store and
    read back unchanged.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the JSON serializer.

        Args:
            encoding: Character encoding to use.
        """
        self._encoding = encoding

    def serialize(self, value: Any) -> bytes:
        """Serialize value to bytes.

        Raises:
            SerializationError: If the value cannot be serialized without loss.
        """
        self._check_encodable(value, set())
        try:
            json_str = json.dumps(value, default=self._default_encoder)
            return json_str.encode(self._encoding)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize value: {e}") from e

    def deserialize(self, data: bytes) -> Any:
        """Deserialize bytes to value.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        try:
            json_str = data.decode(self._encoding)
            return json.loads(json_str, object_hook=self._object_hook)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SerializationError(f"Failed to deserialize data: {e}") from e

    def _check_encodable(self, value: Any, path: set[int]) -> None:
        """Reject values that would not survive a round trip.

        ``path`` holds the ids of the containers being visited, to catch
        circular references.
        """
        if isinstance(value, (_SCALAR_TYPES, datetime, date)):
            return
        if not isinstance(value, (list, dict)):
            raise SerializationError(
                f"Cannot serialize {type(value).__name__} without loss; "
                "use JSON types, date or datetime"
            )
        if id(value) in path:
            raise SerializationError("Failed to serialize value: circular reference")

        path.add(id(value))
        if isinstance(value, list):
            for item in value:
                self._check_encodable(item, path)
        else:
            for key, item in value.items():
                if not isinstance(key, str):
                    raise SerializationError(
                        f"Cannot serialize dict key of type {type(key).__name__}; "
                        "keys must be strings"
                    )
                self._check_encodable(item, path)
            if len(value) == 1 and next(iter(value)) in _MARKERS:
                raise SerializationError(f"Dict key {next(iter(value))!r} is reserved")
        path.discard(id(value))

    def _default_encoder(self, obj: Any) -> Any:
        """Custom encoder for date and datetime values."""
        if isinstance(obj, datetime):
            return {"__datetime__": obj.isoformat()}
        if isinstance(obj, date):
            return {"__date__": obj.isoformat()}
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

    def _object_hook(self, obj: dict[str, Any]) -> Any:
        if len(obj) == 1:
            if "__datetime__" in obj:
                return datetime.fromisoformat(obj["__datetime__"])
            if "__date__" in obj:
                return date.fromisoformat(obj["__date__"])
        return obj
