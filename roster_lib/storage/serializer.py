from typing import Any, Protocol
import pickle
import json
import yaml


class Serializer(Protocol):
    """Serialize/deserialize Python values for backends that store bytes/text.

    Implementations should be symmetric: `dump` -> bytes, `load` <- bytes.
    """

    def dump(self, value: Any) -> bytes: ...

    def load(self, data: bytes) -> Any: ...


class PickleSerializer:
    """Serializer using pickle (binary).

    Only suitable for data written by this application; never load pickles
    from an untrusted data directory.
    """

    def dump(self, value: Any) -> bytes:
        return pickle.dumps(value, protocol=pickle.HIGHEST_PROTOCOL)

    def load(self, data: bytes) -> Any:
        return pickle.loads(data)


class JSONSerializer:
    """Serializer using JSON (text). Caller must ensure values are JSON-serializable."""

    def dump(self, value: Any) -> bytes:
        return json.dumps(value, default=str).encode("utf-8")

    def load(self, data: bytes) -> Any:
        return json.loads(data.decode("utf-8"))


class YAMLSerializer:
    """Serializer using YAML (text). Caller must ensure values are YAML-serializable."""

    def dump(self, value: Any) -> bytes:
        return yaml.safe_dump(value, sort_keys=False, allow_unicode=True).encode("utf-8")

    def load(self, data: bytes) -> Any:
        return yaml.safe_load(data.decode("utf-8"))


SERIALIZERS = {
    "pickle": PickleSerializer,
    "json": JSONSerializer,
    "yaml": YAMLSerializer,
}


def get_serializer(name: str) -> Serializer:
    try:
        return SERIALIZERS[name]()
    except KeyError:
        raise ValueError(f"Unknown serializer '{name}'") from None
