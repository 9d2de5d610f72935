from dataclasses import MISSING, asdict, fields, is_dataclass
from types import NoneType, UnionType
from typing import Any, Callable, TypeAlias, TypeVar, Union, get_args, get_origin, get_type_hints
import json
from pathlib import Path


Serializer: TypeAlias = Callable[[Any], Any]
Deserializer: TypeAlias = Callable[[Any], Any]

T = TypeVar("T", bound="JsonMixin")


def _strict_int(v: Any) -> int:
    # bool is an int subclass, json true/false must not pass as an id
    if isinstance(v, bool) or not isinstance(v, int):
        raise TypeError(f"expected int, got {type(v).__name__}: {v!r}")
    return v


def _strict_str(v: Any) -> str:
    if not isinstance(v, str):
        raise TypeError(f"expected str, got {type(v).__name__}: {v!r}")
    return v


def _strict_bool(v: Any) -> bool:
    if not isinstance(v, bool):
        raise TypeError(f"expected bool, got {type(v).__name__}: {v!r}")
    return v


def _strict_float(v: Any) -> float:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise TypeError(f"expected float, got {type(v).__name__}: {v!r}")
    return float(v)


class JsonMixin:
    _CODECS: dict[type, tuple[Serializer, Deserializer]] = {
        Path: (str, Path),
        int: (int, _strict_int),
        float: (float, _strict_float),
        bool: (bool, _strict_bool),
        str: (str, _strict_str),
    }

    @staticmethod
    def _convert_by_type(field_type: Any, value: Any) -> Any:
        origin = get_origin(field_type)

        # T | None
        if origin in (Union, UnionType):
            args = get_args(field_type)
            if value is None and NoneType in args:
                return None
            last_error: Exception | None = None
            for arg in args:
                if arg is NoneType:
                    continue
                try:
                    return JsonMixin._convert_by_type(arg, value)
                except (TypeError, ValueError) as e:
                    last_error = e
            raise TypeError(f"{value!r} does not match {field_type}") from last_error

        # list[T]
        if origin is list:
            if not isinstance(value, list):
                raise TypeError(f"expected list, got {type(value).__name__}")
            (item_type,) = get_args(field_type)
            return [JsonMixin._convert_by_type(item_type, v) for v in value]

        # nested
        if is_dataclass(field_type) and isinstance(field_type, type):
            if not isinstance(value, dict):
                raise TypeError(f"expected object for {field_type.__name__}, got {type(value).__name__}")
            return field_type.from_dict(value)  # pyright: ignore

        codec = JsonMixin._CODECS.get(field_type)
        if codec:
            _, deser = codec
            return deser(value)

        return value

    @classmethod
    def convert_field_value(cls, field_name: str, value: Any) -> Any:
        type_hints = get_type_hints(cls)
        field_type = type_hints.get(field_name)

        if field_type is None:
            return value

        try:
            return cls._convert_by_type(field_type, value)
        except TypeError as e:
            raise TypeError(f"{cls.__name__}.{field_name}: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)  # pyright: ignore[reportArgumentType]

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, default=self._json_serializer)

    def to_json_file(self, filepath: str | Path, indent: int = 2) -> None:
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=indent, default=self._json_serializer)

    @classmethod
    def from_dict(cls: type[T], data: dict[str, Any]) -> T:
        if not is_dataclass(cls):
            raise TypeError(f"{cls.__name__} must be a dataclass")
        if not isinstance(data, dict):
            raise TypeError(f"expected object for {cls.__name__}, got {type(data).__name__}")

        field_values = {}

        for field in fields(cls):
            if field.name not in data:
                if field.default is not MISSING or field.default_factory is not MISSING:
                    continue
                raise ValueError(f"missing required field: {field.name}")

            field_values[field.name] = cls.convert_field_value(field.name, data[field.name])

        return cls(**field_values)

    @classmethod
    def from_json(cls: type[T], json_str: str) -> T:
        data = json.loads(json_str)
        return cls.from_dict(data)

    @classmethod
    def from_json_file(cls: type[T], filepath: str | Path) -> T:
        filepath = Path(filepath)
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_dict(data)

    @staticmethod
    def _json_serializer(obj: Any) -> Any:
        if is_dataclass(obj) and not isinstance(obj, type):
            return asdict(obj)

        for typ, (ser, _) in JsonMixin._CODECS.items():
            if isinstance(obj, typ):
                return ser(obj)

        raise TypeError(f"object of type {type(obj).__name__} is not JSON serializable")
