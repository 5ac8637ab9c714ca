"""
Document Decoder - CTF Event Engine
ctf_engine/loader/decoder.py

Drives PyYAML's event parser over a stream holding exactly two documents:

    1. the event mapping (name, organizers, startTime, endTime, scoring, countries)
    2. a sequence of challenge category mappings

Nodes are decoded against the declared field types of the target objects.
Scalars with a registered converter (timestamps, durations, URIs) go through
it; challenge contracts are built by the object factory; anything else is
constructed generically. Unknown keys are ignored and missing keys keep the
target's defaults.
"""

import collections.abc
import dataclasses
import re
import types
from enum import Enum
from functools import lru_cache
from typing import (
    Any,
    ClassVar,
    Dict,
    Iterable,
    NamedTuple,
    Optional,
    TextIO,
    Tuple,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

import structlog
import yaml
from pydantic import BaseModel
from yaml.constructor import SafeConstructor
from yaml.events import DocumentStartEvent, StreamEndEvent, StreamStartEvent
from yaml.nodes import MappingNode, Node, ScalarNode, SequenceNode

from ctf_engine.core.exceptions import MalformedDocumentException, MalformedScalarException
from ctf_engine.loader.converters import DEFAULT_CONVERTERS, ScalarConverter
from ctf_engine.loader.object_factory import YamlObjectFactory
from ctf_engine.models.challenge import CtfChallengeCategory, CtfEvent

logger = structlog.get_logger(__name__)

NULL_TAG = "tag:yaml.org,2002:null"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_SEQUENCE_ORIGINS = (tuple, list, collections.abc.Sequence)
_MAPPING_ORIGINS = (dict, collections.abc.Mapping)
_UNION_ORIGINS = (Union, types.UnionType)

# Returned for null scalars so the target default is kept.
_ABSENT = object()


class FieldSpec(NamedTuple):
    attribute: str
    annotation: Any


@lru_cache(maxsize=None)
def describe_fields(cls: type) -> Dict[str, FieldSpec]:
    """Map YAML keys to (attribute name, declared type) for `cls`."""
    if issubclass(cls, BaseModel):
        return {
            (info.alias or name): FieldSpec(name, info.annotation)
            for name, info in cls.model_fields.items()
            if not info.exclude
        }

    hints = get_type_hints(cls)
    if dataclasses.is_dataclass(cls):
        return {
            f.metadata.get("alias", f.name): FieldSpec(f.name, hints.get(f.name, Any))
            for f in dataclasses.fields(cls)
            if f.init
        }

    return {
        name: FieldSpec(name, annotation)
        for name, annotation in hints.items()
        if not name.startswith("_") and get_origin(annotation) is not ClassVar
    }


def _location(node: Node) -> Optional[str]:
    mark = getattr(node, "start_mark", None)
    if mark is None:
        return None
    return f"line {mark.line + 1}, column {mark.column + 1}"


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", None) or str(target)


def _is_null(node: Node) -> bool:
    return isinstance(node, ScalarNode) and node.tag == NULL_TAG


def _populate(instance: Any, values: Dict[str, Any]) -> Any:
    """Assign decoded values onto a default-initialized instance."""
    if isinstance(instance, BaseModel):
        return instance.model_copy(update=values)
    for attribute, value in values.items():
        setattr(instance, attribute, value)
    return instance


class DocumentDecoder:
    """Decodes the event document and the category document from one stream."""

    def __init__(
        self,
        converters: Iterable[ScalarConverter] = DEFAULT_CONVERTERS,
        factory: Optional[YamlObjectFactory] = None,
        loader_class: type = yaml.SafeLoader,
    ):
        self._converters = tuple(converters)
        self._factory = factory or YamlObjectFactory()
        self._loader_class = loader_class

    def decode(self, stream: Union[str, TextIO]) -> Tuple[CtfEvent, Tuple[CtfChallengeCategory, ...]]:
        loader = self._loader_class(stream)
        try:
            return self.read(loader)
        except yaml.MarkedYAMLError as exc:
            location = None
            if exc.problem_mark is not None:
                location = f"line {exc.problem_mark.line + 1}, column {exc.problem_mark.column + 1}"
            raise MalformedDocumentException(
                f"YAML configuration is malformed: {exc.problem or exc.context}", location
            ) from exc
        except yaml.YAMLError as exc:
            raise MalformedDocumentException(f"YAML configuration is malformed: {exc}") from exc
        finally:
            loader.dispose()

    def read(self, loader: Any) -> Tuple[CtfEvent, Tuple[CtfChallengeCategory, ...]]:
        """Read both documents from an already constructed YAML loader."""
        if not loader.check_event(StreamStartEvent):
            raise MalformedDocumentException("YAML configuration is malformed: missing stream start.")
        loader.get_event()

        event = self._read_document(loader, CtfEvent, "event")
        categories = self._read_document(loader, Tuple[CtfChallengeCategory, ...], "challenge categories")

        if not loader.check_event(StreamEndEvent):
            raise MalformedDocumentException(
                "YAML configuration is malformed: expected exactly two documents."
            )

        logger.debug(
            "yaml_documents_decoded",
            categories=len(categories),
            challenges=sum(len(c.challenges) for c in categories),
        )
        return event, categories

    def _read_document(self, loader: Any, target: Any, label: str) -> Any:
        if not loader.check_event(DocumentStartEvent):
            raise MalformedDocumentException(f"YAML configuration is malformed: missing {label} document.")

        node = loader.compose_document()
        value = self.decode_node(node, target)
        if value is _ABSENT:
            return () if get_origin(target) in _SEQUENCE_ORIGINS else self._factory.create(target)
        return value

    # ------------------------------------------------------------------
    # Node decoding
    # ------------------------------------------------------------------

    def decode_node(self, node: Node, target: Any) -> Any:
        if _is_null(node):
            return _ABSENT

        if target is dict:
            target = Dict[Any, Any]
        elif target in (list, tuple):
            target = Tuple[Any, ...]

        origin = get_origin(target)
        if origin in _UNION_ORIGINS:
            members = [arg for arg in get_args(target) if arg is not type(None)]
            return self.decode_node(node, members[0] if len(members) == 1 else Any)
        if origin in _SEQUENCE_ORIGINS:
            return self._decode_sequence(node, target, origin)
        if origin in _MAPPING_ORIGINS:
            return self._decode_mapping(node, target)

        if target is Any or target is object:
            return self._decode_untyped(node)

        for converter in self._converters:
            if converter.accepts(target):
                text = self._scalar_text(node, target)
                try:
                    return converter.read(text)
                except MalformedScalarException as exc:
                    raise MalformedScalarException(exc.value, exc.expected, _location(node)) from exc

        if isinstance(target, type) and issubclass(target, Enum):
            return self._decode_enum(node, target)
        if target in (str, int, float, bool):
            return self._decode_builtin(node, target)

        return self._decode_object(node, target)

    def _scalar_text(self, node: Node, target: Any) -> str:
        if not isinstance(node, ScalarNode):
            raise MalformedDocumentException(
                f"YAML configuration is malformed: expected a scalar for {_type_name(target)}.",
                _location(node),
            )
        return node.value

    def _decode_sequence(self, node: Node, target: Any, origin: Any) -> Any:
        if not isinstance(node, SequenceNode):
            raise MalformedDocumentException(
                "YAML configuration is malformed: expected a sequence.", _location(node)
            )

        args = get_args(target)
        item_type = args[0] if args else Any
        items = [
            value
            for value in (self.decode_node(item, item_type) for item in node.value)
            if value is not _ABSENT
        ]
        return items if origin is list else tuple(items)

    def _decode_mapping(self, node: Node, target: Any) -> Dict[Any, Any]:
        if not isinstance(node, MappingNode):
            raise MalformedDocumentException(
                "YAML configuration is malformed: expected a mapping.", _location(node)
            )

        key_type, value_type = get_args(target) or (Any, Any)
        result = {}
        for key_node, value_node in node.value:
            value = self.decode_node(value_node, value_type)
            if value is not _ABSENT:
                result[self.decode_node(key_node, key_type)] = value
        return result

    def _decode_untyped(self, node: Node) -> Any:
        if isinstance(node, ScalarNode):
            return node.value
        if isinstance(node, SequenceNode):
            return self._decode_sequence(node, Tuple[Any, ...], tuple)
        return self._decode_mapping(node, Dict[Any, Any])

    def _decode_enum(self, node: Node, target: type) -> Enum:
        text = self._scalar_text(node, target).strip()
        wanted = _normalize_member(text)
        for member in target:
            if wanted in (_normalize_member(member.name), _normalize_member(str(member.value))):
                return member

        expected = "one of " + ", ".join(member.name.lower() for member in target)
        raise MalformedScalarException(text, expected, _location(node))

    def _decode_builtin(self, node: Node, target: type) -> Any:
        text = self._scalar_text(node, target)
        if target is str:
            return text

        if target is bool:
            value = SafeConstructor.bool_values.get(text.strip().lower())
            if value is None:
                raise MalformedScalarException(text, "a boolean", _location(node))
            return value

        if target is int:
            if _INT_RE.fullmatch(text.strip()) is None:
                raise MalformedScalarException(text, "an integer", _location(node))
            return int(text)

        try:
            return float(text)
        except ValueError as exc:
            raise MalformedScalarException(text, "a number", _location(node)) from exc

    def _decode_object(self, node: Node, target: Any) -> Any:
        if not isinstance(node, MappingNode):
            raise MalformedDocumentException(
                f"YAML configuration is malformed: expected a mapping for {_type_name(target)}.",
                _location(node),
            )

        instance = self._factory.create(target)
        fields = describe_fields(type(instance))

        values: Dict[str, Any] = {}
        for key_node, value_node in node.value:
            if not isinstance(key_node, ScalarNode):
                continue
            field = fields.get(key_node.value)
            if field is None:
                continue
            value = self.decode_node(value_node, field.annotation)
            if value is not _ABSENT:
                values[field.attribute] = value

        return _populate(instance, values)


def _normalize_member(text: str) -> str:
    return text.replace("_", "").replace("-", "").replace(" ", "").lower()
