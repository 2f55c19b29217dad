# -*- coding: utf-8 -*-
"""Per-type table metadata cache: public field names + reusable getters.

Field discovery runs once per record type. Rendering a table only calls the
cached getters, so no introspection happens in the row loop.
"""

from __future__ import annotations

import inspect
import structlog
from collections.abc import Mapping
from dataclasses import dataclass, fields, is_dataclass
from functools import cached_property, lru_cache
from operator import attrgetter, methodcaller
from typing import Any, Callable, ClassVar, Optional, get_origin, is_typeddict

from pydantic import BaseModel

from adaptive_card_util.exceptions import UnsupportedRecordTypeError


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """A discovered public field: display name and a side-effect-free getter."""

    name: str
    getter: Callable[[Any], Any]

    def get(self, record: Any) -> Any:
        """Return the field value of ``record`` (None stays None)."""
        return self.getter(record)


@dataclass(frozen=True, slots=True)
class TableMeta:
    """Ordered field descriptors for one record type."""

    record_type: type
    fields: tuple[FieldDescriptor, ...]

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    @property
    def getters(self) -> tuple[Callable[[Any], Any], ...]:
        return tuple(f.getter for f in self.fields)


def _is_classvar(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def _declared_names(record_type: type) -> list[str]:
    """Field names in declaration order, by the kind of record class."""
    if is_dataclass(record_type):
        return [f.name for f in fields(record_type)]
    if issubclass(record_type, BaseModel):
        return [*record_type.model_fields, *record_type.model_computed_fields]
    if issubclass(record_type, tuple) and hasattr(record_type, "_fields"):
        return list(record_type._fields)

    names: list[str] = []
    for klass in reversed(record_type.__mro__):
        if klass is object:
            continue
        for name, annotation in inspect.get_annotations(klass).items():
            if not _is_classvar(annotation):
                names.append(name)
    return names


def _property_names(record_type: type) -> list[str]:
    """Properties declared on the record's own classes, base-first."""
    names: list[str] = []
    for klass in reversed(record_type.__mro__):
        if klass in (object, BaseModel):
            continue
        for name, attr in vars(klass).items():
            if isinstance(attr, (property, cached_property)):
                names.append(name)
    return names


def discover_fields(record_type: type) -> tuple[FieldDescriptor, ...]:
    """Enumerate public readable fields of ``record_type`` in a stable order.

    Declared fields come first (dataclass fields, pydantic model fields,
    named tuple fields or class annotations), then properties not already
    listed. Names starting with an underscore are skipped.

    TypedDict keys are read with ``.get`` so missing optional keys give None.
    Other mapping classes have no fixed keys and are rejected; render plain
    mappings with ``mapping_meta`` instead.
    """
    if is_typeddict(record_type):
        return tuple(
            FieldDescriptor(name=name, getter=methodcaller("get", name))
            for name in inspect.get_annotations(record_type)
        )
    if issubclass(record_type, Mapping):
        raise UnsupportedRecordTypeError(
            record_type, f"{record_type.__qualname__} has no declared keys"
        )

    seen: set[str] = set()
    descriptors: list[FieldDescriptor] = []
    for name in (*_declared_names(record_type), *_property_names(record_type)):
        if name.startswith("_") or name in seen:
            continue
        seen.add(name)
        descriptors.append(FieldDescriptor(name=name, getter=attrgetter(name)))
    return tuple(descriptors)


def mapping_meta(record: Mapping[Any, Any]) -> TableMeta:
    """Columns for plain mapping rows, taken from the keys of ``record``.

    Not cached: the shape belongs to the instance, not its type. Rows that
    lack a key render an empty cell.
    """
    return TableMeta(
        record_type=type(record),
        fields=tuple(FieldDescriptor(name=str(key), getter=methodcaller("get", key)) for key in record),
    )


class TableCache:
    """Process-lifetime cache of TableMeta keyed by record type.

    Reads of a populated entry are a plain dict lookup. Concurrent first
    lookups of the same type may each run discovery, but ``dict.setdefault``
    keeps the first stored result and every caller gets that object. There is
    no eviction: the set of rendered record types is small and static.
    """

    def __init__(
        self,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize an empty cache.

        Args:
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._cache: dict[type, TableMeta] = {}
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def get_meta(self, record_type: type) -> TableMeta:
        """Return cached metadata for ``record_type``, discovering it on first use."""
        if not isinstance(record_type, type):
            raise UnsupportedRecordTypeError(record_type)
        meta = self._cache.get(record_type)
        if meta is not None:
            return meta

        built = TableMeta(record_type=record_type, fields=discover_fields(record_type))
        meta = self._cache.setdefault(record_type, built)
        if meta is built:
            self._logger.debug(
                "table_cache_populated",
                record_type=record_type.__qualname__,
                field_names=list(built.names),
            )
        return meta

    def get_fields_for(self, record_type: type) -> tuple[FieldDescriptor, ...]:
        """Return the ordered field descriptors for ``record_type``."""
        return self.get_meta(record_type).fields

    def clear(self) -> None:
        self._cache.clear()

    def __contains__(self, record_type: object) -> bool:
        return record_type in self._cache

    def __len__(self) -> int:
        return len(self._cache)


@lru_cache
def get_table_cache() -> TableCache:
    """Return the process-wide TableCache."""
    return TableCache()
