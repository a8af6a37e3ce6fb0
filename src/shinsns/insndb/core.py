# SPDX-License-Identifier: LGPL-3-or-later
import dataclasses as _dataclasses
import json as _json
import pathlib as _pathlib
import re as _re

from functools import cached_property

import mdis.dispatcher
import mdis.walker

from shinsns.isa import (
    ISA as _ISA,
    ISAProperty as _ISAProperty,
    Document as _Document,
)
from shinsns.util import (
    log as _log,
    LogType as _LogType,
)


class DataclassMeta(type):
    def __new__(metacls, name, bases, ns):
        cls = super().__new__(metacls, name, bases, ns)
        return _dataclasses.dataclass(cls, eq=True, frozen=True)


class Dataclass(metaclass=DataclassMeta):
    pass


def dataclass(cls, record, keymap=None, typemap=None):
    if keymap is None:
        keymap = {}
    if typemap is None:
        typemap = {field.name:field.type for field in _dataclasses.fields(cls)}

    def transform(key_value):
        (key, value) = key_value
        key = keymap.get(key, key)
        hook = typemap.get(key, lambda value: value)
        return (key, hook(value))

    record = dict(map(transform, record.items()))
    for key in frozenset(record.keys()):
        if record[key] == "":
            record.pop(key)

    return cls(**record)


class Environment(Dataclass):
    isa: _ISA
    property: str

    def __post_init__(self):
        if not isinstance(self.isa, _ISA):
            object.__setattr__(self, "isa", _ISA(self.isa))
        if not isinstance(self.property, str):
            raise ValueError(self.property)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.isa}: {self.property})"

    @classmethod
    def JSON(cls, record):
        return dataclass(cls, record)


class Citation(Dataclass):
    document: _Document
    page: int

    def __post_init__(self):
        if not isinstance(self.document, _Document):
            object.__setattr__(self, "document", _Document(self.document))
        if isinstance(self.page, bool) or not isinstance(self.page, int):
            raise ValueError(self.page)

    def __repr__(self):
        return f"{self.document.name}:{self.page}"

    @classmethod
    def JSON(cls, record):
        return dataclass(cls, record)


class Environments(list):
    def __init__(self, items=()):
        def transform(item):
            if isinstance(item, dict):
                return Environment.JSON(item)
            if isinstance(item, (tuple, list)):
                return Environment(*item)
            return item

        return super().__init__(map(transform, items))


class Citations(list):
    def __init__(self, items=()):
        def transform(item):
            if isinstance(item, dict):
                return Citation.JSON(item)
            if isinstance(item, (tuple, list)):
                return Citation(*item)
            return item

        return super().__init__(map(transform, items))


@_dataclasses.dataclass(eq=True)
class InstructionRecord:
    format: str = ""
    abstract: str = ""
    name: str = ""
    classification: str = ""
    brief: str = ""
    mnemonic: str = ""
    citations: Citations = _dataclasses.field(default_factory=Citations)
    code: str = ""
    description: str = ""
    note: str = ""
    operation: str = ""
    example: str = ""
    exceptions: str = ""
    group: _ISAProperty = _dataclasses.field(default_factory=_ISAProperty)
    issue: _ISAProperty = _dataclasses.field(default_factory=_ISAProperty)
    latency: _ISAProperty = _dataclasses.field(default_factory=_ISAProperty)
    environments: Environments = _dataclasses.field(
        default_factory=Environments)
    flags: str = ""
    isa: _ISA = _ISA(0)

    def __post_init__(self):
        if not isinstance(self.isa, _ISA):
            self.isa = _ISA(self.isa)
        for (key, cls) in (
                    ("citations", Citations),
                    ("environments", Environments),
                    ("group", _ISAProperty),
                    ("issue", _ISAProperty),
                    ("latency", _ISAProperty),
                ):
            value = getattr(self, key)
            if not isinstance(value, cls):
                setattr(self, key, cls(value))

    def for_isa(self, isa):
        return bool(self.isa & isa)

    @classmethod
    def JSON(cls, record):
        return dataclass(cls, record)


class Block(tuple):
    def __new__(cls, title, records=()):
        if not isinstance(title, str):
            raise ValueError(title)
        self = super().__new__(cls, records)
        self.__title = title
        return self

    @property
    def title(self):
        return self.__title

    def __repr__(self):
        return f"{self.__class__.__name__}({self.title!r}, {len(self)})"

    @classmethod
    def JSON(cls, record):
        records = map(InstructionRecord.JSON, record.get("insns", ()))
        return cls(title=record["title"], records=records)


class ClassificationRule(Dataclass):
    mnemonic: str
    name: str
    classification: str
    environments: tuple = ()
    citations: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "environments",
            tuple(Environments(self.environments)))
        object.__setattr__(self, "citations",
            tuple(Citations(self.citations)))

    @cached_property
    def pattern(self):
        mnemonic = self.mnemonic.lower()
        try:
            _re.compile(mnemonic)
            return _re.compile("^(?:" + mnemonic + r")[\S]*")
        except _re.error as error:
            _log(f"classification rule {self.mnemonic!r}: {error}",
                kind=_LogType.Regex)
            return None

    def match(self, format):
        if self.pattern is None:
            return None
        match = self.pattern.match(format.lower())
        if match is None:
            return None
        return RuleMatch(format=format, span=match.span(),
            group=(match.span(1) if match.re.groups else None))

    def expand(self, match):
        """name for a match, "$" becomes the first group, every character
        back-quoted for emphasis"""
        if "$" not in self.name or match.group is None:
            return self.name
        (start, end) = match.group
        group = "".join(f"`{char}`" for char in match.format[start:end])
        return self.name.replace("$", group)


class RuleMatch(Dataclass):
    format: str
    span: tuple
    group: tuple = None

    def __str__(self):
        (start, end) = self.span
        return self.format[start:end]


class Database:
    def __init__(self, root, name="insns.json"):
        path = (_pathlib.Path(root) / name)
        with open(path, "r", encoding="UTF-8") as stream:
            blocks = _json.load(stream)
        if not isinstance(blocks, list):
            raise ValueError("list of instruction blocks expected")

        self.__blocks = tuple(map(Block.JSON, blocks))

        return super().__init__()

    def __repr__(self):
        return repr(self.__blocks)

    def __iter__(self):
        yield from self.__blocks

    def __len__(self):
        return len(self.__blocks)

    def records(self):
        for block in self.__blocks:
            yield from block

    def __contains__(self, key):
        return bool(self[key])

    def __getitem__(self, key):
        if not isinstance(key, str):
            raise ValueError("mnemonic expected")
        key = key.lower()
        return tuple(record for record in self.records()
            if record.mnemonic.lower() == key)


class Walker(mdis.walker.Walker):
    @mdis.dispatcher.Hook(Database)
    def dispatch_database(self, instance):
        yield from self(tuple(instance))
