from __future__ import annotations

import logging
import pathlib
import re
from types import MappingProxyType
from typing import Iterable, Self

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, field_validator

from mime_to_ext.errors import DatabaseError
from mime_to_ext.types import ExtensionIndex, Extensions, MimeIndex
from mime_to_ext.utils import Lazy

DATABASE_PATH = pathlib.Path(__file__).parent / "data" / "mime_db.json"
MIMETYPE_PATTERN = re.compile(r"^[a-z0-9][a-z0-9!#$&^_.+-]*/[a-z0-9][a-z0-9!#$&^_.+-]*$")
WHITESPACE_PATTERN = re.compile(r"\s")

log = logging.getLogger(__name__)
raw_database = TypeAdapter(dict[str, list[str]])


class MimeEntry(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    mimetype: str
    extensions: tuple[str, ...]

    def __str__(self) -> str:
        return f"{self.mimetype} ({', '.join(self.extensions)})"

    @field_validator("mimetype")
    @classmethod
    def check_mimetype(cls, mimetype: str) -> str:
        if not MIMETYPE_PATTERN.match(mimetype):
            raise ValueError(f"{mimetype!r} is not a lowercase type/subtype without parameters")
        return mimetype

    @field_validator("extensions")
    @classmethod
    def check_extensions(cls, extensions: tuple[str, ...]) -> tuple[str, ...]:
        if not extensions:
            raise ValueError("at least one extension is required")
        for extension in extensions:
            if not extension:
                raise ValueError("extensions can't be empty")
            if extension.startswith("."):
                raise ValueError(f"extension {extension!r} has a leading dot")
            if extension != extension.lower():
                raise ValueError(f"extension {extension!r} is not lowercase")
            if WHITESPACE_PATTERN.search(extension):
                raise ValueError(f"extension {extension!r} contains whitespace")
        return extensions

    @property
    def preferred_extension(self) -> str:
        return self.extensions[0]


class MimeDatabase:

    def __init__(self, entries: Iterable[MimeEntry]) -> None:
        self.entries = tuple(entries)
        mimetypes: dict[str, Extensions] = {}
        extensions: dict[str, str] = {}
        for entry in self.entries:
            if entry.mimetype in mimetypes:
                raise DatabaseError(f"mimetype {entry.mimetype!r} appears more than once")
            mimetypes[entry.mimetype] = entry.extensions
            for extension in entry.extensions:
                # The first mimetype to list an extension owns it.
                extensions.setdefault(extension, entry.mimetype)
        self.mime_index: MimeIndex = MappingProxyType(mimetypes)
        self.extension_index: ExtensionIndex = MappingProxyType(extensions)

    def __str__(self) -> str:
        return f"MIME database with {len(self.mime_index)} mimetypes and {len(self.extension_index)} extensions"

    def __repr__(self) -> str:
        return f"<{self}>"

    def __len__(self) -> int:
        return len(self.entries)

    @classmethod
    def load(cls, path: str | pathlib.Path | None = None) -> Self:
        path = pathlib.Path(path) if path is not None else DATABASE_PATH
        try:
            data = path.read_bytes()
        except OSError as error:
            raise DatabaseError(f"failed to read MIME database {path}: {error}") from error
        try:
            raw = raw_database.validate_json(data)
            entries = [MimeEntry(mimetype=mimetype, extensions=tuple(exts)) for mimetype, exts in raw.items()]
        except ValidationError as error:
            raise DatabaseError(f"MIME database {path} is malformed: {error}") from error
        database = cls(entries)
        log.debug("loaded %s from %s", database, path)
        return database

    def get_extensions(self, mimetype: str) -> Extensions | None:
        return self.mime_index.get(mimetype)

    def get_extension(self, mimetype: str) -> str | None:
        extensions = self.mime_index.get(mimetype)
        if not extensions:
            return None
        return extensions[0]

    def get_mimetype(self, extension: str) -> str | None:
        return self.extension_index.get(extension)


packaged_database: Lazy[MimeDatabase] = Lazy(MimeDatabase.load)


def get_database() -> MimeDatabase:
    return packaged_database.get()
