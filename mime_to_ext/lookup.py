from __future__ import annotations

from mime_to_ext.database import get_database
from mime_to_ext.types import Extensions


def mime_to_ext(mimetype: str) -> str | None:
    """
    Return the preferred extension (without a leading dot) for a MIME type, or None if it's unknown.

    The lookup is exact: callers are expected to pass a lowercase type/subtype without parameters,
    so "IMAGE/PNG" or "text/plain; charset=utf-8" are not found.
    """
    return get_database().get_extension(mimetype)


def mime_to_exts(mimetype: str) -> Extensions | None:
    """Return every known extension for a MIME type, preferred first, or None if it's unknown."""
    return get_database().get_extensions(mimetype)


def ext_to_mime(extension: str) -> str | None:
    """
    Return the canonical MIME type for a bare, lowercase extension, or None if it's unknown.

    ".png" and "PNG" are not normalized and so are not found.
    """
    return get_database().get_mimetype(extension)


def check_database() -> None:
    """Load the packaged database now, raising DatabaseError if it is malformed."""
    get_database()
