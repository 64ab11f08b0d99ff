from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .database import MimeDatabase, MimeEntry, get_database
    from .errors import DatabaseError, Error
    from .lookup import check_database, ext_to_mime, mime_to_ext, mime_to_exts
    from .utils import enable_logs


class __Importer:

    def __init__(self) -> None:
        self.sources: dict[str, str] = {}
        self.objects: dict[str, Any] = {}
        self.re = __import__("re")
        self.importlib = __import__("importlib")

    def __call__(self, name: str) -> Any:
        if not self.sources:
            self.load_sources()
        if name not in self.objects:
            if name not in self.sources:
                raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
            module = self.importlib.import_module(self.sources[name], __package__)
            self.objects[name] = getattr(module, name)
        return self.objects[name]

    def load_sources(self) -> None:
        with open(__file__) as file:
            source = file.read()
        for module, names in self.re.findall(r"from (.*?) import (.*)", source):
            if not module.startswith("."):
                continue
            for name in names.split(","):
                name = name.strip()
                self.sources[name] = module


__getattr__ = __Importer()


__all__ = [
    "mime_to_ext",
    "mime_to_exts",
    "ext_to_mime",
    "check_database",
    "get_database",
    "MimeDatabase",
    "MimeEntry",
    "Error",
    "DatabaseError",
    "enable_logs",
]
