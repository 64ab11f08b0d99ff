import collections
import functools
import http.server
import pathlib
import shutil
import subprocess
import sys
import tomllib
from typing import Any

import click
from rich.console import Console
from rich.table import Table

ROOT = pathlib.Path(__file__).parent
PACKAGE: str = tomllib.loads((ROOT / "pyproject.toml").read_text())["project"]["name"]
LINE_LENGTH = 120
COVERAGE_PORT = 8888
ARTEFACTS = [
    ".pytest_cache",
    ".coverage",
    "htmlcov",
    ".mypy_cache",
]
console = Console()


@click.group()
def main() -> None:
    pass


@main.command()
def clean() -> None:
    for path in ROOT.rglob("*"):
        if path.name not in ARTEFACTS:
            continue
        if path.is_dir():
            shutil.rmtree(path)
        else:
            path.unlink()


@main.command()
@click.argument("tests", nargs=-1)
def test(tests: list[str]) -> None:
    options: list[str] = []
    for test in tests:
        options.extend(["-k", test])
    _execute("pytest", "tests", "-x", "-vv", "--ff", "-n", "auto", *options)


@main.command()
def cov() -> None:
    _execute("pytest", f"--cov={PACKAGE}", "--cov-report=html", "tests")
    _serve(ROOT / "htmlcov", COVERAGE_PORT)


@main.command()
@click.argument("paths", nargs=-1)
def lint(paths: list[str]) -> None:
    targets: list[pathlib.Path] = []
    for path in paths:
        path = ROOT / PACKAGE / path.replace(".", "/")
        if not path.exists():
            path = path.with_suffix(".py")
        if not path.exists():
            raise FileNotFoundError(f"{path} does not exist")
        targets.append(path)
    if not targets:
        targets.extend([ROOT / PACKAGE, ROOT / "tests"])
    for target in targets:
        _execute("black", f"--line-length={LINE_LENGTH}", target)
        _execute("isort", f"-w {LINE_LENGTH}", "--profile=black", target)
        _execute("flake8", f"--max-line-length={LINE_LENGTH}", "--extend-ignore=E203,E402", target)


@main.command()
@click.argument("packages", nargs=-1)
def type(packages: list[str]) -> None:
    targets: list[str] = []
    for package in packages:
        targets.extend(["-p", f"{PACKAGE}.{package}"])
    if not packages:
        targets.extend(["-p", PACKAGE, "-p", "tests"])
    _execute("mypy", *targets)


@main.command()
@click.argument("path", required=False, type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path))
def validate(path: pathlib.Path | None) -> None:
    from mime_to_ext import DatabaseError, MimeDatabase

    try:
        database = MimeDatabase.load(path)
    except DatabaseError as error:
        console.print(f":x: {error}")
        sys.exit(1)
    unresolved = [
        extension
        for entry in database.entries
        for extension in entry.extensions
        if database.get_mimetype(extension) is None
    ]
    if unresolved:
        console.print(f":x: {database} has inconsistent indexes")
        sys.exit(1)
    shared = [
        (extension, owner, entry.mimetype)
        for entry in database.entries
        for extension in entry.extensions
        if (owner := database.get_mimetype(extension)) != entry.mimetype
    ]
    for extension, owner, mimetype in shared:
        console.print(f":warning: {extension!r} is listed by {mimetype} but resolves to {owner}")
    console.print(f":white_check_mark: {database}")


@main.command()
def stats() -> None:
    from mime_to_ext import get_database

    database = get_database()
    mimetypes: collections.Counter[str] = collections.Counter()
    extensions: collections.Counter[str] = collections.Counter()
    for entry in database.entries:
        top_level = entry.mimetype.split("/", 1)[0]
        mimetypes[top_level] += 1
        extensions[top_level] += len(entry.extensions)
    table = Table(title=str(database), show_lines=False)
    table.add_column("type", style="cyan")
    table.add_column("mimetypes", justify="right", style="green")
    table.add_column("extensions", justify="right", style="green")
    for top_level, count in mimetypes.most_common():
        table.add_row(top_level, str(count), str(extensions[top_level]))
    console.print(table)


def _execute(*args: Any) -> None:
    subprocess.run([str(arg) for arg in args])


def _serve(directory: pathlib.Path, port: int) -> None:
    handler = functools.partial(
        http.server.SimpleHTTPRequestHandler,
        directory=str(directory),
    )
    server = http.server.HTTPServer(("localhost", port), handler)
    print(f"http://localhost:{port}")
    server.serve_forever()


if __name__ == "__main__":
    main()
