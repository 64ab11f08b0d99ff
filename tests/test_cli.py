import pytest
from click.testing import CliRunner

from mime_to_ext.cli import lookup, main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_mimetype(runner: CliRunner) -> None:
    result = runner.invoke(main, ["audio/mpeg"])
    assert result.exit_code == 0
    assert result.output == "mp3, mp1, mp2, mpga, mpega\n"


def test_mimetype_preferred(runner: CliRunner) -> None:
    result = runner.invoke(main, ["--preferred", "audio/mpeg"])
    assert result.exit_code == 0
    assert result.output == "mp3\n"


def test_extension(runner: CliRunner) -> None:
    result = runner.invoke(main, ["mp1"])
    assert result.exit_code == 0
    assert result.output == "audio/mpeg\n"


@pytest.mark.parametrize("query", ["invalid", "foo/bar", "PNG", ""])
def test_unknown(runner: CliRunner, query: str) -> None:
    result = runner.invoke(main, [query])
    assert result.exit_code == 2
    assert result.output == "?\n"


def test_missing_argument(runner: CliRunner) -> None:
    result = runner.invoke(main, [])
    assert result.exit_code == 1
    assert "usage: mime-to-ext <mime-type|extension>" in result.output


def test_verbose(runner: CliRunner) -> None:
    result = runner.invoke(main, ["--verbose", "png"])
    assert result.exit_code == 0
    assert result.output.endswith("image/png\n")


def test_lookup() -> None:
    assert lookup("image/png") == "png"
    assert lookup("image/jpeg") == "jpg, jpeg, jpe, jfif"
    assert lookup("image/jpeg", preferred=True) == "jpg"
    assert lookup("jfif") == "image/jpeg"
    assert lookup("foo/bar") is None
    assert lookup("foo/bar", preferred=True) is None
    assert lookup("qqq") is None
