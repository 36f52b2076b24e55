"""Version sources — JSON file parsing and package fallback."""

import pytest

import blackslope
from blackslope.core.version import JsonVersionService, PackageVersionService, VersionFileError


def test_parse_valid_document():
    assert JsonVersionService.parse('{"version": "1.2.3"}').version == "1.2.3"


@pytest.mark.parametrize(
    "raw",
    ['{"version": ', "[1, 2]", '{"name": "api"}', '{"version": ""}', '{"version": 12}'],
)
def test_parse_rejects_malformed_documents(raw):
    with pytest.raises(VersionFileError):
        JsonVersionService.parse(raw)


def test_missing_file_raises(tmp_path):
    with pytest.raises(VersionFileError):
        JsonVersionService(tmp_path / "absent.json").get_version()


def test_reads_file(tmp_path):
    path = tmp_path / "version.json"
    path.write_text('{"version": " 4.5.6 "}', encoding="utf-8")

    assert JsonVersionService(path).get_version().version == "4.5.6"


def test_package_version_is_never_empty():
    version = PackageVersionService().get_version().version

    assert version
    assert isinstance(blackslope.__version__, str)
