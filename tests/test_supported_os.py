import json
import logging

import pytest

from import_precheck.exceptions import CatalogError, UnsupportedOSError
from import_precheck.supported_os import SupportedOSCatalog


def test_packaged_catalog():
    catalog = SupportedOSCatalog()
    osids = catalog.supported_osids()
    assert osids == sorted(osids)
    assert catalog.is_supported("centos-7")
    assert catalog.is_supported("windows-10-x64-byol")
    assert not catalog.is_supported("windows-10-x64")
    assert not catalog.is_supported("rhel-9")
    assert catalog.get_description("ubuntu-1804") == "Ubuntu 18.04 LTS"


def test_validate_os():
    catalog = SupportedOSCatalog()
    catalog.validate_os("debian-11")
    with pytest.raises(UnsupportedOSError) as excinfo:
        catalog.validate_os("debian-7")
    assert excinfo.value.osid == "debian-7"


def test_extra_osids(catalog_file):
    path = catalog_file(json.dumps({"supported_os": [{"osid": "centos-7"}]}))
    catalog = SupportedOSCatalog(path, extra_osids=["centos-6"])
    assert catalog.supported_osids() == ["centos-6", "centos-7"]
    assert catalog.get_description("centos-6") == ""
    assert catalog.get_description("centos-5") is None


def test_missing_file(tmp_path):
    path = str(tmp_path / "missing.json")
    with pytest.raises(CatalogError) as excinfo:
        SupportedOSCatalog(path)
    assert excinfo.value.file_path == path


@pytest.mark.parametrize("content", [
    "{not json",
    "[]",
    '{"supported_os": {}}',
    '{"supported_os": [{"description": "no osid"}]}',
    '{"supported_os": [{"osid": ""}]}',
])
def test_malformed_file(catalog_file, content):
    with pytest.raises(CatalogError):
        SupportedOSCatalog(catalog_file(content))


def test_cache_and_reload(catalog_file):
    path = catalog_file(json.dumps({"supported_os": [{"osid": "centos-7"}]}))
    first = SupportedOSCatalog(path)

    with open(path, "w", encoding="utf-8") as f:
        json.dump({"supported_os": [{"osid": "centos-8"}]}, f)

    assert SupportedOSCatalog(path).supported_osids() == ["centos-7"]

    first.reload()
    assert first.supported_osids() == ["centos-8"]


def test_load_logged_under_package_logger(catalog_file, caplog):
    path = catalog_file(json.dumps({"supported_os": [{"osid": "centos-7"}]}))

    with caplog.at_level(logging.DEBUG, logger="import_precheck"):
        SupportedOSCatalog(path)

    records = [r for r in caplog.records if r.name == "import_precheck.supported_os"]
    assert [r.getMessage() for r in records] == [f"Loaded 1 supported OS entries from {path}"]
