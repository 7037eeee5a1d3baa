import pytest

from import_precheck.supported_os import SupportedOSCatalog


class FakeRelease:
    def __init__(self, osid):
        self.osid = osid

    def as_gcloud_arg(self):
        return self.osid


class FakeCatalog:
    """Records every lookup, answers from a fixed set."""

    def __init__(self, supported=()):
        self.supported = set(supported)
        self.lookups = []

    def is_supported(self, osid):
        self.lookups.append(osid)
        return osid in self.supported


class RecordingFactory:
    """Stands in for distro.from_components."""

    def __init__(self, osid="", error=None):
        self.osid = osid
        self.error = error
        self.calls = []

    def __call__(self, short_name, major, minor, architecture):
        self.calls.append((short_name, major, minor, architecture))
        if self.error is not None:
            raise self.error
        return FakeRelease(self.osid)


@pytest.fixture(autouse=True)
def clear_catalog_cache():
    SupportedOSCatalog.clear_cache()
    yield
    SupportedOSCatalog.clear_cache()


@pytest.fixture
def catalog_file(tmp_path):
    def _write(content):
        path = tmp_path / "catalog.json"
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write
