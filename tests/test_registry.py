import pytest

from import_precheck.checks import Check, CheckRegistry
from import_precheck.exceptions import PrecheckError
from import_precheck.models import Report


class DiskSizeCheck(Check):
    def __init__(self, size_gb=10):
        self.size_gb = size_gb

    def get_name(self):
        return "Disk Size Check"

    def run(self):
        return Report(self.get_name())


def test_register_and_create():
    registry = CheckRegistry()
    registry.register("Disk Size Check", DiskSizeCheck)

    check = registry.create("Disk Size Check", size_gb=20)

    assert isinstance(check, DiskSizeCheck)
    assert check.size_gb == 20
    assert check.run().name == "Disk Size Check"


def test_names_keep_registration_order():
    registry = CheckRegistry()
    registry.register("b", DiskSizeCheck)
    registry.register("a", DiskSizeCheck)
    assert registry.names() == ["b", "a"]
    assert len(registry) == 2


def test_duplicate_name_rejected():
    registry = CheckRegistry()
    registry.register("Disk Size Check", DiskSizeCheck)
    with pytest.raises(PrecheckError):
        registry.register("Disk Size Check", DiskSizeCheck)


def test_unknown_name():
    with pytest.raises(KeyError):
        CheckRegistry().get("nope")


def test_check_is_abstract():
    with pytest.raises(TypeError):
        Check()
