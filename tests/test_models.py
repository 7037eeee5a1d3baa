import pytest

from import_precheck.exceptions import OSInfoError, ReportStateError
from import_precheck.models import Report, ReportResult
from import_precheck.os_detection import OSFamily, OSInfo, classify_short_name


def test_report_defaults_to_passed():
    report = Report("OS Version Check")
    assert report.result == ReportResult.PASSED
    assert report.passed
    assert report.infos == []
    assert report.fatal_message is None


def test_report_keeps_info_order():
    report = Report("r")
    report.info("first")
    report.info("second")
    report.skip()
    assert report.infos == ["first", "second"]
    assert report.to_dict() == {
        "name": "r",
        "result": "skipped",
        "infos": ["first", "second"],
        "fatal": None,
    }


def test_fatal_sets_failed():
    report = Report("r")
    report.fatal("centos-6 is not supported for import.")
    assert report.result == ReportResult.FAILED
    assert report.fatal_message == "centos-6 is not supported for import."
    assert not report.passed


@pytest.mark.parametrize("first,second", [
    ("skip", "fatal"),
    ("fatal", "skip"),
    ("skip", "skip"),
    ("fatal", "fatal"),
])
def test_terminal_state_set_once(first, second):
    report = Report("r")
    getattr(report, first)(*(["boom"] if first == "fatal" else []))
    with pytest.raises(ReportStateError):
        getattr(report, second)(*(["boom"] if second == "fatal" else []))


@pytest.mark.parametrize("short_name,family", [
    ("", OSFamily.UNKNOWN),
    ("linux", OSFamily.GENERIC_LINUX),
    ("windows", OSFamily.WINDOWS),
    ("centos", OSFamily.DISTRO),
])
def test_classify_short_name(short_name, family):
    assert classify_short_name(short_name) is family
    assert OSInfo(short_name=short_name).family is family


def test_osinfo_from_dict():
    assert OSInfo.from_dict({"ShortName": "centos", "Version": "7.9", "Architecture": "x86_64"}) == \
        OSInfo("centos", "7.9", "x86_64")
    assert OSInfo.from_dict({"short_name": "debian", "version": None}) == OSInfo("debian", "", "")


@pytest.mark.parametrize("data", [["centos"], {"version": 7}])
def test_osinfo_from_dict_invalid(data):
    with pytest.raises(OSInfoError):
        OSInfo.from_dict(data)
