"""Tests for host splitting."""
import pytest

from app.utils.host import HostParts, request_host, split_host


def test_split_project_host():
    parts = split_host("foo.example.org")
    assert parts.group_name == "foo"
    assert parts.domain == "example.org"


def test_split_uses_first_dot_only():
    assert split_host("a.b.c") == HostParts(group_name="a", domain="b.c")


@pytest.mark.parametrize(
    "host",
    ["stops.r-forge.r-project.org", "x.y", "stops.r-forge.r-project.org:8080"],
)
def test_parts_rejoin_to_host(host):
    parts = split_host(host)
    assert f"{parts.group_name}.{parts.domain}" == host


def test_port_stays_with_domain():
    parts = split_host("stops.localhost:8000")
    assert parts.domain == "localhost:8000"


def test_host_without_dot():
    parts = split_host("localhost")
    assert parts.group_name == "localhost"
    assert parts.domain == ""


@pytest.mark.parametrize("host", ["", None])
def test_missing_host(host):
    assert split_host(host) == HostParts(group_name="", domain="")


def test_fragment_url():
    parts = split_host("stops.r-forge.r-project.org")
    assert (
        parts.fragment_url("/export/projtitl.php")
        == "http://r-forge.r-project.org/export/projtitl.php?group_name=stops"
    )


def test_request_host_reads_host_header():
    assert request_host({"host": "stops.r-forge.r-project.org"}) == "stops.r-forge.r-project.org"
    assert request_host({}) == ""
