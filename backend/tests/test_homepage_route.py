"""Tests for the HTTP routes."""
import httpx

from .conftest import FRAGMENT_HTML, TAIL_HTML


def test_homepage_served_as_html(api, upstream):
    response = api.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert response.content.startswith(b'<?xml version="1.0" encoding="UTF-8"?>\n<!DOCTYPE html')
    assert FRAGMENT_HTML in response.content
    assert response.content.endswith(TAIL_HTML)
    assert str(upstream["seen"][0].url) == "http://r-forge.r-project.org/export/projtitl.php?group_name=stops"


def test_index_php_alias(api):
    assert api.get("/index.php").content == api.get("/").content


def test_host_header_drives_group(api, upstream):
    response = api.get("/", headers={"host": "cops.example.org"})

    assert b"<title>cops</title>" in response.content
    assert upstream["seen"][0].url.host == "example.org"
    assert upstream["seen"][0].url.params["group_name"] == "cops"


def test_upstream_down_still_200(api, upstream, refused_handler):
    upstream["handler"] = refused_handler

    response = api.get("/")

    assert response.status_code == 200
    assert FRAGMENT_HTML not in response.content
    assert b"<h3>People:</h3>" in response.content
    assert response.content.endswith(TAIL_HTML)


def test_upstream_error_status_still_200(api, upstream):
    upstream["handler"] = lambda request: httpx.Response(500, content=b"boom")

    response = api.get("/")

    assert response.status_code == 200
    assert b"boom" not in response.content


def test_health(api):
    response = api.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_unknown_path_uses_error_body(api):
    response = api.get("/nope")

    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "not_found"
    assert body["path"] == "/nope"


def test_invalid_idna_host_still_renders_page(api, upstream):
    response = api.get("/", headers={"host": "stops.xn--zz"})

    assert response.status_code == 200
    assert b"<title>stops</title>" in response.content
    assert b"<h3>People:</h3>" in response.content
    assert upstream["seen"] == []
    assert response.content.endswith(TAIL_HTML)
