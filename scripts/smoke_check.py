import os
import sys
import urllib.request
import urllib.error
from typing import Iterable, Optional


def _env(name: str, default: str) -> str:
    return (os.getenv(name) or default).strip()


def _check(url: str, ok_status: Iterable[int], host: str, expect: Optional[bytes] = None) -> tuple[bool, str]:
    try:
        req = urllib.request.Request(url, headers={"User-Agent": "stops-smoke-check", "Host": host})
        with urllib.request.urlopen(req, timeout=5) as resp:
            status = resp.getcode()
            body = resp.read(200)
    except urllib.error.HTTPError as e:
        status = e.code
        body = e.read(200) if e.fp else b""
    except Exception as exc:
        return False, f"error: {type(exc).__name__}: {exc}"

    if status not in ok_status:
        return False, f"status={status} body={body[:120]!r}"
    if expect is not None and not body.startswith(expect):
        return False, f"status={status} unexpected body start {body[:60]!r}"
    return True, f"status={status}"


def main() -> int:
    service = _env("HOMEPAGE_URL", "http://127.0.0.1:8000")
    host = _env("HOMEPAGE_HOST", "stops.r-forge.r-project.org")

    checks = [
        ("homepage.health", f"{service}/health", {200}, None),
        ("homepage.index", f"{service}/", {200}, b'<?xml version="1.0" encoding="UTF-8"?>'),
    ]

    ok_all = True
    results = []
    for name, url, ok_status, expect in checks:
        ok, detail = _check(url, ok_status, host, expect)
        ok_all = ok_all and ok
        results.append({"name": name, "url": url, "ok": ok, "detail": detail})

    print(f"STOPS homepage smoke check (Host: {host})")
    for r in results:
        flag = "PASS" if r["ok"] else "FAIL"
        print(f"[{flag}] {r['name']} -> {r['url']} ({r['detail']})")

    if not ok_all:
        print("One or more checks failed.")
        return 1

    print("All checks passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
