"""Version endpoint — package metadata by default, JSON file when configured."""

import json

from blackslope.core.settings import settings


async def test_version_defaults_to_package_version(client):
    res = await client.get("/api/version")

    assert res.status_code == 200
    assert res.json()["version"]


async def test_version_reads_configured_json_file(client, monkeypatch, tmp_path):
    version_file = tmp_path / "version.json"
    version_file.write_text(json.dumps({"version": "2.3.4"}), encoding="utf-8")
    monkeypatch.setattr(settings, "VERSION_FILE", str(version_file))

    res = await client.get("/api/version")

    assert res.status_code == 200
    assert res.json() == {"version": "2.3.4"}


async def test_version_is_public_when_auth_configured(client, monkeypatch):
    monkeypatch.setattr(settings, "JWT_SECRET", "some-secret")

    res = await client.get("/api/version")

    assert res.status_code == 200
