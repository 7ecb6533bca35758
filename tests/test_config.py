# SPDX-License-Identifier: Apache-2.0

from pathlib import Path

import pytest

from netbox_site import config
from netbox_site.config import Config


@pytest.fixture
def settings(monkeypatch):
    values = {}
    monkeypatch.setattr(config, "SETTINGS", values)
    monkeypatch.setattr(Config, "_read_secret", staticmethod(lambda name: ""))
    return values


def test_from_environment_defaults(settings):
    settings.update({"NETBOX_API": "https://netbox.example.com", "NETBOX_TOKEN": "t"})

    cfg = Config.from_environment()

    assert cfg.netbox_url == "https://netbox.example.com"
    assert cfg.netbox_token == "t"
    assert cfg.ignore_ssl_errors is True
    assert cfg.sites_file == Path("/netbox/sites.yml")
    assert cfg.state_file == Path("/netbox/sites.state.json")
    assert cfg.dry_run is False


def test_from_environment_overrides(settings):
    settings.update(
        {
            "NETBOX_API": "https://netbox.example.com",
            "NETBOX_TOKEN": "t",
            "IGNORE_SSL_ERRORS": False,
            "SITES_FILE": "/tmp/sites.yml",
            "STATE_FILE": "/tmp/state.json",
            "DRY_RUN": True,
        }
    )

    cfg = Config.from_environment()

    assert cfg.ignore_ssl_errors is False
    assert cfg.sites_file == Path("/tmp/sites.yml")
    assert cfg.state_file == Path("/tmp/state.json")
    assert cfg.dry_run is True


def test_from_environment_requires_url(settings):
    settings["NETBOX_TOKEN"] = "t"

    with pytest.raises(ValueError, match="NETBOX_API"):
        Config.from_environment()


def test_from_environment_requires_token(settings):
    settings["NETBOX_API"] = "https://netbox.example.com"

    with pytest.raises(ValueError, match="NETBOX_TOKEN"):
        Config.from_environment()


def test_from_environment_reads_token_secret(settings, monkeypatch):
    settings["NETBOX_API"] = "https://netbox.example.com"
    monkeypatch.setattr(Config, "_read_secret", staticmethod(lambda name: "secret"))

    assert Config.from_environment().netbox_token == "secret"
