# SPDX-License-Identifier: Apache-2.0

import json

import pytest

from netbox_site import main as main_module
from netbox_site.config import Config
from netbox_site.netbox_client import SiteClient


@pytest.fixture
def cfg(tmp_path):
    sites_file = tmp_path / "sites.yml"
    sites_file.write_text("sites:\n  - name: DC1\n    slug: dc1\n")
    return Config(
        netbox_url="https://netbox.example.com",
        netbox_token="t",
        sites_file=sites_file,
        state_file=tmp_path / "state.json",
    )


@pytest.fixture(autouse=True)
def environment(cfg, client, monkeypatch):
    monkeypatch.setattr(main_module, "setup_logging", lambda: None)
    monkeypatch.setattr(Config, "from_environment", classmethod(lambda cls: cfg))
    monkeypatch.setattr(SiteClient, "connect", classmethod(lambda cls, config: client))


def test_main_applies_changes(cfg, sites):
    main_module.main()

    assert sites.sites == {42: {"name": "DC1", "slug": "dc1", "description": ""}}
    assert json.loads(cfg.state_file.read_text()) == {"dc1": "42"}


def test_main_dry_run(cfg, sites):
    cfg.dry_run = True

    main_module.main()

    assert sites.sites == {}
    assert not cfg.state_file.exists()


def test_main_exits_on_failure(sites):
    sites.error = RuntimeError("The request failed with code 503")

    with pytest.raises(SystemExit) as excinfo:
        main_module.main()

    assert excinfo.value.code == 1
