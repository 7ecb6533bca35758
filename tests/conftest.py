# SPDX-License-Identifier: Apache-2.0

from types import SimpleNamespace

import pytest

from netbox_site.netbox_client import SiteClient


class FakeSitesEndpoint:
    """In-memory stand-in for pynetbox's dcim.sites endpoint."""

    def __init__(self, next_id=1):
        self.sites = {}
        self.next_id = next_id
        self.calls = []
        self.error = None

    def _record(self, site_id):
        return SimpleNamespace(id=site_id, **self.sites[site_id])

    def _check(self, call):
        self.calls.append(call)
        if self.error is not None:
            raise self.error

    def count(self):
        self._check(("count",))
        return len(self.sites)

    def filter(self, **kwargs):
        self._check(("filter", kwargs))
        wanted = kwargs.get("id")
        return [
            self._record(site_id)
            for site_id in sorted(self.sites)
            if wanted is None or str(site_id) == str(wanted)
        ]

    def create(self, **kwargs):
        self._check(("create", kwargs))
        for site in self.sites.values():
            for attribute in ("name", "slug"):
                if site[attribute] == kwargs.get(attribute):
                    raise RuntimeError(
                        "The request failed with code 400 Bad Request: "
                        f"site with this {attribute} already exists."
                    )
        site_id = self.next_id
        self.next_id += 1
        self.sites[site_id] = dict(kwargs)
        return self._record(site_id)

    def update(self, objects):
        self._check(("update", objects))
        records = []
        for obj in objects:
            data = dict(obj)
            site_id = data.pop("id")
            self.sites[site_id].update(data)
            records.append(self._record(site_id))
        return records

    def delete(self, objects):
        self._check(("delete", objects))
        for site_id in objects:
            del self.sites[site_id]
        return True

    def add(self, site_id, name, slug, description=""):
        self.sites[site_id] = {"name": name, "slug": slug, "description": description}
        self.next_id = max(self.next_id, site_id + 1)

    def call_names(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def sites():
    return FakeSitesEndpoint(next_id=42)


@pytest.fixture
def api(sites):
    return SimpleNamespace(dcim=SimpleNamespace(sites=sites))


@pytest.fixture
def client(api):
    return SiteClient(api)
