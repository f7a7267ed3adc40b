"""Pytest configuration and fixtures."""
import json
import os
import pytest
from hypothesis import settings

from registry_dns.models import Service

# Hypothesis profiles
settings.register_profile("ci", max_examples=100)
settings.register_profile("dev", max_examples=10)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


@pytest.fixture
def clean_env(monkeypatch):
    """Remove registry-dns environment variables."""
    for name in ("REGISTRY_DNS_PREFIX", "REGISTRY_DNS_LOG_LEVEL", "REGISTRY_DNS_PTR_TTL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def registry_file(tmp_path):
    """Write a small registry dump and return its path."""
    registry = {
        "/skydns/local/skydns/east/web/1": Service(host="10.0.0.1", port=80, ttl=60).to_dict(),
        "/skydns/local/skydns/east/web/2": Service(host="web2.example.com", port=8080, ttl=60).to_dict(),
        "/skydns/local/skydns/west/web/1": json.dumps({"host": "2001:db8::1", "port": 80, "text": "hello-west"}),
        "/skydns/local/other/x": {"host": "unrelated.example.com"},
    }
    path = tmp_path / "registry.json"
    path.write_text(json.dumps(registry))
    return str(path)
