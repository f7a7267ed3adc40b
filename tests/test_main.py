"""Tests for the command line entry point."""
import json

from click.testing import CliRunner

from registry_dns.main import main, load_registry, select_services
from registry_dns.models import Service
from registry_dns.services import KeyMapper


class TestSelectServices:
    """Selection of registry entries for a query name"""

    def test_exact_name_includes_deeper_keys(self, registry_file):
        registry = load_registry(registry_file)

        services = select_services(registry, "web.east.skydns.local.", KeyMapper())

        assert [s.key for s in services] == [
            "/skydns/local/skydns/east/web/1",
            "/skydns/local/skydns/east/web/2",
        ]

    def test_wildcard_name(self, registry_file):
        registry = load_registry(registry_file)

        services = select_services(registry, "web.*.skydns.local.", KeyMapper())

        assert [s.key for s in services] == [
            "/skydns/local/skydns/east/web/1",
            "/skydns/local/skydns/east/web/2",
            "/skydns/local/skydns/west/web/1",
        ]

    def test_ordered_by_depth(self):
        registry = {
            "/skydns/local/a/deep/1": Service(host="d").to_json(),
            "/skydns/local/a/1": Service(host="t").to_json(),
        }

        services = select_services(registry, "a.local.", KeyMapper())

        assert [s.host for s in services] == ["t", "d"]


class TestMain:
    """End to end runs of the CLI"""

    def test_srv_output(self, clean_env, registry_file):
        runner = CliRunner()

        result = runner.invoke(main, [registry_file, "web.east.skydns.local."])

        assert result.exit_code == 0, result.output
        assert "1.web.east.skydns.local." in result.stdout
        assert "web2.example.com." in result.stdout
        assert "10.0.0.1" in result.stdout

    def test_txt_output(self, clean_env, registry_file):
        runner = CliRunner()

        result = runner.invoke(main, [registry_file, "web.west.skydns.local.", "--type", "txt"])

        assert result.exit_code == 0, result.output
        assert 'hello-west' in result.stdout

    def test_invalid_registry_exits_with_error(self, clean_env, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"/skydns/local/a": "not json"}))
        runner = CliRunner()

        result = runner.invoke(main, [str(path), "a.local."])

        assert result.exit_code == 1

    def test_invalid_config_exits_with_error(self, clean_env, monkeypatch, registry_file):
        monkeypatch.setenv("REGISTRY_DNS_LOG_LEVEL", "loud")
        runner = CliRunner()

        result = runner.invoke(main, [registry_file, "web.east.skydns.local."])

        assert result.exit_code == 1
