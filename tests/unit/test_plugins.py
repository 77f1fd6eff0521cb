"""Tests for the plugin system and source materialization."""

import pytest

from go_resolve import hookimpl
from go_resolve.errors import FetchError
from go_resolve.fetch import PluginMaterializer, default_search_paths
from go_resolve.fetch.gopath import find_in_search_paths
from go_resolve.models.package import RecognizedPackage, VcsType
from go_resolve.pack.classifier import PackageClassifier
from go_resolve.pack.registry import DEFAULT_RULES, get_default_registry
from go_resolve.plugins import (
    DEFAULT_PLUGINS,
    collect_package_rules,
    get_plugins,
    initialize_plugins,
    pm,
    reset_plugins,
)

PACKAGE = RecognizedPackage(
    path="github.com/foo/bar",
    root_path="github.com/foo/bar",
    vcs_type=VcsType.GIT,
    urls=("https://github.com/foo/bar.git",),
)


@pytest.fixture(autouse=True)
def clean_plugins():
    reset_plugins()
    yield
    reset_plugins()


class CorpRulesPlugin:
    @hookimpl
    def register_package_rules(self):
        return [
            {
                "name": "corp",
                "pattern": r"^(?P<root>go\.corp\.net/(?P<repo>[a-z]+))(?:/|$)",
                "vcs": "git",
                "urls": ["https://git.corp.net/{repo}.git"],
                "description": "Corporate vanity paths",
            }
        ]


class TestPluginManager:
    def test_default_plugins_loaded(self):
        names = [plugin["name"] for plugin in get_plugins()]
        for plugin_path in DEFAULT_PLUGINS:
            assert plugin_path in names

    def test_initialize_is_idempotent(self):
        initialize_plugins()
        count = len(pm.get_plugins())
        initialize_plugins()
        assert len(pm.get_plugins()) == count

    def test_reset_unregisters_plugins(self):
        initialize_plugins()
        reset_plugins()
        assert pm.get_plugins() == set()


class TestPackageRulePlugins:
    def test_plugin_rules_appended_after_bundled_rules(self):
        initialize_plugins()
        pm.register(CorpRulesPlugin())

        registry = get_default_registry()

        assert registry.rules[: len(DEFAULT_RULES)] == DEFAULT_RULES
        assert registry.names()[-1] == "corp"
        package = PackageClassifier(registry).classify("go.corp.net/tools/cmd")
        assert package.root_path == "go.corp.net/tools"

    def test_registry_is_built_once(self):
        first = get_default_registry()
        pm.register(CorpRulesPlugin())
        assert get_default_registry() is first

    def test_collect_without_plugin_rules(self):
        assert collect_package_rules() == []

    def test_malformed_plugin_rule_rejected_when_collected(self):
        class BrokenRulesPlugin:
            @hookimpl
            def register_package_rules(self):
                return [
                    {
                        "name": "broken",
                        "pattern": r"^go\.example\.com/(?P<repo>[a-z]+)(?:/|$)",
                        "vcs": "git",
                        "urls": ["https://git.example.com/{repo}.git"],
                    }
                ]

        initialize_plugins()
        pm.register(BrokenRulesPlugin())

        with pytest.raises(ValueError, match="broken"):
            collect_package_rules()


class TestGopathMaterialization:
    def test_find_in_src_and_vendor(self, tmp_path):
        first = tmp_path / "first"
        second = tmp_path / "second"
        (second / "vendor" / "github.com" / "foo" / "bar").mkdir(parents=True)

        assert find_in_search_paths("github.com/foo/bar", [first, second]) == (
            second / "vendor" / "github.com" / "foo" / "bar"
        )

        (first / "src" / "github.com" / "foo" / "bar").mkdir(parents=True)
        assert find_in_search_paths("github.com/foo/bar", [first, second]) == (
            first / "src" / "github.com" / "foo" / "bar"
        )

    def test_materializer_uses_gopath_plugin(self, gopath):
        source = gopath / "src" / "github.com" / "foo" / "bar"
        source.mkdir(parents=True)

        assert PluginMaterializer([gopath]).materialize(PACKAGE) == source

    def test_missing_sources_raise_fetch_error(self, gopath):
        with pytest.raises(FetchError, match="github.com/foo/bar") as excinfo:
            PluginMaterializer([gopath]).materialize(PACKAGE)
        assert excinfo.value.path == "github.com/foo/bar"

    def test_first_plugin_result_wins(self, tmp_path, gopath):
        fetched = tmp_path / "fetched"
        fetched.mkdir()

        class FetchingPlugin:
            @hookimpl
            def materialize_package(self, root_path, vcs, urls):
                assert vcs == "git"
                assert urls == ["https://github.com/foo/bar.git"]
                return fetched

        initialize_plugins()
        pm.register(FetchingPlugin())

        assert PluginMaterializer([gopath]).materialize(PACKAGE) == fetched

    def test_default_search_paths_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GOPATH", str(tmp_path))
        assert default_search_paths() == [tmp_path]

    def test_default_search_paths_fallback(self, monkeypatch, tmp_path):
        monkeypatch.delenv("GOPATH", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert default_search_paths() == [tmp_path / "go"]
