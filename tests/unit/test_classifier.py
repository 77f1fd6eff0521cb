"""Tests for import path classification."""

import pytest

from go_resolve.errors import UnsupportedAccessError
from go_resolve.models.package import RecognizedPackage, UnrecognizedPackage, VcsType
from go_resolve.pack.classifier import PackageClassifier
from go_resolve.pack.registry import PackageRegistry


@pytest.fixture
def classifier():
    return PackageClassifier(PackageRegistry())


class TestClassify:
    def test_github_path(self, classifier):
        """A GitHub repository path is its own root."""
        package = classifier.classify("github.com/foo/bar")

        assert isinstance(package, RecognizedPackage)
        assert package.root_path == "github.com/foo/bar"
        assert package.vcs_type is VcsType.GIT
        assert package.urls[0] == "https://github.com/foo/bar.git"

    def test_sub_package_reports_full_path(self, classifier):
        package = classifier.classify("github.com/foo/bar/baz/qux")
        assert package.path == "github.com/foo/bar/baz/qux"
        assert package.root_path == "github.com/foo/bar"

    def test_recognizability_is_not_monotonic(self, classifier):
        """A bare vanity domain is unknown while its sub-repositories are known."""
        assert classifier.classify("golang.org") == UnrecognizedPackage("golang.org")

        tools = classifier.classify("golang.org/x/tools")
        assert isinstance(tools, RecognizedPackage)
        assert tools.root_path == "golang.org/x/tools"
        assert tools.vcs_type is VcsType.GIT

    @pytest.mark.parametrize("path", ["", "   ", "/"])
    def test_blank_path_is_unrecognized(self, classifier, path):
        assert isinstance(classifier.classify(path), UnrecognizedPackage)

    @pytest.mark.parametrize(
        "path",
        [
            "github.com/foo/bar",
            "golang.org/x/net/context",
            "gopkg.in/yaml.v2",
            "example.com/unknown/thing",
            "fmt",
        ],
    )
    def test_classification_is_idempotent(self, classifier, path):
        first = classifier.classify(path)
        assert classifier.classify(first.path) == first

    def test_classifying_a_root_again(self, classifier):
        package = classifier.classify("github.com/foo/bar/baz")
        assert classifier.classify(package.root_path) == package.longer_path(package.root_path)

    def test_root_of(self, classifier):
        assert classifier.root_of("github.com/foo/bar/baz") == "github.com/foo/bar"
        assert classifier.root_of("example.com/x/y") == "example.com/x/y"


class TestLongerPath:
    def test_unrecognized_is_reclassified(self, classifier):
        current = classifier.classify("golang.org")
        longer = classifier.longer_path(current, "golang.org/x/tools/go/ast")

        assert isinstance(longer, RecognizedPackage)
        assert longer.root_path == "golang.org/x/tools"

    def test_unrecognized_may_stay_unrecognized(self, classifier):
        current = classifier.classify("example.com")
        assert classifier.longer_path(current, "example.com/a") == UnrecognizedPackage(
            "example.com/a"
        )

    def test_recognized_keeps_root(self, classifier):
        current = classifier.classify("github.com/foo/bar")
        longer = classifier.longer_path(current, "github.com/foo/bar/sub")

        assert longer.path == "github.com/foo/bar/sub"
        assert longer.root_path == current.root_path
        assert longer.vcs_type is current.vcs_type
        assert longer.urls == current.urls

    def test_recognized_keeps_overridden_urls(self, classifier):
        """Metadata is carried over from the current package, not recomputed."""
        current = classifier.classify("github.com/foo/bar").with_urls(("https://mirror/bar",))
        longer = classifier.longer_path(current, "github.com/foo/bar/sub")
        assert longer.urls == ("https://mirror/bar",)

    def test_recognized_widens_anywhere_under_root(self, classifier):
        current = classifier.classify("github.com/foo/bar/baz")
        other = classifier.longer_path(current, "github.com/foo/bar/qux/deep")

        assert other.path == "github.com/foo/bar/qux/deep"
        assert other.root_path == "github.com/foo/bar"
        assert other.urls == current.urls

    def test_unrecognized_must_extend_its_own_path(self, classifier):
        current = classifier.classify("example.com/a")
        with pytest.raises(ValueError):
            classifier.longer_path(current, "example.com/b/c")

    def test_rejects_non_extension(self, classifier):
        current = classifier.classify("github.com/foo/bar")
        with pytest.raises(ValueError):
            classifier.longer_path(current, "github.com/other/bar/x")
        with pytest.raises(ValueError):
            classifier.longer_path(current, "github.com/foo/bar")


class TestShorterPath:
    def test_unrecognized_shortens_without_reclassifying(self, classifier):
        current = classifier.classify("example.com/a/b")
        assert classifier.shorter_path(current, "example.com/a") == UnrecognizedPackage(
            "example.com/a"
        )

    def test_shortening_never_reclassifies(self, classifier):
        """Even a shorter path that a rule would recognize stays unrecognized."""
        current = UnrecognizedPackage("github.com/foo/bar/baz")
        shorter = classifier.shorter_path(current, "github.com/foo/bar")
        assert isinstance(shorter, UnrecognizedPackage)

    def test_recognized_cannot_be_shortened(self, classifier):
        current = classifier.classify("github.com/foo/bar/baz")
        with pytest.raises(UnsupportedAccessError):
            classifier.shorter_path(current, "github.com/foo/bar")

    def test_rejects_non_prefix(self, classifier):
        current = UnrecognizedPackage("example.com/a/b")
        with pytest.raises(ValueError):
            classifier.shorter_path(current, "example.org")
