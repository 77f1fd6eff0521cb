"""Tests for Go import scanning."""

import pytest

from go_resolve.errors import VisitationError
from go_resolve.models.dependency import DependencyCategory
from go_resolve.produce.imports import ImportScanner, is_standard_import, parse_imports

SOURCE = '''// Package demo does things.
package demo

import "fmt"
import yaml "gopkg.in/yaml.v2"

import (
\t"net/http"
\t_ "github.com/lib/pq" // driver
\t. "github.com/onsi/gomega"
\t/* "github.com/commented/out" */
\tctx "golang.org/x/net/context"
)

func main() {
\tfmt.Println("import \\"github.com/not/an/import\\"")
\turl := "http://example.com" // import "github.com/also/not"
}
'''


class TestParseImports:
    def test_parses_single_and_grouped_imports(self):
        assert sorted(parse_imports(SOURCE)) == [
            "fmt",
            "github.com/lib/pq",
            "github.com/onsi/gomega",
            "golang.org/x/net/context",
            "gopkg.in/yaml.v2",
            "net/http",
        ]

    def test_no_imports(self):
        assert parse_imports("package empty\n") == []

    @pytest.mark.parametrize(
        "path, expected",
        [("fmt", True), ("net/http", True), ("C", True), ("github.com/a/b", False)],
    )
    def test_is_standard_import(self, path, expected):
        assert is_standard_import(path) is expected


class TestImportScanner:
    def test_collects_non_standard_imports_sorted(self, project_dir, write_go_file):
        write_go_file(project_dir, "main.go", ["fmt", "github.com/z/last", "github.com/a/first"])

        assert ImportScanner().scan(project_dir) == {
            "github.com/a/first": DependencyCategory.BUILD,
            "github.com/z/last": DependencyCategory.BUILD,
        }

    def test_test_only_imports(self, project_dir, write_go_file):
        write_go_file(project_dir, "main.go", ["github.com/a/lib"])
        write_go_file(project_dir, "main_test.go", ["github.com/a/lib", "github.com/stretchr/testify/assert"])

        found = ImportScanner().scan(project_dir)

        assert found["github.com/a/lib"] is DependencyCategory.BUILD
        assert found["github.com/stretchr/testify/assert"] is DependencyCategory.TEST

    def test_build_use_wins_over_earlier_test_use(self, project_dir, write_go_file):
        write_go_file(project_dir, "a_test.go", ["github.com/a/lib"])
        write_go_file(project_dir / "pkg", "z.go", ["github.com/a/lib"])

        assert ImportScanner().scan(project_dir)["github.com/a/lib"] is DependencyCategory.BUILD

    def test_skips_ignored_directories(self, project_dir, write_go_file):
        write_go_file(project_dir / "cmd" / "tool", "tool.go", ["github.com/kept/one"])
        write_go_file(project_dir / "vendor" / "github.com" / "x" / "y", "y.go", ["github.com/skip/vendor"])
        write_go_file(project_dir / "testdata", "t.go", ["github.com/skip/testdata"])
        write_go_file(project_dir / ".hidden", "h.go", ["github.com/skip/hidden"])
        write_go_file(project_dir / "_build", "b.go", ["github.com/skip/underscore"])
        write_go_file(project_dir, "_ignored.go", ["github.com/skip/file"])

        assert list(ImportScanner().scan(project_dir)) == ["github.com/kept/one"]

    def test_ignores_non_go_files(self, project_dir):
        (project_dir / "README.md").write_text('import "github.com/not/go"\n')
        assert ImportScanner().scan(project_dir) == {}

    def test_missing_directory(self, tmp_path):
        with pytest.raises(VisitationError, match="not found"):
            ImportScanner().scan(tmp_path / "missing")
