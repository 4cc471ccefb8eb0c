"""End-to-end tests for the documentation pipeline."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from suitedoc import generate
from suitedoc.config import DEFAULT_PROJECT_DESCRIPTION, DEFAULT_PROJECT_NAME
from suitedoc.errors import ConfigError, OutputWriteError, SourceReadError
from suitedoc.models import OVERVIEW_CHAPTER, DocSection
from tests._fixtures.project_builder import ProjectBuilder

CLAIMS_TEST = """
    import { expect } from "chai";

    /**
     * @notice Checks setup
     * @chapter access-control
     */
    describe("Deployment", function () {
      it("deploys", async function () {});
    });

    describe("Policy Creation", function () {
      it("creates a policy", async function () {});
    });
"""


def _snapshot(root: Path) -> dict[str, bytes]:
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


def test_generate_end_to_end(project_builder: ProjectBuilder) -> None:
    project_builder.write({"test/Claims.test.ts": CLAIMS_TEST})

    outcome = project_builder.generate()

    chapter = project_builder.read("docs/access-control.md")
    assert chapter.startswith("# Access Control\n")
    assert "## Deployment\n\nChecks setup\n" in chapter

    overview = project_builder.read("README.md")
    assert "### Access Control\n\n#### Deployment\n\nChecks setup\n" in overview
    assert f"# {DEFAULT_PROJECT_NAME}\n\n{DEFAULT_PROJECT_DESCRIPTION}\n" in overview
    assert "- **Policy Creation**" in overview

    assert outcome.chapters[OVERVIEW_CHAPTER] == [DocSection(title="Policy Creation")]
    assert list(outcome.chapters) == [OVERVIEW_CHAPTER, "access-control"]

    summary = project_builder.read("docs/SUMMARY.md")
    assert "* [Introduction](../README.md)" in summary
    assert "* [Access Control](access-control.md)" in summary

    root = project_builder.path().resolve()
    assert outcome.written == [
        root / "README.md",
        root / "docs" / "access-control.md",
        root / "docs" / "SUMMARY.md",
    ]


def test_index_entries_match_generated_chapter_files(project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {
            "test/A.test.ts": """
                /** @chapter encryption */
                describe("Encrypt", function () {});
            """,
            "test/B.test.ts": """
                /**
                 * @chapter user-decryption
                 * @chapter encryption
                 */
                describe("Decrypt", function () {});
            """,
        }
    )

    project_builder.generate()

    docs = project_builder.path() / "docs"
    chapter_files = sorted(path.name for path in docs.iterdir() if path.name != "SUMMARY.md")
    summary = project_builder.read("docs/SUMMARY.md")
    linked = [line.split("](")[1].rstrip(")") for line in summary.splitlines() if line.startswith("* [") and "../" not in line]
    assert linked == ["encryption.md", "user-decryption.md"]
    assert sorted(linked) == chapter_files


def test_sources_are_processed_in_name_order(project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {
            "test/b.test.ts": 'describe("Second", function () {});',
            "test/a.test.ts": 'describe("First", function () {});',
            "test/helpers.ts": 'describe("Ignored", function () {});',
        }
    )

    outcome = project_builder.generate()

    assert [section.title for section in outcome.sections] == ["First", "Second"]
    assert [path.name for path in outcome.source_files] == ["a.test.ts", "b.test.ts"]


def test_rerun_is_byte_identical(project_builder: ProjectBuilder) -> None:
    project_builder.write({"test/Claims.test.ts": CLAIMS_TEST})

    project_builder.generate()
    first = _snapshot(project_builder.path())
    project_builder.generate()
    second = _snapshot(project_builder.path())

    assert first == second


def test_project_metadata_is_used_when_present(project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {
            "test/Claims.test.ts": CLAIMS_TEST,
            "package.json": json.dumps({"name": "privacy-claims", "description": "Encrypted claims"}),
        }
    )

    project_builder.generate()

    assert project_builder.read("README.md").startswith("# privacy-claims\n\nEncrypted claims\n")


def test_malformed_metadata_falls_back_to_defaults(project_builder: ProjectBuilder) -> None:
    project_builder.write({"test/Claims.test.ts": CLAIMS_TEST, "package.json": "{not json"})

    project_builder.generate()

    assert project_builder.read("README.md").startswith(f"# {DEFAULT_PROJECT_NAME}\n")


def test_no_matching_sources_writes_nothing(project_builder: ProjectBuilder) -> None:
    project_builder.write({"README.md": "hand written\n", "test/notes.md": "nothing here"})

    outcome = project_builder.generate()

    assert outcome.written == []
    assert not outcome.generated
    assert not (project_builder.path() / "docs").exists()
    assert project_builder.read("README.md") == "hand written\n"


def test_missing_source_directory_writes_nothing(project_builder: ProjectBuilder) -> None:
    outcome = project_builder.generate()

    assert outcome.written == []
    assert list(project_builder.path().iterdir()) == []


def test_unreadable_source_aborts_without_output(project_builder: ProjectBuilder) -> None:
    project_builder.write({"test/a.test.ts": CLAIMS_TEST, "README.md": "keep\n"})
    (project_builder.path() / "test" / "b.test.ts").write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(SourceReadError):
        project_builder.generate()

    assert not (project_builder.path() / "docs").exists()
    assert project_builder.read("README.md") == "keep\n"


def test_missing_project_root_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        generate(tmp_path / "missing")


def test_file_as_project_root_raises(tmp_path: Path) -> None:
    target = tmp_path / "file.txt"
    target.write_text("x", encoding="utf-8")
    with pytest.raises(NotADirectoryError):
        generate(target)


def test_config_overrides_locations(project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {
            ".suitedoc.yml": """
                source:
                  dir: specs
                  suffix: .spec.ts
                output:
                  overview: OVERVIEW.md
                  docs_dir: book
                project:
                  name: Configured Name
            """,
            "specs/vault.spec.ts": """
                /** @chapter encryption */
                describe("Vault", function () {});
            """,
        }
    )

    project_builder.generate()

    root = project_builder.path()
    assert project_builder.read("OVERVIEW.md").startswith("# Configured Name\n")
    assert (root / "book" / "encryption.md").exists()
    assert "* [Introduction](../OVERVIEW.md)" in project_builder.read("book/SUMMARY.md")
    assert "(book/SUMMARY.md)" in project_builder.read("OVERVIEW.md")
    assert not (root / "README.md").exists()


def test_malformed_config_is_fatal(project_builder: ProjectBuilder) -> None:
    project_builder.write({".suitedoc.yml": "source: [unclosed\n", "test/a.test.ts": CLAIMS_TEST})

    with pytest.raises(ConfigError):
        project_builder.generate()

    assert not (project_builder.path() / "docs").exists()


def test_blocked_docs_directory_fails_before_any_write(project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {"test/Claims.test.ts": CLAIMS_TEST, "README.md": "keep\n", "docs": "not a directory\n"}
    )

    with pytest.raises(OutputWriteError) as excinfo:
        project_builder.generate()

    assert excinfo.value.path == project_builder.path().resolve() / "docs"
    assert project_builder.read("README.md") == "keep\n"
    assert project_builder.read("docs") == "not a directory\n"
