"""Shared pytest fixtures for generated-manifest tests."""

from pathlib import Path

import pytest

from generated_manifest.release import ReleaseId


@pytest.fixture
def output_root(tmp_path):
    """Empty build output directory (stands in for compiled classes)."""
    root = tmp_path / "classes"
    root.mkdir()
    return root


@pytest.fixture
def make_classes(output_root):
    """Return function creating empty compiled artifacts under output_root.

    Paths are given '/'-separated relative to the output root, e.g.
    ``make_classes("com/acme/gen/Rules.class")``.
    """

    def _make(*rel_paths: str) -> list[Path]:
        created = []
        for rel in rel_paths:
            p = output_root.joinpath(*rel.split("/"))
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_bytes(b"\xca\xfe\xba\xbe")
            created.append(p)
        return created

    return _make


@pytest.fixture
def release_id():
    return ReleaseId.parse("acme:rules:1.0")


@pytest.fixture
def rules_tree(make_classes):
    """Primary, one nested type and an unrelated sibling in one package."""
    make_classes(
        "com/acme/gen/Rules.class",
        "com/acme/gen/Rules$Inner.class",
        "com/acme/gen/OtherThing.class",
    )
