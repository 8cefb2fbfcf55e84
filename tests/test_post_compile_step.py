import pytest

from generated_manifest.release import ReleaseId
from generated_manifest.step import run_post_compile
from generated_manifest.writer import manifest_path, read_manifest


def test_rules_scenario_writes_manifest(output_root, rules_tree, release_id):
    result = run_post_compile(output_root, ["com/acme/gen/Rules"], release_id)
    assert result.status == "written"
    assert result.ok
    assert result.type_names == ["com.acme.gen.Rules", "com.acme.gen.Rules$Inner"]
    assert result.manifest_path == manifest_path(output_root, release_id)
    assert read_manifest(output_root, release_id) == set(result.type_names)


@pytest.mark.parametrize(
    "generated_files, release",
    [(None, "acme:rules:1.0"), ([], "acme:rules:1.0"), (["com/acme/gen/Rules"], None)],
)
def test_missing_inputs_are_a_noop(output_root, rules_tree, generated_files, release):
    rid = ReleaseId.parse(release) if release else None
    result = run_post_compile(output_root, generated_files, rid)
    assert result.status == "skipped"
    assert result.ok
    assert not (output_root / "META-INF").exists()


def test_empty_set_writes_empty_manifest_by_default(output_root, make_classes, release_id):
    make_classes("com/acme/gen/Rules$Inner.class", "com/acme/gen/OtherThing.class")
    result = run_post_compile(output_root, ["com/acme/gen/Rules"], release_id)
    assert result.status == "written"
    assert result.type_names == []
    assert result.manifest_path.read_text(encoding="utf-8") == ""


def test_empty_set_suppressed_when_write_empty_false(output_root, release_id):
    result = run_post_compile(
        output_root, ["com/acme/gen/Rules"], release_id, write_empty=False
    )
    assert result.status == "skipped"
    assert result.reason == "no generated artifacts"
    assert not manifest_path(output_root, release_id).exists()


def test_empty_run_overwrites_stale_manifest(output_root, rules_tree, release_id):
    run_post_compile(output_root, ["com/acme/gen/Rules"], release_id)
    (output_root / "com" / "acme" / "gen" / "Rules.class").unlink()
    run_post_compile(output_root, ["com/acme/gen/Rules"], release_id)
    assert read_manifest(output_root, release_id) == set()


def test_rerun_is_byte_identical(output_root, rules_tree, release_id):
    sources = ["com/acme/gen/Rules", "com/acme/gen/OtherThing.java"]
    first = run_post_compile(output_root, sources, release_id).manifest_path.read_bytes()
    second = run_post_compile(
        output_root, list(reversed(sources)), release_id, workers=2
    ).manifest_path.read_bytes()
    assert first == second


def test_write_failure_is_reported_not_raised(output_root, rules_tree, release_id):
    (output_root / "META-INF").write_text("file in the way", encoding="utf-8")
    result = run_post_compile(output_root, ["com/acme/gen/Rules"], release_id)
    assert result.status == "failed"
    assert not result.ok
    assert result.manifest_path is None
    assert result.error_type
    assert "still use" in result.warning_message()


def test_listing_failure_is_reported_not_raised(output_root, release_id, monkeypatch, rules_tree):
    def boom(root, type_name):
        raise PermissionError("denied")

    monkeypatch.setattr("generated_manifest.accumulator.find_nested_type_names", boom)
    result = run_post_compile(output_root, ["com/acme/gen/Rules"], release_id)
    assert result.status == "failed"
    assert result.error_type == "PermissionError"
    assert result.error == "denied"
    assert not manifest_path(output_root, release_id).exists()


def test_suppressed_empty_run_removes_stale_manifest(output_root, rules_tree, release_id):
    first = run_post_compile(output_root, ["com/acme/gen/Rules"], release_id)
    assert first.status == "written"
    (output_root / "com" / "acme" / "gen" / "Rules.class").unlink()

    result = run_post_compile(
        output_root, ["com/acme/gen/Rules"], release_id, write_empty=False
    )
    assert result.status == "skipped"
    assert not manifest_path(output_root, release_id).exists()
    assert read_manifest(output_root, release_id) is None


def test_encoding_failure_is_reported_not_raised(output_root, rules_tree, release_id, monkeypatch):
    def boom(root, rid, names):
        raise UnicodeEncodeError("utf-8", "\udcff", 0, 1, "surrogates not allowed")

    monkeypatch.setattr("generated_manifest.step.write_manifest", boom)
    result = run_post_compile(output_root, ["com/acme/gen/Rules"], release_id)
    assert result.status == "failed"
    assert result.error_type == "UnicodeEncodeError"
