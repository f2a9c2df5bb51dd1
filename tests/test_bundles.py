import json
import logging
from pathlib import Path

from sdkconf.bundles import discover_valid_bundles, load_bundle, select_destination
from sdkconf.filesystem import LocalFileSystem
from sdkconf.triple import Triple

from conftest import HOST, TARGET, write_bundle

FS = LocalFileSystem()


def test_discovery_of_missing_root_is_empty(tmp_path):
    assert discover_valid_bundles(tmp_path / "nowhere", FS) == []


def test_discovery_parses_bundles_in_name_order(tmp_path):
    write_bundle(tmp_path, "b", "second", {TARGET: {}})
    write_bundle(tmp_path, "a", "first", {TARGET: {}})
    (tmp_path / "configuration").mkdir()
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
    bundles = discover_valid_bundles(tmp_path, FS)
    assert [bundle.name for bundle in bundles] == ["a.artifactbundle", "b.artifactbundle"]
    assert [bundle.identifiers for bundle in bundles] == [["first"], ["second"]]


def test_discovery_skips_invalid_bundles_with_warning(tmp_path, caplog):
    write_bundle(tmp_path, "good", "good", {TARGET: {}})
    broken = tmp_path / "broken.artifactbundle"
    broken.mkdir()
    (broken / "info.json").write_text("{", encoding="utf-8")
    (tmp_path / "empty.artifactbundle").mkdir()
    (tmp_path / "file.artifactbundle").write_text("", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        bundles = discover_valid_bundles(tmp_path, FS, logging.getLogger("test.bundles"))
    assert [bundle.name for bundle in bundles] == ["good.artifactbundle"]
    messages = " ".join(record.getMessage() for record in caplog.records)
    assert "broken.artifactbundle" in messages
    assert "empty.artifactbundle" in messages
    assert "file.artifactbundle" in messages


def test_unsupported_schema_version_is_invalid(tmp_path, caplog):
    bundle = write_bundle(tmp_path, "future", "future", {TARGET: {}})
    info = json.loads((bundle / "info.json").read_text(encoding="utf-8"))
    info["schemaVersion"] = "9.0"
    (bundle / "info.json").write_text(json.dumps(info), encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        assert discover_valid_bundles(tmp_path, FS) == []
    assert "future.artifactbundle" in caplog.text


def test_non_sdk_artifacts_are_ignored(tmp_path):
    bundle = write_bundle(tmp_path, "mixed", "sdk", {TARGET: {}})
    info = json.loads((bundle / "info.json").read_text(encoding="utf-8"))
    info["artifacts"]["tool"] = {"type": "executable", "version": "1.0", "variants": [{"path": "bin"}]}
    (bundle / "info.json").write_text(json.dumps(info), encoding="utf-8")
    assert load_bundle(bundle, FS).identifiers == ["sdk"]


def test_variant_paths_resolve_against_metadata_directory(tmp_path):
    bundle = write_bundle(tmp_path, "paths", "paths", {TARGET: {"sdkRootPath": "root", "toolchainPath": "/usr/bin"}})
    variant = load_bundle(bundle, FS).artifacts["paths"][0]
    destination = variant.destination_for(Triple.parse(TARGET))
    assert variant.metadata_path == bundle / "variant" / "sdk.json"
    assert destination.paths_configuration.sdk_root_path == bundle / "variant" / "root"
    assert destination.paths_configuration.toolchain_path == Path("/usr/bin")


def test_select_destination_matches_id_host_and_target(tmp_path):
    write_bundle(tmp_path, "one", "sdk", {TARGET: {"sdkRootPath": "/one"}}, supported_triples=["arm64-apple-macosx"])
    write_bundle(tmp_path, "two", "sdk", {TARGET: {"sdkRootPath": "/two"}}, supported_triples=[HOST])
    write_bundle(tmp_path, "three", "sdk", {TARGET: {"sdkRootPath": "/three"}})
    bundles = discover_valid_bundles(tmp_path, FS)
    host = Triple.parse(HOST)
    target = Triple.parse(TARGET)

    found = select_destination(bundles, "sdk", host, target)
    assert found.paths_configuration.sdk_root_path == Path("/three")

    only_two = [bundle for bundle in bundles if bundle.name != "three.artifactbundle"]
    found = select_destination(only_two, "sdk", host, target)
    assert found.paths_configuration.sdk_root_path == Path("/two")

    assert select_destination(bundles, "other", host, target) is None
    assert select_destination(bundles, "sdk", host, Triple.parse("wasm32-unknown-wasi")) is None
