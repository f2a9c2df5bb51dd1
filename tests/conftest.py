import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from sdkconf.configuration import ConfigurationStore  # noqa: E402
from sdkconf.filesystem import LocalFileSystem  # noqa: E402
from sdkconf.triple import Triple  # noqa: E402

HOST = "x86_64-unknown-linux-gnu"
TARGET = "aarch64-unknown-linux-gnu"


def write_bundle(
    root: Path,
    name: str,
    sdk_id: str,
    target_triples: dict,
    supported_triples: list[str] | None = None,
    variant: str = "variant",
) -> Path:
    bundle = root / f"{name}.artifactbundle"
    variant_dir = bundle / variant
    variant_dir.mkdir(parents=True)
    variant_entry = {"path": variant}
    if supported_triples is not None:
        variant_entry["supportedTriples"] = supported_triples
    (bundle / "info.json").write_text(
        json.dumps(
            {
                "schemaVersion": "1.0",
                "artifacts": {sdk_id: {"type": "sdk", "version": "1.0", "variants": [variant_entry]}},
            }
        ),
        encoding="utf-8",
    )
    (variant_dir / "sdk.json").write_text(
        json.dumps({"schemaVersion": "1.0", "targetTriples": target_triples}),
        encoding="utf-8",
    )
    return bundle


@pytest.fixture()
def host_triple():
    return Triple.parse(HOST)


@pytest.fixture()
def target_triple():
    return Triple.parse(TARGET)


@pytest.fixture()
def sdks_path(tmp_path):
    path = tmp_path / "sdks"
    write_bundle(
        path,
        "my-sdk",
        "mySDK",
        {
            TARGET: {
                "sdkRootPath": "sysroot",
                "toolchainPath": "toolchain/bin",
                "includeSearchPaths": ["sysroot/usr/include"],
            }
        },
        supported_triples=[HOST],
    )
    return path


@pytest.fixture()
def store(host_triple, sdks_path):
    return ConfigurationStore(host_triple, sdks_path, LocalFileSystem())
