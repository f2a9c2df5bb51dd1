import pytest

from sdkconf.errors import InvalidTripleError
from sdkconf.triple import Triple


def test_parse_and_canonical_string():
    triple = Triple.parse("x86_64-unknown-linux-gnu")
    assert (triple.arch, triple.vendor, triple.os, triple.environment) == ("x86_64", "unknown", "linux", "gnu")
    assert triple.triple_string == "x86_64-unknown-linux-gnu"
    assert str(triple) == "x86_64-unknown-linux-gnu"


def test_parse_without_environment():
    triple = Triple.parse("arm64-apple-macosx13.0")
    assert triple.environment is None
    assert triple.os_name == "macosx"
    assert triple.triple_string == "arm64-apple-macosx13.0"


@pytest.mark.parametrize("text", ["", "x86_64", "x86_64-linux", "x86_64--linux"])
def test_parse_rejects_malformed(text):
    with pytest.raises(InvalidTripleError):
        Triple.parse(text)


def test_equality_and_hashing():
    assert Triple.parse("wasm32-unknown-wasi") == Triple.parse("wasm32-unknown-wasi")
    assert len({Triple.parse("wasm32-unknown-wasi"), Triple.parse("wasm32-unknown-wasi")}) == 1


def test_runtime_compatibility_ignores_os_version():
    assert Triple.parse("arm64-apple-macosx13.0").is_runtime_compatible(Triple.parse("arm64-apple-macosx"))
    assert not Triple.parse("arm64-apple-macosx").is_runtime_compatible(Triple.parse("x86_64-apple-macosx"))
    assert not Triple.parse("x86_64-unknown-linux-gnu").is_runtime_compatible(
        Triple.parse("x86_64-unknown-linux-musl")
    )


def test_host_triple_is_parseable():
    host = Triple.host()
    assert Triple.parse(host.triple_string) == host


def test_empty_environment_matches_parsed_triple():
    built = Triple("x86_64", "unknown", "linux", "")
    parsed = Triple.parse("x86_64-unknown-linux")
    assert built.environment is None
    assert built == parsed
    assert hash(built) == hash(parsed)
    assert built.triple_string == parsed.triple_string
