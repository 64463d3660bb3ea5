"""HJSON/JSON codecs and extension lookup."""

from __future__ import annotations

import pytest

from layered_configuration.adapters.codec import DEFAULT_CODECS, HjsonCodec, JsonCodec, codec_for, file_format_of
from layered_configuration.domain import FileFormat


@pytest.mark.os_agnostic
def test_hjson_decodes_comments_quoteless_strings_and_optional_commas() -> None:
    text = (
        "{\n  // line comment\n  # hash comment\n  name: my service\n"
        "  ports: [\n    80\n    443\n  ]\n  /* block */\n  debug: false\n}\n"
    )

    assert HjsonCodec().decode(text) == {"name": "my service", "ports": [80, 443], "debug": False}


@pytest.mark.os_agnostic
def test_hjson_decodes_objects_as_plain_dicts() -> None:
    decoded = HjsonCodec().decode("{\n  outer: {\n    inner: 1\n  }\n}")

    assert type(decoded) is dict
    assert type(decoded["outer"]) is dict


@pytest.mark.os_agnostic
def test_hjson_decodes_root_braces_optional() -> None:
    assert HjsonCodec().decode("a: 1\nb: two\n") == {"a": 1, "b": "two"}


@pytest.mark.os_agnostic
def test_hjson_encoding_is_decodable_and_keeps_unicode() -> None:
    codec = HjsonCodec()
    data = {"greeting": "grüß dich", "nested": {"list": [1, None, True]}, "empty": {}}

    text = codec.encode(data)

    assert "grüß" in text
    assert text.endswith("\n")
    assert codec.decode(text) == data


@pytest.mark.os_agnostic
def test_hjson_rejects_malformed_text_with_value_error() -> None:
    with pytest.raises(ValueError):
        HjsonCodec().decode("{ a: [1, 2 ")


@pytest.mark.os_agnostic
def test_json_is_strict() -> None:
    with pytest.raises(ValueError):
        JsonCodec().decode("{a: 1}")


@pytest.mark.os_agnostic
def test_json_encoding_is_indented_with_trailing_newline() -> None:
    text = JsonCodec().encode({"a": 1})

    assert text == '{\n  "a": 1\n}\n'


@pytest.mark.os_agnostic
def test_json_encoder_rejects_unserializable_values_with_type_error() -> None:
    with pytest.raises(TypeError):
        JsonCodec().encode({"a": object()})


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("user.hjson", FileFormat.HJSON),
        ("conf/User.HJSON", FileFormat.HJSON),
        ("local.json", FileFormat.JSON),
        ("notes.txt", None),
        ("hjson", None),
        ("archive.json.bak", None),
    ],
)
def test_file_format_follows_the_extension(path: str, expected: FileFormat | None) -> None:
    assert file_format_of(path) is expected


@pytest.mark.os_agnostic
def test_codec_for_returns_registered_codec_or_none() -> None:
    assert codec_for("a.hjson") is DEFAULT_CODECS[FileFormat.HJSON]
    assert codec_for("a.json") is DEFAULT_CODECS[FileFormat.JSON]
    assert codec_for("a.yaml") is None


@pytest.mark.os_agnostic
def test_codec_for_uses_a_custom_table() -> None:
    only_json = {FileFormat.JSON: JsonCodec()}

    assert codec_for("a.hjson", only_json) is None
    assert codec_for("a.json", only_json) is only_json[FileFormat.JSON]
