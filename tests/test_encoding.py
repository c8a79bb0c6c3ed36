import base64
import io

import pytest

from fitroom.image.encoding import (
    ImagePart,
    data_url_to_part,
    decode_data_url,
    encode_file_to_part,
    parse_data_url,
    read_file_as_data_url,
)
from fitroom.image.errors import MalformedInputError

from conftest import PNG_BYTES


@pytest.mark.parametrize("mime_type,data", [
    ("image/png", "ABC"),
    ("image/jpeg", "/9j/4AAQ"),
    ("application/octet-stream", "AA=="),
])
def test_parse_data_url_returns_mime_and_payload(mime_type, data):
    assert parse_data_url(f"data:{mime_type};base64,{data}") == (mime_type, data)


def test_parse_data_url_splits_on_first_comma():
    assert parse_data_url("data:text/plain;base64,a,b") == ("text/plain", "a,b")


@pytest.mark.parametrize("data_url", [
    "no-comma-here",
    "data:image/png;base64ABC",
    "image/png;base64,ABC",
    "data:;base64,ABC",
    "data:image/png,ABC",
    "",
])
def test_parse_data_url_rejects_malformed_input(data_url):
    with pytest.raises(MalformedInputError):
        parse_data_url(data_url)


def test_malformed_input_is_a_value_error():
    with pytest.raises(ValueError):
        parse_data_url("nope")


def test_data_url_to_part():
    part = data_url_to_part("data:image/webp;base64,XYZ")
    assert part == ImagePart("image/webp", "XYZ")
    assert part.to_request_part() == {"inlineData": {"mimeType": "image/webp", "data": "XYZ"}}
    assert part.to_data_url() == "data:image/webp;base64,XYZ"


def test_read_file_as_data_url_guesses_mime_from_path(png_file):
    data_url = read_file_as_data_url(png_file)
    expected = base64.b64encode(PNG_BYTES).decode("ascii")
    assert data_url == f"data:image/png;base64,{expected}"


def test_read_file_as_data_url_accepts_str_path(png_file):
    assert read_file_as_data_url(str(png_file)).startswith("data:image/png;base64,")


def test_explicit_mime_type_wins(png_file):
    assert read_file_as_data_url(png_file, "image/jpeg").startswith("data:image/jpeg;base64,")


def test_file_object_without_name_defaults_to_octet_stream():
    data_url = read_file_as_data_url(io.BytesIO(b"raw"))
    assert data_url == "data:application/octet-stream;base64,cmF3"


def test_encode_file_to_part(png_file):
    with open(png_file, "rb") as f:
        part = encode_file_to_part(f)
    assert part.mime_type == "image/png"
    assert base64.b64decode(part.data) == PNG_BYTES


def test_unreadable_resource_raises_ioerror(tmp_path):
    with pytest.raises(IOError):
        encode_file_to_part(tmp_path / "missing.png")


def test_decode_data_url():
    assert decode_data_url("data:text/plain;base64,aGVsbG8=") == b"hello"


def test_decode_data_url_rejects_bad_base64():
    with pytest.raises(MalformedInputError):
        decode_data_url("data:image/png;base64,@@@")
