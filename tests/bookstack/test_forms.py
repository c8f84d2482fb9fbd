"""Tests for form encoders."""

import io

import pytest

from bookstack_api.common.errors import FormEncodingError
from bookstack_api.forms import Form, MultipartForm, flatten_fields


class TestFlattenFields:
    """Test flatten_fields."""

    def test_scalars(self):
        assert flatten_fields({"name": "Book", "default_template_id": 4}) == [
            ("name", "Book"),
            ("default_template_id", "4"),
        ]

    def test_tags(self):
        fields = {"tags": [{"name": "Category", "value": "Guide"}, {"name": "Team", "value": "Docs"}]}
        assert flatten_fields(fields) == [
            ("tags[0][name]", "Category"),
            ("tags[0][value]", "Guide"),
            ("tags[1][name]", "Team"),
            ("tags[1][value]", "Docs"),
        ]

    def test_booleans_and_none(self):
        assert flatten_fields({"send_invite": True, "draft": False, "skip": None}) == [
            ("send_invite", "1"),
            ("draft", "0"),
        ]


class TestMultipartForm:
    """Test MultipartForm class."""

    def test_is_form(self):
        assert isinstance(MultipartForm(), Form)

    def test_encode_fields(self):
        content_type, body = MultipartForm({"name": "Handbook"}, boundary="xyz").encode()

        assert content_type == "multipart/form-data; boundary=xyz"
        assert b'Content-Disposition: form-data; name="name"' in body
        assert b"Handbook" in body
        assert body.endswith(b"--xyz--\r\n")

    def test_encode_path(self, tmp_path):
        image = tmp_path / "cover.png"
        image.write_bytes(b"\x89PNG data")

        _, body = MultipartForm({"name": "Handbook"}, files={"image": image}, boundary="xyz").encode()

        assert b'name="image"; filename="cover.png"' in body
        assert b"Content-Type: image/png" in body
        assert b"\x89PNG data" in body

    def test_encode_tuple_with_stream(self):
        form = MultipartForm(files={"file": ("notes.txt", io.BytesIO(b"hello"), "text/plain")}, boundary="xyz")

        _, body = form.encode()

        assert b'filename="notes.txt"' in body
        assert b"Content-Type: text/plain" in body
        assert b"hello" in body

    def test_unknown_extension_defaults_to_octet_stream(self):
        _, body = MultipartForm(files={"file": ("blob.unknownext", b"x")}, boundary="xyz").encode()
        assert b"Content-Type: application/octet-stream" in body

    def test_missing_file_raises(self, tmp_path):
        form = MultipartForm(files={"image": tmp_path / "missing.png"})

        with pytest.raises(FormEncodingError) as exc_info:
            form.encode()

        assert isinstance(exc_info.value.__cause__, OSError)

    def test_malformed_file_spec_raises(self):
        with pytest.raises(FormEncodingError):
            MultipartForm(files={"file": ("only-name",)}).encode()
