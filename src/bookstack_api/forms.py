"""Form body encoders for uploads that cannot be sent as JSON."""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import IO, Any, Protocol, runtime_checkable

from urllib3 import encode_multipart_formdata

from bookstack_api.common.errors import FormEncodingError

FileSpec = Path | tuple[str, bytes | IO[bytes]] | tuple[str, bytes | IO[bytes], str]


@runtime_checkable
class Form(Protocol):
    """Anything that can produce a request body for the form request path."""

    def encode(self) -> tuple[str, bytes | IO[bytes]]:
        """Return ``(content_type, body)``."""
        ...


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def flatten_fields(fields: dict[str, Any]) -> list[tuple[str, str]]:
    """Flatten nested values into bracketed form keys.

    ``{"tags": [{"name": "a", "value": "b"}]}`` becomes
    ``[("tags[0][name]", "a"), ("tags[0][value]", "b")]``. None values are
    skipped.
    """
    flat: list[tuple[str, str]] = []

    def walk(key: str, value: Any) -> None:
        if value is None:
            return
        if isinstance(value, dict):
            for sub_key, sub_value in value.items():
                walk(f"{key}[{sub_key}]", sub_value)
        elif isinstance(value, (list, tuple)):
            for index, item in enumerate(value):
                walk(f"{key}[{index}]", item)
        else:
            flat.append((key, _scalar(value)))

    for name, value in fields.items():
        walk(name, value)
    return flat


class MultipartForm:
    """``multipart/form-data`` encoder for fields and file uploads.

    Example:
        >>> form = MultipartForm({"name": "Handbook"}, files={"image": Path("cover.png")})
        >>> content_type, body = form.encode()
    """

    def __init__(
        self,
        fields: dict[str, Any] | None = None,
        files: dict[str, FileSpec] | None = None,
        boundary: str | None = None,
    ):
        """Initialize the form.

        Args:
            fields: Plain form values; lists and dicts are flattened
            files: File parts keyed by field name. A value is a Path, or a
                ``(filename, data)`` / ``(filename, data, content_type)`` tuple
            boundary: Fixed multipart boundary (random when omitted)
        """
        self.fields = fields or {}
        self.files = files or {}
        self.boundary = boundary

    def _file_part(self, name: str, spec: FileSpec) -> tuple[str, tuple[str, bytes, str]]:
        if isinstance(spec, Path):
            filename, data, content_type = spec.name, spec.read_bytes(), None
        elif len(spec) == 3:
            filename, data, content_type = spec
        else:
            filename, data = spec
            content_type = None

        if not isinstance(data, bytes):
            data = data.read()
        if content_type is None:
            content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
        return name, (filename, data, content_type)

    def encode(self) -> tuple[str, bytes]:
        """Encode the form.

        Returns:
            ``(content_type, body)`` with the boundary in the content type

        Raises:
            FormEncodingError: If a file cannot be read or a file entry is malformed
        """
        parts: list[tuple[str, Any]] = list(flatten_fields(self.fields))
        try:
            for name, spec in self.files.items():
                parts.append(self._file_part(name, spec))
        except (OSError, ValueError, TypeError) as err:
            raise FormEncodingError(f"Failed to encode form: {err}") from err

        body, content_type = encode_multipart_formdata(parts, boundary=self.boundary)
        return content_type, body


__all__ = ["Form", "MultipartForm", "flatten_fields"]
