"""Books resource for BookStack API."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from bookstack_api.common.errors import ValidationError
from bookstack_api.forms import MultipartForm
from bookstack_api.models import Book, BookDetailed
from bookstack_api.parsing import parse_single
from bookstack_api.resources.base import BaseResource, drop_none


class BooksResource(BaseResource[Book, BookDetailed]):
    """Manage BookStack books.

    Books are the top-level containers for documentation content.
    They contain chapters and pages.
    """

    ENDPOINT = "books"
    LIST_SHAPE = Book
    ITEM_SHAPE = BookDetailed

    NAME_MAX_LENGTH = 255

    def _send(self, method: str, endpoint: str, data: dict[str, Any], image: Path | None) -> BookDetailed:
        if image is None:
            return self._write(method, endpoint, data)

        # Laravel only parses multipart bodies on POST; PUT is tunnelled
        if method == "PUT":
            data = {**data, "_method": "PUT"}
        form = MultipartForm(data, files={"image": image})
        raw = self.client.form("POST", endpoint, form)
        return parse_single(BookDetailed, raw)

    def create(
        self,
        name: str,
        description: str | None = None,
        description_html: str | None = None,
        tags: list[dict[str, str]] | None = None,
        image: Path | None = None,
        default_template_id: int | None = None,
    ) -> BookDetailed:
        """Create a new book.

        Args:
            name: Book title (max 255 characters)
            description: Plain text description
            description_html: HTML description
            tags: List of tags [{"name": "...", "value": "..."}]
            image: Cover image file path, sent as multipart form data
            default_template_id: Default page template ID

        Returns:
            Created book

        Raises:
            ValidationError: If the name is empty or too long
        """
        if not name or len(name) > self.NAME_MAX_LENGTH:
            raise ValidationError(f"Book name must be 1-{self.NAME_MAX_LENGTH} characters")

        data = drop_none(
            {
                "name": name,
                "description": description,
                "description_html": description_html,
                "tags": tags,
                "default_template_id": default_template_id,
            }
        )
        return self._send("POST", self.ENDPOINT, data, image)

    def update(
        self,
        book_id: int,
        name: str | None = None,
        description: str | None = None,
        description_html: str | None = None,
        tags: list[dict[str, str]] | None = None,
        image: Path | None = None,
        default_template_id: int | None = None,
    ) -> BookDetailed:
        """Update an existing book.

        Only the given fields are sent.

        Returns:
            Updated book
        """
        data = drop_none(
            {
                "name": name,
                "description": description,
                "description_html": description_html,
                "tags": tags,
                "default_template_id": default_template_id,
            }
        )
        return self._send("PUT", self._get_endpoint(book_id), data, image)
