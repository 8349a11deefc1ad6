"""Image domain entity (metadata only; the blob lives in external storage)."""

from dataclasses import dataclass


@dataclass(kw_only=True)
class Image:
    """Stored image reference.

    Attributes:
        id: Database identifier.
        blob_name: Name of the blob in file storage.
        mime_type: Content type (e.g. "image/png").
        title: Optional caption title.
        alt: Optional alternative text.
    """

    id: int | None = None
    blob_name: str
    mime_type: str
    title: str | None = None
    alt: str | None = None
