from __future__ import annotations

from .models import Place

PLACEHOLDER_IMAGE = "/images/NoImage.png"


def resolve_image_src(place: Place, placeholder: str = PLACEHOLDER_IMAGE) -> str:
    """Return the image to show for *place*, or the placeholder.

    The backend sends the literal string ``"null"`` for places without a
    photo, so it is treated the same as a missing URL.
    """
    url = place.image_url
    if not url or url == "null":
        return placeholder
    return url
