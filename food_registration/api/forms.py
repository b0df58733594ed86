from typing import Any

from fastapi import Request
from starlette.datastructures import UploadFile

IMAGE_FIELD = "image"


async def read_form(request: Request) -> tuple[dict[str, Any], UploadFile | None]:
    """Split a submitted form into plain fields and the optional image upload."""
    form = await request.form()
    image = form.get(IMAGE_FIELD)
    data = {key: value for key, value in form.items() if key != IMAGE_FIELD}
    return data, image if isinstance(image, UploadFile) else None
