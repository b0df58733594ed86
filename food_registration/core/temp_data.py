"""One-redirect flash messages kept in the signed session cookie."""

from typing import TypedDict

from starlette.requests import Request

_SESSION_KEY = "_temp_data"


class Message(TypedDict):
    category: str
    text: str


def flash(request: Request, text: str, category: str = "success") -> None:
    """Queue a message for the next rendered page."""
    messages = list(request.session.get(_SESSION_KEY, []))
    messages.append({"category": category, "text": text})
    request.session[_SESSION_KEY] = messages


def pop_messages(request: Request) -> list[Message]:
    """Return queued messages and clear them."""
    return request.session.pop(_SESSION_KEY, [])
