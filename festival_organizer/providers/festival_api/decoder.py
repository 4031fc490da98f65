"""JSON decoding of the festivals API response body."""

from __future__ import annotations

from pydantic import TypeAdapter, ValidationError

from festival_organizer.models.festival import RawFestival
from festival_organizer.utils.errors import ResponseParsingError

# ``null`` is a valid document and means "no festivals".
_FESTIVAL_LIST_ADAPTER: TypeAdapter[list[RawFestival] | None] = TypeAdapter(
    list[RawFestival] | None
)


def decode_festivals(
    body: str | None,
    *,
    status_code: int | None = None,
    provider_name: str | None = None,
) -> list[RawFestival]:
    """Decode a JSON array of festival objects.

    An absent body is decoded as the empty string, which is not valid JSON
    and therefore fails like any other malformed body.

    Parameters
    ----------
    body:
        Raw response body.
    status_code:
        HTTP status of the response the body came from, attached to the
        error for context.
    provider_name:
        Attached to the error for log scanning.

    Raises
    ------
    ResponseParsingError
        If *body* is not a JSON array of festival objects.
    """
    try:
        festivals = _FESTIVAL_LIST_ADAPTER.validate_json(body or "")
    except ValidationError as exc:
        raise ResponseParsingError(
            message=f"Exception while parsing response string. Cause: {exc}",
            provider_name=provider_name,
            status_code=status_code,
        ) from exc
    return festivals or []
