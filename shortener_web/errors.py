"""HTTP status mapping for shortener errors."""

from fastapi import status

from shortener.exceptions import DuplicateShortcodeError, ShortcodeNotFoundError, StoreError


def status_for_error(error: ValueError) -> int:
    """Pick the HTTP status for a rejected submission or lookup."""
    if isinstance(error, DuplicateShortcodeError):
        return status.HTTP_409_CONFLICT
    if isinstance(error, ShortcodeNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, StoreError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST
