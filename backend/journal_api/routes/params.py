"""Path parameter helpers shared by the route modules."""

from bson import ObjectId

from journal_api.exceptions import ValidationError


def require_object_id(value: str, field: str = "id") -> str:
    """
    Rejects ids that are not 24-character hex ObjectIds.

    Raises:
        ValidationError: malformed id (→ 400)
    """
    if not ObjectId.is_valid(value):
        raise ValidationError(message=f"'{value}' is not a valid id", field=field)
    return value
