# core/forms.py
#
# Request bodies arrive two ways: JSON from the React app, and
# form-data from Postman. Both end up as a plain dict here.

REVIEW_FIELDS = ("score", "comment", "game_id", "user_id")
REQUIRED_REVIEW_FIELDS = ("score", "game_id", "user_id")

SCORE_MIN = 0
SCORE_MAX = 10

# largest id the database INTEGER column can hold
MAX_ID = 2**63 - 1


class FormError(ValueError):
    """A request body failed validation."""

    def __init__(self, message, field=None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self):
        body = {"error": self.message}
        if self.field:
            body["field"] = self.field
        return body


# Utility to safely convert values to int
def safe_int(value, default=None):
    if value is None:
        return default
    if isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.strip()
        if value in ("", "N/A", "NA", "-", "--"):
            return default
    if isinstance(value, float) and not value.is_integer():
        return default
    try:
        return int(value)
    except (ValueError, TypeError):
        return default


def read_payload(req) -> dict:
    if req.is_json:
        # malformed JSON raises werkzeug BadRequest
        data = req.get_json()
        if not isinstance(data, dict):
            raise FormError("Request body must be a JSON object.")
        return dict(data)

    return req.form.to_dict()


def _parse_id(data, field):
    value = safe_int(data.get(field))
    if value is None or not 1 <= value <= MAX_ID:
        raise FormError(f"{field} must be a positive integer no larger than {MAX_ID}.", field)
    return value


def parse_review(data: dict, partial: bool = False) -> dict:
    """
    Validate review fields and return the cleaned values.

    POST (partial=False) needs score, game_id and user_id.
    PATCH (partial=True) takes any non-empty subset of REVIEW_FIELDS.
    """
    unknown = sorted(k for k in data if k not in REVIEW_FIELDS)
    if unknown:
        raise FormError(f"Unknown field(s): {', '.join(unknown)}.", unknown[0])

    if not partial:
        for field in REQUIRED_REVIEW_FIELDS:
            if data.get(field) in (None, ""):
                raise FormError(f"{field} is required.", field)
    elif not data:
        raise FormError("Provide at least one of: " + ", ".join(REVIEW_FIELDS) + ".")

    cleaned = {}

    if "score" in data:
        score = safe_int(data["score"])
        if score is None or not SCORE_MIN <= score <= SCORE_MAX:
            raise FormError(
                f"score must be an integer between {SCORE_MIN} and {SCORE_MAX}.", "score"
            )
        cleaned["score"] = score

    if "comment" in data:
        comment = data["comment"]
        if comment is not None and not isinstance(comment, str):
            raise FormError("comment must be a string.", "comment")
        comment = (comment or "").strip()
        cleaned["comment"] = comment or None

    for field in ("game_id", "user_id"):
        if field in data:
            cleaned[field] = _parse_id(data, field)

    return cleaned
