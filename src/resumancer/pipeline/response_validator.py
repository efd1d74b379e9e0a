"""Response Validator - turns the model's raw payload into three Ideas."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from resumancer.errors import ContentShapeError
from resumancer.models.idea import CATEGORIES, Idea
from resumancer.utils.json_parser import extract_json, extract_json_array

logger = logging.getLogger(__name__)

IDEA_COUNT = 3


def parse_ideas_payload(raw: str) -> list:
    """Return the list of idea objects from a raw payload.

    Reads ``{"ideas": [...]}`` first; if that yields nothing usable, reads the
    whole payload as a bare array.
    """
    try:
        data = extract_json(raw)
    except ValueError:
        data = None

    if isinstance(data, dict) and isinstance(data.get("ideas"), list):
        return data["ideas"]
    if isinstance(data, list):
        return data

    logger.info("No 'ideas' wrapper in model payload, trying bare array")
    try:
        return extract_json_array(raw)
    except ValueError:
        raise ContentShapeError("Model returned non-JSON content", raw=raw) from None


def validate_ideas(
    raw: str,
    category_mode: str = "diverse",
    expected_category: str | None = None,
) -> list[Idea]:
    """Parse and shape-check a model payload.

    Returns the three ideas in the order received. Raises ContentShapeError
    when the payload is not exactly three well-formed ideas that satisfy the
    category policy. Nothing is patched or coerced.
    """
    items = parse_ideas_payload(raw)

    if len(items) != IDEA_COUNT:
        raise ContentShapeError(
            f"Malformed ideas payload (need {IDEA_COUNT} items, got {len(items)})", raw=raw
        )

    try:
        ideas = [Idea.model_validate(item) for item in items]
    except ValidationError as e:
        logger.warning("Idea failed field validation: %s", e.errors()[0].get("msg", ""))
        raise ContentShapeError("Ideas are missing required fields", raw=raw) from None

    categories = [idea.category for idea in ideas]
    if category_mode == "locked":
        if expected_category is None:
            raise ValueError("expected_category is required in locked mode")
        if any(c != expected_category for c in categories):
            raise ContentShapeError(
                f"All ideas must use category: {expected_category}", raw=raw
            )
    elif set(categories) != set(CATEGORIES):
        raise ContentShapeError(
            "Ideas must include categories: " + ", ".join(CATEGORIES), raw=raw
        )

    return ideas
