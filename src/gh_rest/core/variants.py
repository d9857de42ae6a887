"""Two-pass decoding of polymorphic JSON fields.

Some fields hold one of several shapes (a seat assignee may be a user, a team
or an organization). They are first taken as a raw mapping, the discriminator
is read, and the mapping is validated again into the concrete model.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_variant(
    kind: Any,
    raw: Any,
    variants: Mapping[str, type[ModelT] | None],
    *,
    what: str,
) -> ModelT | None:
    """Validate ``raw`` into the model registered for ``kind``.

    Args:
        kind: Discriminator value.
        raw: Raw JSON value for the variant.
        variants: Discriminator value to model; None means "no payload".
        what: Name of the field, for error messages.

    Returns:
        The concrete model instance, or None for payload-less variants.

    Raises:
        ValueError: If ``kind`` is missing or not registered.
    """
    if kind is None:
        msg = f"{what} type field is not set"
        raise ValueError(msg)
    if not isinstance(kind, str) or kind not in variants:
        msg = f"unsupported {what} type {kind}"
        raise ValueError(msg)

    model = variants[kind]
    if model is None:
        return None
    if isinstance(raw, model):
        return raw
    return model.model_validate(raw if raw is not None else {})


def discriminate(
    raw: Any,
    variants: Mapping[str, type[ModelT] | None],
    *,
    what: str,
    field: str = "type",
) -> ModelT | None:
    """Decode a mapping whose own ``field`` names its variant.

    Raises:
        ValueError: If ``raw`` is not a mapping or its variant is unknown.
    """
    if isinstance(raw, BaseModel):
        return raw  # type: ignore[return-value]
    if not isinstance(raw, Mapping):
        msg = f"unsupported {what} type {type(raw).__name__}"
        raise ValueError(msg)
    return decode_variant(raw.get(field), raw, variants, what=what)
