"""Shared model configuration."""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class StoredModel(BaseModel):
    """
    Base for everything persisted inside the app state record.

    Attributes are snake_case in Python and camelCase in the stored JSON.
    Instances are frozen; changes go through ``model_copy(update=...)``.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "frozen": True,
    }
