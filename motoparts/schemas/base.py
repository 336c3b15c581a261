"""
Shared schema base

Records travel as camelCase JSON (categoryId, imageUrl, inStock, ...) to
match the storefront client, while Python code uses snake_case attributes.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class StrictCamelModel(CamelModel):
    """Input schema that refuses to coerce "2" into 2 or 2.5 into an int."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        strict=True,
    )
