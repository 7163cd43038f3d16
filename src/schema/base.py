from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DefinitionModel(BaseModel):
    """Base for schema definition models.

    Attributes are snake_case in Python and camelCase on the JSON boundary, so
    payloads produced by editors or introspection adapters validate unchanged.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=False,
    )
