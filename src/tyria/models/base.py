from pydantic import BaseModel, ConfigDict


class TyriaModel(BaseModel):
    """
    Base for all response models.

    Unknown keys are ignored so additions to the API do not break parsing.
    Aliased fields (``type``, PascalCase attribute names) can be populated by
    either name.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
