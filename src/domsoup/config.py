"""Pydantic configuration model for domsoup converters."""

from pydantic import BaseModel, Field


class ConverterConfig(BaseModel):
    """Configuration for building BeautifulSoup trees from DOM trees."""

    features: str = Field(
        "html.parser",
        min_length=1,
        description="BeautifulSoup tree builder feature used to construct target nodes",
    )
    string_containers: bool = Field(
        True,
        description="Wrap text inside script/style/template/rt/rp in the builder's string classes",
    )

    model_config = {"extra": "forbid", "frozen": True}
