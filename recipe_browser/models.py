"""
Recipe result model for the recipe browser.

The recipe service returns a JSON array of objects keyed with capitalized wire
names (Name, Img, Url). RecipeResult maps those onto snake_case attributes so
the rest of the code never touches the wire format.

Wire field -> attribute:
- Name -> name
- Img -> image_url
- Url -> source_url
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class RecipeResult(BaseModel):
    """One recipe returned by a key-ingredient search."""

    name: str = Field(..., alias="Name", description="Recipe title")
    image_url: str = Field(..., alias="Img", description="URL of the recipe thumbnail image")
    source_url: str = Field(..., alias="Url", description="Link to the full recipe on its source site")

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,  # Allow construction by attribute name in code and tests
        extra="ignore",  # The service may send more fields than we render
        json_schema_extra={
            "example": {
                "Name": "Chicken Soup",
                "Img": "https://example.com/chicken-soup.jpg",
                "Url": "https://example.com/recipes/chicken-soup",
            }
        },
    )

    def to_wire(self) -> Dict[str, Any]:
        """Serialize back to the service's wire field names."""
        return self.model_dump(by_alias=True)


_RESULT_LIST_ADAPTER = TypeAdapter(List[RecipeResult])


def parse_result_list(payload: Any) -> List[RecipeResult]:
    """
    Validate a decoded response body into a list of RecipeResult.

    Args:
        payload: Decoded JSON body (expected to be a list of objects)

    Returns:
        List of RecipeResult in response order

    Raises:
        pydantic.ValidationError: If the payload is not a list or an element is
            missing a required field
    """
    return _RESULT_LIST_ADAPTER.validate_python(payload)
