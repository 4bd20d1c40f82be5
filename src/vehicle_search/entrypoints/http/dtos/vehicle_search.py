from pydantic import BaseModel, ConfigDict, Field


class SearchQueryDTO(BaseModel):
    """Query parameters for searching vehicles.

    All parameters are accepted as free strings: malformed values are
    normalized by the query codec instead of being rejected.
    """

    q: str | None = Field(
        default=None,
        description="Free-text filter (case-insensitive substring of title or description)",
        examples=["honda"],
    )
    page: str | None = Field(
        default=None,
        description="1-based page number; invalid or missing values mean page 1",
        examples=["2"],
    )
    sort: str | None = Field(
        default=None,
        description="One of relevance, price_asc, price_desc; anything else means relevance",
        examples=["price_asc"],
    )

    def to_params(self) -> dict[str, str]:
        """Non-empty parameters as a plain mapping for the query codec."""
        return {
            key: value
            for key, value in (("q", self.q), ("page", self.page), ("sort", self.sort))
            if value is not None
        }


class SearchStateDTO(BaseModel):
    q: str
    page: int
    sort: str


class VehicleResponseDTO(BaseModel):
    id: str
    title: str
    price: str
    description: str


class SearchPageDTO(BaseModel):
    results: list[VehicleResponseDTO]
    total: int
    has_prev: bool = Field(serialization_alias="hasPrev")
    has_next: bool = Field(serialization_alias="hasNext")


class SearchResponseDTO(SearchPageDTO):
    """JSON body of GET /api/search."""

    state: SearchStateDTO

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "state": {"q": "sedan", "page": 1, "sort": "price_asc"},
                "results": [
                    {
                        "id": "1",
                        "title": "2023 Honda Civic",
                        "price": "25000.00",
                        "description": "Reliable sedan with great fuel economy",
                    }
                ],
                "total": 7,
                "hasPrev": False,
                "hasNext": True,
            }
        }
    )


class BootPayloadDTO(BaseModel):
    """Initial state and data embedded in rendered pages for client re-hydration."""

    state: SearchStateDTO
    data: SearchPageDTO
