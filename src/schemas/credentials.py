"""Contentstack credential schema."""

from pydantic import BaseModel, Field


class ContentstackCredentials(BaseModel):
    """Delivery API credentials for one Contentstack stack.

    Attributes:
        api_key: Stack API key
        delivery_token: Delivery token scoped to the environment
        environment: Default publishing environment
    """

    api_key: str = Field(default="", alias="apiKey")
    delivery_token: str = Field(default="", alias="deliveryToken")
    environment: str = ""

    model_config = {"populate_by_name": True}

    @property
    def is_complete(self) -> bool:
        return bool(self.api_key and self.delivery_token and self.environment)

    def missing_fields(self) -> list[str]:
        """Wire names of the fields that are empty."""
        fields = {
            "apiKey": self.api_key,
            "deliveryToken": self.delivery_token,
            "environment": self.environment,
        }
        return [name for name, value in fields.items() if not value]
