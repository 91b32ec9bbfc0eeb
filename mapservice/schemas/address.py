from pydantic import BaseModel, ConfigDict


class AddressComponent(BaseModel):
    """One element of a result's ``address_components`` array"""

    long_name: str
    short_name: str
    types: list[str]

    model_config = ConfigDict(frozen=True, extra="ignore")

    def has_type(self, type_: str) -> bool:
        return type_ in self.types
