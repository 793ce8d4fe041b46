"""Data models for the daily liturgy.

Provides immutable pydantic models for a day's liturgy as returned by the
remote liturgy service, plus the display units a rendering surface shows.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class MalformedLiturgyError(ValueError):
    """Raised when a liturgy payload does not have the expected shape."""

    pass


class Passage(BaseModel):
    """One unit of liturgical text (reading, psalm or gospel).

    Attributes:
        reference: Scripture citation (e.g., "Is 9,1-6")
        title: Heading shown above the text
        text: Raw body with embedded verse numbers
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    reference: str = Field(default="", alias="referencia")
    title: str = Field(default="", alias="titulo")
    text: str = Field(default="", alias="texto")

    @field_validator("reference", "title", "text", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def is_present(self) -> bool:
        """Whether the passage has any text to show."""
        return bool(self.text)


@dataclass(frozen=True)
class DisplayUnit:
    """A tab of the liturgy view.

    Attributes:
        key: Stable identifier (e.g., "first_reading")
        label: Tab label shown to the user
        passage: Passage shown in the tab
        formatted: Whether the passage text goes through the text formatter
    """

    key: str
    label: str
    passage: Passage
    formatted: bool = True


class LiturgyDocument(BaseModel):
    """The full liturgy of one calendar day.

    Attributes:
        liturgy_name: Human-readable name of the day's liturgy
        liturgical_color: Color designation of the day (e.g., "Roxo")
        first_reading: First reading
        second_reading: Second reading, empty on days without one
        psalm: Responsorial psalm
        gospel: Gospel
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    liturgy_name: str = Field(default="", alias="liturgia")
    liturgical_color: str = Field(default="", alias="cor")
    first_reading: Passage = Field(alias="primeiraLeitura")
    second_reading: Passage = Field(default_factory=Passage, alias="segundaLeitura")
    psalm: Passage = Field(alias="salmo")
    gospel: Passage = Field(alias="evangelho")

    @field_validator("liturgy_name", "liturgical_color", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("second_reading", mode="before")
    @classmethod
    def _missing_second_reading(cls, value: Any) -> Any:
        # Days without a second reading send null, an empty string or a notice
        if isinstance(value, Passage):
            return value
        if not isinstance(value, dict):
            return {}
        return value

    @classmethod
    def from_api(cls, payload: Any) -> "LiturgyDocument":
        """Create a LiturgyDocument from a decoded JSON response body.

        Args:
            payload: Decoded JSON body from the liturgy service

        Returns:
            LiturgyDocument instance

        Raises:
            MalformedLiturgyError: If the payload is not a liturgy object
        """
        if not isinstance(payload, dict):
            raise MalformedLiturgyError(
                f"Expected a JSON object, got {type(payload).__name__}"
            )
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            fields = ", ".join(
                ".".join(str(part) for part in err["loc"]) for err in e.errors()
            )
            raise MalformedLiturgyError(f"Invalid liturgy payload ({fields})") from e

    @property
    def has_second_reading(self) -> bool:
        """Whether this day has a second reading."""
        return self.second_reading.is_present

    def display_units(self, format_psalm: bool = True) -> list[DisplayUnit]:
        """Get the ordered tabs to display for this liturgy.

        The second reading is omitted entirely on days without one.

        Args:
            format_psalm: Run the psalm through the text formatter like the
                other passages. False shows the raw psalm text, as the
                original web page did.

        Returns:
            List of display units in tab order
        """
        units = [DisplayUnit("first_reading", "1ª Leitura", self.first_reading)]
        if self.has_second_reading:
            units.append(DisplayUnit("second_reading", "2ª Leitura", self.second_reading))
        units.append(DisplayUnit("psalm", "Salmo", self.psalm, formatted=format_psalm))
        units.append(DisplayUnit("gospel", "Evangelho", self.gospel))
        return units

