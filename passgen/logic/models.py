"""Password policy models."""
import string
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from passgen.logic.rng import RandomSource, SecureRandom


DEFAULT_SPECIAL_CHARACTERS = "!@#$%^&*()-=`~_+,.'\";:?|/\\[]{}<>"
ALLOWED_SPECIAL_CHARACTERS = frozenset(string.punctuation)


class CharacterCategory(int, Enum):
    """Character categories, valued as the fill-step selector."""
    LOWERCASE = 0
    UPPERCASE = 1
    NUMERIC = 2
    SPECIAL = 3


class PasswordOptions(BaseModel):
    """
    Password policy.

    Holds:
    - per-category minimum counts
    - total output length
    - the random source to draw from
    - the ordered special-character alphabet (empty disables the category)
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    minimum_lowercase: int = Field(default=0, ge=0)
    minimum_uppercase: int = Field(default=0, ge=0)
    minimum_numeric: int = Field(default=0, ge=0)
    minimum_special: int = Field(default=0, ge=0)
    output_length: int = Field(default=0, ge=0)

    random_source: RandomSource = Field(default_factory=SecureRandom)
    special_characters: str = DEFAULT_SPECIAL_CHARACTERS

    @field_validator("special_characters")
    @classmethod
    def special_characters_are_punctuation(cls, value: str) -> str:
        """Specials must not overlap letters or digits, or leave ASCII."""
        invalid = sorted(set(value) - ALLOWED_SPECIAL_CHARACTERS)
        if invalid:
            raise ValueError(f"special characters must be ASCII punctuation, got {invalid}")
        return value

    @property
    def required_length(self) -> int:
        """Sum of all category minimums."""
        return (
            self.minimum_lowercase
            + self.minimum_uppercase
            + self.minimum_numeric
            + self.minimum_special
        )

    @property
    def use_special(self) -> bool:
        return len(self.special_characters) > 0
