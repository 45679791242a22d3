"""Constrained password generator."""
import logging
from typing import Callable, MutableSequence, TypeVar

from passgen.errors import ConfigurationError, ErrorCode, PasswordError
from passgen.logic.models import CharacterCategory, PasswordOptions
from passgen.logic.rng import RandomSource


logger = logging.getLogger(__name__)

T = TypeVar("T")

# Fixed emission order for category minimums
MINIMUM_FILL_ORDER = (
    CharacterCategory.LOWERCASE,
    CharacterCategory.NUMERIC,
    CharacterCategory.SPECIAL,
    CharacterCategory.UPPERCASE,
)


def fisher_yates_shuffle(rng: RandomSource, items: MutableSequence[T]) -> None:
    """
    Shuffle items in place into a uniformly random permutation.

    At each offset the element is swapped with a uniform pick from
    [0, offset] inclusive.
    """
    for offset in range(len(items)):
        index = rng.uniform_in_range(0, offset)
        items[index], items[offset] = items[offset], items[index]


class PasswordGenerator:
    """
    Password generator bound to one PasswordOptions.

    Implements:
    - Configuration check at construction
    - Minimum characters per category
    - Uniform category fill for the remaining positions
    - Unbiased shuffle of the whole buffer
    """

    def __init__(self, options: PasswordOptions):
        required = options.required_length
        if options.output_length < required:
            raise ConfigurationError(
                f"Output length {options.output_length} must be greater than or "
                f"equal to the sum of all minimums ({required}).",
                output_length=options.output_length,
                required_length=required,
            )
        if options.minimum_special > 0 and not options.use_special:
            raise ConfigurationError(
                f"Minimum of {options.minimum_special} special characters "
                "requires a non-empty special character set.",
                output_length=options.output_length,
                required_length=required,
            )

        rng = options.random_source
        specials = options.special_characters

        self._draw: dict[CharacterCategory, Callable[[], str]] = {
            CharacterCategory.LOWERCASE: lambda: chr(rng.uniform_in_range(ord("a"), ord("z"))),
            CharacterCategory.UPPERCASE: lambda: chr(rng.uniform_in_range(ord("A"), ord("Z"))),
            CharacterCategory.NUMERIC: lambda: chr(rng.uniform_in_range(ord("0"), ord("9"))),
            CharacterCategory.SPECIAL: lambda: specials[rng.uniform_in_range(0, len(specials) - 1)],
        }
        self._minimums = {
            CharacterCategory.LOWERCASE: options.minimum_lowercase,
            CharacterCategory.UPPERCASE: options.minimum_uppercase,
            CharacterCategory.NUMERIC: options.minimum_numeric,
            CharacterCategory.SPECIAL: options.minimum_special,
        }
        self._max_selector = CharacterCategory.SPECIAL if options.use_special else CharacterCategory.NUMERIC
        self.options = options

        logger.debug(
            "Password generator ready: length=%d required=%d specials=%d",
            options.output_length,
            required,
            len(specials),
        )

    def generate(self) -> str:
        """Generate one password satisfying the configured minimums."""
        rng = self.options.random_source
        length = self.options.output_length
        result: list[str] = [""] * length
        index = 0

        for category in MINIMUM_FILL_ORDER:
            for _ in range(self._minimums[category]):
                result[index] = self._draw[category]()
                index += 1

        for i in range(index, length):
            result[i] = self._draw[self._select_category(rng)]()

        fisher_yates_shuffle(rng, result)

        return "".join(result)

    def _select_category(self, rng: RandomSource) -> CharacterCategory:
        """Pick a fill category uniformly among the enabled ones."""
        selector = rng.uniform_in_range(0, self._max_selector)
        if not 0 <= selector <= self._max_selector:
            raise PasswordError(
                ErrorCode.INTERNAL_ERROR,
                f"Category selector {selector} outside [0, {int(self._max_selector)}].",
            )
        return CharacterCategory(selector)
