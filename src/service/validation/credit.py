"""Rule set for credit quote requests."""

from typing import Tuple

from src.domain.entities import CreditConfiguration

from .rules import (
    FieldRules,
    Maximum,
    MaxLength,
    Minimum,
    MinLength,
    OneOfRatings,
    SignedWholeNumber,
    WholeNumber,
)

AMOUNT_IN_EUROS = "amountInEuros"
TERM_IN_MONTHS = "termInMonths"
RATING_LEVEL = "ratingLevel"
DELAY_IN_MILLISECONDS = "delayInMilliseconds"
USERNAME = "username"
PASSWORD = "password"

USERNAME_MIN_LENGTH = 6
USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 50


def credit_rules(config: CreditConfiguration) -> Tuple[FieldRules, ...]:
    """
    Build the rule set for one quote request from the bank's bounds.

    The order of the returned rules is the order reasons are reported in.
    """
    return (
        FieldRules(
            AMOUNT_IN_EUROS,
            (
                WholeNumber(),
                Minimum(config.min_amount_in_euros),
                Maximum(config.max_amount_in_euros),
            ),
        ),
        FieldRules(
            TERM_IN_MONTHS,
            (
                WholeNumber(),
                Minimum(config.min_term_in_months),
                Maximum(config.max_term_in_months),
            ),
        ),
        FieldRules(
            RATING_LEVEL,
            (OneOfRatings(config.min_schufa_rating, config.max_schufa_rating),),
        ),
        FieldRules(DELAY_IN_MILLISECONDS, (SignedWholeNumber(),)),
        FieldRules(
            USERNAME,
            (MinLength(USERNAME_MIN_LENGTH), MaxLength(USERNAME_MAX_LENGTH)),
        ),
        FieldRules(
            PASSWORD,
            (MinLength(PASSWORD_MIN_LENGTH), MaxLength(PASSWORD_MAX_LENGTH)),
        ),
    )
