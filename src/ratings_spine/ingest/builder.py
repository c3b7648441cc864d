"""Turn a text map into a validated :class:`Rating`."""

from collections.abc import Mapping

from ratings_spine.core.errors import MissingFieldError
from ratings_spine.core.models import REQUIRED_FIELDS, Rating
from ratings_spine.ingest.decimals import clean_decimal
from ratings_spine.ingest.timestamps import parse_timestamp


def validate_required_fields(
    fields: Mapping[str, str],
    required: tuple[str, ...] = REQUIRED_FIELDS,
) -> None:
    """Fail on the first required field that is absent or empty.

    Fields are checked in ``required`` order and only the first violation
    is reported.

    Raises:
        MissingFieldError: Names the offending field.
    """
    for name in required:
        if not fields.get(name):
            raise MissingFieldError(name)


def build_rating(fields: Mapping[str, str]) -> Rating:
    """Validate and normalize ``fields`` into a new :class:`Rating`.

    Checks run in a fixed order (required fields, ``target_from``,
    ``target_to``, ``time``) and the first failure is raised. Keys outside
    the rating's fields are ignored.

    Raises:
        InputError: Any validation or normalization failure.
    """
    validate_required_fields(fields)

    target_from = clean_decimal(fields["target_from"], field="target_from")
    target_to = clean_decimal(fields["target_to"], field="target_to")
    time = parse_timestamp(fields["time"])

    return Rating(
        ticker=fields["ticker"],
        target_from=target_from,
        target_to=target_to,
        company=fields["company"],
        action=fields["action"],
        brokerage=fields["brokerage"],
        rating_from=fields["rating_from"],
        rating_to=fields["rating_to"],
        time=time,
    )
