from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorPolicy:
    """
    Whether transport failures and non-2xx responses raise or resolve to a
    default (None) result.
    """

    fail_on_transport_error: bool = True
    fail_on_response_error: bool = True


STRICT = ErrorPolicy()
LENIENT = ErrorPolicy(fail_on_transport_error=False, fail_on_response_error=False)
