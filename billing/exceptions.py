class BillingError(Exception):
    """Base class for billing service failures."""


class BillingHTTPError(BillingError):
    """The billing service answered outside the 2xx range. The message is the raw body."""

    def __init__(self, status_code, body):
        super().__init__(body)
        self.status_code = status_code
        self.body = body


class BillingDecodeError(BillingError):
    """A 2xx response whose body is not a JSON object."""

    def __init__(self, status_code, body):
        super().__init__(f'Can not unmarshal JSON from billing response (HTTP {status_code}): {body}')
        self.status_code = status_code
        self.body = body
