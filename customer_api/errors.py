# customer_api/errors.py


class CustomerAPIError(Exception):
    """Base class for errors raised below the HTTP layer."""


class StoreError(CustomerAPIError):
    """The customers table could not be read or written."""
