"""Translate domain failures into click exceptions with distinct exit codes."""

from __future__ import annotations

import click

from stockmanager.application.dto import FulfillmentError
from stockmanager.domain.exceptions import DomainException, ErrorKind

# 2 is click's own usage-error code
EXIT_CODES = {
    ErrorKind.VALIDATION.value: 1,
    ErrorKind.NOT_FOUND.value: 1,
    ErrorKind.UNKNOWN_ORDER.value: 3,
    ErrorKind.ORDER_STATE.value: 4,
    ErrorKind.EMPTY_ORDER.value: 5,
    ErrorKind.PRODUCT_STOCK.value: 6,
}


class DomainFailure(click.ClickException):

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.exit_code = EXIT_CODES.get(kind, 1)


def from_exception(exc: DomainException) -> DomainFailure:
    return DomainFailure(exc.kind.value, exc.message)


def from_result_error(error: FulfillmentError) -> DomainFailure:
    return DomainFailure(error.kind, error.message)
