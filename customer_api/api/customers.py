# customer_api/api/customers.py
"""
HTTP endpoints for the Customer resource.

Request bodies are validated by FastAPI against ``CustomerDTO``;
validation failures are turned into 400s by the handler registered in
``customer_api.main``.  Anything raised while the service runs is
reported as a 500 carrying the exception text.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from customer_api.errors import StoreError
from customer_api.models.customers import CustomerDTO
from customer_api.models.messages import ErrorOut, MessageOut, PageIndexOut, ValidationErrorOut
from customer_api.services.customers import CustomerService, get_customer_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/customer", tags=["customer"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": MessageOut}}
BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorOut}}
SERVER_ERROR = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorOut}}


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _server_error(message: str, exc: Exception) -> JSONResponse:
    if isinstance(exc, StoreError):
        logger.error("%s: store failure: %s", message, exc)
    else:
        logger.exception("%s: unexpected error", message)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": message, "error": str(exc)},
    )


@router.get(
    "",
    response_model=List[CustomerDTO],
    responses={**NOT_FOUND, **SERVER_ERROR},
)
def list_customers(service: CustomerService = Depends(get_customer_service)):
    """
    Return every customer.  An empty table is reported as 404.
    """
    try:
        items = service.get_all()
    except Exception as exc:
        return _server_error("Error retrieving customers", exc)

    if not items:
        return _message(status.HTTP_404_NOT_FOUND, "No customers found")
    return items


@router.get(
    "/get/{customer_id}",
    response_model=CustomerDTO,
    responses={**NOT_FOUND, **SERVER_ERROR},
)
def get_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    try:
        customer = service.find_by_id(customer_id)
    except Exception as exc:
        return _server_error("Error retrieving customer", exc)

    if customer is None:
        return _message(status.HTTP_404_NOT_FOUND, "Customer not found")
    return customer


@router.post(
    "/add",
    response_model=MessageOut,
    responses={**BAD_REQUEST, **SERVER_ERROR},
)
def add_customer(dto: CustomerDTO, service: CustomerService = Depends(get_customer_service)):
    try:
        added = service.add(dto)
    except Exception as exc:
        return _server_error("Error adding customer", exc)

    if added:
        return MessageOut(message="Successfully added the record")
    return _message(status.HTTP_400_BAD_REQUEST, "Failed to add the record")


UPDATE_MESSAGES = {
    "error": "Error updating customer",
    "ok": "Successfully updated the record",
    "missing": "Customer not found or failed to update the record",
}

EDIT_MESSAGES = {
    "error": "Error editing customer",
    "ok": "Successfully edited the record",
    "missing": "Customer not found or failed to edit record",
}


def _replace(customer_id: int, dto: CustomerDTO, service: CustomerService, messages: dict):
    # the id in the path wins over whatever the body carries
    dto.customer_id = customer_id
    try:
        updated = service.update(dto)
    except Exception as exc:
        return _server_error(messages["error"], exc)

    if updated:
        return MessageOut(message=messages["ok"])
    return _message(status.HTTP_404_NOT_FOUND, messages["missing"])


@router.put(
    "/update/{customer_id}",
    response_model=MessageOut,
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
)
def update_customer(
    customer_id: int,
    dto: CustomerDTO,
    service: CustomerService = Depends(get_customer_service),
):
    """Full replace of the customer identified by the path."""
    return _replace(customer_id, dto, service, UPDATE_MESSAGES)


@router.post(
    "/edit/{customer_id}",
    response_model=MessageOut,
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
)
def edit_customer(
    customer_id: int,
    dto: CustomerDTO,
    service: CustomerService = Depends(get_customer_service),
):
    """Same as PUT /update/{id}, for clients that can only POST."""
    return _replace(customer_id, dto, service, EDIT_MESSAGES)


@router.delete(
    "/delete/{customer_id}",
    response_model=MessageOut,
    responses={**NOT_FOUND, **SERVER_ERROR},
)
def delete_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    try:
        deleted = service.delete(customer_id)
    except Exception as exc:
        return _server_error("Error deleting customer", exc)

    if deleted:
        return MessageOut(message="Successfully deleted the record")
    return _message(status.HTTP_404_NOT_FOUND, "Customer not found or failed to delete record")


@router.post("/cancelEdit", response_model=MessageOut, responses={**SERVER_ERROR})
def cancel_edit():
    """Acknowledge a client-side edit cancellation.  Nothing is stored."""
    return MessageOut(message="Edit cancelled")


@router.post("/pageIndexChange", response_model=PageIndexOut, responses={**SERVER_ERROR})
def page_index_change(new_index: int = Query(0, alias="newIndex")):
    """Echo a client-side page index change.  Nothing is stored."""
    return PageIndexOut(message="Page index changed", index=new_index)
