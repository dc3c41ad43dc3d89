"""Submissions router for creating, listing and editing form records."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import JSONResponse

from api.dependencies import get_form_manager
from api.models import MessageResponse, SubmissionResponse, ValidationErrorResponse
from form_store.exceptions import RecordNotFoundError, RecordValidationError
from form_store.manager import FormManager
from form_store.models.query import QueryResult, RecordQuery
from form_store.models.record import Record
from utils.logging import logger

router = APIRouter(prefix="/submissions", tags=["submissions"])

NOT_FOUND_MESSAGE = "Submission not found"
INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def _validation_failed(error: RecordValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=ValidationErrorResponse(errors=error.errors).model_dump())


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=MessageResponse(success=False, message=message).model_dump())


@router.post("", response_model=SubmissionResponse, status_code=status.HTTP_201_CREATED, responses={400: {"model": ValidationErrorResponse}})
async def create_submission(payload: Dict[str, Any] = Body(...), manager: FormManager = Depends(get_form_manager)):
    """Validate a submission against the form schema and store it."""
    try:
        record = manager.create_record(payload)
        return SubmissionResponse.from_record(record)
    except RecordValidationError as e:
        return _validation_failed(e)
    except Exception as e:
        logger.error(f"Unexpected error creating submission: {str(e)}")
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


@router.get("", response_model=QueryResult)
async def list_submissions(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: Optional[str] = Query(None, alias="sortOrder"),
    search: Optional[str] = Query(None),
    manager: FormManager = Depends(get_form_manager),
):
    """Search, sort and paginate submissions.

    Malformed paging parameters fall back to page 1 with 10 submissions per page.
    """
    try:
        query = RecordQuery.from_params(page=page, limit=limit, sort_by=sort_by, sort_order=sort_order, search=search)
        return manager.list_records(query)
    except Exception as e:
        logger.error(f"Failed to list submissions: {str(e)}")
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


@router.get("/{submission_id}", response_model=Record, responses={404: {"model": MessageResponse}})
async def get_submission(submission_id: str, manager: FormManager = Depends(get_form_manager)):
    """Get a specific submission."""
    try:
        return manager.get_record(submission_id)
    except RecordNotFoundError:
        return _message(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
    except Exception as e:
        logger.error(f"Unexpected error getting submission: {str(e)}")
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


@router.put("/{submission_id}", response_model=SubmissionResponse, responses={400: {"model": ValidationErrorResponse}, 404: {"model": MessageResponse}})
async def update_submission(submission_id: str, payload: Dict[str, Any] = Body(...), manager: FormManager = Depends(get_form_manager)):
    """Merge the given values into a submission."""
    try:
        record = manager.update_record(submission_id, payload)
        return SubmissionResponse.from_record(record)
    except RecordNotFoundError:
        return _message(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
    except RecordValidationError as e:
        return _validation_failed(e)
    except Exception as e:
        logger.error(f"Unexpected error updating submission: {str(e)}")
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


@router.delete("/{submission_id}", response_model=MessageResponse, responses={404: {"model": MessageResponse}})
async def delete_submission(submission_id: str, manager: FormManager = Depends(get_form_manager)):
    """Delete a submission."""
    try:
        manager.delete_record(submission_id)
        return MessageResponse(success=True, message="Deleted successfully")
    except RecordNotFoundError:
        return _message(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
    except Exception as e:
        logger.error(f"Unexpected error deleting submission: {str(e)}")
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
