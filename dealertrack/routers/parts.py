"""
Part routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List, Optional

from dealertrack.database import JsonStore, get_store
from dealertrack.exceptions import NotFoundError
from dealertrack.schemas.base import DeleteResult
from dealertrack.schemas.part import Part as PartSchema, PartCreate, PartUpdate
from dealertrack.services.part_service import PartService

router = APIRouter(prefix="/parts", tags=["parts"])


def get_part_service(store: JsonStore = Depends(get_store)) -> PartService:
    return PartService(store)


@router.get("", response_model=List[PartSchema])
def get_parts(
    q: Optional[str] = None,
    service: PartService = Depends(get_part_service),
):
    """
    Get all parts, optionally filtered by a search term.
    """
    return service.list(q)


@router.get("/{part_id}", response_model=PartSchema)
def get_part(part_id: str, service: PartService = Depends(get_part_service)):
    """
    Get a specific part by ID.
    """
    try:
        return service.get(part_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.post("", response_model=PartSchema, status_code=status.HTTP_201_CREATED)
def create_part(part: PartCreate, service: PartService = Depends(get_part_service)):
    """
    Create a new part.
    """
    return service.create(part.to_record())


@router.put("/{part_id}", response_model=PartSchema)
def update_part(
    part_id: str,
    part_update: PartUpdate,
    service: PartService = Depends(get_part_service),
):
    """
    Update a part. Only provided fields are changed.
    """
    try:
        return service.update(part_id, part_update.to_record())
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.delete("/{part_id}", response_model=DeleteResult)
def delete_part(part_id: str, service: PartService = Depends(get_part_service)):
    """
    Delete a part. Deleting an unknown ID succeeds.
    """
    service.delete(part_id)
    return DeleteResult()
