"""
Person endpoints.

CRUD routes over the in‑memory person store.  Handlers are plain
functions rather than coroutines: FastAPI runs them on its worker
thread pool, where waiting for the store's lock does not stall the
event loop.  Store errors propagate to the handlers registered in
``api.errors``.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from persons_api.app.api.deps import get_store
from persons_api.app.schemas.person import MAX_PERSON_ID, Person
from persons_api.app.services.person_store import PersonStore

router = APIRouter()


@router.get("/persons", response_model=List[Person])
def list_persons(store: PersonStore = Depends(get_store)) -> List[Person]:
    """Return every stored person."""
    return store.list_persons()


@router.get("/person/{person_id}", response_model=Person)
def get_person(
    person_id: int = Path(..., ge=0, le=MAX_PERSON_ID),
    store: PersonStore = Depends(get_store),
) -> Person:
    """Retrieve a single person by ID.  Returns HTTP 404 if absent."""
    return store.get_person(person_id)


@router.post("/person", status_code=status.HTTP_201_CREATED, response_class=Response)
def add_person(person: Person, store: PersonStore = Depends(get_store)) -> Response:
    """Create a person.  Returns HTTP 409 if the ID is taken."""
    store.insert_person(person)
    return Response(status_code=status.HTTP_201_CREATED)


@router.put("/person", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def update_person(person: Person, store: PersonStore = Depends(get_store)) -> Response:
    """Replace name, age and date of an existing person."""
    store.update_person(person)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/person/{person_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_person(
    person_id: int = Path(..., ge=0, le=MAX_PERSON_ID),
    store: PersonStore = Depends(get_store),
) -> Response:
    store.delete_person(person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
