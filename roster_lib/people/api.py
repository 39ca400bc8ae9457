from typing import Any, Optional
import logging

from fastapi import APIRouter, Body, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import ValidationError
from starlette.responses import Response

from roster_lib.people.controller import PeopleController
from roster_lib.people.model_state import ModelState
from roster_lib.people.models import PersonModel
from roster_lib.people.results import ActionResult, NotFoundResult, RedirectToActionResult
from roster_lib.services.resolver import resolve_service

router = APIRouter(prefix='/people', tags=['people'])
logger = logging.getLogger(__name__)

# Controller action name -> route name used for redirects
ACTION_ROUTES = {
    'Index': 'people_index',
    'Add': 'people_add_form',
    'Detail': 'people_detail',
    'Edit': 'people_edit_form',
}


def get_controller(request: Request) -> PeopleController:
    store = resolve_service(request, 'person_store')
    return PeopleController(logging.getLogger('roster_lib.people.controller'), store)


def bind_person(controller: PeopleController, payload: Any) -> Optional[PersonModel]:
    """Validate a submitted body into a PersonModel.

    Validation failures are recorded on the controller's model state so the
    action can re-display the form; the returned model is then None.
    """
    if payload is None:
        return None
    if not isinstance(payload, dict):
        controller.model_state.add_model_error('person', 'Expected a JSON object')
        return None
    try:
        return PersonModel.model_validate(payload)
    except ValidationError as e:
        controller.model_state.merge(ModelState.from_validation_error(e))
        return None


def render(request: Request, result: ActionResult) -> Response:
    if isinstance(result, RedirectToActionResult):
        url = request.url_for(ACTION_ROUTES[result.action_name], **result.route_values)
        return RedirectResponse(url=str(url), status_code=303)
    if isinstance(result, NotFoundResult):
        return JSONResponse(status_code=404, content={'error': 'not_found', 'message': result.detail})

    status = 200 if result.model_state.is_valid else 400
    content: dict[str, Any] = {
        'view': result.view_name,
        'model': jsonable_encoder(result.model),
        'errors': result.model_state.to_dict(),
    }
    return JSONResponse(status_code=status, content=content)


@router.get('', name='people_index')
async def people_index(request: Request):
    return render(request, get_controller(request).index())


@router.get('/add', name='people_add_form')
async def people_add_form(request: Request):
    return render(request, get_controller(request).add_form())


@router.post('/add', name='people_add')
async def people_add(request: Request, payload: Any = Body(default=None)):
    controller = get_controller(request)
    person = bind_person(controller, payload)
    logger.debug("Add submitted: valid=%s", controller.model_state.is_valid)
    return render(request, controller.add(person))


@router.get('/{person_id}', name='people_detail')
async def people_detail(request: Request, person_id: int):
    return render(request, get_controller(request).detail(person_id))


@router.get('/{person_id}/edit', name='people_edit_form')
async def people_edit_form(request: Request, person_id: int):
    return render(request, get_controller(request).edit_form(person_id))


@router.post('/{person_id}/edit', name='people_edit')
async def people_edit(request: Request, person_id: int, payload: Any = Body(default=None)):
    if person_id < 1:
        return render(request, NotFoundResult(f"Person {person_id} not found"))
    controller = get_controller(request)
    # The record being edited is the one in the URL
    if isinstance(payload, dict):
        payload = {**payload, 'id': person_id}
    person = bind_person(controller, payload)
    logger.debug("Edit submitted for %s: valid=%s", person_id, controller.model_state.is_valid)
    return render(request, controller.edit(person))


@router.post('/{person_id}/delete', name='people_delete')
async def people_delete(request: Request, person_id: int):
    return render(request, get_controller(request).delete(person_id))
