"""Unit tests for PeopleController with a mocked person store."""
import logging
from datetime import date
from unittest.mock import MagicMock

import pytest

from roster_lib.people import (
    DuplicatePersonError,
    NotFoundResult,
    PeopleController,
    PersonModel,
    PersonStoreProtocol,
    RedirectToActionResult,
    ViewResult,
)
from tests.helpers import sample_people


@pytest.fixture
def people():
    return sample_people()


@pytest.fixture
def person_store(people):
    store = MagicMock(spec=PersonStoreProtocol)
    store.get_all.return_value = people
    return store


@pytest.fixture
def controller(person_store):
    return PeopleController(MagicMock(spec=logging.Logger), person_store)


@pytest.fixture
def new_person():
    return PersonModel(id=4, first_name='Mang', last_name='Nguyen Ba',
                       date_of_birth=date(2001, 2, 15), address='Ha Noi')


def test_index_returns_view_with_all_people(controller, people):
    rs = controller.index()

    assert isinstance(rs, ViewResult), "Invalid return type"
    assert isinstance(rs.model, list), "Invalid view model"
    assert len(rs.model) == len(people)
    assert rs.view_name == 'Index'


def test_add_with_model_error_returns_view_with_error_state(controller, person_store):
    key = 'ERROR'
    message = 'Invalid model'
    controller.model_state.add_model_error(key, message)

    rs = controller.add(None)

    assert isinstance(rs, ViewResult), "Invalid return type"
    model_state = rs.model_state
    assert model_state.is_valid is False
    assert model_state.error_count == 1
    assert model_state.get_errors(key)[0] == message
    person_store.add.assert_not_called()


def test_add_valid_model_redirects_to_index(controller, person_store, people, new_person):
    person_store.add.side_effect = lambda p: people.append(p)
    expected = len(people) + 1

    rs = controller.add(new_person)

    assert isinstance(rs, RedirectToActionResult), "Invalid return type"
    assert rs.action_name == 'Index'
    assert len(people) == expected
    assert people[-1] == new_person
    person_store.add.assert_called_once_with(new_person)


def test_add_without_person_records_error(controller, person_store):
    rs = controller.add(None)

    assert isinstance(rs, ViewResult)
    assert rs.view_name == 'Add'
    assert rs.model_state.get_errors('person') == ['A person is required']
    person_store.add.assert_not_called()


def test_add_duplicate_id_redisplays_form(controller, person_store, new_person):
    person_store.add.side_effect = DuplicatePersonError('A person with ID 4 already exists')

    rs = controller.add(new_person)

    assert isinstance(rs, ViewResult)
    assert rs.model is new_person
    assert rs.model_state.get_errors('id') == ['A person with ID 4 already exists']


def test_add_form_is_empty(controller):
    rs = controller.add_form()
    assert isinstance(rs, ViewResult)
    assert rs.view_name == 'Add'
    assert rs.model is None
    assert rs.model_state.is_valid


def test_edit_updates_person_and_redirects(controller, person_store, people, new_person):
    def replace_first(model):
        people[0] = model

    person_store.edit.side_effect = replace_first
    expected_count = len(people)

    rs = controller.edit(new_person)

    assert isinstance(rs, RedirectToActionResult), "Edit should redirect"
    assert rs.action_name == 'Index'
    assert people[0].last_name == new_person.last_name
    assert len(people) == expected_count
    person_store.edit.assert_called_once_with(new_person)


def test_edit_with_model_error_skips_store(controller, person_store, new_person):
    controller.model_state.add_model_error('first_name', 'Field required')

    rs = controller.edit(new_person)

    assert isinstance(rs, ViewResult)
    assert rs.view_name == 'Edit'
    assert rs.model_state.error_count == 1
    person_store.edit.assert_not_called()


def test_edit_unknown_person_is_not_found(controller, person_store, new_person):
    person_store.edit.side_effect = KeyError(4)

    rs = controller.edit(new_person)

    assert isinstance(rs, NotFoundResult)


def test_edit_form_shows_person(controller, person_store, people):
    person_store.detail.return_value = people[1]

    rs = controller.edit_form(2)

    assert isinstance(rs, ViewResult)
    assert rs.view_name == 'Edit'
    assert rs.model == people[1]
    person_store.detail.assert_called_once_with(2)


def test_delete_calls_store_delete(controller, person_store, new_person):
    person_store.detail.return_value = new_person

    rs = controller.delete(1)

    person_store.delete.assert_called_once_with(1)
    assert isinstance(rs, ViewResult)
    assert rs.view_name == 'Delete'
    assert rs.model == new_person


def test_delete_unknown_person_is_not_found(controller, person_store):
    person_store.detail.side_effect = KeyError(42)

    rs = controller.delete(42)

    assert isinstance(rs, NotFoundResult)
    assert '42' in rs.detail
    person_store.delete.assert_not_called()


def test_detail_wraps_person_in_view(controller, person_store, people):
    person_store.detail.return_value = people[2]

    rs = controller.detail(3)

    assert isinstance(rs, ViewResult)
    assert rs.view_name == 'Detail'
    assert rs.model.first_name == 'Thanh'


def test_detail_unknown_person_is_not_found(controller, person_store):
    person_store.detail.side_effect = KeyError(7)
    assert isinstance(controller.detail(7), NotFoundResult)


def test_result_kinds_are_tagged():
    assert ViewResult('Index').kind == 'view'
    assert RedirectToActionResult('Index').kind == 'redirect'
    assert NotFoundResult().kind == 'not_found'


def test_add_logs_id_assigned_by_store(person_store):
    logger = MagicMock(spec=logging.Logger)
    controller = PeopleController(logger, person_store)
    submitted = PersonModel(first_name='Mang', last_name='Nguyen Ba')
    person_store.add.return_value = submitted.model_copy(update={'id': 5})

    rs = controller.add(submitted)

    assert isinstance(rs, RedirectToActionResult)
    logger.debug.assert_called_with("Added person %s", 5)
