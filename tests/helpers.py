from datetime import date
from pathlib import Path
from typing import Any

import yaml
from starlette.testclient import TestClient

from roster_lib.people.models import PersonModel
from roster_lib.services.container import ServiceContainer


def sample_people() -> list[PersonModel]:
    """Three people with IDs 1..3, the usual starting point for tests."""
    return [
        PersonModel(id=1, first_name='Thai', last_name='Do Van', gender='Male',
                    date_of_birth=date(2001, 2, 15), phone_number='0989479615', address='Thai Binh'),
        PersonModel(id=2, first_name='Hoc', last_name='Nguyen Thai', gender='Male',
                    date_of_birth=date(2000, 2, 15), phone_number='0989479615', address='Ha Nam'),
        PersonModel(id=3, first_name='Thanh', last_name='Do Tien', gender='Male',
                    date_of_birth=date(1999, 2, 15), phone_number='0989479615', address='Ha Noi'),
    ]


def write_seed_config(data_dir: Path, people: list[PersonModel] | None = None) -> Path:
    """Write a server config plus a people database file into `data_dir`.

    Returns the path of the people database file.
    """
    people = sample_people() if people is None else people
    config_dir = Path(data_dir) / 'config'
    config_dir.mkdir(parents=True, exist_ok=True)
    db_file = config_dir / 'people.yml'
    db_file.write_text(yaml.safe_dump({'database': {'people': [p.model_dump(mode='json') for p in people]}}))
    (config_dir / 'server_config.yml').write_text(yaml.safe_dump({
        'server_name': 'Test Roster',
        'log_level': 'DEBUG',
        'database_file': 'config/people.yml',
    }))
    return db_file


def register_service_on_client(client: TestClient, name: str, instance: Any) -> None:
    """Register a service instance into the app's DI container for tests.

    Usage in tests:
        from tests.helpers import register_service_on_client
        register_service_on_client(client, 'person_store', fake_store)
    """
    container = getattr(client.app.state, 'container', None)
    if container is None:
        container = ServiceContainer()
        client.app.state.container = container

    container.register_singleton(name, instance)
