import pytest
from servicios_escolares import create_app
from servicios_escolares.conversation import ConversationEngine
from servicios_escolares.services import ServiceManager
from servicios_escolares.storage import JSONFileStorage, PersistentStore
from unittest.mock import Mock
import logging
import random

# Desactivar la propagación de logs para evitar duplicados en la consola de pytest
logging.getLogger("werkzeug").setLevel(logging.ERROR)


@pytest.fixture(scope="function")
def app(tmp_path):
    """Crea y configura una instancia de la aplicación Flask para cada test."""
    app = create_app('testing', overrides={
        'STORE_PATH': str(tmp_path / "store.json"),
        'LOG_DIR': str(tmp_path / "logs"),
    })
    yield app


@pytest.fixture(scope="function")
def client(app):
    """Cliente de prueba simple para la aplicación Flask."""
    return app.test_client()


@pytest.fixture
def store_path(tmp_path):
    return str(tmp_path / "servicios.json")


@pytest.fixture
def store(store_path):
    """Almacén respaldado por un archivo JSON temporal."""
    return PersistentStore(JSONFileStorage(store_path))


@pytest.fixture
def notifier():
    """Simulador de notificaciones falso para verificar los eventos emitidos."""
    return Mock()


@pytest.fixture
def services(store, notifier):
    return ServiceManager(store, notifier, rng=random.Random(2025))


@pytest.fixture
def engine(store):
    """Asistente con un generador aleatorio fijo para respuestas reproducibles."""
    return ConversationEngine(store, rng=random.Random(2025))


class SequenceRandom:
    """Generador que devuelve una secuencia fija de valores en randrange."""

    def __init__(self, values):
        self.values = list(values)

    def randrange(self, stop):
        value = self.values.pop(0) if len(self.values) > 1 else self.values[0]
        return value % stop


@pytest.fixture
def sequence_random():
    return SequenceRandom


def ticks(*timestamps):
    """Reloj falso que devuelve las marcas de tiempo indicadas, en orden."""
    return iter(timestamps).__next__


@pytest.fixture
def fake_clock():
    return ticks
