import os

import pytest

from itinerary_viewer.config import reset_config
from itinerary_viewer.container import reset_container

HEADER = "Día,Hora,Actividad,Lugar/Detalles,Transporte recomendado,Actividad alternativa"

SAMPLE_CSV = "\n".join(
    [
        HEADER,
        "Domingo,10:00,Paseo por el barrio del Castillo,Bastión de los Pescadores,A pie,Funicular",
        "Domingo,14:00,Almuerzo,Café Gerbeaud,Metro M1,-",
        "Lunes,09:00,Merienda,New York Café,Taxi,-",
        "",
        "Lunes,20:00,Vuelo de regreso,Vuelo de regreso IB872.,-,-",
    ]
)


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate every test from ITV_* variables and cached singletons."""
    for key in list(os.environ):
        if key.startswith("ITV_"):
            monkeypatch.delenv(key, raising=False)
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def sample_csv():
    return SAMPLE_CSV
