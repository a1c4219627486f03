import sys
from pathlib import Path

import pytest

# Ensure project root on path for imports when executing from tests dir
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient

import ingredient_dedup.main as main

@pytest.fixture
def client():
    return TestClient(main.app)

@pytest.fixture
def sample_recipes():
    """Lote pequeño con duplicados entre recetas y dentro de una misma receta."""
    return [
        {"id": 10, "title": "Tortilla", "ingredients": ["egg", "potato", "salt", "olive oil"]},
        {"id": 11, "title": "Ensalada", "ingredients": ["tomato", "salt", "olive oil", "onion"]},
        {"id": "c-12", "title": "Gazpacho", "ingredients": ["tomato", "cucumber", "garlic", "salt"], "tags": ["cold"]},
        {"id": 13, "title": "Pan", "ingredients": ["flour", "water", "flour", "salt"]},
        {"id": 14, "title": "Sin lista"},
    ]
