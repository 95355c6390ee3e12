"""Shared fixtures and sample data."""

import pytest

from soilcalc.schemas import SoilDescription, SoilLayer

# Default form state of the analysis page
SAMPLE_SOIL = {
    "name": "Sample plot",
    "ph": 7.0,
    "moisture": 20.0,
    "temperature": 25.0,
    "clay_content": 25.0,
    "sand_content": 45.0,
    "silt_content": 30.0,
    "organic_matter": 2.5,
    "density": 1.7,
    "cohesion": 25.0,
    "phi": 30.0,
    "building_type": "residential",
    "planned_floors": 2,
    "site_area": 2000.0,
}

SAMPLE_LAYERS = [
    {"from_depth": 0.0, "to_depth": 1.0, "soil_type": "Fill", "gamma": 16.0,
     "cohesion": 10, "phi": 18, "moisture": 25, "spt_n": 10, "remarks": "-"},
    {"from_depth": 1.0, "to_depth": 2.0, "soil_type": "Clay", "gamma": 17.0,
     "cohesion": 25, "phi": 18, "moisture": 30, "spt_n": 10, "remarks": "Compressible"},
    {"from_depth": 2.0, "to_depth": 3.0, "soil_type": "Clay", "gamma": 18.0,
     "cohesion": 45, "phi": 22, "moisture": 24, "spt_n": 10, "remarks": "-"},
    {"from_depth": 3.0, "to_depth": 4.0, "soil_type": "Sand", "gamma": 19.0,
     "cohesion": 0, "phi": 36, "moisture": 18, "spt_n": 10,
     "remarks": "Good for pile termination"},
]


@pytest.fixture
def sample_soil() -> SoilDescription:
    return SoilDescription(**SAMPLE_SOIL)


@pytest.fixture
def bore_layers() -> list[SoilLayer]:
    return [SoilLayer(**layer) for layer in SAMPLE_LAYERS]


@pytest.fixture
def logged_soil(sample_soil, bore_layers) -> SoilDescription:
    return sample_soil.model_copy(update={"layers": bore_layers})


@pytest.fixture
def sample_soil_data() -> dict:
    return dict(SAMPLE_SOIL)


@pytest.fixture
def sample_layers_data() -> list[dict]:
    return [dict(layer) for layer in SAMPLE_LAYERS]
