import pytest

from core import Calculator, EngineConfig


@pytest.fixture
def calc():
    return Calculator(config=EngineConfig())


@pytest.fixture
def rad_calc():
    return Calculator(config=EngineConfig(angle_mode="rad"))
