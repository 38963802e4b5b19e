import pytest

from lightremote.factory import create_light_and_remote


@pytest.fixture
def system():
    return create_light_and_remote(strict=False)


@pytest.fixture
def strict_system():
    return create_light_and_remote(strict=True)
