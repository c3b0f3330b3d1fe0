import pytest

@pytest.fixture
def query():
    return "the cat sat"

@pytest.fixture
def documents():
    return [
        "the cat sat on the mat",
        "a dog sat there",
        "cats and dogs",
        "the mat",
    ]
