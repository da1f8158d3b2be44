import pytest


@pytest.fixture
def sample_documents() -> list[list[str]]:
    return [
        ["this", "is", "some", "text"],
        ["and", "there", "is", "more"],
        ["this", "too"],
    ]
