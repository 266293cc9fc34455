"""Shared fixtures for tests."""

import pytest


@pytest.fixture
def pets_text():
    return "Cats are mammals. Dogs are mammals too. Both are popular pets. Many people love pets."


@pytest.fixture
def rockets_text():
    """Five sentences where the best ones are not the first ones."""
    return (
        "Nobody cared much. Rockets need fuel. People watched quietly. "
        "Rockets burn fuel quickly. The weather was mild."
    )


@pytest.fixture
def client():
    from app import app

    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client
