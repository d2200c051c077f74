"""Общие фикстуры тестов."""

import random

import pytest

from exactarith.core.settings import reset_settings


@pytest.fixture(autouse=True)
def default_settings():
    """Каждый тест начинается и заканчивается с настройками по умолчанию."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def rng():
    """Детерминированный генератор для property-проверок."""
    return random.Random(20261017)
