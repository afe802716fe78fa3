"""Shared test fixtures."""

import pytest

from path_store import PathStore


@pytest.fixture
def store():
    return PathStore()


@pytest.fixture
def read_only_store():
    return PathStore("r")


@pytest.fixture
def write_only_store():
    return PathStore("w")


@pytest.fixture
def locked_store():
    return PathStore("none")
