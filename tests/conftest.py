"""Shared fixtures for template-scaffold tests."""

import os
import sys

import pytest

# Put tests/fakes/ on sys.path so test files can import the fakes directly.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "fakes"))

from fake_prompter import FakePrompter  # noqa: E402
from fake_template_catalog import FakeTemplateCatalog, make_template  # noqa: E402
from fake_template_cloner import FakeTemplateCloner  # noqa: E402


@pytest.fixture
def templates():
    return [
        make_template("t1", "First template"),
        make_template("t2", None),
    ]


@pytest.fixture
def catalog(templates):
    return FakeTemplateCatalog(templates)


@pytest.fixture
def cloner():
    return FakeTemplateCloner()


@pytest.fixture
def prompter():
    return FakePrompter()
