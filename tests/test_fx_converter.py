"""Tests for the public package facade."""

import pytest

import fx_converter
from fx_converter import DailyRates, __version__, default_rates, load_rates, new_converter
from fx_converter.data import default_rates as data_default_rates
from fx_converter.ingestion.loader import load_rates as loader_load_rates


def test_version_is_exposed() -> None:
    assert isinstance(__version__, str)
    assert __version__


def test_lazy_helpers_resolve_to_implementations() -> None:
    assert default_rates is data_default_rates
    assert load_rates is loader_load_rates


def test_unknown_attribute_raises() -> None:
    with pytest.raises(AttributeError):
        fx_converter.does_not_exist  # noqa: B018


def test_public_names_are_importable() -> None:
    for name in fx_converter.__all__:
        assert getattr(fx_converter, name) is not None


def test_new_converter_is_exposed() -> None:
    assert isinstance(new_converter().rates, DailyRates)
