"""Tests for the country-list template script."""

import importlib.util
from pathlib import Path

import pandas as pd
import pytest

from worldmapidentity.models import ShapeRecord

SCRIPT = Path(__file__).parent.parent / "scripts" / "build_country_list.py"


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("build_country_list", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_names_sorted_and_unique(script):
    shapes = [ShapeRecord("france"), ShapeRecord("China"), ShapeRecord("Belgium"), ShapeRecord("China")]
    df = script.build_country_list(shapes)
    assert list(df.columns) == ["Country Name", "Remark"]
    assert df["Country Name"].tolist() == ["Belgium", "China", "france"]
    assert (df["Remark"] == "").all()


def test_write_csv(script, tmp_path):
    df = script.build_country_list([ShapeRecord("France")])
    output = tmp_path / "countries.csv"
    script.write_country_list(df, output)
    assert output.read_text().splitlines()[0] == "Country Name,Remark"


def test_write_parquet(script, tmp_path):
    df = script.build_country_list([ShapeRecord("France"), ShapeRecord("Japan")])
    output = tmp_path / "countries.parquet"
    script.write_country_list(df, output)
    assert pd.read_parquet(output)["Country Name"].tolist() == ["France", "Japan"]


def test_unsupported_format(script, tmp_path):
    with pytest.raises(ValueError, match="Unsupported file format"):
        script.write_country_list(pd.DataFrame(), tmp_path / "countries.txt")
