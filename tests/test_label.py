import pytest

from predator.label import FileNotFoundInStoreError, Label, parse_label


def test_parse_label():
    label = parse_label("entity-1-project-1.dataset_a.table_x")
    assert label == Label(project="entity-1-project-1", dataset="dataset_a", table="table_x")


def test_parse_label_wrong_format():
    with pytest.raises(ValueError):
        parse_label("entity-1-project-1.dataset_a")


def test_label_round_trip():
    urn = "sample-project.dataset_b.table_y"
    assert str(parse_label(urn)) == urn


def test_file_not_found_message():
    assert str(FileNotFoundInStoreError()) == "file not found"