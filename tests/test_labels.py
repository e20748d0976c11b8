import pytest

from pathfinder.labels import ALPHABET, LabelAllocationError, generate_labels


def test_generate_labels_takes_alphabet_prefix():
    assert generate_labels(5) == ["A", "B", "C", "D", "E"]


def test_generate_labels_full_alphabet_is_distinct():
    labels = generate_labels(len(ALPHABET))
    assert len(labels) == 26
    assert len(set(labels)) == 26


def test_generate_labels_zero():
    assert generate_labels(0) == []


@pytest.mark.parametrize("count", [-1, 27])
def test_generate_labels_rejects_out_of_range(count):
    with pytest.raises(LabelAllocationError):
        generate_labels(count)


def test_generate_labels_custom_alphabet():
    assert generate_labels(3, alphabet="XYZ") == ["X", "Y", "Z"]
    with pytest.raises(LabelAllocationError):
        generate_labels(2, alphabet="XX")
