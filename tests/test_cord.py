import pytest
from hypothesis import given, strategies as st

from bytecord.cord import ByteCord


def test_at_n_in_bounds():
    data = bytes(range(20))
    cord = ByteCord(data)
    assert cord.at_n(3, 5) == data[3:8]
    assert cord.at_n(0, len(data)) == data


def test_at_n_exact_end_and_beyond():
    data = bytes(range(10))
    cord = ByteCord(data)
    assert cord.at_n(len(data), 0) == b""
    assert cord.at_n(len(data) - 2, 3) is None
    assert cord.at_n(len(data) + 1, 0) is None


def test_at_matches_at_n():
    data = bytes(range(12))
    cord = ByteCord(data)
    assert cord.at(4, 4) == data[4:8]
    assert cord.at(10, 4) is None


def test_negative_position_rejected():
    cord = ByteCord(bytes(4))
    with pytest.raises(ValueError):
        cord.at_n(-1, 2)
    with pytest.raises(ValueError):
        cord.at_n(0, -2)


def test_at_n_mut_writes_through():
    data = bytearray(16)
    cord = ByteCord(data)
    with cord.at_mut(0, 4) as view:
        view[0] = 1
        view[3] = 9
    assert data[0] == 1
    assert data[3] == 9
    assert cord.at_n(0, 4) == bytes(data[:4])


def test_at_n_mut_rejects_range_reaching_end():
    data = bytearray(8)
    cord = ByteCord(data)
    assert cord.at_n_mut(4, 4) is None
    view = cord.at_n_mut(4, 3)
    assert len(view) == 3
    view.release()


def test_at_n_mut_on_read_only_data():
    cord = ByteCord(bytes(8))
    with pytest.raises(TypeError):
        cord.at_n_mut(0, 2)


def test_len_and_is_empty():
    assert ByteCord(b"").is_empty() is True
    assert len(ByteCord(b"")) == 0
    data = bytes(7)
    cord = ByteCord(data)
    assert cord.is_empty() is False
    assert len(cord) == len(data)


def test_read_default_alignment():
    data = bytes(range(6))
    reader = ByteCord(data).read()
    assert reader.next_n(1) == data[:1]
    assert reader.next_n(1) == data[1:2]


def test_read_with_alignment():
    data = bytes(range(16))
    reader = ByteCord(data).read_with_alignment(8)
    assert reader.next_n(1) == data[:1]
    assert reader.next_n(1) == data[8:9]


def test_read_with_invalid_alignment():
    with pytest.raises(ValueError):
        ByteCord(bytes(4)).read_with_alignment(0)


@given(data=st.binary(max_size=64), position=st.integers(0, 80), length=st.integers(0, 80))
def test_at_n_bounds_invariant(data, position, length):
    result = ByteCord(data).at_n(position, length)
    if position + length <= len(data):
        assert result == data[position : position + length]
    else:
        assert result is None