import numpy as np
import pandas as pd
import pytest

from tidy_stats.core._data_prep import (
    InvalidInputError,
    _as_summary_frame,
    _check_conf_level,
    _validate_replicates,
    _count_missing,
)

def test_as_summary_frame_copies_dataframe():
    df = pd.DataFrame({"emmean": [1.0, 2.0], "day": ["1", "2"]})
    out = _as_summary_frame(df)
    assert out.equals(df)
    # modifying the copy must not touch the caller's table
    out.loc[0, "emmean"] = 99.0
    assert df.loc[0, "emmean"] == 1.0

def test_as_summary_frame_from_rows():
    rows = [
        {"contrast": "A - B", "t.ratio": 2.1},
        {"t.ratio": -0.5, "contrast": "A - C"},
    ]
    out = _as_summary_frame(rows)
    # column order comes from the first row
    assert list(out.columns) == ["contrast", "t.ratio"]
    assert out["t.ratio"].tolist() == [2.1, -0.5]
    assert out["contrast"].tolist() == ["A - B", "A - C"]

def test_as_summary_frame_from_columns():
    out = _as_summary_frame({"SE": np.array([0.1, 0.2]), "day": ("1", "2")})
    assert out.shape == (2, 2)
    assert out["SE"].tolist() == [0.1, 0.2]

def test_as_summary_frame_empty_rows():
    out = _as_summary_frame([])
    assert len(out) == 0
    assert len(out.columns) == 0

@pytest.mark.parametrize("bad", [None, 3.2, "emmean", pd.Series([1, 2]), np.ones((2, 2))])
def test_as_summary_frame_rejects_non_tabular(bad):
    with pytest.raises(InvalidInputError):
        _as_summary_frame(bad)

def test_as_summary_frame_ragged_rows():
    with pytest.raises(InvalidInputError):
        _as_summary_frame([{"a": 1, "b": 2}, {"a": 3}])

def test_as_summary_frame_rows_must_be_mappings():
    with pytest.raises(InvalidInputError):
        _as_summary_frame([{"a": 1}, [2]])

def test_as_summary_frame_unequal_columns():
    with pytest.raises(InvalidInputError):
        _as_summary_frame({"a": [1, 2], "b": [1]})

def test_as_summary_frame_scalar_column():
    with pytest.raises(InvalidInputError):
        _as_summary_frame({"a": 1.0})

def test_invalid_input_error_is_value_error():
    assert issubclass(InvalidInputError, ValueError)

@pytest.mark.parametrize("level", [0.0, 1.0, -0.1, 95])
def test_check_conf_level_out_of_range(level):
    with pytest.raises(ValueError):
        _check_conf_level(level)

def test_validate_replicates_vector_is_one_statistic():
    t0, t, terms = _validate_replicates(1.5, [1.0, 2.0, 3.0])
    assert t0.shape == (1,)
    assert t.shape == (3, 1)
    assert terms is None

def test_validate_replicates_shape_mismatch():
    with pytest.raises(InvalidInputError):
        _validate_replicates([1.0, 2.0], np.zeros((10, 3)))

def test_validate_replicates_term_count():
    with pytest.raises(InvalidInputError):
        _validate_replicates([1.0, 2.0], np.zeros((10, 2)), terms=["a"])

def test_validate_replicates_no_resamples():
    with pytest.raises(InvalidInputError):
        _validate_replicates([1.0], np.zeros((0, 1)))

def test_validate_replicates_non_numeric():
    with pytest.raises(InvalidInputError):
        _validate_replicates([1.0], [["x"], ["y"]])

def test_count_missing_warns():
    t = np.array([[1.0, np.nan], [2.0, np.nan], [np.nan, 3.0]])
    with pytest.warns(UserWarning) as record:
        n = _count_missing(t, ["a", "b"])
    assert n == 3
    assert "3 missing replicate values" in str(record[0].message)
    assert "'a'" in str(record[0].message) and "'b'" in str(record[0].message)

def test_count_missing_silent_when_complete(recwarn):
    assert _count_missing(np.ones((4, 2))) == 0
    assert len(recwarn) == 0

def test_as_summary_frame_one_shot_columns():
    # generator columns can only be read once
    out = _as_summary_frame({
        "emmean": (x for x in [1.0, 2.0]),
        "day": iter(["1", "2"]),
    })
    assert out["emmean"].tolist() == [1.0, 2.0]
    assert out["day"].tolist() == ["1", "2"]
