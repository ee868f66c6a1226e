"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


HEADER = "neighborhood,crim,zn,indus,chas,nox,rooms,age,dis,rad,tax,ptratio,lstat,mv"

SAMPLE_ROWS = [
    "Nahant,0.00632,18,2.31,0,0.538,6.575,65.2,4.09,1,296,15.3,4.98,24",
    "Swampscott,0.02731,0,7.07,0,0.469,6.421,78.9,4.9671,2,242,17.8,9.14,21.6",
    "Swampscott,0.02729,0,7.07,0,0.469,7.185,61.1,4.9671,2,242,17.8,4.03,34.7",
    "Marblehead,0.03237,0,2.18,0,0.458,6.998,45.8,6.0622,3,222,18.7,2.94,33.4",
    "Marblehead,0.06905,0,2.18,0,0.458,7.147,54.2,6.0622,3,222,18.7,5.33,36.2",
    "Salem,0.02985,0,2.18,0,0.458,6.43,58.7,6.0622,3,222,18.7,5.21,28.7",
    "Salem,0.08829,12.5,7.87,0,0.524,6.012,66.6,5.5605,5,311,15.2,12.43,22.9",
    "Salem,0.14455,12.5,7.87,0,0.524,6.172,96.1,5.9505,5,311,15.2,19.15,27.1",
]

SAMPLE_CRIM = [0.00632, 0.02731, 0.02729, 0.03237, 0.06905, 0.02985, 0.08829, 0.14455]
SAMPLE_ROOMS = [6.575, 6.421, 7.185, 6.998, 7.147, 6.43, 6.012, 6.172]
SAMPLE_MV = [24, 21.6, 34.7, 33.4, 36.2, 28.7, 22.9, 27.1]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def write_csv(tmp_path):
    """Write text to a CSV file under tmp_path and return its path."""
    def _write(content, name="data.csv", newline="\n"):
        path = tmp_path / name
        if isinstance(content, (list, tuple)):
            content = newline.join(content) + newline
        path.write_bytes(content.encode("utf-8") if isinstance(content, str) else content)
        return path
    return _write


@pytest.fixture
def sample_csv(write_csv):
    """Well-formed dataset with 8 records."""
    return write_csv([HEADER, *SAMPLE_ROWS])


@pytest.fixture
def sample_columns():
    """The crim, rooms and mv columns of the sample dataset."""
    return (
        np.array(SAMPLE_CRIM),
        np.array(SAMPLE_ROOMS),
        np.array(SAMPLE_MV, dtype=float),
    )


@pytest.fixture
def noisy_line(rng):
    """y = 3 - 1.5x plus small noise, n=200."""
    x = rng.uniform(0, 10, 200)
    y = 3.0 - 1.5 * x + rng.standard_normal(200) * 0.1
    return x, y


@pytest.fixture
def header():
    return HEADER


@pytest.fixture
def sample_rows():
    return list(SAMPLE_ROWS)
