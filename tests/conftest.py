# tests/conftest.py

import pytest

from demopts import features
from demopts.features import FeatureMatrix


@pytest.fixture(autouse=True)
def gdal_38(monkeypatch):
    """
    Fixture: pins the process-wide feature matrix to GDAL 3.8 so the
    tests do not depend on the installed GDAL.
    """
    monkeypatch.delenv("DEMOPTS_GDAL_VERSION", raising=False)
    matrix = FeatureMatrix((3, 8))
    features.set_feature_matrix(matrix)
    yield matrix
    features.set_feature_matrix(None)


@pytest.fixture
def gdal_32():
    """A feature matrix for GDAL 3.2, before TRI grew `-alg`."""
    return FeatureMatrix((3, 2))
