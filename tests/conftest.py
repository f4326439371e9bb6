import matplotlib

matplotlib.use("Agg")

import pytest

from chiton.dataset.test_maps import SAMPLE


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE + "\n")
    return path
