from pathlib import Path

import pandas as pd
import pytest

ACCIDENTS_2013 = pd.DataFrame({
    'ST_CASE':  [10001, 10002, 10003, 20001, 20002, 60001],
    'STATE':    [1, 1, 1, 2, 2, 6],
    'MONTH':    [1, 1, 2, 3, 3, 3],
    'LATITUDE': [33.52, 99.9999, 34.10, 64.20, 61.00, 36.70],
    'LONGITUD': [-86.80, -87.00, 999.9999, -147.70, -149.90, -119.70],
})

ACCIDENTS_2014 = pd.DataFrame({
    'ST_CASE':  [10001, 20001, 20002, 60001],
    'STATE':    [1, 2, 2, 6],
    'MONTH':    [1, 2, 2, 12],
    'LATITUDE': [32.40, 58.30, 60.10, 34.05],
    'LONGITUD': [-86.30, -134.40, -151.20, -118.25],
})


def write_accidents(data_dir: Path, year: int, df: pd.DataFrame) -> Path:
    path = Path(data_dir) / f"accident_{year}.csv.bz2"
    df.to_csv(path, index=False, compression='bz2')
    return path


@pytest.fixture
def data_dir(tmp_path):
    """Directory with accident files for 2013 and 2014."""
    write_accidents(tmp_path, 2013, ACCIDENTS_2013)
    write_accidents(tmp_path, 2014, ACCIDENTS_2014)
    return tmp_path
