"""Pytest fixtures for test suite."""

import pytest
from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL

from ifscfinder import reset_all
from ifscfinder.storage.database import reset_db_path, set_db_path


# =============================================================================
# Dataset Fixtures
# =============================================================================

_SCHEMA = """
CREATE TABLE ifsc_codes (
    code TEXT PRIMARY KEY,
    bank TEXT,
    branch TEXT,
    address TEXT,
    city1 TEXT,
    city2 TEXT,
    state TEXT,
    std_code TEXT
)
"""

SAMPLE_ROWS: list[dict[str, Any]] = [
    {
        "code": "SBIN0000001",
        "bank": "STATE BANK OF INDIA",
        "branch": "KOLKATA MAIN",
        "address": "SAMRIDDHI BHAVAN, 1 STRAND ROAD, KOLKATA 700001",
        "city1": "KOLKATA",
        "city2": "KOLKATA",
        "state": "WEST BENGAL",
        "std_code": "033",
    },
    {
        "code": "SBIN0000002",
        "bank": "STATE BANK OF INDIA",
        "branch": "HOWRAH",
        "address": "G T ROAD, HOWRAH 711101",
        "city1": "HOWRAH",
        "city2": "KOLKATA",
        "state": "WEST BENGAL",
        "std_code": "033",
    },
    {
        "code": "SBIN0000300",
        "bank": "STATE BANK OF INDIA",
        "branch": "MUMBAI MAIN",
        "address": "MUMBAI SAMACHAR MARG, FORT, MUMBAI 400001",
        "city1": "MUMBAI",
        "city2": "MUMBAI",
        "state": "MAHARASHTRA",
        "std_code": "022",
    },
    {
        "code": "HDFC0000001",
        "bank": "HDFC BANK",
        "branch": "KAMALA MILLS COMPOUND",
        "address": "TRADE WORLD, SENAPATI BAPAT MARG, LOWER PAREL, MUMBAI 400013",
        "city1": "MUMBAI",
        "city2": "GREATER MUMBAI",
        "state": "MAHARASHTRA",
        "std_code": "022",
    },
    {
        "code": "HDFC0000002",
        "bank": "HDFC BANK",
        "branch": "KASTURBA GANDHI MARG",
        "address": "SURYA KIRAN BUILDING, K G MARG, NEW DELHI 110001",
        "city1": "NEW DELHI",
        "city2": "DELHI",
        "state": "DELHI",
        "std_code": "011",
    },
    {
        "code": "ICIC0000001",
        "bank": "ICICI BANK LIMITED",
        "branch": "BANDRA KURLA COMPLEX",
        "address": "ICICI BANK TOWERS, BANDRA KURLA COMPLEX, MUMBAI 400051",
        "city1": "THANE",
        "city2": "MUMBAI",
        "state": "MAHARASHTRA",
        "std_code": "022",
    },
    {
        # Sparse row: blank and NULL columns must be omitted from records
        "code": "UTIB0000009",
        "bank": "AXIS BANK",
        "branch": "PUNE",
        "address": "   ",
        "city1": "PUNE",
        "city2": None,
        "state": "MAHARASHTRA",
        "std_code": None,
    },
]


def build_dataset(path: Path, rows: list[dict[str, Any]]) -> Path:
    """Write an ``ifsc_codes`` table with the given rows to a SQLite file."""
    engine = create_engine(URL.create("sqlite", database=str(path)))
    try:
        with engine.begin() as conn:
            conn.execute(text(_SCHEMA))
            conn.execute(
                text("""
                INSERT INTO ifsc_codes
                (code, bank, branch, address, city1, city2, state, std_code)
                VALUES (:code, :bank, :branch, :address, :city1, :city2, :state, :std_code)
                """),
                rows,
            )
    finally:
        engine.dispose()
    return path


@pytest.fixture
def dataset_path(tmp_path: Path) -> Path:
    """Path to a temporary dataset with the sample rows."""
    return build_dataset(tmp_path / "ifsc.db", SAMPLE_ROWS)


@pytest.fixture(autouse=True)
def isolated_dataset(dataset_path: Path):
    """Point the library at the temporary dataset and reset all singletons."""
    reset_all()
    set_db_path(dataset_path)
    yield dataset_path

    reset_all()
    reset_db_path()
