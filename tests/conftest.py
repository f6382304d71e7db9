"""
Pytest configuration and shared fixtures.
"""

import pytest
from typing import Any, Dict, List

from directory_search.config.models import Employee
from directory_search.core.ranker import RecordRanker


@pytest.fixture
def employee_rows() -> List[Dict[str, Any]]:
    """Employee rows as loaded from the directory JSON."""
    return [
        {
            "id": 1,
            "first_name": "Jon",
            "last_name": "Smith",
            "email": "jon.smith@co.com",
            "role": "Engineer",
            "department": "Engineering",
            "status": "Active",
        },
        {
            "id": 2,
            "first_name": "John",
            "last_name": "Doe",
            "email": "john.doe@co.com",
            "role": "Manager",
            "department": "Sales",
            "status": "Active",
        },
        {
            "id": 3,
            "first_name": "Alice",
            "last_name": "Jones",
            "email": "alice.jones@co.com",
            "role": "Designer",
            "department": "Marketing",
            "status": "On Leave",
        },
        {
            "id": 4,
            "first_name": "Bob",
            "last_name": "Brown",
            "email": "bob.brown@co.com",
            "role": "Analyst",
            "department": "Finance",
            "status": "Inactive",
        },
    ]


@pytest.fixture
def employees(employee_rows) -> List[Employee]:
    """Employee records built from the sample rows."""
    return [Employee.from_dict(row) for row in employee_rows]


@pytest.fixture
def ranker() -> RecordRanker:
    """Ranker with the default configuration."""
    return RecordRanker()
