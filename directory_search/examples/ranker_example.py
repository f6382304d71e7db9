"""Example usage of the directory ranker with a JSON employee file."""

import sys
import logging
from pathlib import Path
from typing import List

import pandas as pd

from directory_search.config.models import Employee, RankerConfig
from directory_search.core.ranker import RecordRanker


def load_employees(data_file: Path) -> List[Employee]:
    """
    Load employees from a JSON array of records.

    Args:
        data_file: Path to the employees JSON file

    Returns:
        List[Employee]: Loaded employees
    """
    df = pd.read_json(data_file, orient='records', dtype=False)
    return [Employee.from_dict(row) for row in df.to_dict('records')]


def search_directory(
    data_file: Path,
    query: str,
    threshold: float = 0.3
) -> List[Employee]:
    """
    Rank the employees of a file against a query and log the results.

    Args:
        data_file: Path to the employees JSON file
        query: Search text
        threshold: Minimum best-field score to keep a record

    Returns:
        List[Employee]: Matching employees, most relevant first
    """
    try:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(levelname)s - %(message)s'
        )

        logging.info(f"Reading employee file: {data_file}")
        employees = load_employees(data_file)

        ranker = RecordRanker(RankerConfig(threshold=threshold))
        scored = ranker.score_records(employees, query)

        logging.info(f"\nResults for {query!r}: {len(scored)} of {len(employees)}")
        for result in scored:
            employee = result.record
            logging.info(
                f"{result.score:.3f}  {employee.first_name} {employee.last_name:<15}"
                f" {employee.role:<25} (matched on {result.matched_field})"
            )

        return [result.record for result in scored]

    except Exception as e:
        logging.error(f"An error occurred: {e}", exc_info=True)
        raise

if __name__ == "__main__":
    data_file = Path('data/employees.json')
    query = sys.argv[1] if len(sys.argv) > 1 else 'engr'

    search_directory(data_file=data_file, query=query)
