"""Write the HTML pages loaded by the JavaScript tests.

Run ``python make_tables.py [output_dir]`` before ``npm test``. The default
output directory is ``_tables`` next to this file.
"""

import pathlib
import sys

import pandas as pd

from reportkit import FilterableTable
from reportkit._utils import ElementIdGenerator


def grades_table():
    df = pd.DataFrame(
        {
            "id": [1, 2, 3, 4, 5],
            "grade": pd.Categorical(
                ["A", "B", None, "AB", "A"], categories=["A", "AB", "B"]
            ),
            "note": ["x", "Xy", "z", "w", "xy"],
        }
    )
    return FilterableTable(
        df,
        download_file_name="grades",
        id_generator=ElementIdGenerator(token="jstest"),
        page_size=2,
    )


def write_tables(tables_dir):
    tables_dir = pathlib.Path(tables_dir)
    tables_dir.mkdir(parents=True, exist_ok=True)
    grades_table().write_html(tables_dir / "grades.html")


if __name__ == "__main__":
    if len(sys.argv) > 1:
        write_tables(sys.argv[1])
    else:
        write_tables(pathlib.Path(__file__).resolve().parent / "_tables")
