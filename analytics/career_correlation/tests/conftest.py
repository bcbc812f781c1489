"""
Shared fixtures for the career correlation tests.
"""

import csv

import pytest

from analytics.career_correlation.dataset_loader import FIELD_COLUMNS

HEADER = [
    "Name", "Gender", "Age", "Education", "Years of Experience",
    "Industry", "Job Title", "Job Satisfaction", "Location", "Company Size",
    "Salary", "Work Hours", "Remote", "Promotions", "Family Influence",
    "Mentorship", "Certifications", "Field of Study", "Career Change",
    "Professional Network Size",
]


def make_row(**fields):
    """Build a 20-column CSV row with the given named fields filled in."""
    row = ["x"] * len(HEADER)
    for name, value in fields.items():
        row[FIELD_COLUMNS[name]] = str(value)
    return row


def person(age, experience, satisfaction=5, network=10, family="Medium", salary=50000):
    return make_row(
        age=age,
        years_of_experience=experience,
        job_satisfaction=satisfaction,
        professional_network_size=network,
        family_influence=family,
        salary=salary,
    )


@pytest.fixture
def write_career_csv(tmp_path):
    """Return a function that writes rows to a CSV under tmp_path."""
    def _write(rows, name="career_dataset.csv", header=HEADER):
        path = tmp_path / name
        with open(path, "w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle)
            if header is not None:
                writer.writerow(header)
            writer.writerows(rows)
        return str(path)

    return _write


@pytest.fixture
def linear_rows():
    """Five individuals with experience = 0.5 * age - 5."""
    return [
        person(age, 0.5 * age - 5, satisfaction=3 + i, network=10 * (i + 1),
               family=["Low", "Medium", "High", "Medium", "High"][i],
               salary=40000 + 5000 * i)
        for i, age in enumerate([30, 35, 40, 45, 50])
    ]


@pytest.fixture
def career_row():
    """Return the row builder used to assemble ad-hoc datasets."""
    return person
