import pytest

from report_engine.sources import InMemoryRowSource

SESSION = "2025_and_2026"


def consolidated_row(adm, name, scores):
    row = {"Admission_no": adm, "Surname": name}
    for subject, (ca, exam) in scores.items():
        row[f"{subject} (CA 40)"] = ca
        row[f"{subject} (Exam 60)"] = exam
    return row


def subject_row(adm, ca, mcq, theory, total=None):
    row = {"Admission_no": adm, "SURNAME": f"Student {adm}", "CA (40 MARKS)": ca,
           "MCQ (30 MARKS)": mcq, "THEORY (30 MARKS)": theory}
    if total is not None:
        row["TOTAL (100)"] = total
    return row


class FixedChoice:
    """Stands in for random.Random; always picks the first remark."""

    def __init__(self):
        self.calls = []

    def choice(self, seq):
        self.calls.append(seq)
        return seq[0]


@pytest.fixture
def fixed_rng():
    return FixedChoice()


@pytest.fixture
def source():
    """JSS1 with a consolidated first term and per-subject second and third terms."""
    src = InMemoryRowSource()
    src.add_consolidated(SESSION, "First_term", "JSS1", [
        consolidated_row("25001", "Adeyemi", {"Mathematics": (30, 40), "Basic Technology": (35, 35)}),
        consolidated_row("25002", "Bello", {"Mathematics": (38, 52), "Basic Technology": (36, 54)}),
        consolidated_row("25003", "Chukwu", {"Mathematics": (20, 20), "Basic Technology": (10, 30)}),
    ])
    src.add_subject_sheet(SESSION, "Second_term", "JSS1", "Mathematics", [
        subject_row("25001", 40, 30, 20),
        subject_row("25002", 30, 20, 10),
        subject_row("25003", 10, 10, 10),
    ])
    src.add_subject_sheet(SESSION, "Second_term", "JSS1", "Basic Tech", [
        subject_row("25001", 40, 20, 20, total=95),
        subject_row("25002", 30, 20, 10),
    ])
    src.add_subject_sheet(SESSION, "Third_term", "JSS1", "Mathematics", [
        subject_row("25001", 35, 25, 20),
        subject_row("25002", 30, 10, 10),
        subject_row("25003", 10, 5, 5),
    ])
    src.add_subject_sheet(SESSION, "Third_term", "JSS1", "Basic Tech", [
        subject_row("25001", 40, 25, 25),
        subject_row("25002", 30, 15, 10),
        subject_row("25003", 10, 5, 5),
    ])
    return src
