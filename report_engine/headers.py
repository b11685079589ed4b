"""
Column classification for score and registration sheets.

Sheet headers are typed by hand, so the same field turns up as "Admission No",
"admission_no" or "ADM NO". Classification is a substring match against a
declared alias table rather than an exact lookup.
"""

import re

BIO_ALIASES = (
    'admission_no', 'admission no', 'adm_no',
    'surname', 'name', 'first_name', 'm_name', 'middle_name', 'l_name', 'last_name',
    'url', 'passport', 'image', 'gender', 'sex', 'phone', 'email', 'address',
    'state_of_origin', 'lga', 'dob', 'date_of_birth', 'club', 'society',
)

IDENTITY_ALIASES = ('admission_no', 'admission no', 'adm_no', 'adm no')

CA_SUFFIX = ' (CA 40)'
EXAM_SUFFIX = ' (Exam 60)'

OFFERED_MARKS = {'1', 'X'}


def normalize_header(label):
    """Lower-case, trim and turn underscores into spaces."""
    return str(label if label is not None else '').strip().lower().replace('_', ' ')


def _compact(label):
    return re.sub(r'[^a-z0-9]+', '', str(label if label is not None else '').lower())


class HeaderClassifier:
    """Split sheet headers into biographic fields and subject columns."""

    def __init__(self, bio_aliases=BIO_ALIASES):
        self.bio_aliases = tuple(normalize_header(alias) for alias in bio_aliases)

    def is_biographic(self, label):
        clean = normalize_header(label)
        return any(clean in alias or alias in clean for alias in self.bio_aliases)

    def subject_columns(self, labels):
        return [label for label in labels if not self.is_biographic(label)]


def sheet_headers(rows):
    """Ordered union of the column labels present across rows."""
    headers = []
    seen = set()
    for row in rows or []:
        for label in row.keys():
            if label not in seen:
                seen.add(label)
                headers.append(label)
    return headers


def consolidated_subjects(labels):
    """Subject names of a consolidated sheet, read off the '<Subject> (CA 40)' columns."""
    return [label[:-len(CA_SUFFIX)] for label in labels if str(label).endswith(CA_SUFFIX)]


def _cell_text(value):
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def row_value(row, key, aliases=None):
    """Look up a cell by any of its aliases, ignoring case, spacing and punctuation."""
    if not row:
        return None
    targets = {_compact(alias) for alias in (aliases or (key,))}
    for label, value in row.items():
        if _compact(label) in targets:
            return value.strip() if isinstance(value, str) else value
    return None


def row_identity(row):
    """Trimmed admission number of a row, '' when the row has none."""
    return _cell_text(row_value(row, 'admission_no', IDENTITY_ALIASES))


def offered_subjects(row, subject_labels):
    """Subjects a registration row marks as offered with '1' or 'X'."""
    return [label for label in subject_labels if _cell_text(row.get(label)).upper() in OFFERED_MARKS]
