"""
Where score rows come from.

Reading workbooks and walking the report-card folders belongs to the host
application. It hands the engine rows through an object with the three
methods of RowSource.
"""


class RowSource:
    """Interface the engine reads score rows through."""

    def consolidated_rows(self, session, term, classname):
        """Rows of the class's consolidated sheet, or None when there is none."""
        raise NotImplementedError

    def subject_rows(self, session, term, classname, subject):
        """Rows of one subject's sheet, or None when there is none."""
        raise NotImplementedError

    def class_sheets(self, session, term, classname):
        """Every per-subject sheet of the class and term, as {subject: rows}."""
        raise NotImplementedError


def _key(*parts):
    """'First_term' and 'first  term' address the same sheet."""
    return tuple(
        ' '.join(str(part if part is not None else '').replace('_', ' ').split()).upper()
        for part in parts
    )


class InMemoryRowSource(RowSource):
    """RowSource over sheets the host has already read into memory."""

    def __init__(self):
        self._consolidated = {}
        self._subject_sheets = {}

    def add_consolidated(self, session, term, classname, rows):
        self._consolidated[_key(session, term, classname)] = [dict(row) for row in rows]
        return self

    def add_subject_sheet(self, session, term, classname, subject, rows):
        sheets = self._subject_sheets.setdefault(_key(session, term, classname), {})
        sheets[subject.strip()] = [dict(row) for row in rows]
        return self

    def consolidated_rows(self, session, term, classname):
        return self._consolidated.get(_key(session, term, classname))

    def subject_rows(self, session, term, classname, subject):
        sheets = self._subject_sheets.get(_key(session, term, classname), {})
        return sheets.get((subject or '').strip())

    def class_sheets(self, session, term, classname):
        return dict(self._subject_sheets.get(_key(session, term, classname), {}))
