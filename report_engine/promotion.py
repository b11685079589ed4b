import re
from types import MappingProxyType

from .terms import TERM_LABELS, term_number

CLASS_PROGRESSION = MappingProxyType({
    'NURSERY1': 'NURSERY2',
    'NURSERY2': 'NURSERY3',
    'NURSERY3': 'PRIMARY1',
    'PRIMARY1': 'PRIMARY2',
    'PRIMARY2': 'PRIMARY3',
    'PRIMARY3': 'PRIMARY4',
    'PRIMARY4': 'PRIMARY5',
    'PRIMARY5': 'PRIMARY6',
    'PRIMARY6': 'JSS1',
    'JSS1': 'JSS2',
    'JSS2': 'JSS3',
    'JSS3': 'SS1',
    'SS1': 'SS2',
    'SS2': 'SS3',
})

TERMINAL_CLASSES = frozenset({'SS3'})

FINAL_TERM = 3
UNKNOWN_NEXT_CLASS = 'the next class'


def canonicalize_classname(value):
    """Canonical class key (e.g. 'jss 1' -> 'JSS1', 'SSS2' -> 'SS2')."""
    key = re.sub(r'[^A-Za-z0-9]+', '', (value or '').strip()).upper()
    if re.fullmatch(r'SSS\d+', key):
        key = key[1:]
    return key


def is_final_term(term, term_labels=TERM_LABELS):
    return term_number(term, term_labels) == FINAL_TERM


class PromotionEvaluator:
    """End-of-year verdict from the current class and the cumulative average."""

    def __init__(self, progression=CLASS_PROGRESSION, pass_mark=50, terminal_classes=TERMINAL_CLASSES):
        self.progression = MappingProxyType(dict(progression))
        self.pass_mark = float(pass_mark)
        self.terminal_classes = frozenset(canonicalize_classname(c) for c in terminal_classes)

    def next_class(self, classname):
        return self.progression.get(canonicalize_classname(classname))

    def evaluate(self, classname, cumulative_average):
        current = (classname or '').strip().upper()
        if canonicalize_classname(classname) in self.terminal_classes:
            # Graduation is decided outside the report card.
            return {'next_class': None, 'promoted': None, 'message': ''}
        if float(cumulative_average or 0) >= self.pass_mark:
            next_class = self.next_class(classname) or UNKNOWN_NEXT_CLASS
            return {
                'next_class': next_class,
                'promoted': True,
                'message': f"Congratulations, you have been promoted to {next_class}",
            }
        return {
            'next_class': current,
            'promoted': False,
            'message': f"You are advised to repeat {current}",
        }
