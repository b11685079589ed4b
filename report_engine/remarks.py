"""
Principal's remark for a report card.

The opening sentence is drawn at random from the pool for the student's
average band; fixed sentences are then appended for weak subjects and for the
top of the class. Pass a seeded random.Random (or any object with a
``choice`` method) as ``rng`` to make the draw repeatable.
"""

import random
from types import MappingProxyType

EXCELLENT_REMARKS = (
    "Exceptional work! Your dedication to your studies is truly inspiring.",
    "A brilliant performance. You have shown remarkable consistency and intelligence.",
    "Outstanding results! Keep maintaining this high standard of excellence.",
    "You are a star student. Your academic prowess is simply commendable.",
    "Magnificent performance. Your hard work has yielded great fruit.",
    "An exemplary academic record. You have set a high bar for others.",
    "Truly impressive! Your focus and commitment are evident in these grades.",
    "Wonderful results. Your performance is a testament to your hard work.",
    "Exceptional! You have a bright future ahead with this level of performance.",
    "A masterclass in academic excellence. Keep up the fantastic work.",
    "You have exceeded all expectations. Your results are simply fantastic.",
    "A top-tier performance. Your intellectual curiosity is highly praiseworthy.",
    "Phenomenal work! You are a pride to the school and your parents.",
    "Your results are a clear reflection of your unwavering focus. Well done!",
    "Absolute excellence! May you continue to soar high in your academics.",
)

GOOD_REMARKS = (
    "Very well done! You have performed admirably well this term.",
    "A strong performance. With a bit more effort, you can break into the top bracket.",
    "Good job! Don't relent; aim even higher in the coming term.",
    "Impressive results. Keep pushing your limits to achieve even greater success.",
    "Well done! You have shown great potential. Stay focused and keep working hard.",
    "A commendable performance. Consistency and more effort will yield even better results.",
    "Very good! You have a solid grasp of your subjects. Aim for excellence next time.",
    "Nice work! You are doing very well. Put in more effort to reach the peak.",
    "Good performance. Don't be complacent; keep striving for the best.",
    "Well done! Your progress is steady. More determination will take you further.",
)

NEEDS_FOCUS_REMARKS = (
    "You did well, but you need to buckle down and focus more on your studies.",
    "A fair performance. You have the potential to do much better with more focus.",
    "Good effort, but there is room for significant improvement. Buckle down!",
    "You have passed, but you need to take your academics more seriously.",
    "A decent attempt. Total focus and dedication will help you improve your grades.",
    "You are doing okay, but you need to be more disciplined in your studies.",
    "Not bad, but I expect a more serious approach to your work next term.",
    "You've shown some effort, but you need to buckle down and minimize distractions.",
    "A satisfactory performance. However, you must focus more to achieve higher.",
    "Good progress, but you need to buckle down and give your best next time.",
)

REMARK_POOLS = MappingProxyType({
    'excellent': EXCELLENT_REMARKS,
    'good': GOOD_REMARKS,
    'needs_focus': NEEDS_FOCUS_REMARKS,
})

GOOD_SUFFIX = " If you put in more effort than this term, you will score even more and you shouldn't relent."
LOW_PERFORMANCE_REMARK = "Fair performance, put more effort."
TOP_OF_CLASS_REMARK = " And lastly, I want to congratulate you on being at the top of the class."

EXCELLENT_MIN = 80
GOOD_MIN = 60
PASS_MIN = 50
FOCUS_SUBJECT_BELOW = 60
WEAK_SUBJECT_BELOW = 58


def band_for(average):
    average = float(average or 0)
    if average >= EXCELLENT_MIN:
        return 'excellent'
    if average >= GOOD_MIN:
        return 'good'
    if average >= PASS_MIN:
        return 'needs_focus'
    return 'low'


def display_subject(subject):
    return str(subject).upper().replace('_', ' ')


def join_subjects(names):
    """'A', 'A and B', 'A, B and C'."""
    names = list(names)
    if not names:
        return ''
    if len(names) == 1:
        return names[0]
    return ', '.join(names[:-1]) + ' and ' + names[-1]


class RemarkGenerator:

    def __init__(self, pools=REMARK_POOLS, rng=None):
        for band in ('excellent', 'good', 'needs_focus'):
            if not pools.get(band):
                raise ValueError(f"Remark pool {band!r} must not be empty.")
        self.pools = MappingProxyType({band: tuple(remarks) for band, remarks in pools.items()})
        self.rng = rng or random.Random()

    def generate(self, average, scores, rank):
        band = band_for(average)
        if band == 'excellent':
            remark = self.rng.choice(self.pools['excellent'])
        elif band == 'good':
            remark = self.rng.choice(self.pools['good']) + GOOD_SUFFIX
        elif band == 'needs_focus':
            remark = self.rng.choice(self.pools['needs_focus'])
            focus = next((s for s in scores if s['total_score'] < FOCUS_SUBJECT_BELOW), None)
            if focus:
                remark += f" You can work more on {display_subject(focus['subject'])}."
        else:
            remark = LOW_PERFORMANCE_REMARK

        weak = [display_subject(s['subject']) for s in scores if s['total_score'] < WEAK_SUBJECT_BELOW]
        if weak:
            remark += f" You need to work harder on {join_subjects(weak)}."

        if rank == '1st':
            remark += TOP_OF_CLASS_REMARK
        return remark
