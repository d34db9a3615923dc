import datetime

import standing

START = datetime.datetime(2024, 9, 2, 9, 0)


def make_entry(category, earned, possible, day=0, name=None):
    """An entry recorded `day` days after the start of term."""
    return standing.Entry(
        category, earned, possible, START + datetime.timedelta(days=day), name=name
    )


def history(*percentages, category="quiz"):
    """Entries out of 100 points, one per day, with the given percentages."""
    return [make_entry(category, p, 100, day=i) for i, p in enumerate(percentages)]


def scenario_one_entries():
    """Assignments 180/200, quizzes 70/100, participation 50/50; no attendance."""
    return [
        make_entry("assignment", 100, 100, day=0),
        make_entry("assignment", 80, 100, day=1),
        make_entry("quiz", 70, 100, day=2),
        make_entry("participation", 50, 50, day=3),
    ]
