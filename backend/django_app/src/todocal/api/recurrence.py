"""Recurrence rules and the "due today" check.

A task's repeat configuration is stored as a few flat columns on the model;
``Task.recurrence`` turns them into one of the tagged values below so that
each kind only carries the data it needs.

All day arithmetic happens in the server's current time zone.
"""
from dataclasses import dataclass
from datetime import date
from typing import FrozenSet, Optional

from django.utils import timezone


@dataclass(frozen=True)
class Daily:
    pass


@dataclass(frozen=True)
class Weekly:
    days: FrozenSet[int]  # 0=Sunday .. 6=Saturday


@dataclass(frozen=True)
class Monthly:
    day: Optional[int]


@dataclass(frozen=True)
class Biweekly:
    anchor: Optional[date]


def parse_week_days(value) -> FrozenSet[int]:
    """Parse the stored ``"1,3,5"`` form, skipping anything that is not a number."""
    if not value:
        return frozenset()
    days = set()
    for part in str(value).split(','):
        part = part.strip()
        if part.lstrip('-').isdigit():
            days.add(int(part))
    return frozenset(days)


def format_week_days(days) -> Optional[str]:
    if not days:
        return None
    return ','.join(str(d) for d in sorted(set(days)))


def sunday_weekday(d: date) -> int:
    # date.weekday() is Monday=0; the stored indices are Sunday=0.
    return d.isoweekday() % 7


def occurs_on(rule, day: date) -> bool:
    """Whether a recurrence rule schedules an occurrence on ``day``."""
    if isinstance(rule, Daily):
        return True
    if isinstance(rule, Weekly):
        return sunday_weekday(day) in rule.days
    if isinstance(rule, Monthly):
        return rule.day is not None and day.day == rule.day
    if isinstance(rule, Biweekly):
        if rule.anchor is None:
            return False
        delta = (day - rule.anchor).days
        return delta >= 0 and delta % 14 == 0
    return False


def is_due_today(task, now=None) -> bool:
    now = timezone.localtime(now or timezone.now())
    today = now.date()

    if not task.isRecurring:
        if task.dueDate is not None and task.dueDate > today:
            return False
        return not task.completed

    # Already done today; `completed` is not consulted for recurring tasks.
    if task.lastCompleted is not None and timezone.localtime(task.lastCompleted).date() >= today:
        return False

    return occurs_on(task.recurrence, today)


def split_today_upcoming(tasks, now=None):
    now = now or timezone.now()
    today, upcoming = [], []
    for t in tasks:
        (today if is_due_today(t, now) else upcoming).append(t)
    return today, upcoming
