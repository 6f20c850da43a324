import logging

from django.db import transaction
from django.db.models import Prefetch
from django.utils import timezone

from todocal.api.errors import InvalidArgument, NotFound
from todocal.api.models import CompletionHistory, Task
from todocal.api.recurrence import parse_week_days

logger = logging.getLogger(__name__)


def get_user_task(user, task_id: str) -> Task:
    """Fetch a task owned by ``user``; someone else's task is reported as missing."""
    try:
        return Task.objects.get(user=user, pk=task_id)
    except Task.DoesNotExist:
        raise NotFound('Task not found')


@transaction.atomic
def record_completion(user, task_id: str, now=None) -> Task:
    """Mark a task done at ``now``.

    Keeps at most one history row per task and local calendar day; completing
    again on the same day only moves that row's timestamp. Recurring tasks
    come back open straight away, their "done today" state being carried by
    ``lastCompleted``.
    """
    now = now or timezone.now()
    local = timezone.localtime(now)
    task = get_user_task(user, task_id)

    CompletionHistory.objects.update_or_create(
        task=task,
        year=local.year,
        month=local.month,
        day=local.day,
        defaults={'completedAt': now, 'user_id': task.user_id},
    )

    task.lastCompleted = now
    task.completed = not task.isRecurring
    task.save(update_fields=['lastCompleted', 'completed', 'updatedAt'])
    logger.info('Task %s completed on %s', task.pk, local.date().isoformat())
    return task


def parse_year_month(year=None, month=None, now=None):
    """Turn raw query values into ints, defaulting to the current local month."""
    local = timezone.localtime(now or timezone.now())
    try:
        year = int(year) if year not in (None, '') else local.year
        month = int(month) if month not in (None, '') else local.month
    except (TypeError, ValueError):
        raise InvalidArgument('Invalid year or month parameter')
    if month < 1 or month > 12:
        raise InvalidArgument('Invalid year or month parameter')
    return year, month


def get_calendar(user, year: int, month: int) -> dict:
    if month < 1 or month > 12:
        raise InvalidArgument('Invalid year or month parameter')

    in_month = CompletionHistory.objects.filter(user=user, year=year, month=month).order_by('day')
    tasks = (
        Task.objects.filter(user=user)
        .order_by('createdAt')
        .prefetch_related(Prefetch('completions', queryset=in_month, to_attr='month_completions'))
    )
    return {
        'year': year,
        'month': month,
        'tasks': [{
            'id': t.id,
            'title': t.title,
            'isRecurring': t.isRecurring,
            'repeatType': t.repeatType or None,
            'weekDays': sorted(parse_week_days(t.weekDays)) if t.weekDays else None,
            'monthDay': t.monthDay,
            'completions': [{
                'day': c.day,
                'completedAt': c.completedAt.isoformat(),
            } for c in t.month_completions],
        } for t in tasks],
    }
