import uuid

from django.db import models
from django.contrib.auth.models import User

from todocal.api.recurrence import Biweekly, Daily, Monthly, Weekly, parse_week_days

REPEAT_TYPES = ('daily', 'weekly', 'monthly', 'biweekly')


def _random_id():
    return str(uuid.uuid4())


class Task(models.Model):
    id = models.CharField(primary_key=True, max_length=64, default=_random_id, editable=False)
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='tasks')
    title = models.CharField(max_length=255)
    completed = models.BooleanField(default=False)
    repeatType = models.CharField(max_length=16, blank=True, default='')
    weekDays = models.CharField(max_length=32, blank=True, null=True)  # "1,3,5", 0=Sunday
    monthDay = models.PositiveSmallIntegerField(blank=True, null=True)
    biweeklyStart = models.DateField(blank=True, null=True)
    dueDate = models.DateField(blank=True, null=True)
    lastCompleted = models.DateTimeField(blank=True, null=True)
    isRecurring = models.BooleanField(default=False)
    createdAt = models.DateTimeField(auto_now_add=True)
    updatedAt = models.DateTimeField(auto_now=True)

    def save(self, *args, **kwargs):
        self.isRecurring = bool(self.repeatType)
        super().save(*args, **kwargs)

    @property
    def recurrence(self):
        """The repeat rule as a tagged value, or None for one-off tasks."""
        if self.repeatType == 'daily':
            return Daily()
        if self.repeatType == 'weekly':
            return Weekly(parse_week_days(self.weekDays))
        if self.repeatType == 'monthly':
            return Monthly(self.monthDay)
        if self.repeatType == 'biweekly':
            return Biweekly(self.biweeklyStart)
        return None

    def __str__(self):
        return self.title


class CompletionHistory(models.Model):
    task = models.ForeignKey(Task, on_delete=models.CASCADE, related_name='completions')
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='completions')
    completedAt = models.DateTimeField()
    year = models.IntegerField()
    month = models.PositiveSmallIntegerField()
    day = models.PositiveSmallIntegerField()

    class Meta:
        unique_together = ('task', 'year', 'month', 'day')
