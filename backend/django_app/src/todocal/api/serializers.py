from rest_framework import serializers

from todocal.api.models import REPEAT_TYPES
from todocal.api.recurrence import format_week_days, parse_week_days, split_today_upcoming, is_due_today


class TaskCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255, trim_whitespace=True)
    repeatType = serializers.ChoiceField(choices=REPEAT_TYPES, required=False, allow_null=True, allow_blank=True)
    weekDays = serializers.ListField(
        child=serializers.IntegerField(min_value=0, max_value=6),
        required=False, allow_null=True, allow_empty=True,
    )
    monthDay = serializers.IntegerField(min_value=1, max_value=31, required=False, allow_null=True)
    biweeklyStart = serializers.DateField(required=False, allow_null=True)
    dueDate = serializers.DateField(required=False, allow_null=True)

    def validate(self, attrs):
        kind = attrs.get('repeatType') or ''
        if kind == 'monthly' and attrs.get('monthDay') is None:
            raise serializers.ValidationError({'monthDay': 'monthDay is required for monthly tasks'})
        if kind == 'biweekly' and attrs.get('biweeklyStart') is None:
            raise serializers.ValidationError({'biweeklyStart': 'biweeklyStart is required for biweekly tasks'})

        # Only keep the fields the chosen kind uses.
        return {
            'title': attrs['title'],
            'repeatType': kind,
            'weekDays': format_week_days(attrs.get('weekDays')) if kind == 'weekly' else None,
            'monthDay': attrs.get('monthDay') if kind == 'monthly' else None,
            'biweeklyStart': attrs.get('biweeklyStart') if kind == 'biweekly' else None,
            'dueDate': None if kind else attrs.get('dueDate'),
        }


class TaskUpdateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255, trim_whitespace=True, required=False)
    completed = serializers.BooleanField(required=False)


def first_error(errors) -> str:
    """Flatten DRF's error structure into one readable message."""
    if isinstance(errors, dict):
        for field, value in errors.items():
            field = str(field)
            message = first_error(value)
            if field in ('non_field_errors', 'detail') or message.startswith(field):
                return message
            return f'{field}: {message}'
    if isinstance(errors, (list, tuple)) and errors:
        return first_error(errors[0])
    return str(errors)


def task_json(t, now=None):
    return {
        "id": t.id,
        "title": t.title,
        "completed": t.completed,
        "isRecurring": t.isRecurring,
        "repeatType": t.repeatType or None,
        "weekDays": sorted(parse_week_days(t.weekDays)) if t.weekDays else None,
        "monthDay": t.monthDay,
        "biweeklyStart": t.biweeklyStart.isoformat() if t.biweeklyStart else None,
        "dueDate": t.dueDate.isoformat() if t.dueDate else None,
        "lastCompleted": t.lastCompleted.isoformat() if t.lastCompleted else None,
        "createdAt": t.createdAt.isoformat() if t.createdAt else None,
        "updatedAt": t.updatedAt.isoformat() if t.updatedAt else None,
        "dueToday": is_due_today(t, now),
    }


def task_list_json(tasks, now=None):
    today, upcoming = split_today_upcoming(tasks, now)
    return {
        "today": [task_json(t, now) for t in today],
        "upcoming": [task_json(t, now) for t in upcoming],
    }
