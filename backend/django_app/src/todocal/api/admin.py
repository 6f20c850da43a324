from django.contrib import admin

from todocal.api.models import CompletionHistory, Task


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ('title', 'user', 'repeatType', 'completed', 'lastCompleted')
    list_filter = ('repeatType', 'completed')


@admin.register(CompletionHistory)
class CompletionHistoryAdmin(admin.ModelAdmin):
    list_display = ('task', 'user', 'year', 'month', 'day', 'completedAt')
