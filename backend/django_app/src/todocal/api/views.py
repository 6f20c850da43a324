import functools
import json
import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.contrib.auth import authenticate, login, logout
from django.contrib.auth.models import User
from django.views.decorators.http import require_http_methods
from django.db import transaction
from django.utils import timezone

from todocal.api import services
from todocal.api.errors import ApiError, Internal, InvalidArgument, Unauthenticated
from todocal.api.models import Task
from todocal.api.serializers import (
    TaskCreateSerializer, TaskUpdateSerializer, first_error, task_json, task_list_json,
)

SERVICE_NAME = 'todocal-backend'
MIN_PASSWORD_LENGTH = 8

logger = logging.getLogger(__name__)


def api_errors(view):
    """Render ApiError as ``{"error": ...}`` and anything unexpected as a 500."""
    @functools.wraps(view)
    def wrapper(request, *args, **kwargs):
        try:
            return view(request, *args, **kwargs)
        except ApiError as e:
            return JsonResponse({"error": e.message}, status=e.status)
        except Exception:
            logger.exception('Unhandled error in %s %s', request.method, request.path)
            e = Internal()
            return JsonResponse({"error": e.message}, status=e.status)
    return wrapper


def _body(request):
    try:
        body = json.loads(request.body or b"{}")
    except ValueError:
        body = {}
    return body if isinstance(body, dict) else {}


def _require_user(request):
    if not request.user.is_authenticated:
        raise Unauthenticated()
    return request.user


def _validated(serializer):
    if not serializer.is_valid():
        raise InvalidArgument(first_error(serializer.errors))
    return serializer.validated_data


def _user_json(user):
    return {"id": user.id, "email": user.email, "name": user.first_name}


@require_http_methods(["GET"])
def healthz(request):
    return JsonResponse({"ok": True})


@require_http_methods(["GET"])
def ping(request):
    return JsonResponse({"ok": True, "service": SERVICE_NAME})


@csrf_exempt
@require_http_methods(["POST"])
@api_errors
def register(request):
    body = _body(request)
    name = (body.get('name') or '').strip()
    email = (body.get('email') or '').strip().lower()
    password = (body.get('password') or '').strip()
    if not name or not email or not password:
        raise InvalidArgument('name, email and password are required')
    if len(password) < MIN_PASSWORD_LENGTH:
        raise InvalidArgument(f'password must be at least {MIN_PASSWORD_LENGTH} characters')
    if User.objects.filter(username=email).exists():
        raise InvalidArgument('Email already registered')
    user = User.objects.create_user(username=email, email=email, password=password, first_name=name)
    login(request, user)
    return JsonResponse({"ok": True, "user": _user_json(user)}, status=201)


@csrf_exempt
@require_http_methods(["POST"])
@api_errors
def login_view(request):
    body = _body(request)
    email = (body.get('email') or '').strip().lower()
    password = body.get('password') or ''
    user = authenticate(request, username=email, password=password)
    if user is None:
        raise Unauthenticated('Invalid credentials')
    login(request, user)
    return JsonResponse({"ok": True, "user": _user_json(user)})


@csrf_exempt
@require_http_methods(["POST"])
def logout_view(request):
    logout(request)
    return JsonResponse({"ok": True})


@require_http_methods(["GET"])
def me(request):
    if request.user.is_authenticated:
        return JsonResponse({"user": _user_json(request.user)})
    return JsonResponse({"user": None})


@csrf_exempt
@require_http_methods(["GET", "POST"])
@api_errors
def tasks(request):
    user = _require_user(request)
    if request.method == 'GET':
        items = Task.objects.filter(user=user).order_by('-createdAt')
        return JsonResponse(task_list_json(items, timezone.now()))

    data = _validated(TaskCreateSerializer(data=_body(request)))
    t = Task(user=user, **data)
    t.save()
    logger.info('Task %s created for user %s', t.pk, user.pk)
    return JsonResponse(task_json(t), status=201)


@csrf_exempt
@require_http_methods(["GET", "PATCH", "DELETE"])
@api_errors
def task_detail(request, task_id: str):
    user = _require_user(request)
    t = services.get_user_task(user, task_id)
    if request.method == 'GET':
        return JsonResponse(task_json(t))
    if request.method == 'DELETE':
        t.delete()
        return JsonResponse({"ok": True})

    data = _validated(TaskUpdateSerializer(data=_body(request)))
    with transaction.atomic():
        if 'title' in data:
            t.title = data['title']
            t.save(update_fields=['title', 'updatedAt'])
        if data.get('completed') is True:
            t = services.record_completion(user, t.pk)
        elif data.get('completed') is False:
            # History is kept; only the flag changes.
            t.completed = False
            t.save(update_fields=['completed', 'updatedAt'])
    return JsonResponse(task_json(t))


@require_http_methods(["GET"])
@api_errors
def calendar(request):
    user = _require_user(request)
    year, month = services.parse_year_month(request.GET.get('year'), request.GET.get('month'))
    return JsonResponse(services.get_calendar(user, year, month))
