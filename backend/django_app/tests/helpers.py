import json
from datetime import datetime, timezone as dt_timezone


def utc(*args):
    return datetime(*args, tzinfo=dt_timezone.utc)


def send_json(client, method, url, payload):
    return getattr(client, method)(url, data=json.dumps(payload), content_type='application/json')
