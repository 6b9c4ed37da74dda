import json

import requests


def make_response(status_code=200, body=None, link=None, raw_body=None):
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    if raw_body is None:
        raw_body = json.dumps(body if body is not None else [])
    response._content = raw_body.encode("utf-8")
    response._content_consumed = True
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json; charset=utf-8"
    if link is not None:
        response.headers["Link"] = link
    return response


def repo_json(id, name, user="octocat"):
    return {
        "id": id,
        "name": name,
        "full_name": f"{user}/{name}",
        "ssh_url": f"git@github.com:{user}/{name}.git",
        "private": False,
    }
