"""Shared test helpers: scripted prompts, a fake requests session and zip archives."""

import io
import json
import zipfile

import requests


class ScriptedPrompt:
    """Answers prompts from a list and records every question asked."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.questions = []

    def prompt(self, text, default=None):
        self.questions.append((text, default))
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {text!r}")
        answer = self.answers.pop(0)
        return answer if answer else (default or "")


class FakeResponse:
    def __init__(self, status_code=200, content=b""):
        self.status_code = status_code
        self.content = content

    @property
    def text(self):
        return self.content.decode("utf-8")

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.content), chunk_size):
            yield self.content[i:i + chunk_size]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeSession:
    """Serves canned responses by URL; unknown URLs raise ConnectionError."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        route = self.routes.get(url)
        if route is None:
            raise requests.ConnectionError(f"no route to {url}")
        if isinstance(route, Exception):
            raise route
        return route


def make_app_zip(folder, version="1.0.0", extra_files=None):
    """Build an in-memory GitHub-style branch archive rooted at ``folder``."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as z:
        z.writestr(f"{folder}/package.json", json.dumps({"name": "world-hash", "version": version}))
        for name, data in (extra_files or {}).items():
            z.writestr(f"{folder}/{name}", data)
    return buf.getvalue()
