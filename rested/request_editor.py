"""Editing, sending and saving a single HTTP request."""

from __future__ import annotations

import copy
import logging
import os
import subprocess
import tempfile
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from rested.prompts import PromptAborted, Prompter
from rested.storage import Collection, Database, RestedRequest

logger = logging.getLogger(__name__)

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")
DEFAULT_EDITOR = "nano"

MENU_ITEMS = (
    "Send request",
    "Set request name",
    "Set method",
    "Set request URL",
    "Set headers",
    "Set body",
    "Save to collection",
    "Back",
)


@dataclass
class HttpResponse:
    """What came back from the server."""

    status: int
    reason: str
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: bytes = b""

    @property
    def status_line(self) -> str:
        return f"{self.status} {self.reason}"


def set_request_method(request: RestedRequest, prompter: Prompter) -> None:
    """Ask for the HTTP method and store it on *request*."""
    _, request.method = prompter.select("HTTP Method", HTTP_METHODS)


def set_request_url(request: RestedRequest, prompter: Prompter) -> None:
    """Ask for the request URL and store it on *request*."""
    request.url = prompter.ask("Request URL")


def set_request_name(request: RestedRequest, prompter: Prompter) -> None:
    """Ask for the request name and store it on *request*."""
    request.request_name = prompter.ask("Request name")


def edit_body(request: RestedRequest, editor: str | None = None) -> None:
    """Open the body in an external editor and keep the trimmed result."""
    program = editor or os.environ.get("EDITOR") or DEFAULT_EDITOR
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            prefix="rested-body-",
            suffix=".txt",
            delete=False,
        ) as handle:
            handle.write(request.body)
            path = Path(handle.name)
    except OSError as exc:
        logger.warning("Could not create temp file: %s", exc)
        return

    try:
        try:
            subprocess.run([program, str(path)], check=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            logger.warning("Editor failed: %s", exc)
            return
        try:
            edited = path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Failed to read edited body: %s", exc)
            return
        request.body = edited.strip()
    finally:
        path.unlink(missing_ok=True)


def set_header(request: RestedRequest, prompter: Prompter) -> None:
    """Ask for one header name and value and add it to *request*."""
    try:
        key = prompter.ask("Header Key (e.g. Content-Type)")
    except PromptAborted:
        key = ""
    if not key.strip():
        prompter.say("Header key input cancelled or invalid")
        return
    try:
        value = prompter.ask(f"Value for '{key}'")
    except PromptAborted:
        prompter.say("Header value input cancelled or invalid")
        return
    request.headers[key] = value


def send_request(request: RestedRequest, timeout: float | None = None) -> HttpResponse:
    """Send *request*; HTTP error statuses are returned, not raised."""
    data = request.body.encode("utf-8") if request.body else None
    http_request = urllib.request.Request(
        request.url, data=data, method=request.method or "GET"
    )
    for key, value in request.headers.items():
        http_request.add_header(key, value)

    options = {} if timeout is None else {"timeout": timeout}
    try:
        with urllib.request.urlopen(http_request, **options) as reply:
            return HttpResponse(
                status=reply.status,
                reason=reply.reason,
                headers=list(reply.headers.items()),
                body=reply.read(),
            )
    except urllib.error.HTTPError as err:
        with err:
            return HttpResponse(
                status=err.code,
                reason=str(err.reason),
                headers=list(err.headers.items()) if err.headers else [],
                body=err.read(),
            )


def format_response(response: HttpResponse) -> str:
    """Render *response* as the text block shown to the user."""
    lines = ["\n------ Response ------", f"Status: {response.status_line}", "Headers:"]
    lines.extend(f"  {key}: {value}" for key, value in response.headers)
    lines.append("Body:")
    lines.append(f"  {response.body.decode('utf-8', errors='replace')}")
    lines.append("----------------------")
    return "\n".join(lines)


def save_request_to_collection(
    db: Database, request: RestedRequest, prompter: Prompter
) -> Collection | None:
    """Copy *request* into a collection the user picks; returns that collection."""
    if not db.collections:
        prompter.say("⚠️ No collections found. Please create one first.")
        return None

    if not request.request_name:
        prompter.say(
            "⚠️ Request must have a request name to be saved. Please create one first."
        )
        try:
            prompter.ask("Press enter to continue.")
        except PromptAborted:
            pass
        return None

    titles = [collection.title for collection in db.collections]
    try:
        index, _ = prompter.select("Save request to collection", titles)
    except PromptAborted as exc:
        prompter.say(f"Prompt failed: {exc}")
        return None

    target = db.collections[index]
    target.requests.append(copy.deepcopy(request))
    prompter.say(
        f"✅ Request '{request.request_name}' added to collection '{target.title}'"
    )
    return target


def request_menu(
    db: Database, request: RestedRequest, prompter: Prompter
) -> RestedRequest:
    """Edit a copy of *request* until the user goes back; returns the copy."""
    request = copy.deepcopy(request)

    def send() -> None:
        prompter.say(format_response(send_request(request)))

    actions: dict[str, Callable[[], object]] = {
        "Send request": send,
        "Set request name": lambda: set_request_name(request, prompter),
        "Set method": lambda: set_request_method(request, prompter),
        "Set request URL": lambda: set_request_url(request, prompter),
        "Set headers": lambda: set_header(request, prompter),
        "Set body": lambda: edit_body(request),
        "Save to collection": lambda: save_request_to_collection(db, request, prompter),
    }

    while True:
        _, choice = prompter.select(request.request_name or "New request", MENU_ITEMS)
        if choice == "Back":
            return request
        actions[choice]()