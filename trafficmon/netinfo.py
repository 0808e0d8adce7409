"""Fetching web pages, looking up the public IP address and appending to a log."""

from __future__ import annotations

import datetime as _dt
import locale
import logging
import urllib.error
import urllib.request
from pathlib import Path

from trafficmon.textutil import json_value_simple

_log = logging.getLogger(__name__)

APP_VERSION = "1.0"
USER_AGENT = f"TrafficMonitor/{APP_VERSION}"

# Endpoints answering with a small JSON object holding "ip" and "location".
IPV4_LOOKUP_URL = "https://ipv4.example.com/bejson"
IPV6_LOOKUP_URL = "https://ipv6.example.com/bejson"

_TIMEOUT = 10.0
_IP_MIN_LENGTH = 7
_IP_MAX_LENGTH = 15


class FetchError(OSError):
    """A page could not be fetched; ``code`` holds the HTTP status if there was one."""

    def __init__(self, url: str, reason: str, code: int | None = None) -> None:
        super().__init__(f"cannot fetch {url}: {reason}")
        self.url = url
        self.reason = reason
        self.code = code


def fetch_url(url: str, user_agent: str = "", encoding: str | None = None) -> str:
    """Return the body of ``url`` decoded as text, with line breaks removed.

    ``encoding`` defaults to the locale's preferred encoding. Any status
    other than 200 or a connection failure raises :class:`FetchError`.
    """
    headers = {"User-Agent": user_agent} if user_agent else {}
    request = urllib.request.Request(url, headers=headers)
    try:
        with urllib.request.urlopen(request, timeout=_TIMEOUT) as response:
            status = getattr(response, "status", 200)
            if status != 200:
                raise FetchError(url, f"HTTP status {status}", status)
            raw = response.read()
    except urllib.error.HTTPError as exc:
        raise FetchError(url, f"HTTP status {exc.code}", exc.code) from exc
    except urllib.error.URLError as exc:
        raise FetchError(url, str(exc.reason)) from exc
    except OSError as exc:
        if isinstance(exc, FetchError):
            raise
        raise FetchError(url, str(exc)) from exc
    codec = encoding or locale.getpreferredencoding(False)
    return b"".join(raw.splitlines()).decode(codec, errors="replace")


def _after(index: int, offset: int) -> int:
    """Search start following ``index``; a missed search wraps like an unsigned index."""
    return index + offset if index >= 0 else offset - 1


def parse_ip_page(page: str, global_location: bool = False) -> tuple[str, str]:
    """Extract the IP address and its location from an IP lookup web page.

    The address is the text of the first ``<code>`` element. The location is
    the second ``<code>`` element, or with ``global_location`` the text after
    ``GeoIP: `` up to the end of its paragraph.
    """
    index = page.find("<code>")
    index1 = page.find("</code>", _after(index, 6))
    if index < 0 or index1 < 0:
        ip_address = ""
    else:
        ip_address = page[index + 6:index1]
    if not _IP_MIN_LENGTH <= len(ip_address) <= _IP_MAX_LENGTH:
        ip_address = ""

    if not global_location:
        index = page.find("<code>", _after(index1, 7))
        index1 = page.find("</code>", _after(index, 6))
        skip = 6
    else:
        index = page.find("GeoIP", _after(index1, 7))
        index1 = page.find("</p>", _after(index, 6))
        skip = 7
    if index < 0 or index1 < 0:
        ip_location = ""
    else:
        ip_location = page[index + skip:index1]
    return ip_address, ip_location


def internet_ip(ipv6: bool = False) -> tuple[str, str]:
    """Public IP address and its location; empty strings when the lookup fails."""
    url = IPV6_LOOKUP_URL if ipv6 else IPV4_LOOKUP_URL
    try:
        raw = fetch_url(url, USER_AGENT, "utf-8")
    except FetchError as exc:
        _log.warning("%s", exc)
        return "", ""
    return json_value_simple(raw, "ip"), json_value_simple(raw, "location")


def write_log(
    text: str, file_path: str | Path, now: _dt.datetime | None = None
) -> None:
    """Append ``text`` to the log file, prefixed with a millisecond time stamp."""
    now = now or _dt.datetime.now()
    stamp = "%d/%.2d/%.2d %.2d:%.2d:%.2d.%.3d: " % (
        now.year,
        now.month,
        now.day,
        now.hour,
        now.minute,
        now.second,
        now.microsecond // 1000,
    )
    with open(file_path, "a", encoding="utf-8") as file:
        file.write(f"{stamp}{text}\n")