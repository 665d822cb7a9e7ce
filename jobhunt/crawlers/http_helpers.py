from __future__ import annotations
from bs4 import BeautifulSoup
import httpx

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
)


def _client(timeout: float) -> httpx.Client:
    return httpx.Client(timeout=timeout, follow_redirects=True, headers={"User-Agent": USER_AGENT})


def fetch_text(url: str, timeout: float = 30, params: dict | None = None) -> str:
    with _client(timeout) as client:
        resp = client.get(url, params=params)
        resp.raise_for_status()
        return resp.text


def fetch_bytes(url: str, timeout: float = 30) -> bytes:
    with _client(timeout) as client:
        resp = client.get(url)
        resp.raise_for_status()
        return resp.content


def fetch_json(url: str, timeout: float = 30):
    with _client(timeout) as client:
        resp = client.get(url, headers={"Accept": "application/json"})
        resp.raise_for_status()
        return resp.json()


def soup_of(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")
