from __future__ import annotations
from html import escape

import httpx

from jobhunt.models.listing import ListingRecord

API_BASE = "https://api.telegram.org"


def _clip(value: str, limit: int) -> str:
    if len(value) > limit:
        return f"{value[: limit - 3]}..."
    return value


class TelegramNotifier:
    MAX_MESSAGE_LEN = 4096
    # Applied to plain text before escaping so markup is never cut.
    MAX_TITLE_LEN = 200
    MAX_FIELD_LEN = 80
    MAX_STACK_LEN = 200

    def __init__(self, bot_token: str, timeout: float = 20):
        self.bot_token = bot_token
        self.timeout = timeout

    @classmethod
    def build_listing_message(cls, listing: ListingRecord) -> str:
        lines = [
            f"🔍 <b>{escape(_clip(listing.title, cls.MAX_TITLE_LEN))}</b>",
            f"🏢 {escape(_clip(listing.company, cls.MAX_FIELD_LEN))}",
            f"📍 {escape(_clip(listing.location, cls.MAX_FIELD_LEN))}",
            f"🌐 {escape(_clip(listing.platform, cls.MAX_FIELD_LEN))}",
        ]
        if listing.seniority:
            lines.append(f"👤 {escape(_clip(listing.seniority, cls.MAX_FIELD_LEN))}")
        if listing.tech_stack:
            lines.append(f"💻 {escape(_clip(', '.join(listing.tech_stack), cls.MAX_STACK_LEN))}")
        lines.append("")
        lines.append(f'🔗 <a href="{escape(listing.url, quote=True)}">View Job</a>')
        return "\n".join(lines)

    def send_message(self, chat_id: int, text: str) -> tuple[bool, str]:
        if not self.bot_token:
            return False, "telegram bot token not configured"
        payload = {"chat_id": chat_id, "text": text, "parse_mode": "HTML", "disable_web_page_preview": False}
        try:
            with httpx.Client(timeout=self.timeout) as client:
                resp = client.post(f"{API_BASE}/bot{self.bot_token}/sendMessage", json=payload)
                if resp.status_code >= 300:
                    return False, f"telegram status={resp.status_code} body={resp.text[:300]}"
            return True, "ok"
        except Exception as exc:  # noqa: BLE001
            return False, str(exc)
