"""
Result Notifier.

Formats a graded submission as a text report and posts it to the teacher's
Telegram chat. Delivery is best-effort: failures are logged and never reach
the student.
"""
import html
import logging
from typing import Optional

import httpx

from grammar_quiz.config import settings
from grammar_quiz.exceptions import NotificationDeliveryError
from grammar_quiz.schemas import GradeReport

logger = logging.getLogger(__name__)

CORRECT_MARK = "✅"
WRONG_MARK = "❌"


def format_report(name: str, group: str, report: GradeReport) -> str:
    """Build the multi-line summary sent to the chat."""
    lines = [
        "🧪 New Grammar Test Result",
        f"👤 Name: {html.escape(str(name), quote=False)}",
        f"👥 Group: {html.escape(str(group), quote=False)}",
        f"✅ Score: {report.score} / {report.total}",
        "",
        "Answers:",
    ]

    for r in report.results:
        mark = CORRECT_MARK if r.correct else WRONG_MARK
        key = " / ".join(html.escape(v, quote=False) for v in r.accepted_variants)
        lines.append(
            f'{r.question}) Student: "{html.escape(r.student_answer, quote=False)}" | Correct: {mark} | Key: {key}'
        )

    return "\n".join(lines)


class TelegramNotifier:
    """Sends text reports through the Telegram bot API."""

    def __init__(
        self,
        bot_token: Optional[str] = None,
        chat_id: Optional[str] = None,
        api_base: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        # Unset values are read from settings on every send
        self._bot_token = bot_token
        self._chat_id = chat_id
        self._api_base = api_base
        self._timeout = timeout
        self._transport = transport

    @property
    def bot_token(self) -> Optional[str]:
        return self._bot_token or settings.notify_bot_token

    @property
    def chat_id(self) -> Optional[str]:
        return self._chat_id or settings.notify_chat_id

    @property
    def api_base(self) -> str:
        return (self._api_base or settings.notify_api_base).rstrip("/")

    @property
    def timeout(self) -> float:
        return self._timeout if self._timeout is not None else settings.notify_timeout

    @property
    def enabled(self) -> bool:
        return bool(self.bot_token) and bool(self.chat_id)

    async def _post(self, text: str) -> None:
        url = f"{self.api_base}/bot{self.bot_token}/sendMessage"
        payload = {"chat_id": self.chat_id, "text": text, "parse_mode": "HTML"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, json=payload)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NotificationDeliveryError(
                "Messaging API rejected the report",
                status_code=e.response.status_code,
                response_body=e.response.text,
            ) from e
        except httpx.HTTPError as e:
            raise NotificationDeliveryError(f"Messaging API unreachable: {e!r}") from e

    async def send(self, text: str) -> bool:
        """
        Deliver ``text`` to the configured chat.

        Returns True on delivery, False when skipped or failed. Never raises.
        """
        if not self.enabled:
            logger.warning("NOTIFY_BOT_TOKEN or NOTIFY_CHAT_ID not set in environment; report not sent.")
            return False

        try:
            await self._post(text)
        except NotificationDeliveryError as e:
            # Do not fail the student if the chat is unreachable
            logger.error("Error sending report: %s (status=%s)", e.message, e.api_status_code)
            return False

        logger.debug("Report delivered to chat %s", self.chat_id)
        return True


# Singleton instance
notifier = TelegramNotifier()
