"""SMS delivery through the Aligo gateway."""

import logging

import httpx

logger = logging.getLogger(__name__)

ALIGO_SEND_URL = "https://apis.aligo.in/send/"


class SmsSender:
    """Sends text messages via Aligo.

    Without credentials it runs in test mode: messages are logged and
    ``send`` returns False.
    """

    def __init__(self, api_key: str = "", user_id: str = "", sender: str = ""):
        self.api_key = api_key
        self.user_id = user_id
        self.sender = sender
        self._http_client: httpx.AsyncClient | None = None

    @property
    def configured(self) -> bool:
        return bool(self.api_key and self.user_id and self.sender)

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=30)
        return self._http_client

    async def send(self, to: str, message: str) -> bool:
        if not to:
            return False
        if not self.configured:
            logger.info("SMS test mode, not sent", extra={"to": to, "sms": message})
            return False

        try:
            resp = await self._get_http_client().post(
                ALIGO_SEND_URL,
                data={
                    "key": self.api_key,
                    "user_id": self.user_id,
                    "sender": self.sender,
                    "receiver": to.replace("-", ""),
                    "msg": message,
                },
            )
            result = resp.json()
        except (httpx.HTTPError, ValueError):
            logger.exception("Aligo send failed")
            return False

        if str(result.get("result_code")) == "1":
            logger.info("SMS sent to %s", to)
            return True
        logger.warning("Aligo error: %s", result)
        return False

    async def send_verification_code(self, to: str, code: str) -> bool:
        return await self.send(to, f"[그림실] 인증번호: {code} (5분 내 입력)")

    async def send_login_info(
        self, to: str, artist_name: str, gallery_url: str, temp_password: str
    ) -> bool:
        message = (
            f"[그림실] {artist_name} 작가님, VIP 갤러리 생성이 완료되었습니다.\n\n"
            f"링크: {gallery_url}\n"
            f"임시비밀번호: {temp_password}\n\n"
            "첫 로그인 후 비밀번호를 꼭 변경해 주세요."
        )
        return await self.send(to, message)

    async def close(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
