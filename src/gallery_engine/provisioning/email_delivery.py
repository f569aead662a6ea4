"""Login-info e-mail for newly provisioned galleries (SendGrid or Resend)."""

import logging

import httpx

logger = logging.getLogger(__name__)

SUBJECT_TEMPLATE = "[그림실] {artist_name} 작가님의 온라인 화첩 생성이 완료되었습니다."

# provider -> (endpoint, accepted status codes)
PROVIDERS = {
    "sendgrid": ("https://api.sendgrid.com/v3/mail/send", {200, 202}),
    "resend": ("https://api.resend.com/emails", {200, 201}),
}


class EmailSender:
    """Delivers the gallery link and temporary password by e-mail.

    With no provider (or an unknown one) nothing is sent and
    ``send_login_info`` reports ``False``.
    """

    def __init__(
        self,
        provider: str = "",
        api_key: str = "",
        from_email: str = "gallery@grim-sil.com",
        from_name: str = "그림실",
        timeout: float = 30.0,
    ):
        self.provider = provider.lower()
        self.api_key = api_key
        self.from_email = from_email
        self.from_name = from_name
        self.timeout = timeout

    @property
    def configured(self) -> bool:
        return self.provider in PROVIDERS and bool(self.api_key)

    async def send_login_info(
        self,
        to_email: str,
        artist_name: str,
        gallery_url: str,
        temp_password: str,
    ) -> bool:
        if not to_email:
            return False
        if not self.configured:
            logger.info("No email provider configured; login info for %s not sent", to_email)
            return False

        subject = SUBJECT_TEMPLATE.format(artist_name=artist_name)
        body = self._build_body(artist_name, gallery_url, temp_password)
        return await self._deliver(self._payload(to_email, subject, body), to_email)

    def _build_body(self, artist_name: str, gallery_url: str, temp_password: str) -> str:
        return (
            f"축하합니다! {artist_name} 작가님\n\n"
            "작가님만의 온라인 화첩이 성공적으로 생성되었습니다.\n\n"
            f"갤러리 링크: {gallery_url}\n"
            f"임시 비밀번호: {temp_password}\n\n"
            "보안을 위해 로그인 후 반드시 비밀번호를 변경해 주세요.\n\n"
            "본 메일은 발신전용입니다."
        )

    def _payload(self, to_email: str, subject: str, body: str) -> dict:
        if self.provider == "sendgrid":
            return {
                "personalizations": [{"to": [{"email": to_email}]}],
                "from": {"email": self.from_email, "name": self.from_name},
                "subject": subject,
                "content": [{"type": "text/plain", "value": body}],
            }
        return {
            "from": f"{self.from_name} <{self.from_email}>",
            "to": [to_email],
            "subject": subject,
            "text": body,
        }

    async def _deliver(self, payload: dict, to_email: str) -> bool:
        endpoint, accepted = PROVIDERS[self.provider]
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.post(
                    endpoint,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    json=payload,
                )
        except httpx.HTTPError:
            logger.exception("Login info email via %s failed", self.provider)
            return False

        if resp.status_code not in accepted:
            logger.warning(
                "Email provider rejected login info",
                extra={"provider": self.provider, "status": resp.status_code},
            )
            return False
        logger.info("Login info emailed to %s via %s", to_email, self.provider)
        return True
