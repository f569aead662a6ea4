"""Integration tests for SMS verification endpoints (test mode)."""

from unittest.mock import AsyncMock

PHONE = "010-1234-5678"


class TestSendCode:
    async def test_test_mode_echoes_code(self, client):
        resp = await client.post("/sms/send", json={"phone": PHONE})
        assert resp.status_code == 200
        data = resp.json()
        assert data["success"] is True
        assert data["test_mode"] is True
        assert len(data["test_code"]) == 6

    async def test_invalid_phone(self, client):
        resp = await client.post("/sms/send", json={"phone": "1"})
        assert resp.status_code == 422

    async def test_gateway_failure(self, client, monkeypatch):
        from gallery_engine.deps import get_sms_sender

        sender = get_sms_sender()
        monkeypatch.setattr(sender, "api_key", "k")
        monkeypatch.setattr(sender, "user_id", "u")
        monkeypatch.setattr(sender, "sender", "s")
        monkeypatch.setattr(sender, "send_verification_code", AsyncMock(return_value=False))

        resp = await client.post("/sms/send", json={"phone": PHONE})
        assert resp.status_code == 502

    async def test_gateway_success_hides_code(self, client, monkeypatch):
        from gallery_engine.deps import get_sms_sender

        sender = get_sms_sender()
        monkeypatch.setattr(sender, "api_key", "k")
        monkeypatch.setattr(sender, "user_id", "u")
        monkeypatch.setattr(sender, "sender", "s")
        monkeypatch.setattr(sender, "send_verification_code", AsyncMock(return_value=True))

        resp = await client.post("/sms/send", json={"phone": PHONE})
        assert resp.status_code == 200
        assert resp.json()["test_mode"] is False
        assert resp.json()["test_code"] is None


class TestVerifyCode:
    async def test_verify_success(self, client):
        code = (await client.post("/sms/send", json={"phone": PHONE})).json()["test_code"]
        resp = await client.post("/sms/verify", json={"phone": "01012345678", "code": code})
        assert resp.status_code == 200
        assert resp.json()["verified"] is True

    async def test_code_single_use(self, client):
        code = (await client.post("/sms/send", json={"phone": PHONE})).json()["test_code"]
        await client.post("/sms/verify", json={"phone": PHONE, "code": code})
        resp = await client.post("/sms/verify", json={"phone": PHONE, "code": code})
        assert resp.status_code == 400
        assert resp.json()["detail"]["code"] == "NOT_REQUESTED"

    async def test_mismatch(self, client):
        code = (await client.post("/sms/send", json={"phone": PHONE})).json()["test_code"]
        wrong = "000000" if code != "000000" else "111111"
        resp = await client.post("/sms/verify", json={"phone": PHONE, "code": wrong})
        assert resp.status_code == 400
        assert resp.json()["detail"]["code"] == "MISMATCH"

    async def test_not_requested(self, client):
        resp = await client.post("/sms/verify", json={"phone": "01000000000", "code": "123456"})
        assert resp.status_code == 400
        assert resp.json()["detail"]["code"] == "NOT_REQUESTED"
