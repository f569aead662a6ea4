"""Integration tests for the artwork router: public reads, admin writes."""

VIP_HOST = "hahyunju.com"

ARTWORK = {"title": "봄날", "year": 2024, "month": 4, "medium": "Oil on canvas"}


class TestArtworkRouter:
    async def test_list_empty(self, client):
        resp = await client.get("/artworks")
        assert resp.status_code == 200
        assert resp.json() == []

    async def test_create_requires_login(self, client):
        resp = await client.post("/artworks", json=ARTWORK)
        assert resp.status_code == 401

    async def test_create_and_read(self, client, default_admin):
        resp = await client.post("/artworks", json=ARTWORK, headers=default_admin)
        assert resp.status_code == 201
        created = resp.json()
        assert created["artist_id"] == "-vqsk"
        assert created["title"] == "봄날"

        resp = await client.get(f"/artworks/{created['id']}")
        assert resp.status_code == 200
        assert resp.json()["medium"] == "Oil on canvas"

    async def test_payload_cannot_pick_tenant(self, client, default_admin):
        resp = await client.post(
            "/artworks", json={**ARTWORK, "artist_id": "vip-gallery-01"}, headers=default_admin
        )
        assert resp.json()["artist_id"] == "-vqsk"

    async def test_validation(self, client, default_admin):
        resp = await client.post(
            "/artworks", json={**ARTWORK, "month": 13}, headers=default_admin
        )
        assert resp.status_code == 422

    async def test_isolated_by_host(self, client, default_admin):
        await client.post("/artworks", json=ARTWORK, headers=default_admin)
        resp = await client.get("/artworks", headers={"host": VIP_HOST})
        assert resp.json() == []
        resp = await client.get("/artworks")
        assert len(resp.json()) == 1

    async def test_other_tenant_sees_404(self, client, default_admin):
        created = (await client.post("/artworks", json=ARTWORK, headers=default_admin)).json()
        resp = await client.get(f"/artworks/{created['id']}", headers={"host": VIP_HOST})
        assert resp.status_code == 404

    async def test_session_bound_to_its_tenant(self, client, default_admin):
        # A token for -vqsk must not write into the gallery served on another host.
        headers = {**default_admin, "host": VIP_HOST}
        resp = await client.post("/artworks", json=ARTWORK, headers=headers)
        assert resp.status_code == 403

    async def test_update(self, client, default_admin):
        created = (await client.post("/artworks", json=ARTWORK, headers=default_admin)).json()
        resp = await client.put(
            f"/artworks/{created['id']}", json={"title": "여름"}, headers=default_admin
        )
        assert resp.status_code == 200
        assert resp.json()["title"] == "여름"
        assert resp.json()["year"] == 2024

    async def test_update_clears_price(self, client, default_admin):
        body = {**ARTWORK, "price": "300,000", "description": "봄"}
        created = (await client.post("/artworks", json=body, headers=default_admin)).json()
        resp = await client.put(
            f"/artworks/{created['id']}", json={"price": None}, headers=default_admin
        )
        assert resp.status_code == 200
        assert resp.json()["price"] is None
        assert resp.json()["description"] == "봄"
        assert resp.json()["title"] == "봄날"

    async def test_update_missing(self, client, default_admin):
        resp = await client.put("/artworks/nope", json={"title": "x"}, headers=default_admin)
        assert resp.status_code == 404

    async def test_delete(self, client, default_admin):
        created = (await client.post("/artworks", json=ARTWORK, headers=default_admin)).json()
        resp = await client.delete(f"/artworks/{created['id']}", headers=default_admin)
        assert resp.status_code == 204
        resp = await client.get(f"/artworks/{created['id']}")
        assert resp.status_code == 404

    async def test_delete_missing(self, client, default_admin):
        resp = await client.delete("/artworks/nope", headers=default_admin)
        assert resp.status_code == 404

    async def test_vip_override_scopes_reads(self, client, vip_admin):
        await client.post("/artworks", json=ARTWORK, headers=vip_admin)
        resp = await client.get("/artworks?vipId=vip-gallery-01")
        assert len(resp.json()) == 1
