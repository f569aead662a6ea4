"""Integration tests for studio inspirations: public reads, admin writes."""

VIP_HOST = "hahyunju.com"

INSPIRATION = {
    "image_url": "https://img/1_blur.jpg",
    "original_image_url": "https://img/1_original.jpg",
    "color_palette": ["#223344"],
    "metadata": {"memo": "빛"},
}


class TestInspirationRouter:
    async def test_list_empty(self, client):
        resp = await client.get("/inspirations")
        assert resp.status_code == 200
        assert resp.json() == []

    async def test_create_requires_login(self, client):
        resp = await client.post("/inspirations", json=INSPIRATION)
        assert resp.status_code == 401

    async def test_create_and_list(self, client, default_admin):
        resp = await client.post("/inspirations", json=INSPIRATION, headers=default_admin)
        assert resp.status_code == 201
        created = resp.json()
        assert created["artist_id"] == "-vqsk"
        assert created["image_url"] == "https://img/1_original.jpg"
        assert created["metadata"]["original_image_url"] == "https://img/1_original.jpg"

        resp = await client.get("/inspirations")
        assert [i["id"] for i in resp.json()] == [created["id"]]
        assert (await client.get("/inspirations", headers={"host": VIP_HOST})).json() == []

    async def test_duplicate_id(self, client, default_admin):
        body = {**INSPIRATION, "id": "insp-1"}
        await client.post("/inspirations", json=body, headers=default_admin)
        resp = await client.post("/inspirations", json=body, headers=default_admin)
        assert resp.status_code == 409

    async def test_validation(self, client, default_admin):
        resp = await client.post("/inspirations", json={"image_url": ""}, headers=default_admin)
        assert resp.status_code == 422

    async def test_patch_metadata(self, client, default_admin):
        created = (await client.post(
            "/inspirations", json=INSPIRATION, headers=default_admin
        )).json()
        resp = await client.patch(
            f"/inspirations/{created['id']}",
            json={"metadata": {"memo": "노을"}},
            headers=default_admin,
        )
        assert resp.status_code == 200
        assert resp.json()["metadata"] == {"memo": "노을"}

    async def test_patch_requires_metadata(self, client, default_admin):
        created = (await client.post(
            "/inspirations", json=INSPIRATION, headers=default_admin
        )).json()
        resp = await client.patch(
            f"/inspirations/{created['id']}", json={}, headers=default_admin
        )
        assert resp.status_code == 422

    async def test_patch_requires_admin(self, client, default_admin):
        created = (await client.post(
            "/inspirations", json=INSPIRATION, headers=default_admin
        )).json()
        resp = await client.patch(
            f"/inspirations/{created['id']}", json={"metadata": {}}
        )
        assert resp.status_code == 401

    async def test_other_tenant_admin_gets_404(self, client, default_admin, vip_admin):
        created = (await client.post(
            "/inspirations", json=INSPIRATION, headers=default_admin
        )).json()
        resp = await client.patch(
            f"/inspirations/{created['id']}", json={"metadata": {}}, headers=vip_admin
        )
        assert resp.status_code == 404
        resp = await client.delete(f"/inspirations/{created['id']}", headers=vip_admin)
        assert resp.status_code == 404

    async def test_delete(self, client, default_admin):
        created = (await client.post(
            "/inspirations", json=INSPIRATION, headers=default_admin
        )).json()
        resp = await client.delete(f"/inspirations/{created['id']}", headers=default_admin)
        assert resp.status_code == 204
        assert (await client.get("/inspirations")).json() == []
        resp = await client.delete(f"/inspirations/{created['id']}", headers=default_admin)
        assert resp.status_code == 404
