"""Integration tests for VIP artist provisioning, search and removal."""


class TestArtistAdmin:
    async def test_create_requires_key(self, client):
        resp = await client.post("/artists", json={"name": "A", "password": "1234"})
        assert resp.status_code == 422  # missing header

    async def test_create_wrong_key(self, client):
        resp = await client.post(
            "/artists",
            json={"name": "A", "password": "1234"},
            headers={"X-Gallery-Api-Key": "wrong-key"},
        )
        assert resp.status_code == 403

    async def test_create_success(self, client, admin_headers):
        resp = await client.post(
            "/artists",
            json={"name": "하현주", "password": "1234", "is_free": True},
            headers=admin_headers,
        )
        assert resp.status_code == 201
        data = resp.json()
        assert data["link_id"] == "gallery-vip-01"
        assert data["artist_type"] == "vip"
        assert data["is_free"] is True
        assert data["id"].startswith("-")

    async def test_short_password_rejected(self, client, admin_headers):
        resp = await client.post(
            "/artists", json={"name": "A", "password": "12"}, headers=admin_headers
        )
        assert resp.status_code == 422

    async def test_list(self, client, admin_headers):
        for name in ("A", "B"):
            await client.post("/artists", json={"name": name, "password": "1234"}, headers=admin_headers)
        resp = await client.get("/artists", headers=admin_headers)
        assert [a["link_id"] for a in resp.json()] == ["gallery-vip-01", "gallery-vip-02"]

    async def test_delete(self, client, admin_headers):
        created = (await client.post(
            "/artists", json={"name": "A", "password": "1234"}, headers=admin_headers
        )).json()
        resp = await client.delete(f"/artists/{created['id']}", headers=admin_headers)
        assert resp.status_code == 204
        resp = await client.get(f"/artists/{created['link_id']}")
        assert resp.status_code == 404

    async def test_delete_unknown(self, client, admin_headers):
        resp = await client.delete("/artists/-none", headers=admin_headers)
        assert resp.status_code == 404


class TestArtistPublic:
    async def test_lookup_by_link(self, client, admin_headers):
        created = (await client.post(
            "/artists", json={"name": "문혜경", "password": "1234"}, headers=admin_headers
        )).json()
        resp = await client.get("/artists/gallery-vip-01")
        assert resp.status_code == 200
        assert resp.json()["id"] == created["id"]

    async def test_lookup_unknown(self, client):
        resp = await client.get("/artists/gallery-vip-99")
        assert resp.status_code == 404

    async def test_search(self, client, admin_headers):
        await client.post("/artists", json={"name": "Moon Hyekyung", "password": "1234"}, headers=admin_headers)
        await client.post("/artists", json={"name": "Park", "password": "1234"}, headers=admin_headers)
        resp = await client.get("/artists/search", params={"q": "MOON"})
        assert resp.status_code == 200
        hits = resp.json()["artists"]
        assert len(hits) == 1
        assert hits[0]["name"] == "Moon Hyekyung"
        assert hits[0]["archive_url"] == "https://grim-sil.vercel.app/gallery-vip-01"

    async def test_search_empty_query(self, client):
        resp = await client.get("/artists/search")
        assert resp.json() == {"artists": []}

    async def test_new_gallery_is_its_own_tenant(self, client, admin_headers):
        created = (await client.post(
            "/artists", json={"name": "A", "password": "pass-a"}, headers=admin_headers
        )).json()
        resp = await client.post(
            f"/auth/login?vipId={created['id']}", json={"password": "pass-a"}
        )
        assert resp.status_code == 200
        token = resp.json()["token"]
        client.cookies.clear()

        resp = await client.post(
            f"/artworks?vipId={created['id']}",
            json={"title": "첫 작품", "year": 2025},
            headers={"Authorization": f"Bearer {token}"},
        )
        assert resp.status_code == 201
        assert resp.json()["artist_id"] == created["id"]
        assert (await client.get("/artworks")).json() == []
