"""
API tests for the palette catalog endpoints.
"""


class TestPalettesAPI:
    """Test the /api/palettes endpoints"""

    def test_list_palettes(self, test_client):
        response = test_client.get("/api/palettes")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 6
        # Catalog records use camelCase keys
        assert data[0]["usageCount"] == 0
        assert data[0]["isTrending"] is False
        assert data[0]["id"] == 1

    def test_get_palette(self, test_client):
        response = test_client.get("/api/palettes/2")

        assert response.status_code == 200
        assert response.json()["name"] == "Ocean Breeze"

    def test_get_missing_palette(self, test_client):
        response = test_client.get("/api/palettes/999")

        assert response.status_code == 404
        assert response.json()["detail"] == "Palette not found"

    def test_create_palette(self, test_client):
        response = test_client.post("/api/palettes", json={
            "name": "Brand",
            "colors": ["#3B82F6", "#fff"],
            "tags": ["brand", "  "]
        })

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 7
        assert data["colors"] == ["#3b82f6", "#ffffff"]
        assert data["tags"] == ["brand"]
        assert data["description"] == ""

        assert len(test_client.get("/api/palettes").json()) == 7

    def test_create_palette_invalid_color(self, test_client):
        response = test_client.post("/api/palettes", json={"name": "Bad", "colors": ["#12"]})
        assert response.status_code == 422

    def test_create_palette_requires_colors(self, test_client):
        response = test_client.post("/api/palettes", json={"name": "Empty", "colors": []})
        assert response.status_code == 422

    def test_use_and_trending(self, test_client):
        for _ in range(2):
            response = test_client.post("/api/palettes/5/use")
            assert response.status_code == 200
            assert response.json() == {"message": "Usage updated"}

        trending = test_client.get("/api/palettes/trending").json()
        assert trending[0]["id"] == 5
        assert trending[0]["usageCount"] == 2
        assert len(trending) == 6

    def test_use_missing_palette(self, test_client):
        assert test_client.post("/api/palettes/999/use").status_code == 404
