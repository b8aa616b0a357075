"""
Tests for app-level endpoints.
"""

from fastapi import status

from app.models import RelationshipKind


class TestHealth:
    """Tests for GET /health endpoint."""

    def test_health_reports_database(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"] == "connected"


class TestStats:
    """Tests for GET /api/stats endpoint."""

    def test_counts(self, test_client, make_guest, make_table, make_relationship):
        table = make_table("Head Table")
        anna = make_guest("Anna", table=table)
        ben = make_guest("Ben")
        make_relationship(anna, ben, relationship_type=RelationshipKind.SPOUSE)

        response = test_client.get("/api/stats")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"guests": 2, "tables": 1, "relationships": 1, "photos": 0}
