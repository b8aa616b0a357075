"""
Tests for graph router.
"""

from fastapi import status

from app.models import RelationshipKind, RsvpStatus


class TestGraphData:
    """Tests for GET /graph/data endpoint."""

    def test_nodes_and_links(self, test_client, make_guest, make_table, make_relationship):
        head = make_table("Head Table")
        anna = make_guest("Anna", "Adams", table=head)
        ben = make_guest("Ben", "Brown")
        make_relationship(anna, ben, strength=4, relationship_type=RelationshipKind.SIBLING)

        response = test_client.get("/graph/data")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [node["name"] for node in data["nodes"]] == ["Anna Adams", "Ben Brown"]
        assert data["nodes"][0]["table_name"] == "Head Table"
        assert data["links"][0]["source"] == str(anna.id)
        assert data["links"][0]["target"] == str(ben.id)
        assert data["stats"] == {"node_count": 2, "link_count": 1, "seated_count": 1}

    def test_declined_guests_excluded_by_default(self, test_client, make_guest, make_relationship):
        anna = make_guest("Anna")
        no_show = make_guest("Nope", rsvp_status=RsvpStatus.DECLINED)
        make_relationship(anna, no_show)

        default = test_client.get("/graph/data").json()
        everyone = test_client.get("/graph/data?include_declined=true").json()

        assert default["stats"]["node_count"] == 1
        assert default["links"] == []
        assert everyone["stats"]["node_count"] == 2
        assert len(everyone["links"]) == 1

    def test_family_filter(self, test_client, make_guest, make_relationship):
        anna = make_guest("Anna")
        ben = make_guest("Ben")
        cara = make_guest("Cara")
        make_relationship(anna, ben, relationship_type=RelationshipKind.PARENT)
        make_relationship(ben, cara, relationship_type=RelationshipKind.COLLEAGUE)

        data = test_client.get("/graph/data?filter_type=family").json()

        assert {node["id"] for node in data["nodes"]} == {str(anna.id), str(ben.id)}
        assert data["stats"]["link_count"] == 1


class TestGraphFilters:
    """Tests for GET /graph/filters endpoint."""

    def test_filters(self, test_client):
        response = test_client.get("/graph/filters")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"filters": ["all", "family", "friends"]}
