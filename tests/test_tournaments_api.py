"""
Tests for the tournament endpoints.
"""


class TestTournamentCrud:
    def test_create_tournament(self, client, api, manager):
        user, headers = manager
        lions = api.create_team(headers, "Lions")

        response = client.post("/api/tournaments", headers=headers, json={
            "name": "Premier Cup",
            "startDate": "2030-04-01",
            "endDate": "2030-05-30",
            "format": "T20",
            "teams": [lions["_id"], lions["_id"]],
        })

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "upcoming"
        assert body["teams"] == [lions["_id"]]
        assert body["matches"] == []
        assert body["winner"] is None
        assert body["createdBy"] == user["_id"]

    def test_start_after_end_persists_nothing(self, client, manager):
        _, headers = manager
        response = client.post("/api/tournaments", headers=headers, json={
            "name": "Backwards Cup",
            "startDate": "2030-06-01",
            "endDate": "2030-05-01",
            "format": "ODI",
        })

        assert response.status_code == 400
        assert "Start date must be before end date" in response.json()["message"]
        assert client.get("/api/tournaments", headers=headers).json() == []

    def test_same_day_start_and_end_rejected(self, client, manager):
        _, headers = manager
        response = client.post("/api/tournaments", headers=headers, json={
            "name": "One Day Cup", "startDate": "2030-06-01", "endDate": "2030-06-01", "format": "ODI",
        })
        assert response.status_code == 400

    def test_unknown_format_rejected(self, client, manager):
        _, headers = manager
        response = client.post("/api/tournaments", headers=headers, json={
            "name": "Hundred", "startDate": "2030-06-01", "endDate": "2030-07-01", "format": "T10",
        })
        assert response.status_code == 400

    def test_unknown_team_rejected(self, client, manager):
        _, headers = manager
        response = client.post("/api/tournaments", headers=headers, json={
            "name": "Cup", "startDate": "2030-06-01", "endDate": "2030-07-01", "format": "Test",
            "teams": ["missing"],
        })
        assert response.status_code == 400
        assert response.json()["message"] == "One or more teams not found"

    def test_duplicate_name_rejected(self, client, api, manager):
        _, headers = manager
        api.create_tournament(headers, "Cup")

        response = client.post("/api/tournaments", headers=headers, json={
            "name": "Cup", "startDate": "2031-04-01", "endDate": "2031-05-01", "format": "T20",
        })
        assert response.status_code == 400

    def test_update_rechecks_dates_against_stored_values(self, client, api, manager):
        _, headers = manager
        cup = api.create_tournament(headers, "Cup")

        response = client.put(f"/api/tournaments/{cup['_id']}", headers=headers, json={"startDate": "2030-06-15"})

        assert response.status_code == 400
        assert client.get(f"/api/tournaments/{cup['_id']}", headers=headers).json()["startDate"] == "2030-04-01"

    def test_update_status_and_winner(self, client, api, manager):
        _, headers = manager
        lions = api.create_team(headers, "Lions")
        cup = api.create_tournament(headers, "Cup", teams=[lions["_id"]])

        response = client.put(f"/api/tournaments/{cup['_id']}", headers=headers, json={
            "status": "completed", "winner": lions["_id"],
        })

        assert response.status_code == 200
        assert response.json()["status"] == "completed"
        assert response.json()["winner"] == lions["_id"]
        assert response.json()["name"] == "Cup"

    def test_unknown_winner_rejected(self, client, api, manager):
        _, headers = manager
        cup = api.create_tournament(headers, "Cup")

        response = client.put(f"/api/tournaments/{cup['_id']}", headers=headers, json={"winner": "missing"})
        assert response.status_code == 400

    def test_viewer_cannot_update(self, client, api, manager, viewer):
        _, headers = manager
        cup = api.create_tournament(headers, "Cup")
        _, viewer_headers = viewer

        response = client.put(f"/api/tournaments/{cup['_id']}", headers=viewer_headers, json={"status": "ongoing"})
        assert response.status_code == 403

    def test_delete_tournament_removes_its_matches(self, client, api, manager):
        _, headers = manager
        lions = api.create_team(headers, "Lions")
        tigers = api.create_team(headers, "Tigers", "Delhi")
        cup = api.create_tournament(headers, "Cup")
        match = api.create_match(headers, lions["_id"], tigers["_id"], tournament=cup["_id"])

        response = client.delete(f"/api/tournaments/{cup['_id']}", headers=headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Tournament deleted successfully"}
        assert client.get(f"/api/matches/{match['_id']}", headers=headers).status_code == 404


class TestTournamentMembership:
    def test_add_and_remove_team(self, client, api, manager):
        _, headers = manager
        lions = api.create_team(headers, "Lions")
        cup = api.create_tournament(headers, "Cup")
        url = f"/api/tournaments/{cup['_id']}/teams/{lions['_id']}"

        assert client.post(url, headers=headers).json()["teams"] == [lions["_id"]]
        duplicate = client.post(url, headers=headers)
        assert duplicate.status_code == 400
        assert duplicate.json()["message"] == "Team is already in this tournament"

        assert client.delete(url, headers=headers).json()["teams"] == []
        assert client.delete(url, headers=headers).status_code == 200

    def test_add_match_updates_both_sides(self, client, api, manager):
        _, headers = manager
        lions = api.create_team(headers, "Lions")
        tigers = api.create_team(headers, "Tigers", "Delhi")
        cup = api.create_tournament(headers, "Cup")
        match = api.create_match(headers, lions["_id"], tigers["_id"])

        response = client.post(f"/api/tournaments/{cup['_id']}/matches/{match['_id']}", headers=headers)

        assert response.status_code == 200
        assert response.json()["matches"] == [match["_id"]]
        assert client.get(f"/api/matches/{match['_id']}", headers=headers).json()["tournament"] == cup["_id"]

        again = client.post(f"/api/tournaments/{cup['_id']}/matches/{match['_id']}", headers=headers)
        assert again.status_code == 400

    def test_add_unknown_match(self, client, api, manager):
        _, headers = manager
        cup = api.create_tournament(headers, "Cup")

        response = client.post(f"/api/tournaments/{cup['_id']}/matches/missing", headers=headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Match not found"

    def test_deleting_team_removes_it_from_tournaments(self, client, api, manager):
        _, headers = manager
        lions = api.create_team(headers, "Lions")
        tigers = api.create_team(headers, "Tigers", "Delhi")
        cup = api.create_tournament(headers, "Cup", teams=[lions["_id"], tigers["_id"]])

        client.delete(f"/api/teams/{lions['_id']}", headers=headers)

        assert client.get(f"/api/tournaments/{cup['_id']}", headers=headers).json()["teams"] == [tigers["_id"]]
