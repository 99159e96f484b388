"""Tests for the /api/pregnancy HTTP endpoints."""


class TestRootEndpoints:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client):
        response = client.get("/health")
        body = response.json()
        assert body["status"] == "healthy"
        assert body["services"]["calculator"]["calendar_days"] == 280


class TestDueDateEndpoint:

    def test_due_date(self, client):
        response = client.get("/api/pregnancy/due-date", params={"lmp_date": "2024-01-01"})
        assert response.status_code == 200
        assert response.json() == {
            "lmpDate": "2024-01-01",
            "dueDate": "2024-10-07",
            "formattedDueDate": "10/07/2024",
        }

    def test_malformed_date_is_400(self, client):
        response = client.get("/api/pregnancy/due-date", params={"lmp_date": "01/01/2024"})
        assert response.status_code == 400
        assert "YYYY-MM-DD" in response.json()["detail"]

    def test_missing_date_is_422(self, client):
        assert client.get("/api/pregnancy/due-date").status_code == 422

    def test_lmp_near_max_date_is_400(self, client):
        response = client.get("/api/pregnancy/due-date", params={"lmp_date": "9999-06-01"})
        assert response.status_code == 400
        assert "must not be after" in response.json()["detail"]


class TestGestationalAgeEndpoint:

    def test_gestational_age(self, client):
        response = client.get(
            "/api/pregnancy/gestational-age",
            params={"lmp_date": "2024-01-01", "as_of": "2024-01-08"},
        )
        assert response.json() == {
            "weeks": 1,
            "days": 0,
            "totalDays": 7,
            "formatted": "1 weeks 1 days",
        }

    def test_as_of_before_lmp_is_400(self, client):
        response = client.get(
            "/api/pregnancy/gestational-age",
            params={"lmp_date": "2024-01-08", "as_of": "2024-01-01"},
        )
        assert response.status_code == 400


class TestTrimesterEndpoint:

    def test_trimester(self, client):
        assert client.get("/api/pregnancy/trimester/13").json() == {"weeks": 13, "trimester": "second"}

    def test_negative_weeks_is_422(self, client):
        assert client.get("/api/pregnancy/trimester/-1").status_code == 422


class TestCalendarEndpoint:

    def test_full_calendar(self, client):
        response = client.get("/api/pregnancy/calendar", params={"lmp_date": "2024-01-01"})
        body = response.json()
        assert response.status_code == 200
        assert len(body["days"]) == 280
        assert body["monthFilter"] is None
        assert body["stats"] == {"totalDays": 280, "milestoneDays": 10, "appointmentDays": 70}

        first = body["days"][0]
        assert first["dayNumber"] == 1
        assert first["date"] == "2024-01-01"
        assert first["gestationalWeek"] == 1
        assert first["dayOfWeek"] == 1
        assert first["trimester"] == "first"
        assert first["appointments"] == []

    def test_month_filtered_calendar(self, client):
        response = client.get(
            "/api/pregnancy/calendar",
            params={"lmp_date": "2024-01-01", "month": "2024-02"},
        )
        body = response.json()
        assert len(body["days"]) == 29
        assert body["monthFilter"]["displayLabel"] == "February 2024 (29 days)"
        assert {d["calendarMonth"] for d in body["days"]} == {2}

    def test_unknown_month_is_404(self, client):
        response = client.get(
            "/api/pregnancy/calendar",
            params={"lmp_date": "2024-01-01", "month": "2025-01"},
        )
        assert response.status_code == 404

    def test_lmp_near_max_date_is_400(self, client):
        response = client.get("/api/pregnancy/calendar", params={"lmp_date": "9999-06-01"})
        assert response.status_code == 400


class TestSummaryEndpoint:

    def test_summary(self, client):
        response = client.get(
            "/api/pregnancy/summary",
            params={"lmp_date": "2024-01-01", "as_of": "2024-10-17"},
        )
        body = response.json()
        assert body["daysRemaining"] == 0
        assert body["progressPercentage"] == 100
        assert body["estimatedDueDate"] == "2024-10-07"
        assert body["formattedDueDate"] == "10/07/2024"
        assert body["upcomingMilestones"] == []

    def test_invalid_as_of_is_400(self, client):
        response = client.get(
            "/api/pregnancy/summary",
            params={"lmp_date": "2024-01-01", "as_of": "2024-02-30"},
        )
        assert response.status_code == 400


def test_month_filters(client):
    response = client.get("/api/pregnancy/month-filters", params={"lmp_date": "2024-01-01"})
    filters = response.json()
    assert len(filters) == 10
    assert sum(f["pregnancyDaysCount"] for f in filters) == 280
    assert filters[0]["startDate"] == "2024-01-01"


class TestReferenceEndpoints:

    def test_development(self, client):
        data = client.get("/api/pregnancy/reference/development").json()
        assert len(data) == 10
        assert data[0]["sizeComparison"] == "Poppy seed"
        assert data[0]["weightRange"] == {"min": 0, "max": 0}

    def test_appointments(self, client):
        data = client.get("/api/pregnancy/reference/appointments").json()
        assert data[3]["appointmentType"] == "Anatomy Scan"
        assert data[3]["priority"] == "critical"

    def test_trimester_info(self, client):
        data = client.get("/api/pregnancy/reference/trimesters/third").json()
        assert data["displayName"] == "Third"
        assert data["shortLabel"] == "3rd"

    def test_unknown_trimester_is_422(self, client):
        assert client.get("/api/pregnancy/reference/trimesters/fourth").status_code == 422


def test_export(client):
    response = client.get(
        "/api/pregnancy/export",
        params={"lmp_date": "2024-01-01", "format": "pdf", "as_of": "2024-05-30"},
    )
    body = response.json()
    assert response.status_code == 200
    assert body["filename"] == "pregnancy-calendar-21-weeks 4 days-2024-05-30.pdf"
    assert body["preview"]["estimatedFileSizes"] == {"pdf": 750, "excel": 310}
    assert len(body["appointmentRows"]) == 70
