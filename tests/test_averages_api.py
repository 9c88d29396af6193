"""
HTTP tests for the averaging routers (/v1/teaching-block-averages, /v1/course-averages, /v1/general-averages)

Run: pytest tests/test_averages_api.py -v
"""

from models.teaching_block_averages import TeachingBlockAverage

AUTH = {"Authorization": "Bearer test-token"}


def _block_body(school, block_index=0):
    return {
        "studentId": school.student_id,
        "assignmentId": school.assignment_id,
        "teachingBlockId": school.block_ids[block_index],
    }


def _seed_reference_scenario(db, school, signals):
    for rating in (6, 8):
        signals.qualification(db, school, rating)
    signals.evaluation(db, school, 10, signals.PRACTICE)
    for score in (5, 5):
        signals.evaluation(db, school, score, signals.EXAM)


class TestBlockAverageEndpoints:

    def test_preview_returns_values(self, client, db, school, signals):
        _seed_reference_scenario(db, school, signals)

        response = client.post("/v1/teaching-block-averages/preview", json=_block_body(school))

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"] == {
            "daily_average": 7.0,
            "practice_average": 10.0,
            "exam_average": 5.0,
            "block_average": 7.1,
        }
        assert "X-Latency-Ms" in response.headers

    def test_preview_accepts_snake_case(self, client, school):
        body = {
            "student_id": school.student_id,
            "assignment_id": school.assignment_id,
            "teaching_block_id": school.block_ids[0],
        }
        response = client.post("/v1/teaching-block-averages/preview", json=body)

        assert response.status_code == 200
        assert response.json()["data"]["block_average"] == 0.0

    def test_missing_parameters(self, client, school):
        response = client.post("/v1/teaching-block-averages/preview", json={"studentId": school.student_id})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert "assignment_id" in body["error"]["message"]

    def test_malformed_identifier(self, client, school):
        body = _block_body(school)
        body["studentId"] = "abc"

        response = client.post("/v1/teaching-block-averages/preview", json=body)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_unknown_group(self, client, school):
        body = _block_body(school)
        body["assignmentId"] = 9999

        response = client.post("/v1/teaching-block-averages/preview", json=body)

        assert response.status_code == 404
        assert response.json()["error"] == {"code": "NOT_FOUND", "message": "담당 그룹을 찾을 수 없습니다"}

    def test_calculate_unknown_teaching_block(self, client, db, school):
        body = _block_body(school)
        body["teachingBlockId"] = 9999

        response = client.post("/v1/teaching-block-averages/calculate", json=body, headers=AUTH)

        assert response.status_code == 404
        assert response.json()["error"] == {"code": "NOT_FOUND", "message": "평가 구간을 찾을 수 없습니다"}
        assert db.query(TeachingBlockAverage).count() == 0

    def test_calculate_unknown_student(self, client, db, school):
        body = _block_body(school)
        body["studentId"] = 4242

        response = client.post("/v1/teaching-block-averages/calculate", json=body, headers=AUTH)

        assert response.status_code == 404
        assert response.json()["error"] == {"code": "NOT_FOUND", "message": "학생을 찾을 수 없습니다"}
        assert db.query(TeachingBlockAverage).count() == 0

    def test_calculate_requires_token(self, client, school):
        response = client.post("/v1/teaching-block-averages/calculate", json=_block_body(school))

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "HTTP_401"

    def test_calculate_rejects_wrong_token(self, client, school):
        response = client.post(
            "/v1/teaching-block-averages/calculate",
            json=_block_body(school),
            headers={"Authorization": "Bearer nope"},
        )

        assert response.status_code == 401

    def test_calculate_creates_then_updates(self, client, db, school, signals):
        _seed_reference_scenario(db, school, signals)

        first = client.post("/v1/teaching-block-averages/calculate", json=_block_body(school), headers=AUTH)
        second = client.post("/v1/teaching-block-averages/calculate", json=_block_body(school), headers=AUTH)

        assert first.status_code == 200
        assert first.json()["data"]["created"] is True
        assert first.json()["message"] == "구간 평균이 저장되었습니다"
        assert second.json()["data"]["created"] is False
        assert second.json()["data"]["id"] == first.json()["data"]["id"]
        assert second.json()["data"]["block_average"] == 7.1

    def test_query_by_student_soft_empty(self, client, school):
        response = client.get(f"/v1/teaching-block-averages/student/{school.student_id}")

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["data"] == []
        assert body["error"]["code"] == "NOT_FOUND"

    def test_query_by_student_ordered_by_block(self, client, db, school, signals):
        signals.block_average(db, school, 2, "8.00")
        signals.block_average(db, school, 0, "6.00")

        response = client.get(f"/v1/teaching-block-averages/student/{school.student_id}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert [row["teaching_block"]["sequence"] for row in data] == [1, 3]
        assert data[0]["student"] == {"id": school.student_id, "names": "Ana", "last_names": "Torres"}
        assert data[0]["group"]["course"] == "Mathematics"
        assert data[0]["group"]["section"] == "A"
        assert data[0]["group"]["year"] == 2025

    def test_query_by_student_year_assignment(self, client, db, school, signals):
        signals.block_average(db, school, 0, "6.00")
        signals.block_average(db, school, 0, "9.00", teaching_block_id=school.other_year_block_id)

        response = client.get(
            f"/v1/teaching-block-averages/student/{school.student_id}"
            f"/year/{school.year_id}/assignment/{school.assignment_id}"
        )

        assert response.status_code == 200
        assert [row["block_average"] for row in response.json()["data"]] == [6.0]

    def test_query_by_assignment_and_block(self, client, db, school, signals):
        signals.block_average(db, school, 1, "7.25")

        by_group = client.get(f"/v1/teaching-block-averages/assignment/{school.assignment_id}")
        by_block = client.get(f"/v1/teaching-block-averages/teaching-block/{school.block_ids[1]}")
        empty_block = client.get(f"/v1/teaching-block-averages/teaching-block/{school.block_ids[3]}")

        assert by_group.status_code == 200
        assert by_group.json()["data"][0]["block_average"] == 7.25
        assert by_block.status_code == 200
        assert empty_block.status_code == 404

    def test_search_with_optional_filters(self, client, db, school, signals):
        signals.block_average(db, school, 0, "6.00")
        signals.block_average(db, school, 1, "7.00")

        response = client.get(
            "/v1/teaching-block-averages/",
            params={"student_id": school.student_id, "teaching_block_id": school.block_ids[1]},
        )

        assert response.status_code == 200
        assert [row["block_average"] for row in response.json()["data"]] == [7.0]


class TestCourseAverageEndpoints:

    def _calculate(self, client, school):
        return client.post(
            "/v1/course-averages/calculate",
            json={"studentId": school.student_id, "assignmentId": school.assignment_id, "yearId": school.year_id},
            headers=AUTH,
        )

    def test_calculate_partial_year(self, client, db, school, signals):
        signals.block_average(db, school, 0, "6.00")
        signals.block_average(db, school, 2, "8.00")

        response = self._calculate(client, school)

        assert response.status_code == 200
        data = response.json()["data"]
        assert [data[f"block{n}_average"] for n in range(1, 5)] == [6.0, None, 8.0, None]
        assert data["course_average"] == 7.0
        assert data["year"] == 2025

    def test_calculate_without_blocks(self, client, school):
        response = self._calculate(client, school)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_calculate_missing_year(self, client, school):
        response = client.post(
            "/v1/course-averages/calculate",
            json={"studentId": school.student_id, "assignmentId": school.assignment_id},
            headers=AUTH,
        )

        assert response.status_code == 400

    def test_query_variants(self, client, db, school, signals):
        signals.block_average(db, school, 0, "6.00")
        self._calculate(client, school)

        by_student = client.get("/v1/course-averages/by-student", params={"student_id": school.student_id})
        by_group = client.get(
            "/v1/course-averages/by-group",
            params={"year_id": school.year_id, "assignment_id": school.assignment_id},
        )
        by_all = client.get(
            "/v1/course-averages/by-student-group",
            params={
                "student_id": school.student_id,
                "year_id": school.year_id,
                "assignment_id": school.assignment_id,
            },
        )

        for response in (by_student, by_group, by_all):
            assert response.status_code == 200
            assert response.json()["data"][0]["course_average"] == 6.0

    def test_query_soft_empty_and_missing_params(self, client, school):
        empty = client.get(
            "/v1/course-averages/by-student",
            params={"student_id": school.student_id, "year_id": school.next_year_id},
        )
        missing = client.get("/v1/course-averages/by-group", params={"year_id": school.year_id})

        assert empty.status_code == 404
        assert empty.json()["data"] == []
        assert missing.status_code == 400


class TestGeneralAverageEndpoints:

    def test_not_enough_courses(self, client, db, school, signals):
        signals.block_average(db, school, 0, "6.00")
        client.post(
            "/v1/course-averages/calculate",
            json={"studentId": school.student_id, "assignmentId": school.assignment_id, "yearId": school.year_id},
            headers=AUTH,
        )

        response = client.post(
            "/v1/general-averages/calculate",
            json={"studentId": school.student_id, "yearId": school.year_id},
            headers=AUTH,
        )

        assert response.status_code == 400
        assert "1개뿐" in response.json()["error"]["message"]

    def test_query_soft_empty(self, client, school):
        response = client.get(f"/v1/general-averages/student/{school.student_id}")

        assert response.status_code == 404
        assert response.json()["data"] == []


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"


def test_write_api_closed_without_server_token(client, school, monkeypatch):
    from config.settings import settings

    monkeypatch.setattr(settings, "API_TOKEN", "")

    response = client.post("/v1/teaching-block-averages/calculate", json=_block_body(school), headers=AUTH)

    assert response.status_code == 500
    assert response.json()["error"]["message"] == "Server token not configured"
