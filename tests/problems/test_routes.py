from fastapi import status
from sqlmodel import Session, select

from dsa_companion.data.schemas import Problem

NEW_PROBLEM = {
    "title": "Two Sum",
    "description": "Given two integers, return their sum.",
    "difficulty": "easy",
    "category": "arrays",
    "testCases": [{"input": "1,2", "output": "3", "explanation": "sum"}],
    "solutionTemplate": "function solution(a, b) {}",
}


def test_create_then_get_round_trips_test_cases(client):
    created = client.post("/api/problems", json=NEW_PROBLEM)

    assert created.status_code == status.HTTP_201_CREATED
    problem_id = created.json()["data"]["id"]

    response = client.get(f"/api/problems/{problem_id}")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()["data"]
    assert data["testCases"] == NEW_PROBLEM["testCases"]
    assert data["title"] == "Two Sum"
    assert data["solutionTemplate"] == "function solution(a, b) {}"
    assert "createdAt" in data and "updatedAt" in data


def test_create_problem_with_structured_test_case_values(client):
    test_cases = [
        {"input": [1, 2], "output": 3, "explanation": "sum"},
        {"input": {"a": -1, "b": 1}, "output": 0, "explanation": ""},
    ]

    created = client.post("/api/problems", json={**NEW_PROBLEM, "testCases": test_cases})

    assert created.status_code == status.HTTP_201_CREATED
    problem_id = created.json()["data"]["id"]
    fetched = client.get(f"/api/problems/{problem_id}").json()["data"]
    assert fetched["testCases"] == test_cases


def test_get_problem_with_numeric_test_case_values(client, make_problem):
    problem = make_problem(test_cases='[{"input": [1, 2], "output": 3}]')

    response = client.get(f"/api/problems/{problem.id}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["data"]["testCases"] == [
        {"input": [1, 2], "output": 3, "explanation": ""}
    ]


def test_create_problem_missing_fields(client, sync_engine):
    response = client.post("/api/problems", json={"title": "Incomplete"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["success"] is False
    with Session(sync_engine) as session:
        assert session.exec(select(Problem)).all() == []


def test_create_problem_rejects_unknown_difficulty(client):
    response = client.post("/api/problems", json={**NEW_PROBLEM, "difficulty": "extreme"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_get_problem_not_found(client):
    response = client.get("/api/problems/does-not-exist")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"success": False, "error": "Problem not found"}


def test_get_problem_with_corrupted_test_cases(client, make_problem):
    problem = make_problem(test_cases="{not json")

    response = client.get(f"/api/problems/{problem.id}")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"success": False, "error": "Stored problem data is corrupted"}


def test_list_filters_orders_and_paginates(client, make_problem):
    oldest = make_problem(difficulty="easy", category="arrays")
    make_problem(difficulty="medium", category="arrays")
    middle = make_problem(difficulty="easy", category="arrays")
    make_problem(difficulty="easy", category="graphs")
    newest = make_problem(difficulty="easy", category="arrays")

    response = client.get("/api/problems?difficulty=easy&category=arrays")

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert [p["id"] for p in body["data"]] == [newest.id, middle.id, oldest.id]
    assert body["pagination"] == {"limit": 50, "offset": 0, "count": 3}

    page = client.get("/api/problems?difficulty=easy&category=arrays&limit=1&offset=1")
    assert [p["id"] for p in page.json()["data"]] == [middle.id]


def test_list_offset_beyond_rows_is_empty(client, make_problem):
    make_problem()

    response = client.get("/api/problems?offset=10")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["data"] == []


def test_list_rejects_bad_limit(client):
    response = client.get("/api/problems?limit=0")

    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_update_problem(client, make_problem, sync_engine):
    problem = make_problem()

    response = client.put(
        f"/api/problems/{problem.id}",
        json={"title": "Renamed", "testCases": [{"input": "2,2", "output": "4"}]},
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()["data"]
    assert data["title"] == "Renamed"
    assert data["testCases"] == [{"input": "2,2", "output": "4", "explanation": ""}]
    assert data["category"] == "arrays"
    with Session(sync_engine) as session:
        assert session.get(Problem, problem.id).title == "Renamed"


def test_update_problem_clears_solution_template(client, make_problem):
    problem = make_problem()

    response = client.put(f"/api/problems/{problem.id}", json={"solutionTemplate": None})

    assert response.status_code == status.HTTP_200_OK
    assert "solutionTemplate" not in response.json()["data"]


def test_update_problem_empty_body_leaves_row(client, make_problem, sync_engine):
    problem = make_problem(title="Original")

    response = client.put(f"/api/problems/{problem.id}", json={})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "No fields to update"
    with Session(sync_engine) as session:
        stored = session.get(Problem, problem.id)
        assert stored.title == "Original"
        assert stored.updated_at == problem.updated_at


def test_update_problem_not_found(client):
    response = client.put("/api/problems/missing", json={"title": "Anything"})

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_delete_problem(client, make_problem, sync_engine):
    problem = make_problem()

    response = client.delete(f"/api/problems/{problem.id}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True, "message": "Problem deleted successfully"}
    with Session(sync_engine) as session:
        assert session.get(Problem, problem.id) is None


def test_delete_problem_not_found(client):
    response = client.delete("/api/problems/missing")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"success": False, "error": "Problem not found"}
