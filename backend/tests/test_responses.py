import json

from app.core.responses import envelope, handle_result
from app.schemas.common import PaginatedResult, Result


def test_success_maps_to_200_with_envelope() -> None:
    response = handle_result(Result.ok({"a": 1}, "done"))

    assert response.status_code == 200
    assert json.loads(response.body) == {"success": True, "message": "done", "data": {"a": 1}, "errors": []}


def test_success_uses_given_status_code() -> None:
    assert handle_result(Result.ok(1), 201).status_code == 201


def test_failure_maps_to_400_even_when_201_requested() -> None:
    response = handle_result(Result.fail("Employee not found"), 201)

    assert response.status_code == 400
    assert json.loads(response.body)["message"] == "Employee not found"


def test_mapping_is_stable_across_calls() -> None:
    result = PaginatedResult.ok([1], total_count=1, page=1, page_size=10)

    first = handle_result(result)
    second = handle_result(result)

    assert first.status_code == second.status_code
    assert first.body == second.body
    assert envelope(result) == json.loads(first.body)


def test_db_timeout_failure_body() -> None:
    response = handle_result(Result.fail("DB timeout"))

    assert response.status_code == 400
    body = json.loads(response.body)
    assert body["success"] is False
    assert body["message"] == "DB timeout"
    assert body["data"] is None


def test_single_page_body() -> None:
    response = handle_result(PaginatedResult.ok(["a", "b", "c"], total_count=3, page=1, page_size=10))

    assert response.status_code == 200
    body = json.loads(response.body)
    assert body["data"] == ["a", "b", "c"]
    assert body["totalPages"] == 1
    assert body["hasNext"] is False
