import io

API = "/api/v1"


def create_transaction(client, headers, **overrides):
    payload = {"amount": -4.5, "type": "expense", "date": "2024-01-15", "description": "Coffee"}
    payload.update(overrides)
    response = client.post(f"{API}/transactions", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_create_transaction(client, auth_headers):
    response = client.post(
        f"{API}/transactions",
        json={"amount": -12.75, "type": "expense", "date": "2024-01-02", "description": "Lunch"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Transaction created successfully"
    assert body["data"]["amount"] == -12.75
    assert body["data"]["type"] == "expense"
    assert body["data"]["date"] == "2024-01-02"
    assert body["data"]["category_id"] is None


def test_create_transaction_missing_fields(client, auth_headers):
    response = client.post(f"{API}/transactions", json={"description": "No amount"}, headers=auth_headers)

    assert response.status_code == 422
    body = response.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert "amount" in body["error"]


def test_malformed_json_is_bad_request(client, auth_headers):
    response = client.post(
        f"{API}/transactions",
        content=b"{not json",
        headers={**auth_headers, "Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["code"] == "BAD_REQUEST"


def test_filter_by_type_and_inclusive_date_range(client, auth_headers):
    create_transaction(client, auth_headers, date="2023-12-31")
    first = create_transaction(client, auth_headers, date="2024-01-01")
    last = create_transaction(client, auth_headers, date="2024-01-31")
    create_transaction(client, auth_headers, date="2024-02-01")
    create_transaction(client, auth_headers, date="2024-01-10", type="income", amount=1000)

    response = client.get(
        f"{API}/transactions",
        params={"start_date": "2024-01-01", "end_date": "2024-01-31", "type": "expense"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert {t["id"] for t in data} == {first["id"], last["id"]}
    assert all(t["type"] == "expense" for t in data)
    assert response.json()["pagination"] == {"limit": 50, "offset": 0, "count": 2}


def test_filter_by_category_and_account(client, auth_headers):
    category = client.post(f"{API}/categories", json={"name": "Food"}, headers=auth_headers).json()["data"]
    account = client.post(f"{API}/accounts", json={"name": "Wallet", "type": "cash"}, headers=auth_headers).json()["data"]
    match = create_transaction(client, auth_headers, category_id=category["id"], account_id=account["id"])
    create_transaction(client, auth_headers, category_id=category["id"])
    create_transaction(client, auth_headers)

    response = client.get(
        f"{API}/transactions",
        params={"category_id": category["id"], "account_id": account["id"]},
        headers=auth_headers,
    )

    assert [t["id"] for t in response.json()["data"]] == [match["id"]]


def test_pagination(client, auth_headers):
    for day in range(1, 6):
        create_transaction(client, auth_headers, date=f"2024-01-0{day}")

    response = client.get(f"{API}/transactions", params={"limit": 2, "offset": 1}, headers=auth_headers)

    dates = [t["date"] for t in response.json()["data"]]
    assert dates == ["2024-01-04", "2024-01-03"]


def test_limit_above_maximum_is_rejected(client, auth_headers):
    response = client.get(f"{API}/transactions", params={"limit": 101}, headers=auth_headers)

    assert response.status_code == 422
    assert "limit" in response.json()["error"]


def test_reversed_date_range_is_bad_request(client, auth_headers):
    response = client.get(
        f"{API}/transactions",
        params={"start_date": "2024-02-01", "end_date": "2024-01-01"},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["code"] == "BAD_REQUEST"


def test_patch_updates_only_supplied_fields(client, auth_headers):
    created = create_transaction(client, auth_headers)

    response = client.patch(
        f"{API}/transactions/{created['id']}",
        json={"description": "Updated coffee purchase", "amount": 30.50},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["updatedFields"] == ["description", "amount"]
    assert body["message"] == "Transaction updated successfully"
    assert body["data"]["description"] == "Updated coffee purchase"
    assert body["data"]["amount"] == 30.5
    for name in ("type", "date", "category_id", "account_id", "created_at"):
        assert body["data"][name] == created[name]


def test_empty_patch_is_bad_request(client, auth_headers):
    created = create_transaction(client, auth_headers)

    response = client.patch(f"{API}/transactions/{created['id']}", json={}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "No valid fields provided for update", "code": "BAD_REQUEST"}


def test_patch_with_unknown_field_is_rejected(client, auth_headers):
    created = create_transaction(client, auth_headers)

    response = client.patch(
        f"{API}/transactions/{created['id']}",
        json={"descripton": "typo"},
        headers=auth_headers,
    )

    assert response.status_code == 422
    assert "descripton" in response.json()["error"]
    fetched = client.get(f"{API}/transactions/{created['id']}", headers=auth_headers).json()["data"]
    assert fetched["description"] == "Coffee"


def test_patch_cannot_null_required_field(client, auth_headers):
    created = create_transaction(client, auth_headers)

    response = client.patch(f"{API}/transactions/{created['id']}", json={"amount": None}, headers=auth_headers)

    assert response.status_code == 422


def test_patch_can_clear_optional_field(client, auth_headers):
    created = create_transaction(client, auth_headers)

    response = client.patch(f"{API}/transactions/{created['id']}", json={"description": None}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["data"]["description"] is None
    assert response.json()["updatedFields"] == ["description"]


def test_put_requires_every_required_field(client, auth_headers):
    created = create_transaction(client, auth_headers)

    response = client.put(
        f"{API}/transactions/{created['id']}",
        json={"amount": 10, "description": "Partial"},
        headers=auth_headers,
    )

    assert response.status_code == 422
    body = response.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert "type" in body["error"] and "date" in body["error"]


def test_put_is_idempotent_and_resets_optional_fields(client, auth_headers):
    created = create_transaction(client, auth_headers)
    payload = {"amount": 99.99, "type": "income", "date": "2024-03-01"}

    first = client.put(f"{API}/transactions/{created['id']}", json=payload, headers=auth_headers)
    second = client.put(f"{API}/transactions/{created['id']}", json=payload, headers=auth_headers)

    assert first.status_code == second.status_code == 200
    first_data = {k: v for k, v in first.json()["data"].items() if k != "updated_at"}
    second_data = {k: v for k, v in second.json()["data"].items() if k != "updated_at"}
    assert first_data == second_data
    assert first_data["description"] is None
    assert first_data["amount"] == 99.99
    assert "updatedFields" not in first.json()


def test_delete_transaction(client, auth_headers):
    created = create_transaction(client, auth_headers)

    response = client.delete(f"{API}/transactions/{created['id']}", headers=auth_headers)
    assert response.status_code == 204
    assert response.content == b""

    response = client.get(f"{API}/transactions/{created['id']}", headers=auth_headers)
    assert response.status_code == 404


def test_other_users_transaction_looks_missing(client, auth_headers, other_headers):
    created = create_transaction(client, auth_headers)

    foreign = client.get(f"{API}/transactions/{created['id']}", headers=other_headers)
    missing = client.get(f"{API}/transactions/999999", headers=other_headers)

    assert foreign.status_code == missing.status_code == 404
    assert foreign.json() == missing.json() == {"error": "Transaction not found", "code": "NOT_FOUND"}
    assert client.delete(f"{API}/transactions/{created['id']}", headers=other_headers).status_code == 404
    assert client.get(f"{API}/transactions", headers=other_headers).json()["data"] == []


def test_category_of_another_user_is_not_found(client, auth_headers, other_headers):
    category = client.post(f"{API}/categories", json={"name": "Private"}, headers=other_headers).json()["data"]

    response = client.post(
        f"{API}/transactions",
        json={"amount": -1, "type": "expense", "date": "2024-01-01", "category_id": category["id"]},
        headers=auth_headers,
    )

    assert response.status_code == 404
    assert response.json()["error"] == "Category not found"


def test_import_csv(client, auth_headers):
    csv_content = (
        "date,amount,type,description\n"
        "2024-01-02,-10.25,expense,Bus ticket\n"
        "2024-01-03,2500,income,Salary\n"
    )

    response = client.post(
        f"{API}/transactions/import",
        files={"file": ("january.csv", io.BytesIO(csv_content.encode()), "text/csv")},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["imported"] == 2
    listed = client.get(f"{API}/transactions", headers=auth_headers).json()["data"]
    assert sorted(t["amount"] for t in listed) == [-10.25, 2500.0]


def test_import_csv_rejects_whole_file_on_bad_row(client, auth_headers):
    csv_content = (
        "date,amount,type\n"
        "2024-01-02,-10.25,expense\n"
        "2024-01-03,abc,expense\n"
    )

    response = client.post(
        f"{API}/transactions/import",
        files={"file": ("bad.csv", io.BytesIO(csv_content.encode()), "text/csv")},
        headers=auth_headers,
    )

    body = response.json()
    assert body["success"] is False
    assert body["imported"] == 0
    assert [error["row"] for error in body["errors"]] == [3]
    assert client.get(f"{API}/transactions", headers=auth_headers).json()["data"] == []


def test_import_csv_requires_columns(client, auth_headers):
    response = client.post(
        f"{API}/transactions/import",
        files={"file": ("cols.csv", io.BytesIO(b"when,how_much\n2024-01-01,5\n"), "text/csv")},
        headers=auth_headers,
    )

    assert response.json()["success"] is False
    assert "columns" in response.json()["message"]


def test_import_rejects_non_csv(client, auth_headers):
    response = client.post(
        f"{API}/transactions/import",
        files={"file": ("data.xlsx", io.BytesIO(b"binary"), "application/octet-stream")},
        headers=auth_headers,
    )

    assert response.status_code == 400
