API = "/api/v1"


def test_account_crud(client, auth_headers):
    response = client.post(f"{API}/accounts", json={"name": "Checking", "balance": 1200.50}, headers=auth_headers)
    assert response.status_code == 201
    account = response.json()["data"]
    assert account["type"] == "checking"
    assert account["currency"] == "USD"
    assert account["is_active"] is True

    response = client.patch(f"{API}/accounts/{account['id']}", json={"is_active": False}, headers=auth_headers)
    assert response.json()["updatedFields"] == ["is_active"]
    assert response.json()["data"]["balance"] == 1200.5

    response = client.put(
        f"{API}/accounts/{account['id']}",
        json={"name": "Euro savings", "type": "savings", "currency": "EUR"},
        headers=auth_headers,
    )
    data = response.json()["data"]
    assert data["balance"] == 0.0
    assert data["is_active"] is True
    assert data["currency"] == "EUR"

    listed = client.get(f"{API}/accounts", headers=auth_headers).json()
    assert [a["name"] for a in listed["data"]] == ["Euro savings"]
    assert listed["message"] == "Accounts retrieved successfully"

    assert client.delete(f"{API}/accounts/{account['id']}", headers=auth_headers).status_code == 204
    assert client.get(f"{API}/accounts/{account['id']}", headers=auth_headers).status_code == 404


def test_duplicate_account_name_conflicts(client, auth_headers, other_headers):
    client.post(f"{API}/accounts", json={"name": "Wallet"}, headers=auth_headers)

    response = client.post(f"{API}/accounts", json={"name": "Wallet"}, headers=auth_headers)
    assert response.status_code == 409
    assert response.json() == {"error": "Account with this name already exists", "code": "CONFLICT"}

    # Names are unique per user only
    assert client.post(f"{API}/accounts", json={"name": "Wallet"}, headers=other_headers).status_code == 201


def test_rename_to_existing_account_conflicts(client, auth_headers):
    client.post(f"{API}/accounts", json={"name": "Wallet"}, headers=auth_headers)
    card = client.post(f"{API}/accounts", json={"name": "Card", "type": "credit"}, headers=auth_headers).json()["data"]

    response = client.patch(f"{API}/accounts/{card['id']}", json={"name": "Wallet"}, headers=auth_headers)

    assert response.status_code == 409
    assert client.get(f"{API}/accounts/{card['id']}", headers=auth_headers).json()["data"]["name"] == "Card"


def test_invalid_account_fields(client, auth_headers):
    response = client.post(f"{API}/accounts", json={"name": "X", "currency": "euro"}, headers=auth_headers)
    assert response.status_code == 422

    response = client.post(f"{API}/accounts", json={"name": "X", "type": "piggy"}, headers=auth_headers)
    assert response.status_code == 422


def test_category_crud_and_type_filter(client, auth_headers):
    salary = client.post(
        f"{API}/categories", json={"name": "Salary", "type": "income", "color": "#00AA00"}, headers=auth_headers,
    ).json()["data"]
    food = client.post(f"{API}/categories", json={"name": "Food", "icon": "utensils"}, headers=auth_headers).json()["data"]
    assert food["type"] == "expense"

    incomes = client.get(f"{API}/categories", params={"type": "income"}, headers=auth_headers).json()["data"]
    assert [c["id"] for c in incomes] == [salary["id"]]

    response = client.patch(f"{API}/categories/{food['id']}", json={"color": "#FF0000"}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["data"]["icon"] == "utensils"

    response = client.put(f"{API}/categories/{food['id']}", json={"name": "Groceries"}, headers=auth_headers)
    assert response.json()["data"]["color"] is None

    assert client.delete(f"{API}/categories/{food['id']}", headers=auth_headers).status_code == 204


def test_same_category_name_allowed_for_other_type(client, auth_headers):
    assert client.post(f"{API}/categories", json={"name": "Gifts"}, headers=auth_headers).status_code == 201
    assert client.post(
        f"{API}/categories", json={"name": "Gifts", "type": "income"}, headers=auth_headers
    ).status_code == 201
    assert client.post(f"{API}/categories", json={"name": "Gifts"}, headers=auth_headers).status_code == 409


def test_invalid_category_color(client, auth_headers):
    response = client.post(f"{API}/categories", json={"name": "Bad", "color": "red"}, headers=auth_headers)

    assert response.status_code == 422
    assert "color" in response.json()["error"]


def test_deleting_category_and_account_clears_transaction_references(client, auth_headers):
    category = client.post(f"{API}/categories", json={"name": "Food"}, headers=auth_headers).json()["data"]
    account = client.post(f"{API}/accounts", json={"name": "Wallet"}, headers=auth_headers).json()["data"]
    response = client.post(
        f"{API}/transactions",
        json={
            "amount": -12,
            "type": "expense",
            "date": "2024-01-10",
            "category_id": category["id"],
            "account_id": account["id"],
        },
        headers=auth_headers,
    )
    transaction = response.json()["data"]

    assert client.delete(f"{API}/categories/{category['id']}", headers=auth_headers).status_code == 204
    assert client.delete(f"{API}/accounts/{account['id']}", headers=auth_headers).status_code == 204

    data = client.get(f"{API}/transactions/{transaction['id']}", headers=auth_headers).json()["data"]
    assert data["category_id"] is None
    assert data["account_id"] is None

    response = client.put(
        f"{API}/transactions/{transaction['id']}",
        json={"amount": -12, "type": "expense", "date": "2024-01-10", "category_id": data["category_id"]},
        headers=auth_headers,
    )
    assert response.status_code == 200, response.text
