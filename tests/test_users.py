"""
注册/登录接口测试
"""
from app.core.security import decode_access_token


def test_register_returns_token(client):
    response = client.post("/register", json={
        "name": "Ann",
        "phoneNumber": "+15551230000",
        "email": "ann@example.com",
        "password": "x",
        "countryCode": "US",
    })
    assert response.status_code == 201
    body = response.json()
    assert set(body) == {"token"}
    assert decode_access_token(body["token"])["sub"] is not None


def test_register_without_country_code_accepts_international_format(client):
    response = client.post("/register", json={
        "name": "Ann",
        "phoneNumber": "+15551230000",
        "email": "ann@example.com",
        "password": "x",
    })
    assert response.status_code == 201


def test_register_duplicate_phone_number_conflicts(client, register):
    register("Ann", "+15551230000")
    response = client.post("/register", json={
        "name": "Someone Else",
        "phoneNumber": "+15551230000",
        "email": "other@example.com",
        "password": "different",
        "countryCode": "US",
    })
    assert response.status_code == 409
    assert response.json() == {"message": "Phone number already exists"}


def test_register_duplicate_email_conflicts(client, register):
    register("Ann", "+15551230000", email="ann@example.com")
    response = client.post("/register", json={
        "name": "Bob",
        "phoneNumber": "+15551230001",
        "email": "ann@example.com",
        "password": "x",
        "countryCode": "US",
    })
    assert response.status_code == 409
    assert response.json() == {"message": "Email already exists"}


def test_register_invalid_phone_number(client):
    response = client.post("/register", json={
        "name": "Ann",
        "phoneNumber": "123",
        "email": "ann@example.com",
        "password": "x",
        "countryCode": "US",
    })
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid phone number"}


def test_register_missing_field_reports_first_violation(client):
    response = client.post("/register", json={
        "name": "Ann",
        "email": "ann@example.com",
        "password": "x",
    })
    assert response.status_code == 400
    assert "phoneNumber" in response.json()["message"]


def test_register_invalid_email(client):
    response = client.post("/register", json={
        "name": "Ann",
        "phoneNumber": "+15551230000",
        "email": "not-an-email",
        "password": "x",
    })
    assert response.status_code == 400
    assert "email" in response.json()["message"]


def test_register_with_auto_generated_contacts(client, register, user_id):
    register("Existing User", "+14155550100")
    token = register("Ann", "+15551230000", autoGeneratedContacts=True)

    response = client.get("/contacts/Ann")
    assert response.status_code == 200
    contacts = response.json()["contacts"]
    # AUTO_CONTACTS_COUNT=5 (tests/conftest.py)
    assert len(contacts) == 5
    owner_id = user_id(token)
    assert all(c["userID"] == owner_id for c in contacts)
    numbers = [c["phoneNumber"] for c in contacts]
    assert len(set(numbers)) == len(numbers)
    assert "+15551230000" not in numbers


def test_login_success(client, register):
    register("Ann", "+15551230000", password="correct horse")
    response = client.post("/login", json={"phoneNumber": "+15551230000", "password": "correct horse"})
    assert response.status_code == 200
    assert "token" in response.json()


def test_login_unknown_phone_number(client):
    response = client.post("/login", json={"phoneNumber": "+15551230000", "password": "x"})
    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_login_wrong_password(client, register):
    register("Ann", "+15551230000", password="right")
    response = client.post("/login", json={"phoneNumber": "+15551230000", "password": "wrong"})
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid password"}


def test_me_returns_profile_without_password(client, register, auth_headers):
    token = register("Ann", "+15551230000", email="ann@example.com", password="x")
    response = client.get("/me", headers=auth_headers(token))
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Ann"
    assert body["phoneNumber"] == "+15551230000"
    assert body["email"] == "ann@example.com"
    assert "password" not in body
    assert "password_hash" not in body


def test_me_requires_token(client):
    response = client.get("/me")
    assert response.status_code == 401


def test_me_rejects_invalid_token(client, auth_headers):
    response = client.get("/me", headers=auth_headers("not-a-jwt"))
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid token"}


def test_request_id_is_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "abc123"})
    assert response.status_code == 200
    assert response.headers["X-Request-ID"] == "abc123"


def test_register_same_body_twice_reports_phone_conflict(client):
    payload = {
        "name": "Ann",
        "phoneNumber": "+15551230000",
        "email": "ann@example.com",
        "password": "x",
        "countryCode": "US",
    }
    assert client.post("/register", json=payload).status_code == 201

    # 号码与邮箱同时冲突
    response = client.post("/register", json=payload)
    assert response.status_code == 409
    assert response.json() == {"message": "Phone number already exists"}


def test_get_all_users_hides_password_hash(client, register):
    register("Ann", "+14155550100", email="ann@example.com")
    register("Bob", "+14155550200", email="bob@example.com")

    response = client.get("/users")
    assert response.status_code == 200
    users = response.json()["users"]
    assert [u["name"] for u in users] == ["Ann", "Bob"]
    assert users[1] == {
        "id": users[1]["id"], "name": "Bob", "phoneNumber": "+14155550200", "email": "bob@example.com",
    }
    assert all("password_hash" not in u and "password" not in u for u in users)


def test_get_all_users_empty_directory(client):
    response = client.get("/users")
    assert response.status_code == 200
    assert response.json() == {"users": []}
