import os

# 测试环境: 内存数据库，不写日志文件
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("AUTO_CONTACTS_COUNT", "5")

import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client():
    """每个测试一个全新的内存数据库 (应用关闭时连接池释放)"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """注册用户并返回 token"""
    def _register(name, phone_number, email=None, password="secret", country_code="US", **extra):
        payload = {
            "name": name,
            "phoneNumber": phone_number,
            "email": email or f"{name.lower().replace(' ', '.')}@example.com",
            "password": password,
            "countryCode": country_code,
            **extra,
        }
        response = client.post("/register", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["token"]
    return _register


@pytest.fixture
def auth_headers():
    def _headers(token):
        return {"Authorization": f"Bearer {token}"}
    return _headers


@pytest.fixture
def user_id(client, auth_headers):
    """通过 token 查询用户ID"""
    def _user_id(token):
        response = client.get("/me", headers=auth_headers(token))
        assert response.status_code == 200, response.text
        return response.json()["id"]
    return _user_id
