"""测试夹具

导入应用之前设置环境变量：内存数据库、测试密钥和最低的 bcrypt 轮数
"""
import os

os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["AUTO_CREATE_ADMIN"] = "false"

from dataclasses import dataclass
from typing import Dict

import pytest
from fastapi.testclient import TestClient

from main import app
from models.database import Base, SessionLocal, engine

DEFAULT_PASSWORD = "secret123"


@dataclass
class AuthUser:
    id: str
    username: str
    role: str
    token: str

    @property
    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture()
def client():
    # 不进入 lifespan，表结构由 reset_database 负责
    return TestClient(app)


@pytest.fixture()
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def make_user(client):
    """注册并登录一个用户，返回 AuthUser"""

    def _make_user(username: str, role: str = None, password: str = DEFAULT_PASSWORD) -> AuthUser:
        payload = {"username": username, "password": password}
        if role is not None:
            payload["role"] = role
        response = client.post("/register", json=payload)
        assert response.status_code == 201, response.text
        user = response.json()

        response = client.post("/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return AuthUser(id=user["id"], username=username, role=user["role"], token=response.json()["token"])

    return _make_user


@pytest.fixture()
def admin(make_user):
    return make_user("admin", role="admin")


@pytest.fixture()
def manager(make_user):
    return make_user("manager", role="manager")


@pytest.fixture()
def alice(make_user):
    return make_user("alice")


@pytest.fixture()
def bob(make_user):
    return make_user("bob")
