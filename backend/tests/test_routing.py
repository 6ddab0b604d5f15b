"""
Payments API — User Router Loading Tests
==========================================

What we test:
    ✅ The bundled user router stub loads and defines no routes
    ✅ A configured router is mounted at the application root
    ✅ Malformed or unresolvable paths raise RouterLoadError
"""

import sys
import types

import pytest
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from httpx import AsyncClient, ASGITransport

from paymentsapi.config import Settings
from paymentsapi.exceptions import PaymentsApiError, RouterLoadError
from paymentsapi.main import create_app
from paymentsapi.routes import users
from paymentsapi.routing import LenientRoute, load_router


@pytest.fixture
def plugin_module():
    """Registers a throwaway module exposing a user router."""
    module = types.ModuleType("fake_user_plugin")
    router = APIRouter()

    @router.get("/users", response_class=PlainTextResponse)
    async def list_users() -> str:
        return "users"

    @router.get("/users/{user_id}")
    async def get_user(user_id: str):
        raise PaymentsApiError("user directory unavailable", context={"user_id": user_id})

    module.router = router
    module.not_a_router = "nope"
    sys.modules[module.__name__] = module
    yield module
    del sys.modules[module.__name__]


class TestLoadRouter:

    def test_loads_default_stub(self):
        router = load_router("paymentsapi.routes.users:router")

        assert router is users.router
        assert router.routes == []

    def test_loads_plugin_router(self, plugin_module):
        assert load_router("fake_user_plugin:router") is plugin_module.router

    @pytest.mark.parametrize("path", ["paymentsapi.routes.users", ":router", "paymentsapi.routes.users:"])
    def test_malformed_path(self, path):
        with pytest.raises(RouterLoadError) as exc_info:
            load_router(path)

        assert exc_info.value.path == path
        assert "module:attribute" in exc_info.value.message

    def test_missing_module(self):
        with pytest.raises(RouterLoadError) as exc_info:
            load_router("no_such_module_anywhere:router")

        assert isinstance(exc_info.value.__cause__, ImportError)

    def test_missing_attribute(self, plugin_module):
        with pytest.raises(RouterLoadError, match="no attribute 'missing'"):
            load_router("fake_user_plugin:missing")

    def test_attribute_not_a_router(self, plugin_module):
        with pytest.raises(RouterLoadError, match="not an APIRouter"):
            load_router("fake_user_plugin:not_a_router")

    def test_is_an_app_error(self):
        with pytest.raises(PaymentsApiError):
            load_router("bad")


class TestUserRouterMounting:

    @pytest.mark.asyncio
    async def test_configured_router_is_mounted_at_root(self, plugin_module):
        app = create_app(Settings(_env_file=None, user_router="fake_user_plugin:router"))
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            users_response = await client.get("/users")
            payment_response = await client.get("/users/1/payment")

        assert users_response.text == "users"
        assert payment_response.text == "User ID: 1, Filter: undefined"

    def test_bad_router_fails_app_construction(self):
        with pytest.raises(RouterLoadError):
            create_app(Settings(_env_file=None, user_router="no_such_module_anywhere:router"))

    @pytest.mark.asyncio
    async def test_plugged_router_errors_become_500(self, plugin_module):
        app = create_app(Settings(_env_file=None, user_router="fake_user_plugin:router"))
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/users/7")

        assert response.status_code == 500
        assert response.json()["message"] == "user directory unavailable"
        assert "user_id" not in response.text


class TestLenientRoute:

    async def _endpoint(self):
        return "ok"

    def _route(self, path):
        return LenientRoute(path, self._endpoint)

    @pytest.mark.parametrize(
        "candidate,matches",
        [
            ("/users/42/payment", True),
            ("/users/42/payment/", True),
            ("/USERS/42/Payment", True),
            ("/users/42/payment//", False),
            ("/users/42/payments", False),
        ],
    )
    def test_path_regex(self, candidate, matches):
        route = self._route("/users/{user_id}/payment")

        assert bool(route.path_regex.match(candidate)) is matches

    def test_root_has_no_extra_slash(self):
        route = self._route("/")

        assert route.path_regex.match("/")
        assert not route.path_regex.match("//")
