"""Tests for protected page path matching."""

import pytest

from nuggets.core.modules.session.models import Role
from nuggets.web.guard import required_roles


class TestRequiredRoles:
    @pytest.mark.parametrize(
        "path",
        ["/admin-board", "/admin-board/", "/admin-board.html", "//admin-board.html", "/./admin-board.html",
         "/images/../admin-board.html", "/ADMIN-BOARD.HTML", "///admin-board"],
    )
    def test_admin_board_spellings(self, path):
        assert required_roles(path) == frozenset({Role.ADMIN})

    @pytest.mark.parametrize("path", ["/client-board", "//client-board.html", "/./client-board.html"])
    def test_client_board_spellings(self, path):
        assert required_roles(path) == frozenset({Role.CLIENT, Role.ADMIN})

    @pytest.mark.parametrize("path", ["/", "//", "/portal", "/about.html", "/api/orders", "/admin-board.css"])
    def test_public_paths(self, path):
        assert required_roles(path) is None
