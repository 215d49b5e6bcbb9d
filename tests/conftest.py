from typing import Callable, Dict

import pytest  # type: ignore[import]

from securevault.settings import get_settings
from securevault.signup import SignupChecker


STRONG_PASSWORD = "Abcdefg1!"


@pytest.fixture(autouse=True)
def _reset_settings(tmp_path, monkeypatch):
    """Isolate filesystem-dependent settings for each test."""
    monkeypatch.setenv("SECUREVAULT_VAR_DIR", str(tmp_path / "var"))
    monkeypatch.setenv("SECUREVAULT_LOG_DIR", str(tmp_path / "var" / "logs"))
    monkeypatch.setenv("SECUREVAULT_LOG_PATH", str(tmp_path / "var" / "logs" / "securevault.log"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def signup_checker() -> SignupChecker:
    return SignupChecker()


@pytest.fixture
def signup_form() -> Callable[..., Dict[str, str]]:
    def _form(
        email: str = "user@example.com",
        password: str = STRONG_PASSWORD,
        confirm_password=None,
    ) -> Dict[str, str]:
        return {
            "email": email,
            "password": password,
            "confirm_password": password if confirm_password is None else confirm_password,
        }

    return _form


@pytest.fixture
def flask_app_client():
    from securevault import flask_app as flask_module

    app = flask_module.app
    app.config.update({
        "TESTING": True,
        "SECRET_KEY": "test-secret-key",
    })

    with app.test_client() as client:
        with app.app_context():
            yield client
