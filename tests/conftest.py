import pytest

from core.config import Settings
from core.models import ShoeItem

CONFIG_KEYS = (
    "QUERY_URL",
    "THRESHOLD_PRICE",
    "RECIPIENT_EMAIL",
    "FROM_GMAIL",
    "FROM_GMAIL_APP_PASSWORD",
    "REQUEST_TIMEOUT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def trail_shoes():
    return [
        ShoeItem("Merrel Trail Glove", "", 89.99, 79.99),
        ShoeItem("Hoka Challenger", "Blah", 160.99, 50),
        ShoeItem("Altra Lone Peak", "", 120.99, 45.99),
    ]


@pytest.fixture
def settings():
    return Settings(
        query_url="https://api.example.com/search?q=trail, https://api.example.com/search?q=road",
        threshold_price=50.0,
        recipient_email="runner@example.com",
        from_gmail="alerts@gmail.com",
        from_gmail_app_password="app-password",
    )


@pytest.fixture
def write_env(tmp_path):
    def _write(**values):
        path = tmp_path / ".env"
        path.write_text("".join(f"{k}={v}\n" for k, v in values.items()), encoding="utf-8")
        return str(path)

    return _write
