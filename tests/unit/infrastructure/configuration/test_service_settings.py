import pytest
from pydantic import ValidationError

from micro_obs.infrastructure.configuration import ItemServiceSettings, OrderServiceSettings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    # Keep a developer's .env out of the picture.
    monkeypatch.chdir(tmp_path)
    for name in ("ITEM_PORT", "ORDER_PORT", "ITEM_SERVICE_URL", "LOG_LEVEL", "ORDER_KEY_NAMESPACE"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    item = ItemServiceSettings()
    order = OrderServiceSettings()

    assert item.port == 8080
    assert item.redis_url.endswith("/0")
    assert order.port == 9090
    assert order.redis_url.endswith("/1")
    assert order.item_service_url == "http://127.0.0.1:8080"
    assert order.order_key_namespace == "order"
    assert order.next_id_key == "nextID"
    assert order.log_level == "info"


def test_values_come_from_environment(monkeypatch):
    monkeypatch.setenv("ORDER_PORT", "9191")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("ITEM_SERVICE_URL", "item.internal:8080/")

    settings = OrderServiceSettings()

    assert settings.port == 9191
    assert settings.log_level == "debug"
    assert settings.item_service_url == "http://item.internal:8080"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("ITEM_PORT", "70000"),
        ("LOG_LEVEL", "verbose"),
    ],
)
def test_invalid_item_values_are_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        ItemServiceSettings()


def test_namespace_cannot_contain_separator(monkeypatch):
    monkeypatch.setenv("ORDER_KEY_NAMESPACE", "shop:order")

    with pytest.raises(ValidationError):
        OrderServiceSettings()
