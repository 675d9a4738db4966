import httpx
import pytest

from segi9 import ConfigStore, GlobalOptions, RequestExecutor, Segi9Plugin
from segi9.models import (
    ConfigurationRejectedError,
    InvalidInputError,
    NetworkFailureError,
)


@pytest.fixture
def plugin_with(make_transport):
    def build(handler):
        transport = make_transport(handler)
        store = ConfigStore()
        plugin = Segi9Plugin(
            store=store, executor=RequestExecutor(store, transport=transport)
        )
        return plugin, transport

    return build


def test_export_returns_body(plugin_with):
    plugin, _ = plugin_with(lambda request: httpx.Response(200, text='{"up": 1}'))

    assert plugin.export("segi9.http", ["https://example.test/status"]) == '{"up": 1}'


def test_export_trailing_params_default(plugin_with):
    plugin, transport = plugin_with(lambda request: httpx.Response(200, text="ok"))

    plugin.export("segi9.http", ["  https://example.test/status  ", "", "", ""])

    request = transport.requests[0]
    assert str(request.url) == "https://example.test/status"
    assert "Authorization" not in request.headers


def test_export_auth_mode_trimmed_and_case_insensitive(plugin_with):
    plugin, transport = plugin_with(lambda request: httpx.Response(200, text="ok"))

    plugin.export("segi9.http", ["https://example.test/data", " BEARER ", "tok123"])

    assert transport.requests[0].headers["Authorization"] == "Bearer tok123"


def test_export_rejects_unknown_key(plugin_with):
    plugin, transport = plugin_with(lambda request: httpx.Response(200))

    with pytest.raises(InvalidInputError, match="unsupported key"):
        plugin.export("segi9.other", ["https://example.test/"])
    assert transport.requests == []


@pytest.mark.parametrize("params", [[], [""], ["   ", "basic"]])
def test_export_requires_url(plugin_with, params):
    plugin, transport = plugin_with(lambda request: httpx.Response(200))

    with pytest.raises(InvalidInputError, match="url"):
        plugin.export("segi9.http", params)
    assert transport.requests == []


def test_export_raises_network_failure(plugin_with):
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    plugin, _ = plugin_with(handler)

    with pytest.raises(NetworkFailureError):
        plugin.export("segi9.http", ["https://example.test/"])


def test_configure_and_validate():
    plugin = Segi9Plugin()

    plugin.validate({"Timeout": "20"})
    config = plugin.configure(GlobalOptions(Timeout=3), {"Timeout": "20"})

    assert config.timeout == 20
    assert plugin.config.timeout == 20


def test_validate_rejects_and_keeps_active_configuration():
    plugin = Segi9Plugin()
    plugin.configure(options={"Timeout": 12})

    with pytest.raises(ConfigurationRejectedError):
        plugin.validate({"Timeout": 45})

    assert plugin.config.timeout == 12


def test_configure_without_options_uses_global_only_for_zero():
    plugin = Segi9Plugin()

    assert plugin.configure(GlobalOptions(Timeout=4), None).timeout == 10
    assert plugin.configure(GlobalOptions(Timeout=4), {"Timeout": 0}).timeout == 4


def test_reconfiguration_applies_to_next_request(plugin_with):
    plugin, transport = plugin_with(lambda request: httpx.Response(200, text="ok"))

    plugin.export("segi9.http", ["https://example.test/"])
    plugin.configure(options={"Timeout": 2})
    plugin.export("segi9.http", ["https://example.test/"])

    first, second = (r.extensions["timeout"]["read"] for r in transport.requests)
    assert (first, second) == (10, 2)


def test_lifecycle_logging(caplog):
    plugin = Segi9Plugin()

    with caplog.at_level("INFO", logger="segi9"):
        plugin.start()
        plugin.stop()

    assert "Segi9 HTTP plugin started" in caplog.text
    assert "Segi9 HTTP plugin stopped" in caplog.text
