import logging

import httpx
import pytest
import respx
from onefuse_client.client import OneFuseClient
from onefuse_client.core.config import Config
from onefuse_client.core.errors import OneFuseTransportError
from onefuse_client.core.logging import LogfmtFormatter, setup_logging
from onefuse_client.core.observability import log_event

BASE = "https://onefuse.test:8443/api/v3/onefuse"


@pytest.fixture
def client():
    return OneFuseClient(
        Config(
            scheme="https",
            address="onefuse.test",
            port="8443",
            user="admin",
            password="s3cr3t-pw",
        )
    )


@respx.mock
def test_op_call_logged_on_success(caplog, client):
    caplog.set_level(logging.DEBUG)
    respx.get(f"{BASE}/customNames/7/").mock(
        return_value=httpx.Response(200, json={"id": 7, "name": "web01"})
    )

    with client:
        client.get(f"{BASE}/customNames/7/", resource="customNames")

    record = next(r for r in caplog.records if r.getMessage() == "op_call")
    assert record.method == "GET"
    assert record.status == 200
    assert record.resource == "customNames"
    assert record.endpoint == "/api/v3/onefuse/customNames/7/"
    assert record.duration_ms >= 0
    assert "s3cr3t-pw" not in caplog.text


@respx.mock
def test_op_call_logged_on_transport_error(caplog, client):
    caplog.set_level(logging.INFO, logger="onefuse_client.observability")
    respx.get(f"{BASE}/workspaces/").mock(side_effect=httpx.ConnectError("refused"))

    with client:
        with pytest.raises(OneFuseTransportError):
            client.get(f"{BASE}/workspaces/", resource="workspaces")

    record = next(r for r in caplog.records if r.getMessage() == "op_call")
    assert record.status == "exception"
    assert record.levelno == logging.WARNING
    assert record.error_type == "ConnectError"
    assert record.resource == "workspaces"


def test_log_event_drops_reserved_and_secret_keys(caplog):
    caplog.set_level(logging.INFO, logger="onefuse_client.observability")

    log_event("custom_name_reserved", custom_name_id=7, password="x", module="m")

    record = caplog.records[-1]
    assert record.custom_name_id == 7
    assert not hasattr(record, "password")
    assert record.module != "m"


def test_logfmt_formatter_renders_known_extras():
    record = logging.LogRecord(
        "onefuse_client.client", logging.INFO, __file__, 1, "op_call", None, None
    )
    record.resource = "customNames"
    record.status = 201
    record.endpoint = "/api/v3/onefuse/customNames/"

    line = LogfmtFormatter().format(record)

    assert line.startswith("level=info logger=onefuse_client.client event=op_call")
    assert "resource=customNames" in line
    assert "status=201" in line
    assert "endpoint=/api/v3/onefuse/customNames/" in line


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    root_handlers = list(root.handlers)
    package = logging.getLogger("onefuse_client")
    saved_handlers, saved_level = list(package.handlers), package.level
    try:
        setup_logging("debug")
        setup_logging("debug")
        assert len(package.handlers) == len(saved_handlers) + 1
        assert isinstance(package.handlers[-1].formatter, LogfmtFormatter)
        assert package.level == logging.DEBUG
        assert root.handlers == root_handlers
    finally:
        for h in list(package.handlers):
            package.removeHandler(h)
        for h in saved_handlers:
            package.addHandler(h)
        package.setLevel(saved_level)


def test_setup_logging_keeps_application_handlers():
    package = logging.getLogger("onefuse_client")
    saved_handlers, saved_level = list(package.handlers), package.level
    app_handler = logging.NullHandler()
    package.addHandler(app_handler)
    try:
        setup_logging("warning")
        assert app_handler in package.handlers
        assert package.level == logging.WARNING
    finally:
        for h in list(package.handlers):
            package.removeHandler(h)
        for h in saved_handlers:
            package.addHandler(h)
        package.setLevel(saved_level)


def test_logfmt_formatter_quotes_awkward_values():
    record = logging.LogRecord(
        "onefuse_client.resources.custom_names",
        logging.WARNING,
        __file__,
        1,
        "name reserved",
        None,
        None,
    )
    record.resource = 'say "hi"'
    record.endpoint = ""
    record.status = "exception"

    line = LogfmtFormatter().format(record)

    assert 'event="name reserved"' in line
    assert 'resource="say \\"hi\\""' in line
    assert 'endpoint=""' in line
    assert "status=exception" in line


def test_log_event_honours_level(caplog):
    caplog.set_level(logging.WARNING, logger="onefuse_client.observability")

    log_event("quiet", custom_name_id=1)
    log_event("loud", level=logging.WARNING, workspace_id="2")

    assert [r.getMessage() for r in caplog.records] == ["loud"]
    assert caplog.records[0].levelno == logging.WARNING
    assert caplog.records[0].workspace_id == "2"


def test_log_event_uses_given_logger(caplog):
    caplog.set_level(logging.INFO)
    custom = logging.getLogger("onefuse_client.tests")

    log_event("custom_logger", logger=custom, message="x", Authorization="Basic abc")

    record = caplog.records[-1]
    assert record.name == "onefuse_client.tests"
    assert record.getMessage() == "custom_logger"
    assert not hasattr(record, "Authorization")
