"""Tests for the request/response handlers used by the UI layer."""
import json
from unittest import mock

import pytest

from fakes.fake_gateway import failed
from nicconfig.controller.handlers import (
    apply_adapter_ipv4_config,
    get_current_config,
    get_network_adapters,
)
from nicconfig.model import gateway as gateway_mod
from nicconfig.model.models import Ipv4Configuration


@pytest.mark.unit
class TestHandlers:
    def test_adapters_success(self, gateway):
        gateway.on("Get-NetAdapter", b'{"Name":"Ethernet","Status":"Up","InterfaceDescription":"Intel"}')
        response = get_network_adapters(gateway)
        assert response == {"success": True, "data": [{"id": "Ethernet", "display_label": "Ethernet (Up)"}]}

    def test_adapters_failure(self, gateway):
        gateway.on("Get-NetAdapter", b"garbage")
        response = get_network_adapters(gateway)
        assert response["success"] is False
        assert response["error"]["type"] == "UnparseableOutput"
        assert response["error"]["context"]["raw"] == "garbage"

    def test_current_config(self, gateway):
        gateway.on("Get-NetIPAddress", b'{"IPAddress":"10.1.2.3","PrefixLength":16}')
        response = get_current_config("Ethernet", gateway)
        assert response["success"] is True
        assert response["data"] == {
            "adapter": "Ethernet",
            "address": "10.1.2.3",
            "mask": "255.255.0.0",
            "gateway": "",
            "dns1": "",
            "dns2": "",
        }

    def test_current_config_missing_adapter(self, gateway):
        response = get_current_config("", gateway)
        assert response["error"]["type"] == "MissingAdapter"
        assert gateway.calls == []

    def test_apply_from_mapping_with_ip_key(self, gateway):
        payload = {"adapter": "Eth0", "ip": "10.0.0.5", "mask": "255.255.255.0", "gateway": "", "dns1": "", "dns2": ""}
        response = apply_adapter_ipv4_config(payload, gateway)
        assert response == {
            "success": True,
            "data": {"adapter": "Eth0", "steps": ["Address"], "message": "IPv4 configuration applied"},
        }

    def test_apply_from_model(self, gateway):
        cfg = Ipv4Configuration(adapter="Eth0", address="10.0.0.5", mask="255.255.255.0", dns1="1.1.1.1")
        response = apply_adapter_ipv4_config(cfg, gateway)
        assert response["data"]["steps"] == ["Address", "PrimaryDns"]

    def test_apply_missing_keys_fail_validation(self, gateway):
        response = apply_adapter_ipv4_config({"adapter": "Eth0"}, gateway)
        assert response["error"]["type"] == "InvalidAddress"
        assert gateway.calls == []

    def test_apply_malformed_payload(self, gateway):
        response = apply_adapter_ipv4_config({"adapter": "Eth0", "mask": 24}, gateway)
        assert response["success"] is False
        assert response["error"]["type"] == "InvalidRequest"
        assert response["error"]["context"]["fields"] == ["mask"]
        assert gateway.calls == []

    def test_apply_step_failure_is_serializable(self, gateway):
        gateway.on("set dns", failed(stderr="Element not found."))
        cfg = Ipv4Configuration(adapter="Eth0", address="10.0.0.5", mask="255.255.255.0", dns1="1.1.1.1")
        response = apply_adapter_ipv4_config(cfg, gateway)

        error = response["error"]
        assert error["type"] == "ApplyStepFailure"
        assert error["context"]["step"] == "PrimaryDns"
        assert error["context"]["command"] == "netsh interface ip set dns name='Eth0' static 1.1.1.1"
        json.dumps(response)


@pytest.mark.unit
class TestDefaultGateway:
    """Handlers called without a gateway build one from NICCONFIG_* settings."""

    def test_settings_reach_the_process(self, monkeypatch):
        monkeypatch.setenv("NICCONFIG_POWERSHELL_EXECUTABLE", "pwsh")
        monkeypatch.setenv("NICCONFIG_COMMAND_TIMEOUT_SECONDS", "5")
        proc = mock.Mock(pid=1, returncode=0)
        proc.communicate.return_value = (b'{"Name":"Ethernet","Status":"Up","InterfaceDescription":"Intel"}', b"")

        with mock.patch.object(gateway_mod.subprocess, "Popen", return_value=proc) as popen:
            response = get_network_adapters()

        assert response["success"] is True
        assert popen.call_args.args[0][0] == "pwsh"
        proc.communicate.assert_called_once_with(timeout=5.0)

    def test_invalid_settings_reported_as_error(self, monkeypatch):
        monkeypatch.setenv("NICCONFIG_COMMAND_TIMEOUT_SECONDS", "never")
        with mock.patch.object(gateway_mod.subprocess, "Popen") as popen:
            response = get_current_config("Ethernet")

        assert response["success"] is False
        assert response["error"]["type"] == "InvalidSettings"
        popen.assert_not_called()
