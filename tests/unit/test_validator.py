"""Tests for desired-configuration validation."""
import pytest

from nicconfig.errors import (
    ConfigValidationError,
    InvalidAddress,
    InvalidDns1,
    InvalidDns2,
    InvalidGateway,
    InvalidMask,
    MissingAdapter,
)
from nicconfig.model.models import Ipv4Configuration
from nicconfig.model.validator import validate_config


def _config(**overrides):
    fields = dict(adapter="Eth0", address="10.0.0.5", mask="255.255.255.0", gateway="10.0.0.1", dns1="8.8.8.8", dns2="8.8.4.4")
    fields.update(overrides)
    return Ipv4Configuration(**fields)


@pytest.mark.unit
class TestValidateConfig:
    def test_complete_config_passes(self):
        validate_config(_config())

    def test_optional_fields_may_be_empty(self):
        validate_config(_config(gateway="", dns1="", dns2=""))

    @pytest.mark.parametrize(
        "overrides, error",
        [
            ({"adapter": ""}, MissingAdapter),
            ({"adapter": "   "}, MissingAdapter),
            ({"address": ""}, InvalidAddress),
            ({"address": "10.0.0.256"}, InvalidAddress),
            ({"mask": ""}, InvalidMask),
            ({"mask": "255.255.0"}, InvalidMask),
            ({"gateway": "gateway"}, InvalidGateway),
            ({"dns1": "8.8.8"}, InvalidDns1),
            ({"dns2": "8.8.4.4.4"}, InvalidDns2),
        ],
    )
    def test_rejections(self, overrides, error):
        with pytest.raises(error) as exc:
            validate_config(_config(**overrides))
        assert isinstance(exc.value, ConfigValidationError)

    def test_first_failure_wins(self):
        bad = _config(adapter="", address="x", mask="y", gateway="z", dns1="q", dns2="r")
        with pytest.raises(MissingAdapter):
            validate_config(bad)

        with pytest.raises(InvalidAddress):
            validate_config(_config(address="x", mask="y"))
        with pytest.raises(InvalidMask):
            validate_config(_config(mask="y", gateway="z"))
        with pytest.raises(InvalidGateway):
            validate_config(_config(gateway="z", dns1="q"))
        with pytest.raises(InvalidDns1):
            validate_config(_config(dns1="q", dns2="r"))

    def test_error_names_field(self):
        with pytest.raises(InvalidMask) as exc:
            validate_config(_config(mask="255.255.255"))
        assert exc.value.to_dict()["context"] == {"field": "mask"}
        assert exc.value.to_dict()["type"] == "InvalidMask"
