import dataclasses

import pytest
from stellar_sdk import Network

from soroban_domains.config import SDKConfig
from soroban_domains.errors import ConfigurationMissingError


def test_defaults():
    cfg = SDKConfig()
    assert cfg.rpc_url.startswith("https://")
    assert cfg.network_passphrase == Network.TESTNET_NETWORK_PASSPHRASE
    assert cfg.default_fee == 100
    assert cfg.default_timeout == 0
    assert cfg.vaults_contract_id is None


def test_from_env(monkeypatch):
    monkeypatch.setenv("SOROBAN_DOMAINS_RPC_URL", "http://localhost:8000/rpc")
    monkeypatch.setenv("SOROBAN_DOMAINS_NETWORK_PASSPHRASE", Network.PUBLIC_NETWORK_PASSPHRASE)
    monkeypatch.setenv("SOROBAN_DOMAINS_VAULTS_CONTRACT_ID", "CVAULTS")
    monkeypatch.setenv("SOROBAN_DOMAINS_DEFAULT_FEE", "250")
    monkeypatch.setenv("SOROBAN_DOMAINS_DEFAULT_TIMEOUT", "60")
    monkeypatch.delenv("SOROBAN_DOMAINS_VALUES_DATABASE_CONTRACT_ID", raising=False)

    cfg = SDKConfig.from_env()
    assert cfg.rpc_url == "http://localhost:8000/rpc"
    assert cfg.network_passphrase == Network.PUBLIC_NETWORK_PASSPHRASE
    assert cfg.vaults_contract_id == "CVAULTS"
    assert cfg.values_database_contract_id is None
    assert cfg.default_fee == 250
    assert cfg.default_timeout == 60


def test_with_overrides_ignores_unknown_and_none():
    base = SDKConfig(vaults_contract_id="CA")
    cfg = SDKConfig.with_overrides(base, default_fee=300, vaults_contract_id=None, bogus=1)
    assert cfg.default_fee == 300
    assert cfg.vaults_contract_id == "CA"
    assert base.default_fee == 100


def test_config_is_immutable():
    cfg = SDKConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.default_fee = 1  # type: ignore[misc]


def test_require():
    cfg = SDKConfig(values_database_contract_id="CB")
    assert cfg.require("values_database_contract_id") == "CB"
    with pytest.raises(ConfigurationMissingError, match="Vault's contract id was not provided"):
        cfg.require("vaults_contract_id", "Vault's contract id")


@pytest.mark.parametrize(
    "kwargs",
    [{"rpc_url": "ftp://node"}, {"default_fee": -1}, {"default_timeout": -5}],
)
def test_validation(kwargs):
    with pytest.raises(ValueError):
        SDKConfig(**kwargs)
