from pathlib import Path

from sol_dash.config import RPC_ENV, load_settings
from sol_dash.networks import Network


def _clear(monkeypatch):
    for var in list(RPC_ENV.values()) + ["SOL_DASH_LOG_LEVEL"]:
        # set then delete so monkeypatch restores the original state afterwards
        monkeypatch.setenv(var, "x")
        monkeypatch.delenv(var)


def test_defaults(tmp_path, monkeypatch):
    _clear(monkeypatch)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SOL_DASH_HOME", str(tmp_path / "home"))
    s = load_settings()
    assert s.home == tmp_path / "home"
    assert s.log_level == "INFO"
    assert s.rpc_overrides == {}
    assert s.log_path == tmp_path / "home" / "sol-dash.log"


def test_home_defaults_under_user_home(tmp_path, monkeypatch):
    _clear(monkeypatch)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SOL_DASH_HOME", "")
    assert load_settings().home == Path.home() / ".sol-dash"


def test_rpc_overrides_from_env(tmp_path, monkeypatch):
    _clear(monkeypatch)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SOL_DASH_DEVNET_RPC", "https://devnet.example")
    monkeypatch.setenv("SOL_DASH_LOG_LEVEL", "debug")
    s = load_settings()
    assert s.rpc_overrides == {Network.DEVNET: "https://devnet.example"}
    assert s.log_level == "DEBUG"


def test_dotenv_file_is_read(tmp_path, monkeypatch):
    _clear(monkeypatch)
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("SOL_DASH_LOCALNET_RPC=http://127.0.0.1:18899\n")
    s = load_settings()
    assert s.rpc_overrides == {Network.LOCALNET: "http://127.0.0.1:18899"}


def test_environment_wins_over_dotenv(tmp_path, monkeypatch):
    _clear(monkeypatch)
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("SOL_DASH_MAINNET_RPC=http://from-file\n")
    monkeypatch.setenv("SOL_DASH_MAINNET_RPC", "http://from-env")
    assert load_settings().rpc_overrides == {Network.MAINNET: "http://from-env"}
