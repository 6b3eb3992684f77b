import builtins
import logging

import pytest

import seabattle.main as main_module


@pytest.fixture
def game_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SEABATTLE_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("SEABATTLE_SEED", "7")
    monkeypatch.setenv("SEABATTLE_CLEAR_SCREEN", "0")
    monkeypatch.delenv("SEABATTLE_MAX_INPUT_ATTEMPTS", raising=False)
    monkeypatch.delenv("SEABATTLE_TARGETING", raising=False)
    monkeypatch.setattr(main_module, "load_default_env_files", lambda: None)
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield tmp_path
    root.handlers[:] = handlers
    root.setLevel(level)


def test_main_plays_scripted_game_to_completion(game_env, monkeypatch, capsys) -> None:
    shots = iter(f"{chr(ord('A') + col)}{row}" for row in range(10) for col in range(10))
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(shots))

    assert main_module.main() == 0

    out = capsys.readouterr().out
    assert "Welcome to Battleship!" in out
    assert "Game over." in out
    assert list((game_env / "logs").glob("seabattle_run_*.jsonl"))


def test_main_aborts_cleanly_on_eof(game_env, monkeypatch, capsys) -> None:
    def _eof(prompt: str = "") -> str:
        raise EOFError

    monkeypatch.setattr(builtins, "input", _eof)

    assert main_module.main() == 1
    assert "Game aborted." in capsys.readouterr().out
