import logging
import textwrap

import pytest

from epic_adventure.config import AdventureConfig, load_config, save_config
from epic_adventure.errors import ConfigError


@pytest.fixture(autouse=True)
def isolated_user_dirs(monkeypatch, tmp_path):
    # Keep the user config dir lookup inside tmp_path
    monkeypatch.setenv("EPIC_ADVENTURE_PORTABLE", "1")
    monkeypatch.chdir(tmp_path)


def write(tmp_path, text):
    path = tmp_path / "adventure.yaml"
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return path


def test_defaults_without_file():
    cfg = load_config(env={})
    assert cfg.default_name == "Steve"
    assert cfg.max_health == 100
    assert cfg.potion_value == 50
    assert (cfg.forest.damage, cfg.forest.gold) == (25, 40)
    assert (cfg.mountain.damage, cfg.mountain.gold) == (35, 60)
    assert (cfg.village.map_price, cfg.village.treasure_gold, cfg.village.thief_damage) == (20, 100, 10)
    assert cfg.results_file == "game_results.txt"
    assert not cfg.randomized


def test_missing_explicit_file_falls_back(tmp_path, caplog):
    caplog.clear()
    with caplog.at_level(logging.WARNING):
        cfg = load_config(tmp_path / "nope.yaml", env={})
    assert cfg == AdventureConfig()
    assert any("not found" in rec.message for rec in caplog.records)


def test_partial_yaml_overrides(tmp_path):
    path = write(
        tmp_path,
        """
        player:
          default_name: Hilda
        encounters:
          mountain:
            damage: 50
        randomness:
          seed: 99
          damage_variance: 3
        """,
    )
    cfg = load_config(path, env={})
    assert cfg.default_name == "Hilda"
    assert cfg.mountain.damage == 50
    assert cfg.mountain.gold == 60
    assert cfg.seed == 99
    assert cfg.randomized


def test_empty_yaml_is_defaults(tmp_path):
    path = write(tmp_path, "")
    assert load_config(path, env={}) == AdventureConfig()


def test_negative_values_clamped(tmp_path, caplog):
    path = write(
        tmp_path,
        """
        encounters:
          forest:
            gold: -10
        """,
    )
    caplog.clear()
    with caplog.at_level(logging.WARNING):
        cfg = load_config(path, env={})
    assert cfg.forest.gold == 0
    assert any("clamped" in rec.message for rec in caplog.records)


@pytest.mark.parametrize("text", ["- just\n- a list\n", "player: [1, 2]\n", "player:\n  max_health: lots\n"])
def test_invalid_contents_raise(tmp_path, text):
    path = write(tmp_path, text)
    with pytest.raises(ConfigError):
        load_config(path, env={})


def test_malformed_yaml_raises(tmp_path):
    path = write(tmp_path, "player: {default_name: [unclosed\n")
    with pytest.raises(ConfigError):
        load_config(path, env={})


def test_zero_max_health_rejected(tmp_path):
    path = write(tmp_path, "player:\n  max_health: 0\n")
    with pytest.raises(ConfigError):
        load_config(path, env={})


def test_env_overrides(tmp_path):
    env = {
        "EPIC_ADVENTURE_RESULTS_FILE": str(tmp_path / "out.txt"),
        "EPIC_ADVENTURE_DEFAULT_NAME": "  Rolf ",
        "EPIC_ADVENTURE_SEED": "12",
    }
    cfg = load_config(env=env)
    assert cfg.results_file == str(tmp_path / "out.txt")
    assert cfg.default_name == "Rolf"
    assert cfg.seed == 12


def test_config_path_from_env(tmp_path):
    path = write(tmp_path, "potion_value: 30\n")
    cfg = load_config(env={"EPIC_ADVENTURE_CONFIG": str(path)})
    assert cfg.potion_value == 30


def test_user_config_dir_is_used(tmp_path):
    config_dir = tmp_path / "userdata" / "config"
    config_dir.mkdir(parents=True)
    (config_dir / "adventure.yaml").write_text("potion_value: 25\n", encoding="utf-8")
    assert load_config(env={}).potion_value == 25


def test_save_and_reload(tmp_path):
    cfg = AdventureConfig(default_name="Ada", seed=5)
    cfg.village.map_price = 30
    path = tmp_path / "nested" / "adventure.yaml"
    save_config(cfg, path)
    assert load_config(path, env={}) == cfg
