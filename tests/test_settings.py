import textwrap
from pathlib import Path

import pytest

from ranch.core.settings import RosterEntry, Settings, user_config_dir
from ranch.errors import SettingsError
from ranch.models.creature import Category, Sex


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    cfg = tmp_path / "config"
    cfg.mkdir()
    monkeypatch.setenv("RANCH_CONFIG_DIR", str(cfg))
    return cfg


def test_defaults_ship_three_starters():
    settings = Settings.load()
    assert settings.seed is None
    assert [e.to_dict() for e in settings.roster] == [
        {"name": "Pikachu", "type": "Electric", "sex": "Male"},
        {"name": "Salameche", "type": "Fire", "sex": "Male"},
        {"name": "Bulbizarre", "type": "Plant", "sex": "Female"},
    ]
    creatures = settings.build_roster()
    assert all(c.level == 1 and c.experience == 0 for c in creatures)


def test_env_overrides_config_dir(isolated_config_dir: Path):
    assert user_config_dir() == isolated_config_dir.resolve()


def test_user_file_in_config_dir_overrides_defaults(isolated_config_dir: Path):
    (isolated_config_dir / "settings.yaml").write_text("seed: 11\n", encoding="utf-8")
    settings = Settings.load()
    assert settings.seed == 11
    assert len(settings.roster) == 3


def test_explicit_file_overrides_user_file(tmp_path: Path, isolated_config_dir: Path):
    (isolated_config_dir / "settings.yaml").write_text("seed: 11\n", encoding="utf-8")
    explicit = tmp_path / "mine.yaml"
    explicit.write_text(
        textwrap.dedent(
            """
            seed: 5
            roster:
              - name: Carapuce
                type: water
                sex: FEMALE
            """
        ),
        encoding="utf-8",
    )
    settings = Settings.load(user_path=explicit)
    assert settings.seed == 5
    assert settings.roster == [RosterEntry("Carapuce", Category.WATER, Sex.FEMALE)]


def test_missing_explicit_file_is_ignored(tmp_path: Path):
    settings = Settings.load(user_path=tmp_path / "nope.yaml")
    assert len(settings.roster) == 3


def test_unknown_type_raises(tmp_path: Path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("roster:\n  - {name: X, type: Dragon, sex: Male}\n", encoding="utf-8")
    with pytest.raises(SettingsError):
        Settings.load(user_path=bad)


def test_non_mapping_file_raises(tmp_path: Path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(SettingsError):
        Settings.load(user_path=bad)


def test_bad_seed_raises(tmp_path: Path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("seed: many\n", encoding="utf-8")
    with pytest.raises(SettingsError):
        Settings.load(user_path=bad)
