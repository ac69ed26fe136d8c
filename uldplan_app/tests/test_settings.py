"""Tests for application settings."""

from __future__ import annotations

from uldplan_app.config import settings as settings_module
from uldplan_app.config.settings import MomentScheme, PlacementStrategy, Settings


class TestSettingsDefault:
    def test_data_dir_beside_resources(self, tmp_path, monkeypatch):
        root = tmp_path / "res"
        root.mkdir()
        monkeypatch.setattr(settings_module, "_get_resource_root", lambda: root)
        s = Settings.default()
        assert s.data_dir == root / "uldplan_app_data"
        assert s.data_dir.is_dir()
        assert s.aircraft_db_path.name == "aircraft_db.json"
        assert s.aircraft_db_path.exists()

    def test_unwritable_resource_root_falls_back_to_cwd(self, tmp_path, monkeypatch):
        # a regular file cannot hold the data dir
        blocked = tmp_path / "site-packages"
        blocked.write_text("", encoding="utf-8")
        work = tmp_path / "work"
        work.mkdir()
        monkeypatch.setattr(settings_module, "_get_resource_root", lambda: blocked)
        monkeypatch.chdir(work)
        s = Settings.default()
        assert s.data_dir.resolve() == (work / "uldplan_app_data").resolve()
        assert s.data_dir.is_dir()
        assert s.load_plan_path.resolve() == (work / "loadplan.txt").resolve()

    def test_planner_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setattr(settings_module, "_get_resource_root", lambda: tmp_path)
        planner = Settings.default().planner
        assert planner.strategy == PlacementStrategy.FIRST_FIT
        assert planner.moment_scheme == MomentScheme.DISTRIBUTED
        assert (planner.main_arms.fore, planner.main_arms.aft) == (18.0, 36.0)
        assert (planner.lower_arms.fore, planner.lower_arms.aft) == (12.0, 28.0)
