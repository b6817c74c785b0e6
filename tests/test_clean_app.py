"""End-to-end tests for the interactive entry point."""

import clean_app
from app_cleaner.config import CleanerPaths, HomeDirectoryError
from conftest import ScriptedInput, make_file


def _use_paths(monkeypatch, paths):
    monkeypatch.setattr(clean_app, "build_paths", lambda: paths)


class TestMain:
    def test_empty_name_never_scans(self, monkeypatch, capsys):
        def fail(*_args, **_kwargs):
            raise AssertionError("scan should not run")

        monkeypatch.setattr(clean_app, "build_paths", fail)
        monkeypatch.setattr(clean_app, "locate", fail)

        assert clean_app.main(ScriptedInput("   ")) == 0
        assert "Application name cannot be empty. Exiting." in capsys.readouterr().out

    def test_end_of_input_counts_as_empty(self, monkeypatch):
        def fail(*_args, **_kwargs):
            raise AssertionError("scan should not run")

        monkeypatch.setattr(clean_app, "locate", fail)
        assert clean_app.main(ScriptedInput()) == 0

    def test_home_failure_is_fatal(self, monkeypatch, capsys):
        def no_home():
            raise HomeDirectoryError("could not get current user: no entry")

        monkeypatch.setattr(clean_app, "build_paths", no_home)

        assert clean_app.main(ScriptedInput("Docker")) == 1
        assert "could not get current user" in capsys.readouterr().out

    def test_nothing_found(self, monkeypatch, capsys, cleaner_paths):
        _use_paths(monkeypatch, cleaner_paths)

        assert clean_app.main(ScriptedInput("Docker")) == 0
        assert "No associated files found in common locations." in capsys.readouterr().out

    def test_root_warning_printed(self, monkeypatch, capsys, tmp_path, cleaner_paths):
        paths = CleanerPaths(
            home=tmp_path,
            search_roots=(tmp_path / "missing",) + cleaner_paths.search_roots,
            log_file=cleaner_paths.log_file,
        )
        _use_paths(monkeypatch, paths)

        clean_app.main(ScriptedInput("Docker"))

        assert f"Could not fully search '{tmp_path / 'missing'}'" in capsys.readouterr().out

    def test_find_and_delete(self, monkeypatch, cleaner_paths):
        support, caches = cleaner_paths.search_roots
        keep = make_file(support / "Slack" / "state.json")
        tree = make_file(support / "Docker Desktop" / "settings.json").parent
        plist = make_file(caches / "com.docker.docker")
        _use_paths(monkeypatch, cleaner_paths)

        assert clean_app.main(ScriptedInput("docker desktop", "all", "y")) == 0

        assert not tree.exists()
        assert plist.exists()  # 'docker' alone does not contain 'dockerdesktop'
        assert keep.exists()
        assert cleaner_paths.log_file.exists()

    def test_quit_leaves_everything(self, monkeypatch, cleaner_paths):
        support, _ = cleaner_paths.search_roots
        target = make_file(support / "Docker" / "a")
        _use_paths(monkeypatch, cleaner_paths)

        assert clean_app.main(ScriptedInput("Docker", "quit")) == 0
        assert target.exists()
        assert not cleaner_paths.log_file.exists()
