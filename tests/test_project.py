"""
Tests for host project manifest checks.
"""

import pytest
import typer

import albatroz_cli


class TestManifest:
    """Tests for reading package.json and dependency membership."""

    def test_dev_dependencies_count(self, make_project):
        project = make_project(dependencies={"react": "18.0.0"}, dev_dependencies={"expo": "51.0.0"})
        manifest = albatroz_cli.load_manifest(project)

        assert albatroz_cli.has_dependency(manifest, "expo")
        assert albatroz_cli.has_dependency(manifest, "react")
        assert not albatroz_cli.has_dependency(manifest, "lucide-react-native")

    def test_dev_dependencies_override_runtime(self):
        manifest = {"dependencies": {"expo": "1.0.0"}, "devDependencies": {"expo": "2.0.0"}}
        assert albatroz_cli.manifest_dependencies(manifest) == {"expo": "2.0.0"}

    def test_empty_version_is_not_a_dependency(self):
        assert not albatroz_cli.has_dependency({"dependencies": {"expo": ""}}, "expo")

    def test_null_sections_are_ignored(self):
        manifest = {"dependencies": None, "devDependencies": {"expo": "1.0.0"}}
        assert albatroz_cli.has_dependency(manifest, "expo")

    def test_missing_manifest_has_no_dependencies(self):
        assert not albatroz_cli.has_dependency(None, "expo")

    def test_non_object_manifest_is_rejected(self, make_project):
        project = make_project(manifest=["expo"])
        with pytest.raises(ValueError):
            albatroz_cli.load_manifest(project)


class TestCheckExpoProject:
    """Tests for the project validator."""

    def test_returns_manifest_for_expo_project(self, make_project):
        project = make_project(dependencies={"expo": "51.0.0"})
        manifest = albatroz_cli.check_expo_project(project)
        assert manifest["dependencies"]["expo"] == "51.0.0"

    def test_exits_when_manifest_missing(self, tmp_path, capsys):
        with pytest.raises(typer.Exit) as excinfo:
            albatroz_cli.check_expo_project(tmp_path)

        assert excinfo.value.exit_code == 1
        assert "Could not find package.json" in capsys.readouterr().out

    def test_exits_when_manifest_unparsable(self, tmp_path):
        (tmp_path / "package.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(typer.Exit) as excinfo:
            albatroz_cli.check_expo_project(tmp_path)
        assert excinfo.value.exit_code == 1

    def test_exits_when_expo_missing(self, make_project, capsys):
        project = make_project(dependencies={"react-native": "0.74.0"})
        with pytest.raises(typer.Exit) as excinfo:
            albatroz_cli.check_expo_project(project)

        assert excinfo.value.exit_code == 1
        output = capsys.readouterr().out
        assert "This is not an Expo project" in output
        assert "npx create-expo-app@latest" in output
