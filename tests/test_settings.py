import tempfile
import unittest
from pathlib import Path

from docker_installer.settings import DEFAULT_ENGINE_PACKAGES, Settings, load_settings


class SettingsTests(unittest.TestCase):
    def test_defaults_without_a_file(self):
        settings = load_settings(None)
        self.assertEqual(settings.engine_packages, DEFAULT_ENGINE_PACKAGES)
        self.assertEqual(settings.service_group, "docker")
        self.assertEqual(settings.repo_base_url, "https://download.docker.com/linux")
        self.assertIn("ubuntu", settings.supported_distros)

    def test_yaml_overrides_selected_keys(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "installer.yaml"
            path.write_text(
                "packages:\n  engine: [docker-ce]\nrepository:\n  channel: test\n",
                encoding="utf-8",
            )
            settings = load_settings(str(path))

        self.assertEqual(settings.engine_packages, ["docker-ce"])
        self.assertEqual(settings.repo_channel, "test")
        self.assertEqual(settings.keyring_path, "/etc/apt/keyrings/docker.gpg")

    def test_non_yaml_extension_is_rejected(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "installer.json"
            path.write_text("{}", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_settings(str(path))

    def test_non_mapping_yaml_is_rejected(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "installer.yaml"
            path.write_text("- a\n- b\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_settings(str(path))

    def _write(self, temp_dir, text):
        path = Path(temp_dir) / "installer.yaml"
        path.write_text(text, encoding="utf-8")
        return str(path)

    def test_section_that_is_not_a_mapping_is_rejected_on_load(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaises(ValueError) as caught:
                load_settings(self._write(temp_dir, "packages: [a]\n"))
        self.assertIn("packages must be a mapping", str(caught.exception))

    def test_package_key_that_is_not_a_list_is_rejected_on_load(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaises(ValueError) as caught:
                load_settings(self._write(temp_dir, "packages:\n  engine: docker-ce\n"))
        self.assertIn("packages.engine", str(caught.exception))

    def test_unparsable_yaml_is_a_value_error(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaises(ValueError):
                load_settings(self._write(temp_dir, "packages: [unclosed\n"))

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            load_settings("/nonexistent/installer.yaml")

    def test_package_list_must_be_a_list(self):
        settings = Settings(raw={"packages": {"legacy": "docker.io"}})
        with self.assertRaises(ValueError):
            settings.legacy_packages


if __name__ == "__main__":
    unittest.main()
