"""Config loader tests."""

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from iconbuild.config import load_config, load_dev_allow_list

_ENV_KEYS = ("ICON_LIMIT", "ICONBUILD_ENV", "ICONBUILD_SOURCE_ROOT")


def _clean_env():
    return {k: v for k, v in os.environ.items() if k not in _ENV_KEYS}


class TestConfig(unittest.TestCase):
    def setUp(self) -> None:
        self._temp = tempfile.TemporaryDirectory()
        self.root = Path(self._temp.name)
        template_dir = self.root / "assets" / "templates"
        template_dir.mkdir(parents=True)
        (template_dir / "entry.template.ts").write_text("{{ICON_EXPORTS}}\n", encoding="utf-8")

    def tearDown(self) -> None:
        self._temp.cleanup()

    def test_load_config_defaults(self) -> None:
        with mock.patch.dict(os.environ, _clean_env(), clear=True):
            config = load_config(self.root)

        self.assertEqual(config.styles, ["outlined", "rounded", "sharp"])
        self.assertEqual(config.weights, [100, 200, 300, 400, 500, 600, 700])
        self.assertEqual(config.default_weight, 400)
        self.assertEqual(config.dts_jobs, 4)
        self.assertFalse(config.dev_mode)
        self.assertEqual(Path(config.output_dir), self.root / "src")
        self.assertEqual(Path(config.metadata_dir), self.root / "src" / "metadata")
        self.assertEqual(
            Path(config.source_root), self.root / "node_modules" / "@material-symbols"
        )

    def test_missing_template_raises(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaises(FileNotFoundError):
                load_config(Path(temp_dir))

    def test_dev_mode_from_icon_limit(self) -> None:
        env = _clean_env()
        env["ICON_LIMIT"] = "true"
        with mock.patch.dict(os.environ, env, clear=True):
            self.assertTrue(load_config(self.root).dev_mode)

    def test_dev_mode_from_environment_name(self) -> None:
        env = _clean_env()
        env["ICONBUILD_ENV"] = "development"
        with mock.patch.dict(os.environ, env, clear=True):
            self.assertTrue(load_config(self.root).dev_mode)

    def test_explicit_dev_mode_wins(self) -> None:
        env = _clean_env()
        env["ICON_LIMIT"] = "true"
        with mock.patch.dict(os.environ, env, clear=True):
            self.assertFalse(load_config(self.root, dev_mode=False).dev_mode)

    def test_source_root_override(self) -> None:
        env = _clean_env()
        env["ICONBUILD_SOURCE_ROOT"] = "/opt/symbols"
        with mock.patch.dict(os.environ, env, clear=True):
            self.assertEqual(Path(load_config(self.root).source_root), Path("/opt/symbols"))
            explicit = load_config(self.root, source_root=Path("/srv/svg"))
            self.assertEqual(Path(explicit.source_root), Path("/srv/svg"))


class TestDevAllowList(unittest.TestCase):
    def test_projects_raw_names_to_components(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "dev-icons.json"
            path.write_text(json.dumps(["home", "home-fill", "3d_rotation"]), encoding="utf-8")

            allow_list = load_dev_allow_list(path)

            self.assertEqual(allow_list.raw_names, ["home", "home-fill", "3d_rotation"])
            self.assertEqual(
                allow_list.component_ids, ["Home", "HomeFill", "Icon3DRotation"]
            )

    def test_rejects_non_list(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "dev-icons.json"
            path.write_text(json.dumps({"home": True}), encoding="utf-8")
            with self.assertRaises(ValueError):
                load_dev_allow_list(path)

    def test_missing_file_raises(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_dev_allow_list(Path("/nonexistent/dev-icons.json"))

    def test_shipped_list_loads(self) -> None:
        path = Path(__file__).resolve().parents[1] / "assets" / "dev-icons.json"
        if not path.exists():
            self.skipTest("dev-icons.json not found")
        allow_list = load_dev_allow_list(path)
        self.assertIn("Home", allow_list.component_ids)


if __name__ == "__main__":
    unittest.main()
