"""CLI argument, selection and outcome-reporting tests.

Verifies how ``projectmap.cli.main`` resolves the workspace, builds the root
selection and reports no-selection and failure outcomes.
"""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from projectmap import cli
from projectmap.artifacts import MapResult, MapStatus
from projectmap.render import FontUnavailableError


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        config_dir = tempfile.TemporaryDirectory()
        self.addCleanup(config_dir.cleanup)
        patcher = mock.patch("projectmap.config.CONFIG_PATH", Path(config_dir.name) / "config.json")
        patcher.start()
        self.addCleanup(patcher.stop)

    def _make_workspace(self, root: Path) -> Path:
        (root / "a.txt").write_text("a", encoding="utf-8")
        (root / "b").mkdir()
        (root / "b" / "c.txt").write_text("c", encoding="utf-8")
        return root

    def test_text_command_defaults_to_current_working_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = self._make_workspace(Path(tmp).resolve())
            previous_cwd = Path.cwd()
            stdout = io.StringIO()
            try:
                os.chdir(root)
                with mock.patch.object(sys, "argv", ["projectmap", "text"]), mock.patch("sys.stdout", stdout):
                    cli.main()
            finally:
                os.chdir(previous_cwd)

            written = (root / "project-map.txt").read_text(encoding="utf-8")
            self.assertIn("📄 a.txt\n", written)
            self.assertIn("📁 b\n   ┗━ 📄 c.txt\n", written)
            self.assertIn("project-map.txt", stdout.getvalue())

    def test_select_and_exclude_narrow_the_roots(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = self._make_workspace(Path(tmp).resolve())
            argv = ["projectmap", "text", str(root), "--select", "a.txt", "--select", "b", "--exclude", "a.txt"]

            with mock.patch.object(sys, "argv", argv), mock.patch("projectmap.cli.generate_text_map") as generate:
                generate.return_value = MapResult(status=MapStatus.WRITTEN, text_path=root / "project-map.txt")
                with mock.patch("sys.stdout", io.StringIO()):
                    cli.main()

            roots = generate.call_args.args[0]
            self.assertEqual([entry.path.name for entry in roots], ["b"])
            self.assertTrue(roots[0].is_dir)

    def test_no_selection_is_reported_and_nothing_is_written(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = self._make_workspace(Path(tmp).resolve())
            argv = ["projectmap", "image", str(root), "--select", "does-not-exist"]

            with mock.patch.object(sys, "argv", argv):
                with self.assertRaises(SystemExit) as exc_info:
                    cli.main()

            self.assertEqual(str(exc_info.exception), cli.NO_SELECTION_MESSAGE)
            self.assertFalse((root / "project-map.txt").exists())
            self.assertFalse((root / "project-map.png").exists())

    def test_image_command_passes_font_overrides(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = self._make_workspace(Path(tmp).resolve())
            argv = ["projectmap", "image", str(root), "--font", "/fonts/Mono.ttf", "--font-size", "14", "--sort"]

            with (
                mock.patch.object(sys, "argv", argv),
                mock.patch("projectmap.cli.generate_image_map") as generate,
                mock.patch("sys.stdout", io.StringIO()) as stdout,
            ):
                generate.return_value = MapResult(
                    status=MapStatus.WRITTEN,
                    text_path=root / "project-map.txt",
                    image_path=root / "project-map.png",
                )
                cli.main()

            kwargs = generate.call_args.kwargs
            self.assertEqual(kwargs["font_path"], Path("/fonts/Mono.ttf"))
            self.assertEqual(kwargs["font_size"], 14)
            self.assertTrue(kwargs["sort_entries"])
            self.assertIn("project-map.png", stdout.getvalue())

    def test_config_file_is_read_once_per_run(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = self._make_workspace(Path(tmp).resolve())

            with (
                mock.patch.object(sys, "argv", ["projectmap", "image", str(root)]),
                mock.patch("projectmap.config.load_config", return_value={"font_size": 14}) as load_config,
                mock.patch("projectmap.cli.generate_image_map") as generate,
                mock.patch("sys.stdout", io.StringIO()),
            ):
                generate.return_value = MapResult(status=MapStatus.WRITTEN, text_path=root / "project-map.txt")
                cli.main()

            load_config.assert_called_once_with()
            self.assertEqual(generate.call_args.kwargs["font_size"], 14)

    def test_missing_font_exits_with_message(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = self._make_workspace(Path(tmp).resolve())

            with (
                mock.patch.object(sys, "argv", ["projectmap", "image", str(root)]),
                mock.patch("projectmap.cli.generate_image_map", side_effect=FontUnavailableError("Font not available: x")),
            ):
                with self.assertRaises(SystemExit) as exc_info:
                    cli.main()

            self.assertEqual(str(exc_info.exception), "Font not available: x")

    def test_write_failure_exits_with_message(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = self._make_workspace(Path(tmp).resolve())

            with (
                mock.patch.object(sys, "argv", ["projectmap", "text", str(root)]),
                mock.patch("projectmap.cli.generate_text_map", side_effect=PermissionError("denied")),
            ):
                with self.assertRaises(SystemExit) as exc_info:
                    cli.main()

            self.assertEqual(str(exc_info.exception), "Failed to write project map: denied")

    def test_missing_workspace_path_is_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "nope"
            with mock.patch.object(sys, "argv", ["projectmap", "text", str(missing)]):
                with self.assertRaises(SystemExit) as exc_info:
                    cli.main()

        self.assertEqual(str(exc_info.exception), f"Path not found: {missing}")

    def test_output_dir_is_created_on_demand(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = self._make_workspace(Path(tmp).resolve())
            out = Path(tmp).resolve() / "nested" / "out"
            argv = ["projectmap", "text", str(root), "--select", "b", "--output-dir", str(out)]

            with mock.patch.object(sys, "argv", argv), mock.patch("sys.stdout", io.StringIO()):
                cli.main()

            self.assertEqual((out / "project-map.txt").read_text(encoding="utf-8"), "📁 b\n   ┗━ 📄 c.txt\n")


if __name__ == "__main__":
    unittest.main()
