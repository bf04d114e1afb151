"""
Tests for the quadtile CLI
"""

import json

import pytest

from quadtile.cli import main


class TestInfoCommand:
    """Test `quadtile info`"""

    def test_info_defaults(self, capsys):
        """Test info with explicit options"""
        main(["info", "--max-level", "3", "--roots-x", "2"])
        out = capsys.readouterr().out

        assert "Levels: 0 - 3" in out
        assert "Root Grid: 2 x 1" in out
        assert "Finest Level Grid: 16 x 8" in out
        assert "0/0/0" in out
        assert "0/1/0" in out

    def test_info_from_config_file(self, tmp_path, capsys):
        """Test info reading a JSON configuration"""
        path = tmp_path / "tileset.json"
        path.write_text(json.dumps({"bounds": [0, 0, 8, 4], "max_level": 2, "tile_size_px": 512}))

        main(["info", "--config", str(path)])
        out = capsys.readouterr().out

        assert "Tile Size: 512px" in out
        assert "Root Grid: 1 x 1" in out

    def test_info_invalid_configuration(self, capsys):
        """Test invalid options exit with an error message"""
        with pytest.raises(SystemExit) as exc:
            main(["info", "--min-level", "4", "--max-level", "2"])

        assert exc.value.code == 2
        assert "Error:" in capsys.readouterr().out


class TestSimulateCommand:
    """Test `quadtile simulate`"""

    def test_simulate_zoom_in_and_out(self, capsys):
        """Test each scale prints one delta line"""
        main(
            [
                "simulate",
                "--max-level",
                "2",
                "--roots-x",
                "2",
                "--bbox",
                "-170",
                "-80",
                "-160",
                "-70",
                "--scale",
                "100",
                "1",
                "--show-tiles",
            ]
        )
        out = capsys.readouterr().out

        assert "[1] scale=100  +3 ~0 -0  resident=3" in out
        assert "L0=1, L1=1, L2=1" in out
        assert "added: 0/0/0 1/0/0 2/0/0" in out
        assert "[2] scale=1  +0 ~0 -2  resident=1" in out
        assert "removed: 1/0/0 2/0/0" in out

    def test_simulate_geojson_region(self, tmp_path, capsys):
        """Test the region can come from a GeoJSON file"""
        path = tmp_path / "area.geojson"
        path.write_text(
            json.dumps(
                {
                    "type": "Polygon",
                    "coordinates": [[[10, 10], [20, 10], [20, 20], [10, 20], [10, 10]]],
                }
            )
        )

        main(["simulate", "--max-level", "1", "--region", str(path), "--scale", "0.1"])
        out = capsys.readouterr().out

        assert "[1] scale=0.1  +1 ~0 -0  resident=1" in out

    def test_simulate_empty_view(self, capsys):
        """Test a view outside the bounds reports no resident tiles"""
        main(["simulate", "--bbox", "500", "500", "600", "600", "--scale", "1"])
        out = capsys.readouterr().out

        assert "resident=0" in out
        assert "per level: (none)" in out

    def test_simulate_missing_region_file(self, tmp_path, capsys):
        """Test a missing GeoJSON file exits with an error message"""
        with pytest.raises(SystemExit) as exc:
            main(["simulate", "--region", str(tmp_path / "nope.geojson"), "--scale", "1"])

        assert exc.value.code == 2


class TestNoCommand:
    """Test running without a sub-command"""

    def test_prints_help(self, capsys):
        """Test help is printed and the exit code is 1"""
        with pytest.raises(SystemExit) as exc:
            main([])

        assert exc.value.code == 1
        assert "simulate" in capsys.readouterr().out
