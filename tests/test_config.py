"""
Tests for configuration defaults, validation and JSON files.
"""

import json

import pytest

from config import GeneratorConfig, SurfaceConfig, TreeConfig, load_config, save_config


class TestTreeConfig:
    """Tests for the growth settings."""

    def test_defaults(self) -> None:
        """Defaults match the documented option table."""
        config = TreeConfig()
        assert config.loss == 0.03
        assert config.min_sleep == 10
        assert config.branch_loss == 0.8
        assert config.main_loss == 0.8
        assert config.speed == 0.3
        assert config.new_branch == 0.8
        assert config.colorful is False
        assert config.fast_mode is True
        assert config.fade_out is True
        assert config.fade_amount == 0.05
        assert config.auto_spawn is True
        assert config.spawn_interval == 250
        assert config.initial_width == 10
        assert config.indicate_new_branch is False

    def test_camel_case_keys(self) -> None:
        """Browser-style option names are accepted."""
        config = TreeConfig.from_dict({'newBranch': 0.5, 'fadeOut': False, 'loss': 0.1})
        assert config.new_branch == 0.5
        assert config.fade_out is False
        assert config.loss == 0.1

    def test_unknown_key_rejected(self) -> None:
        """Typos in option names are errors."""
        with pytest.raises(ValueError, match="Unknown tree option"):
            TreeConfig.from_dict({'lose': 0.1})

    @pytest.mark.parametrize("options", [
        {'loss': -0.1},
        {'new_branch': 1.5},
        {'branch_loss': -0.2},
        {'fade_amount': 2.0},
        {'spawn_interval': 0},
        {'fade_interval': -10},
        {'initial_width': 0},
        {'min_sleep': -1},
    ])
    def test_out_of_range_rejected(self, options) -> None:
        """Invalid values fail at construction."""
        with pytest.raises(ValueError):
            TreeConfig(**options)

    def test_to_dict_is_json_ready(self) -> None:
        """Tuples become lists for JSON."""
        data = TreeConfig().to_dict()
        assert data['seed_velocity'] == [0.0, -3.0]
        json.dumps(data)


class TestSurfaceConfig:
    """Tests for the render settings."""

    def test_frame_timing(self) -> None:
        """Frame count and interval follow fps and duration."""
        config = SurfaceConfig(fps=20, duration_seconds=3)
        assert config.num_frames == 60
        assert config.frame_interval_ms == 50.0

    def test_invalid_fps(self) -> None:
        """fps must be positive."""
        with pytest.raises(ValueError):
            SurfaceConfig(fps=0)


class TestConfigFile:
    """Tests for loading and saving the JSON config."""

    def test_missing_file_gives_defaults(self, tmp_path) -> None:
        """No file means default settings."""
        config = load_config(str(tmp_path / 'missing.json'))
        assert config.tree == TreeConfig()
        assert config.render == SurfaceConfig()

    def test_round_trip(self, tmp_path) -> None:
        """Saved settings load back unchanged."""
        path = tmp_path / 'generator.json'
        original = GeneratorConfig(
            tree=TreeConfig(colorful=True, loss=0.05, seed_velocity=(1.0, -2.0)),
            render=SurfaceConfig(width=320, height=240, background_color=(0.1, 0.1, 0.1, 1.0)),
        )
        save_config(original, str(path))
        loaded = load_config(str(path))
        assert loaded.tree == original.tree
        assert loaded.render == original.render

    def test_partial_file(self, tmp_path) -> None:
        """Sections and fields may be omitted."""
        path = tmp_path / 'generator.json'
        path.write_text(json.dumps({'tree': {'spawnInterval': 100}}))
        config = load_config(str(path))
        assert config.tree.spawn_interval == 100
        assert config.render == SurfaceConfig()

    def test_unknown_section_rejected(self, tmp_path) -> None:
        """Only tree and render sections are allowed."""
        path = tmp_path / 'generator.json'
        path.write_text(json.dumps({'trees': {}}))
        with pytest.raises(ValueError):
            load_config(str(path))

    def test_output_paths(self) -> None:
        """Output paths derive from output_dir."""
        config = GeneratorConfig(render=SurfaceConfig(output_dir='out'))
        assert str(config.animation_path).replace('\\', '/') == 'out/trees.gif'
