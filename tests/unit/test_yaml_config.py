"""Tests for loading scan configurations from YAML."""

import pytest

from ct_geometry import FanBeam, InvalidConfiguration, ParallelBeam, ScanConfig, generate, load_scan_config
from ct_geometry.config import DEFAULT_RADIUS, GeometrySettings


def test_load_fan_config(scan_config_file):
    cfg = load_scan_config(scan_config_file)

    assert cfg.radius == 2.0
    assert cfg.device == 'cpu'
    assert cfg.verbose is False
    assert cfg.build_geometry() == FanBeam(1.0, 5, 0.5)


def test_config_generate_matches_direct_call(scan_config_file):
    cfg = load_scan_config(scan_config_file)
    assert cfg.generate() == generate(FanBeam(1.0, 5, 0.5), 2.0)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_scan_config(tmp_path / "missing.yaml")


def test_missing_geometry_section_raises(tmp_path):
    path = tmp_path / "scan.yaml"
    path.write_text("scan:\n  radius: 1.0\n")
    with pytest.raises(KeyError):
        load_scan_config(path)


def test_radius_defaults_when_scan_section_missing():
    cfg = ScanConfig.from_dict(
        {"geometry": {"type": "parallel", "width_ratio": 0.5, "num_sources": 3, "rotation_step": 0.2}}
    )
    assert cfg.radius == DEFAULT_RADIUS
    assert cfg.build_geometry() == ParallelBeam(0.5, 3, 0.2)


def test_geometry_type_is_case_insensitive():
    cfg = ScanConfig.from_dict(
        {"geometry": {"type": "Parallel", "width_ratio": 0.0, "num_sources": 1, "rotation_step": 1.0}}
    )
    assert isinstance(cfg.build_geometry(), ParallelBeam)


def test_unknown_geometry_type_is_rejected():
    settings = GeometrySettings(type="cone", num_sources=3, rotation_step=0.1)
    with pytest.raises(InvalidConfiguration):
        settings.build()


def test_missing_shape_parameter_is_rejected():
    with pytest.raises(InvalidConfiguration, match="width_ratio"):
        GeometrySettings(type="parallel", num_sources=3, rotation_step=0.1).build()
    with pytest.raises(InvalidConfiguration, match="angle"):
        GeometrySettings(type="fan", num_sources=3, rotation_step=0.1).build()


def test_invalid_values_surface_on_build():
    cfg = ScanConfig.from_dict(
        {"geometry": {"type": "fan", "angle": 4.0, "num_sources": 3, "rotation_step": 0.1}}
    )
    with pytest.raises(InvalidConfiguration):
        cfg.build_geometry()


def test_invalid_radius_surfaces_on_generate():
    cfg = ScanConfig.from_dict(
        {
            "geometry": {"type": "fan", "angle": 1.0, "num_sources": 3, "rotation_step": 0.1},
            "scan": {"radius": -2.0},
        }
    )
    with pytest.raises(InvalidConfiguration):
        cfg.generate()


def test_to_dict_from_dict():
    cfg = ScanConfig(
        geometry=GeometrySettings(type="parallel", num_sources=4, rotation_step=0.3, width_ratio=0.9),
        radius=1.5,
    )
    assert ScanConfig.from_dict(cfg.to_dict()) == cfg


def test_null_rotation_step_is_rejected(tmp_path):
    path = tmp_path / "scan.yaml"
    path.write_text(
        "geometry:\n"
        "  type: parallel\n"
        "  width_ratio: 0.5\n"
        "  num_sources: 3\n"
        "  rotation_step: null\n"
    )
    cfg = load_scan_config(path)
    with pytest.raises(InvalidConfiguration, match="Rotation step"):
        cfg.build_geometry()
