"""Unit tests for configuration parser."""

import pytest
import yaml
from pathlib import Path

from amxxrelease.config.parser import BuildConfig, Module, parse_config
from amxxrelease.core.exceptions import ConfigError, ReleaseError


@pytest.mark.unit
def test_parse_basic_config(tmp_path):
    """Test parsing a configuration with only the required fields."""
    config_file = tmp_path / "release.yaml"
    config_file.write_text(
        """
source_tree: C:/amxx/trunk
output_path: C:/amxx/release
"""
    )

    config = parse_config(config_file)

    assert config.source_tree == "C:/amxx/trunk"
    assert config.output_path == "C:/amxx/release"
    assert config.compress_path is None
    assert config.devenv_path == "devenv"
    assert config.make_path == "make"
    assert config.make_opts == ""


@pytest.mark.unit
def test_parse_complete_config(tmp_path):
    """Test parsing a configuration with every field."""
    config_file = tmp_path / "release.yaml"
    config_file.write_text(
        """
source_tree: /home/amxx/trunk
output_path: /home/amxx/release
compress_path: /usr/bin/tar
devenv_path: devenv.com
make_path: /usr/bin/gmake
make_opts: -j4 USE_METAMOD=1
"""
    )

    config = parse_config(config_file)

    assert config == BuildConfig(
        source_tree="/home/amxx/trunk",
        output_path="/home/amxx/release",
        compress_path="/usr/bin/tar",
        devenv_path="devenv.com",
        make_path="/usr/bin/gmake",
        make_opts="-j4 USE_METAMOD=1",
    )


@pytest.mark.unit
def test_config_is_read_only(tmp_path):
    config = BuildConfig(source_tree="a", output_path="b")

    with pytest.raises(AttributeError):
        config.source_tree = "c"


@pytest.mark.unit
def test_expands_home(tmp_path):
    config_file = tmp_path / "release.yaml"
    config_file.write_text("source_tree: ~/trunk\noutput_path: /out\n")

    config = parse_config(config_file)

    assert config.source_tree == str(Path("~/trunk").expanduser())


@pytest.mark.unit
def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        parse_config(tmp_path / "missing.yaml")


@pytest.mark.unit
def test_empty_file(tmp_path):
    config_file = tmp_path / "release.yaml"
    config_file.write_text("")

    with pytest.raises(ConfigError, match="empty"):
        parse_config(config_file)


@pytest.mark.unit
def test_invalid_yaml(tmp_path):
    config_file = tmp_path / "release.yaml"
    config_file.write_text("source_tree: [unclosed\n")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        parse_config(config_file)


@pytest.mark.unit
def test_not_a_mapping(tmp_path):
    config_file = tmp_path / "release.yaml"
    config_file.write_text("- a\n- b\n")

    with pytest.raises(ConfigError, match="mapping"):
        parse_config(config_file)


@pytest.mark.unit
@pytest.mark.parametrize("missing", ["source_tree", "output_path"])
def test_missing_required_field(tmp_path, missing):
    fields = {"source_tree": "/src", "output_path": "/out"}
    del fields[missing]
    config_file = tmp_path / "release.yaml"
    config_file.write_text("".join(f"{k}: {v}\n" for k, v in fields.items()))

    with pytest.raises(ConfigError, match=f"Missing required field: {missing}"):
        parse_config(config_file)


@pytest.mark.unit
def test_path_must_be_string(tmp_path):
    config_file = tmp_path / "release.yaml"
    config_file.write_text("source_tree: 42\noutput_path: /out\n")

    with pytest.raises(ConfigError, match="source_tree must be a non-empty string"):
        parse_config(config_file)


@pytest.mark.unit
def test_make_opts_must_be_string(tmp_path):
    config_file = tmp_path / "release.yaml"
    config_file.write_text("source_tree: /src\noutput_path: /out\nmake_opts: [a]\n")

    with pytest.raises(ConfigError, match="make_opts"):
        parse_config(config_file)


@pytest.mark.unit
def test_config_error_is_release_error():
    assert issubclass(ConfigError, ReleaseError)


class TestModule:
    """Test module records."""

    def test_defaults(self):
        module = Module(sourcedir="dlls/fun", projname="fun_amxx", vcproj="fun")

        assert module.build == "Release"
        assert module.bindir is None

    def test_from_dict(self):
        module = Module.from_dict(
            {
                "sourcedir": "dlls/cstrike",
                "projname": "cstrike_amxx",
                "vcproj": "cstrike",
                "bindir": "msvc",
                "build": "JITRelease",
            }
        )

        assert module == Module(
            sourcedir="dlls/cstrike",
            projname="cstrike_amxx",
            vcproj="cstrike",
            build="JITRelease",
            bindir="msvc",
        )

    def test_from_dict_missing_field(self):
        with pytest.raises(ConfigError, match="vcproj"):
            Module.from_dict({"sourcedir": "dlls/fun", "projname": "fun_amxx"})

    def test_from_dict_not_a_mapping(self):
        with pytest.raises(ConfigError, match="Module must be a mapping"):
            Module.from_dict(["sourcedir"])

    @pytest.mark.parametrize("bindir", [5, "", ["msvc"]])
    def test_from_dict_invalid_bindir(self, bindir):
        with pytest.raises(ConfigError, match="bindir"):
            Module.from_dict(
                {
                    "sourcedir": "dlls/cstrike",
                    "projname": "cstrike_amxx",
                    "vcproj": "cstrike",
                    "bindir": bindir,
                }
            )

    @pytest.mark.parametrize("build", [None, "", 2006])
    def test_from_dict_invalid_build(self, build):
        with pytest.raises(ConfigError, match="build"):
            Module.from_dict(
                {
                    "sourcedir": "dlls/fun",
                    "projname": "fun_amxx",
                    "vcproj": "fun",
                    "build": build,
                }
            )

    def test_from_dict_bindir_from_yaml(self):
        data = yaml.safe_load(
            "sourcedir: dlls/fun\nprojname: fun_amxx\nvcproj: fun\nbindir: 5\n"
        )

        with pytest.raises(ConfigError, match="bindir"):
            Module.from_dict(data)
