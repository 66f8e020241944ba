"""
Unit tests for configuration data models.

Tests DirectoryConfig, GroupConfig and LocatorConfig validation,
serialization and registry construction.
"""

import os
import tempfile
import shutil
from pathlib import Path
import pytest
from pydantic import ValidationError

from filelocator.models.config import (
    DirectoryConfig,
    GroupConfig,
    LocatorConfig,
    DEFAULT_SEARCH_DEPTH
)
from filelocator.tools.file_locator import Locator


class TestDirectoryConfig:
    """Test cases for DirectoryConfig."""

    def test_path_normalized(self):
        """Test that directory paths are normalized."""
        config = DirectoryConfig(path="C:\\site\\views\\")
        assert config.path == "C:/site/views"
        assert config.depth is None

    def test_user_path_expanded(self):
        """Test that ~ is expanded."""
        config = DirectoryConfig(path="~/templates")
        assert config.path == str(Path("~/templates").expanduser()).replace("\\", "/")

    def test_negative_depth_rejected(self):
        """Test that negative depths are invalid."""
        with pytest.raises(ValidationError):
            DirectoryConfig(path="/a", depth=-1)

    def test_empty_path_rejected(self):
        """Test that an empty path is invalid."""
        with pytest.raises(ValidationError):
            DirectoryConfig(path="")


class TestGroupConfig:
    """Test cases for GroupConfig."""

    def test_string_paths_accepted(self):
        """Test that bare strings become DirectoryConfig entries."""
        group = GroupConfig(paths=["/a", {"path": "/b", "depth": 1}])

        assert [d.path for d in group.paths] == ["/a", "/b"]
        assert group.paths[1].depth == 1

    def test_single_path_accepted(self):
        """Test that a single string is treated as a one-item list."""
        group = GroupConfig(paths="/only")
        assert [d.path for d in group.paths] == ["/only"]

    def test_none_paths(self):
        """Test that missing paths produce an empty group."""
        assert GroupConfig(paths=None).paths == []

    def test_invalid_default_depth(self):
        """Test that a negative group default is invalid."""
        with pytest.raises(ValidationError):
            GroupConfig(paths=["/a"], default_depth=-3)

    def test_to_dict(self):
        """Test compact dictionary output."""
        group = GroupConfig(paths=["/a", {"path": "/b", "depth": 2}], default_depth=4)

        assert group.to_dict() == {
            'paths': ["/a", {'path': "/b", 'depth': 2}],
            'default_depth': 4
        }


class TestLocatorConfig:
    """Test cases for LocatorConfig."""

    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp(prefix="config-")
        self.root = Path(self.temp_dir)
        self.base = self.temp_dir.replace("\\", "/").rstrip("/")
        (self.root / "views" / "partials").mkdir(parents=True)
        (self.root / "views" / "partials" / "header.html").write_text("<header>")

    def teardown_method(self):
        """Clean up test fixtures."""
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def test_defaults(self):
        """Test default configuration values."""
        config = LocatorConfig()

        assert config.default_depth == DEFAULT_SEARCH_DEPTH == 3
        assert config.include_hidden is False
        assert config.base_path is None
        assert config.working_group is None
        assert config.groups == {}

    def test_group_shorthand_forms(self):
        """Test that groups accept lists, strings and mappings."""
        config = LocatorConfig(groups={
            'views': ["/a", "/b"],
            'assets': "/c",
            'empty': None,
            'full': {'paths': ["/d"], 'default_depth': 1},
        })

        assert [d.path for d in config.groups['views'].paths] == ["/a", "/b"]
        assert [d.path for d in config.groups['assets'].paths] == ["/c"]
        assert config.groups['empty'].paths == []
        assert config.groups['full'].default_depth == 1

    def test_groups_must_be_mapping(self):
        """Test that a non-mapping groups value is rejected."""
        with pytest.raises(ValidationError):
            LocatorConfig(groups=["/a"])

    def test_empty_group_name_rejected(self):
        """Test that blank group names are rejected."""
        with pytest.raises(ValidationError):
            LocatorConfig(groups={' ': ["/a"]})

    def test_negative_default_depth(self):
        """Test that the global default depth must be non-negative."""
        with pytest.raises(ValidationError):
            LocatorConfig(default_depth=-1)

    def test_base_path_normalized(self):
        """Test base path normalization and blank handling."""
        assert LocatorConfig(base_path="D:\\work\\").base_path == "D:/work"
        assert LocatorConfig(base_path="  ").base_path is None

    def test_build_registry(self):
        """Test that the registry reflects the configuration."""
        config = LocatorConfig(
            default_depth=2,
            working_group='views',
            groups={
                'views': {'paths': ["/a", {'path': "/b", 'depth': 7}], 'default_depth': 5},
                'assets': ["/c"],
            }
        )

        registry = config.build_registry()

        assert [(e.path, e.max_depth) for e in registry.get_entries('views')] == [("/a", 5), ("/b", 7)]
        assert [(e.path, e.max_depth) for e in registry.get_entries('assets')] == [("/c", 2)]
        assert registry.get_working_group() == 'views'
        assert registry.default_depth == 2

    def test_build_registry_relative_paths(self):
        """Test that relative paths are resolved against the base path."""
        config = LocatorConfig(base_path=self.temp_dir, groups={'views': ["views"]})

        registry = config.build_registry()
        assert registry.get_entries('views')[0].path == f"{self.base}/views"

    def test_locator_from_config(self):
        """Test building a working locator from configuration."""
        config = LocatorConfig(
            base_path=self.temp_dir,
            working_group='views',
            groups={'views': ["views"]}
        )

        locator = Locator.from_config(config)

        assert locator.locate("header") == f"{self.base}/views/partials/header.html"

    def test_include_hidden_passed_to_lister(self):
        """Test that the hidden flag reaches the directory lister."""
        locator = Locator.from_config(LocatorConfig(include_hidden=True))
        assert locator.lister.include_hidden is True

    def test_empty_group_fails_lookup(self):
        """Test that a configured group without paths stays unknown."""
        locator = Locator.from_config(LocatorConfig(groups={'empty': []}))

        with pytest.raises(KeyError):
            locator.locate("anything", "empty")

    def test_validate_configuration(self):
        """Test configuration warnings."""
        config = LocatorConfig(
            base_path=self.temp_dir,
            working_group='missing',
            groups={
                'views': ["views", "nowhere"],
                'empty': [],
            }
        )

        warnings = config.validate_configuration()

        assert any("Working group 'missing'" in w for w in warnings)
        assert any("Group 'empty' has no directories" in w for w in warnings)
        assert any(w.endswith(f"{self.base}/nowhere") for w in warnings)
        assert not any(w.endswith(f"{self.base}/views") for w in warnings)

    def test_drive_paths_treated_as_absolute(self):
        """Test that warnings and the registry agree on drive-letter paths."""
        config = LocatorConfig(base_path=self.temp_dir, groups={'views': ["D:\\templates"]})

        warnings = config.validate_configuration()
        registry = config.build_registry()

        assert registry.get_entries('views')[0].path == "D:/templates"
        assert any(w.endswith(": D:/templates") for w in warnings)
        assert not any(self.base in w for w in warnings)

    def test_to_dict_from_dict(self):
        """Test dictionary conversion in both directions."""
        config = LocatorConfig(
            base_path="/srv",
            default_depth=4,
            groups={'views': {'paths': ["/a", {'path': "/b", 'depth': 1}]}}
        )

        data = config.to_dict()
        assert data['groups']['views']['paths'] == ["/a", {'path': "/b", 'depth': 1}]

        restored = LocatorConfig.from_dict(data)
        assert restored == config

    def test_str_representation(self):
        """Test string output."""
        config = LocatorConfig(groups={'views': ["/a"], 'assets': ["/b", "/c"]})
        text = str(config)

        assert "Default depth: 3" in text
        assert "Group 'views': 1 directory" in text
        assert "Group 'assets': 2 directories" in text
