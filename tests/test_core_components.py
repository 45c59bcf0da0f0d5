"""
Unit tests for core fieldtree components.

Tests configuration management, data models, the type and parameter
registries and identifier generators.
"""

import os
import tempfile
import unittest
from pathlib import Path

from pydantic import ValidationError

from fieldtree.config import ConfigManager
from fieldtree.definitions import TypeRegistry, DataTypeDefinition, ParameterRegistry, get_field_config
from fieldtree.identifiers import SequentialIdGenerator, UuidIdGenerator, get_unique_id
from fieldtree.models import NormalizedField, NormalizedFields, TreeItem


class TestConfigManager(unittest.TestCase):
    """Test configuration management functionality."""
    
    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.config_path = Path(self.temp_dir) / "test_config.yaml"
        
    def tearDown(self):
        """Clean up test fixtures."""
        if self.config_path.exists():
            self.config_path.unlink()
        os.rmdir(self.temp_dir)
    
    def test_config_creation_with_defaults(self):
        """Test config manager falls back to defaults when file missing."""
        config = ConfigManager(str(self.config_path))
        
        self.assertEqual(config.max_nested_depth, 4)
        self.assertEqual(config.validity_sections, ["configuration", "fields_json_editor", "field_form"])
        self.assertEqual(config.id_prefix, "field_")
        self.assertEqual(config.log_level, "INFO")
    
    def test_config_loading_from_file(self):
        """Test loading configuration from YAML file."""
        test_config = """
editor:
  max_nested_depth: 6

validity:
  sections:
    - configuration
"""
        with open(self.config_path, 'w') as f:
            f.write(test_config)
        
        config = ConfigManager(str(self.config_path))
        
        self.assertEqual(config.max_nested_depth, 6)
        self.assertEqual(config.validity_sections, ["configuration"])
        # Keys missing from the file keep their defaults
        self.assertEqual(config.id_prefix, "field_")
    
    def test_dot_notation_access(self):
        """Test accessing config values with dot notation."""
        config = ConfigManager(str(self.config_path))
        
        self.assertEqual(config.get("editor.max_nested_depth"), 4)
        self.assertEqual(config.get("output.indent"), 2)
        self.assertEqual(config.get("nonexistent.key", "default"), "default")
        self.assertIn("max_nested_depth", config.get_section("editor"))
    
    def test_invalid_yaml_falls_back_to_defaults(self):
        """Test a broken file does not prevent startup."""
        with open(self.config_path, 'w') as f:
            f.write("editor: [unclosed")
        
        config = ConfigManager(str(self.config_path))
        self.assertEqual(config.max_nested_depth, 4)
    
    def test_config_reload(self):
        """Test configuration reloading."""
        with open(self.config_path, 'w') as f:
            f.write("editor:\n  max_nested_depth: 2")
        
        config = ConfigManager(str(self.config_path))
        self.assertEqual(config.max_nested_depth, 2)
        
        with open(self.config_path, 'w') as f:
            f.write("editor:\n  max_nested_depth: 8")
        
        config.reload()
        self.assertEqual(config.max_nested_depth, 8)


def make_field(field_id, name, path, parent_id=None, child_fields=None, **kwargs):
    return NormalizedField(
        id=field_id,
        parent_id=parent_id,
        path=path,
        source={"name": name, "type": kwargs.pop("type", "object")},
        child_fields=child_fields,
        has_child_fields=bool(child_fields),
        can_have_child_fields=True,
        child_fields_name="properties",
        **kwargs
    )


class TestDataModels(unittest.TestCase):
    """Test data model validation and functionality."""
    
    def test_valid_table(self):
        """Test a consistent table is accepted."""
        table = NormalizedFields(
            by_id={
                "a": make_field("a", "user", "user", child_fields=["b"]),
                "b": make_field("b", "name", "user.name", parent_id="a", nested_depth=1),
            },
            root_level_fields=["a"],
            max_nested_depth=1,
        )
        
        self.assertEqual(table.by_id["b"].name, "name")
        self.assertEqual(table.root_level_fields, ["a"])
    
    def test_empty_table(self):
        """Test the empty table is valid."""
        table = NormalizedFields()
        self.assertEqual(table.by_id, {})
        self.assertEqual(table.max_nested_depth, 0)
    
    def test_dangling_child_rejected(self):
        """Test a child id without a row is rejected."""
        with self.assertRaises(ValidationError):
            NormalizedFields(
                by_id={"a": make_field("a", "user", "user", child_fields=["missing"])},
                root_level_fields=["a"],
            )
    
    def test_dangling_root_rejected(self):
        """Test a root-level id without a row is rejected."""
        with self.assertRaises(ValidationError):
            NormalizedFields(by_id={}, root_level_fields=["a"])
    
    def test_mismatched_parent_rejected(self):
        """Test a child listed under one parent but pointing at another is rejected."""
        with self.assertRaises(ValidationError):
            NormalizedFields(
                by_id={
                    "a": make_field("a", "user", "user", child_fields=["b"]),
                    "b": make_field("b", "name", "other.name", parent_id="c"),
                    "c": make_field("c", "other", "other"),
                },
                root_level_fields=["a", "c"],
            )
    
    def test_duplicate_membership_rejected(self):
        """Test a field listed both at the root and as a child is rejected."""
        with self.assertRaises(ValidationError):
            NormalizedFields(
                by_id={
                    "a": make_field("a", "user", "user", child_fields=["a"]),
                },
                root_level_fields=["a"],
            )
    
    def test_unreachable_cycle_rejected(self):
        """Test rows that only reference each other are rejected."""
        with self.assertRaises(ValidationError):
            NormalizedFields(
                by_id={
                    "a": make_field("a", "x", "y.x", parent_id="b", child_fields=["b"]),
                    "b": make_field("b", "y", "x.y", parent_id="a", child_fields=["a"]),
                },
                root_level_fields=[],
            )
    
    def test_stale_path_rejected(self):
        """Test a path that does not follow the parent chain is rejected."""
        with self.assertRaises(ValidationError):
            NormalizedFields(
                by_id={
                    "a": make_field("a", "user", "user", child_fields=["b"]),
                    "b": make_field("b", "name", "person.name", parent_id="a"),
                },
                root_level_fields=["a"],
            )
    
    def test_tree_item_nesting(self):
        """Test TreeItem with nested children."""
        item = TreeItem(label="user", children=[TreeItem(label="name")])
        
        self.assertEqual(item.children[0].label, "name")
        self.assertIsNone(item.children[0].children)


class TestTypeRegistry(unittest.TestCase):
    """Test the data type registry."""
    
    def setUp(self):
        self.registry = TypeRegistry()
    
    def test_default_types_registered(self):
        """Test that the main types are registered."""
        types = self.registry.list_types()
        
        for data_type in ("text", "keyword", "numeric", "date", "range", "object", "nested"):
            self.assertIn(data_type, types)
    
    def test_main_type_from_sub_type(self):
        """Test sub-types resolve to their main type."""
        self.assertEqual(self.registry.get_main_type_from_sub_type("long"), "numeric")
        self.assertEqual(self.registry.get_main_type_from_sub_type("scaled_float"), "numeric")
        self.assertEqual(self.registry.get_main_type_from_sub_type("date_nanos"), "date")
        self.assertEqual(self.registry.get_main_type_from_sub_type("ip_range"), "range")
    
    def test_unlisted_sub_type(self):
        """Test an unlisted sub-type resolves to nothing."""
        self.assertIsNone(self.registry.get_main_type_from_sub_type("text"))
        self.assertIsNone(self.registry.get_main_type_from_sub_type("geo_point"))
        self.assertFalse(self.registry.is_sub_type("text"))
        self.assertTrue(self.registry.is_sub_type("integer"))
    
    def test_child_fields_name(self):
        """Test container names by type."""
        self.assertEqual(self.registry.child_fields_name("text"), "fields")
        self.assertEqual(self.registry.child_fields_name("keyword"), "fields")
        self.assertEqual(self.registry.child_fields_name("object"), "properties")
        self.assertEqual(self.registry.child_fields_name("nested"), "properties")
        self.assertIsNone(self.registry.child_fields_name("long"))
        self.assertIsNone(self.registry.child_fields_name("unknown"))
        self.assertIsNone(self.registry.child_fields_name(None))
    
    def test_custom_definitions(self):
        """Test building a registry from an explicit table."""
        registry = TypeRegistry([
            DataTypeDefinition("shape", "Shape", sub_types=("point", "polygon")),
            DataTypeDefinition("flattened", "Flattened", child_fields_name="properties"),
        ])
        
        self.assertEqual(registry.list_types(), ["shape", "flattened"])
        self.assertEqual(registry.get_main_type_from_sub_type("polygon"), "shape")
        self.assertTrue(registry.get_definition("shape").has_sub_types)
        self.assertEqual(registry.child_fields_name("flattened"), "properties")
        self.assertIsNone(registry.get_definition("text"))


class TestParameterRegistry(unittest.TestCase):
    """Test parameter widget configuration lookups."""
    
    def setUp(self):
        self.registry = ParameterRegistry()
    
    def test_parameter_config(self):
        """Test retrieving a parameter configuration."""
        boost = self.registry.get_field_config("boost")
        
        self.assertEqual(boost["defaultValue"], 1.0)
        self.assertEqual(boost["min"], 1)
        self.assertEqual(boost["max"], 20)
        self.assertFalse(self.registry.get_field_config("store")["defaultValue"])
    
    def test_prop_config(self):
        """Test retrieving a prop configuration."""
        config = self.registry.get_field_config("fielddata_frequency_filter", "min_segment_size")
        self.assertEqual(config["defaultValue"], 50)
    
    def test_unknown_prop_fails(self):
        """Test an undeclared prop is a hard error."""
        with self.assertRaises(ValueError):
            self.registry.get_field_config("boost", "min")
        with self.assertRaises(ValueError):
            self.registry.get_field_config("fielddata_frequency_filter", "median")
    
    def test_unknown_parameter_fails(self):
        """Test an undeclared parameter is a hard error."""
        with self.assertRaises(ValueError):
            self.registry.get_field_config("not_a_param")
    
    def test_config_is_a_copy(self):
        """Test callers cannot alter the registered configuration."""
        config = get_field_config("fielddata_frequency_filter")
        config["defaultValue"]["min"] = 99
        
        self.assertEqual(get_field_config("fielddata_frequency_filter")["defaultValue"]["min"], 0.01)


class TestIdGenerators(unittest.TestCase):
    """Test identifier generators."""
    
    def test_sequential_ids(self):
        """Test the deterministic sequence."""
        generator = SequentialIdGenerator(prefix="id")
        
        self.assertEqual([generator.generate_id() for _ in range(3)], ["id1", "id2", "id3"])
        generator.reset()
        self.assertEqual(generator.generate_id(), "id1")
    
    def test_sequential_default_prefix(self):
        """Test the prefix falls back to configuration."""
        self.assertEqual(SequentialIdGenerator().generate_id(), "field_1")
    
    def test_uuid_ids_unique(self):
        """Test random ids do not repeat."""
        generator = UuidIdGenerator()
        ids = {generator.generate_id() for _ in range(1000)}
        ids.add(get_unique_id())
        
        self.assertEqual(len(ids), 1001)


if __name__ == '__main__':
    unittest.main()
