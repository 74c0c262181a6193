"""Tests for the forest JSON interchange format."""

import json
from pathlib import Path

import pytest

from typeprune.tree.codec import (
    FORMAT_VERSION,
    decode,
    dump_forest,
    encode,
    forest_from_json,
    forest_to_json,
    load_forest,
)
from typeprune.tree.nodes import DocComment, DocLink, DocReference, Field, SourceUnit, TypeDeclaration
from typeprune.tree.types import ArrayType, ClassType, ParameterizedType, PrimitiveType

FIXTURES_PATH = Path(__file__).parent / "fixtures"


class TestEncode:
    """Tests for encoding tree objects."""

    def test_tags_objects_with_class_name(self):
        assert encode(ClassType("a.A")) == {"@": "ClassType", "fully_qualified_name": "a.A"}

    def test_omits_default_fields(self):
        data = encode(Field("x", type=PrimitiveType("int")))

        assert data == {
            "@": "Field",
            "name": "x",
            "type": {"@": "PrimitiveType", "keyword": "int"},
        }

    def test_tuples_become_lists(self):
        data = encode(ParameterizedType(ClassType("java.util.List"), (ClassType("a.A"),)))

        assert isinstance(data["type_parameters"], list)


class TestDecode:
    """Tests for decoding tree objects."""

    def test_lists_become_tuples(self):
        decl = decode(
            {
                "@": "TypeDeclaration",
                "name": "A",
                "type": {"@": "ClassType", "fully_qualified_name": "a.A"},
                "modifiers": ["public"],
            }
        )

        assert decl == TypeDeclaration("A", ClassType("a.A"), modifiers=("public",))

    def test_decoded_trees_are_hashable(self):
        link = decode(encode(DocLink("link", DocReference("A", types=(ArrayType(ClassType("a.A")),)))))

        assert isinstance(hash(DocComment(body=(link,))), int)

    def test_unknown_tag(self):
        with pytest.raises(ValueError, match="Unknown tree object"):
            decode({"@": "Lambda"})

    def test_missing_tag(self):
        with pytest.raises(ValueError, match="without '@' tag"):
            decode({"name": "A"})

    def test_unexpected_field(self):
        with pytest.raises(ValueError, match="Invalid 'ClassType'"):
            decode({"@": "ClassType", "fully_qualified_name": "a.A", "arity": 2})


class TestForestFiles:
    """Tests for reading and writing forest files."""

    def test_loads_fixture(self):
        forest = load_forest(FIXTURES_PATH / "shop_forest.json")

        assert [unit.path for unit in forest] == [
            "com/acme/App.java",
            "com/acme/Service.java",
            "com/acme/Model.java",
            "com/acme/legacy/Legacy.java",
        ]
        assert all(isinstance(unit, SourceUnit) for unit in forest)

    def test_dump_then_load(self, tmp_path: Path):
        forest = load_forest(FIXTURES_PATH / "shop_forest.json")
        output = tmp_path / "forest.json"

        dump_forest(forest, output)

        assert load_forest(output) == forest

    def test_writes_version(self):
        assert forest_to_json(())["version"] == FORMAT_VERSION

    def test_rejects_other_versions(self):
        with pytest.raises(ValueError, match="Unsupported"):
            forest_from_json({"version": 99, "units": []})

    def test_rejects_non_unit_items(self):
        with pytest.raises(ValueError, match="Expected SourceUnit"):
            forest_from_json({"units": [{"@": "Package", "name": "a"}]})

    def test_rejects_non_object(self):
        with pytest.raises(ValueError):
            forest_from_json([])

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(ValueError, match="Invalid JSON"):
            load_forest(path)

    def test_written_file_is_plain_json(self, tmp_path: Path):
        output = tmp_path / "empty.json"

        dump_forest((), output, indent=4)

        assert json.loads(output.read_text()) == {"version": FORMAT_VERSION, "units": []}
