import pytest

from skillyaml.core import Node, ValueCoercionError, SkillYamlError, split_documents, parse_string


def test_put_get_has():
    node = Node()
    node.put("level", 5)
    assert node.has("level")
    assert node.get("level") == 5
    assert not node.has("missing")


def test_put_overwrites_in_place():
    node = Node()
    node.put("a", 1)
    node.put("b", 2)
    node.put("a", 3)
    assert node.get_keys() == ["a", "b"]
    assert node.get("a") == 3


def test_get_default_and_mapping():
    node = Node()
    node.put("skills", ["Bash", "Cleave"])
    assert node.get("missing", "fallback") == "fallback"
    assert node.get("skills", [], len) == 2
    assert node.get("missing", 0, len) == 0


def test_none_counts_as_absent():
    node = Node()
    node.put("parent", None)
    assert not node.has("parent")
    assert node.get("parent", "none") == "none"


def test_get_normalizes_textual_empty_list():
    node = Node()
    node.put("a", "[]")
    node.put("b", " []")
    assert node.get("a") == []
    assert node.get("b") == []
    assert node.entries["a"] == []


def test_remove():
    node = Node()
    node.put("a", 1)
    node.remove("a")
    node.remove("never-there")
    assert node.get_keys() == []


def test_container_protocol():
    node = Node(entries={"a": 1, "b": 2})
    assert "a" in node
    assert "z" not in node
    assert len(node) == 2
    assert list(node) == ["a", "b"]


class TestGetAs:
    def test_coerces_compatible_values(self):
        node = Node(entries={"level": "5", "ratio": 2, "flag": "true"})
        assert node.get_as("level", int) == 5
        assert node.get_as("ratio", float) == 2.0
        assert node.get_as("flag", bool) is True

    def test_missing_returns_default(self):
        assert Node().get_as("level", int, 7) == 7

    def test_incompatible_value_raises(self):
        node = Node(entries={"level": "high"})
        with pytest.raises(ValueCoercionError) as exc_info:
            node.get_as("level", int)
        assert exc_info.value.key == "level"
        assert isinstance(exc_info.value, TypeError)
        assert isinstance(exc_info.value, SkillYamlError)

    def test_section_request(self):
        inner = Node(label="stats", entries={"hp": 1})
        node = Node(entries={"stats": inner, "level": 3})
        assert node.get_as("stats", Node) is inner
        with pytest.raises(ValueCoercionError):
            node.get_as("level", Node)


def test_dict_conversion():
    data = {"type": "class", "tags": ["a", "b"], "stats": {"hp": 10}}
    node = Node.from_dict(data, label="Warrior")
    assert node.label == "Warrior"
    assert isinstance(node.get("stats"), Node)
    assert node.get("stats").label == "stats"
    assert node.to_dict() == data


def test_split_single_document(warrior_text):
    records = split_documents(parse_string(warrior_text))
    assert len(records) == 1
    name, record = records[0]
    assert name == "Warrior"
    assert record.get("level") == 5


def test_split_multiple_documents(multi_class_text):
    records = split_documents(parse_string(multi_class_text))
    assert [name for name, _ in records] == ["Warrior", "Mage"]
    assert records[1][1].get("max-level") == 30


def test_split_empty_document():
    assert split_documents(parse_string("")) == []
