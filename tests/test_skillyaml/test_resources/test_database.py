import pytest
import json
import logging
from skillyaml.resources.database import Database

@pytest.fixture
def mock_db_path(tmp_path):
    # Setup mock directory structure in tmp_path
    schemas = tmp_path / "schemas"
    schemas.mkdir()
    (tmp_path / "classes").mkdir()
    (tmp_path / "skills").mkdir()

    # Create valid schema
    class_schema = {
        "type": "object",
        "required": ["prefix", "max-level"],
        "properties": {
            "prefix": {"type": "string"},
            "max-level": {"type": "integer"}
        }
    }
    with open(schemas / "class.schema.json", "w") as f:
        json.dump(class_schema, f)

    return tmp_path

def test_load_all(mock_db_path, multi_class_text):
    (mock_db_path / "classes" / "classes.yml").write_text(multi_class_text)

    db = Database(mock_db_path)
    db.load_all()

    assert set(db.classes) == {"Warrior", "Mage"}
    assert db.get_class("Mage").get("max-level") == 30
    assert db.get_class("Rogue") is None

def test_single_document_file(mock_db_path):
    (mock_db_path / "classes" / "Warrior.yml").write_text(
        "Warrior:\n  prefix: 'Warrior'\n  max-level: 40\n"
    )

    db = Database(mock_db_path)
    db.load_all()

    assert db.get_class("Warrior").get("prefix") == "Warrior"

def test_validation_error(mock_db_path, caplog):
    # Invalid class (max-level is a string)
    (mock_db_path / "classes" / "broken.yml").write_text(
        "Broken:\n  prefix: 'Broken'\n  max-level: 'high'\n"
    )

    db = Database(mock_db_path)
    with caplog.at_level(logging.ERROR):
        db.load_all()

    assert "Broken" not in db.classes # Should be skipped due to validation error
    assert "Validation error" in caplog.text

def test_missing_schema_loads_unvalidated(mock_db_path, fireball_text):
    # skills have no schema in the fixture
    (mock_db_path / "skills" / "Fireball.yaml").write_text(fireball_text)

    db = Database(mock_db_path)
    db.load_all()

    assert "Fireball" in db.skills
    assert db.get_skill("Fireball").get("tags") == ["fire", "aoe"]

def test_missing_directories(tmp_path, caplog):
    db = Database(tmp_path)
    with caplog.at_level(logging.WARNING):
        db.load_all()

    assert db.classes == {}
    assert db.skills == {}
    assert "not found" in caplog.text
