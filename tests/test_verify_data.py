import verify_data
from skillyaml.core import Node, parse_string


def test_verify_round_trip(fireball_text):
    assert verify_data.verify_round_trip("Fireball", parse_string(fireball_text))


def test_main(tmp_path, multi_class_text, fireball_text):
    (tmp_path / "classes").mkdir()
    (tmp_path / "skills").mkdir()
    (tmp_path / "classes" / "classes.yml").write_text(multi_class_text)
    (tmp_path / "skills" / "Fireball.yml").write_text(fireball_text)

    assert verify_data.main(tmp_path) == 0


def test_record_that_cannot_round_trip():
    # Booleans in a list are written as an empty list
    record = Node(label="Odd", entries={"flags": [True]})
    assert not verify_data.verify_round_trip("Odd", record)
